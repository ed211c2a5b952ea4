"""Citation post-processing for assistant replies.

Markers such as 【3:2†source】 are stripped from the reply text and the
cited files are listed by name under a trailing "Sources:" block.
"""

import logging
import re
from collections.abc import Awaitable, Callable

from workbench.models.schemas import AssistantReply, ResolvedReply

logger = logging.getLogger(__name__)

CITATION_MARKER = re.compile(r"【\d+:\d+†source】")
UNKNOWN_FILE = "Unknown File"
NO_RESPONSE_CONTENT = "No response content"

FileNameLookup = Callable[[str], Awaitable[str]]


def strip_markers(text: str, markers: list[str] | None = None) -> str:
    """Remove citation markers from reply text.

    Args:
        text: Raw reply text.
        markers: Literal marker strings reported by annotations.

    Returns:
        Text with pattern-matched and literal markers removed.
    """
    for marker in markers or []:
        if marker:
            text = text.replace(marker, "")
    return CITATION_MARKER.sub("", text)


class CitationResolver:
    """Resolves cited file ids to filenames through a metadata lookup."""

    def __init__(self, lookup: FileNameLookup) -> None:
        self._lookup = lookup

    async def _resolve_name(self, file_id: str) -> str:
        try:
            return await self._lookup(file_id)
        except Exception as e:
            logger.warning(f"Could not retrieve file info for ID {file_id}: {e}")
            return UNKNOWN_FILE

    async def resolve(self, reply: AssistantReply) -> ResolvedReply:
        """Strip markers and collect source filenames.

        Each distinct file id is looked up once. A failed lookup contributes
        the Unknown File placeholder instead of aborting the resolution.

        Args:
            reply: Parsed assistant reply.

        Returns:
            Clean text plus deduplicated filenames in first-seen order.
        """
        markers = [c.marker for c in reply.citations if c.marker]
        text = strip_markers(reply.text or NO_RESPONSE_CONTENT, markers)

        file_ids = list(dict.fromkeys(c.file_id for c in reply.citations))
        names = [await self._resolve_name(file_id) for file_id in file_ids]

        return ResolvedReply(text=text, sources=list(dict.fromkeys(names)))
