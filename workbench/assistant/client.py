"""Thin async client over the Azure OpenAI Assistants API.

Each method performs exactly one remote round trip, except wait_for_run,
which polls at a fixed interval until the run leaves the pending states.
Errors raised by the SDK are not caught here; the workflow decides what
the user sees.
"""

import asyncio
import logging
from typing import Any

from openai import AsyncAzureOpenAI

from workbench.assistant.config import WorkbenchConfig, get_workbench_config
from workbench.models.schemas import AssistantReply, Citation, Run

logger = logging.getLogger(__name__)


def _parse_reply(message: Any) -> AssistantReply:
    """Read the first content block of an assistant message."""
    block = message.content[0]
    block_text = getattr(block, "text", None)
    if block_text is None:
        return AssistantReply()

    citations: list[Citation] = []
    for ann in getattr(block_text, "annotations", None) or []:
        fc = getattr(ann, "file_citation", None)
        if not fc:
            continue
        file_id = getattr(fc, "file_id", None)
        if not file_id:
            continue
        citations.append(Citation(file_id=file_id, marker=getattr(ann, "text", None)))

    return AssistantReply(text=getattr(block_text, "value", None) or None, citations=citations)


class ConversationClient:
    """Client for one create/post/run/poll/list exchange with an assistant."""

    def __init__(
        self,
        config: WorkbenchConfig | None = None,
        sdk_client: AsyncAzureOpenAI | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional workbench configuration.
                    Loads from environment if not provided.
            sdk_client: Optional preconfigured SDK client.
        """
        self._config = config or get_workbench_config()
        self._client = sdk_client or AsyncAzureOpenAI(
            azure_endpoint=self._config.endpoint,
            api_key=self._config.api_key,
            api_version=self._config.api_version,
        )

    @property
    def poll_interval(self) -> float:
        return self._config.poll_interval

    async def create_conversation(self) -> str:
        thread = await self._client.beta.threads.create()
        logger.info(f"Created thread {thread.id}")
        return thread.id

    async def post_message(self, conversation_id: str, text: str) -> None:
        await self._client.beta.threads.messages.create(
            thread_id=conversation_id,
            role="user",
            content=text,
        )

    async def start_run(self, conversation_id: str, assistant_id: str) -> Run:
        response = await self._client.beta.threads.runs.create(
            thread_id=conversation_id,
            assistant_id=assistant_id,
        )
        logger.info(f"Started run {response.id} on {conversation_id} with {assistant_id}")
        return Run(conversation_id=conversation_id, run_id=response.id, status=response.status)

    async def retrieve_run(self, conversation_id: str, run_id: str) -> Run:
        response = await self._client.beta.threads.runs.retrieve(
            run_id=run_id,
            thread_id=conversation_id,
        )
        return Run(conversation_id=conversation_id, run_id=run_id, status=response.status)

    async def wait_for_run(self, run: Run) -> Run:
        """Poll a run until it is no longer queued or in progress.

        There is no poll limit and no backoff: the loop sleeps for the
        configured interval and fetches the status once per iteration.

        Args:
            run: The run returned by start_run.

        Returns:
            The run with its terminal status.
        """
        while run.is_pending:
            await asyncio.sleep(self.poll_interval)
            run = await self.retrieve_run(run.conversation_id, run.run_id)
            logger.debug(f"Run {run.run_id} status: {run.status}")

        logger.info(f"Run {run.run_id} ended with status {run.status}")
        return run

    async def latest_reply(self, conversation_id: str) -> AssistantReply | None:
        """Fetch the most recent assistant message with content.

        Args:
            conversation_id: Thread to read.

        Returns:
            The parsed reply, or None if the assistant has not answered.
        """
        messages = await self._client.beta.threads.messages.list(
            thread_id=conversation_id,
            order="desc",
        )
        for message in messages.data:
            if message.role == "assistant" and message.content:
                return _parse_reply(message)
        return None

    async def file_name(self, file_id: str) -> str:
        info = await self._client.files.retrieve(file_id)
        return info.filename


# Module-level singleton instance
_conversation_client: ConversationClient | None = None


def get_conversation_client() -> ConversationClient:
    """Get or create the global conversation client.

    Returns:
        The ConversationClient instance.
    """
    global _conversation_client
    if _conversation_client is None:
        _conversation_client = ConversationClient()
    return _conversation_client
