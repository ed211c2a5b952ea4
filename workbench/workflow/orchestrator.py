"""Process workflow for the assistant form.

Sequences the remote exchange as a pipeline of typed stages:

    create thread -> post message -> start run -> poll -> latest reply -> resolve

and keeps the form state around it (input buffer, result, busy flag,
selected assistant, attached file). One Workflow instance backs one form;
at most one run is in flight per instance.
"""

import logging

from workbench.assistant.citations import CitationResolver
from workbench.assistant.client import ConversationClient
from workbench.assistant.config import WorkbenchConfig
from workbench.models.schemas import AssistantOption, WorkflowState
from workbench.parsing.extractor import TextExtractor

logger = logging.getLogger(__name__)

PROCESSING_PLACEHOLDER = "Processing..."
NO_ASSISTANT_MESSAGE = "No response content available"
INPUT_SEPARATOR = "\n\n"


async def run_exchange(
    client: ConversationClient,
    resolver: CitationResolver,
    assistant_id: str,
    text: str,
) -> str:
    """Run one request/poll/response exchange and build the result text.

    Args:
        client: Conversation client for the remote calls.
        resolver: Resolver for citation markers and source names.
        assistant_id: Assistant to run against the new thread.
        text: User message content.

    Returns:
        The resolved reply, or a status line when the run did not complete.

    Raises:
        Exception: Any SDK error from the remote calls, unchanged.
    """
    conversation_id = await client.create_conversation()
    await client.post_message(conversation_id, text)

    run = await client.start_run(conversation_id, assistant_id)
    run = await client.wait_for_run(run)
    if not run.is_completed:
        return f"Run ended with status: {run.status}"

    reply = await client.latest_reply(conversation_id)
    if reply is None:
        return NO_ASSISTANT_MESSAGE

    resolved = await resolver.resolve(reply)
    return resolved.render()


class Workflow:
    """State of one assistant form and its process/reset operations."""

    def __init__(
        self,
        config: WorkbenchConfig,
        client: ConversationClient,
        extractor: TextExtractor | None = None,
        resolver: CitationResolver | None = None,
    ) -> None:
        self._config = config
        self._client = client
        self._extractor = extractor or TextExtractor()
        self._resolver = resolver or CitationResolver(client.file_name)

        self.input_buffer: str = ""
        self.result: str = ""
        self.selected_file: str | None = None
        self.selected_assistant: AssistantOption = config.assistants[0]
        self.state: WorkflowState = WorkflowState.IDLE
        self.is_busy: bool = False

    @property
    def options(self) -> list[AssistantOption]:
        return self._config.assistants

    @property
    def can_process(self) -> bool:
        return bool(self.input_buffer) and not self.is_busy

    def select_assistant(self, assistant_id: str) -> AssistantOption:
        """Select the assistant for the next process call.

        Unknown identifiers fall back to the first catalog entry.
        """
        self.selected_assistant = (
            self._config.find_assistant(assistant_id) or self._config.assistants[0]
        )
        return self.selected_assistant

    def attach_file(self, filename: str, content_type: str | None, data: bytes) -> None:
        """Append the text of an uploaded file to the input buffer."""
        self.selected_file = filename
        text = self._extractor.extract(filename, content_type, data)
        self.input_buffer = f"{self.input_buffer}{INPUT_SEPARATOR}{text}"
        logger.info(f"Attached {filename} ({len(text)} characters)")

    async def process(self) -> bool:
        """Send the input buffer to the selected assistant.

        A no-op while the buffer is empty or a run is already in flight.
        Errors from any remote call end the workflow in the failed state
        with an "Error: ..." result.

        Returns:
            True if a run was attempted, False if the call was rejected.
        """
        if not self.can_process:
            return False

        self.is_busy = True
        self.state = WorkflowState.PROCESSING
        self.result = PROCESSING_PLACEHOLDER
        assistant = self.selected_assistant
        try:
            self.result = await run_exchange(
                self._client, self._resolver, assistant.id, self.input_buffer
            )
            self.state = WorkflowState.COMPLETED
        except Exception as e:
            logger.exception(f"Error during process with {assistant.name}")
            self.result = f"Error: {e}"
            self.state = WorkflowState.FAILED
        finally:
            self.is_busy = False
        return True

    def reset(self) -> None:
        self.input_buffer = ""
        self.result = ""
        self.selected_file = None
        self.state = WorkflowState.IDLE
