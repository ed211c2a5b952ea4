from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AssistantOption(BaseModel):
    """A preconfigured remote assistant the user can pick.

    Attributes:
        id: Opaque assistant identifier on the remote service.
        name: Short label shown in the selector.
        description: Prompt shown as the page heading.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    description: str


class RunStatus(str, Enum):
    """Run status values the workflow acts on.

    Any other status reported by the service is terminal and kept verbatim.
    """

    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


PENDING_STATUSES = frozenset({RunStatus.QUEUED.value, RunStatus.IN_PROGRESS.value})


class Run(BaseModel):
    """One remote execution of an assistant against a conversation.

    Attributes:
        conversation_id: Thread the run belongs to.
        run_id: Remote run identifier.
        status: Literal status string reported by the service.
    """

    conversation_id: str
    run_id: str
    status: str

    @property
    def is_pending(self) -> bool:
        return self.status in PENDING_STATUSES

    @property
    def is_completed(self) -> bool:
        return self.status == RunStatus.COMPLETED.value


class Citation(BaseModel):
    """A file citation attached to the assistant's reply.

    Attributes:
        file_id: Remote file identifier.
        marker: Literal marker text inside the reply, when the service sends it.
    """

    file_id: str
    marker: str | None = None


class AssistantReply(BaseModel):
    """Text and citations of the latest assistant message."""

    text: str | None = None
    citations: list[Citation] = Field(default_factory=list)


class ResolvedReply(BaseModel):
    """Reply text with markers stripped and the cited filenames.

    Attributes:
        text: Display text without citation markers.
        sources: Deduplicated filenames in first-seen order.
    """

    text: str
    sources: list[str] = Field(default_factory=list)

    def render(self) -> str:
        if not self.sources:
            return self.text
        return self.text + "\n\nSources:\n- " + "\n- ".join(self.sources)


class WorkflowState(str, Enum):
    """States of the process workflow."""

    IDLE = "idle"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class ProcessRequest(BaseModel):
    """Request payload for the process endpoint.

    Attributes:
        assistant_id: Identifier of a configured assistant.
        text: Input text to send as the user message.
    """

    assistant_id: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)

    @field_validator("text", mode="before")
    @classmethod
    def reject_blank_text(cls, v: str) -> str:
        """Turn whitespace-only input into an empty string so it fails min_length."""
        if isinstance(v, str) and not v.strip():
            return ""
        return v


class ProcessResponse(BaseModel):
    """Outcome of one process call.

    Attributes:
        state: Terminal workflow state (completed or failed).
        result: Text shown in the result area.
    """

    state: WorkflowState
    result: str


class ExtractResponse(BaseModel):
    """Text extracted from an uploaded file."""

    filename: str
    text: str
