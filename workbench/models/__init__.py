"""Pydantic models shared by the workflow, the API and the form.

Models:
    - AssistantOption: Entry of the assistant catalog
    - Run / RunStatus: Remote run and its lifecycle values
    - Citation / AssistantReply / ResolvedReply: Reply post-processing stages
    - WorkflowState: Orchestrator state machine values
    - ProcessRequest / ProcessResponse / ExtractResponse: HTTP payloads
"""

from workbench.models.schemas import (
    AssistantOption,
    AssistantReply,
    Citation,
    ExtractResponse,
    ProcessRequest,
    ProcessResponse,
    ResolvedReply,
    Run,
    RunStatus,
    WorkflowState,
)

__all__ = [
    "AssistantOption",
    "AssistantReply",
    "Citation",
    "ExtractResponse",
    "ProcessRequest",
    "ProcessResponse",
    "ResolvedReply",
    "Run",
    "RunStatus",
    "WorkflowState",
]
