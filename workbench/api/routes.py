"""Assistant catalog, file extraction and process endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from workbench.assistant.client import ConversationClient, get_conversation_client
from workbench.assistant.config import WorkbenchConfig, get_workbench_config
from workbench.models.schemas import (
    AssistantOption,
    ExtractResponse,
    ProcessRequest,
    ProcessResponse,
)
from workbench.parsing.extractor import MAX_FILE_SIZE, TextExtractor
from workbench.workflow.orchestrator import Workflow

logger = logging.getLogger(__name__)

router = APIRouter(tags=["assistant"])

ConfigDep = Annotated[WorkbenchConfig, Depends(get_workbench_config)]
ClientDep = Annotated[ConversationClient, Depends(get_conversation_client)]


async def _read_and_validate_size(file: UploadFile) -> bytes:
    """Read file content and validate size.

    Args:
        file: The uploaded file.

    Returns:
        File content as bytes.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()

    if len(content) > MAX_FILE_SIZE:
        size_mb = len(content) / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)",
        )

    return content


@router.get("/assistants", response_model=list[AssistantOption])
async def list_assistants(config: ConfigDep) -> list[AssistantOption]:
    """List the configured assistants."""
    return config.assistants


@router.post("/extract", response_model=ExtractResponse)
async def extract_file(file: UploadFile) -> ExtractResponse:
    """Extract text from an uploaded file.

    Returns the same text the form appends to its input buffer.

    Raises:
        400: Missing filename.
        413: File exceeds 10MB limit.
    """
    if not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )

    content = await _read_and_validate_size(file)
    text = TextExtractor().extract(file.filename, file.content_type, content)
    return ExtractResponse(filename=file.filename, text=text)


@router.post("/process", response_model=ProcessResponse)
async def process_text(
    request: ProcessRequest,
    config: ConfigDep,
    client: ClientDep,
) -> ProcessResponse:
    """Run the selected assistant on the given text.

    Remote failures are reported in the result text, not as HTTP errors.

    Raises:
        404: Unknown assistant id.
        422: Empty text.
    """
    if config.find_assistant(request.assistant_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown assistant: {request.assistant_id}",
        )

    workflow = Workflow(config, client)
    workflow.select_assistant(request.assistant_id)
    workflow.input_buffer = request.text
    await workflow.process()

    logger.info(f"Processed request with {request.assistant_id}: {workflow.state.value}")
    return ProcessResponse(state=workflow.state, result=workflow.result)
