"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - config: WorkbenchConfig with test credentials and no poll delay
    - sdk: Mocked Assistants SDK answering one completed exchange
    - conversation_client: ConversationClient wired to the mocked SDK
    - async_client: HTTPX client for API testing with dependencies overridden

The remote service is never contacted: every SDK call is an AsyncMock.
"""

from collections.abc import AsyncGenerator
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from workbench.api import app
from workbench.assistant.client import ConversationClient, get_conversation_client
from workbench.assistant.config import WorkbenchConfig, get_workbench_config
from workbench.models.schemas import AssistantOption

MEETING_MINUTES_ID = "asst_minutes"


def make_message(
    text: str | None,
    citations: list[tuple[str, str | None]] | None = None,
    role: str = "assistant",
) -> SimpleNamespace:
    """Build an SDK-shaped thread message.

    Args:
        text: Text value of the first content block, None for a non-text block.
        citations: (file_id, marker) pairs attached as file_citation annotations.
        role: Message author role.
    """
    if text is None:
        block = SimpleNamespace(type="image_file", image_file=SimpleNamespace(file_id="img"))
        return SimpleNamespace(role=role, content=[block])

    annotations = [
        SimpleNamespace(
            type="file_citation",
            text=marker,
            file_citation=SimpleNamespace(file_id=file_id),
        )
        for file_id, marker in citations or []
    ]
    block = SimpleNamespace(
        type="text", text=SimpleNamespace(value=text, annotations=annotations)
    )
    return SimpleNamespace(role=role, content=[block])


def make_sdk(
    statuses: list[str] | None = None,
    messages: list[SimpleNamespace] | None = None,
    filenames: dict[str, str] | None = None,
) -> MagicMock:
    """Build a mocked AsyncAzureOpenAI client.

    Args:
        statuses: Status of the created run followed by each polled status.
        messages: Thread messages, newest first.
        filenames: file_id to filename map; unknown ids raise on lookup.
    """
    statuses = statuses or ["queued", "in_progress", "completed"]
    filenames = filenames or {}

    async def retrieve_file(file_id: str) -> SimpleNamespace:
        if file_id not in filenames:
            raise RuntimeError(f"No such file: {file_id}")
        return SimpleNamespace(id=file_id, filename=filenames[file_id])

    sdk = MagicMock()
    sdk.beta.threads.create = AsyncMock(return_value=SimpleNamespace(id="thread-1"))
    sdk.beta.threads.messages.create = AsyncMock(return_value=SimpleNamespace(id="msg-1"))
    sdk.beta.threads.runs.create = AsyncMock(
        return_value=SimpleNamespace(id="run-1", status=statuses[0])
    )
    sdk.beta.threads.runs.retrieve = AsyncMock(
        side_effect=[SimpleNamespace(id="run-1", status=s) for s in statuses[1:]]
    )
    sdk.beta.threads.messages.list = AsyncMock(
        return_value=SimpleNamespace(data=messages or [])
    )
    sdk.files.retrieve = AsyncMock(side_effect=retrieve_file)
    return sdk


@pytest.fixture
def assistants() -> list[AssistantOption]:
    """Return a small assistant catalog."""
    return [
        AssistantOption(id="asst_media", name="Media Logs", description="Draft media answers"),
        AssistantOption(
            id=MEETING_MINUTES_ID,
            name="Meeting Minutes Taking",
            description="Summarise meeting minutes from a file or text input",
        ),
    ]


@pytest.fixture
def config(assistants: list[AssistantOption]) -> WorkbenchConfig:
    """Return config with test credentials and no delay between polls."""
    return WorkbenchConfig(
        endpoint="https://test.openai.azure.com",
        api_key="test-key",
        api_version="2024-05-01-preview",
        poll_interval=0,
        assistants=assistants,
    )


@pytest.fixture
def sdk() -> MagicMock:
    """Return an SDK mock for a completed run with one cited file."""
    return make_sdk(
        messages=[
            make_message("Key points 【3:2†source】", [("file-1", "【3:2†source】")]),
            make_message("Summarize this", role="user"),
        ],
        filenames={"file-1": "minutes.docx"},
    )


@pytest.fixture
def conversation_client(config: WorkbenchConfig, sdk: MagicMock) -> ConversationClient:
    """Return a ConversationClient wired to the SDK mock."""
    return ConversationClient(config=config, sdk_client=sdk)


@pytest.fixture
async def async_client(
    config: WorkbenchConfig, conversation_client: ConversationClient
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    app.dependency_overrides[get_workbench_config] = lambda: config
    app.dependency_overrides[get_conversation_client] = lambda: conversation_client

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
