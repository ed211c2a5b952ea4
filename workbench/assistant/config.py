"""Workbench configuration with environment variable loading.

Pydantic-based configuration for the Azure OpenAI Assistants connection
and the catalog of assistants offered in the form.
"""

import json
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from workbench.models.schemas import AssistantOption

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_VERSION = "2024-05-01-preview"
DEFAULT_POLL_INTERVAL = 8.0

DEFAULT_ASSISTANTS: tuple[AssistantOption, ...] = (
    AssistantOption(
        id="asst_nXkuFUI47tFH0EsheqGDgLCQ",
        name="Media Logs",
        description="Drafting a first response to the media questions from the media logs",
    ),
    AssistantOption(
        id="asst_QIkAnnTvWihDgbD4o6UrluWm",
        name="Meeting Minutes Taking",
        description="Summarise meeting minutes from a file or text input",
    ),
    AssistantOption(
        id="asst_xxx789",
        name="TEST-2-DON'T USE",
        description="Placeholder for other usecase",
    ),
)


def load_assistants(path: str | Path | None = None) -> list[AssistantOption]:
    """Load the assistant catalog.

    Args:
        path: JSON file holding a list of {id, name, description} objects.
              Falls back to ASSISTANTS_FILE, then to the built-in catalog.

    Returns:
        The assistant options in file order.
    """
    path = path or os.getenv("ASSISTANTS_FILE")
    if not path:
        return list(DEFAULT_ASSISTANTS)

    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return [AssistantOption.model_validate(item) for item in raw]


class WorkbenchConfig(BaseModel):
    """Configuration for the assistant workbench.

    Attributes:
        endpoint: Azure OpenAI resource endpoint.
        api_key: API key for the resource.
        api_version: Versioned API surface exposing the Assistants beta.
        poll_interval: Seconds between run status polls.
        assistants: Catalog of assistants offered in the selector.
    """

    # Values read from the environment go through the same validators
    model_config = ConfigDict(validate_default=True)

    endpoint: str = Field(
        default_factory=lambda: os.getenv("AZURE_OPENAI_ENDPOINT", ""),
        description="Azure OpenAI endpoint URL",
    )
    api_key: str = Field(
        default_factory=lambda: os.getenv("AZURE_OPENAI_API_KEY", ""),
        description="API key for the Azure OpenAI resource",
    )
    api_version: str = Field(
        default_factory=lambda: os.getenv("AZURE_OPENAI_API_VERSION", DEFAULT_API_VERSION),
        description="Assistants API version",
    )
    poll_interval: float = Field(
        default_factory=lambda: float(
            os.getenv("ASSISTANT_POLL_INTERVAL", str(DEFAULT_POLL_INTERVAL))
        ),
        ge=0.0,
        description="Seconds to wait between run status checks",
    )
    assistants: list[AssistantOption] = Field(
        default_factory=load_assistants,
        description="Assistants offered in the selector",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("API key required. Set AZURE_OPENAI_API_KEY in .env")
        return v.strip()

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Validate that the endpoint is provided."""
        if not v or not v.strip():
            raise ValueError("Endpoint required. Set AZURE_OPENAI_ENDPOINT in .env")
        return v.strip().rstrip("/")

    @field_validator("assistants")
    @classmethod
    def validate_assistants(cls, v: list[AssistantOption]) -> list[AssistantOption]:
        """Require a non-empty catalog without duplicate identifiers."""
        if not v:
            raise ValueError("At least one assistant must be configured")
        ids = [option.id for option in v]
        if len(ids) != len(set(ids)):
            raise ValueError("Assistant identifiers must be unique")
        return v

    def find_assistant(self, assistant_id: str) -> AssistantOption | None:
        """Return the catalog entry with the given id, if any."""
        return next((a for a in self.assistants if a.id == assistant_id), None)


def get_workbench_config() -> WorkbenchConfig:
    """Create workbench configuration from environment.

    Returns:
        Configured WorkbenchConfig instance.

    Raises:
        ValueError: If the endpoint or API key is missing.
    """
    return WorkbenchConfig()
