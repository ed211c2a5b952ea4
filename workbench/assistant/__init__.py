"""Remote assistant access.

Responsibilities:
    - Configuration of the Azure OpenAI connection and assistant catalog
    - Thread, message, run and file calls against the Assistants API
    - Citation marker cleanup and source filename resolution

Keeps the SDK behind a small surface so the workflow can be tested
without network access.
"""

from workbench.assistant.citations import CitationResolver
from workbench.assistant.client import ConversationClient, get_conversation_client
from workbench.assistant.config import WorkbenchConfig, get_workbench_config

__all__ = [
    "CitationResolver",
    "ConversationClient",
    "WorkbenchConfig",
    "get_conversation_client",
    "get_workbench_config",
]
