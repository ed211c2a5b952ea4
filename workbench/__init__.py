"""Assistant Workbench - send text and documents to preconfigured assistants.

Combines the Azure OpenAI Assistants API for the remote runs, NiceGUI for
the form, FastAPI for HTTP access and Pydantic for configuration and data
validation.

Components:
    - assistant: Configuration, Assistants API client and citation handling
    - parsing: Uploaded file to text extraction
    - workflow: Process/reset state machine around one exchange
    - api: HTTP endpoints
    - ui: The single-page form
    - models: Shared schemas
"""

__version__ = "0.1.0"
