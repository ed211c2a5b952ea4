"""FastAPI endpoints for the assistant workbench.

Endpoints:
    - GET /health: Service health status
    - GET /assistants: Configured assistant catalog
    - POST /extract: Text extraction for an uploaded file
    - POST /process: One assistant run on the given text
"""

from workbench.api.app import app, create_app

__all__ = ["app", "create_app"]
