"""Main application entry point.

Runs FastAPI with the NiceGUI form mounted on the same server.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI handles API routes, NiceGUI handles the form.
    Both accessible on PORT (default 8000).
    """
    import uvicorn
    from nicegui import ui

    from workbench.api.app import create_app
    from workbench.assistant.config import get_workbench_config
    from workbench.ui.form_page import form_page  # noqa: F401 - Registers the page

    # Fail fast on a missing endpoint or key
    config = get_workbench_config()
    logger.info(f"Loaded {len(config.assistants)} assistants for {config.endpoint}")

    app = create_app()

    ui.run_with(
        app,
        title="Assistant Workbench",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "assistant-workbench-secret"),
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting server on http://localhost:{port}")
    logger.info(f"API docs available at http://localhost:{port}/docs")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
