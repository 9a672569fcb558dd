"""Main application entry point.

Runs FastAPI (port 8000) with the NiceGUI shelf page mounted on it.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Run FastAPI with NiceGUI mounted on the same server."""
    import uvicorn
    from nicegui import ui

    from pdfshelf.api.app import create_app
    from pdfshelf.ui.shelf_page import shelf_page  # noqa: F401 - Registers the page

    app = create_app()

    ui.run_with(
        app,
        title="PDF Shelf",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "pdfshelf-secret"),
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting PDF Shelf on http://localhost:{port}")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
