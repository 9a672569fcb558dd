"""FastAPI host for the shelf page.

Endpoints:
    - GET /health: Service health status
    - GET /: NiceGUI shelf page (mounted by main.py)
"""

from pdfshelf.api.app import app, create_app

__all__ = ["app", "create_app"]
