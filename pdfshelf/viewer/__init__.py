"""Document viewer: open a stored PDF and page through it.

Responsibilities:
    - Download and decode documents with PyMuPDF
    - Render one page at a time, coalescing rapid page requests
    - Previous/next navigation clamped to the document
"""

from pdfshelf.viewer.controller import DocumentViewer
from pdfshelf.viewer.document import DocumentHandle, PdfDocument, open_document
from pdfshelf.viewer.navigation import Navigator
from pdfshelf.viewer.render_loop import RenderLoop
from pdfshelf.viewer.state import RenderState, ViewerState

__all__ = [
    "DocumentHandle",
    "DocumentViewer",
    "Navigator",
    "PdfDocument",
    "RenderLoop",
    "RenderState",
    "ViewerState",
    "open_document",
]
