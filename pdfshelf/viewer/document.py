"""Opening downloaded documents and rasterising single pages with PyMuPDF."""

import asyncio
import logging
from typing import Protocol

import pymupdf

from pdfshelf.errors import OpenError, RenderError

logger = logging.getLogger(__name__)

DEFAULT_SCALE = 1.5


class DocumentHandle(Protocol):
    """An open document that can render one page at a time."""

    @property
    def page_count(self) -> int: ...

    async def render_page(self, number: int) -> bytes: ...

    def close(self) -> None: ...


class PdfDocument:
    """A PyMuPDF document rendering 1-based pages to PNG bytes."""

    def __init__(self, doc: pymupdf.Document, scale: float = DEFAULT_SCALE) -> None:
        self._doc = doc
        self._scale = scale

    @property
    def page_count(self) -> int:
        return self._doc.page_count

    def _render(self, number: int) -> bytes:
        page = self._doc.load_page(number - 1)
        pixmap = page.get_pixmap(matrix=pymupdf.Matrix(self._scale, self._scale))
        return pixmap.tobytes("png")

    async def render_page(self, number: int) -> bytes:
        """Rasterise page ``number`` (1-based) off the event loop.

        Raises:
            RenderError: If the page is out of range or fails to draw.
        """
        if not 1 <= number <= self.page_count:
            raise RenderError(f"Page {number} out of range 1-{self.page_count}")
        try:
            return await asyncio.to_thread(self._render, number)
        except Exception as e:
            raise RenderError(f"Failed to render page {number}: {e}") from e

    def close(self) -> None:
        self._doc.close()


def open_pdf_bytes(data: bytes, scale: float = DEFAULT_SCALE) -> PdfDocument:
    """Decode PDF bytes into a renderable document.

    Raises:
        OpenError: If the bytes are not a readable, unlocked PDF with pages.
    """
    if not data:
        raise OpenError("Empty document")

    try:
        doc = pymupdf.open(stream=data, filetype="pdf")
    except Exception as e:
        raise OpenError(f"Corrupt or invalid PDF: {e}") from e

    if doc.needs_pass:
        doc.close()
        raise OpenError("Document is password protected")
    if doc.page_count == 0:
        doc.close()
        raise OpenError("PDF contains no pages")

    return PdfDocument(doc, scale)


async def open_document(data: bytes, scale: float = DEFAULT_SCALE) -> PdfDocument:
    """Decode PDF bytes in a worker thread."""
    return await asyncio.to_thread(open_pdf_bytes, data, scale)
