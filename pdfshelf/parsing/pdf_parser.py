"""PDF checks using pypdf.

Validates a selected file before it is uploaded and reports its page
count.
"""

import io

from pydantic import BaseModel, Field
from pypdf import PdfReader
from pypdf.errors import PdfReadError

# Constants
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PDF_MAGIC_BYTES = b"%PDF"


class PDFInfo(BaseModel):
    """Summary of a checked PDF file.

    Attributes:
        pages: Total number of pages in the document.
    """

    pages: int = Field(ge=1)


class PDFParseError(Exception):
    """Raised when a file is not an acceptable PDF."""

    pass


def validate_pdf_bytes(file_content: bytes, max_size: int = MAX_FILE_SIZE) -> None:
    """Validate PDF file content before it is read.

    Args:
        file_content: Raw bytes of the PDF file.
        max_size: Largest accepted size in bytes.

    Raises:
        PDFParseError: If validation fails.
    """
    if not file_content:
        raise PDFParseError("Empty file provided")

    if len(file_content) > max_size:
        size_mb = len(file_content) / (1024 * 1024)
        limit_mb = max_size / (1024 * 1024)
        raise PDFParseError(
            f"File size ({size_mb:.1f}MB) exceeds maximum allowed ({limit_mb:.0f}MB)"
        )

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise PDFParseError("Invalid PDF: file does not start with PDF header")


def inspect_pdf(file_content: bytes, max_size: int = MAX_FILE_SIZE) -> PDFInfo:
    """Check that a file is a readable PDF and summarise it.

    Args:
        file_content: Raw bytes of the PDF file.
        max_size: Largest accepted size in bytes.

    Returns:
        PDFInfo with the page count.

    Raises:
        PDFParseError: If the file is empty, too large, not a PDF, corrupt,
            or has no pages.
    """
    validate_pdf_bytes(file_content, max_size)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        pages = len(reader.pages)
    except PdfReadError as e:
        raise PDFParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise PDFParseError(f"Failed to read PDF: {e}") from e

    if pages == 0:
        raise PDFParseError("PDF contains no pages")

    return PDFInfo(pages=pages)
