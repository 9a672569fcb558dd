"""PDF checks run on a selected file before upload.

Responsibilities:
    - Header and size validation
    - Page count via pypdf
"""

from pdfshelf.parsing.pdf_parser import PDFInfo, PDFParseError, inspect_pdf

__all__ = ["PDFInfo", "PDFParseError", "inspect_pdf"]
