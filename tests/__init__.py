"""Test package for PDF Shelf.

Structure:
    - unit/: Individual function and class tests
    - integration/: Workflows against the in-memory storage endpoint

The storage endpoint is faked with httpx.MockTransport; PDFs are generated
with PyMuPDF. Leverages pytest with pytest-check for soft assertions.
"""
