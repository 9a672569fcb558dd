"""Shelf workflows: uploading documents and listing what is stored.

Each workflow owns a small state object that the UI binds to, so the
logic runs and tests without a browser.
"""

from pdfshelf.library.listing import FileEntry, FileList
from pdfshelf.library.upload import UploadForm, UploadService

__all__ = ["FileEntry", "FileList", "UploadForm", "UploadService"]
