"""Remote storage access.

Responsibilities:
    - Base64 encoding of selected files
    - File list and upload round-trips
    - Raw document downloads
"""

from pdfshelf.storage.client import StorageClient
from pdfshelf.storage.encoder import SelectedFile, encode_content, read_file

__all__ = ["SelectedFile", "StorageClient", "encode_content", "read_file"]
