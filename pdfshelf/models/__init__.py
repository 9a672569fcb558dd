"""Pydantic models for the storage endpoint wire format.

Models:
    - FileRecord: One stored document in the file list
    - FileListResponse: List endpoint response
    - UploadPayload: Upload request body
    - UploadResponse: Upload endpoint response
"""

from pdfshelf.models.schemas import (
    FileListResponse,
    FileRecord,
    UploadPayload,
    UploadResponse,
)

__all__ = ["FileListResponse", "FileRecord", "UploadPayload", "UploadResponse"]
