"""Upload workflow: validate, encode, send, report."""

import logging
from collections.abc import Awaitable, Callable

from pdfshelf.errors import (
    FormValidationError,
    ReadError,
    ServiceError,
    TransportError,
)
from pdfshelf.models.schemas import UploadPayload
from pdfshelf.parsing.pdf_parser import PDFParseError, inspect_pdf
from pdfshelf.storage.client import StorageClient
from pdfshelf.storage.encoder import SelectedFile, encode_content, read_file

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Please fill out all fields."
UPLOADING_MESSAGE = "Uploading, please wait..."
READ_FAILED_MESSAGE = "Failed to read the file."


class UploadService:
    """Sends one selected file to the storage endpoint."""

    def __init__(self, client: StorageClient) -> None:
        self._client = client

    async def upload(self, name: str, file: SelectedFile | None) -> str:
        """Upload a file on behalf of ``name``.

        Args:
            name: Uploader name; must not be blank.
            file: The selected file.

        Returns:
            The stored file name reported by the endpoint.

        Raises:
            FormValidationError: Missing fields or not an acceptable PDF.
            ReadError: The file could not be read.
            ServiceError: The endpoint reported a failure.
            TransportError: The endpoint could not be reached.
        """
        if not name or not name.strip() or file is None:
            raise FormValidationError(MISSING_FIELDS_MESSAGE)

        content = await read_file(file)

        try:
            info = inspect_pdf(content, self._client.config.max_upload_bytes)
        except PDFParseError as e:
            raise FormValidationError(str(e)) from e

        payload = UploadPayload(
            uploader_name=name.strip(),
            original_file_name=file.name,
            file_content=encode_content(content),
        )
        logger.info(f"Uploading {file.name} ({info.pages} pages) for {payload.uploader_name}")
        stored_name = await self._client.upload(payload)
        logger.info(f"Upload stored as {stored_name}")
        return stored_name


class UploadForm:
    """State and submit action behind the upload form.

    The UI binds to ``uploader_name``, ``status_message`` and
    ``submit_enabled``; ``file`` is set from the file picker.
    """

    def __init__(
        self,
        service: UploadService,
        on_uploaded: Callable[[], Awaitable[None]] | None = None,
    ) -> None:
        self._service = service
        self._on_uploaded = on_uploaded
        self.uploader_name: str = ""
        self.file: SelectedFile | None = None
        self.status_message: str = ""
        self.submit_enabled: bool = True

    def select_file(self, file: SelectedFile | None) -> None:
        self.file = file

    def reset(self) -> None:
        self.uploader_name = ""
        self.file = None

    async def submit(self) -> str | None:
        """Run one upload and report the outcome in ``status_message``.

        Returns:
            The stored file name on success, otherwise None, including when
            another submit is already running.
        """
        if not self.submit_enabled:
            return None
        if not self.uploader_name.strip() or self.file is None:
            self.status_message = MISSING_FIELDS_MESSAGE
            return None

        self.submit_enabled = False
        self.status_message = UPLOADING_MESSAGE
        try:
            stored_name = await self._service.upload(self.uploader_name, self.file)
        except ReadError:
            self.status_message = READ_FAILED_MESSAGE
            return None
        except (FormValidationError, ServiceError, TransportError) as e:
            logger.error(f"Upload error: {e}")
            self.status_message = f"Upload failed: {e}"
            return None
        finally:
            self.submit_enabled = True

        self.status_message = f"Upload successful: {stored_name}"
        self.reset()
        if self._on_uploaded is not None:
            await self._on_uploaded()
        return stored_name
