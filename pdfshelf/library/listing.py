"""File list workflow: fetch records and turn them into clickable entries."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime

from pdfshelf.errors import ServiceError, TransportError
from pdfshelf.models.schemas import FileRecord
from pdfshelf.storage.client import StorageClient

logger = logging.getLogger(__name__)

EMPTY_LIST_MESSAGE = "No documents have been uploaded yet."
LIST_ERROR_MESSAGE = "Error loading file list."
CONNECTION_ERROR_MESSAGE = "Could not connect to the server."
INVALID_DATE = "Invalid Date"

OpenCallback = Callable[[str, str], Awaitable[None]]


def format_upload_date(timestamp: str) -> str:
    """Format an ISO timestamp as a locale date, or ``Invalid Date``."""
    try:
        return datetime.fromisoformat(timestamp).astimezone().strftime("%x")
    except (TypeError, ValueError):
        return INVALID_DATE


@dataclass(frozen=True)
class FileEntry:
    """One clickable row of the file list."""

    title: str
    subtitle: str
    remote_id: str

    @classmethod
    def from_record(cls, record: FileRecord) -> "FileEntry":
        return cls(
            title=record.stored_file_name,
            subtitle=(
                f"Uploaded by: {record.uploader_name} "
                f"on {format_upload_date(record.timestamp)}"
            ),
            remote_id=record.drive_file_id,
        )


class FileList:
    """State behind the file list panel.

    Exactly one of ``entries`` and ``placeholder`` is meaningful after a
    refresh: entries when the endpoint returned documents, otherwise a
    placeholder message.
    """

    def __init__(self, client: StorageClient, on_open: OpenCallback | None = None) -> None:
        self._client = client
        self._on_open = on_open
        self.entries: list[FileEntry] = []
        self.placeholder: str | None = None

    async def refresh(self) -> None:
        """Reload the list from the storage endpoint."""
        try:
            records = await self._client.list_files()
        except ServiceError as e:
            logger.error(f"Error loading file list: {e}")
            self._show_placeholder(LIST_ERROR_MESSAGE)
            return
        except TransportError as e:
            logger.error(f"Error fetching file list: {e}")
            self._show_placeholder(CONNECTION_ERROR_MESSAGE)
            return

        if not records:
            self._show_placeholder(EMPTY_LIST_MESSAGE)
            return

        self.entries = [FileEntry.from_record(record) for record in records]
        self.placeholder = None
        logger.info(f"Listed {len(self.entries)} documents")

    def _show_placeholder(self, message: str) -> None:
        self.entries = []
        self.placeholder = message

    async def open(self, entry: FileEntry) -> None:
        """Open the document behind a clicked entry."""
        if self._on_open is not None:
            await self._on_open(entry.remote_id, entry.title)
