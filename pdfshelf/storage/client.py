"""HTTP client for the remote storage endpoint.

One endpoint serves the file list (GET) and accepts uploads (POST).
Documents are downloaded from a separate URL built from the file id.
"""

import logging
from typing import Self

import httpx
from pydantic import ValidationError

from pdfshelf.config import ShelfConfig, get_shelf_config
from pdfshelf.errors import ServiceError, TransportError
from pdfshelf.models.schemas import (
    FileListResponse,
    FileRecord,
    UploadPayload,
    UploadResponse,
)

logger = logging.getLogger(__name__)

# Sent as a "simple" request, the way a browser fetch without headers posts it,
# so the web app never sees a CORS preflight.
UPLOAD_CONTENT_TYPE = "text/plain;charset=utf-8"


class StorageClient:
    """Round-trips against the storage endpoint.

    Every method raises TransportError when the endpoint cannot be reached,
    answers with an HTTP error, or returns a body that is not the expected
    JSON. ServiceError means the endpoint answered but reported a failure.
    """

    def __init__(
        self, config: ShelfConfig, http_client: httpx.AsyncClient | None = None
    ) -> None:
        self._config = config
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=config.request_timeout,
            follow_redirects=True,
        )

    @property
    def config(self) -> ShelfConfig:
        return self._config

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def _send(self, request: httpx.Request) -> httpx.Response:
        try:
            response = await self._http.send(request, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise TransportError(f"Connection failed: {e}") from e
        return response

    async def list_files(self) -> list[FileRecord]:
        """Fetch the current file list in endpoint order.

        Raises:
            TransportError: On network, HTTP, or decoding failure.
            ServiceError: If the endpoint reports a non-success status.
        """
        request = self._http.build_request("GET", self._config.storage_url)
        response = await self._send(request)

        try:
            data = FileListResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise TransportError(f"Unexpected list response: {e}") from e

        if not data.ok:
            raise ServiceError(data.message or f"List request returned status {data.status!r}")

        logger.debug(f"Fetched {len(data.files)} file records")
        return data.files

    async def upload(self, payload: UploadPayload) -> str:
        """Send a file to the endpoint.

        Returns:
            The file name the endpoint stored the document under.

        Raises:
            TransportError: On network, HTTP, or decoding failure.
            ServiceError: If the endpoint reports a non-success status.
        """
        request = self._http.build_request(
            "POST",
            self._config.storage_url,
            content=payload.model_dump_json(by_alias=True),
            headers={"Content-Type": UPLOAD_CONTENT_TYPE},
        )
        response = await self._send(request)

        try:
            data = UploadResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise TransportError(f"Unexpected upload response: {e}") from e

        if not data.ok:
            raise ServiceError(data.message or "Unknown error")

        return data.file_name or payload.original_file_name

    async def download(self, file_id: str) -> bytes:
        """Download the raw bytes of a stored document.

        Raises:
            TransportError: On network or HTTP failure.
        """
        url = self._config.download_url(file_id)
        request = self._http.build_request("GET", url)
        response = await self._send(request)
        return response.content


_storage_client: StorageClient | None = None


def get_storage_client() -> StorageClient:
    """Get or create the shared storage client.

    Returns:
        The StorageClient instance, configured from the environment.
    """
    global _storage_client
    if _storage_client is None:
        _storage_client = StorageClient(get_shelf_config())
    return _storage_client


async def close_storage_client() -> None:
    """Close the shared storage client, if one was created."""
    global _storage_client
    if _storage_client is not None:
        await _storage_client.aclose()
        _storage_client = None
