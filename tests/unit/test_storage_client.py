"""Unit tests for StorageClient round-trips."""

import base64
import json

import httpx
import pytest
import pytest_check as check

from pdfshelf.config import ShelfConfig
from pdfshelf.errors import ServiceError, TransportError
from pdfshelf.models.schemas import UploadPayload
from pdfshelf.storage.client import UPLOAD_CONTENT_TYPE, StorageClient
from tests.fakes import STORAGE_URL, FakeStorageEndpoint


def _payload() -> UploadPayload:
    return UploadPayload(
        uploader_name="Ada",
        original_file_name="notes.pdf",
        file_content=base64.b64encode(b"%PDF-1.4").decode(),
    )


class TestListFiles:
    """Tests for GET on the storage endpoint."""

    async def test_returns_records_in_endpoint_order(
        self, storage_client: StorageClient, endpoint: FakeStorageEndpoint
    ) -> None:
        """Records keep the order the endpoint returned."""
        endpoint.add_file("zeta.pdf", "Zoe", "z1")
        endpoint.add_file("alpha.pdf", "Al", "a1")

        records = await storage_client.list_files()

        check.equal([r.stored_file_name for r in records], ["zeta.pdf", "alpha.pdf"])
        check.equal(records[0].uploader_name, "Zoe")
        check.equal(records[0].drive_file_id, "z1")
        check.equal(endpoint.requests[0].method, "GET")
        check.equal(str(endpoint.requests[0].url), STORAGE_URL)

    async def test_non_success_status_raises_service_error(
        self, storage_client: StorageClient, endpoint: FakeStorageEndpoint
    ) -> None:
        """Endpoint failure status becomes ServiceError."""
        endpoint.list_response = {"status": "error", "message": "Sheet missing"}

        with pytest.raises(ServiceError, match="Sheet missing"):
            await storage_client.list_files()

    async def test_missing_status_raises_service_error(
        self, storage_client: StorageClient, endpoint: FakeStorageEndpoint
    ) -> None:
        endpoint.list_response = {"files": []}

        with pytest.raises(ServiceError, match="returned status ''"):
            await storage_client.list_files()

    async def test_connection_failure_raises_transport_error(
        self, storage_client: StorageClient, endpoint: FakeStorageEndpoint
    ) -> None:
        """Network failure becomes TransportError."""
        endpoint.offline = True

        with pytest.raises(TransportError, match="Connection failed"):
            await storage_client.list_files()

    async def test_http_error_raises_transport_error(self, shelf_config: ShelfConfig) -> None:
        """Non-2xx response becomes TransportError."""
        transport = httpx.MockTransport(lambda request: httpx.Response(500))
        async with httpx.AsyncClient(transport=transport) as http_client:
            client = StorageClient(shelf_config, http_client)

            with pytest.raises(TransportError, match="HTTP 500"):
                await client.list_files()

    async def test_non_json_body_raises_transport_error(
        self, shelf_config: ShelfConfig
    ) -> None:
        """A login page instead of JSON becomes TransportError."""
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, text="<html>Sign in</html>")
        )
        async with httpx.AsyncClient(transport=transport) as http_client:
            client = StorageClient(shelf_config, http_client)

            with pytest.raises(TransportError, match="Unexpected list response"):
                await client.list_files()

    async def test_follows_redirect(self, shelf_config: ShelfConfig) -> None:
        """Web app replies via a redirect; the client follows it."""

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/exec":
                return httpx.Response(302, headers={"Location": "https://echo.test/result"})
            return httpx.Response(200, json={"status": "success", "files": []})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
            client = StorageClient(shelf_config, http_client)

            assert await client.list_files() == []


class TestUpload:
    """Tests for POST on the storage endpoint."""

    async def test_sends_payload_as_plain_text_json(
        self, storage_client: StorageClient, endpoint: FakeStorageEndpoint
    ) -> None:
        """Body carries the three wire fields as JSON text."""
        stored = await storage_client.upload(_payload())

        request = endpoint.requests[0]
        body = json.loads(request.content)
        check.equal(stored, "notes.pdf")
        check.equal(request.method, "POST")
        check.equal(request.headers["content-type"], UPLOAD_CONTENT_TYPE)
        check.equal(set(body), {"uploaderName", "originalFileName", "fileContent"})
        check.equal(body["uploaderName"], "Ada")
        check.equal(base64.b64decode(body["fileContent"]), b"%PDF-1.4")

    async def test_failure_status_raises_service_error_with_message(
        self, storage_client: StorageClient, endpoint: FakeStorageEndpoint
    ) -> None:
        """Endpoint message is carried on ServiceError."""
        endpoint.upload_response = {"status": "error", "message": "Quota exceeded"}

        with pytest.raises(ServiceError, match="Quota exceeded"):
            await storage_client.upload(_payload())

    async def test_missing_message_uses_generic_text(
        self, storage_client: StorageClient, endpoint: FakeStorageEndpoint
    ) -> None:
        """Failure without a message still raises a readable ServiceError."""
        endpoint.upload_response = {"status": "error"}

        with pytest.raises(ServiceError, match="Unknown error"):
            await storage_client.upload(_payload())


class TestDownload:
    """Tests for raw document downloads."""

    async def test_downloads_bytes_from_template_url(
        self, storage_client: StorageClient, endpoint: FakeStorageEndpoint
    ) -> None:
        """Document bytes come from the URL built from the file id."""
        endpoint.add_file("a.pdf", "Ada", "doc-1", b"%PDF-raw")

        data = await storage_client.download("doc-1")

        assert data == b"%PDF-raw"
        assert str(endpoint.requests[0].url) == "https://files.test/doc-1"

    async def test_missing_document_raises_transport_error(
        self, storage_client: StorageClient
    ) -> None:
        """404 from the document host becomes TransportError."""
        with pytest.raises(TransportError, match="HTTP 404"):
            await storage_client.download("nope")
