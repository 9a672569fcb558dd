"""Pytest fixtures and shared test configuration.

Fixtures:
    - shelf_config: Configuration pointing at the fake endpoint hosts
    - endpoint: In-memory storage endpoint
    - storage_client: StorageClient wired to the endpoint via MockTransport
    - make_pdf: Factory for small real PDFs
    - async_client: HTTPX client for the FastAPI host
"""

from collections.abc import AsyncGenerator, Callable

import httpx
import pymupdf
import pytest
from httpx import ASGITransport, AsyncClient

from pdfshelf.api import create_app
from pdfshelf.config import ShelfConfig
from pdfshelf.storage.client import StorageClient
from tests.fakes import DOWNLOAD_URL_TEMPLATE, STORAGE_URL, FakeStorageEndpoint


@pytest.fixture
def shelf_config() -> ShelfConfig:
    """Return configuration for the fake storage hosts."""
    return ShelfConfig(
        storage_url=STORAGE_URL,
        download_url_template=DOWNLOAD_URL_TEMPLATE,
        request_timeout=5.0,
        render_scale=0.5,
        max_upload_mb=1,
    )


@pytest.fixture
def endpoint() -> FakeStorageEndpoint:
    """Return an empty in-memory storage endpoint."""
    return FakeStorageEndpoint()


@pytest.fixture
async def storage_client(
    shelf_config: ShelfConfig, endpoint: FakeStorageEndpoint
) -> AsyncGenerator[StorageClient]:
    """Create a StorageClient that talks to the fake endpoint.

    Yields:
        StorageClient backed by httpx.MockTransport.
    """
    transport = httpx.MockTransport(endpoint.handle)
    async with httpx.AsyncClient(transport=transport) as http_client:
        yield StorageClient(shelf_config, http_client)


@pytest.fixture
def make_pdf() -> Callable[..., bytes]:
    """Return a factory building an in-memory PDF with numbered pages."""

    def _make_pdf(pages: int = 3) -> bytes:
        doc = pymupdf.open()
        for number in range(1, pages + 1):
            page = doc.new_page()
            page.insert_text((72, 72), f"Page {number}")
        data = doc.tobytes()
        doc.close()
        return data

    return _make_pdf


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for the FastAPI host.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
