"""Shelf configuration with environment variable loading.

Pydantic-based configuration for the storage endpoint, document
downloads, and page rendering.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_STORAGE_URL = (
    "https://script.google.com/macros/s/"
    "AKfycbzGgb_7cSl5MVxrXWMaFoRpInCS5DnzbtVAi7tMLQ-svB4yni56QfQcZ-hGa7HGxsJI/exec"
)
DEFAULT_DOWNLOAD_URL_TEMPLATE = "https://drive.google.com/uc?export=download&id={file_id}"


class ShelfConfig(BaseModel):
    """Configuration for the document shelf.

    Attributes:
        storage_url: Web app URL serving the file list (GET) and uploads (POST).
        download_url_template: URL template for raw document bytes, with a
            ``{file_id}`` placeholder.
        request_timeout: HTTP timeout in seconds.
        render_scale: Zoom factor applied when rasterising a page.
        max_upload_mb: Largest file accepted for upload, in megabytes.
    """

    # Environment values arrive through default_factory and must be validated too.
    model_config = ConfigDict(validate_default=True)

    storage_url: str = Field(
        default_factory=lambda: os.getenv("STORAGE_URL", DEFAULT_STORAGE_URL),
        description="List/upload endpoint",
    )
    download_url_template: str = Field(
        default_factory=lambda: os.getenv(
            "DOWNLOAD_URL_TEMPLATE", DEFAULT_DOWNLOAD_URL_TEMPLATE
        ),
        description="Document download URL template",
    )
    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("REQUEST_TIMEOUT", "60")),
        gt=0.0,
        description="HTTP timeout in seconds",
    )
    render_scale: float = Field(
        default_factory=lambda: float(os.getenv("RENDER_SCALE", "1.5")),
        ge=0.25,
        le=4.0,
        description="Page zoom factor",
    )
    max_upload_mb: int = Field(
        default_factory=lambda: int(os.getenv("MAX_UPLOAD_MB", "10")),
        ge=1,
        le=50,
        description="Maximum upload size in megabytes",
    )

    @field_validator("storage_url")
    @classmethod
    def validate_storage_url(cls, v: str) -> str:
        """Validate that a storage endpoint is configured."""
        if not v or not v.strip():
            raise ValueError("Storage endpoint required. Set STORAGE_URL in .env")
        return v.strip()

    @field_validator("download_url_template")
    @classmethod
    def validate_download_url_template(cls, v: str) -> str:
        """Validate that the template has a file id placeholder."""
        if "{file_id}" not in v:
            raise ValueError("DOWNLOAD_URL_TEMPLATE must contain {file_id}")
        return v.strip()

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

    def download_url(self, file_id: str) -> str:
        """Build the direct download URL for a stored document."""
        return self.download_url_template.format(file_id=file_id)


def get_shelf_config() -> ShelfConfig:
    """Create shelf configuration from environment.

    Returns:
        Configured ShelfConfig instance.

    Raises:
        ValueError: If the storage URL or download template is invalid.
    """
    return ShelfConfig()
