"""Base64 encoding of selected files for upload."""

import base64
import logging
from typing import Protocol

from pdfshelf.errors import ReadError

logger = logging.getLogger(__name__)


class SelectedFile(Protocol):
    """A file chosen by the user, such as NiceGUI's ``FileUpload``."""

    name: str

    async def read(self) -> bytes: ...


def encode_content(content: bytes) -> str:
    """Return plain base64 of ``content``, without any data-URL prefix."""
    return base64.b64encode(content).decode("ascii")


async def read_file(source: SelectedFile) -> bytes:
    """Read the full contents of a selected file.

    Raises:
        ReadError: If the underlying read fails for any reason.
    """
    try:
        return await source.read()
    except Exception as e:
        logger.error(f"File reading error for {getattr(source, 'name', '?')}: {e}")
        raise ReadError(str(e) or "Failed to read the file") from e
