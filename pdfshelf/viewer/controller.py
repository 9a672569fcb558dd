"""Opening a stored document in the viewer."""

import logging
from collections.abc import Awaitable, Callable

from pdfshelf.errors import OpenError, TransportError
from pdfshelf.storage.client import StorageClient
from pdfshelf.viewer.document import DocumentHandle, open_document
from pdfshelf.viewer.navigation import Navigator
from pdfshelf.viewer.render_loop import RenderLoop
from pdfshelf.viewer.state import ViewerState

logger = logging.getLogger(__name__)

LOADING_TITLE = "Loading..."
LOAD_FAILED_TITLE = "Failed to load PDF."

DocumentOpener = Callable[[bytes, float], Awaitable[DocumentHandle]]


class DocumentViewer:
    """Viewer panel logic: document open, page rendering, navigation.

    Args:
        client: Storage client used to download documents.
        view: Display state bound by the UI; a fresh one by default.
        opener: Decodes downloaded bytes into a document handle.
    """

    def __init__(
        self,
        client: StorageClient,
        view: ViewerState | None = None,
        opener: DocumentOpener = open_document,
    ) -> None:
        self._client = client
        self._opener = opener
        self.view = view or ViewerState()
        self.render_loop = RenderLoop(self.view)
        self.navigator = Navigator(self.render_loop)

    async def open_document(self, remote_id: str, display_name: str) -> bool:
        """Download, open and show page 1 of a stored document.

        Returns:
            True if the document opened, False if loading failed.
        """
        self.view.title = LOADING_TITLE
        self.view.nav_enabled = False

        try:
            data = await self._client.download(remote_id)
            document = await self._opener(data, self._client.config.render_scale)
        except (TransportError, OpenError) as e:
            logger.error(f"Error loading PDF {remote_id}: {e}")
            self.view.title = LOAD_FAILED_TITLE
            return False

        logger.info(f"Opened {display_name} ({document.page_count} pages)")
        self.render_loop.reset(document)
        self.view.title = display_name
        self.render_loop.request(1)
        self.view.nav_enabled = True
        return True

    def show_previous(self) -> None:
        self.navigator.show_previous()

    def show_next(self) -> None:
        self.navigator.show_next()
