"""Single-flight page rendering.

Only one page draws onto the surface at a time. Requests that arrive
while a page is rendering collapse into a single pending slot, so a burst
of navigation clicks renders the last requested page and nothing between.
"""

import asyncio
import logging

from pdfshelf.errors import RenderError
from pdfshelf.viewer.document import DocumentHandle
from pdfshelf.viewer.state import RenderState, ViewerState

logger = logging.getLogger(__name__)


class RenderLoop:
    """Renders requested pages of the open document onto a ViewerState."""

    def __init__(self, view: ViewerState, state: RenderState | None = None) -> None:
        self.view = view
        self.state = state or RenderState()
        self._task: asyncio.Task[None] | None = None
        self._rendering: DocumentHandle | None = None
        self._idle = asyncio.Event()
        self._idle.set()

    @property
    def document(self) -> DocumentHandle | None:
        return self.state.document

    def reset(self, document: DocumentHandle) -> None:
        """Switch to a newly opened document.

        Drops any pending page of the previous document. The previous
        document is closed now, or once its in-flight render finishes.
        """
        previous = self.state.document
        self.state.document = document
        self.state.current_page = 1
        self.state.pending_page = None
        self.state.generation += 1

        if previous is not None and previous is not document and previous is not self._rendering:
            previous.close()

    def request(self, number: int) -> None:
        """Render page ``number`` now, or remember it if a render is running."""
        if self.state.document is None:
            raise RuntimeError("No document is open")

        if self.state.render_in_flight:
            self.state.pending_page = number
        else:
            self._start(number)

    def _start(self, number: int) -> None:
        document = self.state.document
        self.state.render_in_flight = True
        self._rendering = document
        self._idle.clear()
        self.view.page_label = f"Page {number} of {document.page_count}"
        self._task = asyncio.get_running_loop().create_task(
            self._render(document, number, self.state.generation)
        )

    async def _render(self, document: DocumentHandle, number: int, generation: int) -> None:
        try:
            png = await document.render_page(number)
            if generation == self.state.generation:
                self.view.draw(png)
        except RenderError as e:
            logger.error(f"Error rendering page {number}: {e}")
            if generation == self.state.generation:
                self.view.show_render_failure()
        finally:
            if document is not self.state.document:
                document.close()
            self._complete()

    def _complete(self) -> None:
        self.state.render_in_flight = False
        self._rendering = None
        pending = self.state.pending_page
        if pending is None:
            self._idle.set()
            return
        self.state.pending_page = None
        self._start(pending)

    async def wait_idle(self) -> None:
        """Wait until no render is running and none is pending."""
        await self._idle.wait()
