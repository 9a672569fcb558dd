"""Viewer state shared by the render loop, navigation and the UI."""

import base64
from dataclasses import dataclass

from pdfshelf.viewer.document import DocumentHandle

RENDER_FAILED_MESSAGE = "Failed to render page."


@dataclass
class RenderState:
    """Render bookkeeping for the single open document.

    Attributes:
        document: The open document, or None before the first open.
        current_page: Page most recently requested through navigation.
        render_in_flight: Whether a page render is running.
        pending_page: The one page waiting for the running render to finish.
        generation: Bumped on every open; renders from older generations
            never reach the surface.
    """

    document: DocumentHandle | None = None
    current_page: int = 1
    render_in_flight: bool = False
    pending_page: int | None = None
    generation: int = 0


@dataclass
class ViewerState:
    """What the viewer panel shows. ``page_image`` is the rendering surface."""

    title: str = ""
    page_label: str = ""
    page_image: str = ""
    message: str | None = None
    nav_enabled: bool = False

    def draw(self, png: bytes) -> None:
        self.page_image = "data:image/png;base64," + base64.b64encode(png).decode("ascii")
        self.message = None

    def show_render_failure(self) -> None:
        self.page_image = ""
        self.message = RENDER_FAILED_MESSAGE
