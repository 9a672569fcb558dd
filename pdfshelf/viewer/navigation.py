"""Previous/next page navigation."""

from pdfshelf.viewer.render_loop import RenderLoop


class Navigator:
    """Moves the current page within ``[1, page_count]`` and requests it."""

    def __init__(self, loop: RenderLoop) -> None:
        self._loop = loop

    @property
    def enabled(self) -> bool:
        return self._loop.view.nav_enabled and self._loop.document is not None

    def show_previous(self) -> bool:
        """Step back one page. Returns False when nothing happened."""
        state = self._loop.state
        if not self.enabled or state.current_page <= 1:
            return False
        state.current_page -= 1
        self._loop.request(state.current_page)
        return True

    def show_next(self) -> bool:
        """Step forward one page. Returns False when nothing happened."""
        state = self._loop.state
        if not self.enabled or state.current_page >= self._loop.document.page_count:
            return False
        state.current_page += 1
        self._loop.request(state.current_page)
        return True
