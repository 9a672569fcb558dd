"""NiceGUI shelf page: upload form, file list and page viewer."""

from functools import partial

from nicegui import events, ui

from pdfshelf.library.listing import FileList
from pdfshelf.library.upload import UploadForm, UploadService
from pdfshelf.storage.client import get_storage_client
from pdfshelf.viewer.controller import DocumentViewer

CUSTOM_CSS = """
<style>
    body { background: #f5f5f5; min-height: 100vh; }

    .panel {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
    }

    .file-item {
        cursor: pointer;
        border-bottom: 1px solid #e5e7eb;
        transition: background 0.2s;
    }
    .file-item:hover { background: #eef2ff; }

    .page-canvas {
        max-width: 100%;
        border: 1px solid #e5e7eb;
    }
</style>
"""


@ui.page("/")
def shelf_page() -> None:
    """Main shelf page."""
    ui.add_head_html(CUSTOM_CSS)

    client = get_storage_client()
    viewer = DocumentViewer(client)
    file_list = FileList(client, on_open=viewer.open_document)

    @ui.refreshable
    def render_file_list() -> None:
        if file_list.placeholder is not None:
            ui.label(file_list.placeholder).classes("text-gray-500 p-2")
            return
        for entry in file_list.entries:
            with (
                ui.column()
                .classes("file-item w-full gap-0 p-2")
                .on("click", partial(file_list.open, entry))
            ):
                ui.label(entry.title).classes("font-semibold")
                ui.label(entry.subtitle).classes("text-xs text-gray-500")

    async def refresh_list() -> None:
        await file_list.refresh()
        render_file_list.refresh()

    form = UploadForm(UploadService(client), on_uploaded=refresh_list)
    upload: ui.upload

    def on_file_selected(e: events.UploadEventArguments) -> None:
        form.select_file(e.file)

    async def submit() -> None:
        await form.submit()
        if form.file is None:
            upload.reset()

    # === UI Layout ===
    with ui.row().classes("w-full max-w-6xl mx-auto p-4 gap-6 items-start no-wrap"):
        with ui.column().classes("w-80 gap-4"):
            # Upload
            with ui.column().classes("panel w-full p-4 gap-2"):
                ui.label("Upload a PDF").classes("text-lg font-semibold")
                ui.input("Your name").bind_value(form, "uploader_name").classes("w-full")
                upload = (
                    ui.upload(on_upload=on_file_selected, auto_upload=True, max_files=1)
                    .props("accept=.pdf flat bordered")
                    .classes("w-full")
                )
                ui.button("Upload", on_click=submit).bind_enabled_from(
                    form, "submit_enabled"
                )
                ui.label().bind_text_from(form, "status_message").classes(
                    "text-sm text-gray-600"
                )

            # File list
            with ui.column().classes("panel w-full p-4 gap-2"):
                ui.label("Documents").classes("text-lg font-semibold")
                render_file_list()

        # Viewer
        with ui.column().classes("panel flex-grow p-4 gap-3 items-center"):
            ui.label().bind_text_from(viewer.view, "title").classes("text-lg font-semibold")
            with ui.row().classes("items-center gap-3"):
                ui.button(icon="chevron_left", on_click=viewer.show_previous).bind_enabled_from(
                    viewer.view, "nav_enabled"
                )
                ui.label().bind_text_from(viewer.view, "page_label")
                ui.button(icon="chevron_right", on_click=viewer.show_next).bind_enabled_from(
                    viewer.view, "nav_enabled"
                )
            ui.label().bind_text_from(
                viewer.view, "message", backward=lambda m: m or ""
            ).classes("text-sm text-red-600")
            ui.image().bind_source_from(viewer.view, "page_image").classes("page-canvas")

    viewer.view.title = "Select a document to view"
    ui.timer(0.1, refresh_list, once=True)
