"""PDF Shelf - a shared document shelf for small groups.

Users upload PDF documents to a remote storage endpoint and read them
page by page in the browser.

Components:
    - storage: Encoder and HTTP client for the remote list/upload endpoint
    - library: Upload and file-list workflows with their display state
    - viewer: Document opening, single-flight page rendering, navigation
    - parsing: PDF validation before upload
    - api: FastAPI host application
    - ui: NiceGUI page
    - models: Wire schemas
"""

__version__ = "0.1.0"
