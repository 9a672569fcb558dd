"""Integration tests for workflows working together.

Coverage:
    - Upload form through the client to the endpoint and back into the list
    - File list refresh and document open
    - Viewer with real PyMuPDF rendering
    - FastAPI host endpoints

The storage endpoint is the in-memory FakeStorageEndpoint.
"""
