"""NiceGUI interface - thin visualization layer over the shelf workflows.

Responsibilities:
    - Upload form bound to UploadForm
    - File list rendered from FileList
    - Page viewer bound to ViewerState

Contains no business logic. Delegates all operations to the library
and viewer packages.
"""
