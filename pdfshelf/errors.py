"""Exceptions raised by the shelf workflows."""


class ShelfError(Exception):
    """Base class for shelf errors."""


class FormValidationError(ShelfError):
    """Raised when required input is missing or invalid, before any I/O."""


class TransportError(ShelfError):
    """Raised when the storage endpoint cannot be reached or answers garbage."""


class ServiceError(ShelfError):
    """Raised when the storage endpoint reports a failure status."""


class ReadError(ShelfError):
    """Raised when a selected local file cannot be read."""


class OpenError(ShelfError):
    """Raised when a document cannot be downloaded or decoded."""


class RenderError(ShelfError):
    """Raised when a single page fails to rasterise."""
