class DocumentError(Exception):
    """Base exception for document store and session errors."""


class DocumentNotFoundError(DocumentError):
    """Raised when an operation needs a document that is not in the store."""


class DocumentBusyError(DocumentError):
    """Raised when a retry is requested while an attempt is still running."""


class DocumentNotEditableError(DocumentError):
    """Raised when editing text of a document that has not succeeded."""


class DocumentNotReadyError(DocumentError):
    """Raised when downloading text of a document that has not succeeded."""
