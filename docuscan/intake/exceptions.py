class IntakeError(Exception):
    """Base exception for image intake errors."""


class UnsupportedImageTypeError(IntakeError):
    """Raised when a file or data URL does not carry an image media type."""


class ImageTooLargeError(IntakeError):
    """Raised when an image exceeds the configured size limit."""


class InvalidDataUrlError(IntakeError):
    """Raised when a data URL cannot be decoded."""
