class PipelineError(Exception):
    """Base exception for extraction pipeline errors."""


class EncodedServiceError(PipelineError):
    """Raised when the extraction service reports a failure inside its text."""
