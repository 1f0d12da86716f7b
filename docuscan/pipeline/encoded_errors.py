from docuscan.pipeline.exceptions import EncodedServiceError

ENCODED_ERROR_PREFIXES: tuple[str, ...] = (
    "Error processing document:",
    "An unknown error occurred",
)


def is_encoded_error(text: str) -> bool:
    return text.startswith(ENCODED_ERROR_PREFIXES)


def raise_for_encoded_error(text: str) -> str:
    """Return ``text`` unchanged unless it is a failure written as plain text.

    Raises:
        EncodedServiceError: carrying the full text as its message.
    """
    if is_encoded_error(text):
        raise EncodedServiceError(text)
    return text
