import base64
import binascii

from docuscan.documents.models import NewDocumentInput
from docuscan.intake.exceptions import InvalidDataUrlError, UnsupportedImageTypeError


def parse_data_url(data_url: str) -> NewDocumentInput:
    """Decode a ``data:<mime>;base64,<payload>`` string into image bytes.

    Camera captures and browser file readers both hand images over in this form.

    Raises:
        InvalidDataUrlError: if the string is not a base64 data URL.
        UnsupportedImageTypeError: if the media type is not an image.
    """
    if not data_url.startswith("data:"):
        raise InvalidDataUrlError("Data URL must start with 'data:'")
    header, sep, payload = data_url[len("data:"):].partition(",")
    if not sep:
        raise InvalidDataUrlError("Data URL has no payload separator")
    mime_type, _, encoding = header.partition(";")
    if encoding != "base64":
        raise InvalidDataUrlError(f"Unsupported data URL encoding '{encoding or 'none'}'")
    if not mime_type.startswith("image/"):
        raise UnsupportedImageTypeError(f"Media type '{mime_type}' is not an image")
    try:
        image_bytes = base64.b64decode(payload, validate=True)
    except binascii.Error as exc:
        raise InvalidDataUrlError(f"Invalid base64 payload: {exc}") from exc
    return NewDocumentInput(image_bytes=image_bytes, mime_type=mime_type)
