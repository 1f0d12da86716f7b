import base64

import pytest

from docuscan.documents.models import NewDocumentInput

# Smallest valid PNG: 1x1 transparent pixel.
PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


@pytest.fixture()
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture()
def png_input() -> NewDocumentInput:
    return NewDocumentInput(image_bytes=PNG_BYTES, mime_type="image/png")


@pytest.fixture()
def png_data_url() -> str:
    return "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode("ascii")
