import base64
import uuid
from dataclasses import dataclass
from enum import Enum


class OcrStatus(str, Enum):
    """Lifecycle of one extraction attempt."""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


TERMINAL_STATUSES = frozenset({OcrStatus.SUCCESS, OcrStatus.ERROR})


def new_document_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class NewDocumentInput:
    """Image handed over by an input surface (file picker, drop zone, camera)."""

    image_bytes: bytes
    mime_type: str


@dataclass(frozen=True)
class ScannedDocument:
    """A scanned image and the text extracted from it.

    Instances are immutable; the store swaps in a new instance on every
    mutation, so a snapshot taken earlier never changes under the caller.
    """

    id: str
    image_bytes: bytes
    image_mime_type: str
    extracted_text: str = ""
    status: OcrStatus = OcrStatus.PENDING
    error: str | None = None
    attempt: int = 1

    @property
    def image_data_url(self) -> str:
        encoded = base64.b64encode(self.image_bytes).decode("ascii")
        return f"data:{self.image_mime_type};base64,{encoded}"

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES
