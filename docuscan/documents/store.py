from collections.abc import Callable, Iterator, Sequence
from dataclasses import replace

from docuscan.documents.exceptions import DocumentBusyError
from docuscan.documents.models import (
    NewDocumentInput,
    OcrStatus,
    ScannedDocument,
    new_document_id,
)
from docuscan.logging.logger import Log

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."

PendingListener = Callable[[list[str]], None]


class DocumentStore:
    """Ordered, in-memory collection of scanned documents.

    Newest documents come first. Operations addressed to an unknown id are
    no-ops. Listeners are told about ids that have just become PENDING,
    either because they were added or because they were reset for retry.
    """

    def __init__(self) -> None:
        self._order: list[str] = []
        self._by_id: dict[str, ScannedDocument] = {}
        self._listeners: list[PendingListener] = []

    def subscribe(self, listener: PendingListener) -> None:
        self._listeners.append(listener)

    def add(self, documents: Sequence[NewDocumentInput]) -> list[ScannedDocument]:
        """Prepend new PENDING documents, keeping the input order among them."""
        created = [
            ScannedDocument(
                id=self._fresh_id(),
                image_bytes=item.image_bytes,
                image_mime_type=item.mime_type,
            )
            for item in documents
        ]
        if not created:
            return []
        for document in created:
            self._by_id[document.id] = document
        self._order[:0] = [document.id for document in created]
        Log.info(f"Added {len(created)} document(s), {len(self._order)} in store")
        self._notify([document.id for document in created])
        return created

    def update_status(
        self,
        document_id: str,
        status: OcrStatus,
        extracted_text: str | None = None,
        error: str | None = None,
        *,
        attempt: int | None = None,
    ) -> bool:
        """Replace the status and its associated fields.

        ``error`` is kept only for ERROR so that the message is present iff the
        document failed. When ``attempt`` is given the update applies only to
        that attempt. Returns whether the document was updated.
        """
        document = self._by_id.get(document_id)
        if document is None:
            Log.debug("Status update for unknown document ignored", document_id=document_id)
            return False
        if attempt is not None and document.attempt != attempt:
            Log.debug(
                f"Status update for attempt {attempt} ignored, "
                f"current attempt is {document.attempt}",
                document_id=document_id,
            )
            return False
        if status is OcrStatus.ERROR:
            error = error or UNKNOWN_ERROR_MESSAGE
        else:
            error = None
        self._by_id[document_id] = replace(
            document,
            status=status,
            extracted_text=(
                document.extracted_text if extracted_text is None else extracted_text
            ),
            error=error,
        )
        return True

    def update_text(self, document_id: str, new_text: str) -> None:
        document = self._by_id.get(document_id)
        if document is None:
            return
        self._by_id[document_id] = replace(document, extracted_text=new_text)

    def remove(self, document_id: str) -> None:
        if self._by_id.pop(document_id, None) is None:
            return
        self._order.remove(document_id)
        Log.info("Removed", document_id=document_id)

    def reset_for_retry(self, document_id: str) -> None:
        """Start a new attempt: PENDING, text and error cleared.

        Raises:
            DocumentBusyError: if the current attempt is still PROCESSING.
        """
        document = self._by_id.get(document_id)
        if document is None:
            return
        if document.status is OcrStatus.PROCESSING:
            raise DocumentBusyError(
                f"Document {document_id} is still processing attempt {document.attempt}"
            )
        self._by_id[document_id] = replace(
            document,
            status=OcrStatus.PENDING,
            extracted_text="",
            error=None,
            attempt=document.attempt + 1,
        )
        Log.info(f"Reset for attempt {document.attempt + 1}", document_id=document_id)
        self._notify([document_id])

    def get(self, document_id: str) -> ScannedDocument | None:
        return self._by_id.get(document_id)

    def documents(self) -> list[ScannedDocument]:
        """Snapshot of all documents, newest first."""
        return [self._by_id[document_id] for document_id in self._order]

    def pending(self) -> list[ScannedDocument]:
        return [d for d in self.documents() if d.status is OcrStatus.PENDING]

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[ScannedDocument]:
        return iter(self.documents())

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._by_id

    def _fresh_id(self) -> str:
        document_id = new_document_id()
        while document_id in self._by_id:
            document_id = new_document_id()
        return document_id

    def _notify(self, document_ids: list[str]) -> None:
        for listener in self._listeners:
            listener(list(document_ids))
