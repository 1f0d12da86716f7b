import asyncio

from docuscan.documents.models import OcrStatus, ScannedDocument
from docuscan.documents.store import UNKNOWN_ERROR_MESSAGE, DocumentStore
from docuscan.logging.logger import Log
from docuscan.ocr.base import BaseTextExtractor
from docuscan.pipeline.encoded_errors import raise_for_encoded_error


class ExtractionPipeline:
    """Drives every PENDING document to SUCCESS or ERROR.

    The store hands over ids as soon as they become PENDING. Each one is
    flipped to PROCESSING before its extraction task is scheduled, so an id
    is never dispatched twice for the same attempt. Tasks run concurrently
    on the current event loop without any limit.
    """

    def __init__(self, store: DocumentStore, extractor: BaseTextExtractor) -> None:
        self._store = store
        self._extractor = extractor
        self._tasks: set[asyncio.Task[None]] = set()
        store.subscribe(self._on_pending)

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    def dispatch(self, document_id: str) -> bool:
        """Start a new extraction for a PENDING document.

        Must be called from a running event loop. Returns False when the
        document is gone or not PENDING.
        """
        loop = asyncio.get_running_loop()
        document = self._store.get(document_id)
        if document is None or document.status is not OcrStatus.PENDING:
            return False
        self._store.update_status(document_id, OcrStatus.PROCESSING, attempt=document.attempt)
        Log.info(f"Dispatching attempt {document.attempt}", document_id=document_id)
        task = loop.create_task(self._run(document))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return True

    def dispatch_pending(self) -> int:
        """Dispatch everything currently PENDING in the store."""
        return sum(1 for d in self._store.pending() if self.dispatch(d.id))

    async def wait_idle(self) -> None:
        """Wait until no extraction is in flight, including ones started meanwhile."""
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    def _on_pending(self, document_ids: list[str]) -> None:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            Log.debug(
                f"No running event loop, {len(document_ids)} document(s) left PENDING "
                "until dispatch_pending()"
            )
            return
        for document_id in document_ids:
            self.dispatch(document_id)

    async def _run(self, document: ScannedDocument) -> None:
        try:
            text = await self._extractor.extract(
                document.image_bytes, document.image_mime_type
            )
            raise_for_encoded_error(text)
        except Exception as exc:
            message = str(exc) or UNKNOWN_ERROR_MESSAGE
            Log.error(f"Extraction failed: {message}", document_id=document.id)
            self._apply(document, OcrStatus.ERROR, error=message)
            return
        self._apply(document, OcrStatus.SUCCESS, extracted_text=text)

    def _apply(
        self,
        document: ScannedDocument,
        status: OcrStatus,
        extracted_text: str | None = None,
        error: str | None = None,
    ) -> None:
        current = self._store.get(document.id)
        if (
            current is None
            or current.attempt != document.attempt
            or current.status is not OcrStatus.PROCESSING
        ):
            Log.info(
                f"Discarding stale result of attempt {document.attempt}",
                document_id=document.id,
            )
            return
        self._store.update_status(
            document.id,
            status,
            extracted_text=extracted_text,
            error=error,
            attempt=document.attempt,
        )
        Log.info(f"Finished with status {status.value}", document_id=document.id)
