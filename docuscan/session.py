from collections.abc import Iterable, Sequence
from pathlib import Path

from docuscan.config.settings import Settings
from docuscan.documents.exceptions import (
    DocumentBusyError,
    DocumentNotEditableError,
    DocumentNotFoundError,
    DocumentNotReadyError,
)
from docuscan.documents.export import export_text
from docuscan.documents.models import NewDocumentInput, OcrStatus, ScannedDocument
from docuscan.documents.search import filter_documents
from docuscan.documents.store import DocumentStore
from docuscan.intake.data_url import parse_data_url
from docuscan.intake.image_loader import ImageLoader
from docuscan.logging.logger import Log
from docuscan.ocr.factory import TextExtractorFactory
from docuscan.pipeline.dispatcher import ExtractionPipeline


class ScanSession:
    """User-facing operations over one in-memory scanning session.

    Text can be edited and downloaded only once extraction succeeded, and a
    retry is offered only for finished attempts.
    """

    def __init__(
        self,
        store: DocumentStore,
        pipeline: ExtractionPipeline,
        image_loader: ImageLoader,
        export_dir: Path,
    ) -> None:
        self._store = store
        self._pipeline = pipeline
        self._image_loader = image_loader
        self._export_dir = export_dir

    @property
    def documents(self) -> list[ScannedDocument]:
        return self._store.documents()

    def add_images(self, images: Sequence[NewDocumentInput]) -> list[ScannedDocument]:
        return self._store.add(images)

    def add_files(self, paths: Iterable[Path]) -> list[ScannedDocument]:
        return self._store.add(self._image_loader.load_many(paths))

    def capture(self, data_url: str) -> ScannedDocument:
        """Add one camera frame delivered as a data URL."""
        (document,) = self._store.add([parse_data_url(data_url)])
        return document

    def edit_text(self, document_id: str, new_text: str) -> None:
        document = self._require(document_id)
        if document.status is not OcrStatus.SUCCESS:
            raise DocumentNotEditableError(
                f"Document {document_id} is {document.status.value}, text is read-only"
            )
        self._store.update_text(document_id, new_text)

    def retry(self, document_id: str) -> None:
        document = self._require(document_id)
        if not document.is_terminal:
            raise DocumentBusyError(
                f"Document {document_id} is {document.status.value}, retry not allowed"
            )
        self._store.reset_for_retry(document_id)

    def delete(self, document_id: str) -> None:
        self._store.remove(document_id)

    def search(self, term: str) -> list[ScannedDocument]:
        return filter_documents(self._store.documents(), term)

    def download(self, document_id: str) -> Path:
        document = self._require(document_id)
        if document.status is not OcrStatus.SUCCESS:
            raise DocumentNotReadyError(
                f"Document {document_id} is {document.status.value}, nothing to download"
            )
        path = export_text(document, self._export_dir)
        Log.info(f"Wrote text to {path}", document_id=document_id)
        return path

    async def wait(self) -> None:
        await self._pipeline.wait_idle()

    def _require(self, document_id: str) -> ScannedDocument:
        document = self._store.get(document_id)
        if document is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return document


def build_session(settings: Settings, export_dir: Path | None = None) -> ScanSession:
    """Build a ScanSession with the configured extraction provider."""
    store = DocumentStore()
    extractor = TextExtractorFactory.create(settings)
    pipeline = ExtractionPipeline(store, extractor)
    return ScanSession(
        store=store,
        pipeline=pipeline,
        image_loader=ImageLoader(settings.max_image_bytes),
        export_dir=export_dir if export_dir is not None else Path(settings.export_dir),
    )
