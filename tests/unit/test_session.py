import asyncio
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from docuscan.config.settings import Settings
from docuscan.documents.exceptions import (
    DocumentBusyError,
    DocumentNotEditableError,
    DocumentNotFoundError,
    DocumentNotReadyError,
)
from docuscan.documents.models import NewDocumentInput, OcrStatus
from docuscan.documents.store import DocumentStore
from docuscan.intake.image_loader import ImageLoader
from docuscan.ocr.example_client_adapter import ExampleClientAdapter
from docuscan.pipeline.dispatcher import ExtractionPipeline
from docuscan.session import ScanSession, build_session


def _make_session(
    tmp_path: Path,
    **extract_kwargs: object,
) -> tuple[ScanSession, DocumentStore, MagicMock]:
    extractor = MagicMock()
    extractor.extract = AsyncMock(**(extract_kwargs or {"return_value": "Invoice #123"}))
    store = DocumentStore()
    pipeline = ExtractionPipeline(store, extractor)
    session = ScanSession(
        store=store,
        pipeline=pipeline,
        image_loader=ImageLoader(max_image_bytes=1024),
        export_dir=tmp_path,
    )
    return session, store, extractor


def _make_input() -> NewDocumentInput:
    return NewDocumentInput(image_bytes=b"img", mime_type="image/png")


class TestAdding:
    async def test_add_images_scans_them(self, tmp_path: Path) -> None:
        session, _store, _extractor = _make_session(tmp_path)

        (document,) = session.add_images([_make_input()])
        await session.wait()

        assert session.documents[0].id == document.id
        assert session.documents[0].status is OcrStatus.SUCCESS

    async def test_add_files_skips_non_images(self, tmp_path: Path, png_bytes: bytes) -> None:
        session, _store, extractor = _make_session(tmp_path)
        image = tmp_path / "page.png"
        image.write_bytes(png_bytes)
        notes = tmp_path / "notes.txt"
        notes.write_text("hello")

        created = session.add_files([image, notes])
        await session.wait()

        assert len(created) == 1
        extractor.extract.assert_awaited_once_with(png_bytes, "image/png")

    async def test_capture_adds_data_url_frame(
        self, tmp_path: Path, png_data_url: str, png_bytes: bytes
    ) -> None:
        session, _store, _extractor = _make_session(tmp_path)

        document = session.capture(png_data_url)
        await session.wait()

        assert document.image_bytes == png_bytes
        assert session.documents[0].status is OcrStatus.SUCCESS


class TestEditText:
    async def test_edits_successful_document(self, tmp_path: Path) -> None:
        session, store, _extractor = _make_session(tmp_path)
        (document,) = session.add_images([_make_input()])
        await session.wait()

        session.edit_text(document.id, "Invoice #124")

        assert store.get(document.id).extracted_text == "Invoice #124"  # type: ignore[union-attr]

    async def test_refuses_failed_document(self, tmp_path: Path) -> None:
        session, _store, _extractor = _make_session(tmp_path, side_effect=Exception("boom"))
        (document,) = session.add_images([_make_input()])
        await session.wait()

        with pytest.raises(DocumentNotEditableError, match="ERROR"):
            session.edit_text(document.id, "text")

    def test_unknown_document_raises(self, tmp_path: Path) -> None:
        session, _store, _extractor = _make_session(tmp_path)

        with pytest.raises(DocumentNotFoundError):
            session.edit_text("missing", "text")


class TestRetry:
    async def test_retry_failed_document(self, tmp_path: Path) -> None:
        session, store, _extractor = _make_session(
            tmp_path, side_effect=[Exception("network timeout"), "second try"]
        )
        (document,) = session.add_images([_make_input()])
        await session.wait()
        assert store.get(document.id).error == "network timeout"  # type: ignore[union-attr]

        session.retry(document.id)
        await session.wait()

        result = store.get(document.id)
        assert result is not None
        assert result.status is OcrStatus.SUCCESS
        assert result.extracted_text == "second try"

    async def test_refuses_while_processing(self, tmp_path: Path) -> None:
        gate: asyncio.Future[str] = asyncio.get_running_loop().create_future()

        async def wait_for_gate(*_: object) -> str:
            return await gate

        session, _store, _extractor = _make_session(tmp_path, side_effect=wait_for_gate)
        (document,) = session.add_images([_make_input()])

        with pytest.raises(DocumentBusyError, match="PROCESSING"):
            session.retry(document.id)

        gate.set_result("done")
        await session.wait()

    def test_refuses_while_pending(self, tmp_path: Path) -> None:
        session, _store, _extractor = _make_session(tmp_path)
        (document,) = session.add_images([_make_input()])

        with pytest.raises(DocumentBusyError, match="PENDING"):
            session.retry(document.id)


class TestDeleteAndSearch:
    async def test_delete_is_idempotent(self, tmp_path: Path) -> None:
        session, _store, _extractor = _make_session(tmp_path)
        (document,) = session.add_images([_make_input()])
        await session.wait()

        session.delete(document.id)
        session.delete(document.id)

        assert session.documents == []

    async def test_search_filters_by_text(self, tmp_path: Path) -> None:
        session, _store, _extractor = _make_session(
            tmp_path, side_effect=["Invoice #123", "Shopping list"]
        )
        invoice, shopping = session.add_images([_make_input(), _make_input()])
        await session.wait()

        assert [d.id for d in session.search("INVOICE")] == [invoice.id]
        assert [d.id for d in session.search("")] == [invoice.id, shopping.id]


class TestDownload:
    async def test_writes_text_file(self, tmp_path: Path) -> None:
        session, _store, _extractor = _make_session(tmp_path)
        (document,) = session.add_images([_make_input()])
        await session.wait()

        path = session.download(document.id)

        assert path == tmp_path / f"doc-{document.id}.txt"
        assert path.read_text(encoding="utf-8") == "Invoice #123"

    async def test_refuses_failed_document(self, tmp_path: Path) -> None:
        session, _store, _extractor = _make_session(tmp_path, side_effect=Exception("boom"))
        (document,) = session.add_images([_make_input()])
        await session.wait()

        with pytest.raises(DocumentNotReadyError):
            session.download(document.id)


class TestBuildSession:
    async def test_builds_with_example_provider(self, tmp_path: Path) -> None:
        session = build_session(Settings(ocr_provider="example"), export_dir=tmp_path)

        (document,) = session.add_images([_make_input()])
        await session.wait()

        assert session.documents[0].id == document.id
        assert session.documents[0].extracted_text == ExampleClientAdapter.DEFAULT_TEXT
