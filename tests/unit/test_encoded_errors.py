import pytest

from docuscan.pipeline.encoded_errors import is_encoded_error, raise_for_encoded_error
from docuscan.pipeline.exceptions import EncodedServiceError


class TestIsEncodedError:
    def test_detects_processing_prefix(self) -> None:
        assert is_encoded_error("Error processing document: rate limited")

    def test_detects_unknown_error_prefix(self) -> None:
        assert is_encoded_error("An unknown error occurred during document processing.")

    def test_plain_text_is_not_an_error(self) -> None:
        assert not is_encoded_error("Invoice #123")

    def test_prefix_must_be_at_start(self) -> None:
        assert not is_encoded_error("Note: Error processing document: is printed on the page")


class TestRaiseForEncodedError:
    def test_returns_plain_text(self) -> None:
        assert raise_for_encoded_error("Invoice #123") == "Invoice #123"

    def test_raises_with_full_text(self) -> None:
        with pytest.raises(EncodedServiceError) as exc_info:
            raise_for_encoded_error("Error processing document: rate limited")

        assert str(exc_info.value) == "Error processing document: rate limited"
