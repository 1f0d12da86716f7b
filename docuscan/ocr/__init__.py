from docuscan.ocr.base import BaseTextExtractor
from docuscan.ocr.extractor import TextExtractor
from docuscan.ocr.factory import TextExtractorFactory

__all__ = ["BaseTextExtractor", "TextExtractor", "TextExtractorFactory"]
