from pathlib import Path

from docuscan.documents.models import ScannedDocument


def export_file_name(document_id: str) -> str:
    """Build the download name: doc-{id}.txt"""
    return f"doc-{document_id}.txt"


def export_text(document: ScannedDocument, directory: Path) -> Path:
    """Write the extracted text of one document as a UTF-8 plain-text file."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / export_file_name(document.id)
    path.write_text(document.extracted_text, encoding="utf-8")
    return path
