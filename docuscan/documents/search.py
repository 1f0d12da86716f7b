from collections.abc import Sequence

from docuscan.documents.models import ScannedDocument


def filter_documents(
    documents: Sequence[ScannedDocument],
    term: str,
) -> list[ScannedDocument]:
    """Return documents whose extracted text contains ``term``, ignoring case.

    An empty term returns every document. Relative order is preserved.
    """
    if not term:
        return list(documents)
    needle = term.casefold()
    return [d for d in documents if needle in d.extracted_text.casefold()]
