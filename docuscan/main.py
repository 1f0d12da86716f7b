import argparse
import asyncio
from pathlib import Path

from docuscan.config.settings import Settings
from docuscan.documents.models import OcrStatus
from docuscan.logging.logger import Log
from docuscan.session import ScanSession, build_session


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docuscan",
        description="Extract text from document images with an AI provider",
    )
    parser.add_argument("images", nargs="+", type=Path, help="Image files to scan")
    parser.add_argument(
        "--search",
        type=str,
        default="",
        help="Only print documents whose text contains this term",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write doc-<id>.txt for every printed successful document into this directory",
    )
    return parser.parse_args(argv)


async def scan(session: ScanSession, images: list[Path], search: str, out: Path | None) -> int:
    """Scan ``images`` and report results.

    Returns the number of images that were not scanned successfully: files
    that could not be loaded plus documents that ended in ERROR. ``search``
    only narrows what is printed.
    """
    added = session.add_files(images)
    await session.wait()

    for document in session.search(search):
        if document.status is OcrStatus.SUCCESS:
            print(f"== {document.id} [{document.status.value}]")
            print(document.extracted_text)
            if out is not None:
                session.download(document.id)
        else:
            print(f"== {document.id} [{document.status.value}] {document.error or ''}")

    skipped = len(images) - len(added)
    failed = sum(1 for d in session.documents if d.status is not OcrStatus.SUCCESS)
    return skipped + failed


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> logging -> session -> scan."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    session = build_session(settings, export_dir=args.out)
    failed = asyncio.run(scan(session, args.images, args.search, args.out))
    if failed:
        Log.error(f"{failed} image(s) not scanned successfully")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
