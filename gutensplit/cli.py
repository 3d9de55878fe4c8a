"""Command line interface for gutensplit."""

from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from . import __version__
from .catalog import CatalogBook
from .ingest import LoadedText, load_book
from .models import BookMetadata, ParsedBook
from .parser import BookParser
from .text.chapters import SegmentationOptions

LOGGER = logging.getLogger(__name__)

PREVIEW_LENGTH = 60


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gutensplit",
        description=(
            "Strip the Project Gutenberg header and footer from a book and split "
            "the remaining text into titled chapters."
        ),
    )
    parser.add_argument("--in", dest="input_path", type=Path, required=True, help="Input .txt or .epub file")
    parser.add_argument("--out", dest="output_path", type=Path, help="Write JSON here instead of stdout")
    parser.add_argument("--title", help="Book title (defaults to the catalog record or file name)")
    parser.add_argument(
        "--author",
        dest="authors",
        action="append",
        default=[],
        metavar="NAME",
        help="Author name, in credit order (repeatable)",
    )
    parser.add_argument("--meta", dest="catalog_path", type=Path, help="Gutendex catalog record (JSON)")
    parser.add_argument(
        "--min-chapter-length",
        type=int,
        default=50,
        help="Drop chapters whose body is this many characters or fewer",
    )
    parser.add_argument(
        "--intro-threshold",
        type=int,
        default=50,
        help="Keep text before the first heading when the heading starts past this offset",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=["json", "summary"],
        default="json",
        help="Output the full JSON book or a chapter summary",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print warnings and errors")
    parser.add_argument("--version", action="version", version=f"gutensplit {__version__}")
    return parser


def configure_logging(verbose: bool, quiet: bool) -> None:
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(os.getenv("GUTENSPLIT_LOG_LEVEL", "INFO").upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def load_catalog_record(path: Path) -> CatalogBook:
    if not path.exists():
        raise FileNotFoundError(f"Catalog record not found: {path}")
    LOGGER.debug("Loading catalog record from %s", path)
    return CatalogBook.from_dict(json.loads(path.read_text(encoding="utf-8")))


def resolve_metadata(namespace: argparse.Namespace, loaded: LoadedText) -> BookMetadata:
    """Merge metadata sources: flags, then catalog record, then the file itself."""

    metadata = loaded.metadata(fallback_title=namespace.input_path.stem)
    if namespace.catalog_path:
        metadata = load_catalog_record(namespace.catalog_path).metadata()
    if namespace.title:
        metadata = BookMetadata(title=namespace.title, authors=metadata.authors)
    if namespace.authors:
        metadata = BookMetadata.from_names(metadata.title, namespace.authors)
    return metadata


def render_summary(book: ParsedBook) -> str:
    lines = [f"{book.title} ({book.author or 'unknown author'})", f"{len(book.chapters)} chapters"]
    for index, chapter in enumerate(book.chapters, start=1):
        preview = " ".join(chapter.content.split())[:PREVIEW_LENGTH]
        lines.append(f"{index:>4}  {chapter.title}  [{len(chapter.content)} chars]  {preview}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose, args.quiet)
    try:
        options = SegmentationOptions(
            min_chapter_length=args.min_chapter_length,
            introduction_threshold=args.intro_threshold,
        )
        loaded = load_book(args.input_path)
        metadata = resolve_metadata(args, loaded)
        book = BookParser(segmentation=options).parse(loaded.text, metadata)
    except Exception as exc:  # CLI safety net
        LOGGER.error(str(exc))
        return 1

    if args.output_format == "summary":
        output = render_summary(book)
    else:
        output = json.dumps(book.to_dict(), ensure_ascii=False, indent=2)

    if args.output_path:
        args.output_path.parent.mkdir(parents=True, exist_ok=True)
        args.output_path.write_text(output + "\n", encoding="utf-8")
        LOGGER.info("Wrote %d chapters to %s", len(book.chapters), args.output_path)
    else:
        print(output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
