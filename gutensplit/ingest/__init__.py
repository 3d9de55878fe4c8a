"""Loading book text from local files."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import List

from ..models import BookMetadata

LOGGER = logging.getLogger(__name__)

MIN_PAYLOAD_LENGTH = 500
_HTML_PREFIXES = ("<!doctype", "<html")


class InvalidPayloadError(ValueError):
    """Raised when loaded content is not a usable plain-text book."""


@dataclass
class LoadedText:
    """Raw text read from a file, with whatever metadata the file carried."""

    text: str
    title: str | None = None
    authors: List[str] = field(default_factory=list)

    def metadata(self, fallback_title: str) -> BookMetadata:
        return BookMetadata.from_names(self.title or fallback_title, self.authors)


def load_text(path: Path) -> str:
    """Read a text file as UTF-8, falling back to latin-1."""

    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError:
        LOGGER.warning("Failed to decode %s as UTF-8; attempting latin-1", path)
        return path.read_text(encoding="latin-1")


def validate_payload(text: str, *, min_length: int = MIN_PAYLOAD_LENGTH) -> str:
    """Reject HTML pages and payloads too short to be a book."""

    head = text.lstrip()[:32].lower()
    if head.startswith(_HTML_PREFIXES):
        raise InvalidPayloadError("Content is an HTML page, not plain text")
    if len(text) <= min_length:
        raise InvalidPayloadError(
            f"Content is too short to be a book ({len(text)} characters, need more than {min_length})"
        )
    return text


def load_book(path: Path) -> LoadedText:
    """Load a ``.txt`` or ``.epub`` file and validate its text."""

    if not path.exists():
        raise FileNotFoundError(f"Input file does not exist: {path}")
    suffix = path.suffix.lower()
    if suffix == ".epub":
        from .epub_loader import EpubLoader

        loaded = EpubLoader().load(path)
    elif suffix in {".txt", ""}:
        loaded = LoadedText(text=load_text(path))
    else:
        raise ValueError(f"Unsupported input type: {path.suffix}")
    LOGGER.debug("Loaded %d characters from %s", len(loaded.text), path)
    validate_payload(loaded.text)
    return loaded


__all__ = [
    "InvalidPayloadError",
    "LoadedText",
    "MIN_PAYLOAD_LENGTH",
    "load_book",
    "load_text",
    "validate_payload",
]
