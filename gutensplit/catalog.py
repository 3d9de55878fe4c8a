"""Catalog records in the shape returned by the Gutendex API."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Dict, List, Mapping, Tuple

from .models import Author, BookMetadata

LOGGER = logging.getLogger(__name__)

PLAIN_TEXT_PREFIX = "text/plain"


class NoUsableFormatError(ValueError):
    """Raised when a catalog record offers no plain-text download."""


@dataclass
class CatalogBook:
    """A catalog entry: bibliographic data plus download formats."""

    id: int
    title: str
    authors: List[Author] = field(default_factory=list)
    formats: Dict[str, str] = field(default_factory=dict)
    languages: List[str] = field(default_factory=list)
    download_count: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CatalogBook":
        title = data.get("title")
        if not title:
            raise ValueError("Catalog record has no title")
        authors = [
            Author(
                name=entry.get("name", "").strip(),
                birth_year=entry.get("birth_year"),
                death_year=entry.get("death_year"),
            )
            for entry in data.get("authors") or []
            if entry.get("name")
        ]
        return cls(
            id=int(data.get("id", 0)),
            title=title,
            authors=authors,
            formats=dict(data.get("formats") or {}),
            languages=list(data.get("languages") or []),
            download_count=int(data.get("download_count") or 0),
        )

    def metadata(self) -> BookMetadata:
        return BookMetadata(title=self.title, authors=tuple(self.authors))

    def text_url(self) -> str:
        return select_text_format(self.formats)[1]


def select_text_format(formats: Mapping[str, str]) -> Tuple[str, str]:
    """Pick the plain-text download among *formats*, preferring UTF-8.

    Returns the ``(mime_type, url)`` pair. Keys keep their catalog order when
    no UTF-8 variant is offered.
    """

    candidates = [key for key in formats if key.startswith(PLAIN_TEXT_PREFIX)]
    if not candidates:
        raise NoUsableFormatError(
            f"No {PLAIN_TEXT_PREFIX} format available among: {', '.join(formats) or 'none'}"
        )
    candidates.sort(key=lambda key: "utf-8" not in key.lower())
    mime_type = candidates[0]
    LOGGER.debug("Selected format %s out of %d plain-text candidates", mime_type, len(candidates))
    return mime_type, formats[mime_type]


__all__ = ["CatalogBook", "NoUsableFormatError", "select_text_format"]
