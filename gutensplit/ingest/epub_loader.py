"""EPUB ingestion utilities."""

from __future__ import annotations

import html
import logging
from pathlib import Path
import re
from typing import Iterable, List

import ebooklib
from ebooklib import epub

from . import LoadedText

LOGGER = logging.getLogger(__name__)

_BLOCK_END = re.compile(r"</(?:p|div|h[1-6]|li|blockquote|pre|tr)\s*>", re.I)


class EpubLoader:
    """Flatten an EPUB into plain text, one paragraph per block element."""

    def load(self, path: Path | str) -> LoadedText:
        """Load the text and Dublin Core metadata of the EPUB at *path*."""

        book = epub.read_epub(str(path))
        documents = list(self._spine_documents(book))
        if not documents:
            LOGGER.warning("EPUB spine is empty, falling back to document order.")
            documents = list(book.get_items_of_type(ebooklib.ITEM_DOCUMENT))

        parts: List[str] = []
        for item in documents:
            text = self._html_to_text(item.get_content().decode("utf-8", errors="ignore"))
            if not text:
                LOGGER.debug("Skipping empty document: %s", item.get_name())
                continue
            parts.append(text)
        return LoadedText(
            text="\n\n".join(parts),
            title=self._first_value(book, "title"),
            authors=self._values(book, "creator"),
        )

    def _spine_documents(self, book: epub.EpubBook) -> Iterable[epub.EpubItem]:
        for entry in book.spine:
            idref = entry[0] if isinstance(entry, (list, tuple)) else entry
            item = book.get_item_with_id(idref)
            if item is None:
                LOGGER.debug("Skipping spine entry without item: %s", idref)
                continue
            if item.get_type() == ebooklib.ITEM_DOCUMENT:
                yield item

    def _values(self, book: epub.EpubBook, name: str) -> List[str]:
        values = []
        for value, _attrs in book.get_metadata("DC", name):
            cleaned = re.sub(r"\s+", " ", value or "").strip()
            if cleaned:
                values.append(cleaned)
        return values

    def _first_value(self, book: epub.EpubBook, name: str) -> str | None:
        values = self._values(book, name)
        return values[0] if values else None

    def _html_to_text(self, markup: str) -> str:
        # Remove head, scripts and styles
        markup = re.sub(r"<(head|script|style)[^>]*>.*?</\1>", "", markup, flags=re.S | re.I)
        markup = re.sub(r"<br[^>]*>", "\n", markup, flags=re.I)
        markup = _BLOCK_END.sub("\n\n", markup)
        text = html.unescape(re.sub(r"<[^>]+>", "", markup))
        text = re.sub(r"[ \t\r\f\v]+", " ", text)
        text = re.sub(r" ?\n ?", "\n", text)
        text = re.sub(r"\n{3,}", "\n\n", text)
        return text.strip()


__all__ = ["EpubLoader"]
