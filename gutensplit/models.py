"""Shared data models for parsed books."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple


@dataclass(frozen=True)
class Author:
    """A credited author as supplied by the catalog."""

    name: str
    birth_year: int | None = None
    death_year: int | None = None


@dataclass(frozen=True)
class BookMetadata:
    """Title and authors for a book. Never mutated by the parser."""

    title: str
    authors: Tuple[Author, ...] = field(default_factory=tuple)

    @classmethod
    def from_names(cls, title: str, names: Sequence[str]) -> "BookMetadata":
        return cls(title=title, authors=tuple(Author(name=name) for name in names))

    def author_label(self) -> str:
        return ", ".join(author.name for author in self.authors)


@dataclass(frozen=True)
class Chapter:
    """A titled slice of the cleaned book text."""

    title: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"title": self.title, "content": self.content}


@dataclass(frozen=True)
class ParsedBook:
    """Structured result of segmenting a book."""

    title: str
    author: str
    chapters: Tuple[Chapter, ...]
    full_text: str

    def to_dict(self) -> Dict[str, object]:
        """Render the book in its JSON wire shape (``fullText`` in camelCase)."""

        chapters: List[Dict[str, str]] = [chapter.to_dict() for chapter in self.chapters]
        return {
            "title": self.title,
            "author": self.author,
            "chapters": chapters,
            "fullText": self.full_text,
        }


__all__ = ["Author", "BookMetadata", "Chapter", "ParsedBook"]
