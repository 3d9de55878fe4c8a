"""Split Project Gutenberg texts into titled chapters."""

from __future__ import annotations

from .models import Author, BookMetadata, Chapter, ParsedBook
from .parser import BookParser, assemble_book, segment_book
from .text.chapters import SegmentationOptions

__all__ = [
    "Author",
    "BookMetadata",
    "BookParser",
    "Chapter",
    "ParsedBook",
    "SegmentationOptions",
    "assemble_book",
    "segment_book",
]

__version__ = "0.1.0"
