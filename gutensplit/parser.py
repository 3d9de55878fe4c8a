"""Book parsing pipeline: normalize, strip, segment, assemble.

:func:`segment_book` is a pure function of its inputs. :class:`BookParser`
wraps the same pipeline with fixed options and reports what it found through
logging, for use by the command line and other callers that want feedback.
"""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

from .models import BookMetadata, Chapter, ParsedBook
from .text.boilerplate import strip_boilerplate
from .text.chapters import SegmentationOptions, build_chapters
from .text.headings import DEFAULT_MATCHERS, HeadingDetection, HeadingMatcher, detect_headings
from .text.normalize import NormalizationOptions, Normalizer

LOGGER = logging.getLogger(__name__)


def assemble_book(
    cleaned_text: str,
    chapters: Sequence[Chapter],
    metadata: BookMetadata,
) -> ParsedBook:
    """Combine the cleaned text, its chapters and the metadata into a book."""

    return ParsedBook(
        title=metadata.title,
        author=metadata.author_label(),
        chapters=tuple(chapters),
        full_text=cleaned_text,
    )


class BookParser:
    """Parse raw Gutenberg text into a :class:`ParsedBook`."""

    def __init__(
        self,
        normalization: NormalizationOptions | None = None,
        segmentation: SegmentationOptions | None = None,
        matchers: Sequence[HeadingMatcher] = DEFAULT_MATCHERS,
    ) -> None:
        self.normalizer = Normalizer(normalization)
        self.segmentation = segmentation or SegmentationOptions()
        self.matchers = tuple(matchers)

    def parse(self, raw_text: str, metadata: BookMetadata) -> ParsedBook:
        detection, book = self._run(raw_text, metadata)
        LOGGER.debug(
            "Detected %d headings with the %s matcher",
            len(detection.matches),
            detection.matcher,
        )
        if not detection.matches:
            LOGGER.info("No chapter headings found in %r; using the full text", metadata.title)
        LOGGER.info("Parsed %r into %d chapters", book.title, len(book.chapters))
        return book

    def _run(self, raw_text: str, metadata: BookMetadata) -> Tuple[HeadingDetection, ParsedBook]:
        cleaned = strip_boilerplate(self.normalizer.normalize(raw_text))
        detection = detect_headings(
            cleaned,
            self.matchers,
            min_matches=self.segmentation.min_structured_matches,
        )
        chapters = build_chapters(cleaned, detection, self.segmentation)
        return detection, assemble_book(cleaned, chapters, metadata)


def segment_book(
    raw_text: str,
    metadata: BookMetadata,
    options: SegmentationOptions | None = None,
) -> ParsedBook:
    """Turn a raw Gutenberg text and its metadata into a :class:`ParsedBook`.

    Never fails on content: missing markers mean nothing is stripped and a
    text without headings becomes a single chapter.
    """

    _, book = BookParser(segmentation=options)._run(raw_text, metadata)
    return book


__all__ = ["BookParser", "assemble_book", "segment_book"]
