"""Slicing cleaned text into chapters at detected headings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..models import Chapter
from .headings import DEFAULT_MATCHERS, HeadingDetection, HeadingMatcher, detect_headings

INTRODUCTION_TITLE = "Introduction"
FULL_TEXT_TITLE = "Texte Complet"


@dataclass
class SegmentationOptions:
    """Thresholds and labels used when cutting a text into chapters."""

    min_chapter_length: int = 50
    introduction_threshold: int = 50
    min_structured_matches: int = 3
    introduction_title: str = INTRODUCTION_TITLE
    full_text_title: str = FULL_TEXT_TITLE

    def __post_init__(self) -> None:
        if self.min_chapter_length < 0:
            raise ValueError("min_chapter_length must not be negative")
        if self.introduction_threshold < 0:
            raise ValueError("introduction_threshold must not be negative")
        if self.min_structured_matches < 1:
            raise ValueError("min_structured_matches must be at least 1")
        if not self.introduction_title.strip() or not self.full_text_title.strip():
            raise ValueError("Chapter titles must not be empty")


def build_chapters(
    text: str,
    detection: HeadingDetection,
    options: SegmentationOptions | None = None,
) -> List[Chapter]:
    """Expand detected headings into chapters, in order of occurrence.

    Text before the first heading becomes an introduction when it is longer
    than ``introduction_threshold`` once trailing whitespace is dropped. A
    heading whose trimmed body is not longer than ``min_chapter_length`` is
    dropped.
    """

    options = options or SegmentationOptions()
    matches = detection.matches
    if not matches:
        return [Chapter(title=options.full_text_title, content=text)]

    chapters: List[Chapter] = []
    preamble = text[: matches[0].start].rstrip()
    if len(preamble) > options.introduction_threshold:
        chapters.append(Chapter(title=options.introduction_title, content=preamble.lstrip()))

    for index, match in enumerate(matches):
        end = matches[index + 1].start if index + 1 < len(matches) else len(text)
        body = text[match.end : end].strip()
        if len(body) > options.min_chapter_length:
            chapters.append(Chapter(title=match.text, content=body))
    return chapters


def split_chapters(
    text: str,
    options: SegmentationOptions | None = None,
    matchers: Sequence[HeadingMatcher] = DEFAULT_MATCHERS,
) -> List[Chapter]:
    """Detect headings in *text* and cut it into chapters."""

    options = options or SegmentationOptions()
    detection = detect_headings(text, matchers, min_matches=options.min_structured_matches)
    return build_chapters(text, detection, options)


__all__ = [
    "FULL_TEXT_TITLE",
    "INTRODUCTION_TITLE",
    "SegmentationOptions",
    "build_chapters",
    "split_chapters",
]
