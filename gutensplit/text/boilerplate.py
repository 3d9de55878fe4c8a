"""Removal of the Project Gutenberg licence header and footer."""

from __future__ import annotations

import re
from typing import Tuple

START_MARKER = re.compile(
    r"\*\*\* ?START OF (?:THE|THIS) PROJECT GUTENBERG EBOOK\b[^\n]*?\*\*\*",
    re.IGNORECASE,
)
END_MARKER = re.compile(
    r"\*\*\* ?END OF (?:THE|THIS) PROJECT GUTENBERG EBOOK\b[^\n]*?\*\*\*",
    re.IGNORECASE,
)


def find_body_span(text: str) -> Tuple[int, int]:
    """Return the ``[start, end)`` offsets of *text* between the markers.

    A missing start marker leaves the start at 0, a missing end marker leaves
    the end at ``len(text)``. The end marker is only searched after the start
    marker.
    """

    start = 0
    end = len(text)
    start_match = START_MARKER.search(text)
    if start_match:
        start = start_match.end()
    end_match = END_MARKER.search(text, start)
    if end_match:
        end = end_match.start()
    return start, end


def strip_boilerplate(text: str) -> str:
    """Drop everything outside the Gutenberg markers and trim the result."""

    start, end = find_body_span(text)
    return text[start:end].strip()


__all__ = ["END_MARKER", "START_MARKER", "find_body_span", "strip_boilerplate"]
