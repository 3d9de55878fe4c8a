"""Chapter heading detection.

Headings are found by a list of matchers tried in priority order. Each matcher
only knows its own pattern; :func:`detect_headings` decides which matcher's
result is used.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import List, Sequence, Tuple

HEADING_KEYWORDS = (
    "CHAPITRE",
    "CHAPTER",
    "PARTIE",
    "PART",
    "LIVRE",
    "BOOK",
    "SCÈNE",
    "ACTE",
)

FRENCH_ORDINALS = (
    "PREMIER",
    "DEUXIÈME",
    "TROISIÈME",
    "QUATRIÈME",
    "CINQUIÈME",
    "SIXIÈME",
    "SEPTIÈME",
    "HUITIÈME",
    "NEUVIÈME",
    "DIXIÈME",
    "UN",
    "DEUX",
    "TROIS",
)

# A heading line starts the text or follows a blank line. The boundaries are
# lookarounds so that two headings separated by one blank line both match.
_LINE_START = r"(?:^|(?<=\n\n))\s*"
_LINE_END = r"(?=\n|\Z)"


@dataclass(frozen=True)
class HeadingMatch:
    """A heading occurrence: trimmed heading text and its span in the text."""

    text: str
    start: int
    end: int


class HeadingMatcher:
    """Find heading lines with a single compiled pattern."""

    name = "base"
    pattern: re.Pattern[str]

    def find(self, text: str) -> List[HeadingMatch]:
        return [
            HeadingMatch(text=match.group(0).strip(), start=match.start(), end=match.end())
            for match in self.pattern.finditer(text)
        ]


class StructuredHeadingMatcher(HeadingMatcher):
    """Keyword headings such as ``CHAPTER IV``, ``Livre premier`` or ``ACTE 2``."""

    name = "structured"
    pattern = re.compile(
        _LINE_START
        + r"(?:" + "|".join(HEADING_KEYWORDS) + r")[^\S\n]+"
        + r"(?:[IVXLCDM0-9A-Z]+|" + "|".join(FRENCH_ORDINALS) + r")"
        + r"[^\n]{0,100}"
        + _LINE_END,
        re.IGNORECASE,
    )


class RomanNumeralMatcher(HeadingMatcher):
    """Lines holding nothing but an upper-case Roman numeral, e.g. ``XIV.``."""

    name = "roman"
    pattern = re.compile(_LINE_START + r"[IVXLCDM]+\.?[^\S\n]*" + _LINE_END)


DEFAULT_MATCHERS: Tuple[HeadingMatcher, ...] = (
    StructuredHeadingMatcher(),
    RomanNumeralMatcher(),
)


@dataclass(frozen=True)
class HeadingDetection:
    """Headings found in a text and the name of the matcher that found them."""

    matcher: str
    matches: Tuple[HeadingMatch, ...]


def detect_headings(
    text: str,
    matchers: Sequence[HeadingMatcher] = DEFAULT_MATCHERS,
    min_matches: int = 3,
) -> HeadingDetection:
    """Run *matchers* in order and return the first result with enough headings.

    When no matcher reaches *min_matches*, the result of the last matcher that
    found anything is used: a short keyword result survives only when the
    fallback finds nothing. Results of different matchers are never merged.
    """

    if not matchers:
        raise ValueError("At least one heading matcher is required")
    fallback = HeadingDetection(matcher=matchers[-1].name, matches=())
    for matcher in matchers:
        detection = HeadingDetection(matcher=matcher.name, matches=tuple(matcher.find(text)))
        if len(detection.matches) >= min_matches:
            return detection
        if detection.matches:
            fallback = detection
    return fallback


__all__ = [
    "DEFAULT_MATCHERS",
    "FRENCH_ORDINALS",
    "HEADING_KEYWORDS",
    "HeadingDetection",
    "HeadingMatch",
    "HeadingMatcher",
    "RomanNumeralMatcher",
    "StructuredHeadingMatcher",
    "detect_headings",
]
