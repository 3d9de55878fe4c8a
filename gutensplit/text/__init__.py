"""Text cleanup and chapter segmentation."""

from .boilerplate import find_body_span, strip_boilerplate
from .chapters import SegmentationOptions, build_chapters, split_chapters
from .headings import (
    HeadingDetection,
    HeadingMatch,
    HeadingMatcher,
    RomanNumeralMatcher,
    StructuredHeadingMatcher,
    detect_headings,
)
from .normalize import NormalizationOptions, Normalizer, normalize_text

__all__ = [
    "HeadingDetection",
    "HeadingMatch",
    "HeadingMatcher",
    "NormalizationOptions",
    "Normalizer",
    "RomanNumeralMatcher",
    "SegmentationOptions",
    "StructuredHeadingMatcher",
    "build_chapters",
    "detect_headings",
    "find_body_span",
    "normalize_text",
    "split_chapters",
    "strip_boilerplate",
]
