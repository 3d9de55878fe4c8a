"""Text normalization helpers."""

from __future__ import annotations

from dataclasses import dataclass
import re

_BLANK_RUN = re.compile(r"\n{3,}")


@dataclass
class NormalizationOptions:
    """Configuration toggles for text normalization."""

    canonical_line_endings: bool = True
    collapse_blank_lines: bool = True


class Normalizer:
    """Normalize raw book text according to configured options.

    Output is never longer than the input and normalizing twice gives the
    same result as normalizing once.
    """

    def __init__(self, options: NormalizationOptions | None = None) -> None:
        self.options = options or NormalizationOptions()

    def normalize(self, text: str) -> str:
        if self.options.canonical_line_endings:
            text = self._fix_line_endings(text)
        if self.options.collapse_blank_lines:
            text = self._collapse_blank_lines(text)
        return text

    def _fix_line_endings(self, text: str) -> str:
        return text.replace("\r\n", "\n").replace("\r", "\n")

    def _collapse_blank_lines(self, text: str) -> str:
        return _BLANK_RUN.sub("\n\n", text)


def normalize_text(text: str) -> str:
    """Normalize *text* with the default options."""

    return Normalizer().normalize(text)


__all__ = ["Normalizer", "NormalizationOptions", "normalize_text"]
