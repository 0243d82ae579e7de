# tablefit/display_width.py
"""Display width utilities for terminal rendering.

Measures how many terminal columns a string occupies. Grapheme
sequences (zero-width joiner emoji, variation selectors, combining
marks) are measured as a whole by wcwidth; East Asian Ambiguous
characters can be widened for CJK terminals.
"""

import os
import unicodedata
from typing import Iterable

import wcwidth

# Environment variable selecting the width of East Asian Ambiguous characters
AMBIGUOUS_WIDTH_ENV = "TABLEFIT_AMBIGUOUS_WIDTH"


def _wide_ambiguous() -> bool:
    """True when TABLEFIT_AMBIGUOUS_WIDTH asks for wide ambiguous characters."""
    return os.environ.get(AMBIGUOUS_WIDTH_ENV, "1") == "2"


def display_width(text: str) -> int:
    """Calculate the display width of a string.

    Control characters count 0 columns. Everything else is measured by
    wcwidth.wcswidth, so a ZWJ family emoji or a heart with VS16 is two
    columns. With TABLEFIT_AMBIGUOUS_WIDTH=2 each narrow East Asian
    Ambiguous character (e.g. box-drawing) counts one extra column.

    Args:
        text: The string to measure.

    Returns:
        The display width in terminal columns.
    """
    width = wcwidth.wcswidth(text)
    if width < 0:
        # wcswidth gives up on control characters
        text = "".join(char for char in text if wcwidth.wcwidth(char) >= 0)
        width = max(wcwidth.wcswidth(text), 0)

    if _wide_ambiguous():
        width += sum(
            1 for char in text
            if unicodedata.east_asian_width(char) == "A" and wcwidth.wcwidth(char) == 1
        )
    return width


def find_longest(cells: Iterable[str]) -> int:
    """Return the widest display width among cells, or 0 if there are none."""
    return max((display_width(cell) for cell in cells), default=0)
