# tablefit/align.py
"""Alignment primitives for fixed-width terminal output.

Every function measures content by display width, pads with single
spaces, and returns None when the content does not fit the requested
space. Nothing is ever truncated: the caller decides what to drop.

Example:
    from tablefit.align import around, between

    between(["Title", "Artist", "Album"], 20)  # "Title  Artist  Album"
    around(["Title", "Artist", "Album"], 24)   # "  Title  Artist  Album  "
"""

from enum import Enum
from typing import List, Optional, Sequence, Union

from .display_width import display_width


class Align(Enum):
    """How a cell is positioned within its column."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def center(text: str, space: int) -> Optional[str]:
    """Center text within space columns.

    When the leftover space is odd, the extra column goes to the right.

    Returns:
        The padded string, or None if text is wider than space.
    """
    width = display_width(text)
    if width > space:
        return None
    left_over = space - width
    each = left_over // 2
    return " " * each + text + " " * (left_over - each)


def left(text: str, space: int) -> Optional[str]:
    """Align text to the left, filling the remainder with trailing blanks.

    Returns:
        The padded string, or None if text is wider than space.
    """
    width = display_width(text)
    if width > space:
        return None
    return text + " " * (space - width)


def right(text: str, space: int) -> Optional[str]:
    """Align text to the right, filling the remainder with leading blanks.

    Returns:
        The padded string, or None if text is wider than space.
    """
    width = display_width(text)
    if width > space:
        return None
    return " " * (space - width) + text


def align_text(text: str, space: int, mode: Union[Align, str] = Align.LEFT) -> Optional[str]:
    """Align text using the given mode ('left', 'center' or 'right')."""
    mode = Align(mode)
    if mode is Align.RIGHT:
        return right(text, space)
    elif mode is Align.CENTER:
        return center(text, space)
    return left(text, space)


def _gaps(left_over: int, pad_places: int) -> List[int]:
    """Split left_over columns into pad_places gaps, extras to the leftmost."""
    each, remainder = divmod(left_over, pad_places)
    return [each + 1 if i < remainder else each for i in range(pad_places)]


def between(fragments: Sequence[str], space: int) -> Optional[str]:
    """Lay out fragments left to right with blank gaps between them.

    The outer edges get no padding. Leftover space is spread as evenly as
    possible, with any remainder going to the leftmost gaps.

    Args:
        fragments: Strings to lay out, in order.
        space: Total display width of the result.

    Returns:
        A string exactly space columns wide, or None if the fragments
        are wider than space.
    """
    width = sum(display_width(f) for f in fragments)
    if width > space:
        return None

    if not fragments:
        return " " * space
    if len(fragments) == 1:
        return left(fragments[0], space)

    gaps = _gaps(space - width, len(fragments) - 1)
    parts = []
    for fragment, gap in zip(fragments, gaps):
        parts.append(fragment)
        parts.append(" " * gap)
    parts.append(fragments[-1])
    return "".join(parts)


def around(fragments: Sequence[str], space: int) -> Optional[str]:
    """Lay out fragments with blank gaps between them and on both edges.

    Same as between(), except there are len(fragments) + 1 gaps and a
    single fragment is centered.

    Returns:
        A string exactly space columns wide, or None if the fragments
        are wider than space.
    """
    width = sum(display_width(f) for f in fragments)
    if width > space:
        return None

    if not fragments:
        return " " * space
    if len(fragments) == 1:
        return center(fragments[0], space)

    gaps = _gaps(space - width, len(fragments) + 1)
    parts = [" " * gaps[0]]
    for fragment, gap in zip(fragments, gaps[1:]):
        parts.append(fragment)
        parts.append(" " * gap)
    return "".join(parts)
