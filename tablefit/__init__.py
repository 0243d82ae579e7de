# tablefit/__init__.py
"""Unicode-aware fixed-width tables that drop columns to fit.

Rows are measured in display width, so CJK text and emoji line up in a
terminal. When the table is wider than the available space, the columns
with the lowest priority are removed until it fits.

Example:
    from tablefit import Align, Table

    table = Table([
        ["Title", "Artist", "Year"],
        ["Once in a Lifetime", "Talking Heads", "1981"],
    ], 25)
    table.set_priorities([2, 0, 1])
    table.set_surround(True)
    table.set_alignment(Align.RIGHT)
    for line in table.render() or []:
        print(line)
"""

from .align import Align, align_text, around, between, center, left, right
from .display_width import display_width, find_longest
from .table import Data, Table

__all__ = [
    "Align",
    "Data",
    "Table",
    "align_text",
    "around",
    "between",
    "center",
    "display_width",
    "find_longest",
    "left",
    "right",
]
