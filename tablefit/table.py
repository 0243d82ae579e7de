# tablefit/table.py
"""Column-fitting table renderer for fixed-width terminals.

A Table holds rows of text cells and a space budget. Rendering measures
each column by display width and, when the whole table does not fit,
drops the least important columns until it does.

Example:
    from tablefit import Align, Table

    table = Table([
        ["First name", "Surname", "Telephone"],
        ["John", "Smith", "04529834125"],
    ], 24)
    # First name matters most, surname least
    table.set_priorities([2, 0, 1])
    print("\n".join(table.render()))
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from .align import Align, align_text, around, between
from .display_width import find_longest

logger = logging.getLogger(__name__)

# Rows of cells, as accepted by Table and returned by Table.rows (public)
Data = List[List[str]]


def _pad_places(column_count: int, surround: bool) -> int:
    """Number of padding gaps a row of column_count cells needs."""
    if surround:
        return column_count + 1
    return max(column_count - 1, 0)


class Table:
    """Renders rows of text into lines of an exact display width.

    Configuration (priorities, alignment, surround, space) can be changed
    at any time; render() always reflects the current values and never
    modifies the table.
    """

    def __init__(self, rows: Iterable[Iterable[Any]], space: int):
        """Create a table from rows of cells.

        Args:
            rows: Rows of cells; each cell is converted with str().
                Rows are not checked for equal length here, a ragged
                table only fails at render time.
            space: Total display width available to each rendered line.
        """
        self._rows: Data = [[str(cell) for cell in row] for row in rows]
        self._priorities: List[int] = []
        self._alignment = Align.LEFT
        self._surround = False
        self._space = 0
        self.set_space(space)

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return (
            f"Table(rows={len(self._rows)}, space={self._space}, "
            f"alignment={self._alignment.value}, surround={self._surround})"
        )

    # ==================== Configuration ====================

    @property
    def rows(self) -> Data:
        """Copy of the table's rows."""
        return [list(row) for row in self._rows]

    @property
    def space(self) -> int:
        return self._space

    @property
    def priorities(self) -> List[int]:
        return list(self._priorities)

    @property
    def alignment(self) -> Align:
        return self._alignment

    @property
    def surround(self) -> bool:
        return self._surround

    def set_priorities(self, priorities: Sequence[int]) -> None:
        """Set the priority of each column, by position.

        The higher the number, the more important the column. When space
        is short, the lowest priority column is removed first. Columns
        without an entry count as priority 0.

        Raises:
            ValueError: If any priority is negative.
        """
        priorities = list(priorities)
        if any(p < 0 for p in priorities):
            raise ValueError(f"Priorities must be non-negative: {priorities}")
        self._priorities = priorities

    def set_alignment(self, alignment: Union[Align, str]) -> None:
        """Set the alignment of every cell ('left', 'center' or 'right').

        Raises:
            ValueError: If alignment is not a known mode.
        """
        self._alignment = Align(alignment)

    def set_surround(self, surround: bool) -> None:
        """When true, padding is also placed before the first and after the last column."""
        self._surround = bool(surround)

    def set_space(self, space: int) -> None:
        """Set the total display width, e.g. after a terminal resize.

        Raises:
            ValueError: If space is negative.
        """
        if space < 0:
            raise ValueError(f"Space must be non-negative: {space}")
        self._space = space

    def configure(self, config: Optional[Dict[str, Any]] = None) -> None:
        """Apply several settings at once.

        Args:
            config: Dict with optional settings:
                - space: Total display width
                - priorities: Column priorities
                - alignment: 'left', 'center', 'right' or an Align
                - surround: Pad the outer edges
        """
        config = config or {}
        if "space" in config:
            self.set_space(config["space"])
        if "priorities" in config:
            self.set_priorities(config["priorities"])
        if "alignment" in config:
            self.set_alignment(config["alignment"])
        if "surround" in config:
            self.set_surround(config["surround"])

    # ==================== Rendering ====================

    def render(self) -> Optional[List[str]]:
        """Render every row of the table.

        Returns:
            One string per row, each exactly `space` columns wide, or
            None if the table cannot be made to fit.
        """
        return self.render_partial(0)

    def render_partial(self, offset: int) -> Optional[List[str]]:
        """Render only the rows from index offset onwards.

        Useful for scrolling a table taller than the terminal. Column
        widths and evictions are computed from the rendered rows only.

        Returns:
            One string per rendered row (an empty list when offset is at
            or past the end), or None if the rows are ragged or cannot be
            made to fit.

        Raises:
            ValueError: If offset is negative.
        """
        if offset < 0:
            raise ValueError(f"Offset must be non-negative: {offset}")
        if offset >= len(self._rows):
            return []

        data = [list(row) for row in self._rows[offset:]]

        # The first rendered row decides how many columns there are
        column_count = len(data[0])
        for index, row in enumerate(data):
            if len(row) < column_count:
                logger.debug(
                    "Row %d has %d cells, expected %d",
                    offset + index, len(row), column_count,
                )
                return None
            del row[column_count:]

        limits = [find_longest(row[i] for row in data) for i in range(column_count)]
        priorities = {
            column: self._priorities[column] if column < len(self._priorities) else 0
            for column in range(column_count)
        }
        # Original column index of each surviving column
        columns = list(range(column_count))

        while columns and sum(limits) + _pad_places(len(columns), self._surround) > self._space:
            rm = min(range(len(columns)), key=lambda i: (priorities[columns[i]], i))
            logger.debug(
                "Evicting column %d (priority %d) to fit %d columns",
                columns[rm], priorities[columns[rm]], self._space,
            )
            for row in data:
                del row[rm]
            del limits[rm]
            del priorities[columns.pop(rm)]

        join = around if self._surround else between
        result = []
        for row in data:
            cells = []
            for cell, limit in zip(row, limits):
                aligned = align_text(cell, limit, self._alignment)
                if aligned is None:
                    return None
                cells.append(aligned)
            line = join(cells, self._space)
            if line is None:
                logger.debug("Row does not fit in %d columns", self._space)
                return None
            result.append(line)
        return result
