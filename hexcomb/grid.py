# hexcomb/grid.py
from typing import List, Sequence

from .errors import InvalidConfiguration
from .layout import DEFAULT_LAYOUT, HoneycombLayout
from .models import GridRow, Slot


class HoneycombGrid:
    """
    Splits an ordered list of cells into rows of `columns` and pushes every
    odd row right by a fixed stagger so neighbouring rows interlock.

    The stagger is one constant for all column counts; it only lines up a
    true hex tiling at two columns.
    """

    def __init__(self, columns: int = 2, layout: HoneycombLayout = DEFAULT_LAYOUT):
        if isinstance(columns, bool) or not isinstance(columns, int) or columns <= 0:
            raise InvalidConfiguration("columns", columns, "must be a positive integer")
        self.columns = columns
        self.L = layout

    def stagger_for(self, row_index: int) -> int:
        return self.L.stagger_offset if row_index % 2 == 1 else 0

    def arrange(self, items: Sequence[Slot]) -> List[GridRow]:
        items = list(items)
        rows: List[GridRow] = []
        for i, start in enumerate(range(0, len(items), self.columns)):
            rows.append(GridRow(index=i,
                                cells=tuple(items[start:start + self.columns]),
                                stagger_offset=self.stagger_for(i)))
        return rows


def arrange(items: Sequence[Slot], columns: int,
            layout: HoneycombLayout = DEFAULT_LAYOUT) -> List[GridRow]:
    return HoneycombGrid(columns, layout).arrange(items)
