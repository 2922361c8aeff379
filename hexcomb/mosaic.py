# hexcomb/mosaic.py
from __future__ import annotations

from itertools import islice
from typing import Callable, Iterable, List, Optional

from .layout import DEFAULT_LAYOUT, HoneycombLayout
from .models import EmptySlot, GridRow, HexCell, MosaicLayout, Slot
from .renderer import portfolio_cell
from .types import CellFamily
from .variants import resolve_geometry

ImageRef = Optional[str]


class PortfolioMosaic:
    """
    Fixed-capacity honeycomb mosaic: three slots on top, two nested below.

    - images beyond the fifth are dropped
    - missing (or empty) images become EmptySlot placeholders
    - row 1 keeps its overlap and offset even when every slot is empty
    """

    def __init__(self, layout: HoneycombLayout = DEFAULT_LAYOUT,
                 size: str = "medium",
                 cell_factory: Optional[Callable[[int, str], HexCell]] = None):
        self.L = layout
        self.size = size
        self.geometry = resolve_geometry(size, CellFamily.PORTFOLIO, layout)
        self.cell_factory = cell_factory

    @property
    def capacity(self) -> int:
        return self.L.mosaic_top_slots + self.L.mosaic_bottom_slots

    def _slot(self, index: int, ref: ImageRef) -> Slot:
        if not ref:
            return EmptySlot(index)
        if self.cell_factory is not None:
            return self.cell_factory(index, ref)
        return portfolio_cell(f"portfolio-{index}", ref, size=self.size, layout=self.L)

    def row_offset_x(self) -> int:
        # bottom row is shorter by one slot; centering shifts it half a pitch
        pitch = self.geometry.outer_width + self.L.mosaic_slot_gap
        return pitch * (self.L.mosaic_top_slots - self.L.mosaic_bottom_slots) // 2

    def arrange(self, images: Iterable[ImageRef]) -> MosaicLayout:
        top_n = self.L.mosaic_top_slots
        placed: List[ImageRef] = list(islice(images or (), self.capacity))
        placed += [None] * (self.capacity - len(placed))

        slots = [self._slot(i, ref) for i, ref in enumerate(placed)]
        offset = self.row_offset_x()
        return MosaicLayout(
            top=GridRow(index=0, cells=tuple(slots[:top_n]), stagger_offset=0),
            bottom=GridRow(index=1, cells=tuple(slots[top_n:]), stagger_offset=offset),
            row_overlap=self.L.mosaic_overlap,
            row_offset_x=offset,
            slot_geometry=self.geometry,
        )


def arrange(images: Iterable[ImageRef], layout: HoneycombLayout = DEFAULT_LAYOUT) -> MosaicLayout:
    return PortfolioMosaic(layout).arrange(images)
