# hexcomb/models.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class GeometryParams:
    outer_width: int
    outer_height: int
    inner_width: int
    inner_height: int
    text_scale: float
    icon_size: int = 0


@dataclass(frozen=True)
class GradientAccent:
    start: str
    end: str


@dataclass(frozen=True)
class SolidAccent:
    color: str


AccentParams = Union[GradientAccent, SolidAccent]


# ---------- cell content (tagged variant) ----------
@dataclass(frozen=True)
class ImageContent:
    src: Optional[str]
    alt: str = ""
    fallback: str = ""     # glyph/initial shown when src is empty
    kind: str = field(default="image", init=False)


@dataclass(frozen=True)
class GlyphContent:
    text: str
    kind: str = field(default="glyph", init=False)


@dataclass(frozen=True)
class EmbeddedContent:
    node: "VisualNode"
    kind: str = field(default="embedded", init=False)


Content = Union[ImageContent, GlyphContent, EmbeddedContent]


@dataclass(frozen=True)
class Badge:
    visible: bool
    text: str
    owner_id: str = ""


@dataclass(frozen=True)
class HexCell:
    id: str
    content: Content
    geometry: GeometryParams
    accent: Optional[AccentParams] = None
    is_active: bool = False
    has_online_indicator: bool = False
    badge: Optional[Badge] = None


@dataclass(frozen=True)
class EmptySlot:
    index: int


Slot = Union[HexCell, EmptySlot]


@dataclass(frozen=True)
class GridRow:
    index: int
    cells: Tuple[Slot, ...]
    stagger_offset: int = 0

    def __len__(self):
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)


@dataclass(frozen=True)
class MosaicLayout:
    """
    Fixed 3-over-2 portfolio mosaic. Row 1 sits `row_overlap` units higher
    than plain stacking would put it and `row_offset_x` units in from the left,
    so its slots nestle into the gaps of row 0.
    """
    top: GridRow
    bottom: GridRow
    row_overlap: int
    row_offset_x: int
    slot_geometry: Optional[GeometryParams] = None   # size every slot (filled or empty) is drawn at

    @property
    def rows(self) -> Tuple[GridRow, GridRow]:
        return (self.top, self.bottom)

    @property
    def slots(self) -> Tuple[Slot, ...]:
        return self.top.cells + self.bottom.cells

    @property
    def filled(self) -> int:
        return sum(1 for s in self.slots if not isinstance(s, EmptySlot))


# ---------- render output ----------
@dataclass(frozen=True)
class Box:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def moved(self, dx: float, dy: float) -> "Box":
        return Box(self.x + dx, self.y + dy, self.width, self.height)


@dataclass(frozen=True)
class VisualNode:
    role: str                                  # cell, border, content, image, glyph, online, badge, ...
    shape: str                                 # hexagon | circle | pill | text | image | path | group
    box: Box
    fill: Union[AccentParams, str, None] = None
    text: str = ""
    font_size: int = 0
    source: Optional[str] = None               # image reference
    fit: str = ""                              # "cover" for images
    clip: str = ""                             # silhouette children are clipped to
    key: str = ""                              # owning cell id
    points: Tuple[Tuple[float, float], ...] = ()  # polyline for shape="path"
    children: Tuple["VisualNode", ...] = ()

    def moved(self, dx: float, dy: float) -> "VisualNode":
        return replace(self,
                       box=self.box.moved(dx, dy),
                       points=tuple((px + dx, py + dy) for px, py in self.points),
                       children=tuple(c.moved(dx, dy) for c in self.children))

    def walk(self):
        yield self
        for c in self.children:
            yield from c.walk()

    def find(self, role: str):
        return [n for n in self.walk() if n.role == role]
