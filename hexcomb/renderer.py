# hexcomb/renderer.py
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .geom import centered_box, curve_points, inset_box
from .layout import DEFAULT_LAYOUT, DEFAULT_PALETTE, HoneycombLayout, Palette
from .models import (
    AccentParams, Badge, Box, EmbeddedContent, EmptySlot, GeometryParams,
    GlyphContent, GradientAccent, GridRow, HexCell, ImageContent, MosaicLayout,
    Slot, SolidAccent, VisualNode,
)
from .types import SPARKLINE_CURVE, SPARKLINE_VIEWBOX, TREND_STYLES, CellFamily, Trend
from .variants import resolve, resolve_accent, resolve_geometry

PLACEHOLDER_GLYPH = "□"
CHAR_WIDTH_EM = 0.6     # rough advance of a digit, for sizing badge pills


def _font_px(layout: HoneycombLayout, scale: float) -> int:
    return max(1, round(layout.base_font_size * scale))


def _bounds(nodes: Iterable[VisualNode]) -> Box:
    boxes = [n.box for n in nodes]
    if not boxes:
        return Box(0, 0, 0, 0)
    x0 = min(b.x for b in boxes); y0 = min(b.y for b in boxes)
    x1 = max(b.right for b in boxes); y1 = max(b.bottom for b in boxes)
    return Box(x0, y0, x1 - x0, y1 - y0)


class HexShapeRenderer:
    """
    Turns a HexCell into a three-layer VisualNode tree:
      - border  : full-size hexagon filled with the cell accent
      - content : inset hexagon clipped to the same silhouette
                  (cover-fit image, fallback glyph, or an embedded node)
      - overlay : online dot bottom-right, unread badge top-right
    Cells are laid out with their top-left corner at (0, 0); grid and mosaic
    composition move them into place.
    """

    def __init__(self, layout: HoneycombLayout = DEFAULT_LAYOUT, palette: Palette = DEFAULT_PALETTE):
        self.L = layout
        self.P = palette

    # ---------- layers ----------
    def _accent_for(self, cell: HexCell) -> Optional[AccentParams]:
        if not cell.is_active or cell.accent is None:
            return cell.accent
        # active always draws the primary border of the same accent family
        if isinstance(cell.accent, GradientAccent):
            return resolve_accent("primary", CellFamily.AVATAR)
        return resolve_accent("primary", CellFamily.BUTTON)

    def _border_layer(self, cell: HexCell, outer: Box) -> VisualNode:
        return VisualNode(role="border", shape="hexagon", box=outer,
                          fill=self._accent_for(cell), key=cell.id)

    def _glyph(self, box: Box, text: str, scale: float, key: str) -> VisualNode:
        return VisualNode(role="glyph", shape="text", box=box, text=text,
                          font_size=_font_px(self.L, scale),
                          fill=self.P.text_muted, key=key)

    def _content_layer(self, cell: HexCell, outer: Box) -> VisualNode:
        g = cell.geometry
        if cell.accent is None:
            box = outer
        else:
            box = centered_box(inset_box(outer, self.L.content_inset), g.inner_width, g.inner_height)

        content = cell.content
        # borderless cells (portfolio, stat) are one full-bleed secondary hexagon
        fill = self.P.surface if cell.accent is not None else self.P.surface_secondary
        if isinstance(content, ImageContent) and content.src:
            # painted instead of the image when the reference cannot be loaded
            fallback = self._glyph(box, content.fallback or PLACEHOLDER_GLYPH, g.text_scale, cell.id)
            inner = VisualNode(role="image", shape="image", box=box, source=content.src,
                               text=content.alt, fit="cover", key=cell.id, children=(fallback,))
        elif isinstance(content, ImageContent):
            fill = self.P.surface_secondary
            inner = self._glyph(box, content.fallback, g.text_scale, cell.id)
        elif isinstance(content, GlyphContent):
            fill = self.P.surface_secondary
            inner = self._glyph(box, content.text, g.text_scale, cell.id)
        elif isinstance(content, EmbeddedContent):
            inner = content.node.moved(box.x, box.y)
        else:
            raise TypeError(f"unsupported cell content: {type(content).__name__}")

        return VisualNode(role="content", shape="hexagon", box=box, fill=fill,
                          clip="hexagon", key=cell.id, children=(inner,))

    def _online_dot(self, cell: HexCell, outer: Box) -> VisualNode:
        d, m = self.L.online_dot, self.L.online_margin
        return VisualNode(role="online", shape="circle",
                          box=Box(outer.right - m - d, outer.bottom - m - d, d, d),
                          fill=self.P.online, key=cell.id)

    def _badge(self, badge: Badge, outer: Box, key: str) -> VisualNode:
        h = self.L.badge_height
        w = max(h, round(len(badge.text) * self.L.badge_font_size * CHAR_WIDTH_EM) + 2 * self.L.badge_pad_x)
        box = Box(outer.right - self.L.badge_offset_right - w, outer.y + self.L.badge_offset_top, w, h)
        label = VisualNode(role="badge_text", shape="text", box=box, text=badge.text,
                           font_size=self.L.badge_font_size, fill=self.P.badge_text, key=key)
        return VisualNode(role="badge", shape="pill", box=box, fill=self.P.error,
                          text=badge.owner_id, key=key, children=(label,))

    # ---------- public ----------
    def render(self, cell: HexCell) -> VisualNode:
        g = cell.geometry
        outer = Box(0, 0, g.outer_width, g.outer_height)

        layers: List[VisualNode] = []
        if cell.accent is not None:
            layers.append(self._border_layer(cell, outer))
        layers.append(self._content_layer(cell, outer))
        if cell.has_online_indicator:
            layers.append(self._online_dot(cell, outer))
        if cell.badge is not None and cell.badge.visible:
            layers.append(self._badge(cell.badge, outer, cell.id))

        return VisualNode(role="cell", shape="group", box=outer, key=cell.id, children=tuple(layers))

    def render_empty(self, slot: EmptySlot, geometry: GeometryParams) -> VisualNode:
        box = Box(0, 0, geometry.outer_width, geometry.outer_height)
        glyph = self._glyph(box, PLACEHOLDER_GLYPH, geometry.icon_size / self.L.base_font_size or 1.0,
                            f"empty-{slot.index}")
        return VisualNode(role="empty", shape="hexagon", box=box, fill=self.P.surface_secondary,
                          clip="hexagon", key=f"empty-{slot.index}", children=(glyph,))

    def render_slot(self, slot: Slot, geometry: GeometryParams) -> VisualNode:
        if isinstance(slot, EmptySlot):
            return self.render_empty(slot, geometry)
        return self.render(slot)

    def render_grid(self, rows: Sequence[GridRow], empty_geometry: Optional[GeometryParams] = None) -> VisualNode:
        """Places arranged rows: odd rows shifted right by their stagger offset."""
        empty_geometry = empty_geometry or resolve_geometry("medium", CellFamily.BUTTON, self.L)
        placed: List[VisualNode] = []
        y = 0.0
        for row in rows:
            x = float(row.stagger_offset)
            row_h = 0.0
            for slot in row.cells:
                node = self.render_slot(slot, empty_geometry)
                placed.append(node.moved(x, y))
                x += node.box.width + self.L.column_gap
                row_h = max(row_h, node.box.height)
            y += row_h + self.L.row_gap
        return VisualNode(role="grid", shape="group", box=_bounds(placed), children=tuple(placed))

    def render_mosaic(self, mosaic: MosaicLayout, slot_geometry: Optional[GeometryParams] = None) -> VisualNode:
        """Top row flush left, bottom row offset and pulled up into its gaps."""
        g = (slot_geometry or mosaic.slot_geometry
             or resolve_geometry("medium", CellFamily.PORTFOLIO, self.L))
        pitch = g.outer_width + self.L.mosaic_slot_gap
        y1 = g.outer_height + self.L.mosaic_row_gap - mosaic.row_overlap
        placed: List[VisualNode] = []
        for row in mosaic.rows:
            y = 0 if row.index == 0 else y1
            for j, slot in enumerate(row.cells):
                placed.append(self.render_slot(slot, g).moved(row.stagger_offset + j * pitch, y))
        return VisualNode(role="mosaic", shape="group", box=_bounds(placed), children=tuple(placed))


# ---------- cell builders ----------
def avatar_cell(cell_id: str,
                src: Optional[str] = None,
                *,
                alt: str = "",
                fallback: str = "",
                size: str = "medium",
                border_accent: str = "primary",
                online: bool = False,
                badge: Optional[Badge] = None,
                layout: HoneycombLayout = DEFAULT_LAYOUT) -> HexCell:
    geometry, accent = resolve(size, border_accent, CellFamily.AVATAR, layout)
    return HexCell(id=cell_id,
                   content=ImageContent(src=src, alt=alt, fallback=fallback),
                   geometry=geometry, accent=accent,
                   has_online_indicator=bool(online), badge=badge)


def button_cell(cell_id: str,
                icon: str,
                label: str,
                *,
                size: str = "medium",
                border_accent: str = "primary",
                active: bool = False,
                icon_bg: Optional[str] = None,
                badge: Optional[Badge] = None,
                layout: HoneycombLayout = DEFAULT_LAYOUT,
                palette: Palette = DEFAULT_PALETTE) -> HexCell:
    geometry, accent = resolve(size, border_accent, CellFamily.BUTTON, layout)
    tint = accent.color if isinstance(accent, SolidAccent) else palette.text_primary
    w, h = geometry.inner_width, geometry.inner_height
    d = geometry.icon_size
    label_px = _font_px(layout, geometry.text_scale)

    # icon circle stacked over the label, block centered in the content box
    top = (h - (d + layout.label_gap + label_px)) / 2
    circle_box = Box((w - d) / 2, top, d, d)
    icon_node = VisualNode(role="icon", shape="circle", box=circle_box,
                           fill=icon_bg or f"{tint}20", key=cell_id,
                           children=(VisualNode(role="icon_glyph", shape="text", box=circle_box,
                                                text=icon, font_size=max(1, d // 2),
                                                fill=tint, key=cell_id),))
    label_node = VisualNode(role="label", shape="text",
                            box=Box(0, circle_box.bottom + layout.label_gap, w, label_px),
                            text=label, font_size=label_px, fill=palette.text_primary, key=cell_id)
    body = VisualNode(role="button", shape="group", box=Box(0, 0, w, h), key=cell_id,
                      children=(icon_node, label_node))

    return HexCell(id=cell_id, content=EmbeddedContent(body), geometry=geometry,
                   accent=accent, is_active=bool(active), badge=badge)


def stat_cell(cell_id: str,
              label: str,
              value,
              *,
              icon: Optional[str] = None,
              trend=None,
              trend_value: str = "",
              sparkline: bool = False,
              size: str = "medium",
              layout: HoneycombLayout = DEFAULT_LAYOUT,
              palette: Palette = DEFAULT_PALETTE) -> HexCell:
    # borderless: the whole silhouette is the card surface
    geometry = resolve_geometry(size, CellFamily.STAT, layout)
    w, h = geometry.outer_width, geometry.outer_height
    value_px = _font_px(layout, geometry.text_scale)
    small_px = 10
    trend_px = 12
    primary = resolve_accent("primary", CellFamily.BUTTON).color

    lines = []
    if icon:
        lines.append(("icon", icon, value_px, primary))
    lines.append(("label", str(label).upper(), small_px, palette.text_muted))
    lines.append(("value", str(value), value_px, palette.text_primary))
    t = Trend.parse(trend)
    if t is not None:
        glyph, color_class = TREND_STYLES[t]
        text = f"{glyph} {trend_value}".strip()
        lines.append(("trend", text, trend_px, palette.color_class(color_class)))

    gap = 4
    block_h = sum(px for _, _, px, _ in lines) + gap * (len(lines) - 1)
    if sparkline:
        block_h += layout.sparkline_gap + layout.sparkline_height
    y = (h - block_h) / 2
    nodes = []
    for role, text, px, color in lines:
        nodes.append(VisualNode(role=role, shape="text", box=Box(0, y, w, px),
                                text=text, font_size=px, fill=color, key=cell_id))
        y += px + gap
    if sparkline:
        y += layout.sparkline_gap - gap
        box = Box((w - layout.sparkline_width) / 2, y, layout.sparkline_width, layout.sparkline_height)
        nodes.append(VisualNode(role="sparkline", shape="path", box=box, fill=f"{primary}80",
                                points=tuple(curve_points(SPARKLINE_CURVE, SPARKLINE_VIEWBOX, box)),
                                key=cell_id))
    body = VisualNode(role="stat", shape="group", box=Box(0, 0, w, h), key=cell_id, children=tuple(nodes))

    return HexCell(id=cell_id, content=EmbeddedContent(body), geometry=geometry, accent=None)


def portfolio_cell(cell_id: str,
                   src: Optional[str],
                   *,
                   alt: str = "",
                   size: str = "medium",
                   layout: HoneycombLayout = DEFAULT_LAYOUT) -> HexCell:
    # no border ring: the image fills the whole silhouette
    geometry = resolve_geometry(size, CellFamily.PORTFOLIO, layout)
    return HexCell(id=cell_id,
                   content=ImageContent(src=src, alt=alt, fallback=PLACEHOLDER_GLYPH),
                   geometry=geometry, accent=None)
