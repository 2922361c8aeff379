# Honeycomb layout primitives: size/accent resolution, hex cell rendering,
# staggered grid and portfolio mosaic arrangement, unread badges.

from .badges import format_all, format_badge
from .errors import InvalidConfiguration
from .grid import HoneycombGrid
from .layout import DEFAULT_LAYOUT, DEFAULT_PALETTE, HoneycombLayout, Palette
from .models import (
    Badge, Box, EmbeddedContent, EmptySlot, GeometryParams, GlyphContent,
    GradientAccent, GridRow, HexCell, ImageContent, MosaicLayout, SolidAccent,
    VisualNode,
)
from .mosaic import PortfolioMosaic
from .renderer import HexShapeRenderer, avatar_cell, button_cell, portfolio_cell, stat_cell
from .types import AccentKey, CellFamily, SizeKey, Trend
from .variants import resolve, resolve_accent, resolve_geometry

__all__ = [
    "AccentKey", "Badge", "Box", "CellFamily", "DEFAULT_LAYOUT", "DEFAULT_PALETTE",
    "EmbeddedContent", "EmptySlot", "GeometryParams", "GlyphContent", "GradientAccent",
    "GridRow", "HexCell", "HexShapeRenderer", "HoneycombGrid", "HoneycombLayout",
    "ImageContent", "InvalidConfiguration", "MosaicLayout", "Palette", "PortfolioMosaic",
    "SizeKey", "SolidAccent", "Trend", "VisualNode",
    "avatar_cell", "button_cell", "format_all", "format_badge", "portfolio_cell",
    "resolve", "resolve_accent", "resolve_geometry", "stat_cell",
]
