# hexcomb/layout.py
from dataclasses import dataclass


@dataclass(frozen=True)
class HoneycombLayout:
    # Cell composition
    content_inset: int = 3          # border ring width around the content hexagon
    base_font_size: int = 16        # text_scale 1.0
    online_dot: int = 16            # online indicator diameter
    online_margin: int = 4          # from bottom/right edge of the cell box
    badge_height: int = 16          # pill height (also min width)
    badge_pad_x: int = 4
    badge_font_size: int = 10
    badge_offset_top: int = -4      # negative: pokes out above the cell
    badge_offset_right: int = -8    # negative: pokes out past the right edge
    label_gap: int = 8              # icon circle -> label in button cells
    sparkline_width: int = 64
    sparkline_height: int = 24
    sparkline_gap: int = 8          # value/trend -> sparkline in stat cells

    # Honeycomb grid
    column_gap: int = 16
    row_gap: int = 8
    stagger_offset: int = 64        # 4rem shift of every odd row

    # Portfolio mosaic
    mosaic_slot_gap: int = 8
    mosaic_row_gap: int = 4
    mosaic_overlap: int = 16        # row 1 pulled up into row 0's gaps
    mosaic_top_slots: int = 3
    mosaic_bottom_slots: int = 2


@dataclass(frozen=True)
class Palette:
    # Surface / text colours are inputs, not computed here
    surface: str = "#FFFFFF"
    surface_secondary: str = "#F3F4F6"
    text_primary: str = "#111827"
    text_muted: str = "#9CA3AF"
    success: str = "#22C55E"
    error: str = "#EF4444"
    online: str = "#22C55E"
    badge_text: str = "#FFFFFF"

    def color_class(self, name: str) -> str:
        return {
            "success": self.success,
            "error": self.error,
            "muted": self.text_muted,
        }.get(name, self.text_muted)


DEFAULT_LAYOUT = HoneycombLayout()
DEFAULT_PALETTE = Palette()
