import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from hexcomb.badges import format_badge
from hexcomb.grid import arrange
from hexcomb.models import Box, GlyphContent, HexCell, SolidAccent
from hexcomb.mosaic import PortfolioMosaic, arrange as arrange_mosaic
from hexcomb.renderer import (
    PLACEHOLDER_GLYPH, HexShapeRenderer, avatar_cell, button_cell, portfolio_cell, stat_cell,
)
from hexcomb.variants import resolve


class CellRenderTests(unittest.TestCase):
    def setUp(self):
        self.r = HexShapeRenderer()

    def test_three_layers_for_avatar_with_image(self):
        node = self.r.render(avatar_cell("u1", "me.jpg"))
        self.assertEqual([c.role for c in node.children], ["border", "content"])
        border, content = node.children
        self.assertEqual(border.box, Box(0, 0, 80, 96))
        self.assertEqual(content.box, Box(3, 3, 74, 90))
        self.assertEqual(content.clip, "hexagon")
        image = content.children[0]
        self.assertEqual((image.shape, image.source, image.fit), ("image", "me.jpg", "cover"))

    def test_missing_image_falls_back_to_initial(self):
        node = self.r.render(avatar_cell("u2", None, fallback="MC", size="xl"))
        glyph = node.find("glyph")[0]
        self.assertEqual(glyph.text, "MC")
        self.assertEqual(glyph.font_size, 30)
        self.assertEqual(node.find("image"), [])

    def test_glyph_content(self):
        geometry, accent = resolve("small", "white")
        node = self.r.render(HexCell("g", GlyphContent("?"), geometry, accent))
        self.assertEqual(node.find("glyph")[0].font_size, 14)

    def test_online_indicator_bottom_right(self):
        node = self.r.render(avatar_cell("u3", "a.png", online=True))
        dot = node.find("online")[0]
        self.assertEqual(dot.box, Box(60, 76, 16, 16))
        self.assertEqual(self.r.render(avatar_cell("u4", "a.png")).find("online"), [])

    def test_badge_top_right_only_when_visible(self):
        node = self.r.render(avatar_cell("u5", "a.png", badge=format_badge(12, "chat")))
        badge = node.find("badge")[0]
        self.assertEqual(badge.box, Box(68, -4, 20, 16))
        self.assertEqual(badge.children[0].text, "9+")

        hidden = self.r.render(avatar_cell("u6", "a.png", badge=format_badge(0, "chat")))
        self.assertEqual(hidden.find("badge"), [])

    def test_active_button_overrides_accent(self):
        plain = self.r.render(button_cell("b", "*", "Pros", border_accent="pros"))
        active = self.r.render(button_cell("b", "*", "Pros", border_accent="pros", active=True))
        self.assertEqual(plain.find("border")[0].fill, SolidAccent("#2F6FED"))
        self.assertEqual(active.find("border")[0].fill, SolidAccent("#FF7A00"))

    def test_button_content_positioned_inside_inset(self):
        node = self.r.render(button_cell("b", "*", "Jobs"))
        label = node.find("label")[0]
        self.assertEqual(label.text, "Jobs")
        self.assertEqual(label.box.x, 3)
        icon = node.find("icon")[0]
        self.assertEqual(icon.box.width, 40)
        self.assertEqual(icon.fill, "#FF7A0020")

    def test_stat_trend_rows(self):
        up = self.r.render(stat_cell("s", "Users", 1284, trend="up", trend_value="+12%"))
        trend = up.find("trend")[0]
        self.assertEqual(trend.text, "↗ +12%")
        self.assertEqual(trend.fill, "#22C55E")
        self.assertEqual(up.find("label")[0].text, "USERS")

        absent = self.r.render(stat_cell("s", "Users", 1284))
        self.assertEqual(absent.find("trend"), [])
        unknown = self.r.render(stat_cell("s", "Users", 1284, trend="sideways"))
        self.assertEqual(unknown.find("trend"), [])

    def test_stat_cell_is_one_full_bleed_surface(self):
        node = self.r.render(stat_cell("s", "Users", 1284, icon="#"))
        self.assertEqual([c.role for c in node.children], ["content"])
        content = node.children[0]
        self.assertEqual(content.box, Box(0, 0, 128, 147))
        self.assertEqual(content.fill, "#F3F4F6")
        self.assertEqual(node.find("icon")[0].fill, "#FF7A00")

    def test_stat_sparkline_under_value(self):
        plain = self.r.render(stat_cell("s", "Jobs", 342))
        self.assertEqual(plain.find("sparkline"), [])

        node = self.r.render(stat_cell("s", "Jobs", 342, trend="up", sparkline=True))
        line = node.find("sparkline")[0]
        self.assertEqual(line.shape, "path")
        self.assertEqual(line.fill, "#FF7A0080")
        self.assertEqual((line.box.x, line.box.width, line.box.height), (32, 64, 24))
        self.assertGreater(line.box.y, node.find("trend")[0].box.bottom)
        self.assertTrue(all(line.box.x - 1e-6 <= x <= line.box.right + 1e-6 for x, _ in line.points))
        self.assertTrue(all(line.box.y - 1e-6 <= y <= line.box.bottom + 1e-6 for _, y in line.points))

    def test_image_node_carries_fallback_initials(self):
        node = self.r.render(avatar_cell("u", "me.jpg", fallback="MC"))
        image = node.find("image")[0]
        self.assertEqual(image.children[0].text, "MC")
        self.assertEqual(image.children[0].font_size, 20)
        self.assertEqual(image.children[0].fill, "#9CA3AF")

    def test_portfolio_cell_has_no_border(self):
        node = self.r.render(portfolio_cell("p", "a.jpg"))
        self.assertEqual([c.role for c in node.children], ["content"])
        self.assertEqual(node.children[0].box, Box(0, 0, 112, 128))


class CompositionTests(unittest.TestCase):
    def setUp(self):
        self.r = HexShapeRenderer()

    def test_grid_staggers_odd_rows(self):
        cells = [button_cell(f"b{i}", "*", str(i)) for i in range(3)]
        tree = self.r.render_grid(arrange(cells, 2))
        xs = [(c.key, c.box.x, c.box.y) for c in tree.children]
        self.assertEqual(xs, [("b0", 0, 0), ("b1", 128, 0), ("b2", 64, 136)])

    def test_mosaic_bottom_row_nestles(self):
        tree = self.r.render_mosaic(arrange_mosaic(["a.jpg"]))
        self.assertEqual(len(tree.children), 5)
        self.assertEqual(tree.children[0].role, "cell")
        self.assertEqual([c.role for c in tree.children[1:]], ["empty"] * 4)
        self.assertEqual([c.box.x for c in tree.children], [0, 120, 240, 60, 180])
        self.assertEqual([c.box.y for c in tree.children], [0, 0, 0, 116, 116])
        self.assertEqual(tree.children[4].find("glyph")[0].text, PLACEHOLDER_GLYPH)

    def test_mosaic_uses_its_own_slot_size(self):
        mosaic = PortfolioMosaic(size="large").arrange(["a", "b", "c", "d"])
        tree = self.r.render_mosaic(mosaic)
        slots = [(c.box.x, c.box.y, c.box.width, c.box.height) for c in tree.children]
        self.assertEqual(slots, [(0, 0, 144, 160), (152, 0, 144, 160), (304, 0, 144, 160),
                                 (76, 148, 144, 160), (228, 148, 144, 160)])
        self.assertEqual(tree.children[4].role, "empty")
        for left, right in zip(tree.children[:2], tree.children[1:3]):
            self.assertGreaterEqual(right.box.x - left.box.x, left.box.width)

    def test_moved_nodes_keep_relative_layout(self):
        node = self.r.render(avatar_cell("u", "a.png")).moved(10, 20)
        self.assertEqual(node.find("content")[0].box, Box(13, 23, 74, 90))


if __name__ == "__main__":
    unittest.main()
