import math
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from hexcomb.errors import InvalidConfiguration
from hexcomb.grid import HoneycombGrid, arrange
from hexcomb.layout import HoneycombLayout
from hexcomb.renderer import button_cell


def _cells(n):
    return [button_cell(f"b{i}", "*", f"Item {i}") for i in range(n)]


class GridTests(unittest.TestCase):
    def test_row_count_and_widths(self):
        for columns in (1, 2, 3, 4, 7):
            for n in range(0, 12):
                rows = arrange(_cells(n), columns)
                self.assertEqual(len(rows), math.ceil(n / columns))
                for row in rows[:-1]:
                    self.assertEqual(len(row), columns)
                if rows:
                    self.assertLessEqual(len(rows[-1]), columns)

    def test_order_preserved(self):
        cells = _cells(5)
        rows = arrange(cells, 2)
        self.assertEqual([c.id for row in rows for c in row], [c.id for c in cells])

    def test_stagger_alternates(self):
        rows = arrange(_cells(9), 2)
        self.assertEqual([r.stagger_offset for r in rows], [0, 64, 0, 64, 0])
        self.assertEqual([r.index for r in rows], [0, 1, 2, 3, 4])

    def test_stagger_comes_from_layout(self):
        rows = HoneycombGrid(3, HoneycombLayout(stagger_offset=40)).arrange(_cells(6))
        self.assertEqual([r.stagger_offset for r in rows], [0, 40])

    def test_empty_items(self):
        self.assertEqual(arrange([], 3), [])

    def test_non_positive_columns_rejected(self):
        for bad in (0, -2, 1.5, True, None):
            with self.assertRaises(InvalidConfiguration):
                arrange(_cells(3), bad)


if __name__ == "__main__":
    unittest.main()
