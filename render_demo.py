# render_demo.py
import logging

from hexcomb import (
    HexShapeRenderer, HoneycombGrid, PortfolioMosaic,
    avatar_cell, button_cell, format_all, stat_cell,
)
from hexcomb.paint import HexPainter
from demo_data import NAV, PORTFOLIO, STATS, UNREAD, USER_NAME

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")

renderer = HexShapeRenderer()
painter = HexPainter()
badges = format_all(UNREAD)

initials = "".join(part[0] for part in USER_NAME.split()[:2])
avatar = avatar_cell("me", None, fallback=initials, size="large", border_accent="pros", online=True)
painter.paint(renderer.render(avatar)).save("hexcomb_avatar.png")

buttons = [button_cell(i, icon, label, border_accent=accent, active=(i == "jobs"), badge=badges.get(i))
           for i, icon, label, accent in NAV]
grid = HoneycombGrid(columns=2).arrange(buttons)
painter.paint(renderer.render_grid(grid)).save("hexcomb_grid.png")

stats = [stat_cell(f"stat-{n}", label, value, trend=trend, trend_value=tv)
         for n, (label, value, trend, tv) in enumerate(STATS)]
painter.paint(renderer.render_grid(HoneycombGrid(columns=2).arrange(stats))).save("hexcomb_stats.png")

mosaic = PortfolioMosaic().arrange(PORTFOLIO)
painter.paint(renderer.render_mosaic(mosaic)).save("hexcomb_preview.png")
print(f"Saved hexcomb_preview.png ({mosaic.filled}/5 portfolio slots filled)")
