# hexcomb/variants.py
"""
Size / accent resolution.

Every lookup is total: an unknown size key becomes `medium`, an unknown accent
key becomes `primary`, an unknown family becomes `avatar`, and a key the
family's table does not carry falls back to that table's default row.
Resolution never raises.
"""
from __future__ import annotations

import logging
from typing import Tuple

from .layout import DEFAULT_LAYOUT, HoneycombLayout
from .models import AccentParams, GeometryParams, GradientAccent, SolidAccent
from .types import (
    FLAT_ACCENTS, GRADIENT_ACCENTS, SIZE_TABLES,
    AccentKey, CellFamily, SizeKey,
)

log = logging.getLogger(__name__)


def resolve_geometry(size_key, family: CellFamily = CellFamily.AVATAR,
                     layout: HoneycombLayout = DEFAULT_LAYOUT) -> GeometryParams:
    key = SizeKey.parse(size_key)
    table = SIZE_TABLES[CellFamily.parse(family)]
    if key in table:
        outer_w, outer_h, text_px, icon_px = table[key]
    else:
        log.debug("%s has no %s row, using medium", family, key.value)
        outer_w, outer_h, text_px, icon_px = table[SizeKey.MEDIUM]

    inset = layout.content_inset
    return GeometryParams(
        outer_width=outer_w,
        outer_height=outer_h,
        inner_width=outer_w - 2 * inset,
        inner_height=outer_h - 2 * inset,
        text_scale=text_px / layout.base_font_size,
        icon_size=icon_px,
    )


def resolve_accent(accent_key, family: CellFamily = CellFamily.AVATAR) -> AccentParams:
    key = AccentKey.parse(accent_key)
    if CellFamily.parse(family) is CellFamily.AVATAR:
        if key in GRADIENT_ACCENTS:
            start, end = GRADIENT_ACCENTS[key]
        else:
            log.debug("no gradient for accent %s, using primary", key.value)
            start, end = GRADIENT_ACCENTS[AccentKey.PRIMARY]
        return GradientAccent(start, end)

    if key in FLAT_ACCENTS:
        return SolidAccent(FLAT_ACCENTS[key])
    log.debug("no flat colour for accent %s, using primary", key.value)
    return SolidAccent(FLAT_ACCENTS[AccentKey.PRIMARY])


def resolve(size_key, accent_key, family: CellFamily = CellFamily.AVATAR,
            layout: HoneycombLayout = DEFAULT_LAYOUT) -> Tuple[GeometryParams, AccentParams]:
    """(size, accent) -> (GeometryParams, AccentParams). Never fails."""
    return resolve_geometry(size_key, family, layout), resolve_accent(accent_key, family)
