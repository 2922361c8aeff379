# hexcomb/types.py
from enum import Enum
from typing import Dict, Tuple


class SizeKey(str, Enum):
    SMALL       = "small"
    MEDIUM      = "medium"
    LARGE       = "large"
    EXTRA_LARGE = "extra-large"

    @classmethod
    def parse(cls, key) -> "SizeKey":
        """Free-form key -> member; anything unrecognized is MEDIUM."""
        if isinstance(key, cls):
            return key
        norm = str(key or "").strip().lower()
        norm = SIZE_ALIASES.get(norm, norm)
        for member in cls:
            if member.value == norm:
                return member
        return cls.MEDIUM


class AccentKey(str, Enum):
    PRIMARY   = "primary"
    FEATURED  = "featured"
    PROS      = "pros"
    SCHEDULES = "schedules"
    MESSAGES  = "messages"
    MARKET    = "market"
    ANALYTICS = "analytics"
    WHITE     = "white"

    @classmethod
    def parse(cls, key) -> "AccentKey":
        """Free-form key -> member; anything unrecognized is PRIMARY."""
        if isinstance(key, cls):
            return key
        norm = str(key or "").strip().lower()
        for member in cls:
            if member.value == norm:
                return member
        return cls.PRIMARY


class CellFamily(str, Enum):
    AVATAR    = "avatar"      # gradient border, fallback initial
    BUTTON    = "button"      # flat border, icon circle + label
    PORTFOLIO = "portfolio"   # no border, cover image or placeholder
    STAT      = "stat"        # flat surface, label/value/trend

    @classmethod
    def parse(cls, key) -> "CellFamily":
        """Free-form key -> member; anything unrecognized is AVATAR."""
        if isinstance(key, cls):
            return key
        norm = str(key or "").strip().lower()
        for member in cls:
            if member.value == norm:
                return member
        return cls.AVATAR


class Trend(str, Enum):
    UP      = "up"
    DOWN    = "down"
    NEUTRAL = "neutral"

    @classmethod
    def parse(cls, key):
        """Returns None for an absent or unknown trend (the trend row is omitted)."""
        if isinstance(key, cls):
            return key
        norm = str(key or "").strip().lower()
        for member in cls:
            if member.value == norm:
                return member
        return None


SIZE_ALIASES: Dict[str, str] = {
    "sm": "small",
    "md": "medium",
    "lg": "large",
    "xl": "extra-large",
}

# ------------------------------------------------------------------------------
# Size tables: (outer_w, outer_h, text_px, icon_px) per family.
# Families without an entry for a key fall back to their MEDIUM row.
# ------------------------------------------------------------------------------
SizeRow = Tuple[int, int, int, int]

AVATAR_SIZES: Dict[SizeKey, SizeRow] = {
    SizeKey.SMALL:       (48,  56,  14, 0),
    SizeKey.MEDIUM:      (80,  96,  20, 0),
    SizeKey.LARGE:       (112, 128, 24, 0),
    SizeKey.EXTRA_LARGE: (144, 160, 30, 0),
}

BUTTON_SIZES: Dict[SizeKey, SizeRow] = {
    SizeKey.SMALL:  (80,  96,  12, 32),
    SizeKey.MEDIUM: (112, 128, 14, 40),
    SizeKey.LARGE:  (144, 160, 16, 48),
}

PORTFOLIO_SIZES: Dict[SizeKey, SizeRow] = {
    SizeKey.SMALL:  (80,  96,  16, 32),
    SizeKey.MEDIUM: (112, 128, 16, 32),
    SizeKey.LARGE:  (144, 160, 16, 32),
}

# 1 : 1.15 aspect like the dashboard stat cards
STAT_SIZES: Dict[SizeKey, SizeRow] = {
    SizeKey.SMALL:  (96,  110, 20, 0),
    SizeKey.MEDIUM: (128, 147, 24, 0),
    SizeKey.LARGE:  (160, 184, 30, 0),
}

SIZE_TABLES: Dict[CellFamily, Dict[SizeKey, SizeRow]] = {
    CellFamily.AVATAR:    AVATAR_SIZES,
    CellFamily.BUTTON:    BUTTON_SIZES,
    CellFamily.PORTFOLIO: PORTFOLIO_SIZES,
    CellFamily.STAT:      STAT_SIZES,
}

# ------------------------------------------------------------------------------
# Accent tables
# ------------------------------------------------------------------------------
CATEGORY_COLORS: Dict[AccentKey, str] = {
    AccentKey.PRIMARY:   "#FF7A00",
    AccentKey.FEATURED:  "#FFB800",
    AccentKey.PROS:      "#2F6FED",
    AccentKey.SCHEDULES: "#1FA463",
    AccentKey.MESSAGES:  "#8B5CF6",
    AccentKey.MARKET:    "#E94B8A",
    AccentKey.ANALYTICS: "#14B8C4",
}

# border gradients (avatar family): start -> end
GRADIENT_ACCENTS: Dict[AccentKey, Tuple[str, str]] = {
    AccentKey.PRIMARY:   (CATEGORY_COLORS[AccentKey.PRIMARY],   "#F97316"),
    AccentKey.FEATURED:  (CATEGORY_COLORS[AccentKey.FEATURED],  "#EAB308"),
    AccentKey.PROS:      (CATEGORY_COLORS[AccentKey.PROS],      "#3B82F6"),
    AccentKey.SCHEDULES: (CATEGORY_COLORS[AccentKey.SCHEDULES], "#22C55E"),
    AccentKey.MESSAGES:  (CATEGORY_COLORS[AccentKey.MESSAGES],  "#A855F7"),
    AccentKey.WHITE:     ("#FFFFFF", "#E5E7EB"),
}

# flat borders (button family)
FLAT_ACCENTS: Dict[AccentKey, str] = dict(CATEGORY_COLORS)

TREND_STYLES: Dict[Trend, Tuple[str, str]] = {
    Trend.UP:      ("↗", "success"),
    Trend.DOWN:    ("↘", "error"),
    Trend.NEUTRAL: ("→", "muted"),
}

# stat card sparkline: cubic segments (p0, c1, c2, p1) in a 100 x 30 viewbox
SPARKLINE_VIEWBOX: Tuple[int, int] = (100, 30)
SPARKLINE_CURVE = [
    ((0, 25),  (20, 25), (20, 10), (40, 10)),
    ((40, 10), (60, 10), (60, 20), (80, 15)),
    ((80, 15), (90, 12), (95, 5),  (100, 2)),
]
