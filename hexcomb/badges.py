# hexcomb/badges.py
from typing import Dict, Mapping

from .errors import InvalidConfiguration
from .models import Badge

BADGE_CAP = 9


def format_badge(count: int, owner_id: str = "") -> Badge:
    """Unread count -> Badge. Hidden at zero, capped at "9+"."""
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidConfiguration("count", count, "expected a non-negative integer")
    if count < 0:
        raise InvalidConfiguration("count", count, "expected a non-negative integer")
    text = f"{BADGE_CAP}+" if count > BADGE_CAP else str(count)
    return Badge(visible=count > 0, text=text, owner_id=owner_id)


def format_all(counts: Mapping[str, int]) -> Dict[str, Badge]:
    # one badge per owner (chat, alerts, ...); counts are never combined
    return {owner: format_badge(n, owner) for owner, n in counts.items()}
