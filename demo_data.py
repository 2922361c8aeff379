USER_NAME = "Marina Costa"
PORTFOLIO = [
    "assets/portfolio/kitchen.jpg",
    "assets/portfolio/deck.jpg",
    "",                                  # missing upload -> placeholder
    "assets/portfolio/bathroom.jpg",
]
NAV = [
    # (id, icon, label, accent)
    ("jobs",      "⚒", "Jobs",      "featured"),
    ("pros",      "★", "Pros",      "pros"),
    ("schedules", "◷", "Schedule",  "schedules"),
    ("chat",      "✉", "Messages",  "messages"),
    ("market",    "⌂", "Market",    "market"),
]
UNREAD = {"chat": 12, "alerts": 3}
STATS = [
    # (label, value, trend, trend_value)
    ("Users",    "1,284", "up",      "+12%"),
    ("Jobs",     "342",   "down",    "-3%"),
    ("Revenue",  "R$ 48k", "neutral", "0%"),
    ("Reviews",  "4.8",   None,      ""),
]
