from PIL import ImageFont

FONT_CANDIDATES = [
    "DejaVuSans-Bold.ttf",
    "DejaVuSans.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/Library/Fonts/Arial Bold.ttf",
    "/Library/Fonts/Arial.ttf",
    "arialbd.ttf",
    "arial.ttf",
]

_cache = {}

def load_font(size: int):
    size = max(1, int(size))
    if size in _cache:
        return _cache[size]
    font = None
    for p in FONT_CANDIDATES:
        try:
            font = ImageFont.truetype(p, size)
            break
        except OSError:
            continue
    if font is None:
        try:
            font = ImageFont.load_default(size=size)
        except TypeError:
            # Pillow < 10.1 has a single fixed-size bitmap font
            font = ImageFont.load_default()
    _cache[size] = font
    return font
