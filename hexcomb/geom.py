from typing import List, Tuple

from .models import Box

Point = Tuple[float, float]

def clamp(v,a,b): return max(a, min(b, v))

def hex_points(box: Box) -> List[Point]:
    """Pointy-top hexagon filling the box (same silhouette as the CSS clip-path)."""
    x, y, w, h = box.x, box.y, box.width, box.height
    return [(x + w*0.5,  y),
            (x + w,      y + h*0.25),
            (x + w,      y + h*0.75),
            (x + w*0.5,  y + h),
            (x,          y + h*0.75),
            (x,          y + h*0.25)]

def inset_box(box: Box, inset: float) -> Box:
    return Box(box.x + inset, box.y + inset,
               max(0.0, box.width - 2*inset), max(0.0, box.height - 2*inset))

def centered_box(outer: Box, w: float, h: float) -> Box:
    return Box(outer.x + (outer.width - w)/2, outer.y + (outer.height - h)/2, w, h)

def parse_hex_color(c: str) -> Tuple[int, int, int]:
    s = (c or "").lstrip("#")
    if len(s) == 3:
        s = "".join(ch*2 for ch in s)
    try:
        return (int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))
    except ValueError:
        return (0, 0, 0)

def lerp_color(a: str, b: str, t: float) -> Tuple[int, int, int]:
    ra, ga, ba = parse_hex_color(a)
    rb, gb, bb = parse_hex_color(b)
    t = clamp(t, 0.0, 1.0)
    return (round(ra + (rb-ra)*t), round(ga + (gb-ga)*t), round(ba + (bb-ba)*t))

def cubic_point(p0, c1, c2, p1, t: float) -> Point:
    u = 1 - t
    return (u**3*p0[0] + 3*u*u*t*c1[0] + 3*u*t*t*c2[0] + t**3*p1[0],
            u**3*p0[1] + 3*u*u*t*c1[1] + 3*u*t*t*c2[1] + t**3*p1[1])

def curve_points(segments, viewbox: Tuple[float, float], box: Box, steps: int = 8) -> List[Point]:
    """Samples cubic segments drawn in `viewbox` units into a polyline scaled to `box`."""
    sx, sy = box.width / viewbox[0], box.height / viewbox[1]
    pts: List[Point] = []
    for n, (p0, c1, c2, p1) in enumerate(segments):
        for k in range(0 if n == 0 else 1, steps + 1):
            x, y = cubic_point(p0, c1, c2, p1, k / steps)
            pts.append((box.x + x*sx, box.y + y*sy))
    return pts
