# hexcomb/paint.py
from PIL import Image, ImageChops, ImageColor, ImageDraw, ImageOps
from typing import Callable, Optional, Tuple
import logging

from .fonts import load_font
from .geom import hex_points, lerp_color
from .images import load_image
from .models import Box, GradientAccent, SolidAccent, VisualNode

log = logging.getLogger(__name__)

RGBA = Tuple[int, int, int, int]


def _rgba(color) -> RGBA:
    if isinstance(color, SolidAccent):
        color = color.color
    rgb = ImageColor.getrgb(color or "#00000000")
    return rgb if len(rgb) == 4 else (*rgb, 255)


class HexPainter:
    """
    Rasterizes a VisualNode tree with Pillow (preview / host surface).
    - hexagons are masked polygons; gradients run top-left -> bottom-right
    - nodes with clip="hexagon" paint their children through the silhouette
    - images are cover-fitted; anything unloadable becomes the fallback glyph
    """

    def __init__(self, padding: int = 12, background: str = "#FFFFFF",
                 image_loader: Callable[[Optional[str]], Optional[Image.Image]] = load_image):
        self.padding = padding
        self.background = background
        self.image_loader = image_loader

    # ---------- primitives ----------
    def _shift(self, box: Box, o: Tuple[float, float]) -> Box:
        return box.moved(o[0], o[1])

    def _hex_mask(self, size, box: Box) -> Image.Image:
        mask = Image.new("L", size, 0)
        ImageDraw.Draw(mask).polygon(hex_points(box), fill=255)
        return mask

    def _gradient(self, size, box: Box, accent: GradientAccent) -> Image.Image:
        layer = Image.new("RGBA", size, (0, 0, 0, 0))
        d = ImageDraw.Draw(layer)
        w, h = int(box.width), int(box.height)
        steps = max(1, w + h)
        for k in range(steps + 1):
            col = lerp_color(accent.start, accent.end, k / steps)
            x0, y0 = box.x + k, box.y
            x1, y1 = box.x, box.y + k
            d.line([(x0, y0), (x1, y1)], fill=(*col, 255), width=2)
        return layer

    def _fill_hex(self, canvas: Image.Image, box: Box, fill):
        if fill is None:
            return
        mask = self._hex_mask(canvas.size, box)
        if isinstance(fill, GradientAccent):
            layer = self._gradient(canvas.size, box, fill)
        else:
            layer = Image.new("RGBA", canvas.size, _rgba(fill))
        layer.putalpha(ImageChops.multiply(layer.getchannel("A"), mask))
        canvas.alpha_composite(layer)

    def _fill_shape(self, canvas: Image.Image, box: Box, fill, shape: str):
        layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
        d = ImageDraw.Draw(layer)
        rect = [box.x, box.y, box.right, box.bottom]
        if shape == "circle":
            d.ellipse(rect, fill=_rgba(fill))
        else:
            d.rounded_rectangle(rect, radius=box.height / 2, fill=_rgba(fill))
        canvas.alpha_composite(layer)

    def _text(self, canvas: Image.Image, box: Box, text: str, size: int, fill):
        if not text:
            return
        d = ImageDraw.Draw(canvas)
        cx, cy = box.center
        d.text((cx, cy), text, font=load_font(size), fill=_rgba(fill), anchor="mm")

    def _image(self, canvas: Image.Image, node: VisualNode, box: Box) -> bool:
        """Paints the cover-fitted image; False when it could not be loaded."""
        img = self.image_loader(node.source)
        if img is None:
            log.debug("painting fallback for %s", node.key or node.source)
            return False
        size = (max(1, int(round(box.width))), max(1, int(round(box.height))))
        fitted = ImageOps.fit(img, size, method=Image.Resampling.LANCZOS)
        layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
        layer.paste(fitted, (int(round(box.x)), int(round(box.y))))
        canvas.alpha_composite(layer)
        return True

    def _path(self, canvas: Image.Image, node: VisualNode, o: Tuple[float, float]):
        if len(node.points) < 2:
            return
        layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
        pts = [(x + o[0], y + o[1]) for x, y in node.points]
        ImageDraw.Draw(layer).line(pts, fill=_rgba(node.fill), width=2, joint="curve")
        canvas.alpha_composite(layer)

    # ---------- tree walk ----------
    def _paint(self, canvas: Image.Image, node: VisualNode, o: Tuple[float, float]):
        box = self._shift(node.box, o)

        if node.shape == "hexagon":
            self._fill_hex(canvas, box, node.fill)
        elif node.shape in ("circle", "pill"):
            self._fill_shape(canvas, box, node.fill, node.shape)
        elif node.shape == "text":
            self._text(canvas, box, node.text, node.font_size, node.fill)
        elif node.shape == "path":
            self._path(canvas, node, o)
        elif node.shape == "image" and self._image(canvas, node, box):
            # loaded: the fallback glyph children stay hidden
            return

        if not node.children:
            return
        if node.clip == "hexagon":
            # children go on their own layer, then through the silhouette
            layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
            for c in node.children:
                self._paint(layer, c, o)
            mask = self._hex_mask(canvas.size, box)
            layer.putalpha(ImageChops.multiply(layer.getchannel("A"), mask))
            canvas.alpha_composite(layer)
        else:
            for c in node.children:
                self._paint(canvas, c, o)

    # ---------- public ----------
    def paint(self, node: VisualNode) -> Image.Image:
        """Returns an RGBA image sized to the tree's bounds plus padding."""
        bounds = self._bounds(node)
        p = self.padding
        size = (int(bounds.width) + 2 * p, int(bounds.height) + 2 * p)
        canvas = Image.new("RGBA", size, _rgba(self.background))
        self._paint(canvas, node, (p - bounds.x, p - bounds.y))
        return canvas

    def _bounds(self, node: VisualNode) -> Box:
        # badges and dots may poke out of the cell box
        x0 = min(n.box.x for n in node.walk()); y0 = min(n.box.y for n in node.walk())
        x1 = max(n.box.right for n in node.walk()); y1 = max(n.box.bottom for n in node.walk())
        return Box(x0, y0, x1 - x0, y1 - y0)
