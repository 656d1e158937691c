"""Raster export: composite SVG to an opaque, fixed-scale PNG."""
import asyncio
import math
from io import BytesIO
from typing import NamedTuple

import cairosvg
from PIL import Image

from rings.constants import BG_COLOR, RASTER_SCALE
from .composite import VectorDocument


class Bitmap(NamedTuple):
    width: int
    height: int
    png: bytes


def raster_size(doc: VectorDocument, scale: float = RASTER_SCALE) -> tuple[int, int]:
    return math.ceil(doc.width * scale), math.ceil(doc.height * scale)


def _decode(svg_bytes: bytes, width: int, height: int) -> Image.Image:
    """SVG bytes to an RGBA image at exactly width x height."""
    png = cairosvg.svg2png(bytestring=svg_bytes, output_width=width, output_height=height)
    with Image.open(BytesIO(png)) as im:
        return im.convert("RGBA")


async def rasterize(doc: VectorDocument, scale: float = RASTER_SCALE,
                    background: str = BG_COLOR) -> Bitmap:
    """Encode, decode, draw onto an opaque surface, encode as PNG. Sequential."""
    width, height = raster_size(doc, scale)
    svg_bytes = doc.markup.encode("utf-8")
    image = await asyncio.to_thread(_decode, svg_bytes, width, height)
    canvas = Image.new("RGBA", (width, height), background)
    canvas.alpha_composite(image)
    buf = BytesIO()
    canvas.convert("RGB").save(buf, format="PNG")
    return Bitmap(width=width, height=height, png=buf.getvalue())
