"""Scene graph: typed draw commands shared by the live renderer and exports.

The layout math ends here; ``rings.svg`` and ``export`` only serialize or
rasterize these commands.
"""
from typing import NamedTuple

from .types import Point, TIERS
from .allocator import Layout, compute_layout
from .config import ChartConfig, DEFAULT_CONFIG
from .geometry import annular_sector_path
from .placement import place_row_label, place_category_label, chart_font_size
from .textfit import WidthFn, estimate_width
from .constants import (
    BG_COLOR, LABEL_COLOR, ROW_TEXT_COLOR,
    ROW_FONT_WEIGHT, LABEL_FONT_WEIGHT, LABEL_HALO_WIDTH,
)


# ============================================================
# Draw commands
# ============================================================
class Sector(NamedTuple):
    """Filled annular wedge; path is precomputed in canvas coordinates."""
    d: str; fill: str; opacity: float
    category: int | None = None; tier: str | None = None
    role: str = "row"          # "row" or "spacer"

class Circle(NamedTuple):
    cx: float; cy: float; r: float; fill: str

class ArcText(NamedTuple):
    """Text following an invisible guide path, centered along it."""
    path_id: str; path_d: str; text: str
    font_size: float; fill: str; weight: int

class Label(NamedTuple):
    """Horizontal text with a background-colored halo stroke."""
    x: float; y: float; text: str; anchor: str
    font_size: float; fill: str; weight: int
    halo: str; halo_width: float

class Rect(NamedTuple):
    x: float; y: float; width: float; height: float
    fill: str; rx: float = 0; stroke: str | None = None

class Text(NamedTuple):
    x: float; y: float; text: str
    font_size: float; fill: str
    weight: int | None = None; baseline: str | None = None

class Group(NamedTuple):
    items: tuple
    translate: Point = (0.0, 0.0)
    pointer_events: bool = True

DrawCommand = Sector | Circle | ArcText | Label | Rect | Text | Group

class Scene(NamedTuple):
    width: float
    height: float
    layout: Layout
    items: tuple


# ============================================================
# Scene assembly
# ============================================================
def _category_group(cat, layout: Layout, chart_fs: int, measure: WidthFn) -> Group:
    cfg = layout.config
    fills, texts = [], []
    for band in cat.bands:
        if band.is_empty:
            continue
        color = band.tier.color
        if band.spacer_rows > 0 and band.rows:
            # Spacer block takes the first row's look, giving a solid core ring.
            fills.append(Sector(
                annular_sector_path(band.inner, band.spacer_outer, cat.start, cat.end, cfg.center),
                color, band.rows[0].opacity, cat.index, band.tier.key, "spacer",
            ))
        for row in band.rows:
            d = annular_sector_path(row.inner, row.outer, cat.start, cat.end, cfg.center)
            fills.append(Sector(d, color, row.opacity, cat.index, band.tier.key))
            lbl = place_row_label(cat, band, row, chart_fs, cfg, measure)
            if lbl is not None:
                texts.append(ArcText(lbl.path_id, lbl.path_d, lbl.text,
                                     lbl.font_size, ROW_TEXT_COLOR, ROW_FONT_WEIGHT))
    cl = place_category_label(cat, layout, chart_fs)
    label = Label(cl.x, cl.y, cl.text, cl.anchor, cl.font_size, LABEL_COLOR,
                  LABEL_FONT_WEIGHT, BG_COLOR, LABEL_HALO_WIDTH)
    return Group(items=(*fills, Group(tuple(texts), pointer_events=False), label))


def build_scene(model, config: ChartConfig = DEFAULT_CONFIG,
                active: tuple[int, str] | None = None,
                measure: WidthFn = estimate_width) -> Scene:
    """Lay out *model* and turn it into draw commands, in paint order."""
    layout = compute_layout(model, config, active, measure)
    chart_fs = chart_font_size(layout.unit)
    cx, cy = config.center
    items = [Circle(cx, cy, config.radius, "url(#bgGlow)")]
    items.extend(_category_group(cat, layout, chart_fs, measure) for cat in layout.categories)
    comfy = TIERS[0]
    has_comfy = any(cat.bands[0].rows for cat in layout.categories)
    items.append(Circle(cx, cy, config.inner_core, comfy.color if has_comfy else BG_COLOR))
    return Scene(width=config.size, height=config.size, layout=layout, items=tuple(items))
