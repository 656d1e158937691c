"""Item label and category label placement."""
import math
from typing import NamedTuple

from .allocator import Band, CategoryLayout, Layout, Row
from .config import ChartConfig
from .geometry import arc_guide_path, to_cartesian
from .textfit import WidthFn, estimate_width, fit_to_width, truncate_chars
from .constants import (
    CHART_FONT_MIN, CHART_FONT_MAX, ROW_FONT_MARGIN,
    ROW_PAD_PX, ROW_SAFE_PX,
    LABEL_OFFSET, LABEL_MARGIN_MIN, CANVAS_SAFE, LABEL_CHAR_W, LABEL_FIT_SLACK,
)


class ArcLabel(NamedTuple):
    """Item label flowing along an invisible guide arc."""
    path_id: str
    path_d: str
    text: str
    font_size: int
    radius: float
    start: float
    end: float


class CategoryLabel(NamedTuple):
    """Outward category name, extending horizontally from its anchor."""
    index: int
    x: float
    y: float
    anchor: str                # "start" (rightward) or "end" (leftward)
    text: str
    font_size: float
    radius: float
    angle: float


def chart_font_size(unit: float) -> int:
    """Single chart-wide row font, derived from the unit thickness."""
    return max(CHART_FONT_MIN, min(CHART_FONT_MAX, math.floor(unit - ROW_FONT_MARGIN)))


def row_font_size(chart_fs: int, row_height: float) -> int:
    return min(chart_fs, max(CHART_FONT_MIN, math.floor(row_height - ROW_FONT_MARGIN)))


# ============================================================
# Row labels
# ============================================================

def place_row_label(cat: CategoryLayout, band: Band, row: Row, chart_fs: int,
                    config: ChartConfig, measure: WidthFn = estimate_width
                    ) -> ArcLabel | None:
    """Fit one item label on its row's midline; None if nothing fits."""
    r_text = row.mid
    pad = ROW_PAD_PX / r_text
    a_start, a_end = cat.start + pad, cat.end - pad
    if a_end <= a_start:
        return None
    budget = max(0.0, (a_end - a_start) * r_text - ROW_SAFE_PX)
    fs = row_font_size(chart_fs, row.height)
    text = fit_to_width(row.label, fs, budget, measure)
    if not text:
        return None
    return ArcLabel(
        path_id=f"tp-{cat.index}-{band.tier.key}-{row.index}",
        path_d=arc_guide_path(r_text, a_start, a_end, config.text_flow, config.center),
        text=text, font_size=fs, radius=r_text, start=a_start, end=a_end,
    )


def place_row_labels(layout: Layout, measure: WidthFn = estimate_width) -> list[ArcLabel]:
    """Every fitted row label in the chart, category by category, inside out."""
    chart_fs = chart_font_size(layout.unit)
    out = []
    for cat in layout.categories:
        for band in cat.bands:
            for row in band.rows:
                lbl = place_row_label(cat, band, row, chart_fs, layout.config, measure)
                if lbl is not None:
                    out.append(lbl)
    return out


# ============================================================
# Category labels
# ============================================================

def category_label_radius(cat: CategoryLayout, layout: Layout, chart_fs: int) -> float:
    """Anchor radius just outside the category, clamped inside the canvas."""
    margin = max(layout.unit, chart_fs * 2, LABEL_MARGIN_MIN)
    return min(cat.outer_radius + margin, layout.config.radius - CANVAS_SAFE)


def place_category_label(cat: CategoryLayout, layout: Layout, chart_fs: int) -> CategoryLabel:
    cfg = layout.config
    radius = category_label_radius(cat, layout, chart_fs)
    angle = cat.mid
    bx, by = to_cartesian(radius, angle, cfg.center)
    on_right = math.cos(angle) >= 0
    left_bound = CANVAS_SAFE
    right_bound = cfg.size - CANVAS_SAFE
    # Pull the anchor inward when the name would run off the canvas, but
    # never deeper than the padding reserved for labels.
    need = min(cfg.label_font_size * LABEL_CHAR_W * len(cat.name) + LABEL_FIT_SLACK,
               layout.reserved_padding)
    if on_right:
        x = min(bx + LABEL_OFFSET, right_bound - need)
        available = max(0.0, right_bound - x)
    else:
        x = max(bx - LABEL_OFFSET, left_bound + need)
        available = max(0.0, x - left_bound)
    return CategoryLabel(
        index=cat.index, x=x, y=by,
        anchor="start" if on_right else "end",
        text=truncate_chars(cat.name, cfg.label_font_size, available),
        font_size=cfg.label_font_size, radius=radius, angle=angle,
    )


def place_category_labels(layout: Layout) -> list[CategoryLabel]:
    chart_fs = chart_font_size(layout.unit)
    return [place_category_label(cat, layout, chart_fs) for cat in layout.categories]
