"""Radial layout allocation: per-category bands and rows, one shared unit."""
import math
from typing import NamedTuple

import numpy as np

from .types import Tier, TIERS, TIER_KEYS, DataModel
from .model import normalize_model
from .config import ChartConfig, DEFAULT_CONFIG
from .textfit import WidthFn, estimate_width
from .constants import (
    LABEL_OFFSET, LABEL_PAD_EXTRA, LABEL_PAD_MIN,
    OPACITY_DECAY, OPACITY_FLOOR, INACTIVE_DIM, PAD_ANGLE_MAX_SHARE,
)


class Row(NamedTuple):
    """One item: a unit-thick sub-band inside its tier band."""
    index: int
    label: str
    inner: float
    outer: float
    opacity: float

    @property
    def mid(self) -> float:
        return (self.inner + self.outer) / 2

    @property
    def height(self) -> float:
        return self.outer - self.inner


class Band(NamedTuple):
    """Radial annulus of one tier inside one category sector."""
    tier: Tier
    inner: float
    outer: float
    spacer_rows: int
    spacer_outer: float    # first item row starts here
    rows: tuple[Row, ...]
    active: bool

    @property
    def is_empty(self) -> bool:
        return self.outer <= self.inner


class CategoryLayout(NamedTuple):
    index: int
    name: str
    start: float
    end: float
    raw_total: int
    base_spacer_rows: int
    total_with_spacer: int
    bands: tuple[Band, ...]    # always one per tier, innermost first
    outer_radius: float

    @property
    def mid(self) -> float:
        return (self.start + self.end) / 2


class Layout(NamedTuple):
    config: ChartConfig
    unit: float
    max_radius: float
    reserved_padding: float
    angle_step: float
    max_total: int
    clamped: bool              # min_row overrode the fitted unit
    categories: tuple[CategoryLayout, ...]


def tier_counts(model: DataModel) -> np.ndarray:
    """Item counts, shape (n_categories, 4), tiers in fixed order."""
    return np.array(
        [[len(c.items(k)) for k in TIER_KEYS] for c in model.categories],
        dtype=int,
    ).reshape(-1, len(TIER_KEYS))


def spacer_allowance(counts: np.ndarray, config: ChartConfig = DEFAULT_CONFIG
                     ) -> tuple[np.ndarray, np.ndarray]:
    """Spacer rows per category: (comfortable block, base offset).

    A non-empty Comfortable tier gets the comfortable block; otherwise any
    non-empty category is pushed out by the base spacer. Empty categories
    get neither.
    """
    raw = counts.sum(axis=1)
    has_comfy = counts[:, 0] > 0
    comfy = np.where(has_comfy, config.comfortable_spacer_rows, 0)
    base = np.where(~has_comfy & (raw > 0), config.base_spacer_rows, 0)
    return comfy, base


def reserved_padding(names, config: ChartConfig = DEFAULT_CONFIG,
                     measure: WidthFn = estimate_width) -> float:
    """Outer padding kept free for the widest category label."""
    widest = max([1.0] + [measure(n, config.label_font_size) for n in names])
    return max(LABEL_PAD_MIN, LABEL_OFFSET + math.ceil(widest) + LABEL_PAD_EXTRA)


def compute_layout(model, config: ChartConfig = DEFAULT_CONFIG,
                   active: tuple[int, str] | None = None,
                   measure: WidthFn = estimate_width) -> Layout:
    """Allocate angles and radii for every category, band and row.

    *model* is a DataModel or a raw mapping; it is normalized first.
    *active* is an optional (category index, tier key) highlight.
    """
    model = normalize_model(model)
    counts = tier_counts(model)
    raw = counts.sum(axis=1)
    comfy, base = spacer_allowance(counts, config)
    totals = raw + comfy + base
    max_total = max(1, int(totals.max(initial=0)))

    padding = reserved_padding([c.name for c in model.categories], config, measure)
    max_radius = config.radius - padding
    fitted = (max_radius - config.inner_core) / max_total
    unit = max(config.min_row, fitted)

    angle_step = 2 * math.pi / max(1, len(model.categories))
    pad = min(max(0.0, config.pad_angle), angle_step * PAD_ANGLE_MAX_SHARE)
    cats = []
    for i, cat in enumerate(model.categories):
        start = i * angle_step + pad / 2
        end = (i + 1) * angle_step - pad / 2
        cursor = config.inner_core + int(base[i]) * unit
        bands = []
        for j, tier in enumerate(TIERS):
            spacer = int(comfy[i]) if j == 0 else 0
            inner = cursor
            outer = inner + (int(counts[i, j]) + spacer) * unit
            spacer_outer = inner + spacer * unit
            is_active = active == (i, tier.key)
            dim = 1.0 if is_active else INACTIVE_DIM
            rows = tuple(
                Row(r, label, spacer_outer + r * unit, spacer_outer + (r + 1) * unit,
                    max(OPACITY_FLOOR, 1 - r * OPACITY_DECAY) * dim)
                for r, label in enumerate(cat.items(tier.key))
            )
            bands.append(Band(tier, inner, outer, spacer, spacer_outer, rows, is_active))
            cursor = outer
        cats.append(CategoryLayout(
            index=i, name=cat.name, start=start, end=end,
            raw_total=int(raw[i]), base_spacer_rows=int(base[i]),
            total_with_spacer=int(totals[i]), bands=tuple(bands),
            outer_radius=cursor,
        ))

    return Layout(
        config=config, unit=unit, max_radius=max_radius,
        reserved_padding=padding, angle_step=angle_step, max_total=max_total,
        clamped=unit > fitted, categories=tuple(cats),
    )
