"""Skill ring layout engine: geometry, text fitting, allocation, placement, scene."""

from .types import Point, Tier, TierKey, TIERS, TIER_KEYS, tier_by_key, Category, DataModel
from .model import DataModelError, normalize_model, normalize_category, model_to_dict
from .config import ChartConfig, ConfigError, DEFAULT_CONFIG, make_config
from .geometry import (
    GeometryError,
    to_cartesian, large_arc_flag, sector_bisector,
    annular_sector_path, arc_guide_path,
)
from .textfit import WidthFn, char_class, estimate_width, fit_to_width, truncate_chars
from .allocator import (
    Row, Band, CategoryLayout, Layout,
    tier_counts, spacer_allowance, reserved_padding, compute_layout,
)
from .placement import (
    ArcLabel, CategoryLabel,
    chart_font_size, row_font_size,
    place_row_label, place_row_labels,
    category_label_radius, place_category_label, place_category_labels,
)
from .scene import Sector, Circle, ArcText, Label, Rect, Text, Group, Scene, build_scene
from .svg import render_items, chart_lines, render_chart
