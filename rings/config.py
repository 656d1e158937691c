"""Chart configuration: fixed policy inputs for one render pass."""
import math
from collections.abc import Mapping
from typing import Literal, NamedTuple

from .types import Point
from .constants import (
    CANVAS_SIZE, INNER_CORE_R, MIN_ROW_THICKNESS, PAD_ANGLE,
    COMFORTABLE_SPACER_ROWS, BASE_SPACER_ROWS, LABEL_FONT_SIZE, TEXT_FLOW,
)


class ConfigError(ValueError):
    """Raised for invalid chart configuration values."""


class ChartConfig(NamedTuple):
    size: float = CANVAS_SIZE
    inner_core: float = INNER_CORE_R
    min_row: float = MIN_ROW_THICKNESS
    comfortable_spacer_rows: int = COMFORTABLE_SPACER_ROWS
    base_spacer_rows: int = BASE_SPACER_ROWS
    label_font_size: float = LABEL_FONT_SIZE
    pad_angle: float = PAD_ANGLE
    text_flow: Literal["cw", "ccw"] = TEXT_FLOW

    @property
    def center(self) -> Point:
        return (self.size / 2, self.size / 2)

    @property
    def radius(self) -> float:
        """Half the canvas side."""
        return self.size / 2


DEFAULT_CONFIG = ChartConfig()


def make_config(overrides: Mapping | None = None) -> ChartConfig:
    """Build a ChartConfig from a mapping of overrides.

    Raises ConfigError for unknown keys or out-of-range values.
    """
    overrides = dict(overrides or {})
    unknown = set(overrides) - set(ChartConfig._fields)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
    cfg = DEFAULT_CONFIG._replace(**overrides)
    if cfg.size <= 0:
        raise ConfigError(f"size must be positive: {cfg.size}")
    if cfg.inner_core < 0 or cfg.inner_core >= cfg.size / 2:
        raise ConfigError(f"inner_core out of range: {cfg.inner_core}")
    if cfg.min_row <= 0:
        raise ConfigError(f"min_row must be positive: {cfg.min_row}")
    for name in ("comfortable_spacer_rows", "base_spacer_rows"):
        v = getattr(cfg, name)
        if isinstance(v, bool) or not isinstance(v, int) or v < 0:
            raise ConfigError(f"{name} must be an int >= 0: {v!r}")
    if cfg.pad_angle < 0 or cfg.pad_angle >= 2 * math.pi:
        raise ConfigError(f"pad_angle out of range: {cfg.pad_angle}")
    if cfg.label_font_size <= 0:
        raise ConfigError(f"label_font_size must be positive: {cfg.label_font_size}")
    if cfg.text_flow not in ("cw", "ccw"):
        raise ConfigError(f"text_flow must be 'cw' or 'ccw': {cfg.text_flow!r}")
    return cfg
