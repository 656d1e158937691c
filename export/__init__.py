"""Composite chart export: legend, vector document, chart surface."""

from .legend import legend_height, legend_label, build_legend
from .composite import VectorDocument, build_composite, ChartSurface
