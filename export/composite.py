"""Composite vector export: the rendered chart plus a generated legend.

``ChartSurface`` stands in for the host's rendering surface. It keeps the
most recently rendered scene; both export entry points work from that scene
and return None until something has been rendered.
"""
from typing import Awaitable, NamedTuple

from rings.config import ChartConfig, DEFAULT_CONFIG
from rings.scene import Scene, build_scene
from rings.svg import SVG_NS, chart_lines, render_items
from rings.textfit import WidthFn, estimate_width
from rings.constants import EXPORT_PAD
from .legend import build_legend, legend_height


class VectorDocument(NamedTuple):
    width: float
    height: float
    markup: str


def build_composite(scene: Scene, pad: float = EXPORT_PAD) -> VectorDocument:
    """Standalone SVG: chart at (pad, pad), legend stacked below it."""
    size = scene.width
    total_w = size + pad * 2
    total_h = scene.height + pad + legend_height() + pad
    lines = [f'<svg xmlns="{SVG_NS}" width="{total_w:g}" height="{total_h:g}"'
             f' viewBox="0 0 {total_w:g} {total_h:g}">']
    lines.extend(chart_lines(scene, interactive=False, x=pad, y=pad))
    render_items(lines, [build_legend(size, origin=(pad, pad + scene.height))],
                 interactive=False)
    lines.append('</svg>')
    return VectorDocument(width=total_w, height=total_h, markup="\n".join(lines))


class ChartSurface:
    """Holds the last rendered scene and serves the two export entry points."""

    def __init__(self, config: ChartConfig = DEFAULT_CONFIG,
                 measure: WidthFn = estimate_width):
        self.config = config
        self.measure = measure
        self.scene: Scene | None = None

    def render(self, model, config: ChartConfig | None = None,
               active: tuple[int, str] | None = None) -> Scene:
        """Recompute the whole scene from *model*; never reuses the last one."""
        if config is not None:
            self.config = config
        self.scene = build_scene(model, self.config, active, self.measure)
        return self.scene

    def export_vector(self) -> VectorDocument | None:
        if self.scene is None:
            return None
        return build_composite(self.scene)

    def export_raster(self) -> Awaitable | None:
        """Awaitable resolving to a 2x opaque Bitmap, or None before any render."""
        doc = self.export_vector()
        if doc is None:
            return None
        from .raster import rasterize
        return rasterize(doc)
