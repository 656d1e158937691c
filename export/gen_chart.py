"""Generate the skill ring chart, its composite SVG and a 2x PNG.

Usage: python export/gen_chart.py [data.json] [out_dir]

data.json holds ``{"categories": [...]}``; without it the built-in default
dataset is drawn. Outputs go to out_dir (default: this directory):
chart.svg (live chart), skill_rings_<date>.svg and skill_rings_<date>.png
(chart + legend).
"""
import os, sys, asyncio, datetime

# Ensure project root is on sys.path for package imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from rings.scene import Scene
from rings.svg import render_chart
from rings.types import TIERS
from skilldata.defaults import default_model
from skilldata.store import import_json
from export.composite import ChartSurface


def load_model(path: str | None):
    if path is None:
        return default_model()
    with open(path, encoding="utf-8") as f:
        return import_json(f.read())


def write_outputs(model, out_dir: str) -> tuple[dict, Scene]:
    """Render *model* and write all three artifacts. Returns (paths, scene)."""
    surface = ChartSurface()
    scene = surface.render(model)
    stamp = datetime.date.today().isoformat()
    paths = {
        "chart": os.path.join(out_dir, "chart.svg"),
        "svg": os.path.join(out_dir, f"skill_rings_{stamp}.svg"),
        "png": os.path.join(out_dir, f"skill_rings_{stamp}.png"),
    }
    with open(paths["chart"], "w", encoding="utf-8") as f:
        f.write(render_chart(scene))
    doc = surface.export_vector()
    with open(paths["svg"], "w", encoding="utf-8") as f:
        f.write(doc.markup)
    bitmap = asyncio.run(surface.export_raster())
    with open(paths["png"], "wb") as f:
        f.write(bitmap.png)
    return paths, scene


# ============================================================
# Main entry point
# ============================================================

if __name__ == "__main__":
    data_path = sys.argv[1] if len(sys.argv) > 1 else None
    out_dir = sys.argv[2] if len(sys.argv) > 2 else os.path.dirname(os.path.abspath(__file__))
    model = load_model(data_path)
    paths, scene = write_outputs(model, out_dir)
    layout = scene.layout

    print(f"Chart written to {paths['chart']}")
    print(f"Composite SVG written to {paths['svg']}")
    print(f"PNG written to {paths['png']}")
    print(f"Unit thickness: {layout.unit:.3f}px{' (clamped)' if layout.clamped else ''}")
    print(f"Max radius:     {layout.max_radius:.2f}px  (padding {layout.reserved_padding:.0f}px)")
    print()
    print(f"  {'category':<14s} {'items':>5s} {'rows':>5s} {'outer r':>8s}  "
          + " ".join(f"{t.key[:5]:>5s}" for t in TIERS))
    for cat in layout.categories:
        counts = " ".join(f"{len(b.rows):>5d}" for b in cat.bands)
        print(f"  {cat.name:<14s} {cat.raw_total:>5d} {cat.total_with_spacer:>5d}"
              f" {cat.outer_radius:>8.2f}  {counts}")
