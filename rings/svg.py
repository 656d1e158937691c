"""SVG serialization of scene draw commands."""
from xml.sax.saxutils import escape

from .scene import Scene, Sector, Circle, ArcText, Label, Rect, Text, Group
from .model import clean_text
from .constants import GLOW_COLOR

SVG_NS = "http://www.w3.org/2000/svg"


def _text(s: str) -> str:
    return escape(clean_text(s))


_GLOW_DEFS = [
    '<defs>',
    '<radialGradient id="bgGlow" cx="50%" cy="50%" r="50%">',
    '<stop offset="0%" stop-color="#ffffff" stop-opacity="1"/>',
    f'<stop offset="70%" stop-color="{GLOW_COLOR}" stop-opacity="0.6"/>',
    f'<stop offset="100%" stop-color="{GLOW_COLOR}" stop-opacity="0.2"/>',
    '</radialGradient>',
    '</defs>',
]


def render_items(lines: list, items, interactive: bool = True):
    """Append SVG elements for *items* to *lines*.

    interactive adds hover/selection hooks (data-* attributes, cursor) to
    row sectors; exports leave them out.
    """
    for it in items:
        if isinstance(it, Group):
            attrs = ""
            if it.translate != (0.0, 0.0):
                attrs += f' transform="translate({it.translate[0]:.2f},{it.translate[1]:.2f})"'
            if not it.pointer_events:
                attrs += ' pointer-events="none"'
            lines.append(f'<g{attrs}>')
            render_items(lines, it.items, interactive)
            lines.append('</g>')
        elif isinstance(it, Sector):
            hooks = ""
            if interactive and it.role == "row":
                hooks = (f' data-category="{it.category}" data-tier="{it.tier}"'
                         f' cursor="pointer"')
            lines.append(f'<path d="{it.d}" fill="{it.fill}" fill-opacity="{it.opacity:.3f}"'
                         f' stroke="none"{hooks}/>')
        elif isinstance(it, Circle):
            lines.append(f'<circle cx="{it.cx:.2f}" cy="{it.cy:.2f}" r="{it.r:.2f}"'
                         f' fill="{it.fill}" stroke="none"/>')
        elif isinstance(it, ArcText):
            lines.append(f'<path id="{it.path_id}" d="{it.path_d}" fill="none" stroke="none"/>')
            lines.append(f'<text font-size="{it.font_size}" font-weight="{it.weight}"'
                         f' fill="{it.fill}"><textPath href="#{it.path_id}"'
                         f' startOffset="50%" text-anchor="middle">{_text(it.text)}</textPath></text>')
        elif isinstance(it, Label):
            # Halo copy first, fill copy on top.
            common = (f' x="{it.x:.2f}" y="{it.y:.2f}" text-anchor="{it.anchor}"'
                      f' dominant-baseline="middle" font-size="{it.font_size}"'
                      f' font-weight="{it.weight}"')
            lines.append(f'<text{common} fill="{it.halo}" stroke="{it.halo}"'
                         f' stroke-width="{it.halo_width}" stroke-linejoin="round">{_text(it.text)}</text>')
            lines.append(f'<text{common} fill="{it.fill}">{_text(it.text)}</text>')
        elif isinstance(it, Rect):
            stroke = f' stroke="{it.stroke}"' if it.stroke else ' stroke="none"'
            rx = f' rx="{it.rx}"' if it.rx else ""
            lines.append(f'<rect x="{it.x:.2f}" y="{it.y:.2f}" width="{it.width:.2f}"'
                         f' height="{it.height:.2f}"{rx} fill="{it.fill}"{stroke}/>')
        elif isinstance(it, Text):
            extra = ""
            if it.weight is not None:
                extra += f' font-weight="{it.weight}"'
            if it.baseline is not None:
                extra += f' dominant-baseline="{it.baseline}"'
            lines.append(f'<text x="{it.x:.2f}" y="{it.y:.2f}" font-size="{it.font_size}"'
                         f' fill="{it.fill}"{extra}>{_text(it.text)}</text>')
        else:
            raise TypeError(f"Unknown draw command: {type(it).__name__}")


def chart_lines(scene: Scene, interactive: bool = True, x: float | None = None,
                y: float | None = None) -> list[str]:
    """Chart as a standalone <svg> element, optionally positioned at (x, y)."""
    w, h = scene.width, scene.height
    pos = f' x="{x:.2f}" y="{y:.2f}"' if x is not None and y is not None else ""
    style = ' style="max-width:100%;height:auto"' if interactive else ""
    lines = [f'<svg xmlns="{SVG_NS}"{pos} width="{w:g}" height="{h:g}"'
             f' viewBox="0 0 {w:g} {h:g}"{style}>']
    lines.extend(_GLOW_DEFS)
    render_items(lines, scene.items, interactive)
    lines.append('</svg>')
    return lines


def render_chart(scene: Scene, interactive: bool = True) -> str:
    """Live chart markup."""
    return "\n".join(chart_lines(scene, interactive))
