"""Polar geometry and SVG path construction for annular sectors."""
import math
from .types import Point
from .constants import CANVAS_SIZE, FULL_TURN_TRIM

_CENTER: Point = (CANVAS_SIZE / 2, CANVAS_SIZE / 2)

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

# ============================================================
# Polar Utilities
# ============================================================
def to_cartesian(radius: float, angle: float, center: Point = _CENTER) -> Point:
    """Polar (radius, angle in radians) to cartesian around *center*."""
    return (center[0]+radius*math.cos(angle), center[1]+radius*math.sin(angle))

def large_arc_flag(start: float, end: float) -> int:
    """SVG large-arc flag: 1 iff the sweep end-start exceeds pi."""
    return 1 if end - start > math.pi else 0

def sector_bisector(start: float, end: float) -> float:
    return (start + end) / 2

def _trim_full_turn(start: float, end: float) -> float:
    # An SVG arc whose endpoints coincide draws nothing.
    return min(end, start + 2*math.pi - FULL_TURN_TRIM)

def _fmt(v: float) -> str:
    return f"{v:.2f}"

# ============================================================
# Path Construction
# ============================================================
def annular_sector_path(inner: float, outer: float, start: float, end: float,
                        center: Point = _CENTER) -> str:
    """Closed annular wedge path between two radii and two angles.

    Traces inner-start, outer-start, outer arc to outer-end, inner-end and
    the inner arc back. Raises GeometryError if outer <= inner; callers skip
    such bands instead of drawing them.
    """
    if outer <= inner:
        raise GeometryError(f"Degenerate band: outer={outer:.4f} <= inner={inner:.4f}")
    end = _trim_full_turn(start, end)
    x0, y0 = to_cartesian(inner, start, center)
    x1, y1 = to_cartesian(outer, start, center)
    x2, y2 = to_cartesian(outer, end, center)
    x3, y3 = to_cartesian(inner, end, center)
    la = large_arc_flag(start, end)
    ro, ri = _fmt(outer), _fmt(inner)
    return " ".join([
        f"M {_fmt(x0)} {_fmt(y0)}",
        f"L {_fmt(x1)} {_fmt(y1)}",
        f"A {ro} {ro} 0 {la} 1 {_fmt(x2)} {_fmt(y2)}",
        f"L {_fmt(x3)} {_fmt(y3)}",
        f"A {ri} {ri} 0 {la} 0 {_fmt(x0)} {_fmt(y0)}",
        "Z",
    ])

def arc_guide_path(radius: float, start: float, end: float, flow: str = "cw",
                   center: Point = _CENTER) -> str:
    """Open arc at *radius* between two angles, used as a text guide.

    flow "cw" runs from end back to start (sweep 0); "ccw" runs from start
    to end (sweep 1).
    """
    end = _trim_full_turn(start, end)
    if flow == "cw":
        a_from, a_to, sweep = end, start, 0
    else:
        a_from, a_to, sweep = start, end, 1
    sx, sy = to_cartesian(radius, a_from, center)
    ex, ey = to_cartesian(radius, a_to, center)
    la = 1 if abs(a_to - a_from) > math.pi else 0
    r = _fmt(radius)
    return f"M {_fmt(sx)} {_fmt(sy)} A {r} {r} 0 {la} {sweep} {_fmt(ex)} {_fmt(ey)}"
