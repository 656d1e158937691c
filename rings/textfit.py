"""Heuristic text width estimation and width-bounded truncation.

Widths are estimated from a per-character class, not measured from a font.
Every function that needs a width takes a ``measure`` callable with the
signature of ``estimate_width``, so a font-metrics implementation can be
dropped in without touching the allocator or the placement code.
"""
import math
from typing import Callable

from .constants import (
    W_SPACE, W_LATIN, W_WIDE, W_SYMBOL,
    ELLIPSIS, ELLIPSIS_RESERVE, FIT_MIN, LABEL_CHAR_W,
)

WidthFn = Callable[[str, float], float]

# Code point ranges, inclusive.
_WIDE_RANGES = (
    (0x3400, 0x9FFF),    # CJK Unified Ideographs + Ext A
    (0xF900, 0xFAFF),    # CJK Compatibility Ideographs
    (0x3040, 0x30FF),    # Hiragana, Katakana
    (0xAC00, 0xD7A3),    # Hangul syllables
    (0xFF00, 0xFFEF),    # Halfwidth and Fullwidth Forms
)
_SYMBOL_RANGES = (
    (0x1F300, 0x1FAFF),  # pictographs, emoji
    (0x2600, 0x27BF),    # misc symbols, dingbats
)
_CLASS_WIDTH = {"space": W_SPACE, "latin": W_LATIN, "wide": W_WIDE, "symbol": W_SYMBOL}


def _in(cp: int, ranges) -> bool:
    return any(lo <= cp <= hi for lo, hi in ranges)


def char_class(ch: str) -> str:
    """Width bucket of one character: space, wide, symbol or latin."""
    if ch.isspace():
        return "space"
    cp = ord(ch)
    if _in(cp, _WIDE_RANGES):
        return "wide"
    if _in(cp, _SYMBOL_RANGES):
        return "symbol"
    return "latin"


def estimate_width(text: str, font_size: float) -> float:
    """Estimated rendered width of *text*; monotonic in appended characters."""
    return sum(_CLASS_WIDTH[char_class(ch)] * font_size for ch in text)


def fit_to_width(text: str, font_size: float, max_width: float,
                 measure: WidthFn = estimate_width) -> str:
    """Longest prefix of *text* that fits *max_width*, ellipsis-suffixed if cut.

    Room for the ellipsis is reserved for every prefix short of the whole
    string. Returns "" when the budget is at or below FIT_MIN * font_size, or
    when not even one character fits.
    """
    if max_width <= font_size * FIT_MIN:
        return ""
    w_ell = max(font_size * ELLIPSIS_RESERVE, measure(ELLIPSIS, font_size))
    acc = 0.0
    for i, ch in enumerate(text):
        w = measure(ch, font_size)
        allow = w + w_ell if i < len(text) - 1 else w
        if max_width - acc >= allow:
            acc += w
            continue
        return text[:i] + ELLIPSIS if i > 0 else ""
    return text


def truncate_chars(text: str, font_size: float, available: float) -> str:
    """Cut *text* to a flat per-character estimate of *available* width."""
    est = font_size * LABEL_CHAR_W
    max_chars = max(1, math.floor((available - 2) / max(1, est)))
    if len(text) <= max_chars:
        return text
    return text[:max(1, max_chars - 1)] + ELLIPSIS
