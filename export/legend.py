"""Legend block appended below the chart in composite exports."""
from rings.types import Point, TIERS
from rings.scene import Group, Rect, Text
from rings.constants import (
    BG_COLOR,
    LEGEND_PAD, LEGEND_TITLE_H, LEGEND_TITLE_GAP, LEGEND_ITEM_H, LEGEND_ITEM_GAP,
    LEGEND_SWATCH, LEGEND_RADIUS, LEGEND_TITLE,
    LEGEND_STROKE, LEGEND_TITLE_COLOR, LEGEND_TEXT_COLOR,
)


def legend_height() -> float:
    return (LEGEND_PAD * 2 + LEGEND_TITLE_H + LEGEND_TITLE_GAP
            + len(TIERS) * LEGEND_ITEM_H + LEGEND_ITEM_GAP)


def legend_label(idx: int) -> str:
    """Row text, e.g. '1. 舒适区 / Comfortable'."""
    t = TIERS[idx]
    return f"{idx + 1}. {t.cn} / {t.en}"


def build_legend(width: float, origin: Point = (0.0, 0.0)) -> Group:
    """Rounded panel with a title and one swatch row per tier."""
    items = [
        Rect(0, 0, width, legend_height(), BG_COLOR, rx=LEGEND_RADIUS, stroke=LEGEND_STROKE),
        Text(LEGEND_PAD, LEGEND_PAD + LEGEND_TITLE_H, LEGEND_TITLE, 14,
             LEGEND_TITLE_COLOR, weight=600, baseline="hanging"),
    ]
    start_y = LEGEND_PAD + LEGEND_TITLE_H + LEGEND_TITLE_GAP
    for idx, tier in enumerate(TIERS):
        item_y = start_y + idx * LEGEND_ITEM_H
        items.append(Rect(LEGEND_PAD, item_y + 2, LEGEND_SWATCH, LEGEND_SWATCH,
                          tier.color, rx=3))
        items.append(Text(LEGEND_PAD + LEGEND_SWATCH + 8, item_y + LEGEND_SWATCH,
                          legend_label(idx), 13, LEGEND_TEXT_COLOR, baseline="alphabetic"))
    return Group(items=tuple(items), translate=origin)
