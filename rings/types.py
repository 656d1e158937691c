"""Shared type definitions for the skill ring chart."""
from collections.abc import Mapping
from typing import Literal, NamedTuple

Point = tuple[float, float]

TierKey = Literal["comfortable", "challenging", "near", "far"]

class Tier(NamedTuple):
    key: TierKey; cn: str; en: str; color: str

# Innermost to outermost. Order and count are fixed.
TIERS: tuple[Tier, ...] = (
    Tier("comfortable", "舒适区", "Comfortable", "#3b82f6"),
    Tier("challenging", "挑战区", "Challenging", "#f5ca0b"),
    Tier("near", "近不胜任", "Near Incapable", "#ef4444"),
    Tier("far", "远不胜任", "Far Incapable", "#ffa0a0"),
)
TIER_KEYS: tuple[str, ...] = tuple(t.key for t in TIERS)

def tier_by_key(key: str) -> Tier:
    """Look up a tier by key. Raises KeyError for unknown keys."""
    for t in TIERS:
        if t.key == key:
            return t
    raise KeyError(key)

class Category(NamedTuple):
    name: str
    skills: Mapping[str, tuple[str, ...]]    # read-only view

    def items(self, key: str) -> tuple[str, ...]:
        return self.skills.get(key, ())

class DataModel(NamedTuple):
    categories: tuple[Category, ...] = ()
