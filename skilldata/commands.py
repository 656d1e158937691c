"""Editing commands over immutable data model snapshots.

Each command takes a DataModel and returns a new one; the input is never
modified. Blank names are a no-op and return the input unchanged.
Invalid requests raise DataModelError.
"""
from types import MappingProxyType

from rings.model import DataModelError, clean_text
from rings.types import Category, DataModel, TIER_KEYS


def _norm(s: str) -> str:
    return clean_text(s).strip()


def _check_cat(model: DataModel, idx: int) -> Category:
    if not 0 <= idx < len(model.categories):
        raise DataModelError(f"No category at index {idx}")
    return model.categories[idx]


def _check_tier(tier: str):
    if tier not in TIER_KEYS:
        raise DataModelError(f"Unknown tier {tier!r}")


def _replace_cat(model: DataModel, idx: int, cat: Category) -> DataModel:
    cats = list(model.categories)
    cats[idx] = cat
    return DataModel(categories=tuple(cats))


def _with_items(cat: Category, tier: str, items) -> Category:
    return cat._replace(skills=MappingProxyType({**cat.skills, tier: tuple(items)}))


def reorder(items, src: int, dst: int) -> list:
    """Move items[src] to position dst, clamping dst into range."""
    out = list(items)
    if src == dst:
        return out
    item = out.pop(src)
    out.insert(max(0, min(dst, len(out))), item)
    return out


# ============================================================
# Categories
# ============================================================

def add_category(model: DataModel, name: str) -> DataModel:
    name = _norm(name)
    if not name:
        return model
    if any(c.name == name for c in model.categories):
        raise DataModelError(f"Category already exists: {name}")
    new = Category(name=name, skills=MappingProxyType({k: () for k in TIER_KEYS}))
    return DataModel(categories=(*model.categories, new))


def rename_category(model: DataModel, idx: int, name: str) -> DataModel:
    cat = _check_cat(model, idx)
    name = _norm(name)
    if not name or name == cat.name:
        return model
    if any(c.name == name for i, c in enumerate(model.categories) if i != idx):
        raise DataModelError(f"Category already exists: {name}")
    return _replace_cat(model, idx, cat._replace(name=name))


def remove_category(model: DataModel, idx: int) -> DataModel:
    _check_cat(model, idx)
    return DataModel(categories=tuple(c for i, c in enumerate(model.categories) if i != idx))


# ============================================================
# Items
# ============================================================

def add_item(model: DataModel, idx: int, tier: str, label: str) -> DataModel:
    cat = _check_cat(model, idx)
    _check_tier(tier)
    label = _norm(label)
    if not label:
        return model
    if label in cat.items(tier):
        raise DataModelError(f"Item already exists: {label}")
    return _replace_cat(model, idx, _with_items(cat, tier, (*cat.items(tier), label)))


def remove_item(model: DataModel, idx: int, tier: str, item_idx: int) -> DataModel:
    cat = _check_cat(model, idx)
    _check_tier(tier)
    items = cat.items(tier)
    if not 0 <= item_idx < len(items):
        raise DataModelError(f"No item at index {item_idx} in {tier}")
    return _replace_cat(model, idx, _with_items(
        cat, tier, (s for j, s in enumerate(items) if j != item_idx)))


def move_item(model: DataModel, idx: int, tier: str, src: int, dst: int) -> DataModel:
    """Reorder within one category+tier; *dst* is clamped into range."""
    cat = _check_cat(model, idx)
    _check_tier(tier)
    items = cat.items(tier)
    if not 0 <= src < len(items):
        raise DataModelError(f"No item at index {src} in {tier}")
    return _replace_cat(model, idx, _with_items(cat, tier, reorder(items, src, dst)))
