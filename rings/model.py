"""Data model normalization.

Everything handed to the allocator goes through ``normalize_model`` first,
so partially specified categories never reach the layout code.
"""
import re
from collections.abc import Mapping
from types import MappingProxyType

from .types import Category, DataModel, TIER_KEYS


class DataModelError(ValueError):
    """Raised for structurally invalid data models or editing commands."""


# Code points XML 1.0 does not allow in character data.
_XML_ILLEGAL = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def clean_text(s) -> str:
    """*s* as a string with XML-illegal characters removed."""
    return _XML_ILLEGAL.sub("", str(s))


def _items(raw) -> tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str) or not hasattr(raw, "__iter__"):
        raise DataModelError(f"Tier items must be a list, got {type(raw).__name__}")
    return tuple(clean_text(s) for s in raw)


def normalize_category(raw) -> Category:
    """Category with all four tiers present, in tier order."""
    if isinstance(raw, Category):
        name, skills = raw.name, raw.skills
    elif isinstance(raw, Mapping):
        name, skills = raw.get("name", ""), raw.get("skills") or {}
    else:
        raise DataModelError(f"Category must be an object, got {type(raw).__name__}")
    if not isinstance(skills, Mapping):
        raise DataModelError(f"Category {name!r}: skills must be an object")
    return Category(
        name="" if name is None else clean_text(name),
        skills=MappingProxyType({k: _items(skills.get(k)) for k in TIER_KEYS}),
    )


def normalize_model(raw) -> DataModel:
    """Normalize a DataModel or a ``{"categories": [...]}`` mapping.

    Missing tier arrays become empty, unknown tier keys are dropped.
    Idempotent.
    """
    if isinstance(raw, DataModel):
        cats = raw.categories
    elif isinstance(raw, Mapping):
        cats = raw.get("categories")
        if not isinstance(cats, (list, tuple)):
            raise DataModelError("Data must contain a 'categories' array")
    else:
        raise DataModelError(f"Data must be an object, got {type(raw).__name__}")
    return DataModel(categories=tuple(normalize_category(c) for c in cats))


def model_to_dict(model: DataModel) -> dict:
    """JSON-friendly form of a model."""
    return {"categories": [
        {"name": c.name, "skills": {k: list(c.items(k)) for k in TIER_KEYS}}
        for c in model.categories
    ]}
