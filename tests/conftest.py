"""Shared test fixtures for skill ring layout tests."""
import pytest
from rings.model import normalize_model
from rings.allocator import compute_layout
from rings.scene import build_scene
from skilldata.defaults import default_model


@pytest.fixture(scope="session")
def model():
    """Built-in eight-category dataset."""
    return default_model()


@pytest.fixture(scope="session")
def layout(model):
    """Layout of the default dataset with the default config."""
    return compute_layout(model)


@pytest.fixture(scope="session")
def scene(model):
    """Scene of the default dataset."""
    return build_scene(model)


@pytest.fixture(scope="session")
def solo_model():
    """One category, two Comfortable items, other tiers missing."""
    return normalize_model({"categories": [
        {"name": "Solo", "skills": {"comfortable": ["A", "B"]}},
    ]})


@pytest.fixture(scope="session")
def crowded_model():
    """Enough rows to force the minimum row thickness, plus a long fullwidth label."""
    return normalize_model({"categories": [
        {"name": "Big", "skills": {"comfortable": [f"item {i}" for i in range(80)]}},
        {"name": "Wide", "skills": {"far": ["Ａ" * 50]}},
    ]})


@pytest.fixture(scope="session")
def mixed_model():
    """Comfortable-only, no-Comfortable and empty categories side by side."""
    return normalize_model({"categories": [
        {"name": "Comfy", "skills": {"comfortable": ["a", "b"], "near": ["c"]}},
        {"name": "Hard", "skills": {"challenging": ["d"], "far": ["e", "f"]}},
        {"name": "Empty"},
    ]})
