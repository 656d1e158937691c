"""Tests for rings/model.py and rings/config.py."""
import pytest
from rings.model import (
    DataModelError, normalize_model, normalize_category, model_to_dict, clean_text,
)
from rings.config import ChartConfig, ConfigError, DEFAULT_CONFIG, make_config
from rings.types import DataModel, TIER_KEYS, tier_by_key


class TestNormalize:
    def test_missing_tiers_filled(self):
        m = normalize_model({"categories": [{"name": "a", "skills": {"near": ["x"]}}]})
        cat = m.categories[0]
        assert list(cat.skills) == list(TIER_KEYS)
        assert cat.items("near") == ("x",)
        assert cat.items("comfortable") == ()

    def test_missing_skills(self):
        cat = normalize_category({"name": "a"})
        assert all(cat.items(k) == () for k in TIER_KEYS)

    def test_unknown_tier_dropped(self):
        cat = normalize_category({"name": "a", "skills": {"bogus": ["x"]}})
        assert "bogus" not in cat.skills

    def test_idempotent(self, model):
        once = normalize_model(model_to_dict(model))
        assert normalize_model(once) == once
        assert once == model

    def test_accepts_data_model(self, model):
        assert normalize_model(model) == model

    def test_categories_not_a_list(self):
        with pytest.raises(DataModelError, match="categories"):
            normalize_model({"categories": "nope"})
        with pytest.raises(DataModelError, match="categories"):
            normalize_model({})

    def test_not_an_object(self):
        with pytest.raises(DataModelError):
            normalize_model([1, 2])

    def test_tier_items_must_be_list(self):
        with pytest.raises(DataModelError, match="list"):
            normalize_category({"name": "a", "skills": {"far": "text"}})

    def test_empty_model(self):
        assert normalize_model({"categories": []}) == DataModel()

    def test_model_to_dict(self):
        m = normalize_model({"categories": [{"name": "a", "skills": {"far": ["x"]}}]})
        d = model_to_dict(m)
        assert d["categories"][0]["skills"]["far"] == ["x"]
        assert d["categories"][0]["skills"]["comfortable"] == []


def test_tier_by_key():
    assert tier_by_key("near").color == "#ef4444"
    with pytest.raises(KeyError):
        tier_by_key("nope")


class TestConfig:
    def test_defaults(self):
        assert DEFAULT_CONFIG.size == 720
        assert DEFAULT_CONFIG.center == (360, 360)
        assert DEFAULT_CONFIG.radius == 360
        assert make_config() == DEFAULT_CONFIG

    def test_override(self):
        cfg = make_config({"size": 500, "text_flow": "ccw"})
        assert isinstance(cfg, ChartConfig)
        assert cfg.center == (250, 250)
        assert cfg.text_flow == "ccw"

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="Unknown config keys: colour"):
            make_config({"colour": "red"})

    @pytest.mark.parametrize("overrides,msg", [
        ({"size": 0}, "size"),
        ({"inner_core": 400}, "inner_core"),
        ({"min_row": 0}, "min_row"),
        ({"base_spacer_rows": -1}, "base_spacer_rows"),
        ({"comfortable_spacer_rows": 1.5}, "comfortable_spacer_rows"),
        ({"base_spacer_rows": True}, "base_spacer_rows"),
        ({"pad_angle": -0.1}, "pad_angle"),
        ({"pad_angle": 7.0}, "pad_angle"),
        ({"label_font_size": 0}, "label_font_size"),
        ({"text_flow": "up"}, "text_flow"),
    ])
    def test_invalid_values(self, overrides, msg):
        with pytest.raises(ConfigError, match=msg):
            make_config(overrides)


class TestCleanText:
    def test_control_chars_dropped(self):
        m = normalize_model({"categories": [
            {"name": "a\x01b", "skills": {"comfortable": ["bad\u0001label", "ok\x0b"]}}]})
        cat = m.categories[0]
        assert cat.name == "ab"
        assert cat.items("comfortable") == ("badlabel", "ok")

    def test_whitespace_kept(self):
        assert clean_text("a\tb\nc d") == "a\tb\nc d"

    def test_non_string_converted(self):
        assert clean_text(42) == "42"


def test_skills_are_read_only(model):
    with pytest.raises(TypeError):
        model.categories[0].skills["far"] = ()
    assert model.categories[0].items("far") == ("操作系统内核",)
