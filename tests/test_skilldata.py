"""Tests for skilldata/: editing commands, JSON store, editor."""
import json
import pytest
from rings.model import DataModelError
from skilldata import (
    DEFAULT_DATA, default_model, reorder,
    add_category, rename_category, remove_category,
    add_item, remove_item, move_item,
    SnapshotStore, import_json, export_json,
    NotificationQueue, DatasetEditor,
)


# ============================================================
# Commands
# ============================================================

@pytest.mark.parametrize("src,dst,expected", [
    (0, 2, ["b", "c", "a"]),
    (2, 0, ["c", "a", "b"]),
    (1, 1, ["a", "b", "c"]),
    (0, 99, ["b", "c", "a"]),
    (2, -5, ["c", "a", "b"]),
])
def test_reorder(src, dst, expected):
    assert reorder(["a", "b", "c"], src, dst) == expected


class TestCommands:
    def test_add_category(self, model):
        m = add_category(model, "  新类别 ")
        assert m.categories[-1].name == "新类别"
        assert len(model.categories) == 8
        assert len(m.categories) == 9

    def test_add_blank_category_is_noop(self, model):
        assert add_category(model, "   ") is model

    def test_add_duplicate_category(self, model):
        with pytest.raises(DataModelError, match="already exists"):
            add_category(model, "前端")

    def test_rename(self, model):
        m = rename_category(model, 2, "Frontend")
        assert m.categories[2].name == "Frontend"
        assert m.categories[2].skills == model.categories[2].skills

    def test_rename_to_existing(self, model):
        with pytest.raises(DataModelError):
            rename_category(model, 2, "设计")

    def test_remove_category(self, model):
        m = remove_category(model, 0)
        assert m.categories[0].name == "技术栈"

    def test_bad_index(self, model):
        with pytest.raises(DataModelError, match="No category"):
            remove_category(model, 8)

    def test_add_item(self, model):
        m = add_item(model, 0, "far", "编译器")
        assert m.categories[0].items("far") == ("操作系统内核", "编译器")
        assert model.categories[0].items("far") == ("操作系统内核",)

    def test_add_duplicate_item(self, model):
        with pytest.raises(DataModelError, match="Item already exists: Git"):
            add_item(model, 1, "comfortable", "Git")

    def test_unknown_tier(self, model):
        with pytest.raises(DataModelError, match="Unknown tier"):
            add_item(model, 0, "middling", "x")

    def test_remove_item(self, model):
        m = remove_item(model, 0, "challenging", 0)
        assert m.categories[0].items("challenging") == ("安全合规理解",)

    def test_move_item(self, model):
        m = move_item(model, 0, "comfortable", 0, 2)
        assert m.categories[0].items("comfortable") == ("计算机网络", "HCI 研究方法", "数据结构")

    def test_move_item_bad_src(self, model):
        with pytest.raises(DataModelError):
            move_item(model, 0, "near", 3, 0)


# ============================================================
# JSON and store
# ============================================================

class TestJson:
    def test_round_trip(self, model):
        assert import_json(export_json(model)) == model

    def test_export_keeps_unicode(self, model):
        assert "计算机通识" in export_json(model)

    def test_invalid_json(self):
        with pytest.raises(DataModelError, match="Invalid JSON"):
            import_json("{not json")

    def test_invalid_shape(self):
        with pytest.raises(DataModelError):
            import_json('{"categories": 3}')


class TestSnapshotStore:
    def test_missing_file_gives_default(self, tmp_path):
        store = SnapshotStore(str(tmp_path / "store.json"))
        assert store.load() == default_model()

    def test_save_and_load(self, tmp_path, solo_model):
        store = SnapshotStore(str(tmp_path / "store.json"))
        store.save(solo_model)
        assert store.load() == solo_model
        assert not (tmp_path / "store.json.tmp").exists()

    def test_key_and_other_keys_kept(self, tmp_path, solo_model):
        path = tmp_path / "store.json"
        path.write_text(json.dumps({"other": 1}), encoding="utf-8")
        SnapshotStore(str(path)).save(solo_model)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["other"] == 1
        assert data["cci-data"]["categories"][0]["name"] == "Solo"

    def test_corrupt_file_gives_default(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("garbage", encoding="utf-8")
        assert SnapshotStore(str(path)).load() == default_model()


# ============================================================
# Notifications and editor
# ============================================================

class TestNotificationQueue:
    def test_newest_wins(self):
        q = NotificationQueue()
        q.push("first")
        q.push("second")
        assert len(q) == 1
        assert q.pop() == "second"
        assert q.pop() is None

    def test_drain(self):
        q = NotificationQueue(maxlen=3)
        for m in "abcd":
            q.push(m)
        assert q.drain() == ["b", "c", "d"]
        assert len(q) == 0


class TestDatasetEditor:
    def test_initial_render(self):
        seen = []
        DatasetEditor(on_change=seen.append)
        assert seen == [default_model()]

    def test_successful_change(self, tmp_path):
        seen = []
        store = SnapshotStore(str(tmp_path / "s.json"))
        ed = DatasetEditor(store=store, on_change=seen.append)
        assert ed.add_item(0, "near", "Rust")
        assert ed.model.categories[0].items("near")[-1] == "Rust"
        assert seen[-1] is ed.model
        assert store.load() == ed.model

    def test_failed_change_notifies(self):
        seen = []
        ed = DatasetEditor(on_change=seen.append)
        before = ed.model
        assert not ed.add_category("前端")
        assert ed.model is before
        assert len(seen) == 1
        assert ed.notifications.pop() == "Category already exists: 前端"

    def test_noop_change_does_not_rerender(self):
        seen = []
        ed = DatasetEditor(on_change=seen.append)
        assert not ed.add_category("  ")
        assert len(seen) == 1

    def test_apply_json(self):
        ed = DatasetEditor()
        assert ed.apply_json('{"categories": [{"name": "x"}]}')
        assert [c.name for c in ed.model.categories] == ["x"]
        assert json.loads(ed.to_json())["categories"][0]["name"] == "x"

    def test_apply_bad_json_keeps_model(self):
        ed = DatasetEditor()
        before = ed.model
        assert not ed.apply_json("[")
        assert ed.model is before
        assert ed.notifications.pop().startswith("JSON import failed: Invalid JSON")

    def test_loads_from_store(self, tmp_path, solo_model):
        store = SnapshotStore(str(tmp_path / "s.json"))
        store.save(solo_model)
        assert DatasetEditor(store=store).model == solo_model

    def test_default_data_has_eight_categories(self):
        assert len(DEFAULT_DATA["categories"]) == 8


class TestSnapshotsStayReadOnly:
    def test_added_item_skills_read_only(self, model):
        m = add_item(model, 0, "near", "Rust")
        with pytest.raises(TypeError):
            m.categories[0].skills["near"] = ()

    def test_added_category_skills_read_only(self, model):
        m = add_category(model, "New")
        with pytest.raises(TypeError):
            m.categories[-1].skills["far"] = ("x",)

    def test_command_input_is_cleaned(self, model):
        m = add_item(model, 0, "far", " 编\x01译器 ")
        assert m.categories[0].items("far")[-1] == "编译器"
