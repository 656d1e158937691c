"""JSON import/export and the single-key snapshot store."""
import json
import os

from rings.constants import STORE_KEY
from rings.model import DataModelError, normalize_model, model_to_dict
from rings.types import DataModel
from .defaults import default_model


def import_json(text: str) -> DataModel:
    """Parse data model text. Raises DataModelError on any failure."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise DataModelError(f"Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e
    return normalize_model(raw)


def export_json(model: DataModel) -> str:
    return json.dumps(model_to_dict(model), ensure_ascii=False, indent=2)


class SnapshotStore:
    """Key-value JSON file holding the data model under one fixed key.

    Other keys in the file are left alone on save.
    """

    def __init__(self, path: str, key: str = STORE_KEY):
        self.path = path
        self.key = key

    def _read_all(self) -> dict:
        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise DataModelError(f"{self.path}: expected a JSON object")
        return data

    def load(self) -> DataModel:
        """Stored model, or the built-in default if absent or unreadable."""
        try:
            return normalize_model(self._read_all()[self.key])
        except (OSError, KeyError, ValueError):
            return default_model()

    def save(self, model: DataModel):
        try:
            data = self._read_all()
        except (OSError, ValueError):
            data = {}
        data[self.key] = model_to_dict(model)
        tmp = self.path + ".tmp"
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp, self.path)
