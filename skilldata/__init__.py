"""Dataset editing: defaults, snapshot commands, JSON store, notifications."""

from .defaults import DEFAULT_DATA, default_model
from .commands import (
    reorder,
    add_category, rename_category, remove_category,
    add_item, remove_item, move_item,
)
from .store import SnapshotStore, import_json, export_json
from .notify import NotificationQueue
from .editor import DatasetEditor
