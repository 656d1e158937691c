"""Dataset editor: applies commands, persists, and triggers re-layout."""
from typing import Callable

from rings.model import DataModelError
from rings.types import DataModel
from . import commands
from .defaults import default_model
from .notify import NotificationQueue
from .store import SnapshotStore, import_json, export_json


class DatasetEditor:
    """Owns the current snapshot.

    Every successful change replaces the snapshot, saves it when a store is
    attached, and calls on_change with the new model (normally
    ``ChartSurface.render``). A failed change leaves the snapshot as it was
    and posts one message to the notification queue.
    """

    def __init__(self, model: DataModel | None = None, store: SnapshotStore | None = None,
                 notifications: NotificationQueue | None = None,
                 on_change: Callable[[DataModel], object] | None = None):
        if model is None:
            model = store.load() if store is not None else default_model()
        self._model = model
        self.store = store
        self.notifications = notifications if notifications is not None else NotificationQueue()
        self.on_change = on_change
        if on_change is not None:
            on_change(model)

    @property
    def model(self) -> DataModel:
        return self._model

    def _commit(self, new: DataModel) -> bool:
        if new is self._model:
            return False
        self._model = new
        if self.store is not None:
            self.store.save(new)
        if self.on_change is not None:
            self.on_change(new)
        return True

    def _apply(self, command, *args) -> bool:
        try:
            new = command(self._model, *args)
        except DataModelError as e:
            self.notifications.push(str(e))
            return False
        return self._commit(new)

    def add_category(self, name: str) -> bool:
        return self._apply(commands.add_category, name)

    def rename_category(self, idx: int, name: str) -> bool:
        return self._apply(commands.rename_category, idx, name)

    def remove_category(self, idx: int) -> bool:
        return self._apply(commands.remove_category, idx)

    def add_item(self, idx: int, tier: str, label: str) -> bool:
        return self._apply(commands.add_item, idx, tier, label)

    def remove_item(self, idx: int, tier: str, item_idx: int) -> bool:
        return self._apply(commands.remove_item, idx, tier, item_idx)

    def move_item(self, idx: int, tier: str, src: int, dst: int) -> bool:
        return self._apply(commands.move_item, idx, tier, src, dst)

    def apply_json(self, text: str) -> bool:
        """Replace the whole model from text; all or nothing."""
        try:
            new = import_json(text)
        except DataModelError as e:
            self.notifications.push(f"JSON import failed: {e}")
            return False
        return self._commit(new)

    def to_json(self) -> str:
        return export_json(self._model)
