"""Bounded notification channel owned by the UI layer."""
from collections import deque


class NotificationQueue:
    """Newest-wins message queue; with maxlen=1 it shows one message at a time."""

    def __init__(self, maxlen: int = 1):
        self._q: deque[str] = deque(maxlen=maxlen)

    def push(self, message: str):
        self._q.append(message)

    def pop(self) -> str | None:
        """Oldest pending message, or None."""
        return self._q.popleft() if self._q else None

    def drain(self) -> list[str]:
        out = list(self._q)
        self._q.clear()
        return out

    def __len__(self) -> int:
        return len(self._q)
