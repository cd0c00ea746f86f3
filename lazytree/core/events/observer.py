from loguru import logger
from typing import Callable, List


class Signal:
    """
    Synchronous in-object observer, the plain-Python counterpart of a Qt Signal.

    Used where a QObject would be overkill (child collections, config manager).
    A failing subscriber is logged and does not stop delivery to the others.
    """
    def __init__(self, name: str = "Signal"):
        self.name = name
        self._subscribers: List[Callable] = []

    def connect(self, callback: Callable) -> Callable:
        """Connect a callback; returns it so the method can be used as a decorator."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)
        return callback

    def disconnect(self, callback: Callable):
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def clear(self):
        self._subscribers.clear()

    def emit(self, *args, **kwargs):
        """Broadcast arguments to all subscribers synchronously."""
        # Snapshot so a subscriber may disconnect itself while being notified
        for sub in list(self._subscribers):
            try:
                sub(*args, **kwargs)
            except Exception as e:
                logger.error(f"Signal '{self.name}' error in subscriber '{sub}': {e}")

    def __len__(self) -> int:
        return len(self._subscribers)

    def __repr__(self) -> str:
        return f"Signal({self.name!r}, subscribers={len(self._subscribers)})"
