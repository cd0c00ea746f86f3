"""
Observable child collection for tree view-models.

The collection carries an explicit ChildrenState. While UNLOADED it presents
the shared placeholder as its only element so a tree control can draw an
expand affordance; it cannot be mutated until ``mark_loaded()`` is called.
"""
from collections.abc import MutableSequence
from enum import Enum
from typing import Any, Iterable, List, Optional

from lazytree.core.events import Signal
from lazytree.core.exceptions import TreeStateError


class ChildrenState(Enum):
    """Population state of a node's children."""
    UNLOADED = "unloaded"
    LOADED = "loaded"


class CollectionAction:
    """Actions reported through ``collectionChanged``."""
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    RESET = "reset"


class ChildCollection(MutableSequence):
    """
    Ordered, observable sequence of child nodes.

    ``collectionChanged`` is emitted as ``(action, index, items)`` after every
    mutation. A RESET carries index 0 and the removed items.

    Args:
        placeholder: Shared marker presented while UNLOADED.
        item_type: Type every real child must be an instance of.
        state: Initial state.
    """

    def __init__(self, placeholder: Any, item_type: type = object,
                 state: ChildrenState = ChildrenState.LOADED):
        self._placeholder = placeholder
        self._item_type = item_type
        self._state = state
        self._items: List[Any] = []
        self.collectionChanged = Signal("CollectionChanged")

    @property
    def state(self) -> ChildrenState:
        return self._state

    @property
    def is_unloaded(self) -> bool:
        return self._state is ChildrenState.UNLOADED

    def mark_loaded(self) -> None:
        """
        Leave the UNLOADED state, dropping the placeholder.

        Raises:
            TreeStateError: if the collection is already loaded.
        """
        if self._state is ChildrenState.LOADED:
            raise TreeStateError("Children are already loaded; UNLOADED -> LOADED happens once")
        self._state = ChildrenState.LOADED
        self.collectionChanged.emit(CollectionAction.REMOVE, 0, [self._placeholder])

    # --- Sequence protocol ---

    def _view(self) -> List[Any]:
        if self._state is ChildrenState.UNLOADED:
            return [self._placeholder]
        return self._items

    def __len__(self) -> int:
        return len(self._view())

    def __getitem__(self, index):
        return self._view()[index]

    def __iter__(self):
        return iter(list(self._view()))

    def __contains__(self, item) -> bool:
        return any(child is item for child in self._view())

    def index(self, item, start: int = 0, stop: Optional[int] = None) -> int:
        view = self._view()
        stop = len(view) if stop is None else stop
        for i in range(start, min(stop, len(view))):
            if view[i] is item:
                return i
        raise ValueError(f"{item!r} is not a child")

    # --- Mutation ---

    def _check_writable(self) -> None:
        if self._state is ChildrenState.UNLOADED:
            raise TreeStateError(
                "Cannot modify children while unloaded; call mark_loaded() first"
            )

    def _check_item(self, item) -> None:
        if item is self._placeholder:
            raise TreeStateError("The unloaded placeholder cannot be added as a real child")
        if not isinstance(item, self._item_type):
            raise TypeError(
                f"Children must be {self._item_type.__name__} instances, got {type(item).__name__}"
            )

    def insert(self, index: int, item) -> None:
        self._check_writable()
        self._check_item(item)
        # Clamp the way list.insert does so the reported index is the real one
        size = len(self._items)
        position = index + size if index < 0 else index
        position = min(max(position, 0), size)
        self._items.insert(position, item)
        self.collectionChanged.emit(CollectionAction.ADD, position, [item])

    def append(self, item) -> None:
        self._check_writable()
        self._check_item(item)
        self._items.append(item)
        self.collectionChanged.emit(CollectionAction.ADD, len(self._items) - 1, [item])

    def extend(self, items: Iterable) -> None:
        for item in items:
            self.append(item)

    def __setitem__(self, index, item) -> None:
        self._check_writable()
        if isinstance(index, slice):
            raise TypeError("Slice assignment is not supported on child collections")
        self._check_item(item)
        old = self._items[index]
        self._items[index] = item
        self.collectionChanged.emit(CollectionAction.REPLACE, index % len(self._items), [old, item])

    def __delitem__(self, index) -> None:
        self._check_writable()
        if isinstance(index, slice):
            raise TypeError("Slice deletion is not supported on child collections")
        old = self._items[index]
        position = index % len(self._items)
        del self._items[index]
        self.collectionChanged.emit(CollectionAction.REMOVE, position, [old])

    def remove(self, item) -> None:
        del self[self.index(item)]

    def clear(self) -> None:
        self._check_writable()
        removed, self._items = self._items, []
        self.collectionChanged.emit(CollectionAction.RESET, 0, removed)

    def __repr__(self) -> str:
        if self._state is ChildrenState.UNLOADED:
            return "ChildCollection(<unloaded>)"
        return f"ChildCollection({self._items!r})"
