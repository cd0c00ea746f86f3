"""
FactoryTreeNode - a concrete lazy node driven by a fetch callable.

Covers the common case where a node kind only differs in how it fetches
its children, without writing a TreeNode subclass per kind.
"""
import inspect
from typing import Any, Callable, Iterable, Optional

from lazytree.core.config import TreeSettings
from lazytree.core.events import NotificationChannel
from lazytree.ui.mvvm.tree_viewmodel import TreeNode


class FactoryTreeNode(TreeNode):
    """
    Lazy node whose children come from ``fetch(node)``.

    ``fetch`` may be a coroutine function or a plain blocking callable; the
    latter runs on the default executor. It returns an iterable of items.
    Items that are already TreeNode instances are appended as-is; anything
    else is turned into a node with ``child_factory(item, parent)``.

    Args:
        item: Domain object this node adapts.
        fetch: Callable returning the child items of a node.
        child_factory: Builds a child node from a raw item. Defaults to a
            FactoryTreeNode sharing this node's fetch and channel.
        parent, channel, lazy_load_children, settings: as for TreeNode.
    """

    def __init__(
        self,
        item: Any,
        fetch: Callable[["FactoryTreeNode"], Any],
        parent: Optional[TreeNode] = None,
        channel: Optional[NotificationChannel] = None,
        lazy_load_children: bool = True,
        *,
        child_factory: Optional[Callable[[Any, "FactoryTreeNode"], TreeNode]] = None,
        settings: Optional[TreeSettings] = None,
    ):
        super().__init__(parent, channel, lazy_load_children, settings=settings)
        self.item = item
        self._fetch = fetch
        self._child_factory = child_factory

    def _make_child(self, item: Any) -> TreeNode:
        if self._child_factory is not None:
            return self._child_factory(item, self)
        return FactoryTreeNode(item, self._fetch, self, self.channel)

    async def load_children(self) -> None:
        if inspect.iscoroutinefunction(self._fetch):
            items: Iterable = await self._fetch(self)
        else:
            items = await self.run_in_background(self._fetch, self)

        for item in items or ():
            child = item if isinstance(item, TreeNode) else self._make_child(item)
            self.children.append(child)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.item!r}>"
