"""
Tree View-Model - adapter between a domain object and a tree control item.

A TreeNode tracks expansion, selection and loading state for one item of a
hierarchical view. Lazily created nodes start with their children UNLOADED,
which a view renders as a single placeholder child (``TreeNode.DUMMY_CHILD``)
so the expand affordance is visible. The first expansion drops the
placeholder and schedules ``load_children()`` on the running asyncio loop.

Usage:
    class FolderNode(TreeNode):
        def __init__(self, folder, parent, channel):
            super().__init__(parent, channel, lazy_load_children=True)
            self.folder = folder

        async def load_children(self):
            subfolders = await self.run_in_background(list_subfolders, self.folder)
            for sub in subfolders:
                self.children.append(FolderNode(sub, self, self.channel))
"""
import asyncio
import functools
import weakref
from typing import Any, Callable, Iterator, Optional

from loguru import logger
from PySide6.QtCore import Signal

from lazytree.core.config import TreeSettings
from lazytree.core.events import NotificationChannel
from lazytree.core.exceptions import (
    ChannelNotConfiguredError,
    EventLoopNotRunningError,
    PopulationError,
    TreeStateError,
)
from lazytree.core.messaging import TreeNodeLoadFailedMessage, TreeNodeSelectedMessage
from lazytree.ui.mvvm.bindable import BindableProperty
from lazytree.ui.mvvm.children import ChildCollection, ChildrenState
from lazytree.ui.mvvm.viewmodel import BaseViewModel


class TreeNode(BaseViewModel):
    """
    Base class for all view-models displayed by tree items.

    Args:
        parent: Owning node, or None for a root. Held weakly.
        channel: NotificationChannel receiving selection (and load failure)
            messages. Required for any node that will be selected.
        lazy_load_children: Start with UNLOADED children and populate them on
            first expansion. False creates an empty, already-loaded node.
        settings: Behaviour switches; inherited from ``parent`` when omitted.
    """

    expandedChanged = Signal(bool)
    selectedChanged = Signal(bool)
    loadingChanged = Signal(bool)

    # Shared unloaded marker, assigned once the class exists
    DUMMY_CHILD: "TreeNode" = None

    is_selected = BindableProperty(
        default=False, signal_name="selectedChanged", coerce=bool, on_change="_on_selected_changed"
    )

    def __init__(
        self,
        parent: Optional["TreeNode"] = None,
        channel: Optional[NotificationChannel] = None,
        lazy_load_children: bool = False,
        *,
        settings: Optional[TreeSettings] = None,
    ):
        super().__init__()
        self._parent_ref = weakref.ref(parent) if parent is not None else None
        self._channel = channel
        if settings is None:
            settings = parent.settings if parent is not None else TreeSettings()
        self._settings = settings

        self._is_expanded = False
        self._is_loading = False
        self._load_task: Optional[asyncio.Task] = None
        self._load_error: Optional[BaseException] = None

        state = ChildrenState.UNLOADED if lazy_load_children else ChildrenState.LOADED
        self._children = ChildCollection(TreeNode.DUMMY_CHILD, TreeNode, state)

    # --- Structure ---

    @property
    def children(self) -> ChildCollection:
        """The logical child items of this node."""
        return self._children

    @property
    def parent_node(self) -> Optional["TreeNode"]:
        """The owning node, or None for a root (or once the parent is gone)."""
        return self._parent_ref() if self._parent_ref is not None else None

    @property
    def channel(self) -> Optional[NotificationChannel]:
        return self._channel

    # Name used by MVVM-Light style hosts
    messenger_instance = channel

    @property
    def settings(self) -> TreeSettings:
        return self._settings

    def ancestors(self) -> Iterator["TreeNode"]:
        """Yield parent, grandparent, ... up to the root."""
        node = self.parent_node
        while node is not None:
            yield node
            node = node.parent_node

    @property
    def root(self) -> "TreeNode":
        node = self
        for node in self.ancestors():
            pass
        return node

    @property
    def depth(self) -> int:
        return sum(1 for _ in self.ancestors())

    def walk(self) -> Iterator["TreeNode"]:
        """Pre-order traversal of this node and its loaded descendants."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if not node.has_dummy_child:
                stack.extend(reversed(list(node.children)))

    @property
    def has_dummy_child(self) -> bool:
        """True if this node's children have not been populated yet."""
        return self._children.state is ChildrenState.UNLOADED

    # --- Expansion ---

    @property
    def is_expanded(self) -> bool:
        return self._is_expanded

    @is_expanded.setter
    def is_expanded(self, value: bool) -> None:
        self.set_expanded(value)

    def set_expanded(self, value: bool) -> None:
        """
        Expand or collapse the node.

        Expanding also expands every ancestor up to the root, and schedules
        population for any node on that path whose children are unloaded.
        Collapsing only touches this node.

        Raises:
            EventLoopNotRunningError: population is needed but no asyncio loop
                is running. Raised before any state changes.
        """
        if not value:
            if self.set_field("_is_expanded", "is_expanded", False, self.expandedChanged):
                logger.debug(f"{self!r} collapsed")
            return

        path = [self, *self.ancestors()]
        pending = [node for node in path if node.has_dummy_child]
        loop = self._running_loop() if pending else None

        for node in path:
            if node.set_field("_is_expanded", "is_expanded", True, node.expandedChanged):
                logger.debug(f"{node!r} expanded")

        for node in pending:
            node._start_population(loop)

    def _running_loop(self) -> asyncio.AbstractEventLoop:
        try:
            return asyncio.get_running_loop()
        except RuntimeError:
            raise EventLoopNotRunningError(
                f"Expanding {self!r} needs a running asyncio loop to load children "
                "(run the Qt application under qasync)"
            ) from None

    # --- Loading ---

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @is_loading.setter
    def is_loading(self, value: bool) -> None:
        self.set_field("_is_loading", "is_loading", bool(value), self.loadingChanged)

    @property
    def load_task(self) -> Optional[asyncio.Task]:
        return self._load_task

    @property
    def load_error(self) -> Optional[BaseException]:
        """Error raised by the last population attempt, if it failed."""
        return self._load_error

    def _start_population(self, loop: asyncio.AbstractEventLoop) -> None:
        # Leaving UNLOADED first makes a second expansion a no-op
        self._children.mark_loaded()
        self._load_error = None
        self.is_loading = True
        logger.debug(f"{self!r} loading children")
        self._load_task = loop.create_task(self._populate())
        self._load_task.add_done_callback(self._on_population_done)

    async def _populate(self) -> None:
        timeout = self._settings.load_timeout
        # A None delay never expires
        deadline = asyncio.timeout(timeout)
        try:
            async with deadline:
                await self.load_children()
            logger.debug(f"{self!r} loaded {len(self._children)} children")
        except asyncio.CancelledError:
            logger.debug(f"{self!r} loading cancelled")
            raise
        except TreeStateError:
            logger.opt(exception=True).critical(f"{self!r} broke the children invariant while loading")
            raise
        except TimeoutError as e:
            if not deadline.expired():
                # Raised by load_children itself, e.g. a socket read
                self._report_failure(e)
                return
            error = PopulationError(f"Loading children of {self!r} timed out after {timeout}s", self)
            error.__cause__ = e
            self._report_failure(error)
        except Exception as e:
            self._report_failure(e)
        finally:
            self.is_loading = False

    def _on_population_done(self, task: asyncio.Task) -> None:
        # Covers tasks cancelled before their first step ran
        self.is_loading = False
        if not task.cancelled():
            # Marks the error as retrieved; _populate already logged it
            task.exception()

    def _report_failure(self, error: BaseException) -> None:
        self._load_error = error
        logger.error(f"Failed to load children of {self!r}: {error}")

        if self._channel is None or not self._settings.publish_load_failures:
            return
        try:
            self._channel.publish(TreeNodeLoadFailedMessage(self, error))
        except Exception as e:
            logger.error(f"Could not publish load failure for {self!r}: {e}")

    def cancel_loading(self) -> bool:
        """
        Cancel an in-flight population.

        Children appended before the cancellation stay in place.

        Returns:
            True if a running load was asked to cancel.
        """
        task = self._load_task
        if task is None or task.done():
            return False
        return task.cancel()

    async def wait_loaded(self) -> None:
        """
        Wait for the pending population, if any, to finish.

        Failures are already reported through ``load_error``; only invariant
        violations (TreeStateError) are re-raised here.
        """
        task = self._load_task
        if task is None:
            return
        await asyncio.wait({task})
        if not task.cancelled() and isinstance(task.exception(), TreeStateError):
            raise task.exception()

    async def run_in_background(self, func: Callable[..., Any], *args, **kwargs) -> Any:
        """
        Run a blocking callable on the loop's default executor.

        The result is returned on the owner thread, so callers can append to
        ``children`` right after awaiting it.
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(func, *args, **kwargs))

    async def load_children(self) -> None:
        """
        Invoked when the child items need to be loaded on demand.

        Subclasses override this to append real nodes to ``children`` in
        display order. ``is_loading`` is set before and cleared after the
        call by the base class; raising reports a failure.
        """
        return None

    # --- Selection ---

    def on_is_selected_changed(self) -> None:
        """
        Publish a TreeNodeSelectedMessage for this node.

        Called by the binding layer when it sees the selection change.

        Raises:
            ChannelNotConfiguredError: no channel was given at construction.
        """
        if self._channel is None:
            raise ChannelNotConfiguredError(self)
        self._channel.publish(TreeNodeSelectedMessage(self))

    def _on_selected_changed(self, value: bool) -> None:
        if value and self._settings.auto_publish_selection:
            self.on_is_selected_changed()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} expanded={self._is_expanded} loading={self._is_loading}>"


def _refuse_selection(value: Any) -> bool:
    if value:
        raise TreeStateError("The unloaded placeholder cannot be selected")
    return False


class _UnloadedPlaceholder(TreeNode):
    """The marker shown as the only child of an unloaded node."""

    # Rejected before the value is stored, so the shared marker never reads as selected
    is_selected = BindableProperty(default=False, signal_name="selectedChanged", coerce=_refuse_selection)

    def set_expanded(self, value: bool) -> None:
        raise TreeStateError("The unloaded placeholder cannot be expanded")

    def on_is_selected_changed(self) -> None:
        raise TreeStateError("The unloaded placeholder cannot be selected")

    async def load_children(self) -> None:
        raise TreeStateError("The unloaded placeholder has no children to load")

    def __repr__(self) -> str:
        return "<unloaded>"


TreeNode.DUMMY_CHILD = UNLOADED_CHILD = _UnloadedPlaceholder()

# Name kept for hosts ported from WPF/MVVM code
TreeViewItemViewModel = TreeNode
