"""
lazytree - view-model state for lazily populated tree displays.

Decouples a tree control from the domain objects it shows: per-node
expansion, selection and on-demand child loading, with selection published
on an injected notification channel.
"""

# Core
from lazytree.core.config import ConfigManager, AppConfig, GeneralSettings, TreeSettings
from lazytree.core.events import Signal, NotificationChannel, Messenger, Events
from lazytree.core.exceptions import (
    TreeViewModelError,
    ConfigurationError,
    ChannelNotConfiguredError,
    EventLoopNotRunningError,
    TreeStateError,
    PopulationError,
)
from lazytree.core.logging import setup_logging
from lazytree.core.messaging import TreeNodeSelectedMessage, TreeNodeLoadFailedMessage

# View-models
from lazytree.ui.mvvm import (
    BaseViewModel,
    BindableBase,
    BindableProperty,
    ChildCollection,
    ChildrenState,
    CollectionAction,
    TreeNode,
    TreeViewItemViewModel,
    UNLOADED_CHILD,
    FactoryTreeNode,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "TreeSettings",
    "Signal",
    "NotificationChannel",
    "Messenger",
    "Events",
    "TreeViewModelError",
    "ConfigurationError",
    "ChannelNotConfiguredError",
    "EventLoopNotRunningError",
    "TreeStateError",
    "PopulationError",
    "setup_logging",
    "TreeNodeSelectedMessage",
    "TreeNodeLoadFailedMessage",
    "BaseViewModel",
    "BindableBase",
    "BindableProperty",
    "ChildCollection",
    "ChildrenState",
    "CollectionAction",
    "TreeNode",
    "TreeViewItemViewModel",
    "UNLOADED_CHILD",
    "FactoryTreeNode",
]
