"""
Event System - Observer signals and the notification channel.

Provides:
- Signal: Simple observer for sync in-object notifications (collections, config)
- NotificationChannel: The publish contract tree nodes depend on
- Messenger: Default in-process NotificationChannel with topic subscriptions
- Events: Topic constants

Usage:
    from lazytree.core.events import Messenger, Events

    messenger = Messenger()
    messenger.subscribe(Events.TREE_NODE_SELECTED, on_node_selected)
"""
from .observer import Signal
from .messenger import NotificationChannel, Messenger
from .constants import Events


__all__ = ["Signal", "NotificationChannel", "Messenger", "Events"]
