"""
Messenger - publish/subscribe channel for view-model notifications.

Nodes only see the NotificationChannel contract (``publish``); who listens is
decided by whoever owns the Messenger instance and injects it.
"""
import asyncio
import inspect
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, List
from loguru import logger


class NotificationChannel(ABC):
    """
    Contract consumed by tree nodes.

    ``publish`` delivers a message to zero or more subscribers. Delivery order
    and subscriber error isolation are the channel's job; publishers never
    see subscriber failures.
    """

    @abstractmethod
    def publish(self, message: Any) -> None:
        """Deliver ``message`` to the subscribers of ``message.topic``."""
        pass


class Messenger(NotificationChannel):
    """
    In-process message bus routing on ``message.topic``.

    Usage:
        messenger = Messenger()
        messenger.subscribe(Events.TREE_NODE_SELECTED, show_details)

        # Somewhere in a node
        messenger.publish(TreeNodeSelectedMessage(node))
    """

    def __init__(self):
        self._subscribers: Dict[str, List[Callable]] = {}

    def subscribe(self, topic: str, handler: Callable) -> None:
        """
        Subscribe to a topic.

        Args:
            topic: Topic name (see ``Events``)
            handler: Callback receiving the message (sync or async)
        """
        handlers = self._subscribers.setdefault(topic, [])
        if handler not in handlers:
            handlers.append(handler)
            logger.debug(f"Subscribed to {topic}: {getattr(handler, '__name__', handler)}")

    def unsubscribe(self, topic: str, handler: Callable) -> None:
        if topic in self._subscribers and handler in self._subscribers[topic]:
            self._subscribers[topic].remove(handler)
            logger.debug(f"Unsubscribed from {topic}: {getattr(handler, '__name__', handler)}")

    def subscribers(self, topic: str) -> List[Callable]:
        return list(self._subscribers.get(topic, []))

    def clear(self) -> None:
        self._subscribers.clear()

    def publish(self, message: Any) -> None:
        """
        Deliver a message synchronously, in subscription order.

        Async handlers are scheduled on the running loop and not awaited.
        Handler errors are logged and swallowed so they never reach the
        publishing node.

        Raises:
            TypeError: if the message has no ``topic`` attribute.
        """
        topic = getattr(message, "topic", None)
        if not isinstance(topic, str):
            raise TypeError(f"Cannot publish {message!r}: messages need a string 'topic'")

        for handler in list(self._subscribers.get(topic, [])):
            try:
                result = handler(message)
                # Covers async def functions and objects with an async __call__
                if inspect.isawaitable(result):
                    self._schedule(topic, result)
            except Exception as e:
                logger.error(f"Error in handler for {topic}: {e}")

    def _schedule(self, topic: str, awaitable: Awaitable) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning(f"No running event loop; async handler for {topic} skipped")
            if inspect.iscoroutine(awaitable):
                awaitable.close()
            return

        task = asyncio.ensure_future(awaitable, loop=loop)
        task.add_done_callback(lambda t: self._report(topic, t))

    @staticmethod
    def _report(topic: str, task: "asyncio.Task") -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(f"Error in async handler for {topic}: {error}")
