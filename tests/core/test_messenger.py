"""
Messenger - Unit Tests

Covers subscription, topic routing, sync/async handlers and handler error
isolation.
"""
import asyncio
from dataclasses import dataclass
from typing import ClassVar

import pytest

from lazytree.core.events import Events, Messenger, NotificationChannel
from lazytree.core.messaging import TreeNodeSelectedMessage


@dataclass
class PingMessage:
    topic: ClassVar[str] = "test.ping"
    value: int = 0


class TestMessengerSubscription:
    """Test topic subscription bookkeeping."""

    def test_is_a_notification_channel(self, messenger):
        assert isinstance(messenger, NotificationChannel)

    def test_subscribe_to_topic(self, messenger):
        def handler(message):
            pass

        messenger.subscribe("test.ping", handler)

        assert messenger.subscribers("test.ping") == [handler]

    def test_subscribe_duplicate_handler(self, messenger):
        """Subscribing the same handler twice keeps one entry."""
        def handler(message):
            pass

        messenger.subscribe("test.ping", handler)
        messenger.subscribe("test.ping", handler)

        assert len(messenger.subscribers("test.ping")) == 1

    def test_unsubscribe(self, messenger):
        def handler(message):
            pass

        messenger.subscribe("test.ping", handler)
        messenger.unsubscribe("test.ping", handler)

        assert messenger.subscribers("test.ping") == []

    def test_unsubscribe_unknown_is_noop(self, messenger):
        def handler(message):
            pass

        # Should not raise
        messenger.unsubscribe("nonexistent.topic", handler)

    def test_clear(self, messenger):
        messenger.subscribe("test.ping", lambda m: None)
        messenger.clear()

        assert messenger.subscribers("test.ping") == []


class TestMessengerPublishing:
    """Test message delivery."""

    def test_publish_routes_on_topic(self, messenger):
        pings, others = [], []
        messenger.subscribe("test.ping", pings.append)
        messenger.subscribe("test.other", others.append)

        message = PingMessage(42)
        messenger.publish(message)

        assert pings == [message]
        assert others == []

    def test_publish_in_subscription_order(self, messenger):
        call_order = []
        messenger.subscribe("test.ping", lambda m: call_order.append(1))
        messenger.subscribe("test.ping", lambda m: call_order.append(2))

        messenger.publish(PingMessage())

        assert call_order == [1, 2]

    def test_publish_without_subscribers(self, messenger):
        # Should not raise
        messenger.publish(PingMessage())

    def test_publish_requires_topic(self, messenger):
        with pytest.raises(TypeError):
            messenger.publish({"value": 1})

    def test_selected_message_topic(self, messenger):
        received = []
        messenger.subscribe(Events.TREE_NODE_SELECTED, received.append)

        node = object()
        messenger.publish(TreeNodeSelectedMessage(node))

        assert len(received) == 1
        assert received[0].node is node

    @pytest.mark.asyncio
    async def test_publish_to_async_handler(self, messenger):
        received = []

        async def handler(message):
            received.append(message.value)

        messenger.subscribe("test.ping", handler)
        messenger.publish(PingMessage(99))

        # Scheduled, not awaited by publish
        assert received == []
        await asyncio.sleep(0)
        assert received == [99]

    @pytest.mark.asyncio
    async def test_publish_to_async_callable_object(self, messenger):
        class Recorder:
            def __init__(self):
                self.received = []

            async def __call__(self, message):
                self.received.append(message.value)

        recorder = Recorder()
        messenger.subscribe("test.ping", recorder)
        messenger.publish(PingMessage(7))

        await asyncio.sleep(0)
        assert recorder.received == [7]

    def test_async_handler_without_loop_is_skipped(self, messenger, caplog):
        async def handler(message):
            pass

        messenger.subscribe("test.ping", handler)
        messenger.publish(PingMessage())

        assert "No running event loop" in caplog.text


class TestMessengerErrorHandling:
    """Handler failures never reach the publisher."""

    def test_handler_error_is_isolated(self, messenger, caplog):
        results = []

        def failing(message):
            raise ValueError("Handler failed")

        messenger.subscribe("test.ping", failing)
        messenger.subscribe("test.ping", lambda m: results.append("ok"))

        messenger.publish(PingMessage())

        assert results == ["ok"]
        assert "Handler failed" in caplog.text

    @pytest.mark.asyncio
    async def test_async_handler_error_is_logged(self, messenger, caplog):
        async def failing(message):
            raise RuntimeError("Async boom")

        messenger.subscribe("test.ping", failing)
        messenger.publish(PingMessage())

        await asyncio.sleep(0)
        await asyncio.sleep(0)
        assert "Async boom" in caplog.text
