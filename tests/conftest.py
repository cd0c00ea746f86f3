import pytest
from loguru import logger
from PySide6.QtCore import QCoreApplication

from lazytree.core.events import Messenger, NotificationChannel


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """Qt application instance shared by all tests (view-models are QObjects)."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def caplog(caplog):
    """Route loguru records into pytest's caplog."""
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    logger.remove(handler_id)


class RecordingChannel(NotificationChannel):
    """Channel that keeps every published message."""

    def __init__(self):
        self.messages = []

    def publish(self, message):
        self.messages.append(message)

    def of_topic(self, topic):
        return [m for m in self.messages if m.topic == topic]


@pytest.fixture
def channel():
    return RecordingChannel()


@pytest.fixture
def messenger():
    return Messenger()
