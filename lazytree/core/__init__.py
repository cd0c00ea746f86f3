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
