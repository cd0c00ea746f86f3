from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar

from ..events.constants import Events


@dataclass(frozen=True)
class TreeNodeSelectedMessage:
    """Published when the host reports that ``node`` became the selection."""
    topic: ClassVar[str] = Events.TREE_NODE_SELECTED

    node: Any
    timestamp: float = field(default_factory=lambda: datetime.now().timestamp())


@dataclass(frozen=True)
class TreeNodeLoadFailedMessage:
    """Published when populating ``node``'s children raised ``error``."""
    topic: ClassVar[str] = Events.TREE_NODE_LOAD_FAILED

    node: Any
    error: BaseException
    timestamp: float = field(default_factory=lambda: datetime.now().timestamp())
