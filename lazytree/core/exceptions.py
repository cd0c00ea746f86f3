"""
Exception hierarchy for the tree view-model layer.

Configuration errors mean the host wired a node incorrectly and must surface
loudly. TreeStateError marks broken structural invariants (programming errors
in a node override); it is raised, never recovered.
"""


class TreeViewModelError(Exception):
    """Base class for all lazytree errors."""
    pass


class ConfigurationError(TreeViewModelError):
    """Raised when a node is used without a collaborator it requires."""
    pass


class ChannelNotConfiguredError(ConfigurationError):
    """Raised when a node publishes without a bound notification channel."""

    def __init__(self, node):
        self.node = node
        super().__init__(
            f"{node!r} has no notification channel; pass channel= when constructing it"
        )


class EventLoopNotRunningError(ConfigurationError):
    """Raised when lazy population is triggered outside a running asyncio loop."""
    pass


class TreeStateError(TreeViewModelError):
    """Raised when a structural invariant of the tree is violated."""
    pass


class PopulationError(TreeViewModelError):
    """Raised (and stored on the node) when populating children fails."""

    def __init__(self, message: str, node=None):
        self.node = node
        super().__init__(message)
