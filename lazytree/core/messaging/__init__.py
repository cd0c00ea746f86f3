from .schema import TreeNodeSelectedMessage, TreeNodeLoadFailedMessage

__all__ = ["TreeNodeSelectedMessage", "TreeNodeLoadFailedMessage"]
