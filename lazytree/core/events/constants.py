"""
Message topic constants.

Every message published on a NotificationChannel carries one of these as its
``topic``; subscribers register against the same strings.

Usage:
    from lazytree.core.events import Events, Messenger

    messenger.subscribe(Events.TREE_NODE_SELECTED, on_node_selected)
"""


class Events:
    """
    Topics published by tree view-models.

    Example:
        >>> messenger.subscribe(Events.TREE_NODE_SELECTED, handler)
    """

    # Selection - published by TreeNode.on_is_selected_changed()
    TREE_NODE_SELECTED = "tree.node_selected"

    # Population - published when load_children() fails or times out
    TREE_NODE_LOAD_FAILED = "tree.node_load_failed"
