"""
MVVM Package - WPF-Style view-models for PySide6 tree controls.

Provides:
- BindableProperty: Descriptor for auto-signaling properties.
- BindableBase / BaseViewModel: Base view-models with a generic propertyChanged signal.
- ChildCollection / ChildrenState: Observable children with an explicit unloaded state.
- TreeNode: Lazily populated tree item view-model (alias TreeViewItemViewModel).
- FactoryTreeNode: TreeNode populated by a fetch callable.
"""
from lazytree.ui.mvvm.viewmodel import BaseViewModel, BindableProperty, BindableBase
from lazytree.ui.mvvm.children import ChildCollection, ChildrenState, CollectionAction
from lazytree.ui.mvvm.tree_viewmodel import TreeNode, TreeViewItemViewModel, UNLOADED_CHILD
from lazytree.ui.mvvm.factory_node import FactoryTreeNode

__all__ = [
    # ViewModels
    "BaseViewModel",
    "BindableBase",
    "BindableProperty",

    # Tree
    "ChildCollection",
    "ChildrenState",
    "CollectionAction",
    "TreeNode",
    "TreeViewItemViewModel",
    "UNLOADED_CHILD",
    "FactoryTreeNode",
]
