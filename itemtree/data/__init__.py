"""Item tree data structures and loading."""

from .category import CategoryNode
from .config import ItemTreeConfig
from .item_tree import (
    UNKNOWN_ITEM,
    AliasInfo,
    ItemTree,
    MalformedHierarchyError,
    default_item_tree,
)
from .tree_item import VARIANT_WILDCARD, TreeItem
from .tree_loader import ItemTreeLoader, TreeLoadError

__all__ = [
    "CategoryNode",
    "ItemTreeConfig",
    "UNKNOWN_ITEM",
    "AliasInfo",
    "ItemTree",
    "MalformedHierarchyError",
    "default_item_tree",
    "VARIANT_WILDCARD",
    "TreeItem",
    "ItemTreeLoader",
    "TreeLoadError",
]
