"""Dependency composition root."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from itemtree.application.item_order_service import ItemOrderApplicationService
from itemtree.data.category import CategoryNode
from itemtree.data.config import ItemTreeConfig
from itemtree.data.item_tree import ItemTree, default_item_tree
from itemtree.data.tree_loader import ItemTreeLoader, TreeLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """Wired application dependencies."""

    tree: ItemTree
    item_order: ItemOrderApplicationService


_CONTAINER: AppContainer | None = None


def build_tree(config: ItemTreeConfig, tree: ItemTree | None = None) -> ItemTree:
    """Load the configured tree, or fall back to an empty one with a bare root."""
    tree = tree or ItemTree()
    if config.path.exists():
        try:
            return ItemTreeLoader(tree).load_file(config.path)
        except TreeLoadError:
            logger.exception("[Bootstrap] Failed to load item tree %s", config.path)
    else:
        logger.warning("[Bootstrap] Item tree file not found: %s", config.path)

    tree.reset()
    tree.set_root(CategoryNode(config.root_name, 0))
    return tree


def get_container() -> AppContainer:
    global _CONTAINER
    if _CONTAINER is not None:
        return _CONTAINER

    tree = build_tree(ItemTreeConfig(), default_item_tree)
    _CONTAINER = AppContainer(
        tree=tree,
        item_order=ItemOrderApplicationService(tree=tree),
    )
    return _CONTAINER
