"""Item tree service.

Holds the whole hierarchy of categories and items and indexes items by
type id and by name. Used to recognize keywords, to look up item orders for
sorting, and to learn orders for item identities missing from the tree.
"""

from __future__ import annotations

import logging
import random
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .category import CategoryNode
from .tree_item import VARIANT_WILDCARD, TreeItem

logger = logging.getLogger(__name__)

UNKNOWN_ITEM = "unknown"

# Orders given to learned items start past every configured order.
LEARNED_ORDER_BASE = 5000
LEARNED_ORDER_TYPE_STRIDE = 16


@dataclass(frozen=True)
class MalformedHierarchyError(RuntimeError):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class AliasInfo:
    """Deferred mapping from an external tag to a tree keyword."""

    category: str
    name: str
    external_key: str
    order: int


class ItemTree:
    """Category hierarchy plus item indices by type id and by name."""

    def __init__(self) -> None:
        self._categories: dict[str, CategoryNode] = {}
        self._items_by_type: dict[int, list[TreeItem]] = {}
        self._items_by_name: dict[str, list[TreeItem]] = {}
        self._root_name: str | None = None
        self._aliases: list[AliasInfo] = []
        # Identities announced by the external registry, kept across resets.
        self._external_identities: dict[str, list[tuple[int, int]]] = {}
        self.unknown_item = self._make_unknown_item()
        self.reset()

    @staticmethod
    def _make_unknown_item() -> TreeItem:
        return TreeItem(UNKNOWN_ITEM, -1, VARIANT_WILDCARD, sys.maxsize)

    def reset(self) -> None:
        self._categories.clear()
        self._items_by_name.clear()
        self._items_by_type.clear()
        self._aliases.clear()
        self._root_name = None
        self.unknown_item = self._make_unknown_item()

    # --- Construction ---

    def set_root(self, category: CategoryNode) -> None:
        self._root_name = category.name
        self._categories[category.name] = category

    def add_category(self, parent_name: str, category: CategoryNode) -> None:
        parent = self._require_parent(parent_name)
        parent.add_subcategory(category)
        self._categories[category.name] = category

    def add_item(self, parent_name: str, item: TreeItem) -> None:
        parent = self._require_parent(parent_name)
        self._insert_item(parent, item)

    def _require_parent(self, parent_name: str) -> CategoryNode:
        # Parents are resolved lowercased while names are stored as given.
        parent = self._categories.get(parent_name.lower())
        if parent is None:
            raise MalformedHierarchyError(
                f"Parent category '{parent_name}' is not registered"
            )
        return parent

    def _insert_item(self, parent: CategoryNode, item: TreeItem) -> None:
        parent.add_item(item)
        self._items_by_name.setdefault(item.name, []).append(item)
        self._items_by_type.setdefault(item.type_id, []).append(item)

    # --- Keyword queries ---

    def matches(self, items: Iterable[TreeItem] | None, keyword: str) -> bool:
        """
        Check if any of the items matches a keyword.

        A keyword matches when it is the name of one of the items, when it
        names a category listing one of the items directly, or when it is the
        root category. Subcategories are not searched: an item listed in
        "pickaxes" does not match the parent category "tools".
        """
        candidates = list(items or [])
        if not candidates:
            return False

        if any(item.name == keyword for item in candidates):
            return True

        category = self.get_category(keyword)
        if category is not None:
            if any(category.contains(item) for item in candidates):
                return True

        return keyword == self._root_name

    def get_keyword_depth(self, keyword: str) -> int:
        root = self.get_root_category()
        if root is None:
            logger.error("[ItemTree] The root category is missing")
            return 0
        return root.find_keyword_depth(keyword)

    def get_keyword_order(self, keyword: str) -> int:
        """
        Get the sort order of a keyword.

        Item names resolve to the order of the first item registered under
        that name. Category names resolve to the category order. Returns -1
        for unknown keywords and when the root is missing.
        """
        items = self.get_items_by_name(keyword)
        if items:
            return items[0].order

        root = self.get_root_category()
        if root is None:
            logger.error("[ItemTree] The root category is missing")
            return -1
        order = root.find_category_order(keyword)
        return -1 if order is None else order

    def is_keyword_valid(self, keyword: str) -> bool:
        return self.contains_item(keyword) or self.get_category(keyword) is not None

    # --- Lookups ---

    def get_all_categories(self) -> list[CategoryNode]:
        return list(self._categories.values())

    def get_root_category(self) -> CategoryNode | None:
        if self._root_name is None:
            return None
        return self._categories.get(self._root_name)

    def get_category(self, name: str) -> CategoryNode | None:
        return self._categories.get(name)

    def is_item_unknown(self, type_id: int, variant_id: int) -> bool:
        """
        Check whether the type id has no entry at all.

        The variant is ignored on purpose: a known type with an unlisted
        variant still counts as known and gets its order learned on lookup.
        """
        return type_id not in self._items_by_type

    def resolve_or_learn_items(self, type_id: int, variant_id: int) -> list[TreeItem]:
        """
        Get the items matching an identity, learning it if none do.

        Items of the type are kept when they are wildcards or share the
        variant. When nothing is left, two items are created and added under
        the root: "<type>-<variant>" and the wildcard "<type>". Later calls
        for the same identity return the registered items. This mutates the
        tree.
        """
        matching = [
            item
            for item in self._items_by_type.get(type_id, [])
            if item.matches_variant(variant_id)
        ]

        if not matching:
            matching = self._learn_identity(type_id, variant_id)

        return [item for item in matching if item is not None]

    def _learn_identity(self, type_id: int, variant_id: int) -> list[TreeItem]:
        root = self.get_root_category()
        if root is None:
            raise MalformedHierarchyError(
                f"Cannot learn item {type_id}-{variant_id}: the root category is missing"
            )

        base_order = LEARNED_ORDER_BASE + type_id * LEARNED_ORDER_TYPE_STRIDE
        exact = TreeItem(f"{type_id}-{variant_id}", type_id, variant_id, base_order + variant_id)
        any_variant = TreeItem(str(type_id), type_id, VARIANT_WILDCARD, base_order)
        self._insert_item(root, exact)
        self._insert_item(root, any_variant)
        logger.debug("[ItemTree] Learned unknown item %s-%s", type_id, variant_id)
        return [exact, any_variant]

    def get_items_by_name(self, name: str) -> list[TreeItem] | None:
        items = self._items_by_name.get(name)
        if items is None:
            return None
        return list(items)

    def get_random_item(self, rng: random.Random) -> TreeItem | None:
        all_items = [item for items in self._items_by_name.values() for item in items]
        if not all_items:
            return None
        return rng.choice(all_items)

    def contains_item(self, name: str) -> bool:
        return name in self._items_by_name

    def contains_category(self, name: str) -> bool:
        return name in self._categories

    # --- External aliases ---

    def register_alias(self, category: str, name: str, external_key: str, order: int) -> None:
        """
        Map every identity tagged with `external_key` to the keyword `name`.

        Identities already announced for the tag are added right away, later
        ones through `on_external_identity_registered`.
        """
        self._require_parent(category)
        alias = AliasInfo(category=category, name=name, external_key=external_key, order=order)
        for type_id, variant_id in self._external_identities.get(external_key, []):
            self.add_item(category, TreeItem(name, type_id, variant_id, order))
        self._aliases.append(alias)

    def on_external_identity_registered(
        self, external_key: str, type_id: int, variant_id: int
    ) -> None:
        known = self._external_identities.setdefault(external_key, [])
        if (type_id, variant_id) in known:
            return
        known.append((type_id, variant_id))
        for alias in self._aliases:
            if alias.external_key == external_key:
                self.add_item(
                    alias.category,
                    TreeItem(alias.name, type_id, variant_id, alias.order),
                )

    def get_aliases(self) -> list[AliasInfo]:
        return list(self._aliases)

    # --- Debugging ---

    def log_tree(self) -> None:
        """Log the whole hierarchy at DEBUG level."""
        root = self.get_root_category()
        if root is None:
            logger.debug("[ItemTree] <empty tree>")
            return
        self._log_category(root, 0)

    def _log_category(self, category: CategoryNode, indent_level: int) -> None:
        indent = "  " * indent_level
        logger.debug("[ItemTree] %s%s", indent, category.name)
        for subcategory in category.subcategories:
            self._log_category(subcategory, indent_level + 1)
        for item in category.iter_items():
            logger.debug(
                "[ItemTree] %s  %s %s %s", indent, item.name, item.type_id, item.variant_id
            )

    def get_statistics(self) -> dict[str, Any]:
        return {
            "categories": len(self._categories),
            "item_names": len(self._items_by_name),
            "item_types": len(self._items_by_type),
            "items": sum(len(items) for items in self._items_by_name.values()),
            "aliases": len(self._aliases),
        }

    def to_dict(self) -> dict[str, Any]:
        root = self.get_root_category()
        return {
            "root": root.to_dict(include_children=True) if root else None,
            "statistics": self.get_statistics(),
        }


# Default instance
default_item_tree = ItemTree()
