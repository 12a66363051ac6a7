"""Category nodes of the item hierarchy."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .tree_item import TreeItem


class CategoryNode:
    """
    A named category in the item hierarchy.

    Each node owns its subcategories and the items listed directly under it.
    Items are grouped by keyword name, in first-insertion order. Nodes keep
    no link to their parent; depth is found by searching from the root.
    """

    def __init__(self, name: str, order: int = 0) -> None:
        self.name = name
        self.order = order
        self.subcategories: list[CategoryNode] = []
        self._items: dict[str, list[TreeItem]] = {}

    @property
    def items(self) -> list[list[TreeItem]]:
        """Direct items, one list per keyword name."""
        return [list(group) for group in self._items.values()]

    def add_subcategory(self, node: CategoryNode) -> None:
        self.subcategories.append(node)

    def add_item(self, item: TreeItem) -> None:
        self._items.setdefault(item.name, []).append(item)

    def iter_items(self) -> Iterator[TreeItem]:
        for group in self._items.values():
            yield from group

    def contains(self, item: TreeItem) -> bool:
        """Check whether the item is listed directly in this category."""
        group = self._items.get(item.name)
        if not group:
            return False
        return any(candidate.same_identity(item) for candidate in group)

    def find_keyword_depth(self, keyword: str) -> int:
        """
        Get the distance from this node to the category named `keyword`.

        Returns -1 when no category of the subtree has that name. Item names
        are not searched.
        """
        if self.name == keyword:
            return 0
        for subcategory in self.subcategories:
            depth = subcategory.find_keyword_depth(keyword)
            if depth != -1:
                return depth + 1
        return -1

    def find_category_order(self, keyword: str) -> int | None:
        """Get the order of the category named `keyword`, or None if absent."""
        if self.name == keyword:
            return self.order
        for subcategory in self.subcategories:
            order = subcategory.find_category_order(keyword)
            if order is not None:
                return order
        return None

    def to_dict(self, include_children: bool = True) -> dict[str, Any]:
        result: dict[str, Any] = {
            "name": self.name,
            "order": self.order,
            "items": [item.to_dict() for item in self.iter_items()],
            "subcategory_count": len(self.subcategories),
        }
        if include_children:
            result["subcategories"] = [
                subcategory.to_dict(True) for subcategory in self.subcategories
            ]
        return result

    def __repr__(self) -> str:
        return (
            f"<CategoryNode '{self.name}' order={self.order} "
            f"subcategories={len(self.subcategories)} items={len(self._items)}>"
        )
