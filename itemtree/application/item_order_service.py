"""Application service for keyword lookups and item ordering."""

from __future__ import annotations

from typing import Any

from itemtree.data.item_tree import ItemTree


class ItemOrderApplicationService:
    def __init__(self, *, tree: ItemTree) -> None:
        self._tree = tree

    @staticmethod
    def _clean_keyword(keyword: str) -> str:
        cleaned = (keyword or "").strip()
        if not cleaned:
            raise ValueError("Keyword is required")
        return cleaned

    def describe_keyword(self, keyword: str) -> dict[str, Any]:
        keyword = self._clean_keyword(keyword)
        is_item = self._tree.contains_item(keyword)
        is_category = self._tree.contains_category(keyword)
        return {
            "keyword": keyword,
            "valid": self._tree.is_keyword_valid(keyword),
            "is_item": is_item,
            "is_category": is_category,
            "order": self._tree.get_keyword_order(keyword),
            "depth": self._tree.get_keyword_depth(keyword) if is_category else None,
        }

    def resolve_identity(self, type_id: int, variant_id: int) -> dict[str, Any]:
        known = not self._tree.is_item_unknown(type_id, variant_id)
        items = self._tree.resolve_or_learn_items(type_id, variant_id)
        return {
            "type_id": type_id,
            "variant_id": variant_id,
            "known": known,
            "items": [item.to_dict() for item in items],
        }

    def item_order(self, type_id: int, variant_id: int) -> int:
        return self._tree.resolve_or_learn_items(type_id, variant_id)[0].order

    def compare(self, first: tuple[int, int], second: tuple[int, int]) -> int:
        """Return -1, 0 or 1 depending on which identity sorts first.

        Equal orders fall back to type id, then variant.
        """
        first_key = (self.item_order(*first), first[0], first[1])
        second_key = (self.item_order(*second), second[0], second[1])
        if first_key < second_key:
            return -1
        if first_key > second_key:
            return 1
        return 0

    def match(self, type_id: int, variant_id: int, keyword: str) -> bool:
        keyword = self._clean_keyword(keyword)
        items = self._tree.resolve_or_learn_items(type_id, variant_id)
        return self._tree.matches(items, keyword)

    def list_categories(self) -> dict[str, Any]:
        categories = [
            {
                "name": category.name,
                "order": category.order,
                "depth": self._tree.get_keyword_depth(category.name),
                "subcategory_count": len(category.subcategories),
            }
            for category in self._tree.get_all_categories()
        ]
        categories.sort(key=lambda entry: (entry["depth"], entry["order"]))
        return {"count": len(categories), "categories": categories}

    def get_tree(self) -> dict[str, Any]:
        return self._tree.to_dict()
