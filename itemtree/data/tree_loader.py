"""XML item tree loader.

Builds an ItemTree from an XML definition where nesting describes the
category hierarchy:

    <config>
      <tree version="1.0">
        <stuff>
          <tools>
            <pickaxe id="270"/>
            <ironPickaxe id="257" damage="0"/>
            <copperOre oreDictName="oreCopper"/>
          </tools>
        </stuff>
      </tree>
    </config>

- Elements with an `id` attribute are items (`damage` defaults to any variant)
- Elements with an `oreDictName` attribute register an external tag alias
- Every other element is a category

Tag names are lowercased. Orders follow document order.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from .category import CategoryNode
from .item_tree import ItemTree
from .tree_item import VARIANT_WILDCARD, TreeItem

logger = logging.getLogger(__name__)

_WRAPPER_TAGS = {"config", "tree"}
_ALIAS_ATTR = "oreDictName"


@dataclass(frozen=True)
class TreeLoadError(RuntimeError):
    message: str

    def __str__(self) -> str:
        return self.message


class ItemTreeLoader:
    """Populates an ItemTree through its construction API."""

    def __init__(self, tree: ItemTree | None = None) -> None:
        self._tree = tree or ItemTree()
        self._next_order = 0
        self._item_orders: dict[str, int] = {}

    def load_file(self, path: Path) -> ItemTree:
        if not path.exists():
            raise TreeLoadError(f"Item tree file not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TreeLoadError(f"Failed to read item tree {path}: {exc}") from exc
        tree = self.load_string(text)
        logger.info("[TreeLoader] Loaded item tree from %s", path)
        return tree

    def load_string(self, text: str) -> ItemTree:
        try:
            document = ET.fromstring(text)
        except ET.ParseError as exc:
            raise TreeLoadError(f"Malformed item tree XML: {exc}") from exc

        root_el = self._find_root_element(document)
        self._tree.reset()
        self._next_order = 0
        self._item_orders = {}

        root = CategoryNode(root_el.tag.lower(), self._take_order())
        self._tree.set_root(root)
        for child in root_el:
            self._load_element(root.name, child)

        stats = self._tree.get_statistics()
        logger.info(
            "[TreeLoader] Built tree '%s': %s categories, %s items, %s aliases",
            root.name,
            stats["categories"],
            stats["items"],
            stats["aliases"],
        )
        return self._tree

    def _find_root_element(self, document: ET.Element) -> ET.Element:
        current = document
        while current.tag.lower() in _WRAPPER_TAGS:
            children = list(current)
            if not children:
                raise TreeLoadError(f"No root category under <{current.tag}>")
            current = children[0]
        return current

    def _take_order(self) -> int:
        order = self._next_order
        self._next_order += 1
        return order

    def _item_order(self, name: str) -> int:
        # Repeated names share the order of their first occurrence
        if name not in self._item_orders:
            self._item_orders[name] = self._take_order()
        return self._item_orders[name]

    def _load_element(self, parent_name: str, element: ET.Element) -> None:
        name = element.tag.lower()

        if _ALIAS_ATTR in element.attrib:
            self._tree.register_alias(
                parent_name, name, element.attrib[_ALIAS_ATTR], self._item_order(name)
            )
            return

        if "id" in element.attrib:
            item = TreeItem(
                name=name,
                type_id=self._parse_int(element, "id"),
                variant_id=self._parse_int(element, "damage", VARIANT_WILDCARD),
                order=self._item_order(name),
            )
            self._tree.add_item(parent_name, item)
            return

        category = CategoryNode(name, self._take_order())
        self._tree.add_category(parent_name, category)
        for child in element:
            self._load_element(category.name, child)

    @staticmethod
    def _parse_int(element: ET.Element, attr: str, default: int | None = None) -> int:
        raw = element.get(attr)
        if raw is None:
            if default is None:
                raise TreeLoadError(f"<{element.tag}> is missing '{attr}'")
            return default
        try:
            return int(raw)
        except ValueError as exc:
            raise TreeLoadError(
                f"<{element.tag}> has a non-numeric {attr}: {raw!r}"
            ) from exc
