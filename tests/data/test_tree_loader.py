"""Tests for ItemTreeLoader."""

from pathlib import Path

import pytest

from itemtree.data.item_tree import ItemTree
from itemtree.data.tree_item import VARIANT_WILDCARD, TreeItem
from itemtree.data.tree_loader import ItemTreeLoader, TreeLoadError

TREE_XML = """<?xml version="1.0" encoding="utf-8"?>
<config>
  <tree version="1.0">
    <stuff>
      <tools>
        <woodPickaxe id="270"/>
        <ironPickaxe id="257"/>
        <copperOre oreDictName="oreCopper"/>
      </tools>
      <blocks>
        <stone id="1" damage="0"/>
        <granite id="1" damage="1"/>
        <stone id="4"/>
      </blocks>
    </stuff>
  </tree>
</config>
"""


@pytest.fixture
def tree() -> ItemTree:
    return ItemTreeLoader().load_string(TREE_XML)


def test_root_category(tree: ItemTree):
    root = tree.get_root_category()
    assert root is not None
    assert root.name == "stuff"
    assert root.order == 0
    assert [sub.name for sub in root.subcategories] == ["tools", "blocks"]


def test_names_are_lowercased(tree: ItemTree):
    assert tree.contains_item("woodpickaxe")
    assert not tree.contains_item("woodPickaxe")


def test_orders_follow_document_order(tree: ItemTree):
    assert tree.get_keyword_order("tools") == 1
    assert tree.get_keyword_order("woodpickaxe") == 2
    assert tree.get_keyword_order("ironpickaxe") == 3
    assert tree.get_aliases()[0].order == 4
    assert tree.get_keyword_order("blocks") == 5
    assert tree.get_keyword_order("stone") == 6
    assert tree.get_keyword_order("granite") == 7


def test_repeated_names_share_order(tree: ItemTree):
    stones = tree.get_items_by_name("stone")
    assert [(s.type_id, s.order) for s in stones] == [(1, 6), (4, 6)]


def test_damage_defaults_to_wildcard(tree: ItemTree):
    assert tree.get_items_by_name("woodpickaxe") == [
        TreeItem("woodpickaxe", 270, VARIANT_WILDCARD, 2)
    ]
    assert tree.get_items_by_name("granite")[0].variant_id == 1


def test_alias_registered_from_tag(tree: ItemTree):
    assert not tree.contains_item("copperore")
    assert tree.get_keyword_order("copperore") == -1
    assert tree.is_keyword_valid("copperore") is False
    tree.on_external_identity_registered("oreCopper", 700, 3)
    assert tree.get_category("tools").contains(TreeItem("copperore", 700, 3, 4))
    assert tree.get_keyword_order("copperore") == 4


def test_root_document_without_wrappers():
    tree = ItemTreeLoader().load_string("<everything><food><apple id='260'/></food></everything>")
    assert tree.get_root_category().name == "everything"
    assert tree.get_keyword_depth("food") == 1


def test_reload_replaces_previous_tree():
    shared = ItemTree()
    ItemTreeLoader(shared).load_string(TREE_XML)
    ItemTreeLoader(shared).load_string("<other><misc/></other>")
    assert shared.get_root_category().name == "other"
    assert not shared.contains_item("stone")


def test_load_file(tmp_path: Path):
    path = tmp_path / "tree.xml"
    path.write_text(TREE_XML, encoding="utf-8")
    tree = ItemTreeLoader().load_file(path)
    assert tree.contains_category("blocks")


def test_load_file_missing(tmp_path: Path):
    with pytest.raises(TreeLoadError):
        ItemTreeLoader().load_file(tmp_path / "missing.xml")


@pytest.mark.parametrize("text", [
    "<config><tree>",
    "<config><tree/></config>",
    "<stuff><bad id='abc'/></stuff>",
])
def test_invalid_trees_raise(text: str):
    with pytest.raises(TreeLoadError):
        ItemTreeLoader().load_string(text)
