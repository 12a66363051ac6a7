"""Tests for web API endpoints."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from itemtree.application.item_order_service import ItemOrderApplicationService
from itemtree.data.item_tree import ItemTree
from itemtree.data.tree_loader import ItemTreeLoader
from itemtree.web.main import app

client = TestClient(app)

TREE_XML = """
<stuff>
  <tools>
    <pickaxe id="270"/>
    <shovel id="269"/>
  </tools>
</stuff>
"""


@pytest.fixture
def container():
    tree = ItemTreeLoader().load_string(TREE_XML)
    mock_container = type(
        "Container",
        (),
        {"tree": tree, "item_order": ItemOrderApplicationService(tree=tree)},
    )()
    with patch("itemtree.web.routers.keywords.get_container", return_value=mock_container), \
            patch("itemtree.web.routers.items.get_container", return_value=mock_container):
        yield mock_container


def test_health_endpoint():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_root_endpoint():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["service"] == "item-tree"


def test_describe_keyword(container):
    response = client.get("/keywords/tools")
    assert response.status_code == 200
    data = response.json()
    assert data["is_category"] is True
    assert data["depth"] == 1
    assert data["order"] == 1


def test_describe_blank_keyword_returns_400(container):
    response = client.get("/keywords/%20")
    assert response.status_code == 400
    assert "required" in response.json()["detail"]


def test_resolve_item_learns_unknown(container):
    response = client.get("/items/99/2")
    assert response.status_code == 200
    data = response.json()
    assert data["known"] is False
    assert [item["name"] for item in data["items"]] == ["99-2", "99"]
    assert container.tree.contains_item("99")


def test_resolve_item_without_root_returns_409():
    empty = ItemTree()
    mock_container = type(
        "Container", (), {"item_order": ItemOrderApplicationService(tree=empty)}
    )()
    with patch("itemtree.web.routers.items.get_container", return_value=mock_container):
        response = client.get("/items/1/0")
    assert response.status_code == 409


def test_compare_items(container):
    response = client.post(
        "/items/compare",
        json={"first": {"type_id": 269}, "second": {"type_id": 270, "variant_id": 0}},
    )
    assert response.status_code == 200
    assert response.json() == {"result": 1, "first_order": 3, "second_order": 2}


def test_compare_items_validates_body(container):
    response = client.post("/items/compare", json={"first": {"type_id": "x"}})
    assert response.status_code == 422


def test_match_item(container):
    response = client.post("/items/match", json={"type_id": 270, "keyword": "tools"})
    assert response.status_code == 200
    assert response.json() == {"keyword": "tools", "matches": True}


def test_list_categories(container):
    response = client.get("/categories")
    assert response.status_code == 200
    assert response.json()["count"] == 2


def test_get_tree(container):
    response = client.get("/tree")
    assert response.status_code == 200
    data = response.json()
    assert data["root"]["name"] == "stuff"
    assert data["statistics"]["items"] == 2
