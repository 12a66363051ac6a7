"""Keyword and category endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException

from itemtree.bootstrap import get_container

router = APIRouter()


@router.get("/keywords/{keyword}")
async def describe_keyword(keyword: str) -> dict[str, Any]:
    try:
        return get_container().item_order.describe_keyword(keyword)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("/categories")
async def list_categories() -> dict[str, Any]:
    return get_container().item_order.list_categories()


@router.get("/tree")
async def get_tree() -> dict[str, Any]:
    return get_container().item_order.get_tree()
