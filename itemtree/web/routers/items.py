"""Item identity endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from itemtree.bootstrap import get_container
from itemtree.data import VARIANT_WILDCARD, MalformedHierarchyError

router = APIRouter()


class ItemIdentity(BaseModel):
    type_id: int = Field(description="Item type id")
    variant_id: int = Field(default=VARIANT_WILDCARD, description="Item variant (damage) value")


class CompareRequest(BaseModel):
    first: ItemIdentity
    second: ItemIdentity


class MatchRequest(ItemIdentity):
    keyword: str = Field(description="Item or category name")


@router.get("/items/{type_id}/{variant_id}")
async def resolve_item(type_id: int, variant_id: int) -> dict[str, Any]:
    try:
        return get_container().item_order.resolve_identity(type_id, variant_id)
    except MalformedHierarchyError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@router.post("/items/compare")
async def compare_items(request: CompareRequest) -> dict[str, Any]:
    service = get_container().item_order
    first = (request.first.type_id, request.first.variant_id)
    second = (request.second.type_id, request.second.variant_id)
    try:
        return {
            "result": service.compare(first, second),
            "first_order": service.item_order(*first),
            "second_order": service.item_order(*second),
        }
    except MalformedHierarchyError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@router.post("/items/match")
async def match_item(request: MatchRequest) -> dict[str, Any]:
    try:
        matches = get_container().item_order.match(
            request.type_id, request.variant_id, request.keyword
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except MalformedHierarchyError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return {"keyword": request.keyword, "matches": matches}
