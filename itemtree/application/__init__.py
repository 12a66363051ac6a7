"""Application layer services."""

from .item_order_service import ItemOrderApplicationService

__all__ = [
    "ItemOrderApplicationService",
]
