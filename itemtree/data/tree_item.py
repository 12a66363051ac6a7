"""Item records stored in the item tree."""

from __future__ import annotations

from dataclasses import dataclass

# Variant value matching every variant of a type id.
VARIANT_WILDCARD = -1


@dataclass(frozen=True)
class TreeItem:
    """A keyword bound to one item identity (type id + variant)."""

    name: str
    type_id: int
    variant_id: int
    order: int

    @property
    def is_wildcard(self) -> bool:
        return self.variant_id == VARIANT_WILDCARD

    def matches_variant(self, variant_id: int) -> bool:
        return self.is_wildcard or self.variant_id == variant_id

    def same_identity(self, other: TreeItem) -> bool:
        """Compare name, type and variant, ignoring order."""
        return (
            self.name == other.name
            and self.type_id == other.type_id
            and self.variant_id == other.variant_id
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "type_id": self.type_id,
            "variant_id": self.variant_id,
            "order": self.order,
        }

    def __str__(self) -> str:
        return self.name
