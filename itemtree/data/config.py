"""Configuration for the item tree."""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path

_DEFAULT_TREE_PATH = Path("data/itemtree.xml")
DEFAULT_ROOT_NAME = "stuff"


def _get_tree_path() -> Path:
    explicit = os.getenv("ITEM_TREE_PATH")
    if explicit:
        return Path(explicit)
    return _DEFAULT_TREE_PATH


@dataclass(frozen=True)
class ItemTreeConfig:
    path: Path = field(default_factory=_get_tree_path)
    root_name: str = field(
        default_factory=lambda: os.getenv("ITEM_TREE_ROOT", DEFAULT_ROOT_NAME).lower()
    )
