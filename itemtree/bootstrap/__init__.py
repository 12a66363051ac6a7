"""Application bootstrap."""

from .container import AppContainer, build_tree, get_container

__all__ = [
    "AppContainer",
    "build_tree",
    "get_container",
]
