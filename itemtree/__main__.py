"""Run the item tree HTTP service."""

from __future__ import annotations

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "itemtree.web.main:app",
        host=os.getenv("ITEM_TREE_HOST", "127.0.0.1"),
        port=int(os.getenv("ITEM_TREE_PORT", "8000")),
        log_level="info",
    )


if __name__ == "__main__":
    main()
