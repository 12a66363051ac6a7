"""Item tree: keyword classification and ordering of game items."""
