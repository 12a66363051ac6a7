"""HTTP surface for the item tree."""
