"""Stable identifiers for learning items."""

from ulid import ULID


def generate_item_id() -> str:
    """Generate a stable, sortable item ID using ULID."""
    return str(ULID())
