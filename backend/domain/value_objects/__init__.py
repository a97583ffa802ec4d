"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- ItemType: The content type of an item row (post, link, class, comment, rating)
"""

from .item_type import ItemType

__all__ = ["ItemType"]
