"""
ItemType Value Object

Immutable representation of the kinds of content an item row can hold.
"""

from enum import Enum
from typing import Optional

from constants import TableNames


class ItemType(str, Enum):
    """
    Content type tag for item rows.

    Values are the canonical table names, so an ItemType compares equal
    to the plain string used on the wire and in the database.
    """

    POST = TableNames.POST
    LINK = TableNames.LINK
    CLASS = TableNames.CLASS
    COMMENT = TableNames.COMMENT
    RATING = TableNames.RATING

    @classmethod
    def parse(cls, value) -> Optional["ItemType"]:
        """
        Resolve a tag to an ItemType.

        Args:
            value: ItemType or plain string tag

        Returns:
            Matching ItemType, or None if the tag is not recognized
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    def carries_vote_value(self) -> bool:
        """Check if projections of this type report the raw vote value."""
        return self in {ItemType.POST, ItemType.LINK}
