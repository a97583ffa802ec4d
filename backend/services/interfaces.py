"""
Service Interfaces

Abstract base classes for service layer following Dependency Inversion Principle.
This allows for dependency injection and easier testing/mocking.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional


class IFieldReader(ABC):
    """
    Read-only accessor over one fetched record.

    Item projections only ever read named fields through this interface,
    so any record shape (ORM instance, result row, plain dict) can be
    projected once it is wrapped.
    """

    @abstractmethod
    def get_value(self, field_name: str) -> Any:
        """
        Read one field.

        Args:
            field_name: Column name, see constants.FieldNames

        Returns:
            Field value, or None if the record has no such field
        """
        pass


class IItemInfoProjector(ABC):
    """Interface for shaping item rows into response records."""

    @abstractmethod
    def project(
        self,
        item: IFieldReader,
        vote: Optional[IFieldReader],
        item_type: Any,
        items: List[dict]
    ) -> None:
        """
        Append the response record for one item to `items`.

        Args:
            item: The item row
            vote: The requesting user's vote on the item, if any
            item_type: ItemType or its string tag
            items: Accumulator the record is appended to
        """
        pass
