"""
Vote repository for looking up a user's votes on items.
"""

from typing import Dict, List, Optional
from sqlalchemy.orm import Session

from domain.value_objects import ItemType
from models import Vote
from .base_repository import BaseRepository


class VoteRepository(BaseRepository[Vote]):
    """Repository for Vote model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Vote)

    def get_vote(self, voter: str, item_type: ItemType, item_id: str) -> Optional[Vote]:
        """
        Get one user's vote on one item.

        Args:
            voter: User ID
            item_type: Type of the voted item
            item_id: Item ID

        Returns:
            Vote or None if the user has not voted on the item
        """
        return self.db.query(self.model).filter(
            self.model.voter == voter,
            self.model.item_type == item_type.value,
            self.model.item_id == item_id
        ).first()

    def get_votes_by_item(self, voter: str, item_type: ItemType, item_ids: List[str]) -> Dict[str, Vote]:
        """
        Get one user's votes on a batch of items.

        Args:
            voter: User ID
            item_type: Type of the voted items
            item_ids: Item IDs

        Returns:
            Dict of item ID to Vote; items without a vote are absent
        """
        if not item_ids:
            return {}
        votes = self.db.query(self.model).filter(
            self.model.voter == voter,
            self.model.item_type == item_type.value,
            self.model.item_id.in_(item_ids)
        ).all()
        return {vote.item_id: vote for vote in votes}
