"""
Item Info Service

Fetches item rows together with the requesting user's votes and runs them
through the item projector, producing the records the API returns.
"""
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session

from domain.value_objects import ItemType
from exceptions import NotFoundError, ValidationError
from repositories.item_repository import ItemRepository
from repositories.vote_repository import VoteRepository
from repositories.rows import DBRow, wrap
from services.interfaces import IItemInfoProjector
from services.item_info_projector import item_info_projector
from utils.logging_utils import StructuredLogger, log_operation

logger = StructuredLogger(__name__)


def parse_item_type(value: Any) -> ItemType:
    """
    Resolve an item type tag received from a caller.

    Raises:
        ValidationError: If the tag is not a known item type
    """
    item_type = ItemType.parse(value)
    if item_type is None:
        raise ValidationError(
            f"Unknown item type '{value}'",
            invalid_fields={"item_type": value}
        )
    return item_type


class ItemInfoService:
    """
    Builds item info records for one database session.

    The voter is optional; without one every record reports no vote.
    """

    def __init__(self, db: Session, projector: IItemInfoProjector = item_info_projector):
        self.db = db
        self.projector = projector
        self.votes = VoteRepository(db)

    def project_rows(
        self,
        rows: List[Any],
        item_type: ItemType,
        voter: Optional[str] = None,
        items: Optional[List[dict]] = None
    ) -> List[dict]:
        """
        Project fetched rows, pairing each with the voter's vote on it.

        Args:
            rows: Model instances of `item_type`, in output order
            item_type: Type of every row
            voter: Requesting user ID, or None
            items: Existing accumulator to append to; a new list if omitted

        Returns:
            The accumulator
        """
        if items is None:
            items = []

        votes: Dict[str, Any] = {}
        if voter is not None:
            votes = self.votes.get_votes_by_item(voter, item_type, [row.id for row in rows])

        for row in rows:
            self.projector.project(DBRow(row), wrap(votes.get(row.id)), item_type, items)
        return items

    @log_operation("list_items")
    def list_items(
        self,
        item_type: Any,
        voter: Optional[str] = None,
        item_ids: Optional[List[str]] = None
    ) -> List[dict]:
        """
        List items of one type.

        Args:
            item_type: Item type tag
            voter: Requesting user ID, or None
            item_ids: Restrict to these IDs, in this order; all items if None

        Raises:
            ValidationError: If the item type is unknown
        """
        resolved = parse_item_type(item_type)
        repo = ItemRepository(self.db, resolved)
        rows = repo.get_all() if item_ids is None else repo.get_by_ids(item_ids)
        items = self.project_rows(rows, resolved, voter=voter)
        logger.info("Projected items", extra={"item_type": resolved.value, "count": len(items)})
        return items

    @log_operation("get_item")
    def get_item(self, item_type: Any, item_id: str, voter: Optional[str] = None) -> dict:
        """
        Get one item.

        Raises:
            ValidationError: If the item type is unknown
            NotFoundError: If no item of that type has the ID
        """
        resolved = parse_item_type(item_type)
        row = ItemRepository(self.db, resolved).get_by_id(item_id)
        if row is None:
            raise NotFoundError(resolved.value, item_id)

        vote = self.votes.get_vote(voter, resolved, item_id) if voter is not None else None
        items: List[dict] = []
        self.projector.project(DBRow(row), wrap(vote), resolved, items)
        return items[0]

    @log_operation("list_comments")
    def list_comments(self, post_id: str, voter: Optional[str] = None) -> List[dict]:
        """
        List the comments under a post.

        Raises:
            NotFoundError: If the post does not exist
        """
        repo = ItemRepository(self.db, ItemType.POST)
        if not repo.exists(post_id):
            raise NotFoundError(ItemType.POST.value, post_id)
        rows = repo.get_comments_for_post(post_id)
        return self.project_rows(rows, ItemType.COMMENT, voter=voter)

    @log_operation("list_ratings")
    def list_ratings(self, class_id: str, voter: Optional[str] = None) -> List[dict]:
        """
        List the ratings of a class.

        Raises:
            NotFoundError: If the class does not exist
        """
        repo = ItemRepository(self.db, ItemType.CLASS)
        if not repo.exists(class_id):
            raise NotFoundError(ItemType.CLASS.value, class_id)
        rows = repo.get_ratings_for_class(class_id)
        return self.project_rows(rows, ItemType.RATING, voter=voter)
