"""
Item repository for post, link, class, comment and rating rows.
"""

from typing import Dict, List, Type
from sqlalchemy.orm import Session

from domain.value_objects import ItemType
from models import Post, Link, CourseClass, Comment, Rating
from .base_repository import BaseRepository

ITEM_MODELS: Dict[ItemType, Type] = {
    ItemType.POST: Post,
    ItemType.LINK: Link,
    ItemType.CLASS: CourseClass,
    ItemType.COMMENT: Comment,
    ItemType.RATING: Rating,
}


class ItemRepository(BaseRepository):
    """Repository for the item table matching one ItemType."""

    def __init__(self, db: Session, item_type: ItemType):
        super().__init__(db, ITEM_MODELS[item_type])
        self.item_type = item_type

    def _created_column(self):
        # Posts and comments record `timestamp`, links and ratings `datetime`
        for name in ('timestamp', 'datetime'):
            column = self.model.__table__.c.get(name)
            if column is not None:
                return column
        return None

    def get_all(self) -> List:
        """
        Get every item of this type, newest first where a creation time exists.

        Returns:
            List of model instances
        """
        query = self.db.query(self.model)
        created = self._created_column()
        if created is not None:
            query = query.order_by(created.desc(), self.model.id)
        else:
            query = query.order_by(self.model.title, self.model.id)
        return query.all()

    def get_by_ids(self, item_ids: List[str]) -> List:
        """
        Get the items with the given IDs, in the order the IDs were given.

        Unknown IDs are skipped.

        Args:
            item_ids: Item primary keys

        Returns:
            List of model instances
        """
        if not item_ids:
            return []
        found = {
            row.id: row
            for row in self.db.query(self.model).filter(self.model.id.in_(item_ids)).all()
        }
        return [found[item_id] for item_id in item_ids if item_id in found]

    def get_comments_for_post(self, post_id: str) -> List[Comment]:
        """
        Get all comments under a post, oldest first so replies follow their parents.

        Args:
            post_id: Post ID

        Returns:
            List of comments
        """
        return self.db.query(Comment).filter(
            Comment.parent_post == post_id
        ).order_by(Comment.timestamp.asc(), Comment.id).all()

    def get_ratings_for_class(self, class_id: str) -> List[Rating]:
        """
        Get all ratings of a class, newest first.

        Args:
            class_id: Class ID

        Returns:
            List of ratings
        """
        return self.db.query(Rating).filter(
            Rating.parent == class_id
        ).order_by(Rating.datetime.desc(), Rating.id).all()
