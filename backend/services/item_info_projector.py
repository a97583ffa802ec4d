"""
Item Info Projector

Shapes item rows into the plain records the web client renders. Shared by
every endpoint that lists or shows posts, links, classes, comments and
ratings, so the response shape for each type is defined in one place.
"""
import logging
from typing import Any, Callable, Dict, List, Optional

from constants import FieldNames, VotePolarity
from domain.value_objects import ItemType
from dtos.response import PostInfo, LinkInfo, ClassInfo, CommentInfo, RatingInfo
from services.interfaces import IFieldReader, IItemInfoProjector

logger = logging.getLogger(__name__)


class ItemInfoProjector(IItemInfoProjector):
    """
    Projects one item row plus the requesting user's vote into a response record.

    Records are appended to a caller-owned list so a batch of rows can be
    accumulated across repeated calls.
    """

    def __init__(self):
        self._mappers: Dict[ItemType, Callable[[IFieldReader, Any, Optional[str]], Any]] = {
            ItemType.POST: self.get_post_info,
            ItemType.LINK: self.get_link_info,
            ItemType.CLASS: self.get_class_info,
            ItemType.COMMENT: self.get_comment_info,
            ItemType.RATING: self.get_rating_info,
        }

    def project(
        self,
        item: IFieldReader,
        vote: Optional[IFieldReader],
        item_type: Any,
        items: List[dict]
    ) -> None:
        """
        Append the response record for `item` to `items`.

        An unrecognized item type appends nothing.

        Args:
            item: The item row
            vote: The requesting user's vote on the item, or None
            item_type: ItemType or its string tag
            items: Accumulator the record is appended to
        """
        resolved = ItemType.parse(item_type)
        if resolved is None:
            logger.warning(f"Skipping item with unrecognized type {item_type!r}")
            return

        voted = self.vote_polarity(vote)
        vote_value = None
        if resolved.carries_vote_value():
            vote_value = vote.get_value(FieldNames.VOTE_VALUE) if vote is not None else 0

        info = self._mappers[resolved](item, vote_value, voted)
        items.append(info.model_dump(by_alias=True))

    @staticmethod
    def vote_polarity(vote: Optional[IFieldReader]) -> Optional[str]:
        """
        Describe a vote as positive or negative.

        Returns:
            None if there is no vote, otherwise a VotePolarity value
        """
        if vote is None:
            return None
        if vote.get_value(FieldNames.VOTE_VALUE):
            return VotePolarity.POSITIVE
        return VotePolarity.NEGATIVE

    @staticmethod
    def get_post_info(item: IFieldReader, vote_value: Any, voted: Optional[str]) -> PostInfo:
        return PostInfo(
            id=item.get_value(FieldNames.ID),
            title=item.get_value(FieldNames.TITLE),
            votes=item.get_value(FieldNames.NETVOTES),
            author=item.get_value(FieldNames.AUTHOR),
            date=item.get_value(FieldNames.TIMESTAMP),
            summary=item.get_value(FieldNames.CONTENT),
            tags=item.get_value(FieldNames.TAGS),
            voted=voted,
            vote_value=vote_value,
        )

    @staticmethod
    def get_link_info(item: IFieldReader, vote_value: Any, voted: Optional[str]) -> LinkInfo:
        return LinkInfo(
            id=item.get_value(FieldNames.ID),
            title=item.get_value(FieldNames.TITLE),
            votes=item.get_value(FieldNames.NETVOTES),
            author=item.get_value(FieldNames.ADDED_BY),
            date=item.get_value(FieldNames.DATETIME),
            summary=item.get_value(FieldNames.SUMMARY),
            tags=item.get_value(FieldNames.TAGS),
            url=item.get_value(FieldNames.LINK),
            voted=voted,
            vote_value=vote_value,
        )

    @staticmethod
    def get_class_info(item: IFieldReader, vote_value: Any, voted: Optional[str]) -> ClassInfo:
        # Classes are rated, not voted on; vote_value is never reported
        return ClassInfo(
            id=item.get_value(FieldNames.ID),
            title=item.get_value(FieldNames.TITLE),
            course_code=item.get_value(FieldNames.COURSE_CODE),
            rating=item.get_value(FieldNames.AVERAGE_RATING),
            author=item.get_value(FieldNames.ADDED_BY),
            summary=item.get_value(FieldNames.SUMMARY),
            tags=item.get_value(FieldNames.TAGS),
            voted=voted,
        )

    @staticmethod
    def get_comment_info(item: IFieldReader, vote_value: Any, voted: Optional[str]) -> CommentInfo:
        return CommentInfo(
            id=item.get_value(FieldNames.ID),
            author=item.get_value(FieldNames.AUTHOR),
            content=item.get_value(FieldNames.CONTENT),
            net_votes=item.get_value(FieldNames.NETVOTES),
            parent=item.get_value(FieldNames.PARENT_POST),
            parent_comment=item.get_value(FieldNames.PARENT_COMMENT),
            date=item.get_value(FieldNames.TIMESTAMP),
            voted=voted,
        )

    @staticmethod
    def get_rating_info(item: IFieldReader, vote_value: Any, voted: Optional[str]) -> RatingInfo:
        return RatingInfo(
            parent=item.get_value(FieldNames.PARENT),
            id=item.get_value(FieldNames.ID),
            rating=item.get_value(FieldNames.AVERAGE_RATING),
            author=item.get_value(FieldNames.AUTHOR),
            content=item.get_value(FieldNames.CONTENT),
            date=item.get_value(FieldNames.DATETIME),
            voted=voted,
        )


item_info_projector = ItemInfoProjector()


def project(item: IFieldReader, vote: Optional[IFieldReader], item_type: Any, items: List[dict]) -> None:
    """Module-level shortcut for item_info_projector.project()."""
    item_info_projector.project(item, vote, item_type, items)
