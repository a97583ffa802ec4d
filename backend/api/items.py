"""
Item API Routes

Read-only endpoints returning projected posts, links, classes, comments
and ratings, with the optional voter's vote state on each.
"""
from fastapi import APIRouter, Depends
from typing import Optional
from dependencies import get_item_info_service
from dtos.response import ItemListResponse
from services.item_info_service import ItemInfoService
from utils.error_handlers import handle_api_errors
from utils.logging_utils import set_logging_context
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def _item_list(items) -> ItemListResponse:
    return ItemListResponse(items=items, count=len(items))


@router.get("/items/{item_type}", response_model=ItemListResponse)
@handle_api_errors("List items")
def list_items(
    item_type: str,
    voter: Optional[str] = None,
    ids: Optional[str] = None,
    service: ItemInfoService = Depends(get_item_info_service)
):
    """
    List items of one type

    Path parameters:
    - item_type: post, link, class, comment or rating

    Query parameters:
    - voter: User ID whose votes are reported in `voted`/`voteValue`
    - ids: Comma-separated item IDs; returns only these, in this order

    Raises:
        HTTPException: 400 if the item type is unknown
    """
    set_logging_context(voter=voter)
    item_ids = [i.strip() for i in ids.split(',') if i.strip()] if ids is not None else None
    items = service.list_items(item_type=item_type, voter=voter, item_ids=item_ids)
    return _item_list(items)


@router.get("/items/{item_type}/{item_id}")
@handle_api_errors("Get item")
def get_item(
    item_type: str,
    item_id: str,
    voter: Optional[str] = None,
    service: ItemInfoService = Depends(get_item_info_service)
):
    """
    Get one item

    Raises:
        HTTPException: 400 if the item type is unknown, 404 if the item does not exist
    """
    set_logging_context(voter=voter)
    return service.get_item(item_type=item_type, item_id=item_id, voter=voter)


@router.get("/posts/{post_id}/comments", response_model=ItemListResponse)
@handle_api_errors("List comments")
def list_comments(
    post_id: str,
    voter: Optional[str] = None,
    service: ItemInfoService = Depends(get_item_info_service)
):
    """
    List the comments under a post, oldest first

    Raises:
        HTTPException: 404 if the post does not exist
    """
    set_logging_context(voter=voter)
    return _item_list(service.list_comments(post_id=post_id, voter=voter))


@router.get("/classes/{class_id}/ratings", response_model=ItemListResponse)
@handle_api_errors("List ratings")
def list_ratings(
    class_id: str,
    voter: Optional[str] = None,
    service: ItemInfoService = Depends(get_item_info_service)
):
    """
    List the ratings of a class, newest first

    Raises:
        HTTPException: 404 if the class does not exist
    """
    set_logging_context(voter=voter)
    return _item_list(service.list_ratings(class_id=class_id, voter=voter))
