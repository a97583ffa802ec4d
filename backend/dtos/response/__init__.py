"""
Response DTOs

DTOs for outgoing API responses. These decouple the API from database models
and provide a clear contract for what data the API returns.
"""

from .item_response import (
    PostInfo,
    LinkInfo,
    ClassInfo,
    CommentInfo,
    RatingInfo,
    ItemListResponse,
)

__all__ = [
    "PostInfo",
    "LinkInfo",
    "ClassInfo",
    "CommentInfo",
    "RatingInfo",
    "ItemListResponse",
]
