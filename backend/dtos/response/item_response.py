"""
Item Response DTOs

DTOs for item info responses. One model per item type; field names on the
wire are camelCase (see aliases), matching what the web client reads.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional

from constants import TableNames


class PostInfo(BaseModel):
    """Response DTO for a post (discussion question)."""

    id: Any = Field(None, description="Post ID")
    title: Any = Field(None, description="Post title")
    votes: Any = Field(None, description="Net vote count")
    author: Any = Field(None, description="Author user ID")
    date: Any = Field(None, description="Creation timestamp")
    summary: Any = Field(None, description="Post body")
    type: str = Field(TableNames.POST, description="Item type tag")
    tags: Any = Field(None, description="Tags attached to the post")
    voted: Optional[str] = Field(None, description="Requesting user's vote polarity, if any")
    vote_value: Any = Field(0, alias="voteValue", description="Requesting user's raw vote value, 0 if none")

    model_config = ConfigDict(populate_by_name=True)


class LinkInfo(BaseModel):
    """Response DTO for a shared link."""

    id: Any = Field(None, description="Link ID")
    title: Any = Field(None, description="Link title")
    votes: Any = Field(None, description="Net vote count")
    author: Any = Field(None, description="User who added the link")
    date: Any = Field(None, description="Creation timestamp")
    summary: Any = Field(None, description="Link summary")
    type: str = Field(TableNames.LINK, description="Item type tag")
    tags: Any = Field(None, description="Tags attached to the link")
    url: Any = Field(None, description="Target URL")
    voted: Optional[str] = Field(None, description="Requesting user's vote polarity, if any")
    vote_value: Any = Field(0, alias="voteValue", description="Requesting user's raw vote value, 0 if none")

    model_config = ConfigDict(populate_by_name=True)


class ClassInfo(BaseModel):
    """Response DTO for a class (course offering)."""

    id: Any = Field(None, description="Class ID")
    title: Any = Field(None, description="Class title")
    course_code: Any = Field(None, alias="courseCode", description="Course code")
    rating: Any = Field(None, description="Average rating")
    author: Any = Field(None, description="User who added the class")
    summary: Any = Field(None, description="Class summary")
    type: str = Field(TableNames.CLASS, description="Item type tag")
    tags: Any = Field(None, description="Tags attached to the class")
    voted: Optional[str] = Field(None, description="Requesting user's vote polarity, if any")

    model_config = ConfigDict(populate_by_name=True)


class CommentInfo(BaseModel):
    """Response DTO for a comment."""

    id: Any = Field(None, description="Comment ID")
    author: Any = Field(None, description="Author user ID")
    content: Any = Field(None, description="Comment body")
    net_votes: Any = Field(None, alias="netVotes", description="Net vote count")
    parent: Any = Field(None, description="ID of the post the comment belongs to")
    parent_comment: Any = Field(None, alias="parentComment", description="ID of the comment replied to")
    type: str = Field(TableNames.COMMENT, description="Item type tag")
    date: Any = Field(None, description="Creation timestamp")
    voted: Optional[str] = Field(None, description="Requesting user's vote polarity, if any")

    model_config = ConfigDict(populate_by_name=True)


class RatingInfo(BaseModel):
    """Response DTO for a class rating."""

    parent: Any = Field(None, description="ID of the rated class")
    id: Any = Field(None, description="Rating ID")
    rating: Any = Field(None, description="Rating value")
    author: Any = Field(None, description="Author user ID")
    content: Any = Field(None, description="Review text")
    date: Any = Field(None, description="Creation timestamp")
    type: str = Field(TableNames.RATING, description="Item type tag")
    voted: Optional[str] = Field(None, description="Requesting user's vote polarity, if any")

    model_config = ConfigDict(populate_by_name=True)


class ItemListResponse(BaseModel):
    """
    Response DTO for a list of projected items.

    Items keep their per-type shape, so they are carried as plain records.
    """

    items: List[Dict[str, Any]] = Field(description="Projected items in query order")
    count: int = Field(description="Number of items returned")
