from sqlalchemy import Column, String, Integer, Float, Text, DateTime, ForeignKey, JSON, CheckConstraint, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid
from database import Base
from constants import TableNames


def generate_uuid():
    return str(uuid.uuid4())


class Post(Base):
    """A discussion question posted by a user."""
    __tablename__ = TableNames.POST

    id = Column(String, primary_key=True, default=generate_uuid)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False, default='')
    author = Column(String, nullable=False)
    timestamp = Column(DateTime, nullable=False, default=datetime.utcnow)
    net_votes = Column(Integer, nullable=False, default=0)
    tags = Column(JSON, nullable=False, default=list)

    comments = relationship("Comment", back_populates="post")

    __table_args__ = (
        CheckConstraint("title != ''"),
        Index('idx_post_timestamp', 'timestamp'),
    )


class Link(Base):
    """An external resource shared by a user."""
    __tablename__ = TableNames.LINK

    id = Column(String, primary_key=True, default=generate_uuid)
    title = Column(String, nullable=False)
    summary = Column(Text, nullable=False, default='')
    link = Column(String, nullable=False)
    added_by = Column(String, nullable=False)
    net_votes = Column(Integer, nullable=False, default=0)
    tags = Column(JSON, nullable=False, default=list)
    # Shadows the datetime class inside this body; keep it the last column
    datetime = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        CheckConstraint("link != ''"),
    )


class CourseClass(Base):
    """A course offering that users can review."""
    __tablename__ = TableNames.CLASS

    id = Column(String, primary_key=True, default=generate_uuid)
    title = Column(String, nullable=False)
    course_code = Column(String, nullable=False)
    average_rating = Column(Float, nullable=True)
    added_by = Column(String, nullable=False)
    summary = Column(Text, nullable=False, default='')
    tags = Column(JSON, nullable=False, default=list)

    ratings = relationship("Rating", back_populates="course_class")

    __table_args__ = (
        UniqueConstraint('course_code', name='uq_class_course_code'),
    )


class Comment(Base):
    """
    A reply under a post.

    Top-level comments have no parent_comment; nested replies point at the
    comment they answer. parent_post is set in both cases.
    """
    __tablename__ = TableNames.COMMENT

    id = Column(String, primary_key=True, default=generate_uuid)
    author = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    net_votes = Column(Integer, nullable=False, default=0)
    parent_post = Column(String, ForeignKey(f'{TableNames.POST}.id'), nullable=False)
    parent_comment = Column(String, ForeignKey(f'{TableNames.COMMENT}.id'), nullable=True)
    timestamp = Column(DateTime, nullable=False, default=datetime.utcnow)

    post = relationship("Post", back_populates="comments")

    __table_args__ = (
        Index('idx_comment_parent_post', 'parent_post'),
    )


class Rating(Base):
    """A user's review of a class."""
    __tablename__ = TableNames.RATING

    id = Column(String, primary_key=True, default=generate_uuid)
    parent = Column(String, ForeignKey(f'{TableNames.CLASS}.id'), nullable=False)
    average_rating = Column(Float, nullable=False)
    author = Column(String, nullable=False)
    content = Column(Text, nullable=False, default='')
    # Shadows the datetime class inside this body; keep it the last column
    datetime = Column(DateTime, nullable=False, default=datetime.utcnow)

    course_class = relationship("CourseClass", back_populates="ratings")

    __table_args__ = (
        CheckConstraint("average_rating >= 0"),
        Index('idx_rating_parent', 'parent'),
    )


class Vote(Base):
    """
    One user's vote on one item.

    vote_value is truthy for an upvote and falsy for a downvote.
    """
    __tablename__ = TableNames.VOTE

    id = Column(Integer, primary_key=True, autoincrement=True)
    voter = Column(String, nullable=False)
    item_id = Column(String, nullable=False)
    item_type = Column(String, nullable=False)
    vote_value = Column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint('voter', 'item_type', 'item_id', name='uq_vote_voter_item'),
        Index('idx_vote_item', 'item_type', 'item_id'),
    )
