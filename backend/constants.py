"""
Application-wide constants and configuration keys.

This module centralizes all magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""


class TableNames:
    """Canonical table names. Item projections report these as their `type`."""

    POST = "post"
    LINK = "link"
    CLASS = "class"
    COMMENT = "comment"
    RATING = "rating"
    VOTE = "vote"


class FieldNames:
    """Column names read off database rows"""

    ID = "id"
    TITLE = "title"
    AUTHOR = "author"
    ADDED_BY = "added_by"
    CONTENT = "content"
    SUMMARY = "summary"
    TAGS = "tags"
    NETVOTES = "net_votes"
    TIMESTAMP = "timestamp"
    DATETIME = "datetime"
    LINK = "link"
    COURSE_CODE = "course_code"
    AVERAGE_RATING = "average_rating"
    PARENT = "parent"
    PARENT_POST = "parent_post"
    PARENT_COMMENT = "parent_comment"

    # Vote table
    VOTER = "voter"
    ITEM_ID = "item_id"
    ITEM_TYPE = "item_type"
    VOTE_VALUE = "vote_value"


class VotePolarity:
    """Values reported in the `voted` field of an item projection"""

    POSITIVE = "positive"
    NEGATIVE = "negative"


class ServerConfig:
    """Server configuration constants"""

    HOST = "0.0.0.0"
    PORT = 8080

    @classmethod
    def url(cls) -> str:
        """Get the full server URL"""
        return f"http://{cls.HOST}:{cls.PORT}"


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
