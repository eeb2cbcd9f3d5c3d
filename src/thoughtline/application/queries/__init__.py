"""Application queries (read side)."""

from thoughtline.application.queries.get_comment_query import GetCommentQuery
from thoughtline.application.queries.get_thought_query import GetThoughtQuery
from thoughtline.application.queries.list_comments_query import ListCommentsQuery
from thoughtline.application.queries.list_thoughts_query import ListThoughtsQuery

__all__ = [
    "GetCommentQuery",
    "GetThoughtQuery",
    "ListCommentsQuery",
    "ListThoughtsQuery",
]
