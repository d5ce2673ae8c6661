from entrelinhas.models.user import USERS, new_user_document
from entrelinhas.models.post import POSTS, VISIBLE_FILTER, find_comment, new_comment_document, new_post_document

__all__ = [
    "USERS",
    "POSTS",
    "VISIBLE_FILTER",
    "new_user_document",
    "new_post_document",
    "new_comment_document",
    "find_comment",
]
