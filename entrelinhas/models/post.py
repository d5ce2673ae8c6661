"""Post documents and the comments embedded in them.

A post keeps its likes and reports as arrays of user ObjectIds used as sets,
and its comments as an ordered array of sub-documents with their own ``_id``.
"""
from datetime import datetime

from bson import ObjectId

from entrelinhas.core.clock import to_storage

POSTS = "posts"

# Posts written before ``hidden`` existed have no such field and stay visible.
VISIBLE_FILTER = {"$or": [{"hidden": False}, {"hidden": {"$exists": False}}]}


def new_post_document(
    user: dict,
    content: str,
    created_at: datetime,
    anonymous: bool = False,
    hide_likes: bool = False,
    mood: str | None = None,
) -> dict:
    return {
        "userId": user["_id"],
        "username": user["username"],
        "content": content,
        "anonymous": anonymous,
        "hideLikes": hide_likes,
        "mood": mood,
        "likes": [],
        "reports": [],
        "comments": [],
        "hidden": False,
        "createdAt": to_storage(created_at),
    }


def new_comment_document(user: dict, content: str, created_at: datetime) -> dict:
    return {
        "_id": ObjectId(),
        "userId": user["_id"],
        "username": user["username"],
        "content": content,
        "createdAt": to_storage(created_at),
    }


def find_comment(post: dict, comment_id: ObjectId) -> dict | None:
    for comment in post.get("comments") or []:
        if comment.get("_id") == comment_id:
            return comment
    return None
