"""One-off data repairs."""
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from entrelinhas.models.post import POSTS


def _log(msg: str, *args):
    print(f"[Fix] {msg}", *args)


def _as_object_id(value):
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value), True
    return value, False


async def fix_user_ids(db: AsyncIOMotorDatabase) -> int:
    """Convert user ids stored as hex strings on posts and comments to ObjectIds.

    Returns the number of posts rewritten.
    """
    total = await db[POSTS].count_documents({})
    _log(f"Found {total} posts.")
    updated = 0
    async for post in db[POSTS].find({}):
        changes = {}
        user_id, changed = _as_object_id(post.get("userId"))
        if changed:
            changes["userId"] = user_id

        comments = post.get("comments") or []
        fixed_comments = []
        comments_changed = False
        for comment in comments:
            comment_user_id, changed = _as_object_id(comment.get("userId"))
            if changed:
                comment = {**comment, "userId": comment_user_id}
                comments_changed = True
            fixed_comments.append(comment)
        if comments_changed:
            changes["comments"] = fixed_comments

        if changes:
            await db[POSTS].update_one({"_id": post["_id"]}, {"$set": changes})
            updated += 1
            _log(f"Post {post['_id']} updated")
    _log(f"Done: {updated} posts updated.")
    return updated
