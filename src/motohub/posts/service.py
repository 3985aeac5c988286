"""Post business logic."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

import structlog

from motohub.db.models import Post, User
from motohub.errors import NotFound
from motohub.social import CommentEngine, ReactionEngine, assert_owner

if TYPE_CHECKING:
    from collections.abc import Sequence

    from motohub.stores import PostStore

logger = structlog.get_logger()


async def create_post(posts: PostStore, author: User, text: str) -> Post:
    """Create a post carrying a snapshot of the author's name and avatar."""
    post = Post(
        user_id=author.id,
        text=text,
        name=author.name,
        avatar=author.avatar,
        likes=[],
        comments=[],
        date=datetime.now(timezone.utc),
    )
    await posts.add(post)
    logger.info("post_created", post_id=post.id, user_id=author.id)
    return post


async def list_posts(posts: PostStore) -> Sequence[Post]:
    return await posts.list_newest_first()


async def get_post(posts: PostStore, post_id: str) -> Post:
    """Raises NotFound if there is no such post."""
    post = await posts.get(post_id)
    if post is None:
        msg = "Post not found"
        raise NotFound(msg)
    return post


async def delete_post(posts: PostStore, post_id: str, user_id: str) -> None:
    """Delete a post. Only its author may do this."""
    post = await get_post(posts, post_id)
    assert_owner(post, user_id, "User not authorized to delete this post")
    await posts.delete(post)
    logger.info("post_deleted", post_id=post_id, user_id=user_id)


def _likes(posts: PostStore) -> ReactionEngine:
    return ReactionEngine(
        posts,
        "likes",
        already_message="User already liked this post",
        missing_message="User has not liked post yet",
    )


async def like_post(posts: PostStore, post_id: str, user_id: str) -> list[dict[str, Any]]:
    post = await get_post(posts, post_id)
    return await _likes(posts).add(post, user_id)


async def unlike_post(posts: PostStore, post_id: str, user_id: str) -> list[dict[str, Any]]:
    post = await get_post(posts, post_id)
    return await _likes(posts).remove(post, user_id)


async def comment_on_post(posts: PostStore, post_id: str, author: User, text: str) -> list[dict[str, Any]]:
    post = await get_post(posts, post_id)
    return await CommentEngine(posts).add(post, author, text)


async def delete_post_comment(
    posts: PostStore,
    post_id: str,
    comment_id: str,
    user_id: str,
) -> list[dict[str, Any]]:
    post = await get_post(posts, post_id)
    return await CommentEngine(posts).delete(post, comment_id, user_id)
