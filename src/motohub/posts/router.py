"""Post router: all /api/posts/* endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from motohub.auth.dependencies import get_current_user
from motohub.db.models import Post, User
from motohub.dependencies import get_post_store
from motohub.posts.schemas import PostCreateRequest, PostResponse
from motohub.posts.service import (
    comment_on_post,
    create_post,
    delete_post,
    delete_post_comment,
    get_post,
    like_post,
    list_posts,
    unlike_post,
)
from motohub.social.schemas import (
    CommentCreateRequest,
    CommentResponse,
    ReactionResponse,
    comments_out,
    reactions_out,
)
from motohub.stores import PostStore

router = APIRouter(prefix="/api/posts", tags=["Posts"])


def _post_response(post: Post) -> PostResponse:
    return PostResponse(
        id=post.id,
        user=post.user_id,
        text=post.text,
        name=post.name,
        avatar=post.avatar,
        likes=reactions_out(post.likes),
        comments=comments_out(post.comments),
        date=post.date,
    )


# ---------------------------------------------------------------------------
# Posts
# ---------------------------------------------------------------------------


@router.post("", response_model=PostResponse)
async def create_post_endpoint(
    body: PostCreateRequest,
    user: User = Depends(get_current_user),
    posts: PostStore = Depends(get_post_store),
) -> PostResponse:
    """Create a post as the current user."""
    post = await create_post(posts, user, body.text)
    return _post_response(post)


@router.get("", response_model=list[PostResponse])
async def list_posts_endpoint(
    _user: User = Depends(get_current_user),
    posts: PostStore = Depends(get_post_store),
) -> list[PostResponse]:
    """All posts, newest first."""
    return [_post_response(p) for p in await list_posts(posts)]


@router.get("/{post_id}", response_model=PostResponse)
async def get_post_endpoint(
    post_id: str,
    _user: User = Depends(get_current_user),
    posts: PostStore = Depends(get_post_store),
) -> PostResponse:
    return _post_response(await get_post(posts, post_id))


@router.delete("/{post_id}")
async def delete_post_endpoint(
    post_id: str,
    user: User = Depends(get_current_user),
    posts: PostStore = Depends(get_post_store),
) -> dict[str, str]:
    """Delete one of the current user's posts."""
    await delete_post(posts, post_id, user.id)
    return {"detail": "Post has been deleted"}


# ---------------------------------------------------------------------------
# Likes
# ---------------------------------------------------------------------------


@router.put("/like/{post_id}", response_model=list[ReactionResponse])
async def like_post_endpoint(
    post_id: str,
    user: User = Depends(get_current_user),
    posts: PostStore = Depends(get_post_store),
) -> list[ReactionResponse]:
    return reactions_out(await like_post(posts, post_id, user.id))


@router.put("/unlike/{post_id}", response_model=list[ReactionResponse])
async def unlike_post_endpoint(
    post_id: str,
    user: User = Depends(get_current_user),
    posts: PostStore = Depends(get_post_store),
) -> list[ReactionResponse]:
    return reactions_out(await unlike_post(posts, post_id, user.id))


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


@router.post("/comment/{post_id}", response_model=list[CommentResponse])
async def comment_endpoint(
    post_id: str,
    body: CommentCreateRequest,
    user: User = Depends(get_current_user),
    posts: PostStore = Depends(get_post_store),
) -> list[CommentResponse]:
    """Add a comment; returns the full comment list."""
    return comments_out(await comment_on_post(posts, post_id, user, body.text))


@router.delete("/comment/{post_id}/{comment_id}", response_model=list[CommentResponse])
async def delete_comment_endpoint(
    post_id: str,
    comment_id: str,
    user: User = Depends(get_current_user),
    posts: PostStore = Depends(get_post_store),
) -> list[CommentResponse]:
    """Delete a comment written by the current user."""
    return comments_out(await delete_post_comment(posts, post_id, comment_id, user.id))
