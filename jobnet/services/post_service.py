from __future__ import annotations

from typing import Iterable

from jobnet.models.post import CommentLike, Post, PostComment, PostLike, PostShare


LIKE_WEIGHT = 1
COMMENT_WEIGHT = 2
SHARE_WEIGHT = 3


def toggle_post_like(post: Post, user_id: int) -> bool:
    """Like the post for ``user_id`` or remove an existing like. Returns the new state."""

    for like in list(post.likes):
        if like.user_id == user_id:
            post.likes.remove(like)
            return False
    post.likes.append(PostLike(user_id=user_id))
    return True


def toggle_comment_like(comment: PostComment, user_id: int) -> bool:
    for like in list(comment.likes):
        if like.user_id == user_id:
            comment.likes.remove(like)
            return False
    comment.likes.append(CommentLike(user_id=user_id))
    return True


def add_share(post: Post, user_id: int) -> bool:
    """Record a share. Returns False when the user already shared the post."""

    if post.has_shared(user_id):
        return False
    post.shares.append(PostShare(user_id=user_id))
    return True


def engagement_score(post: Post) -> int:
    return (
        len(post.likes) * LIKE_WEIGHT
        + len(post.comments) * COMMENT_WEIGHT
        + len(post.shares) * SHARE_WEIGHT
    )


def trending(posts: Iterable[Post], limit: int) -> list[Post]:
    # Newest first, then a stable sort on score keeps recency as the tie-break.
    ordered = sorted(posts, key=lambda p: (p.created_at, p.id), reverse=True)
    ordered.sort(key=engagement_score, reverse=True)
    return ordered[:limit]
