from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import or_
from sqlalchemy.orm import Session

from jobnet.database import get_db
from jobnet.models.post import Post, PostComment
from jobnet.models.user import User
from jobnet.routers.dependencies import get_current_user
from jobnet.schemas.job import Pagination
from jobnet.schemas.post import (
    Category,
    CommentCreate,
    CommentEnvelope,
    CommentRead,
    LikeResponse,
    PostCreate,
    PostEnvelope,
    PostListResponse,
    PostRead,
    PostResponse,
    PostType,
    PostUpdate,
    ShareResponse,
    TrendingResponse,
)
from jobnet.services.post_service import add_share, toggle_comment_like, toggle_post_like, trending


router = APIRouter(prefix="/posts", tags=["posts"])

logger = logging.getLogger(__name__)


def _get_post_or_404(db: Session, post_id: int) -> Post:
    post = db.query(Post).filter(Post.id == post_id).first()
    if not post:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return post


def _paginate(query, page: int, limit: int) -> PostListResponse:
    total = query.count()
    posts = (
        query.order_by(Post.created_at.desc(), Post.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return PostListResponse(
        posts=[PostRead.from_model(p) for p in posts],
        pagination=Pagination.build(page=page, limit=limit, total=total),
    )


@router.get("", response_model=PostListResponse)
def list_posts(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    search: Optional[str] = None,
    category: Optional[Category] = None,
    post_type: Optional[PostType] = None,
    author: Optional[int] = None,
    featured: bool = False,
    db: Session = Depends(get_db),
) -> PostListResponse:
    query = db.query(Post).filter(Post.is_active.is_(True))
    if search and search.strip():
        like = f"%{search.strip()}%"
        query = query.filter(or_(Post.content.ilike(like), Post.title.ilike(like)))
    if category:
        query = query.filter(Post.category == category)
    if post_type:
        query = query.filter(Post.post_type == post_type)
    if author is not None:
        query = query.filter(Post.author_id == author)
    if featured:
        query = query.filter(Post.featured.is_(True))
    return _paginate(query, page, limit)


@router.get("/trending/feed", response_model=TrendingResponse)
def trending_feed(
    limit: int = Query(default=10, ge=1, le=100),
    db: Session = Depends(get_db),
) -> TrendingResponse:
    posts = db.query(Post).filter(Post.is_active.is_(True)).all()
    return TrendingResponse(posts=[PostRead.from_model(p) for p in trending(posts, limit)])


@router.get("/user/{user_id}", response_model=PostListResponse)
def list_user_posts(
    user_id: int,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    db: Session = Depends(get_db),
) -> PostListResponse:
    query = db.query(Post).filter(Post.author_id == user_id, Post.is_active.is_(True))
    return _paginate(query, page, limit)


@router.get("/{post_id}", response_model=PostResponse)
def read_post(post_id: int, db: Session = Depends(get_db)) -> PostResponse:
    post = _get_post_or_404(db, post_id)
    if not post.is_active:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return PostResponse(post=PostRead.from_model(post))


@router.post("", response_model=PostEnvelope, status_code=status.HTTP_201_CREATED)
def create_post(
    payload: PostCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PostEnvelope:
    content = payload.content.strip()
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Content is required")
    post = Post(
        author_id=current_user.id,
        content=content,
        post_type=payload.post_type,
        title=payload.title,
        tags=[t.strip() for t in payload.tags if t.strip()],
        attachments=[a.model_dump() for a in payload.attachments],
        visibility=payload.visibility,
        category=payload.category,
    )
    db.add(post)
    db.commit()
    db.refresh(post)
    logger.info("posts.create post_id=%s author_id=%s", post.id, current_user.id)
    return PostEnvelope(message="Post created successfully", post=PostRead.from_model(post))


@router.put("/{post_id}", response_model=PostEnvelope)
def update_post(
    post_id: int,
    payload: PostUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PostEnvelope:
    post = _get_post_or_404(db, post_id)
    if post.author_id != current_user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized to update this post")

    changes = payload.model_dump(exclude_unset=True)
    if changes.get("content") is not None:
        changes["content"] = changes["content"].strip()
        if not changes["content"]:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Content is required")
    if changes.get("tags") is not None:
        changes["tags"] = [t.strip() for t in changes["tags"] if t.strip()]
    for field_name, value in changes.items():
        if value is None:
            continue
        setattr(post, field_name, value)

    db.commit()
    db.refresh(post)
    return PostEnvelope(message="Post updated successfully", post=PostRead.from_model(post))


@router.delete("/{post_id}")
def delete_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict[str, str]:
    post = _get_post_or_404(db, post_id)
    if post.author_id != current_user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized to delete this post")
    db.delete(post)
    db.commit()
    return {"message": "Post deleted successfully"}


@router.post("/{post_id}/like", response_model=LikeResponse)
def like_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> LikeResponse:
    post = _get_post_or_404(db, post_id)
    liked = toggle_post_like(post, current_user.id)
    db.commit()
    return LikeResponse(
        message="Post liked" if liked else "Post unliked",
        like_count=len(post.likes),
        is_liked=liked,
    )


@router.post("/{post_id}/comment", response_model=CommentEnvelope, status_code=status.HTTP_201_CREATED)
def add_comment(
    post_id: int,
    payload: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CommentEnvelope:
    content = payload.content.strip()
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Comment content is required")
    post = _get_post_or_404(db, post_id)
    comment = PostComment(user_id=current_user.id, content=content)
    post.comments.append(comment)
    db.commit()
    db.refresh(comment)
    logger.debug("posts.comment post_id=%s comment_id=%s", post.id, comment.id)
    return CommentEnvelope(message="Comment added successfully", comment=CommentRead.from_model(comment))


@router.post("/{post_id}/comment/{comment_id}/like", response_model=LikeResponse)
def like_comment(
    post_id: int,
    comment_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> LikeResponse:
    post = _get_post_or_404(db, post_id)
    comment = post.find_comment(comment_id)
    if comment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found")
    liked = toggle_comment_like(comment, current_user.id)
    db.commit()
    return LikeResponse(
        message="Comment liked" if liked else "Comment unliked",
        like_count=len(comment.likes),
        is_liked=liked,
    )


@router.post("/{post_id}/share", response_model=ShareResponse)
def share_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ShareResponse:
    post = _get_post_or_404(db, post_id)
    if not add_share(post, current_user.id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Post already shared")
    db.commit()
    return ShareResponse(message="Post shared successfully", share_count=len(post.shares))
