from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from jobnet.models.post import Post, PostComment
from jobnet.schemas.job import Pagination
from jobnet.schemas.user import UserContact, UserSummary


PostType = Literal["update", "career", "document", "article", "achievement"]
Visibility = Literal["public", "connections", "private"]
Category = Literal["general", "technology", "business", "career", "education", "networking", "job", "achievement"]


class PostAttachment(BaseModel):
    type: Literal["image", "document", "link"]
    url: str
    filename: Optional[str] = None
    file_type: Optional[str] = None
    file_size: Optional[int] = None
    thumbnail: Optional[str] = None
    description: Optional[str] = None


class PostCreate(BaseModel):
    content: str = Field(min_length=1, max_length=3000)
    post_type: PostType = "update"
    title: Optional[str] = Field(default=None, max_length=200)
    tags: list[str] = Field(default_factory=list)
    attachments: list[PostAttachment] = Field(default_factory=list)
    visibility: Visibility = "public"
    category: Category = "general"


class PostUpdate(BaseModel):
    content: Optional[str] = Field(default=None, min_length=1, max_length=3000)
    post_type: Optional[PostType] = None
    title: Optional[str] = Field(default=None, max_length=200)
    tags: Optional[list[str]] = None
    attachments: Optional[list[PostAttachment]] = None
    visibility: Optional[Visibility] = None
    category: Optional[Category] = None
    is_active: Optional[bool] = None


class CommentCreate(BaseModel):
    content: str = Field(min_length=1, max_length=1000)


class Reaction(BaseModel):
    user_id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class CommentRead(BaseModel):
    id: int
    user: Optional[UserSummary] = None
    content: str
    created_at: Optional[datetime] = None
    likes: list[Reaction] = Field(default_factory=list)
    like_count: int = 0

    @classmethod
    def from_model(cls, comment: PostComment) -> "CommentRead":
        return cls(
            id=comment.id,
            user=UserSummary.model_validate(comment.user) if comment.user else None,
            content=comment.content,
            created_at=comment.created_at,
            likes=[Reaction.model_validate(like) for like in comment.likes],
            like_count=len(comment.likes),
        )


class PostRead(BaseModel):
    id: int
    author: Optional[UserContact] = None
    content: str
    post_type: PostType
    title: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    attachments: list[PostAttachment] = Field(default_factory=list)
    visibility: Visibility
    category: Category
    featured: bool = False
    is_active: bool = True
    likes: list[Reaction] = Field(default_factory=list)
    comments: list[CommentRead] = Field(default_factory=list)
    shares: list[Reaction] = Field(default_factory=list)
    like_count: int = 0
    comment_count: int = 0
    share_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, post: Post) -> "PostRead":
        return cls(
            id=post.id,
            author=UserContact.model_validate(post.author) if post.author else None,
            content=post.content,
            post_type=post.post_type,
            title=post.title,
            tags=list(post.tags or []),
            attachments=[PostAttachment.model_validate(a) for a in post.attachments or []],
            visibility=post.visibility,
            category=post.category,
            featured=bool(post.featured),
            is_active=bool(post.is_active),
            likes=[Reaction.model_validate(like) for like in post.likes],
            comments=[CommentRead.from_model(c) for c in post.comments],
            shares=[Reaction.model_validate(share) for share in post.shares],
            like_count=len(post.likes),
            comment_count=len(post.comments),
            share_count=len(post.shares),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class PostListResponse(BaseModel):
    posts: list[PostRead]
    pagination: Pagination


class PostEnvelope(BaseModel):
    message: str
    post: PostRead


class PostResponse(BaseModel):
    post: PostRead


class TrendingResponse(BaseModel):
    posts: list[PostRead]


class LikeResponse(BaseModel):
    message: str
    like_count: int
    is_liked: bool


class CommentEnvelope(BaseModel):
    message: str
    comment: CommentRead


class ShareResponse(BaseModel):
    message: str
    share_count: int
