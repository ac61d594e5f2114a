from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobnet.database import Base


POST_TYPES = ("update", "career", "document", "article", "achievement")
POST_VISIBILITY = ("public", "connections", "private")
POST_CATEGORIES = ("general", "technology", "business", "career", "education", "networking", "job", "achievement")


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    post_type = Column(String(16), nullable=False, default="update")
    title = Column(String(200), nullable=True)
    tags = Column(JSON, nullable=False, default=list)
    # [{"type", "url", "filename", "file_type", "file_size", "thumbnail", "description"}]
    attachments = Column(JSON, nullable=False, default=list)
    visibility = Column(String(16), nullable=False, default="public")
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    category = Column(String(32), nullable=False, default="general")
    featured = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    author = relationship("User", lazy="joined")
    likes = relationship("PostLike", cascade="all, delete-orphan", order_by="PostLike.id")
    comments = relationship("PostComment", cascade="all, delete-orphan", order_by="PostComment.id")
    shares = relationship("PostShare", cascade="all, delete-orphan", order_by="PostShare.id")

    def has_shared(self, user_id: int) -> bool:
        return any(share.user_id == user_id for share in self.shares)

    def find_comment(self, comment_id: int) -> "PostComment | None":
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        return None


class PostLike(Base):
    __tablename__ = "post_likes"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class PostComment(Base):
    __tablename__ = "post_comments"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", lazy="joined")
    likes = relationship("CommentLike", cascade="all, delete-orphan", order_by="CommentLike.id")


class CommentLike(Base):
    __tablename__ = "comment_likes"

    id = Column(Integer, primary_key=True, index=True)
    comment_id = Column(Integer, ForeignKey("post_comments.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class PostShare(Base):
    __tablename__ = "post_shares"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
