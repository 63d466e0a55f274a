# Post model for feed content
from typing import TYPE_CHECKING, List

from sqlalchemy import ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel

if TYPE_CHECKING:
    from .comment import Comment
    from .like import Like
    from .user import User


class Post(BaseModel):
    """Short message in the public feed."""

    __tablename__ = "posts"

    content: Mapped[str] = mapped_column(Text, nullable=False)

    author_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    # relationships
    author: Mapped["User"] = relationship("User", back_populates="posts", lazy="selectin")

    likes: Mapped[List["Like"]] = relationship(
        "Like", back_populates="post", cascade="all, delete-orphan", lazy="noload"
    )
    comments: Mapped[List["Comment"]] = relationship(
        "Comment", back_populates="post", cascade="all, delete-orphan", lazy="noload"
    )

    __table_args__ = (
        Index("idx_posts_author_id", "author_id"),
        # ids are the pagination cursor, never reuse them
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        preview = self.content if len(self.content) <= 30 else self.content[:30] + "..."
        return f"<Post(id={self.id}, content='{preview}')>"
