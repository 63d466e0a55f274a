"""
User model for pseudonymous accounts.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import CheckConstraint, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel

if TYPE_CHECKING:
    from .comment import Comment
    from .post import Post


class User(BaseModel):
    """Pseudonymous user identified by a unique username."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(32), unique=True, nullable=False)
    display_name: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relations
    posts: Mapped[List["Post"]] = relationship(
        "Post",
        back_populates="author",
        cascade="all, delete-orphan",
        lazy="noload",
    )
    comments: Mapped[List["Comment"]] = relationship(
        "Comment",
        back_populates="author",
        cascade="all, delete-orphan",
        lazy="noload",
    )

    __table_args__ = (
        CheckConstraint("length(username) <= 32", name="ck_users_username_len"),
        CheckConstraint(
            "display_name IS NULL OR length(display_name) <= 64", name="ck_users_display_name_len"
        ),
    )

    def __repr__(self) -> str:
        return f"<User(username='{self.username}')>"
