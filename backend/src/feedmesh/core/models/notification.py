# Notifications produced by interactions with a user's content
from enum import Enum
from typing import Optional

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class NotificationType(str, Enum):
    """Kinds of interaction that notify the content owner."""

    LIKE = "LIKE"
    COMMENT = "COMMENT"
    FOLLOW = "FOLLOW"


class Notification(BaseModel):
    """Stored notification; created by the notification service only."""

    __tablename__ = "notifications"

    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    actor_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    type: Mapped[NotificationType] = mapped_column(String(16), nullable=False)
    post_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=True
    )

    __table_args__ = (
        CheckConstraint("user_id <> actor_id", name="ck_notifications_not_self"),
        CheckConstraint("type IN ('LIKE', 'COMMENT', 'FOLLOW')", name="ck_notifications_type"),
        Index("idx_notifications_user_id", "user_id", "id"),
    )

    def __repr__(self) -> str:
        return f"<Notification(type={self.type}, user_id={self.user_id}, actor_id={self.actor_id})>"
