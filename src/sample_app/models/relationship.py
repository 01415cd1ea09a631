"""Relationship (follow edge) ORM model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sample_app.database import Base, utcnow

if TYPE_CHECKING:
    from sample_app.models.user import User


class Relationship(Base):
    """Directed edge from a follower to the user they follow."""

    __tablename__ = "relationships"
    __table_args__ = (
        UniqueConstraint("follower_id", "followed_id", name="uq_relationship_follower_followed"),
        CheckConstraint("follower_id != followed_id", name="ck_relationship_not_self"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    follower_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    followed_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    created_at: Mapped[datetime] = mapped_column(default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow)

    # Relationships
    follower: Mapped[User] = relationship(
        foreign_keys=[follower_id], back_populates="relationships"
    )
    followed: Mapped[User] = relationship(
        foreign_keys=[followed_id], back_populates="reverse_relationships"
    )
