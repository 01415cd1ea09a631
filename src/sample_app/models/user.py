"""User ORM model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sample_app.database import Base, utcnow
from sample_app.utils.security import generate_remember_token, verify_password

if TYPE_CHECKING:
    from sample_app.models.micropost import Micropost
    from sample_app.models.relationship import Relationship


class User(Base):
    """User account model for authentication, posting and following."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(50))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)  # Lower-cased
    password_digest: Mapped[str] = mapped_column(String(255))
    remember_token: Mapped[str] = mapped_column(
        String(255), index=True, default=generate_remember_token
    )
    admin: Mapped[bool] = mapped_column(default=False)
    created_at: Mapped[datetime] = mapped_column(default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow)

    # Relationships
    microposts: Mapped[list[Micropost]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[Micropost.created_at.desc(), Micropost.id.desc()]",
    )
    relationships: Mapped[list[Relationship]] = relationship(
        foreign_keys="Relationship.follower_id",
        back_populates="follower",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    reverse_relationships: Mapped[list[Relationship]] = relationship(
        foreign_keys="Relationship.followed_id",
        back_populates="followed",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    followed_users: Mapped[list[User]] = relationship(
        secondary="relationships",
        primaryjoin="User.id == Relationship.follower_id",
        secondaryjoin="User.id == Relationship.followed_id",
        viewonly=True,
    )
    followers: Mapped[list[User]] = relationship(
        secondary="relationships",
        primaryjoin="User.id == Relationship.followed_id",
        secondaryjoin="User.id == Relationship.follower_id",
        viewonly=True,
    )

    def authenticate(self, password: str) -> User | None:
        """Return this user if ``password`` matches the stored digest.

        A wrong password gives ``None`` rather than an exception so callers
        can branch on the result directly.
        """
        if verify_password(password, self.password_digest):
            return self
        return None

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
