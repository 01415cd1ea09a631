"""SQLAlchemy ORM models."""

from sample_app.models.micropost import Micropost
from sample_app.models.relationship import Relationship
from sample_app.models.user import User

__all__ = [
    "Micropost",
    "Relationship",
    "User",
]
