"""Pydantic schemas for input validation."""

from sample_app.schemas.micropost import MicropostCreate
from sample_app.schemas.user import UserCreate, UserUpdate

__all__ = [
    "MicropostCreate",
    "UserCreate",
    "UserUpdate",
]
