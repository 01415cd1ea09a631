"""Pydantic schemas for microposts."""

from pydantic import BaseModel, Field, field_validator

CONTENT_MAX_LENGTH = 140


class MicropostCreate(BaseModel):
    """Schema for writing a new micropost."""

    content: str = Field(max_length=CONTENT_MAX_LENGTH, description="Post body (1-140 characters)")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Reject posts made only of whitespace."""
        if not v.strip():
            msg = "Content can't be blank"
            raise ValueError(msg)
        return v
