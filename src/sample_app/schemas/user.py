"""Pydantic schemas for user sign-up and profile updates."""

import re

from pydantic import BaseModel, Field, ValidationInfo, field_validator

NAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_BYTES = 72  # bcrypt only looks at the first 72 bytes

EMAIL_REGEX = re.compile(r"[\w+\-.]+@[a-z\d\-.]+\.[a-z]+", re.IGNORECASE | re.ASCII)


class UserCreate(BaseModel):
    """Schema for user registration."""

    name: str = Field(max_length=NAME_MAX_LENGTH, description="Display name (1-50 characters)")
    email: str = Field(max_length=255, description="Email address, stored lower-cased")
    password: str = Field(
        min_length=PASSWORD_MIN_LENGTH,
        description="Password (at least 6 characters)",
    )
    password_confirmation: str = Field(description="Must match password exactly")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject names made only of whitespace."""
        if not v.strip():
            msg = "Name can't be blank"
            raise ValueError(msg)
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate the email format and normalize it to lower case."""
        if not v.strip():
            msg = "Email can't be blank"
            raise ValueError(msg)
        if not EMAIL_REGEX.fullmatch(v):
            msg = "Email is invalid"
            raise ValueError(msg)
        return v.lower()

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        """Reject blank passwords and ones bcrypt would truncate."""
        if not v.strip():
            msg = "Password can't be blank"
            raise ValueError(msg)
        if len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
            msg = f"Password must be at most {PASSWORD_MAX_BYTES} bytes"
            raise ValueError(msg)
        return v

    @field_validator("password_confirmation")
    @classmethod
    def validate_password_confirmation(cls, v: str, info: ValidationInfo) -> str:
        """Validate that the confirmation matches the password."""
        # Only compare when the password itself passed validation
        password = info.data.get("password")
        if password is not None and v != password:
            msg = "Password confirmation doesn't match Password"
            raise ValueError(msg)
        return v


class UserUpdate(UserCreate):
    """Schema for updating a user's profile.

    Every save re-checks the password, so updates carry the same fields as
    registration.
    """

    pass
