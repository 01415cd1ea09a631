"""Security utilities for password hashing and remember tokens."""

import secrets

import bcrypt

from sample_app.config import get_settings


def hash_password(password: str) -> str:
    """Hash a plain text password using bcrypt."""
    password_bytes = password.encode("utf-8")
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    hashed = bcrypt.hashpw(password_bytes, salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain text password against a hashed password.

    Malformed digests and over-long passwords count as a mismatch.
    """
    password_bytes = plain_password.encode("utf-8")
    hashed_bytes = hashed_password.encode("utf-8")
    try:
        return bcrypt.checkpw(password_bytes, hashed_bytes)
    except ValueError:
        return False


def generate_remember_token() -> str:
    """Generate a random URL-safe remember token.

    The length only depends on ``settings.remember_token_bytes``, so every
    token issued by one configuration has the same size.
    """
    return secrets.token_urlsafe(get_settings().remember_token_bytes)
