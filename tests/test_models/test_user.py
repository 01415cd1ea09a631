"""Tests for the User ORM model."""

from sqlalchemy.ext.asyncio import AsyncSession

from sample_app.models.user import User
from sample_app.utils.security import hash_password


def build_user(password: str = "foobar") -> User:
    """Build an unsaved user with a hashed password."""
    return User(
        name="Example User",
        email="example@mail.com",
        password_digest=hash_password(password),
    )


class TestUserModel:
    """Tests for User columns and defaults."""

    def test_exposes_account_attributes(self) -> None:
        """Test that the account attributes and relations are mapped."""
        for attribute in (
            "name",
            "email",
            "password_digest",
            "remember_token",
            "admin",
            "microposts",
            "relationships",
            "followed_users",
            "reverse_relationships",
            "followers",
        ):
            assert hasattr(User, attribute)

    async def test_defaults_after_flush(self, db: AsyncSession) -> None:
        """Test that admin defaults to false and a remember token is issued."""
        user = build_user()
        db.add(user)
        await db.flush()

        assert user.admin is False
        assert user.remember_token
        assert user.created_at is not None

    async def test_remember_tokens_differ(self, db: AsyncSession) -> None:
        """Test that each user gets their own remember token."""
        first = build_user()
        second = build_user()
        second.email = "other@mail.com"
        db.add_all([first, second])
        await db.flush()

        assert first.remember_token != second.remember_token


class TestAuthenticate:
    """Tests for User.authenticate."""

    def test_correct_password_returns_user(self) -> None:
        """Test that the right password returns the same user."""
        user = build_user()

        assert user.authenticate("foobar") is user

    def test_wrong_password_is_falsy(self) -> None:
        """Test that a wrong password returns None instead of raising."""
        user = build_user()

        result = user.authenticate("invalid")

        assert result is None
        assert not result

    def test_empty_password_is_falsy(self) -> None:
        """Test that an empty password does not authenticate."""
        assert build_user().authenticate("") is None
