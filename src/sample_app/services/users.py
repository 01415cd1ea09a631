"""User account service: validation, persistence and authentication."""

import logging
from typing import Any

from pydantic import ValidationError
from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sample_app.models.micropost import Micropost
from sample_app.models.relationship import Relationship
from sample_app.models.user import User
from sample_app.schemas.user import UserCreate, UserUpdate
from sample_app.services.base import FieldError, SaveResult, collect_field_errors
from sample_app.utils.security import generate_remember_token, hash_password

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Email has already been taken"


async def email_taken(
    db: AsyncSession,
    email: str,
    exclude_user_id: int | None = None,
) -> bool:
    """Check whether another user already has this email, ignoring case."""
    query = select(User.id).where(func.lower(User.email) == email.lower())
    if exclude_user_id is not None:
        query = query.where(User.id != exclude_user_id)
    result = await db.execute(query.limit(1))
    return result.scalar_one_or_none() is not None


async def validate_user(
    db: AsyncSession,
    data: dict[str, Any],
    exclude_user_id: int | None = None,
    schema: type[UserCreate] = UserCreate,
) -> tuple[UserCreate | None, list[FieldError]]:
    """Validate user input, including email uniqueness.

    Args:
        db: Database session used for the uniqueness query.
        data: Raw input with name, email, password and password_confirmation.
        exclude_user_id: User whose own email should not count as taken.
        schema: Schema to validate against.

    Returns:
        The validated data and an empty list, or None and every field error
        found.
    """
    try:
        user_data = schema.model_validate(data)
    except ValidationError as e:
        errors = collect_field_errors(e)
        # Report a duplicate email alongside the other problems
        email = data.get("email")
        if (
            isinstance(email, str)
            and not any(error.field == "email" for error in errors)
            and await email_taken(db, email, exclude_user_id)
        ):
            errors.append(FieldError(field="email", message=EMAIL_TAKEN))
        return None, errors

    if await email_taken(db, user_data.email, exclude_user_id):
        return None, [FieldError(field="email", message=EMAIL_TAKEN)]

    return user_data, []


def _email_race_lost(email: str) -> SaveResult[User]:
    """Result for an insert or update that lost a race for ``email``."""
    logger.warning("Email %s was registered concurrently", email)
    return SaveResult(errors=[FieldError(field="email", message=EMAIL_TAKEN)])


async def create_user(db: AsyncSession, data: dict[str, Any]) -> SaveResult[User]:
    """Validate and create a new user.

    The password is hashed and a remember token is issued before the insert.
    Invalid input creates nothing and comes back as field errors. The insert
    runs in a savepoint, so losing the email race leaves the rest of the
    session's transaction intact.
    """
    user_data, errors = await validate_user(db, data)
    if user_data is None:
        logger.info("Rejected user registration: %s", ", ".join(e.field for e in errors))
        return SaveResult(errors=errors)

    new_user = User(
        name=user_data.name,
        email=user_data.email,
        password_digest=hash_password(user_data.password),
        remember_token=generate_remember_token(),
        admin=False,
    )
    try:
        async with db.begin_nested():
            db.add(new_user)
            await db.flush()
    except IntegrityError:
        return _email_race_lost(user_data.email)

    await db.refresh(new_user)
    logger.info("Created user %s (id=%s)", new_user.email, new_user.id)
    return SaveResult(record=new_user)


async def update_user(db: AsyncSession, user: User, data: dict[str, Any]) -> SaveResult[User]:
    """Validate and apply a profile update.

    The user's current email does not count as taken. A missing remember
    token is regenerated on save. If the new email is taken concurrently the
    user keeps their stored values.
    """
    user_data, errors = await validate_user(
        db, data, exclude_user_id=user.id, schema=UserUpdate
    )
    if user_data is None:
        logger.info("Rejected update of user %s: %s", user.id, ", ".join(e.field for e in errors))
        return SaveResult(errors=errors)

    password_digest = hash_password(user_data.password)
    try:
        async with db.begin_nested():
            user.name = user_data.name
            user.email = user_data.email
            user.password_digest = password_digest
            if not user.remember_token:
                user.remember_token = generate_remember_token()
            await db.flush()
    except IntegrityError:
        # The savepoint rollback expired the instance
        await db.refresh(user)
        return _email_race_lost(user_data.email)

    await db.refresh(user)
    return SaveResult(record=user)


async def toggle_admin(db: AsyncSession, user: User) -> User:
    """Flip the admin flag and save without revalidating."""
    user.admin = not user.admin
    await db.flush()
    logger.info("User %s admin flag set to %s", user.id, user.admin)
    return user


async def destroy_user(db: AsyncSession, user: User) -> None:
    """Delete a user together with their microposts and follow edges."""
    await db.execute(delete(Micropost).where(Micropost.user_id == user.id))
    await db.execute(
        delete(Relationship).where(
            or_(
                Relationship.follower_id == user.id,
                Relationship.followed_id == user.id,
            )
        )
    )
    await db.delete(user)
    await db.flush()
    logger.info("Destroyed user %s", user.id)


async def get_user(db: AsyncSession, user_id: int) -> User | None:
    """Look up a user by id."""
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def find_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Look up a user by email, ignoring case."""
    result = await db.execute(select(User).where(func.lower(User.email) == email.lower()))
    return result.scalar_one_or_none()


async def find_user_by_remember_token(db: AsyncSession, token: str) -> User | None:
    """Look up the user a remember token was issued to."""
    if not token:
        return None
    result = await db.execute(select(User).where(User.remember_token == token))
    return result.scalar_one_or_none()


async def authenticate_user(db: AsyncSession, email: str, password: str) -> User | None:
    """Sign-in check: return the user for valid credentials, else None."""
    user = await find_user_by_email(db, email)
    if user is None:
        logger.debug("Sign-in attempt for unknown email")
        return None

    authenticated = user.authenticate(password)
    if authenticated is None:
        logger.debug("Wrong password for user %s", user.id)
    return authenticated
