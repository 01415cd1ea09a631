"""Follow relationships between users."""

import logging

from sqlalchemy import delete, exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sample_app.models.relationship import Relationship
from sample_app.models.user import User

logger = logging.getLogger(__name__)


async def get_relationship(db: AsyncSession, follower: User, followed: User) -> Relationship | None:
    """Fetch the follow edge from ``follower`` to ``followed`` if there is one."""
    result = await db.execute(
        select(Relationship).where(
            Relationship.follower_id == follower.id,
            Relationship.followed_id == followed.id,
        )
    )
    return result.scalar_one_or_none()


async def follow(db: AsyncSession, user: User, other: User) -> Relationship | None:
    """Make ``user`` follow ``other``.

    Following someone twice returns the existing edge. Users cannot follow
    themselves; that request is ignored and returns None.
    """
    if user.id == other.id:
        logger.info("User %s tried to follow themselves - ignored", user.id)
        return None

    existing = await get_relationship(db, user, other)
    if existing is not None:
        return existing

    relationship = Relationship(follower_id=user.id, followed_id=other.id)
    try:
        async with db.begin_nested():
            db.add(relationship)
            await db.flush()
    except IntegrityError:
        # A concurrent follow inserted the same edge first
        logger.debug("User %s already follows user %s", user.id, other.id)
        return await get_relationship(db, user, other)

    logger.debug("User %s now follows user %s", user.id, other.id)
    return relationship


async def unfollow(db: AsyncSession, user: User, other: User) -> bool:
    """Remove the follow edge, returning whether there was one."""
    result = await db.execute(
        delete(Relationship).where(
            Relationship.follower_id == user.id,
            Relationship.followed_id == other.id,
        )
    )
    removed = result.rowcount > 0
    if removed:
        logger.debug("User %s unfollowed user %s", user.id, other.id)
    return removed


async def is_following(db: AsyncSession, user: User, other: User) -> bool:
    """Check whether ``user`` follows ``other``."""
    query = select(
        exists().where(
            Relationship.follower_id == user.id,
            Relationship.followed_id == other.id,
        )
    )
    result = await db.execute(query)
    return bool(result.scalar())


async def followed_users(db: AsyncSession, user: User) -> list[User]:
    """Users that ``user`` follows, in the order they were followed."""
    query = (
        select(User)
        .join(Relationship, Relationship.followed_id == User.id)
        .where(Relationship.follower_id == user.id)
        .order_by(Relationship.created_at, Relationship.id)
    )
    result = await db.execute(query)
    return list(result.scalars().all())


async def followers(db: AsyncSession, user: User) -> list[User]:
    """Users following ``user``, in the order they started following."""
    query = (
        select(User)
        .join(Relationship, Relationship.follower_id == User.id)
        .where(Relationship.followed_id == user.id)
        .order_by(Relationship.created_at, Relationship.id)
    )
    result = await db.execute(query)
    return list(result.scalars().all())
