"""Status feed composition."""

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from sample_app.models.micropost import Micropost
from sample_app.models.relationship import Relationship
from sample_app.models.user import User


async def feed(
    db: AsyncSession,
    user: User,
    limit: int | None = None,
    offset: int = 0,
) -> list[Micropost]:
    """Microposts by ``user`` and everyone they follow, newest first.

    Runs as one query with the followed ids as a subquery. Posts with the
    same timestamp come out newest id first.

    Args:
        db: Database session.
        user: Owner of the feed.
        limit: Maximum number of posts to return, or None for all.
        offset: Number of posts to skip, for paging.
    """
    followed_ids = select(Relationship.followed_id).where(Relationship.follower_id == user.id)
    query = (
        select(Micropost)
        .where(
            or_(
                Micropost.user_id == user.id,
                Micropost.user_id.in_(followed_ids),
            )
        )
        .order_by(Micropost.created_at.desc(), Micropost.id.desc())
    )
    if offset:
        query = query.offset(offset)
    if limit is not None:
        query = query.limit(limit)

    result = await db.execute(query)
    return list(result.scalars().all())
