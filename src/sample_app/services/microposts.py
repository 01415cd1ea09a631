"""Micropost service."""

import logging
from datetime import datetime

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sample_app.models.micropost import Micropost
from sample_app.models.user import User
from sample_app.schemas.micropost import MicropostCreate
from sample_app.services.base import SaveResult, collect_field_errors

logger = logging.getLogger(__name__)


async def create_micropost(
    db: AsyncSession,
    user: User,
    content: str,
    created_at: datetime | None = None,
) -> SaveResult[Micropost]:
    """Validate and store a micropost written by ``user``.

    ``created_at`` defaults to now; passing it lets imports keep their
    original timestamps.
    """
    try:
        post_data = MicropostCreate(content=content)
    except ValidationError as e:
        return SaveResult(errors=collect_field_errors(e))

    micropost = Micropost(user_id=user.id, content=post_data.content)
    if created_at is not None:
        micropost.created_at = created_at
    db.add(micropost)
    await db.flush()
    await db.refresh(micropost)
    logger.debug("User %s posted micropost %s", user.id, micropost.id)
    return SaveResult(record=micropost)


async def get_micropost(db: AsyncSession, micropost_id: int) -> Micropost | None:
    """Look up a micropost by id."""
    result = await db.execute(select(Micropost).where(Micropost.id == micropost_id))
    return result.scalar_one_or_none()


async def user_microposts(db: AsyncSession, user: User) -> list[Micropost]:
    """A user's own microposts, newest first."""
    query = (
        select(Micropost)
        .where(Micropost.user_id == user.id)
        .order_by(Micropost.created_at.desc(), Micropost.id.desc())
    )
    result = await db.execute(query)
    return list(result.scalars().all())


async def delete_micropost(db: AsyncSession, micropost: Micropost) -> None:
    """Delete a single micropost."""
    await db.delete(micropost)
    await db.flush()
