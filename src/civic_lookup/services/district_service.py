"""Per-user district persistence backed by the ``user_districts`` table."""

import uuid

from loguru import logger
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from civic_lookup.lib.districts.types import DistrictRecord
from civic_lookup.models.user_district import UserDistrict


def _as_uuid(user_id: str | uuid.UUID) -> uuid.UUID:
    return user_id if isinstance(user_id, uuid.UUID) else uuid.UUID(str(user_id))


async def get_user_districts(session: AsyncSession, user_id: str | uuid.UUID) -> UserDistrict | None:
    """Return the stored district row for a user, if any."""
    result = await session.execute(select(UserDistrict).where(UserDistrict.user_id == _as_uuid(user_id)))
    return result.scalar_one_or_none()


async def clear_user_districts(session: AsyncSession, user_id: str | uuid.UUID) -> bool:
    """Delete a user's stored districts.

    Returns:
        True if a row was deleted.
    """
    result = await session.execute(delete(UserDistrict).where(UserDistrict.user_id == _as_uuid(user_id)))
    await session.commit()
    return bool(result.rowcount)


class SqlDistrictStore:
    """DistrictStore over SQLAlchemy; one row per user.

    ``insert`` and ``update`` commit immediately.  A failed commit is rolled
    back before the error propagates so the session stays usable.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, user_id: str) -> DistrictRecord | None:
        row = await get_user_districts(self._session, user_id)
        return row.to_record() if row is not None else None

    async def insert(self, user_id: str, record: DistrictRecord) -> None:
        row = UserDistrict(user_id=_as_uuid(user_id))
        row.apply_record(record)
        self._session.add(row)
        await self._commit()
        logger.debug(f"Inserted districts for user {user_id}")

    async def update(self, user_id: str, record: DistrictRecord) -> None:
        row = await get_user_districts(self._session, user_id)
        if row is None:
            msg = f"No stored districts for user {user_id}"
            raise LookupError(msg)
        row.apply_record(record)
        await self._commit()
        logger.debug(f"Updated districts for user {user_id}")

    async def _commit(self) -> None:
        try:
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            raise
