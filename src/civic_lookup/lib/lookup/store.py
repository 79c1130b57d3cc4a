"""Per-user district persistence capability."""

from typing import Protocol

from civic_lookup.lib.districts.types import DistrictRecord


class DistrictStore(Protocol):
    """One row of districts per user, addressed by user id."""

    async def get(self, user_id: str) -> DistrictRecord | None: ...

    async def insert(self, user_id: str, record: DistrictRecord) -> None: ...

    async def update(self, user_id: str, record: DistrictRecord) -> None: ...


class InMemoryDistrictStore:
    """Dictionary-backed DistrictStore."""

    def __init__(self) -> None:
        self.rows: dict[str, DistrictRecord] = {}

    async def get(self, user_id: str) -> DistrictRecord | None:
        return self.rows.get(user_id)

    async def insert(self, user_id: str, record: DistrictRecord) -> None:
        if user_id in self.rows:
            msg = f"districts already stored for user {user_id}"
            raise KeyError(msg)
        self.rows[user_id] = record

    async def update(self, user_id: str, record: DistrictRecord) -> None:
        if user_id not in self.rows:
            msg = f"no districts stored for user {user_id}"
            raise KeyError(msg)
        self.rows[user_id] = record
