"""UserDistrict model: the most recent districts derived for a user.

Exactly one row per user.  Only the derived district labels are stored,
never the address they were derived from.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from civic_lookup.lib.districts.types import DistrictRecord
from civic_lookup.models.base import Base, UUIDMixin


class UserDistrict(Base, UUIDMixin):
    """Electoral districts associated with a user account."""

    __tablename__ = "user_districts"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True, index=True
    )

    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    county: Mapped[str | None] = mapped_column(String(200), nullable=True)
    municipal: Mapped[str | None] = mapped_column(String(200), nullable=True)
    congressional_district: Mapped[str | None] = mapped_column(String(200), nullable=True)
    state_district: Mapped[str | None] = mapped_column(String(200), nullable=True)
    state_lower_district: Mapped[str | None] = mapped_column(String(200), nullable=True)
    school_board: Mapped[str | None] = mapped_column(String(200), nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )

    def to_record(self) -> DistrictRecord:
        return DistrictRecord(**{name: getattr(self, name) for name in DistrictRecord.field_names()})

    def apply_record(self, record: DistrictRecord) -> None:
        """Overwrite every district column from ``record``, clearing absent ones."""
        for name, value in record.to_dict().items():
            setattr(self, name, value)
