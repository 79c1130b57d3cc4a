"""ORM model registry: import all models so Alembic autogenerate discovers them."""

from civic_lookup.models.user import User
from civic_lookup.models.user_district import UserDistrict

__all__ = [
    "User",
    "UserDistrict",
]
