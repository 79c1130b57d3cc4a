"""Address input and normalized district record types."""

from dataclasses import asdict, dataclass, fields
from typing import Any


def _clean(value: Any) -> str | None:
    """Collapse blank or non-string values to None and strip the rest."""
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


@dataclass(frozen=True)
class AddressInput:
    """A partial postal address supplied by a user or recovered from coordinates.

    Never persisted.
    """

    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, _clean(getattr(self, f.name)))

    @property
    def missing_required(self) -> list[str]:
        """Names of the fields required for a manual lookup that are blank."""
        return [name for name in ("street", "city", "state") if getattr(self, name) is None]


@dataclass(frozen=True)
class DistrictRecord:
    """Jurisdiction labels derived from a district lookup.

    Each field is either None or a non-empty display string.  The record
    carries no address or other personal data.
    """

    country: str | None = None
    state: str | None = None
    county: str | None = None
    municipal: str | None = None
    congressional_district: str | None = None
    state_district: str | None = None
    state_lower_district: str | None = None
    school_board: str | None = None

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, _clean(getattr(self, f.name)))

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DistrictRecord":
        """Build a record from a mapping, ignoring unknown keys."""
        return cls(**{name: data.get(name) for name in cls.field_names()})

    def to_dict(self) -> dict[str, str | None]:
        return asdict(self)

    def is_empty(self) -> bool:
        return all(value is None for value in self.to_dict().values())

    def has_jurisdiction(self) -> bool:
        """True when any label below the country level is set."""
        return any(value is not None for name, value in self.to_dict().items() if name != "country")

    def labelled(self) -> list[tuple[str, str]]:
        """Present fields as ``(heading, value)`` pairs in display order."""
        return [(heading, value) for name, heading in FIELD_HEADINGS if (value := getattr(self, name)) is not None]


FIELD_HEADINGS: tuple[tuple[str, str], ...] = (
    ("country", "Country"),
    ("state", "State"),
    ("congressional_district", "Congressional District"),
    ("state_district", "State Legislative District"),
    ("state_lower_district", "State House District"),
    ("county", "County"),
    ("municipal", "Municipal District"),
    ("school_board", "School District"),
)
