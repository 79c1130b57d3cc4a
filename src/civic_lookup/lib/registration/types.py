"""Registration directory types."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class StateRegistration:
    """Registration resources for one state or territory."""

    code: str
    name: str
    status_url: str
    registration_url: str
    deadline: str
    absentee_deadline: str
    early_voting: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class UnknownStateError(KeyError):
    """No directory entry exists for the requested state."""

    def __init__(self, state: str) -> None:
        self.state = state
        super().__init__(state)

    def __str__(self) -> str:
        return f"No registration information for state: {self.state!r}"
