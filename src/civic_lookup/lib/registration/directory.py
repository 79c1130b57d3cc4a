"""Lookup over the static registration directory."""

from civic_lookup.lib.registration.states import STATES
from civic_lookup.lib.registration.types import StateRegistration, UnknownStateError

_BY_CODE: dict[str, StateRegistration] = {entry.code: entry for entry in STATES}
_BY_NAME: dict[str, StateRegistration] = {entry.name.upper(): entry for entry in STATES}


def list_states() -> list[StateRegistration]:
    """Return every directory entry, states first then territories."""
    return list(STATES)


def get_state(state: str) -> StateRegistration:
    """Return the entry for a postal code or full name, case-insensitively.

    Raises:
        UnknownStateError: ``state`` matches no entry.
    """
    key = (state or "").strip().upper()
    entry = _BY_CODE.get(key) or _BY_NAME.get(key)
    if entry is None:
        raise UnknownStateError(state)
    return entry


def registration_status_url(state: str) -> str:
    """Official site where a voter can check their registration status."""
    return get_state(state).status_url


def registration_url(state: str) -> str:
    """Official site where a voter can register."""
    return get_state(state).registration_url
