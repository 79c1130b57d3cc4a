"""Static voter registration directory."""

from civic_lookup.lib.registration.directory import (
    get_state,
    list_states,
    registration_status_url,
    registration_url,
)
from civic_lookup.lib.registration.types import StateRegistration, UnknownStateError

__all__ = [
    "StateRegistration",
    "UnknownStateError",
    "get_state",
    "list_states",
    "registration_status_url",
    "registration_url",
]
