"""District lookup library: orchestration, errors, and storage capabilities."""

from civic_lookup.lib.lookup.errors import (
    DistrictLookupError,
    LookupErrorKind,
    LookupFailure,
    LookupResult,
    PermissionDenied,
    PersistenceFailure,
    UnsupportedPlatform,
    ValidationError,
)
from civic_lookup.lib.lookup.orchestrator import DistrictLookup, DivisionSource
from civic_lookup.lib.lookup.position import DeniedPositionProvider, PositionProvider, StaticPositionProvider
from civic_lookup.lib.lookup.storage import (
    USER_DISTRICTS_KEY,
    JsonFileKeyValueStore,
    KeyValueStore,
    MemoryKeyValueStore,
)
from civic_lookup.lib.lookup.store import DistrictStore, InMemoryDistrictStore

__all__ = [
    "USER_DISTRICTS_KEY",
    "DeniedPositionProvider",
    "DistrictLookup",
    "DistrictLookupError",
    "DistrictStore",
    "DivisionSource",
    "InMemoryDistrictStore",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "LookupErrorKind",
    "LookupFailure",
    "LookupResult",
    "MemoryKeyValueStore",
    "PermissionDenied",
    "PersistenceFailure",
    "PositionProvider",
    "StaticPositionProvider",
    "UnsupportedPlatform",
    "ValidationError",
]
