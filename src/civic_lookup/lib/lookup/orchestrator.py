"""District lookup orchestration.

Turns a manual address or a device position into a DistrictRecord:

1. validate and format the address (or obtain the position and recover a
   coarse address through the reverse geocoder),
2. fetch OCD divisions from the civic data source,
3. parse them into a DistrictRecord,
4. write the record to local storage and, for an authenticated user, upsert
   it into the per-user store.  Storage failures are logged, never raised.

Steps run strictly in sequence.  Every lookup failure is converted to a
:class:`LookupResult` at this boundary.  Only programming errors outside the
civic call propagate.
Raw addresses are neither stored nor logged.
"""

from typing import Protocol

from loguru import logger

from civic_lookup.lib.civic.client import CivicApiError
from civic_lookup.lib.districts.address import format_address
from civic_lookup.lib.districts.parser import extract_district_info
from civic_lookup.lib.districts.types import AddressInput, DistrictRecord
from civic_lookup.lib.geocoder.base import BaseReverseGeocoder, Coordinates, GeocodingProviderError
from civic_lookup.lib.lookup.errors import (
    DistrictLookupError,
    LookupFailure,
    LookupResult,
    PersistenceFailure,
    ValidationError,
)
from civic_lookup.lib.lookup.position import PositionProvider
from civic_lookup.lib.lookup.storage import USER_DISTRICTS_KEY, KeyValueStore
from civic_lookup.lib.lookup.store import DistrictStore


class DivisionSource(Protocol):
    async def get_divisions(self, address: str) -> dict[str, dict] | None: ...


class DistrictLookup:
    """Resolve addresses and positions to persisted DistrictRecords.

    Args:
        civic_client: Source of OCD divisions for an address.
        reverse_geocoder: Recovers a coarse address from coordinates.
        position_provider: Supplies the device position.
        local_store: Local key-value storage; always written on success.
        district_store: Per-user store; written only for authenticated callers.
    """

    def __init__(
        self,
        civic_client: DivisionSource,
        reverse_geocoder: BaseReverseGeocoder,
        position_provider: PositionProvider,
        local_store: KeyValueStore,
        district_store: DistrictStore | None = None,
    ) -> None:
        self._civic = civic_client
        self._geocoder = reverse_geocoder
        self._position = position_provider
        self._local_store = local_store
        self._district_store = district_store

    async def lookup_by_address(self, address: AddressInput, user_id: str | None = None) -> LookupResult:
        """Look up districts for a manually entered address.

        Street, city and state are required.
        """
        try:
            missing = address.missing_required
            if missing:
                raise ValidationError(missing)
            record, saved = await self._resolve(format_address(address), user_id)
        except DistrictLookupError as e:
            logger.info(f"Address lookup failed: {e.kind}")
            return LookupResult.failure(e)
        return LookupResult.success(record, saved_to_account=saved)

    async def lookup_by_geolocation(self, user_id: str | None = None) -> LookupResult:
        """Look up districts for the device's current position.

        A coarse address recovered by reverse geocoding is preferred; when
        none can be recovered the raw ``"lat,lng"`` is sent instead.
        """
        try:
            coordinates = await self._position.current_position()
            recovered = await self._recover_address(coordinates)
            query = format_address(recovered) if recovered is not None else ""
            if not query:
                logger.debug("No address recovered from position; querying by coordinates")
                query = coordinates.as_query()
            record, saved = await self._resolve(query, user_id)
        except DistrictLookupError as e:
            logger.info(f"Geolocation lookup failed: {e.kind}")
            return LookupResult.failure(e)
        return LookupResult.success(record, saved_to_account=saved)

    async def persist(self, record: DistrictRecord, user_id: str | None = None) -> bool:
        """Write ``record`` locally and, for an authenticated user, to their row.

        Store failures on either side are logged and swallowed; this never
        raises.

        Returns:
            True when the record was written to the user's row.
        """
        try:
            self._local_store.set(USER_DISTRICTS_KEY, record.to_dict())
        except Exception as e:
            logger.warning(f"{PersistenceFailure().kind}: could not write local districts: {e!r}")

        if user_id is None or self._district_store is None:
            return False

        try:
            existing = await self._district_store.get(user_id)
            if existing is None:
                await self._district_store.insert(user_id, record)
            else:
                await self._district_store.update(user_id, record)
        except Exception as e:
            failure = PersistenceFailure()
            logger.warning(f"{failure.kind}: could not store districts for user {user_id}: {e!r}")
            return False
        return True

    def cached_record(self) -> DistrictRecord | None:
        """Return the record last written to local storage, if any."""
        data = self._local_store.get(USER_DISTRICTS_KEY)
        if not isinstance(data, dict):
            return None
        record = DistrictRecord.from_dict(data)
        return None if record.is_empty() else record

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _recover_address(self, coordinates: Coordinates) -> AddressInput | None:
        try:
            return await self._geocoder.recover_address(coordinates)
        except GeocodingProviderError as e:
            logger.warning(f"Reverse geocoding via {e.provider_name} failed: {e.message}")
            return None

    async def _resolve(self, query: str, user_id: str | None) -> tuple[DistrictRecord, bool]:
        try:
            divisions = await self._civic.get_divisions(query)
        except CivicApiError as e:
            logger.warning(f"Division lookup failed: {e.message}")
            msg = "Unable to reach the civic information service. Please retry."
            raise LookupFailure(msg, transport_error=True) from e
        except Exception as e:
            logger.exception("Unexpected error during division lookup")
            raise LookupFailure(transport_error=True) from e

        if not divisions:
            raise LookupFailure

        # A country-only map names no district.
        record = extract_district_info(divisions)
        if not record.has_jurisdiction():
            raise LookupFailure

        logger.info(f"Resolved districts: {sorted(k for k, v in record.to_dict().items() if v)}")
        saved = await self.persist(record, user_id)
        return record, saved
