"""Single-line address formatting.

Builds the one-line address strings submitted to the Civic Information API,
either from user-entered components or, when the original address is not
retained, from the jurisdiction labels of a stored DistrictRecord.
"""

from civic_lookup.lib.districts.types import AddressInput, DistrictRecord


def format_address(address: AddressInput) -> str:
    """Join address components into ``"street, city, state zip"``.

    Blank components are omitted and no separator is emitted at either end,
    so ``AddressInput(state="CA")`` formats as ``"CA"``.

    Args:
        address: Partial address components.

    Returns:
        The formatted single-line address (possibly empty).
    """
    formatted = ", ".join(part for part in (address.street, address.city, address.state) if part)
    if address.zip:
        formatted = f"{formatted} {address.zip}" if formatted else address.zip
    return formatted


def address_from_districts(record: DistrictRecord) -> str | None:
    """Reconstruct a coarse address from district labels.

    Precedence: municipality and state, then county and state, then the state
    alone.  Returns None when the record has no state.
    """
    if record.state is None:
        return None
    if record.municipal:
        return f"{record.municipal}, {record.state}"
    if record.county:
        return f"{record.county}, {record.state}"
    return record.state
