"""District library: OCD identifier parsing and address formatting.

Public API:
    - AddressInput: Partial postal address
    - DistrictRecord: Normalized jurisdiction labels
    - extract_district_info: OCD division mapping -> DistrictRecord
    - DIVISION_RULES: Ordered identifier rule table
    - format_address: Address components -> single-line string
    - address_from_districts: DistrictRecord -> coarse address string
"""

from civic_lookup.lib.districts.address import address_from_districts, format_address
from civic_lookup.lib.districts.parser import DIVISION_RULES, DivisionRule, extract_district_info, humanize_identifier
from civic_lookup.lib.districts.types import AddressInput, DistrictRecord

__all__ = [
    "DIVISION_RULES",
    "AddressInput",
    "DistrictRecord",
    "DivisionRule",
    "address_from_districts",
    "extract_district_info",
    "format_address",
    "humanize_identifier",
]
