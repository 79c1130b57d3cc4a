"""OCD division identifier parsing.

Turns the ``divisions`` mapping returned by the Civic Information API
(OCD identifier -> ``{"name": ...}``) into a flat :class:`DistrictRecord`.

Each identifier is tested against every rule in :data:`DIVISION_RULES`.
Patterns are anchored at the end of the identifier, so a state rule does not
fire for a county, place or district nested under that state, and a place
rule does not fire for a council district nested under the place.  When two
identifiers match the same rule, the one seen last wins.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from civic_lookup.lib.districts.types import DistrictRecord

_SEGMENT = r"([^/]+)"
_COUNTRY = r"^ocd-division/country:us"
_STATE = _COUNTRY + r"/state:[^/]+"


def humanize_identifier(identifier: str) -> str:
    """Make an OCD identifier segment readable (``san_juan`` -> ``San Juan``)."""
    words = re.split(r"[_~\-]+", identifier)
    return " ".join(w[:1].upper() + w[1:] for w in words if w)


@dataclass(frozen=True)
class DivisionRule:
    """Maps identifiers matching ``pattern`` to one DistrictRecord field."""

    field: str
    pattern: re.Pattern[str]
    fallback: Callable[[str], str]

    def label(self, ocd_id: str, descriptor: Any) -> str | None:
        """Return the display label for ``ocd_id`` or None when it does not match."""
        match = self.pattern.match(ocd_id)
        if match is None:
            return None
        name = descriptor.get("name") if isinstance(descriptor, Mapping) else None
        if isinstance(name, str) and name.strip():
            return name.strip()
        segment = match.group(1) if match.groups() else ""
        return self.fallback(segment)


DIVISION_RULES: tuple[DivisionRule, ...] = (
    DivisionRule("country", re.compile(_COUNTRY + r"$"), lambda _: "United States"),
    DivisionRule(
        "state",
        re.compile(_COUNTRY + r"/(?:state|district|territory):" + _SEGMENT + "$"),
        str.upper,
    ),
    DivisionRule(
        "county",
        re.compile(_STATE + r"/county:" + _SEGMENT + "$"),
        lambda s: f"{humanize_identifier(s)} County",
    ),
    DivisionRule("municipal", re.compile(_STATE + r"/place:" + _SEGMENT + "$"), humanize_identifier),
    DivisionRule(
        "congressional_district",
        re.compile(_STATE + r"/cd:" + _SEGMENT + "$"),
        lambda s: f"Congressional District {s}",
    ),
    DivisionRule(
        "state_district",
        re.compile(_STATE + r"/sldu:" + _SEGMENT + "$"),
        lambda s: f"State Senate District {s.upper()}",
    ),
    DivisionRule(
        "state_lower_district",
        re.compile(_STATE + r"/sldl:" + _SEGMENT + "$"),
        lambda s: f"State House District {s.upper()}",
    ),
    DivisionRule(
        "school_board",
        re.compile(_STATE + r"/school_district:" + _SEGMENT + "$"),
        lambda s: f"{humanize_identifier(s)} School District",
    ),
)


def extract_district_info(divisions: Mapping[str, Any]) -> DistrictRecord:
    """Extract district labels from an OCD division mapping.

    Args:
        divisions: OCD identifier -> division descriptor (a mapping with an
            optional ``name``).  Identifiers that match no rule are ignored.

    Returns:
        A DistrictRecord; fields with no matching identifier are None.
    """
    found: dict[str, str] = {}
    for ocd_id, descriptor in divisions.items():
        if not isinstance(ocd_id, str):
            continue
        key = ocd_id.strip().lower()
        for rule in DIVISION_RULES:
            label = rule.label(key, descriptor)
            if label is not None:
                found[rule.field] = label
    return DistrictRecord(**found)
