"""US region buckets for geographic eligibility."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

REGIONS: Mapping[str, frozenset[str]] = MappingProxyType({
    "northeast": frozenset({"ME", "NH", "VT", "MA", "RI", "CT", "NY", "NJ", "PA"}),
    "southeast": frozenset({
        "DE", "MD", "DC", "VA", "WV", "KY", "TN", "NC", "SC", "GA", "FL", "AL", "MS",
    }),
    "midwest": frozenset({"OH", "MI", "IN", "WI", "IL", "MN", "IA", "MO", "ND", "SD", "NE", "KS"}),
    "southwest": frozenset({"TX", "OK", "NM", "AZ"}),
    "west": frozenset({"MT", "WY", "CO", "UT", "NV", "ID", "WA", "OR", "CA", "AK", "HI"}),
})


def region_for_state(state: Optional[str]) -> Optional[str]:
    """Return the region bucket containing a state code, if any."""
    code = (state or "").strip().upper()
    for region, states in REGIONS.items():
        if code in states:
            return region
    return None


def region_includes(region: str, state: Optional[str]) -> bool:
    """True when the region token names a bucket that contains the state."""
    states = REGIONS.get(region.strip().lower())
    if not states or not state:
        return False
    return state.strip().upper() in states
