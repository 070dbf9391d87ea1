"""
Canonical data models for rate areas and input records.

Input records are immutable. RateArea is the only mutable structure; it is
updated by the plan aggregator and read by the resolver.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RateAreaKey:
    """Composite natural key of a rate area, e.g. ("NY", "1")."""
    state: str         # Two-letter postal abbreviation
    number: str        # Area number within the state

    @property
    def name(self) -> str:
        """Display name of the area in the form "<state> <number>"."""
        return f"{self.state} {self.number}"


@dataclass
class RateArea:
    """Rate area with its two lowest silver plan rates seen so far."""
    key: RateAreaKey
    lowest: Optional[float] = None          # None until a silver plan is observed
    second_lowest: Optional[float] = None

    @property
    def name(self) -> str:
        return self.key.name

    @property
    def slcsp(self) -> Optional[float]:
        """Second lowest cost silver plan rate, None if fewer than two plans."""
        return self.second_lowest


@dataclass(frozen=True)
class ZipRecord:
    """Row of the zip code to rate area mapping source."""
    zipcode: str
    state: str
    county_code: str
    name: str
    rate_area: str


@dataclass(frozen=True)
class PlanRecord:
    """Row of the plan source. The rate is kept raw until a silver plan needs it."""
    plan_id: str
    state: str
    metal_level: str
    rate: str
    rate_area: str
