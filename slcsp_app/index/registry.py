"""
Zip code to rate area registry.

The registry is populated from the zip mapping source and then sealed. Sealing
hands out a RateAreaIndex, the read-only view every later phase works on, so
plan ingestion cannot start while mappings are still being registered.
"""

from typing import AbstractSet, Iterable, Optional

from structlog.types import FilteringBoundLogger

from ..data.models import RateArea, RateAreaKey, ZipRecord
from ..errors import PhaseOrderError
from ..logging.config import get_trace_logger


class RateAreaIndex:
    """Sealed zip code -> rate area index with anomaly sets."""

    def __init__(
        self,
        areas: dict[RateAreaKey, RateArea],
        zip_mappings: dict[str, RateAreaKey],
        ambiguous_zipcodes: set[str],
    ) -> None:
        self._areas = areas
        self._zip_mappings = zip_mappings
        self._ambiguous_zipcodes = frozenset(ambiguous_zipcodes)
        self._unmapped_areas: set[RateAreaKey] = set()

    @property
    def zip_count(self) -> int:
        return len(self._zip_mappings)

    @property
    def area_count(self) -> int:
        return len(self._areas)

    @property
    def ambiguous_zipcodes(self) -> AbstractSet[str]:
        return self._ambiguous_zipcodes

    @property
    def unmapped_areas(self) -> AbstractSet[RateAreaKey]:
        return frozenset(self._unmapped_areas)

    def area(self, key: RateAreaKey) -> Optional[RateArea]:
        """Get the rate area for a key, None if no zip code mapped to it."""
        return self._areas.get(key)

    def mapped_key(self, zipcode: str) -> Optional[RateAreaKey]:
        """Get the first-seen rate area key of a zip code, ambiguous or not."""
        return self._zip_mappings.get(zipcode)

    def area_for_zip(self, zipcode: str) -> Optional[RateArea]:
        """Get the rate area a zip code maps to, None if unmapped."""
        key = self._zip_mappings.get(zipcode)
        return self._areas[key] if key is not None else None

    def is_ambiguous(self, zipcode: str) -> bool:
        return zipcode in self._ambiguous_zipcodes

    def flag_unmapped(self, key: RateAreaKey) -> None:
        """Record a plan rate area that no zip code maps to."""
        self._unmapped_areas.add(key)


class RateAreaRegistry:
    """
    Builds the zip code -> rate area mapping.

    The first mapping seen for a zip code wins. A later mapping of the same zip
    code to a different rate area marks the zip code ambiguous without
    replacing the original mapping.
    """

    def __init__(self, logger: Optional[FilteringBoundLogger] = None) -> None:
        self.logger = logger if logger is not None else get_trace_logger(__name__)
        self._areas: dict[RateAreaKey, RateArea] = {}
        self._zip_mappings: dict[str, RateAreaKey] = {}
        self._ambiguous_zipcodes: set[str] = set()
        self._index: Optional[RateAreaIndex] = None

    @property
    def sealed(self) -> bool:
        return self._index is not None

    def register(self, zipcode: str, state: str, number: str) -> RateArea:
        """
        Map a zip code to the rate area (state, number).

        Args:
            zipcode: Zip code
            state: Two-letter state abbreviation
            number: Rate area number within the state

        Returns:
            The rate area the arguments name, created on first reference

        Raises:
            PhaseOrderError: If the registry has already been sealed
        """
        if self.sealed:
            raise PhaseOrderError(
                f"Cannot register zip code {zipcode} after the registry was sealed",
                current_phase="sealed",
                attempted_operation="register",
            )

        key = RateAreaKey(state, number)
        area = self._areas.get(key)
        if area is None:
            area = RateArea(key)
            self._areas[key] = area

        mapped_key = self._zip_mappings.get(zipcode)
        if mapped_key is None:
            self._zip_mappings[zipcode] = key
        elif mapped_key != key:
            self._ambiguous_zipcodes.add(zipcode)
            self.logger.debug(
                "Ambiguous zip code",
                zipcode=zipcode,
                rejected_area=key.name,
                mapped_area=mapped_key.name,
            )

        return area

    def load(self, records: Iterable[ZipRecord]) -> int:
        """Register every record, returning the number of records consumed."""
        count = 0
        for record in records:
            self.register(record.zipcode, record.state, record.rate_area)
            count += 1
        return count

    def seal(self) -> RateAreaIndex:
        """End the mapping phase and return the read-only index."""
        if self._index is None:
            self._index = RateAreaIndex(
                self._areas, self._zip_mappings, self._ambiguous_zipcodes
            )
        return self._index
