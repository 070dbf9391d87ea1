"""Zip code -> SLCSP lookup and rate formatting."""

from decimal import Decimal
from typing import AbstractSet, Optional

from structlog.types import FilteringBoundLogger

from ..logging.config import get_trace_logger
from .registry import RateAreaIndex


def format_rate(rate: float) -> str:
    """
    Render a rate with the fewest digits that round-trip it.

    No exponent, no trailing zeros and no decimal point for whole amounts:
    150.0 -> "150", 150.5 -> "150.5", 150.25 -> "150.25".
    """
    text = format(Decimal(repr(rate)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class SlcspResolver:
    """Resolves zip codes against a sealed, plan-populated index."""

    def __init__(self, index: RateAreaIndex, logger: Optional[FilteringBoundLogger] = None) -> None:
        self.index = index
        self.logger = logger if logger is not None else get_trace_logger(__name__)
        self._insufficient_zipcodes: set[str] = set()

    @property
    def insufficient_zipcodes(self) -> AbstractSet[str]:
        return frozenset(self._insufficient_zipcodes)

    def resolve(self, zipcode: str) -> Optional[float]:
        """
        Get the SLCSP rate for a zip code.

        Returns:
            The second lowest silver rate of the zip code's area, or None if the
            zip code is ambiguous, unmapped, or its area has fewer than two
            silver plans
        """
        if self.index.is_ambiguous(zipcode):
            return None

        area = self.index.area_for_zip(zipcode)
        if area is None:
            return None

        if area.slcsp is None:
            self._insufficient_zipcodes.add(zipcode)
            self.logger.debug("Insufficient plans info", zipcode=zipcode, area=area.name)
            return None

        return area.slcsp

    def resolve_formatted(self, zipcode: str) -> str:
        """Get the formatted SLCSP rate for a zip code, empty when unresolved."""
        rate = self.resolve(zipcode)
        return format_rate(rate) if rate is not None else ""
