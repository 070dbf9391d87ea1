"""Rate area index: zip mapping, silver plan aggregation and SLCSP lookup"""

from .aggregator import SilverPlanAggregator
from .registry import RateAreaIndex, RateAreaRegistry
from .resolver import SlcspResolver, format_rate

__all__ = [
    "RateAreaRegistry",
    "RateAreaIndex",
    "SilverPlanAggregator",
    "SlcspResolver",
    "format_rate",
]
