"""Running top-2 silver plan rates per rate area."""

from typing import Iterable, Optional

from structlog.types import FilteringBoundLogger

from ..config.defaults import PlanParams
from ..data.models import PlanRecord, RateAreaKey
from ..data.readers import parse_rate
from ..errors import PhaseOrderError
from ..logging.config import get_trace_logger
from .registry import RateAreaIndex


class SilverPlanAggregator:
    """Feeds plan records into the rate areas of a sealed index."""

    def __init__(
        self,
        index: RateAreaIndex,
        silver_level: str = PlanParams.silver_level,
        logger: Optional[FilteringBoundLogger] = None,
    ) -> None:
        if not isinstance(index, RateAreaIndex):
            raise PhaseOrderError(
                "Plan ingestion requires a sealed rate area index",
                current_phase="mapping",
                attempted_operation="observe",
            )
        self.index = index
        self.silver_level = silver_level
        self.logger = logger if logger is not None else get_trace_logger(__name__)

    def observe(
        self,
        state: str,
        number: str,
        plan_id: str,
        metal_level: str,
        rate: str,
    ) -> bool:
        """
        Offer a plan to the top two silver plans of its rate area.

        Args:
            state: Two-letter state abbreviation
            number: Rate area number within the state
            plan_id: Plan identifier
            metal_level: Metal level, only the exact silver level counts
            rate: Raw rate value

        Returns:
            True if the plan made the area's top two, False otherwise

        Raises:
            RateParseError: If a silver plan's rate is not a valid amount
        """
        if metal_level != self.silver_level:
            return False

        new_rate = parse_rate(rate, plan_id)

        key = RateAreaKey(state, number)
        area = self.index.area(key)
        if area is None:
            self.index.flag_unmapped(key)
            self.logger.debug("Plan applies to unmapped rate area", plan_id=plan_id, area=key.name)
            return False

        # strict comparisons: on ties the earlier plan keeps its slot
        if area.lowest is None or new_rate < area.lowest:
            area.second_lowest = area.lowest
            area.lowest = new_rate
        elif area.second_lowest is None or new_rate < area.second_lowest:
            area.second_lowest = new_rate
        else:
            return False

        self.logger.debug(
            "Plan made the top two silver plans",
            plan_id=plan_id,
            area=area.name,
            rate=new_rate,
            lowest=area.lowest,
            second_lowest=area.second_lowest,
        )
        return True

    def load(self, records: Iterable[PlanRecord]) -> int:
        """Observe every record, returning the number of records consumed."""
        count = 0
        for record in records:
            self.observe(
                record.state,
                record.rate_area,
                record.plan_id,
                record.metal_level,
                record.rate,
            )
            count += 1
        return count
