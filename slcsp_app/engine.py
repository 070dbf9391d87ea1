"""
Main SLCSP run coordinator.

Runs the three phases strictly in order:
Zip mapping → Plan ingestion → Report

Every fatal condition propagates as a SystemFailureError; tracked anomalies
are only counted and logged.
"""

from dataclasses import dataclass
from typing import Optional

from structlog.types import FilteringBoundLogger

from .config.loader import ConfigLoader, RunSettings
from .data.readers import iter_plan_records, iter_zip_records
from .index.aggregator import SilverPlanAggregator
from .index.registry import RateAreaIndex, RateAreaRegistry
from .index.resolver import SlcspResolver
from .logging.config import get_logger, log_phase_summary
from .report.emitter import ReportEmitter, ReportSummary


@dataclass(frozen=True)
class RunSummary:
    """Outcome of a complete run."""
    zip_records: int
    zip_codes: int
    rate_areas: int
    plan_records: int
    report: ReportSummary


class SlcspEngine:
    """Owns the registry, aggregator and resolver of a single run."""

    def __init__(
        self,
        settings: Optional[RunSettings] = None,
        logger: Optional[FilteringBoundLogger] = None,
    ) -> None:
        if settings is None:
            loader = ConfigLoader.create()
            settings = loader.build_settings(loader.merge_config())
        self.settings = settings
        self.logger = logger if logger is not None else get_logger(__name__)
        self.trace_logger = self.logger.bind(subsystem="trace")

    def build_index(self) -> tuple[RateAreaIndex, int]:
        """Load the zip mapping source and seal it into an index."""
        resources = self.settings.resources
        path = self.settings.resource_path(resources.zips_file)

        registry = RateAreaRegistry(logger=self.trace_logger)
        records = registry.load(iter_zip_records(path, resources.zips_header))
        index = registry.seal()

        log_phase_summary(
            self.logger, "zip_mapping", str(path), records,
            {"zip_codes": index.zip_count, "rate_areas": index.area_count},
        )
        if index.ambiguous_zipcodes:
            self.logger.warning(
                "Mapping source contained ambiguous zip codes",
                source=str(path),
                count=len(index.ambiguous_zipcodes),
            )
        return index, records

    def ingest_plans(self, index: RateAreaIndex) -> int:
        """Feed the plan source into a sealed index."""
        resources = self.settings.resources
        path = self.settings.resource_path(resources.plans_file)

        aggregator = SilverPlanAggregator(
            index, silver_level=self.settings.silver_level, logger=self.trace_logger
        )
        records = aggregator.load(iter_plan_records(path, resources.plans_header))

        log_phase_summary(self.logger, "plan_ingestion", str(path), records)
        if index.unmapped_areas:
            self.logger.warning(
                "Plan source contained unmapped areas",
                source=str(path),
                count=len(index.unmapped_areas),
            )
        return records

    def write_report(self, index: RateAreaIndex) -> ReportSummary:
        """Resolve the template zip codes and write the augmented report."""
        resources = self.settings.resources
        resolver = SlcspResolver(index, logger=self.trace_logger)
        emitter = ReportEmitter(resolver, logger=self.logger)
        return emitter.emit_file(
            self.settings.resource_path(resources.template_file),
            self.settings.resource_path(resources.output_file),
        )

    def run(self) -> RunSummary:
        """Run all phases and return the run summary."""
        index, zip_records = self.build_index()
        plan_records = self.ingest_plans(index)
        report = self.write_report(index)

        self.logger.info("SLCSP run completed", **report.to_dict())

        return RunSummary(
            zip_records=zip_records,
            zip_codes=index.zip_count,
            rate_areas=index.area_count,
            plan_records=plan_records,
            report=report,
        )
