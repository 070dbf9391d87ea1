"""Augmented SLCSP report output."""

import csv
from dataclasses import dataclass
from itertools import chain
from pathlib import Path
from typing import Any, Iterable, Optional

from structlog.types import FilteringBoundLogger

from ..data.readers import read_rows
from ..errors import ResourceAccessError
from ..index.resolver import SlcspResolver
from ..logging.config import get_logger, log_phase_summary


@dataclass(frozen=True)
class ReportSummary:
    """Counts reported once the augmented report is written."""
    records: int
    ambiguous_zipcodes: int
    unmapped_areas: int
    insufficient_zipcodes: int

    def to_dict(self) -> dict[str, int]:
        return {
            "records": self.records,
            "ambiguous_zipcodes": self.ambiguous_zipcodes,
            "unmapped_areas": self.unmapped_areas,
            "insufficient_zipcodes": self.insufficient_zipcodes,
        }


class ReportEmitter:
    """Writes one (zipcode, rate) row per template row, in template order."""

    def __init__(self, resolver: SlcspResolver, logger: Optional[FilteringBoundLogger] = None) -> None:
        self.resolver = resolver
        self.logger = logger if logger is not None else get_logger(__name__)

    def emit(self, template_rows: Iterable[list[str]], writer: Any) -> ReportSummary:
        """
        Resolve every template row and write the augmented rows.

        The first template row is the header and is copied unchanged. Every
        other row is resolved on its own, so repeated zip codes produce
        repeated output rows.

        Args:
            template_rows: Template rows, header first
            writer: Object with a csv-style ``writerow`` method

        Returns:
            Summary of records written and anomalies tracked so far
        """
        rows = iter(template_rows)
        header = next(rows, None)
        if header is not None:
            writer.writerow(header)

        records = 0
        for row in rows:
            zipcode = row[0]
            writer.writerow([zipcode, self.resolver.resolve_formatted(zipcode)])
            records += 1

        index = self.resolver.index
        return ReportSummary(
            records=records,
            ambiguous_zipcodes=len(index.ambiguous_zipcodes),
            unmapped_areas=len(index.unmapped_areas),
            insufficient_zipcodes=len(self.resolver.insufficient_zipcodes),
        )

    def emit_file(self, template_path: Path, output_path: Path) -> ReportSummary:
        """
        Read the template resource and write the augmented report resource.

        Raises:
            ResourceAccessError: If the template cannot be read or the output
                cannot be created or written
        """
        # open the template before the output is created
        rows = read_rows(template_path)
        header = next(rows, None)
        template_rows = chain([header], rows) if header is not None else iter(())

        try:
            with open(output_path, "w", newline="") as f:
                writer = csv.writer(f, lineterminator="\n")
                summary = self.emit(template_rows, writer)
        except OSError as e:
            raise ResourceAccessError(
                f"Cannot write to file {output_path}: {e}",
                operation="write",
                target=str(output_path),
            ) from e

        log_phase_summary(self.logger, "report", str(output_path), summary.records)
        if summary.insufficient_zipcodes:
            self.logger.warning(
                "Zip codes had insufficient plan info, i.e. less than two plans",
                count=summary.insufficient_zipcodes,
            )

        return summary
