"""
CSV record readers for the zip, plan and template resources.

Readers are lazy: the header row is validated when iteration starts, and any
I/O failure surfaces as ResourceAccessError at the point it happens.
"""

import csv
import math
from pathlib import Path
from typing import Iterator, Sequence

from ..errors import (
    HeaderMismatchError,
    MalformedRecordError,
    RateParseError,
    ResourceAccessError,
)
from .models import PlanRecord, ZipRecord


def read_rows(path: Path) -> Iterator[list[str]]:
    """
    Yield the non-blank rows of a CSV resource, header included.

    Raises:
        ResourceAccessError: If the resource cannot be opened or read
    """
    try:
        with open(path, newline="") as f:
            for row in csv.reader(f):
                if row:
                    yield row
    except OSError as e:
        raise ResourceAccessError(
            f"Cannot read {path}: {e}",
            operation="read",
            target=str(path),
        ) from e
    except csv.Error as e:
        raise ResourceAccessError(
            f"Cannot parse {path}: {e}",
            operation="parse",
            target=str(path),
        ) from e


def validate_header(row: Sequence[str], expected: Sequence[str], target: str) -> None:
    """
    Check that a header row matches the expected labels exactly.

    Raises:
        HeaderMismatchError: If labels differ in content, order or count
    """
    if list(row) != list(expected):
        raise HeaderMismatchError(
            f"Invalid labels in {target}, expected: {list(expected)}, actual: {list(row)}",
            expected=expected,
            actual=row,
            target=target,
        )


def _validated_rows(path: Path, expected: Sequence[str]) -> Iterator[list[str]]:
    rows = read_rows(path)
    header = next(rows, [])
    validate_header(header, expected, str(path))

    # line 1 is the header
    for line_number, row in enumerate(rows, start=2):
        if len(row) != len(expected):
            raise MalformedRecordError(
                f"Row {line_number} of {path} has {len(row)} columns, expected {len(expected)}",
                line_number=line_number,
                target=str(path),
            )
        yield row


def iter_zip_records(path: Path, expected_header: Sequence[str]) -> Iterator[ZipRecord]:
    """Yield zip code mapping records after validating the header."""
    for row in _validated_rows(path, expected_header):
        yield ZipRecord(*row)


def iter_plan_records(path: Path, expected_header: Sequence[str]) -> Iterator[PlanRecord]:
    """Yield plan records after validating the header."""
    for row in _validated_rows(path, expected_header):
        yield PlanRecord(*row)


def parse_rate(raw_rate: str, plan_id: str = "") -> float:
    """
    Parse a plan rate as a non-negative monetary value.

    Args:
        raw_rate: Rate as it appears in the plan source
        plan_id: Plan identifier used in the error message

    Returns:
        Parsed rate

    Raises:
        RateParseError: If the value is not a finite, non-negative number
    """
    try:
        rate = float(raw_rate)
    except ValueError as e:
        raise RateParseError(
            f"Could not parse rate {raw_rate!r} for plan {plan_id}",
            raw_rate=raw_rate,
            plan_id=plan_id,
        ) from e

    if not math.isfinite(rate) or rate < 0:
        raise RateParseError(
            f"Rate {raw_rate!r} for plan {plan_id} is not a non-negative amount",
            raw_rate=raw_rate,
            plan_id=plan_id,
        )

    # normalises -0.0
    return abs(rate)
