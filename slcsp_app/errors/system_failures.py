"""
System failure error classifications for unrecoverable errors.

Every exception here aborts the run. Tracked anomalies (ambiguous zip codes,
unmapped rate areas, insufficient plans) are never raised, they are counted.
"""

from typing import Optional, Dict, Any, Sequence


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False

    def details(self) -> Dict[str, Any]:
        """Context plus the error's own attributes that are set."""
        details = dict(self.context)
        for name, value in vars(self).items():
            if name not in ("context", "recoverable") and value is not None:
                details[name] = value
        return details


class ResourceAccessError(SystemFailureError):
    """A CSV resource could not be opened, created, read or written."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 target: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.target = target


class HeaderMismatchError(SystemFailureError):
    """Header row of an input resource does not match the expected labels."""

    def __init__(self, message: str, expected: Optional[Sequence[str]] = None,
                 actual: Optional[Sequence[str]] = None,
                 target: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.expected = list(expected) if expected is not None else None
        self.actual = list(actual) if actual is not None else None
        self.target = target


class MalformedRecordError(SystemFailureError):
    """Data row does not carry the number of columns its header declares."""

    def __init__(self, message: str, line_number: Optional[int] = None,
                 target: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.line_number = line_number
        self.target = target


class RateParseError(SystemFailureError):
    """Plan rate is not a finite, non-negative number."""

    def __init__(self, message: str, raw_rate: Optional[str] = None,
                 plan_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_rate = raw_rate
        self.plan_id = plan_id


class PhaseOrderError(SystemFailureError):
    """An operation was attempted out of the mapping -> plans -> report order."""

    def __init__(self, message: str, current_phase: Optional[str] = None,
                 attempted_operation: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.current_phase = current_phase
        self.attempted_operation = attempted_operation
