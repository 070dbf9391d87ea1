"""
Error classification for the SLCSP run.

Only fatal conditions are modelled as exceptions; they all derive from
SystemFailureError and terminate the run.
"""

from .system_failures import (
    SystemFailureError,
    ResourceAccessError,
    HeaderMismatchError,
    MalformedRecordError,
    RateParseError,
    PhaseOrderError,
)

__all__ = [
    "SystemFailureError",
    "ResourceAccessError",
    "HeaderMismatchError",
    "MalformedRecordError",
    "RateParseError",
    "PhaseOrderError",
]
