"""Augmented report output."""

from .emitter import ReportEmitter, ReportSummary

__all__ = ["ReportEmitter", "ReportSummary"]
