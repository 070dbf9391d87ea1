"""
Logging configuration and utilities for the SLCSP run.
"""
from .config import configure_logging, get_logger, get_trace_logger, log_phase_summary

__all__ = ["configure_logging", "get_logger", "get_trace_logger", "log_phase_summary"]
