"""
Centralized logging configuration for the SLCSP run.

This module configures structlog for all components. Components never create
loggers as process-wide state they own; they accept a logger (the diagnostics
sink) and fall back to ``get_logger(__name__)`` when none is injected.

Levels follow the original tool's channels:
    DEBUG   - trace: itemised anomalies (ambiguous zip codes, unmapped areas...)
    INFO    - phase summaries
    WARNING - anomaly counts
    ERROR   - fatal failures
"""
import logging
import sys
from typing import IO, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        stream: Diagnostic stream, defaults to stdout
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_trace_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for itemised anomaly diagnostics.

    Trace entries are emitted at debug level, so they only show up when
    tracing is switched on in the configuration.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger bound to the trace subsystem
    """
    return get_logger(name).bind(subsystem="trace")


def log_phase_summary(
    logger: FilteringBoundLogger,
    phase: str,
    source: str,
    records: int,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the completion of a run phase with standardized format.

    Args:
        logger: Structlog logger instance
        phase: Phase name (zip_mapping, plan_ingestion, report)
        source: Resource the phase read or wrote
        records: Number of records processed
        context: Additional counters for the phase
    """
    bound_logger = logger.bind(
        phase=phase,
        source=source,
        records=records,
    )

    if context:
        bound_logger = bound_logger.bind(**context)

    bound_logger.info("Phase completed")
