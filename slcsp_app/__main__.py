"""
Command-line entry point: ``python -m slcsp_app`` or ``slcsp``.

Reads zips.csv, plans.csv and slcsp.csv from the data directory and writes
slcsp-modified.csv next to them. Exits non-zero on any fatal error.
"""

import sys
from pathlib import Path
from typing import Optional

import structlog
import yaml

from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .engine import SlcspEngine
from .errors import SystemFailureError
from .logging.config import configure_logging

logger = structlog.get_logger("slcsp_app")


def main(config_path: Optional[Path] = None) -> int:
    """Run the SLCSP report and return the process exit code."""
    loader = ConfigLoader.create(config_path)

    try:
        overrides = loader.load_overrides()
    except (OSError, yaml.YAMLError) as e:
        configure_logging()
        logger.error("Cannot load configuration", path=str(loader.config_path), error=str(e))
        return 1

    errors = ConfigValidator.validate_config(overrides)
    if errors:
        configure_logging()
        for error in errors:
            logger.error(
                "Invalid configuration",
                field=error.field,
                message=error.message,
                value=error.value,
            )
        return 1

    settings = loader.build_settings(loader.merge_config())
    configure_logging(
        level=settings.logging.level,
        format_json=settings.logging.format_json,
        include_timestamp=settings.logging.include_timestamp,
        include_caller=settings.logging.include_caller,
    )

    try:
        SlcspEngine(settings, logger=logger).run()
    except SystemFailureError as e:
        logger.error(
            "SLCSP run aborted",
            error=str(e),
            error_type=type(e).__name__,
            **e.details(),
        )
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
