"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from .defaults import LoggingParams

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OVERRIDABLE_SECTIONS = ("data_dir", "logging")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration overrides."""

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        for key in params:
            if key not in LoggingParams.__dataclass_fields__:
                errors.append(ValidationError(
                    field=key,
                    message="Unknown logging parameter",
                    value=params[key]
                ))

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(VALID_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp", "include_caller", "trace"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=flag,
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_config(config: Any) -> list[ValidationError]:
        """Validate a configuration override mapping."""
        if not isinstance(config, dict):
            return [ValidationError(
                field="<root>",
                message="Configuration must be a mapping",
                value=config
            )]

        errors = []

        for key in config:
            if key not in OVERRIDABLE_SECTIONS:
                errors.append(ValidationError(
                    field=key,
                    message="Unknown or fixed configuration section",
                    value=config[key]
                ))

        if "data_dir" in config and not isinstance(config["data_dir"], str):
            errors.append(ValidationError(
                field="data_dir",
                message="Must be a directory path",
                value=config["data_dir"]
            ))

        if "logging" in config:
            if isinstance(config["logging"], dict):
                errors.extend(ConfigValidator.validate_logging_params(config["logging"]))
            else:
                errors.append(ValidationError(
                    field="logging",
                    message="Must be a mapping",
                    value=config["logging"]
                ))

        return errors
