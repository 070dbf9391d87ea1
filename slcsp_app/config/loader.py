"""Configuration loader: defaults, optional YAML file, explicit overrides."""

from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import DefaultConfig, LoggingParams, ResourceNames, get_default_config

DEFAULT_CONFIG_FILE = "slcsp.yaml"


@dataclass(frozen=True)
class RunSettings:
    """Resolved settings for a single run."""
    data_dir: Path
    resources: ResourceNames
    silver_level: str
    logging: LoggingParams

    def resource_path(self, name: str) -> Path:
        """Resolve a fixed resource name against the data directory."""
        return self.data_dir / name


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_path: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_path is None:
            config_path = Path.cwd() / DEFAULT_CONFIG_FILE

        return cls(
            config_path=Path(config_path),
            defaults=get_default_config(),
        )

    def load_overrides(self) -> Any:
        """Load the optional YAML configuration file."""
        if not self.config_path.exists():
            return {}

        with open(self.config_path) as f:
            overrides = yaml.safe_load(f)

        return overrides if overrides is not None else {}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. YAML configuration file
        3. Defaults (lowest priority)
        """
        config = asdict(self.defaults)

        file_config = self.load_overrides()
        if isinstance(file_config, dict):
            config = merge_sections(config, file_config)

        if overrides:
            config = merge_sections(config, overrides)

        return config

    def build_settings(self, config: dict[str, Any]) -> RunSettings:
        """Turn a merged configuration mapping into run settings."""
        logging_params = LoggingParams(**config["logging"])
        if logging_params.trace:
            logging_params = replace(logging_params, level="DEBUG")

        return RunSettings(
            data_dir=Path(config["data_dir"]),
            resources=self.defaults.resources,
            silver_level=self.defaults.plans.silver_level,
            logging=logging_params,
        )


def merge_sections(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return base updated with override; nested sections merge key by key."""
    merged = dict(base)
    for key, value in override.items():
        section = merged.get(key)
        if isinstance(section, dict) and isinstance(value, dict):
            value = merge_sections(section, value)
        merged[key] = value
    return merged
