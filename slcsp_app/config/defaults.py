"""Default configuration parameters for the SLCSP run."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResourceNames:
    """Fixed resource names and the header rows they must carry."""
    zips_file: str = "zips.csv"
    plans_file: str = "plans.csv"
    template_file: str = "slcsp.csv"
    output_file: str = "slcsp-modified.csv"

    zips_header: tuple[str, ...] = ("zipcode", "state", "county_code", "name", "rate_area")
    plans_header: tuple[str, ...] = ("plan_id", "state", "metal_level", "rate", "rate_area")


@dataclass(frozen=True)
class PlanParams:
    """Plan filtering parameters."""
    silver_level: str = "Silver"        # Exact, case-sensitive metal level


@dataclass(frozen=True)
class LoggingParams:
    """Diagnostics output parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True
    include_caller: bool = False        # File name and line number of the call site
    trace: bool = False                 # Itemise anomalies at debug level


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    data_dir: str
    resources: ResourceNames
    plans: PlanParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        data_dir=".",
        resources=ResourceNames(),
        plans=PlanParams(),
        logging=LoggingParams(),
    )
