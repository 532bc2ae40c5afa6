"""Analysis configuration loading and validation."""

from typing import TypeAlias
import logging
import tomllib
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path

import yaml

from orgaudit.errors import ConfigurationError
from orgaudit.utils.io import load_toml_config, load_yaml_config, read_properties_file
from orgaudit.utils.types import FilePath

logger = logging.getLogger(__name__)

ConfigDict: TypeAlias = dict[str, str | int | float | None]

DEFAULT_CONFIG_FILE = Path("application.properties")

# Property names used by legacy application.properties files.
DEPTH_KEY = "app.hierarchy.depth"
LOW_RATIO_KEY = "app.salary.ration.low"
HIGH_RATIO_KEY = "app.salary.ration.high"
REPORT_PATH_KEY = "app.report.path"

_KEY_ALIASES = {
    "hierarchy_depth_threshold": DEPTH_KEY,
    "low_salary_ratio": LOW_RATIO_KEY,
    "high_salary_ratio": HIGH_RATIO_KEY,
    "report_path": REPORT_PATH_KEY,
}


@dataclass(frozen=True)
class AnalysisConfig:
    hierarchy_depth_threshold: int
    low_salary_ratio: Decimal
    high_salary_ratio: Decimal
    report_path: Path | None = None


def _require(values: ConfigDict, key: str) -> str:
    raw = values.get(key)
    if raw is None or str(raw).strip() == "":
        raise ConfigurationError(f"Missing required configuration value: {key}")
    return str(raw).strip()


def _parse_threshold(values: ConfigDict) -> int:
    raw = _require(values, DEPTH_KEY)
    try:
        threshold = int(raw)
    except ValueError:
        raise ConfigurationError(f"{DEPTH_KEY} must be an integer, got {raw!r}") from None
    if threshold < 0:
        raise ConfigurationError(f"{DEPTH_KEY} must be non-negative, got {threshold}")
    return threshold


def _parse_ratio(values: ConfigDict, key: str) -> Decimal:
    raw = _require(values, key)
    try:
        ratio = Decimal(raw)
    except InvalidOperation:
        raise ConfigurationError(f"{key} must be numeric, got {raw!r}") from None
    if not ratio.is_finite() or ratio <= 0:
        raise ConfigurationError(f"{key} must be a positive number, got {raw!r}")
    return ratio


def _normalize_keys(values: dict) -> ConfigDict:
    """Accept both legacy dotted keys and snake_case keys."""
    normalized: ConfigDict = {}
    for key, value in values.items():
        normalized[_KEY_ALIASES.get(key, key)] = value
    return normalized


def config_from_mapping(values: dict) -> AnalysisConfig:
    """Build a validated AnalysisConfig from raw key/value pairs."""
    values = _normalize_keys(values)
    threshold = _parse_threshold(values)
    low = _parse_ratio(values, LOW_RATIO_KEY)
    high = _parse_ratio(values, HIGH_RATIO_KEY)
    if low > high:
        raise ConfigurationError(
            f"{LOW_RATIO_KEY} ({low}) must not exceed {HIGH_RATIO_KEY} ({high})"
        )

    report_path = values.get(REPORT_PATH_KEY)
    return AnalysisConfig(
        hierarchy_depth_threshold=threshold,
        low_salary_ratio=low,
        high_salary_ratio=high,
        report_path=Path(str(report_path)) if report_path else None,
    )


def _flatten_toml(data: dict) -> dict:
    """Pick the ``[tool.orgaudit]`` table when present, else the top level."""
    tool = data.get("tool")
    if isinstance(tool, dict) and "orgaudit" in tool:
        return tool["orgaudit"]
    return data


def _parse_config_file(path: Path) -> object:
    match path.suffix.lower():
        case ".properties":
            return read_properties_file(path)
        case ".toml":
            return _flatten_toml(load_toml_config(path))
        case ".yaml" | ".yml":
            return load_yaml_config(path)
        case ext:
            raise ConfigurationError(f"Unsupported configuration format: {ext or path.name}")


def load_raw_config(path: FilePath) -> dict:
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        raw = _parse_config_file(path)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Could not parse configuration file {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"Configuration file {path} must contain key/value pairs, got {type(raw).__name__}"
        )
    return raw


def load_analysis_config(path: FilePath = DEFAULT_CONFIG_FILE) -> AnalysisConfig:
    """Load and validate the analysis tunables from a config file."""
    raw = load_raw_config(path)
    config = config_from_mapping(raw)
    logger.info(
        "Loaded config from %s: depth threshold=%d, salary band=[%s, %s]",
        path,
        config.hierarchy_depth_threshold,
        config.low_salary_ratio,
        config.high_salary_ratio,
    )
    return config
