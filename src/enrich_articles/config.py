"""YAML configuration loader for enrich_articles."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from common.config import find_config_path, load_yaml

# Config directory relative to this file
CONFIG_DIR = Path(__file__).parent / "configs"

CONFIG_ENV_VAR = "ENRICH_ARTICLES_CONFIG"


@dataclass
class OutputConfig:
    indent: int | None = None  # None writes compact JSON
    sort_keys: bool = False

    def __post_init__(self) -> None:
        if self.indent is not None and (not isinstance(self.indent, int) or self.indent < 0):
            raise ValueError(f"Invalid output indent: {self.indent}. Must be a non-negative integer")


@dataclass
class EnrichConfig:
    log_level: str = "INFO"
    output: OutputConfig = field(default_factory=OutputConfig)

    def __post_init__(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Invalid log_level: {self.log_level}")


def load_config(config_name: str | None = None) -> EnrichConfig:
    """Load configuration from YAML file.

    Args:
        config_name: Name of config file (without .yaml extension) or a path
                    to one. If None, uses ENRICH_ARTICLES_CONFIG env var or
                    "default".

    Returns:
        Loaded EnrichConfig object
    """
    config_path = find_config_path(
        config_name, CONFIG_DIR, default_name="default", env_var=CONFIG_ENV_VAR
    )
    return _parse_config(load_yaml(config_path))


def _parse_config(data: dict) -> EnrichConfig:
    """Parse config dictionary into EnrichConfig object."""
    output_data = data.get("output") or {}

    output = OutputConfig(
        indent=output_data.get("indent"),
        sort_keys=output_data.get("sort_keys", False),
    )

    return EnrichConfig(
        log_level=data.get("log_level", "INFO"),
        output=output,
    )
