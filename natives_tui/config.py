"""Configuration loading for natives-tui.

Settings are layered: dataclass defaults, then the TOML config file, then
environment variables.
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "natives-tui" / "config.toml"


@dataclass
class SourceConfig:
    """Where the natives snapshot comes from."""

    url: str = "https://natives.altv.mp/natives"
    docs_url: str = "https://natives.altv.mp"
    timeout: float = 30.0


@dataclass
class SearchConfig:
    """Query engine settings."""

    max_results: int = 200


@dataclass
class LoaderConfig:
    """Initialization retry policy."""

    max_retries: int = 5
    retry_delay: float = 2.0


@dataclass
class Config:
    """Top-level configuration."""

    source: SourceConfig = field(default_factory=SourceConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    loader: LoaderConfig = field(default_factory=LoaderConfig)


# Environment variable -> (section, key, type)
ENV_OVERRIDES = {
    "NATIVES_SOURCE_URL": ("source", "url", str),
    "NATIVES_DOCS_URL": ("source", "docs_url", str),
    "NATIVES_TIMEOUT": ("source", "timeout", float),
    "NATIVES_MAX_RESULTS": ("search", "max_results", int),
}


def _coerce(section: str, key: str, value: Any, expected: type) -> Any:
    """Convert a raw config value to the field's type."""
    if expected is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    if expected is not str and isinstance(value, str):
        try:
            return expected(value)
        except ValueError as e:
            raise ValueError(f"Invalid value for {section}.{key}: {value!r}") from e
    if not isinstance(value, expected) or isinstance(value, bool):
        raise ValueError(f"Invalid value for {section}.{key}: {value!r}")
    return value


def _apply_section(target: Any, section: str, values: dict) -> None:
    """Overlay a TOML table onto a config dataclass."""
    for key, value in values.items():
        if not hasattr(target, key):
            raise ValueError(f"Unknown config key: {section}.{key}")
        expected = type(getattr(target, key))
        setattr(target, key, _coerce(section, key, value, expected))


def load_config(path: Optional[Path] = None) -> Config:
    """Load configuration from file and environment.

    Args:
        path: TOML file to read. Defaults to DEFAULT_CONFIG_PATH. A missing
            file is not an error.

    Returns:
        Resolved Config.

    Raises:
        ValueError: If a file or environment value is invalid.
    """
    config = Config()
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH

    if config_path.exists():
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        for section, values in data.items():
            target = getattr(config, section, None)
            if target is None or not isinstance(values, dict):
                raise ValueError(f"Unknown config section: {section}")
            _apply_section(target, section, values)

    for env_name, (section, key, expected) in ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if raw:
            setattr(getattr(config, section), key, _coerce(section, key, raw, expected))

    if config.search.max_results < 1:
        raise ValueError("search.max_results must be at least 1")
    if config.loader.max_retries < 0:
        raise ValueError("loader.max_retries must not be negative")

    return config
