"""
Configuration loader.

Loads configuration from:
1. Default values (built-in)
2. TOML config file (pricedash.toml or ~/.config/pricedash/config.toml)
3. Environment variables

Priority: env vars > config file > defaults
"""

import logging
import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .schema import PricedashConfig

logger = logging.getLogger(__name__)

# Config file search paths (in priority order)
CONFIG_PATHS = [
    Path("pricedash.toml"),                              # Current directory
    Path(".pricedash.toml"),                             # Hidden in current directory
    Path.home() / ".config" / "pricedash" / "config.toml",  # User config
]

# Environment variable prefix
ENV_PREFIX = "PRICEDASH_"

# Env var suffix -> (section, subsection, field)
ENV_PARAM_OVERRIDES = {
    "SMA_PERIOD": ("params", "moving_average", "sma_period"),
    "EMA_PERIOD": ("params", "moving_average", "ema_period"),
    "BOLLINGER_PERIOD": ("params", "bollinger", "period"),
    "BOLLINGER_DEVIATION": ("params", "bollinger", "deviation"),
    "RSI_PERIOD": ("params", "rsi", "period"),
    "RSI_ZERO_LOSS": ("params", "rsi", "zero_loss"),
    "MACD_FAST": ("params", "macd", "fast"),
    "MACD_SLOW": ("params", "macd", "slow"),
    "MACD_SIGNAL": ("params", "macd", "signal"),
    "SUPPORT_RESISTANCE_PERIOD": ("params", "support_resistance", "period"),
}


class ConfigError(Exception):
    """Configuration error with helpful message."""

    def __init__(self, message: str, source: str | None = None, field: str | None = None):
        self.source = source
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.source:
            parts.append(f"Source: {self.source}")
        if self.field:
            parts.append(f"Field: {self.field}")
        return " | ".join(parts)


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load TOML file if it exists."""
    if not path.exists():
        return {}

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        logger.info(f"Loaded config from: {path}")
        return data
    except (tomllib.TOMLDecodeError, OSError) as e:
        raise ConfigError(f"Failed to parse TOML: {e}", source=str(path)) from e


def _find_config_file() -> Path | None:
    """Find the first existing config file."""
    for path in CONFIG_PATHS:
        if path.exists():
            return path
    return None


def _load_env_overrides() -> dict[str, Any]:
    """Collect overrides from PRICEDASH_* environment variables."""
    overrides: dict[str, Any] = {}

    if indicators_env := os.environ.get(f"{ENV_PREFIX}INDICATORS"):
        overrides["indicators"] = [name.strip() for name in indicators_env.split(",")]

    for suffix, (section, subsection, field) in ENV_PARAM_OVERRIDES.items():
        value = os.environ.get(f"{ENV_PREFIX}{suffix}")
        if value is None:
            continue
        # pydantic coerces the string to the field type
        overrides.setdefault(section, {}).setdefault(subsection, {})[field] = value

    return overrides


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(config_path: Path | str | None = None) -> PricedashConfig:
    """
    Load and validate configuration.

    Args:
        config_path: Explicit path to config file (optional)

    Returns:
        Validated PricedashConfig

    Raises:
        ConfigError: If configuration is invalid
    """
    config_data: dict[str, Any] = {}

    # Load from config file
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}", source=str(path))
        config_data = _load_toml_file(path)
    else:
        found_path = _find_config_file()
        if found_path:
            config_data = _load_toml_file(found_path)

    env_overrides = _load_env_overrides()
    if env_overrides:
        config_data = _deep_merge(config_data, env_overrides)
        logger.debug(f"Applied {len(env_overrides)} override section(s) from environment")

    # Validate and create config
    try:
        config = PricedashConfig(**config_data)
    except ValidationError as e:
        errors = e.errors()
        if errors:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get("loc", []))
            msg = first_error.get("msg", "Validation error")
            raise ConfigError(f"Invalid configuration: {msg}", field=field) from e
        raise ConfigError(f"Invalid configuration: {e}") from e

    return config


@lru_cache
def get_config() -> PricedashConfig:
    """
    Get singleton configuration instance.

    Uses LRU cache to ensure config is loaded only once.
    """
    return load_config()


def reload_config(config_path: Path | str | None = None) -> PricedashConfig:
    """
    Force reload configuration.

    Clears the cache. An explicit path is loaded directly and not cached.
    """
    get_config.cache_clear()
    if config_path:
        return load_config(config_path)
    return get_config()
