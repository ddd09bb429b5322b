"""
Centralized configuration with environment variable overrides.

Formatting constants and logging settings live here so the normalizer
and validator never hardcode them.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _safe_bool(env_var: str, default: str) -> bool:
    """Parse a boolean flag from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default).strip().lower()
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Invalid boolean for {env_var}: {raw!r}")


@dataclass(frozen=True)
class NormalizerConfig:
    """Phone and postal code formatting settings."""

    nanp_country_code: str = os.getenv("NANP_COUNTRY_CODE", "1")


@dataclass(frozen=True)
class ValidatorConfig:
    """Validator behaviour settings."""

    log_errors: bool = _safe_bool("VALIDATOR_LOG_ERRORS", "true")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    normalizer: NormalizerConfig = field(default_factory=NormalizerConfig)
    validator: ValidatorConfig = field(default_factory=ValidatorConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv(
        "LOG_FORMAT", "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
    )


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    code = config.normalizer.nanp_country_code
    if not code or not code.isdigit():
        raise ValueError(f"NANP_COUNTRY_CODE must be digits only, got {code!r}")
    if config.log_level.upper() not in LOG_LEVELS:
        raise ValueError(
            f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {config.log_level!r}"
        )


def load_config() -> AppConfig:
    """Load and validate configuration. Leaves the host's logging setup alone."""
    config = AppConfig()
    _validate_config(config)
    logger.debug(
        "Configuration loaded (country code %s)", config.normalizer.nanp_country_code
    )
    return config


def configure_logging(config: Optional[AppConfig] = None) -> None:
    """Apply LOG_LEVEL and LOG_FORMAT to root logging.

    For scripts and tests that use normval standalone; applications that
    configure logging themselves should not call this.
    """
    config = config or settings
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=config.log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# Singleton instance
settings = load_config()
