"""Configuration for commitect.

Settings are resolved from, in increasing priority:
1. The defaults below
2. ~/.commitect/config.yaml
3. COMMITECT_* environment variables (a .env file is honoured)
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from commitect.exceptions import GlobalConfigError

logger = logging.getLogger(__name__)


# ============================================================
# DEFAULT VALUES
# ============================================================

DEFAULT_API_ENDPOINT = "http://commitintentdetector.runasp.net/api/Commit/analyze"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_BACKOFF_BASE_SECONDS = 0.5
DEFAULT_CACHE_TTL_DAYS = 30

MILLIS_PER_DAY = 24 * 60 * 60 * 1000


# ============================================================
# ENVIRONMENT VARIABLES
# ============================================================

ENV_API_ENDPOINT = "COMMITECT_API_ENDPOINT"
ENV_TIMEOUT = "COMMITECT_TIMEOUT"
ENV_MAX_ATTEMPTS = "COMMITECT_MAX_ATTEMPTS"
ENV_CACHE_FILE = "COMMITECT_CACHE_FILE"


def _default_cache_file() -> Path:
    from commitect.cache.paths import get_cache_file

    return get_cache_file()


@dataclass
class Settings:
    """Resolved runtime settings."""

    api_endpoint: str = DEFAULT_API_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    backoff_base: float = DEFAULT_BACKOFF_BASE_SECONDS
    cache_ttl_days: int = DEFAULT_CACHE_TTL_DAYS
    cache_file: Path = field(default_factory=_default_cache_file)

    @property
    def cache_ttl_ms(self) -> int:
        return self.cache_ttl_days * MILLIS_PER_DAY


def load_settings_from_dict(config_dict: dict) -> Settings:
    """Build Settings from a configuration dictionary.

    Recognised layout::

        remote:
          endpoint: https://...
          timeout: 10
          max_attempts: 3
          backoff_base: 0.5
        cache:
          ttl_days: 30
          file: ~/.commitect/cache.json

    Args:
        config_dict: Dictionary loaded from config.yaml.

    Returns:
        Settings instance with missing keys filled from defaults.
    """
    remote_section = config_dict.get("remote") or {}
    cache_section = config_dict.get("cache") or {}

    settings = Settings(
        api_endpoint=remote_section.get("endpoint", DEFAULT_API_ENDPOINT),
        timeout=float(remote_section.get("timeout", DEFAULT_TIMEOUT_SECONDS)),
        max_attempts=int(remote_section.get("max_attempts", DEFAULT_MAX_ATTEMPTS)),
        backoff_base=float(remote_section.get("backoff_base", DEFAULT_BACKOFF_BASE_SECONDS)),
        cache_ttl_days=int(cache_section.get("ttl_days", DEFAULT_CACHE_TTL_DAYS)),
    )
    if cache_section.get("file"):
        settings.cache_file = Path(cache_section["file"]).expanduser()

    if settings.max_attempts < 1:
        settings.max_attempts = 1
    return settings


def _apply_env_overrides(settings: Settings) -> Settings:
    endpoint = os.getenv(ENV_API_ENDPOINT)
    if endpoint:
        settings.api_endpoint = endpoint

    timeout = _parse_env(ENV_TIMEOUT, float)
    if timeout is not None:
        settings.timeout = timeout

    max_attempts = _parse_env(ENV_MAX_ATTEMPTS, int)
    if max_attempts is not None and max_attempts >= 1:
        settings.max_attempts = max_attempts

    cache_file = os.getenv(ENV_CACHE_FILE)
    if cache_file:
        settings.cache_file = Path(cache_file).expanduser()
    return settings


def _parse_env(name: str, cast) -> Optional[Any]:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return cast(raw)
    except ValueError:
        logger.warning("Ignoring invalid value for %s: %r", name, raw)
        return None


def load_settings() -> Settings:
    """Load settings from the global config file and environment.

    This should be called by the CLI before building the pipeline. A broken
    config file is reported and the defaults are used instead.

    Returns:
        The resolved Settings.
    """
    # Load environment variables from .env file
    load_dotenv()

    from commitect import global_config

    try:
        config_dict = global_config.load_global_config()
    except GlobalConfigError as e:
        logger.warning("%s; using default settings", e)
        config_dict = {}

    try:
        settings = load_settings_from_dict(config_dict)
    except (TypeError, ValueError, AttributeError) as e:
        logger.warning("Invalid configuration values (%s); using default settings", e)
        settings = Settings()

    return _apply_env_overrides(settings)
