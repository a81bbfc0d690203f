"""User-level configuration files for commitect.

Everything commitect persists lives under ~/.commitect/:
- config.yaml: Optional remote endpoint, retry and cache settings
- cache.json: Classification cache (managed by commitect.cache)

commitect never writes config.yaml; users create it by hand.
"""

from pathlib import Path
from typing import Any, Dict

import yaml

from commitect.exceptions import GlobalConfigError

_CONFIG_DIR = Path.home() / ".commitect"
CONFIG_FILE_NAME = "config.yaml"


def get_global_config_dir() -> Path:
    """Return the ~/.commitect directory (it may not exist yet)."""
    return _CONFIG_DIR


def get_config_file_path() -> Path:
    return get_global_config_dir() / CONFIG_FILE_NAME


def load_global_config() -> Dict[str, Any]:
    """Read ~/.commitect/config.yaml.

    Returns:
        The parsed mapping, or an empty dict when the file is absent or empty.

    Raises:
        GlobalConfigError: If the file cannot be read, is not valid YAML,
            or does not hold a mapping at the top level.
    """
    path = get_config_file_path()
    if not path.is_file():
        return {}

    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Cannot read {path}: {e}")

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise GlobalConfigError(f"{path} must contain a mapping, got {type(loaded).__name__}")
    return loaded
