"""Load Link header settings from a YAML file."""
import os
import logging
from typing import Any, Dict, Optional

import yaml

from models.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = os.path.join(os.path.dirname(__file__), "settings.yaml")


def load_config(config_file: str) -> Dict[str, Any]:
    """
    Load raw configuration from a YAML file.

    Args:
        config_file: Path to the YAML configuration file

    Returns:
        Dictionary containing the configuration data, empty if the file is missing
    """
    if not os.path.exists(config_file):
        logger.debug(f"Settings file not found, using defaults: {config_file}")
        return {}

    with open(config_file, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a mapping: {config_file}")
    return data


def load_settings(config_file: Optional[str] = None, **overrides: Any) -> Settings:
    """
    Build Settings from a YAML file, with keyword overrides applied on top.

    Overrides set to None are ignored so CLI flags that were not given do not
    mask file values.

    Raises:
        ValueError: If a setting is unknown or has the wrong type
    """
    data = load_config(config_file or DEFAULT_SETTINGS_FILE)
    data.update({k: v for k, v in overrides.items() if v is not None})

    defaults = Settings()
    unknown = set(data) - set(defaults.__dataclass_fields__)
    if unknown:
        raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")

    header_limit = data.get("header_limit", defaults.header_limit)
    if not isinstance(header_limit, bool):
        raise ValueError(f"header_limit must be a boolean, got {header_limit!r}")

    max_header_size = data.get("max_header_size", defaults.max_header_size)
    if isinstance(max_header_size, bool) or not isinstance(max_header_size, int) or max_header_size <= 0:
        raise ValueError(f"max_header_size must be a positive integer, got {max_header_size!r}")

    prefixes = data.get("admin_path_prefixes", defaults.admin_path_prefixes)
    if prefixes is None:
        prefixes = []
    if not isinstance(prefixes, list) or not all(isinstance(p, str) for p in prefixes):
        raise ValueError(f"admin_path_prefixes must be a list of strings, got {prefixes!r}")

    match_credentials = data.get("match_credentials", defaults.match_credentials)
    if not isinstance(match_credentials, bool):
        raise ValueError(f"match_credentials must be a boolean, got {match_credentials!r}")

    settings = Settings(
        header_limit=header_limit,
        max_header_size=max_header_size,
        admin_path_prefixes=list(prefixes),
        match_credentials=match_credentials,
    )
    logger.debug(f"Loaded settings: {settings}")
    return settings
