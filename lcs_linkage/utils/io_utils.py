"""Settings loading for lcs_linkage."""

import copy
import functools
import logging
import os
from typing import Any, Optional

import yaml

from lcs_linkage.utils.logging_utils import get_logger
from lcs_linkage.utils.path_utils import get_config_path

logger = get_logger(__name__)

# Environment override for the minimum substring length
MIN_LENGTH_ENV = "LCS_MIN_LENGTH"

DEFAULTS: dict[str, Any] = {
    "similarity": {
        "lcs": {
            "min_length": 2,
            "min_score": 0.0,
        },
    },
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "file": None,
    },
}

# Settings loading counter for debugging
_settings_load_count = 0


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``update`` into ``base`` in place and return ``base``."""
    for key, value in update.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


@functools.lru_cache(maxsize=8)
def load_settings(path: Optional[str] = None) -> dict[str, Any]:
    """Load settings from YAML file with defaults.

    This function is cached to prevent repeated file I/O and parsing.
    Use reload_settings() to force a fresh load.

    Args:
        path: Path to settings YAML file; discovered via get_config_path when None

    Returns:
        Dictionary with settings (user config merged over defaults)

    """
    global _settings_load_count
    _settings_load_count += 1

    if path is None:
        path = str(get_config_path())

    logger.debug(f"Settings loaded (count: {_settings_load_count}) from {path}")

    settings = copy.deepcopy(DEFAULTS)
    try:
        with open(path, encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}
        if not isinstance(user_config, dict):
            logger.warning(f"Settings file {path} is not a mapping. Using defaults.")
            return settings
        return deep_merge(settings, user_config)

    except FileNotFoundError:
        logger.warning(f"Settings file not found: {path}. Using defaults.")
        return settings
    except yaml.YAMLError as e:
        logging.exception(f"Error loading settings: {e}. Using defaults.")
        return settings


def reload_settings(path: Optional[str] = None) -> dict[str, Any]:
    """Force reload settings from file (clears cache)."""
    load_settings.cache_clear()
    return load_settings(path)


def get_lcs_settings(settings: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """Return the ``similarity.lcs`` section with defaults filled in.

    Precedence order: env > config > default

    Args:
        settings: Settings dict to read. If None, uses load_settings().

    Returns:
        Dict with ``min_length`` and ``min_score``

    Raises:
        ValueError: If the environment override is not an integer

    """
    if settings is None:
        settings = load_settings()

    lcs_cfg = {
        **DEFAULTS["similarity"]["lcs"],
        **settings.get("similarity", {}).get("lcs", {}),
    }

    env_min_length = os.environ.get(MIN_LENGTH_ENV)
    if env_min_length is not None and env_min_length.strip() != "":
        try:
            lcs_cfg["min_length"] = int(env_min_length)
        except ValueError as e:
            raise ValueError(
                f"{MIN_LENGTH_ENV} must be an integer, got {env_min_length!r}",
            ) from e

    return lcs_cfg
