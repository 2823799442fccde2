"""Centralized configuration loading."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

_config_cache: Optional[dict] = None
_dotenv_loaded = False
_CONFIG_FILENAME = "configs/config.yaml"

ACCOUNT_KEY_ENV = "BING_SEARCH_ACCOUNT_KEY"
WEB_ONLY_ENV = "BING_SEARCH_WEB_ONLY"

DEFAULT_HOST = "api.datamarket.azure.com"
DEFAULT_TIMEOUT = 30.0


def _find_project_root() -> Path:
    """Walk up from this file to find the directory containing configs/."""
    current = Path(__file__).resolve().parent
    for _ in range(10):  # safety limit
        if (current / "configs").is_dir():
            return current
        current = current.parent
    # Fallback: assume CWD
    return Path.cwd()


def load_config(config_path: Optional[str] = None, *, use_cache: bool = True) -> dict:
    """Load and cache the YAML configuration.

    Args:
        config_path: Override path. If None, auto-discovers configs/config.yaml.
        use_cache: If True (default), returns cached result on subsequent calls.
    """
    global _config_cache
    if use_cache and _config_cache is not None and config_path is None:
        return _config_cache

    if config_path:
        path = Path(config_path)
    else:
        path = _find_project_root() / _CONFIG_FILENAME

    if not path.exists():
        logger.debug(f"Config file not found: {path}")
        result = {}
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                result = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {path}: {e}")
            result = {}

    if config_path is None:
        _config_cache = result
    return result


def clear_config_cache():
    """Clear the cached config (useful for testing)."""
    global _config_cache
    _config_cache = None


@dataclass
class SearchSettings:
    """Client settings merged from config.yaml and the environment."""
    account_key: Optional[str] = None
    web_only: bool = False
    host: str = DEFAULT_HOST
    timeout: float = DEFAULT_TIMEOUT


def load_env_file() -> None:
    """Load the nearest ``.env`` from the working directory upward, once."""
    global _dotenv_loaded
    if _dotenv_loaded:
        return
    _dotenv_loaded = True
    path = find_dotenv(usecwd=True)
    if path:
        logger.debug(f"Loading environment from {path}")
        load_dotenv(path)


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_search_settings(config_path: Optional[str] = None) -> SearchSettings:
    """Read the ``bing_search`` config section, overridden by environment variables.

    A ``.env`` file found from the working directory upward is loaded once
    per process, without replacing variables that are already set.
    """
    load_env_file()
    section = load_config(config_path).get("bing_search") or {}

    settings = SearchSettings(
        account_key=section.get("account_key"),
        web_only=bool(section.get("web_only", False)),
        host=section.get("host") or DEFAULT_HOST,
        timeout=float(section.get("timeout") or DEFAULT_TIMEOUT),
    )

    env_key = os.getenv(ACCOUNT_KEY_ENV)
    if env_key:
        settings.account_key = env_key
    env_web_only = os.getenv(WEB_ONLY_ENV)
    if env_web_only is not None:
        settings.web_only = _env_flag(env_web_only)
    return settings
