"""Utility modules for the Bing Search client."""

from bing_search.utils.config import (
    SearchSettings,
    clear_config_cache,
    get_search_settings,
    load_config,
)
from bing_search.utils.observability import new_request_id, get_request_id, timed
from bing_search.utils.text import camelcase, underscore

__all__ = [
    "SearchSettings",
    "clear_config_cache",
    "get_search_settings",
    "load_config",
    "new_request_id",
    "get_request_id",
    "timed",
    "camelcase",
    "underscore",
]
