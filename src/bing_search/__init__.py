"""Bing Search API client.

Set a default Account Key once and search with the module-level helpers, or
build a ``Client`` per key:

    import bing_search

    bing_search.configure(account_key="...")
    results = bing_search.web("cat", limit=5)

Heavier modules (the HTTP transport and everything behind it) are loaded
lazily via ``__getattr__`` so that importing the enums or models alone stays
cheap.
"""

from importlib import import_module
from typing import Any, Optional

# Wraps query terms in descriptions when highlighting is requested
HIGHLIGHT_DELIMITER = "\ue001"

# Process-wide defaults used by Client() when no explicit value is passed
account_key: Optional[str] = None
web_only: Optional[bool] = None

__all__ = [
    "HIGHLIGHT_DELIMITER",
    "configure",
    "web",
    "image",
    "video",
    "news",
    "related_search",
    "related",
    "spelling_suggestions",
    "spelling",
    "composite",
    "Client",
    "HttpxTransport",
    "Adult",
    "FileType",
    "ImageFilter",
    "NewsCategory",
    "NewsSort",
    "Source",
    "VideoFilter",
    "VideoSort",
    "BingSearchError",
    "InvalidEnumValue",
    "MalformedResponse",
    "ServiceError",
    "TransportError",
    "UnknownAttribute",
    "UnknownModelType",
    "UnsupportedCoercion",
    "Image",
    "WebResult",
    "ImageResult",
    "VideoResult",
    "NewsResult",
    "RelatedSearchResult",
    "SpellingSuggestionsResult",
    "CompositeSearchResult",
]

_EXPORT_MAP = {
    "Client": ("bing_search.client", "Client"),
    "HttpxTransport": ("bing_search.transport", "HttpxTransport"),
    "Adult": ("bing_search.enums", "Adult"),
    "FileType": ("bing_search.enums", "FileType"),
    "ImageFilter": ("bing_search.enums", "ImageFilter"),
    "NewsCategory": ("bing_search.enums", "NewsCategory"),
    "NewsSort": ("bing_search.enums", "NewsSort"),
    "Source": ("bing_search.enums", "Source"),
    "VideoFilter": ("bing_search.enums", "VideoFilter"),
    "VideoSort": ("bing_search.enums", "VideoSort"),
    "BingSearchError": ("bing_search.errors", "BingSearchError"),
    "InvalidEnumValue": ("bing_search.errors", "InvalidEnumValue"),
    "MalformedResponse": ("bing_search.errors", "MalformedResponse"),
    "ServiceError": ("bing_search.errors", "ServiceError"),
    "TransportError": ("bing_search.errors", "TransportError"),
    "UnknownAttribute": ("bing_search.errors", "UnknownAttribute"),
    "UnknownModelType": ("bing_search.errors", "UnknownModelType"),
    "UnsupportedCoercion": ("bing_search.errors", "UnsupportedCoercion"),
    "Image": ("bing_search.models", "Image"),
    "WebResult": ("bing_search.models", "WebResult"),
    "ImageResult": ("bing_search.models", "ImageResult"),
    "VideoResult": ("bing_search.models", "VideoResult"),
    "NewsResult": ("bing_search.models", "NewsResult"),
    "RelatedSearchResult": ("bing_search.models", "RelatedSearchResult"),
    "SpellingSuggestionsResult": ("bing_search.models", "SpellingSuggestionsResult"),
    "CompositeSearchResult": ("bing_search.models", "CompositeSearchResult"),
}


def __getattr__(name: str) -> Any:
    """Lazy-load exported package symbols on first access."""
    if name not in _EXPORT_MAP:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attr_name = _EXPORT_MAP[name]
    module = import_module(module_name)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def configure(account_key: Optional[str] = None, web_only: Optional[bool] = None):
    """Set the process-wide defaults picked up by ``Client()``."""
    module = globals()
    if account_key is not None:
        module["account_key"] = account_key
    if web_only is not None:
        module["web_only"] = web_only


def _client():
    from bing_search.client import Client

    return Client()


def web(query: str, **options: Any):
    """Search for web pages with a default client. See ``Client.web``."""
    return _client().web(query, **options)


def image(query: str, **options: Any):
    """Search for images with a default client. See ``Client.image``."""
    return _client().image(query, **options)


def video(query: str, **options: Any):
    """Search for videos with a default client. See ``Client.video``."""
    return _client().video(query, **options)


def news(query: str, **options: Any):
    """Search for news with a default client. See ``Client.news``."""
    return _client().news(query, **options)


def related_search(query: str, **options: Any):
    """Search for related queries with a default client."""
    return _client().related_search(query, **options)


related = related_search


def spelling_suggestions(query: str, **options: Any):
    """Correct spelling in the query text with a default client."""
    return _client().spelling_suggestions(query, **options)


spelling = spelling_suggestions


def composite(query: str, sources, **options: Any):
    """Search several sources with a default client. See ``Client.composite``."""
    return _client().composite(query, sources, **options)
