"""
Bing Search API client.

Searches web pages, images, videos, news, related queries and spelling
suggestions, or several of those at once with a composite search.

Example:
    client = Client(account_key="...")
    results = client.web("UNESCO report", limit=10, adult="strict")

    # Several searches over one connection
    with Client(account_key="...") as client:
        images = client.image("cat", minimum_width=1024, filters=["color"])
        news = client.news("cat", category="science_and_technology")
"""

import json
import logging
from contextlib import contextmanager
from enum import Enum
from typing import Any, Iterable, Iterator, List, Optional

from bing_search.decoder import decode
from bing_search.errors import MalformedResponse, ServiceError
from bing_search.models.results import (
    CompositeSearchResult,
    ImageResult,
    NewsResult,
    RelatedSearchResult,
    SpellingSuggestionsResult,
    VideoResult,
    WebResult,
)
from bing_search.options import (
    CompositeOptions,
    ImageOptions,
    NewsOptions,
    RelatedSearchOptions,
    SearchOptions,
    SpellingSuggestionsOptions,
    VideoOptions,
    WebOptions,
)
from bing_search.params import build_params, encode_query
from bing_search.transport import HttpxTransport, Transport
from bing_search.utils.config import get_search_settings
from bing_search.utils.observability import log_prefix, new_request_id, timed

logger = logging.getLogger(__name__)

BASE_PATH = "/Bing/Search"
WEB_ONLY_BASE_PATH = "/Bing/SearchWeb"


class Client:
    """
    Client for the Bing Search API.

    Args:
        account_key: Azure Marketplace Account Key. Falls back to
            ``bing_search.account_key``, then to configuration.
        web_only: Use the cheaper web-only API, which rejects every
            operation but ``web``. Falls back the same way.
        transport: Anything with ``perform_get``; defaults to ``HttpxTransport``.
        timeout: Request timeout in seconds for the default transport.
    """

    def __init__(
        self,
        account_key: Optional[str] = None,
        web_only: Optional[bool] = None,
        transport: Optional[Transport] = None,
        timeout: Optional[float] = None,
    ):
        import bing_search

        settings = get_search_settings()
        self.account_key = account_key or bing_search.account_key or settings.account_key
        if web_only is None:
            web_only = bing_search.web_only
        if web_only is None:
            web_only = settings.web_only
        self.web_only = bool(web_only)

        if not self.account_key:
            raise ValueError("Pass an Account Key or set bing_search.account_key")

        self.transport = transport or HttpxTransport(
            host=settings.host,
            timeout=timeout if timeout is not None else settings.timeout,
        )

    # Sessions

    @classmethod
    @contextmanager
    def session(cls, *args, **kwargs) -> Iterator["Client"]:
        """Construct a client and keep it open for the ``with`` block."""
        client = cls(*args, **kwargs)
        with client:
            yield client

    @property
    def is_open(self) -> bool:
        return bool(getattr(self.transport, "is_open", False))

    def open(self) -> "Client":
        """Open one connection to reuse across searches until ``close``."""
        if self.is_open:
            raise RuntimeError("Already open")
        opener = getattr(self.transport, "open", None)
        if opener is not None:
            opener()
        return self

    def close(self) -> "Client":
        closer = getattr(self.transport, "close", None)
        if closer is not None:
            closer()
        return self

    def __enter__(self) -> "Client":
        return self.open()

    def __exit__(self, *exc_info):
        self.close()

    # Searching

    @timed
    def web(self, query: str, **options: Any) -> List[WebResult]:
        """Search for web pages. See ``WebOptions`` for the options."""
        return self.invoke("Web", query, WebOptions(**options))

    @timed
    def image(self, query: str, **options: Any) -> List[ImageResult]:
        """Search for images. See ``ImageOptions`` for the options."""
        return self.invoke("Image", query, ImageOptions(**options))

    @timed
    def video(self, query: str, **options: Any) -> List[VideoResult]:
        """Search for videos. See ``VideoOptions`` for the options."""
        return self.invoke("Video", query, VideoOptions(**options))

    @timed
    def news(self, query: str, **options: Any) -> List[NewsResult]:
        """Search for news. See ``NewsOptions`` for the options."""
        return self.invoke("News", query, NewsOptions(**options))

    @timed
    def related_search(self, query: str, **options: Any) -> List[RelatedSearchResult]:
        """Search for related queries."""
        return self.invoke("RelatedSearch", query, RelatedSearchOptions(**options))

    related = related_search

    @timed
    def spelling_suggestions(
        self, query: str, **options: Any
    ) -> List[SpellingSuggestionsResult]:
        """Correct spelling in the query text."""
        return self.invoke(
            "SpellingSuggestions", query, SpellingSuggestionsOptions(**options)
        )

    spelling = spelling_suggestions

    @timed
    def composite(
        self, query: str, sources: Iterable[Any], **options: Any
    ) -> Optional[CompositeSearchResult]:
        """
        Search several sources at once.

        Args:
            query: The query text
            sources: ``Source`` members or names, e.g. ``["web", "image"]``;
                a single member or name searches that source alone
            **options: See ``CompositeOptions``

        Returns:
            The aggregate result, or None if the service returned nothing
        """
        if isinstance(sources, (str, Enum)):
            sources = [sources]
        results = self.invoke(
            "Composite", query, CompositeOptions(**options), sources=list(sources)
        )
        return results[0] if results else None

    def invoke(
        self,
        operation: str,
        query: str,
        options: SearchOptions,
        sources: Optional[List[Any]] = None,
    ) -> Any:
        """
        Run one operation and decode its results.

        Raises:
            InvalidEnumValue: before any request is made
            ServiceError: the service answered with a non-200 status
            MalformedResponse: the body is not the expected JSON envelope
            TransportError: the request itself failed
        """
        params = build_params(operation, query, options, sources=sources)
        query_string = encode_query(params)
        base_path = WEB_ONLY_BASE_PATH if self.web_only else BASE_PATH
        path = f"{base_path}/{operation}"

        new_request_id()
        logger.debug(f"{log_prefix()}GET {path} with {len(params)} parameters")

        status, body = self.transport.perform_get(
            path, query_string, self.account_key, self.account_key
        )
        if status != 200:
            message = body.decode("utf-8", errors="replace") if body else ""
            logger.warning(f"{log_prefix()}{operation} failed with status {status}")
            raise ServiceError(status, message)

        results = decode(extract_results(body))
        if isinstance(results, list):
            logger.info(f"{log_prefix()}{operation} returned {len(results)} results")
        return results


def extract_results(body: bytes) -> Any:
    """Parse a response body and return the payload under ``d.results``."""
    try:
        raw = json.loads(body)
    except ValueError as e:
        raise MalformedResponse(f"Response is not JSON: {e}") from e

    envelope = raw.get("d") if isinstance(raw, dict) else None
    if not isinstance(envelope, dict) or envelope.get("results") is None:
        raise MalformedResponse("Unexpected response format")
    return envelope["results"]
