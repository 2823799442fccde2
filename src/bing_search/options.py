"""
Option records for each search operation.

Every recognized option is a named field; anything else is rejected with a
``TypeError`` when the record is built. Enumerated options accept a member,
its symbolic name, or the wire literal (see ``bing_search.enums``).
"""

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from bing_search.enums import (
    Adult,
    FileType,
    ImageFilter,
    NewsCategory,
    NewsSort,
    VideoFilter,
    VideoSort,
)


@dataclass(frozen=True)
class SearchOptions:
    """Options accepted by every operation.

    Attributes:
        limit: Maximum number of results to return
        offset: Zero-based ordinal of the first result to return
        adult: Level of filtering of sexually explicit content (``Adult``)
        latitude: -90 to 90
        longitude: -180 to 180
        market: Language tag such as ``en-US``
        location_detection: Whether to infer location from the query text
    """

    limit: Optional[int] = None
    offset: Optional[int] = None
    adult: Optional[Union[Adult, str]] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    market: Optional[str] = None
    location_detection: Optional[bool] = None


@dataclass(frozen=True)
class WebOptions(SearchOptions):
    file_type: Optional[Union[FileType, str]] = None
    # surround query terms in descriptions with HIGHLIGHT_DELIMITER
    highlighting: Optional[bool] = None
    # suppress results from the same top-level URL (service default: on)
    host_collapsing: Optional[bool] = None
    # let the service alter e.g. misspelled queries (service default: on)
    query_alterations: Optional[bool] = None


@dataclass(frozen=True)
class ImageOptions(SearchOptions):
    # ANDed with each other and with the minimum dimensions. Only ImageFilter
    # members, names or literals are accepted here; pixel sizes such as
    # Size:Width:1024 go through minimum_width and minimum_height.
    filters: Optional[Sequence[Union[ImageFilter, str]]] = None
    minimum_width: Optional[int] = None
    minimum_height: Optional[int] = None


@dataclass(frozen=True)
class VideoOptions(SearchOptions):
    filters: Optional[Sequence[Union[VideoFilter, str]]] = None
    sort: Optional[Union[VideoSort, str]] = None


@dataclass(frozen=True)
class NewsOptions(SearchOptions):
    highlighting: Optional[bool] = None
    category: Optional[Union[NewsCategory, str]] = None
    # e.g. US.WA
    location_override: Optional[str] = None
    sort: Optional[Union[NewsSort, str]] = None


@dataclass(frozen=True)
class RelatedSearchOptions(SearchOptions):
    pass


@dataclass(frozen=True)
class SpellingSuggestionsOptions(SearchOptions):
    pass


@dataclass(frozen=True)
class CompositeOptions(SearchOptions):
    """Options for a composite search.

    Source-specific options carry the source as a prefix. ``web_file_type``
    also restricts image and video results when the web source is included.
    At most 15 news results come back regardless of ``limit``.
    """

    highlighting: Optional[bool] = None
    web_file_type: Optional[Union[FileType, str]] = None
    web_host_collapsing: Optional[bool] = None
    web_query_alterations: Optional[bool] = None
    image_minimum_width: Optional[int] = None
    image_minimum_height: Optional[int] = None
    image_filters: Optional[Sequence[Union[ImageFilter, str]]] = None
    video_filters: Optional[Sequence[Union[VideoFilter, str]]] = None
    video_sort: Optional[Union[VideoSort, str]] = None
    news_category: Optional[Union[NewsCategory, str]] = None
    news_location_override: Optional[str] = None
    news_sort: Optional[Union[NewsSort, str]] = None


def option_value(options: SearchOptions, name: str) -> Any:
    """Read an option that may not exist on every record."""
    return getattr(options, name, None)
