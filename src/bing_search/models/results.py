"""Result models decoded from Bing Search responses.

Every field is optional: the service omits or blanks fields freely, and the
decoder only fills in what the payload carries. Instances are frozen once
built.
"""

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class Model:
    """Base for everything the decoder can build."""

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class Image(Model):
    """A thumbnail attached to image and video results."""

    media_url: Optional[str] = None
    content_type: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    file_size: Optional[int] = None

    @property
    def url(self) -> Optional[str]:
        return self.media_url


@dataclass(frozen=True)
class Result(Model):
    # UUID assigned by the service
    id: Optional[str] = None


@dataclass(frozen=True)
class WebResult(Result):
    title: Optional[str] = None
    description: Optional[str] = None
    display_url: Optional[str] = None
    url: Optional[str] = None

    @property
    def summary(self) -> Optional[str]:
        """The text shown below the title on bing.com."""
        return self.description


@dataclass(frozen=True)
class ImageResult(Result):
    title: Optional[str] = None
    media_url: Optional[str] = None
    # page that contains the image
    source_url: Optional[str] = None
    display_url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    file_size: Optional[int] = None
    content_type: Optional[str] = None
    thumbnail: Optional[Image] = None

    @property
    def url(self) -> Optional[str]:
        return self.media_url

    @property
    def media_type(self) -> Optional[str]:
        return self.content_type


@dataclass(frozen=True)
class VideoResult(Result):
    title: Optional[str] = None
    media_url: Optional[str] = None
    display_url: Optional[str] = None
    # milliseconds
    run_time: Optional[int] = None
    thumbnail: Optional[Image] = None

    @property
    def url(self) -> Optional[str]:
        return self.media_url

    @property
    def duration(self) -> Optional[int]:
        return self.run_time


@dataclass(frozen=True)
class NewsResult(Result):
    title: Optional[str] = None
    url: Optional[str] = None
    # organization responsible for the article
    source: Optional[str] = None
    description: Optional[str] = None
    # when the article was indexed
    date: Optional[datetime] = None

    @property
    def headline(self) -> Optional[str]:
        return self.title


@dataclass(frozen=True)
class RelatedSearchResult(Result):
    title: Optional[str] = None
    bing_url: Optional[str] = None

    @property
    def query(self) -> Optional[str]:
        """The query text of the related search."""
        return self.title


@dataclass(frozen=True)
class SpellingSuggestionsResult(Result):
    value: Optional[str] = None

    @property
    def suggestion(self) -> Optional[str]:
        return self.value


@dataclass(frozen=True)
class CompositeSearchResult(Result):
    """
    Aggregate returned by a composite search.

    Holds one list per requested source, the index size and first ordinal
    for each source, and the query alteration applied by the service, if
    any.
    """

    web: Optional[List[WebResult]] = None
    image: Optional[List[ImageResult]] = None
    video: Optional[List[VideoResult]] = None
    news: Optional[List[NewsResult]] = None
    related_search: Optional[List[RelatedSearchResult]] = None
    spelling_suggestions: Optional[List[SpellingSuggestionsResult]] = None

    web_total: Optional[int] = None
    web_offset: Optional[int] = None
    image_total: Optional[int] = None
    image_offset: Optional[int] = None
    video_total: Optional[int] = None
    video_offset: Optional[int] = None
    news_total: Optional[int] = None
    news_offset: Optional[int] = None
    spelling_suggestions_total: Optional[int] = None

    # query text after spelling correction
    altered_query: Optional[str] = None
    # query text that forces the original query, bypassing altered_query
    alteration_override_query: Optional[str] = None
