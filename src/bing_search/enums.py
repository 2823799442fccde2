"""
Enumeration domains understood by the Bing Search API.

Each domain maps a Python member name to the literal token the service
expects on the wire. ``resolve_enum`` turns whatever the caller passed (a
member, a symbolic name, or the wire literal) into that token.
"""

import logging
from enum import Enum
from typing import Any, Type

from bing_search.errors import InvalidEnumValue
from bing_search.utils.text import camelcase, underscore

logger = logging.getLogger(__name__)


class Adult(Enum):
    OFF = "Off"
    MODERATE = "Moderate"
    STRICT = "Strict"


class FileType(Enum):
    DOC = "DOC"
    DWF = "DWF"
    FEED = "FEED"
    HTM = "HTM"
    HTML = "HTML"
    PDF = "PDF"
    PPT = "PPT"
    RTF = "RTF"
    TEXT = "TEXT"
    TXT = "TXT"
    XLS = "XLS"


class ImageFilter(Enum):
    """Composable image filters; multiple filters are ANDed."""
    SMALL = "Size:Small"
    MEDIUM = "Size:Medium"
    LARGE = "Size:Large"
    SQUARE = "Aspect:Square"
    WIDE = "Aspect:Wide"
    TALL = "Aspect:Tall"
    COLOR = "Color:Color"
    MONOCHROME = "Color:Monochrome"
    PHOTO = "Style:Photo"
    GRAPHICS = "Style:Graphics"
    FACE = "Face:Face"
    PORTRAIT = "Face:Portrait"
    OTHER_FACE = "Face:Other"


class VideoFilter(Enum):
    """Composable video filters; at most one duration is allowed."""
    SHORT = "Duration:Short"
    MEDIUM = "Duration:Medium"
    LONG = "Duration:Long"
    STANDARD_ASPECT = "Aspect:Standard"
    WIDESCREEN = "Aspect:Widescreen"
    LOW_RESOLUTION = "Resolution:Low"
    MEDIUM_RESOLUTION = "Resolution:Medium"
    HIGH_RESOLUTION = "Resolution:High"


class NewsCategory(Enum):
    """News categories. Only honoured in the en-US market."""
    BUSINESS = "rt_Business"
    ENTERTAINMENT = "rt_Entertainment"
    HEALTH = "rt_Health"
    POLITICS = "rt_Politics"
    SPORTS = "rt_Sports"
    US = "rt_US"
    WORLD = "rt_World"
    SCIENCE_AND_TECHNOLOGY = "rt_ScienceAndTechnology"


class NewsSort(Enum):
    DATE = "Date"
    RELEVANCE = "Relevance"


class VideoSort(Enum):
    DATE = "Date"
    RELEVANCE = "Relevance"


class Source(Enum):
    """Result sources selectable in a composite search."""
    WEB = "Web"
    IMAGE = "Image"
    VIDEO = "Video"
    NEWS = "News"
    SPELLING_SUGGESTIONS = "Spell"
    RELATED_SEARCH = "RelatedSearch"


class ResponseFormat(Enum):
    """Sent unquoted as ``$format``."""
    JSON = "JSON"


ENUM_DOMAINS = (
    Adult,
    FileType,
    ImageFilter,
    VideoFilter,
    NewsCategory,
    NewsSort,
    VideoSort,
    Source,
)


def _member_from_symbol(symbol: str, domain: Type[Enum]) -> Enum:
    # camel-cased form first (``standard_aspect``/``StandardAspect``), then
    # the plain upper-cased form (``STANDARD_ASPECT``)
    candidates = (underscore(camelcase(symbol)).upper(), symbol.upper())
    for name in candidates:
        member = domain.__members__.get(name)
        if member is not None:
            return member
    raise KeyError(symbol)


def resolve_enum(value: Any, domain: Type[Enum]) -> Any:
    """
    Resolve an option value to the wire token of ``domain``.

    Accepts:
    - a member of ``domain`` (``ImageFilter.SMALL``)
    - a symbolic name (``"small"``, ``"SMALL"``, ``"OtherFace"``)
    - the wire literal itself (``"Size:Small"``), passed through unchanged
    - a list or tuple of any of the above, resolved element-wise in order

    Values that are not strings or members (numbers, None) pass through.

    Raises:
        InvalidEnumValue: the value names nothing in ``domain``
    """
    if isinstance(value, (list, tuple)):
        return [resolve_enum(element, domain) for element in value]

    if isinstance(value, Enum):
        if isinstance(value, domain):
            return value.value
        raise InvalidEnumValue(domain.__name__, value)

    if isinstance(value, str):
        try:
            return _member_from_symbol(value, domain).value
        except KeyError:
            pass
        if any(member.value == value for member in domain):
            return value
        logger.debug(f"Rejecting {value!r} for {domain.__name__}")
        raise InvalidEnumValue(domain.__name__, value)

    return value
