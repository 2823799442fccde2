"""
Outbound parameter building.

Translates an operation's option record into the service's OData parameter
set: enumerated options are resolved to wire tokens, derived flags and
filters are synthesized, empty values are dropped, names are mapped to the
remote spelling and values are quoted the way the service expects.
"""

import logging
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Type
from urllib.parse import urlencode

from bing_search.enums import (
    Adult,
    FileType,
    ImageFilter,
    NewsCategory,
    NewsSort,
    ResponseFormat,
    Source,
    VideoFilter,
    VideoSort,
    resolve_enum,
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
    option_value,
)
from bing_search.utils.text import camelcase

logger = logging.getLogger(__name__)

GENERAL_PASSTHROUGH_OPTIONS = ("limit", "adult", "latitude", "longitude", "market")

GENERAL_ENUM_OPTIONS: Dict[str, Type[Enum]] = {"adult": Adult}

GENERAL_PARAM_NAMES = {
    "limit": "$top",
    "offset": "$skip",
    "format": "$format",
}

DISABLE_LOCATION_DETECTION = "DisableLocationDetection"
ENABLE_HIGHLIGHTING = "EnableHighlighting"
DISABLE_HOST_COLLAPSING = "DisableHostCollapsing"
DISABLE_QUERY_ALTERATIONS = "DisableQueryAlterations"


def web_search_options(options: SearchOptions, prefix: str = "") -> List[str]:
    """Flags for behaviour the web source enables unless told otherwise."""
    flags = []
    if option_value(options, f"{prefix}host_collapsing") is False:
        flags.append(DISABLE_HOST_COLLAPSING)
    if option_value(options, f"{prefix}query_alterations") is False:
        flags.append(DISABLE_QUERY_ALTERATIONS)
    return flags


def image_filters(options: SearchOptions, prefix: str = "") -> List[str]:
    """Explicit image filters plus ``Size:Width:<n>``/``Size:Height:<n>``."""
    selected = option_value(options, f"{prefix}filters") or []
    if isinstance(selected, (str, Enum)):
        selected = [selected]
    filters = resolve_enum(list(selected), ImageFilter)

    width = option_value(options, f"{prefix}minimum_width")
    height = option_value(options, f"{prefix}minimum_height")
    if width is not None:
        filters.append(f"Size:Width:{width}")
    if height is not None:
        filters.append(f"Size:Height:{height}")
    return filters


@dataclass(frozen=True)
class OperationSpec:
    """How one remote operation maps its options onto parameters.

    Attributes:
        name: Path segment of the operation, e.g. ``Web``
        options_type: Option record the operation accepts
        passthrough: Options copied to the parameters as-is (after enum resolution)
        enum_options: Option name to enumeration domain
        param_names: Remote names overriding the automatic camel-casing
        derive: Builds extra parameters from the whole option record
    """

    name: str
    options_type: Type[SearchOptions]
    passthrough: Tuple[str, ...] = ()
    enum_options: Dict[str, Type[Enum]] = field(default_factory=dict)
    param_names: Dict[str, str] = field(default_factory=dict)
    derive: Optional[Callable[[SearchOptions], Dict[str, Any]]] = None


OPERATIONS: Dict[str, OperationSpec] = {
    spec.name: spec
    for spec in (
        OperationSpec(
            "Web",
            WebOptions,
            passthrough=("file_type",),
            enum_options={"file_type": FileType},
            param_names={"file_type": "WebFileType"},
            derive=lambda o: {"web_search_options": web_search_options(o)},
        ),
        OperationSpec(
            "Image",
            ImageOptions,
            param_names={"filters": "ImageFilters"},
            derive=lambda o: {"filters": image_filters(o)},
        ),
        OperationSpec(
            "Video",
            VideoOptions,
            passthrough=("filters", "sort"),
            enum_options={"filters": VideoFilter, "sort": VideoSort},
            param_names={"filters": "VideoFilters", "sort": "VideoSortBy"},
        ),
        OperationSpec(
            "News",
            NewsOptions,
            passthrough=("category", "location_override", "sort"),
            enum_options={"category": NewsCategory, "sort": NewsSort},
            param_names={
                "category": "NewsCategory",
                "location_override": "NewsLocationOverride",
                "sort": "NewsSortBy",
            },
        ),
        OperationSpec("RelatedSearch", RelatedSearchOptions),
        OperationSpec("SpellingSuggestions", SpellingSuggestionsOptions),
        OperationSpec(
            "Composite",
            CompositeOptions,
            passthrough=(
                "web_file_type",
                "video_filters",
                "video_sort",
                "news_category",
                "news_location_override",
                "news_sort",
            ),
            enum_options={
                "web_file_type": FileType,
                "video_filters": VideoFilter,
                "video_sort": VideoSort,
                "news_category": NewsCategory,
                "news_sort": NewsSort,
            },
            param_names={"video_sort": "VideoSortBy", "news_sort": "NewsSortBy"},
            derive=lambda o: {
                "web_search_options": web_search_options(o, "web_"),
                "image_filters": image_filters(o, "image_"),
            },
        ),
    )
}


def get_operation(name: str) -> OperationSpec:
    try:
        return OPERATIONS[name]
    except KeyError:
        raise ValueError(f"Unknown operation: {name}") from None


def build_params(
    operation: str,
    query: str,
    options: Optional[SearchOptions] = None,
    sources: Optional[Iterable[Any]] = None,
) -> Dict[str, Any]:
    """
    Build the remote parameter mapping for one search.

    Args:
        operation: Operation name, e.g. ``Web`` or ``Composite``
        query: Query text in the Bing Query Language
        options: The operation's option record; defaults are used if None
        sources: Composite searches only, the sources to search

    Returns:
        Remote parameter name to formatted value

    Raises:
        InvalidEnumValue: any enumerated option names nothing in its domain
        TypeError: ``options`` is not the record type of ``operation``
    """
    spec = get_operation(operation)
    if options is None:
        options = spec.options_type()
    elif not isinstance(options, spec.options_type):
        raise TypeError(
            f"{operation} expects {spec.options_type.__name__}, "
            f"got {type(options).__name__}"
        )

    flags = []
    if options.location_detection is False:
        flags.append(DISABLE_LOCATION_DETECTION)
    if option_value(options, "highlighting"):
        flags.append(ENABLE_HIGHLIGHTING)

    # Bing treats offsets 0 and 1 the same, so shift every offset by one
    offset = options.offset + 1 if options.offset is not None else None

    supplied = {
        f.name: getattr(options, f.name)
        for f in fields(options)
        if getattr(options, f.name) is not None
    }
    resolved = {}
    for key, value in supplied.items():
        domain = GENERAL_ENUM_OPTIONS.get(key) or spec.enum_options.get(key)
        resolved[key] = resolve_enum(value, domain) if domain else value

    params: Dict[str, Any] = {}
    if spec.derive is not None:
        params.update(spec.derive(options))
    if sources is not None:
        if isinstance(sources, (str, Enum)):
            sources = [sources]
        params["sources"] = resolve_enum(list(sources), Source)
    for key in GENERAL_PASSTHROUGH_OPTIONS + spec.passthrough:
        if key in resolved:
            params[key] = resolved[key]
    params.update(
        query=query,
        offset=offset,
        options=flags,
        format=ResponseFormat.JSON,
    )

    params = {key: value for key, value in params.items() if not _is_empty(value)}
    params = rename_params(params, spec.param_names)
    logger.debug(f"{operation}: built {len(params)} parameters")
    return {key: format_value(value) for key, value in params.items()}


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (list, tuple)) and not value)


def rename_params(params: Dict[str, Any], param_names: Dict[str, str]) -> Dict[str, Any]:
    """Map semantic names to remote names; unmapped names are camel-cased."""
    return {
        param_names.get(key) or GENERAL_PARAM_NAMES.get(key) or camelcase(key): value
        for key, value in params.items()
    }


def format_value(value: Any) -> Any:
    """Quote strings, join lists with ``+`` into one quoted token, leave the rest."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, str):
        return f"'{value}'"
    if isinstance(value, (list, tuple)):
        return "'" + "+".join(str(element) for element in value) + "'"
    return value


def encode_query(params: Dict[str, Any]) -> str:
    """URL-encode a formatted parameter mapping as a query string."""
    return urlencode(params)
