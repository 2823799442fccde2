"""Result models and the type-tag registry."""

from bing_search.models.results import (
    Model,
    Result,
    Image,
    WebResult,
    ImageResult,
    VideoResult,
    NewsResult,
    RelatedSearchResult,
    SpellingSuggestionsResult,
    CompositeSearchResult,
)
from bing_search.models.registry import (
    DATETIME,
    INTEGER,
    KNOWN_TYPE_TAGS,
    MODEL_REGISTRY,
    ModelSpec,
    lookup_model,
)

__all__ = [
    "Model",
    "Result",
    "Image",
    "WebResult",
    "ImageResult",
    "VideoResult",
    "NewsResult",
    "RelatedSearchResult",
    "SpellingSuggestionsResult",
    "CompositeSearchResult",
    "DATETIME",
    "INTEGER",
    "KNOWN_TYPE_TAGS",
    "MODEL_REGISTRY",
    "ModelSpec",
    "lookup_model",
]
