"""
Static registry from remote ``__metadata.type`` tags to result models.

Each entry also lists the fields whose JSON strings need coercion; fields not
listed are passed through as decoded. The table is checked against the model
definitions at import time so a typo fails loudly instead of at decode time.
"""

from dataclasses import dataclass, field, fields
from typing import Dict, FrozenSet, Type

from bing_search.models.results import (
    CompositeSearchResult,
    Image,
    ImageResult,
    Model,
    NewsResult,
    RelatedSearchResult,
    SpellingSuggestionsResult,
    VideoResult,
    WebResult,
)

INTEGER = "integer"
DATETIME = "datetime"

COERCION_KINDS = frozenset({INTEGER, DATETIME})


@dataclass(frozen=True)
class ModelSpec:
    """How to build one model from a tagged JSON object."""

    type_tag: str
    model: Type[Model]
    coercions: Dict[str, str] = field(default_factory=dict)

    @property
    def field_names(self) -> FrozenSet[str]:
        return frozenset(f.name for f in fields(self.model))


_SPECS = (
    ModelSpec("WebResult", WebResult),
    ModelSpec(
        "ImageResult",
        ImageResult,
        {"width": INTEGER, "height": INTEGER, "file_size": INTEGER},
    ),
    ModelSpec("VideoResult", VideoResult, {"run_time": INTEGER}),
    ModelSpec("NewsResult", NewsResult, {"date": DATETIME}),
    ModelSpec("RelatedSearchResult", RelatedSearchResult),
    ModelSpec("SpellResult", SpellingSuggestionsResult),
    ModelSpec(
        "ExpandableSearchResult",
        CompositeSearchResult,
        {
            "web_total": INTEGER,
            "web_offset": INTEGER,
            "image_total": INTEGER,
            "image_offset": INTEGER,
            "video_total": INTEGER,
            "video_offset": INTEGER,
            "news_total": INTEGER,
            "news_offset": INTEGER,
            "spelling_suggestions_total": INTEGER,
        },
    ),
    ModelSpec(
        "Bing.Thumbnail",
        Image,
        {"width": INTEGER, "height": INTEGER, "file_size": INTEGER},
    ),
)

MODEL_REGISTRY: Dict[str, ModelSpec] = {spec.type_tag: spec for spec in _SPECS}

KNOWN_TYPE_TAGS = frozenset(MODEL_REGISTRY)


def _check_registry() -> None:
    for spec in _SPECS:
        for attr, kind in spec.coercions.items():
            if attr not in spec.field_names:
                raise AssertionError(
                    f"{spec.type_tag}: coercion for undeclared field {attr}"
                )
            if kind not in COERCION_KINDS:
                raise AssertionError(f"{spec.type_tag}: unknown coercion {kind}")


_check_registry()


def lookup_model(type_tag: str) -> ModelSpec:
    """Return the spec registered for ``type_tag`` or raise KeyError."""
    return MODEL_REGISTRY[type_tag]
