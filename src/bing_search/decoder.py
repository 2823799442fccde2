"""
Response decoding.

Walks the ``d.results`` payload and turns every object tagged with
``__metadata.type`` into the matching result model, coercing the fields the
registry marks as integers or datetimes.
"""

import logging
import re
from datetime import datetime
from typing import Any, Dict, Optional

from bing_search.errors import (
    MalformedResponse,
    UnknownAttribute,
    UnknownModelType,
    UnsupportedCoercion,
)
from bing_search.models.registry import DATETIME, INTEGER, MODEL_REGISTRY
from bing_search.models.results import Model
from bing_search.utils.text import underscore

logger = logging.getLogger(__name__)

# fromisoformat before 3.11 rejects more than six fractional digits
_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")

METADATA_KEY = "__metadata"


def is_model_object(raw: Any) -> bool:
    """True for a JSON object carrying a ``__metadata.type`` tag."""
    if not isinstance(raw, dict):
        return False
    metadata = raw.get(METADATA_KEY)
    return isinstance(metadata, dict) and bool(metadata.get("type"))


def decode(raw: Any, kind: Optional[str] = None) -> Any:
    """
    Decode a JSON value from a results envelope.

    Lists decode element-wise, tagged objects become models, everything else
    passes through. When ``kind`` is given the value is coerced instead.

    Raises:
        UnknownModelType: a tag with no registered model
        UnknownAttribute: a field the chosen model does not declare
        UnsupportedCoercion: ``kind`` is not ``integer`` or ``datetime``
        MalformedResponse: a coerced field does not parse
    """
    if kind is not None:
        return coerce(raw, kind)
    if isinstance(raw, list):
        return [decode(element) for element in raw]
    if is_model_object(raw):
        return decode_model(raw)
    return raw


def decode_model(raw: Dict[str, Any]) -> Model:
    type_tag = raw[METADATA_KEY]["type"]
    spec = MODEL_REGISTRY.get(type_tag)
    if spec is None:
        raise UnknownModelType(type_tag)

    allowed = spec.field_names
    values: Dict[str, Any] = {}
    for key, value in raw.items():
        if key == METADATA_KEY:
            continue
        attr = underscore(key)
        if attr not in allowed:
            raise UnknownAttribute(spec.model.__name__, attr)
        values[attr] = decode(value, spec.coercions.get(attr))

    return spec.model(**values)


def coerce(raw: Any, kind: str) -> Any:
    """Coerce a JSON string to ``kind``. Empty strings become None."""
    if kind not in (INTEGER, DATETIME):
        raise UnsupportedCoercion(kind, raw)
    if raw is None or raw == "":
        return None

    if kind == INTEGER:
        if isinstance(raw, int) and not isinstance(raw, bool):
            return raw
        try:
            return int(raw)
        except (TypeError, ValueError) as e:
            raise MalformedResponse(f"Expected an integer, got {raw!r}") from e

    if isinstance(raw, datetime):
        return raw
    if not isinstance(raw, str):
        raise MalformedResponse(f"Expected a date/time string, got {raw!r}")
    try:
        return parse_datetime(raw)
    except (TypeError, ValueError) as e:
        raise MalformedResponse(f"Expected a date/time, got {raw!r}") from e


def parse_datetime(text: str) -> datetime:
    """Parse the service's ISO 8601 timestamps (``2024-01-02T00:00:00Z``)."""
    text = text.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    text = _EXCESS_FRACTION.sub(r"\1", text)
    return datetime.fromisoformat(text)
