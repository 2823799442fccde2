"""Exceptions raised by the Bing Search client.

Nothing here is retried by the client; callers decide what, if anything,
deserves another attempt.
"""

from typing import Any, Optional


class BingSearchError(Exception):
    """Base class for every error raised by this package."""
    pass


class InvalidEnumValue(BingSearchError, ValueError):
    """An option value is not a member of its enumeration domain."""

    def __init__(self, domain: str, value: Any):
        super().__init__(f"{domain} does not contain a constant corresponding to {value!r}")
        self.domain = domain
        self.value = value


class ServiceError(BingSearchError):
    """The service answered with a non-success HTTP status."""

    def __init__(self, code: Any, message: Optional[str] = None):
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"Bing error {self.code}: {self.message or ''}"


class MalformedResponse(BingSearchError):
    """A successful response whose body does not have the expected shape."""
    pass


class UnknownModelType(BingSearchError):
    """A ``__metadata.type`` tag with no registered result model."""

    def __init__(self, type_tag: Any):
        super().__init__(f"Invalid model type: {type_tag}")
        self.type_tag = type_tag


class UnknownAttribute(BingSearchError):
    """A payload field with no matching attribute on the chosen model."""

    def __init__(self, model: str, attribute: str):
        super().__init__(f"Can't set attr {attribute} of {model}")
        self.model = model
        self.attribute = attribute


class UnsupportedCoercion(BingSearchError, TypeError):
    """A coercion kind the decoder does not know how to apply."""

    def __init__(self, kind: Any, value: Any = None):
        super().__init__(f"Can't parse value {value!r} of type {kind!r}")
        self.kind = kind
        self.value = value


class TransportError(BingSearchError):
    """The HTTP exchange itself failed before a response arrived."""
    pass
