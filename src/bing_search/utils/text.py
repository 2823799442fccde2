"""Name conversions between Python attribute names and remote OData names."""

import re

_CAMEL_SEGMENT = re.compile(r"(?:^|_)([a-z])")
_WORD_BOUNDARY = re.compile(r"([^A-Z])([A-Z])")


def camelcase(name: str) -> str:
    """Convert ``web_file_type`` to ``WebFileType``.

    Only lower-case letters at the start or after an underscore are raised;
    names that are already camel-cased come back unchanged.
    """
    return _CAMEL_SEGMENT.sub(lambda m: m.group(1).upper(), name)


def underscore(name: str) -> str:
    """Convert ``WebFileType`` to ``web_file_type``.

    Runs of capitals stay together, so ``ID`` becomes ``id`` and ``BingUrl``
    becomes ``bing_url``.
    """
    return _WORD_BOUNDARY.sub(r"\1_\2", name).lower()
