"""Specification extensions and free-form value normalization.

Every extensible entity keeps a bag of ``x-`` prefixed keys next to its typed
fields. The helpers here are the single implementation of that convention:
deciding which keys are extensions, and bringing free-form values (extension
values, examples, enum members, defaults) into the canonical generic shape of
string-keyed dicts, lists and scalars.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict

__all__ = [
    'EXTENSION_PREFIX',
    'Extensions',
    'extract_extensions',
    'filter_extensions',
    'is_extension_key',
    'normalize_value',
    'stringify',
]

logger = logging.getLogger(__name__)

EXTENSION_PREFIX = 'x-'

Extensions = Dict[str, Any]


def is_extension_key(key: Any) -> bool:
    """Check whether a mapping key names a specification extension."""
    return str(key).lower().startswith(EXTENSION_PREFIX)


def stringify(value: Any) -> str:
    """Convert a scalar to the string YAML would have written for it."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if value is None:
        return 'null'
    return str(value)


def normalize_value(value: Any) -> Any:
    """Recursively convert a decoded value into its canonical generic shape.

    Sequences become new lists, mappings become new dicts whose keys are
    stringified, and every other value is returned unchanged. Containers are
    always rebuilt, so the result never shares mutable state with the input.
    """
    if isinstance(value, (list, tuple)):
        return [normalize_value(item) for item in value]
    if isinstance(value, Mapping):
        return {stringify(k): normalize_value(v) for k, v in value.items()}
    return value


def extract_extensions(data: Mapping[Any, Any]) -> Extensions:
    """Collect the extension keys of a decoded mapping.

    Keys without the ``x-`` prefix are ignored; known fields are never
    extensions because no OpenAPI field name starts with ``x-``.
    """
    return {
        stringify(key): normalize_value(value)
        for key, value in data.items()
        if is_extension_key(key)
    }


def filter_extensions(extensions: Mapping[str, Any] | None) -> Extensions:
    """Return the encodable part of an extension bag."""
    if not extensions:
        return {}
    result = {}
    for key, value in extensions.items():
        if not is_extension_key(key):
            logger.debug(f'Dropping extension key without x- prefix: {key!r}')
            continue
        result[key] = normalize_value(value)
    return result
