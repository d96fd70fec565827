"""JSON and YAML text codecs for the generic form.

Entities never talk to ``json`` or ``yaml`` directly: they produce and consume
the generic form (dicts, lists and scalars) and this module turns it into text
and back. Both formats go through the same generic form, so a document decoded
from JSON and the same document decoded from YAML yield identical entities.
"""

from __future__ import annotations

import json
from typing import Any

import yaml

from oasmodel.config import CodecConfig, default_config
from oasmodel.exceptions import DecodeError, EncodeError

__all__ = [
    'Loader',
    'dump_json',
    'dump_yaml',
    'load_json',
    'load_yaml',
]

try:
    from yaml import CSafeLoader as SafeLoader
except ImportError:
    from yaml import SafeLoader  # type: ignore


class Loader(SafeLoader):
    """Safe YAML loader that keeps timestamps as plain strings."""


# JSON has no timestamp type; resolving them would make YAML and JSON decodes
# of the same document differ (``version: 2020-01-01``).
Loader.yaml_implicit_resolvers = {  # type: ignore[attr-defined]
    key: [(tag, regexp) for tag, regexp in mapping if tag != 'tag:yaml.org,2002:timestamp']
    for key, mapping in Loader.yaml_implicit_resolvers.copy().items()  # type: ignore[attr-defined]
}


def _as_text(data: bytes | bytearray | str) -> str:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode('utf-8')
    return data


def load_json(data: bytes | bytearray | str) -> Any:
    """Parse JSON text into the generic form."""
    try:
        return json.loads(_as_text(data))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError('json', cause=e) from e


def load_yaml(data: bytes | bytearray | str) -> Any:
    """Parse YAML 1.1 text into the generic form."""
    try:
        return yaml.load(_as_text(data), Loader=Loader)
    except (UnicodeDecodeError, yaml.YAMLError) as e:
        raise DecodeError('yaml', cause=e) from e


def dump_json(obj: Any, config: CodecConfig | None = None) -> bytes:
    """Serialize a generic value as UTF-8 encoded JSON."""
    config = config or default_config()
    try:
        text = json.dumps(
            obj, indent=config.json_indent, ensure_ascii=config.json_ensure_ascii
        )
    except (TypeError, ValueError) as e:
        raise EncodeError('json', cause=e) from e
    return text.encode('utf-8')


def dump_yaml(obj: Any, config: CodecConfig | None = None) -> bytes:
    """Serialize a generic value as UTF-8 encoded YAML."""
    config = config or default_config()
    try:
        text = yaml.safe_dump(
            obj,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=config.yaml_sort_keys,
            indent=config.yaml_indent,
        )
    except yaml.YAMLError as e:
        raise EncodeError('yaml', cause=e) from e
    return text.encode('utf-8')
