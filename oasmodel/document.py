"""Entry points for whole OpenAPI documents held in memory."""

from typing import Literal

from oasmodel.config import CodecConfig
from oasmodel.openapi.v3 import OpenAPI

__all__ = [
    'Format',
    'dumps',
    'loads',
]

Format = Literal['json', 'yaml']


def loads(data: bytes | str, format: Format = 'yaml', config: CodecConfig | None = None) -> OpenAPI:
    """Decode an OpenAPI document from JSON or YAML text.

    Args:
        data: The document text, as bytes (UTF-8) or str.
        format: Text format of ``data``.
        config: Codec options; defaults to :func:`oasmodel.config.default_config`.

    Raises:
        DecodeError: If the text cannot be parsed or does not have the shape
            of an OpenAPI document.
    """
    if format == 'json':
        return OpenAPI.from_json(data, config)
    if format == 'yaml':
        return OpenAPI.from_yaml(data, config)
    raise ValueError(f'Unsupported format: {format!r}')


def dumps(document: OpenAPI, format: Format = 'yaml', config: CodecConfig | None = None) -> bytes:
    """Encode an OpenAPI document as UTF-8 JSON or YAML text."""
    if format == 'json':
        return document.to_json(config)
    if format == 'yaml':
        return document.to_yaml(config)
    raise ValueError(f'Unsupported format: {format!r}')
