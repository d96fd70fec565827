import json
import os
from pathlib import Path

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from oasmodel.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['oasmodel.yaml', 'oasmodel.yml']


class CodecConfig(BaseSettings):
    """Options shared by every encode/decode call."""

    model_config = SettingsConfigDict(env_prefix='OASMODEL_', extra='forbid')

    strict: bool = Field(
        False,
        description='Raise DecodeError when a known scalar field has the wrong type instead of ignoring it.',
    )

    json_indent: int | None = Field(
        2, description='Indentation of JSON output, None for compact output.'
    )

    json_ensure_ascii: bool = Field(
        False, description='Escape non-ASCII characters in JSON output.'
    )

    yaml_sort_keys: bool = Field(
        False, description='Sort mapping keys in YAML output.'
    )

    yaml_indent: int = Field(2, description='Indentation of YAML output.')


def load_yaml(path: str | Path) -> dict:
    return yaml.safe_load(Path(path).read_text(encoding='utf-8'))


def load_json(path: str | Path) -> dict:
    return json.loads(Path(path).read_text(encoding='utf-8'))


def _load_file(path: Path) -> dict:
    try:
        if path.suffix.lower() == '.json':
            data = load_json(path)
        else:
            data = load_yaml(path)
    except OSError as e:
        raise ConfigurationError(f'Cannot read configuration: {e}', str(path)) from e
    except (ValueError, yaml.YAMLError) as e:
        raise ConfigurationError(f'Cannot parse configuration: {e}', str(path)) from e
    return data or {}


def _build(data: dict, source: str) -> CodecConfig:
    if not isinstance(data, dict):
        raise ConfigurationError('Configuration must be a mapping', source)
    try:
        return CodecConfig.model_validate(data)
    except ValidationError as e:
        field = '.'.join(str(part) for part in e.errors()[0]['loc']) or None
        raise ConfigurationError('Invalid configuration', source, field) from e


def get_config(path: str | None = None) -> CodecConfig:
    """Load configuration from a file, pyproject.toml or the environment."""
    if path:
        return _build(_load_file(Path(path)), path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        candidate = Path(cwd) / filename
        if candidate.exists():
            return _build(_load_file(candidate), str(candidate))

    candidate = Path(cwd) / 'pyproject.toml'

    if candidate.exists():
        import tomllib

        try:
            pyproject = tomllib.loads(candidate.read_text(encoding='utf-8'))
        except OSError as e:
            raise ConfigurationError(f'Cannot read configuration: {e}', str(candidate)) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f'Cannot parse configuration: {e}', str(candidate)) from e
        tools = pyproject.get('tool', {})

        if 'oasmodel' in tools:
            return _build(tools['oasmodel'], str(candidate))

    return CodecConfig()


def default_config() -> CodecConfig:
    """Configuration used when a call does not pass one explicitly.

    Only defaults and ``OASMODEL_`` environment variables apply; configuration
    files are read by :func:`get_config` alone.
    """
    return CodecConfig()
