"""Generic-form codec shared by every OpenAPI entity.

Each entity converts to and from one generic form: string-keyed dicts, lists
and scalars. JSON and YAML are only ever produced from, and parsed into, that
form (see :mod:`oasmodel.codec`), so the two text formats cannot drift apart.

Encoding walks the declared fields in order, omits fields that hold the zero
value of their declaration unless the entity always emits them, recurses into
child entities and appends the extension bag last.

Decoding is a pydantic ``model_validator(mode='before')`` that is active only
when validation was started by :meth:`GenericCodec.from_generic`. It picks the
known keys out of the source mapping, applies the lenient scalar policy
(mistyped strings, booleans and numbers are ignored unless strict mode is on)
and leaves structured fields to pydantic, which recurses into the child
entity's own validator with the same context. Building entities directly in
Python (``Schema(type='string')``) is plain pydantic validation.
"""

from __future__ import annotations

import logging
import types
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, ClassVar, Dict, Self, Union, get_args, get_origin

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    model_validator,
)

from oasmodel.codec import dump_json, dump_yaml, load_json, load_yaml
from oasmodel.config import CodecConfig, default_config
from oasmodel.exceptions import CloneError, DecodeError, EncodeError, OasModelError
from oasmodel.extensions import (
    Extensions,
    extract_extensions,
    filter_extensions,
    is_extension_key,
    normalize_value,
    stringify,
)

__all__ = [
    'ExtensibleModel',
    'FieldKind',
    'GenericCodec',
    'OpenAPIModel',
]

logger = logging.getLogger(__name__)

GENERIC_CONTEXT = 'oasmodel.generic'
STRICT_CONTEXT = 'oasmodel.strict'


class FieldKind(Enum):
    """How a declared field is read from and written to the generic form."""

    STRING = 'string'
    BOOLEAN = 'boolean'
    NUMBER = 'number'
    STRING_LIST = 'string list'
    STRING_MAP = 'string map'
    VALUE_LIST = 'list'
    FREE_FORM = 'free-form value'
    ENTITY = 'entity'
    ENTITY_OR_BOOLEAN = 'entity or boolean'


@dataclass(frozen=True)
class FieldSpec:
    name: str
    alias: str
    kind: FieldKind
    none_only: bool

    def is_empty(self, value: Any) -> bool:
        if value is None:
            return True
        if self.none_only:
            return False
        return isinstance(value, (str, bool, list, tuple, dict)) and not value


def _strip_optional(annotation: Any) -> Any:
    if get_origin(annotation) in (Union, types.UnionType):
        args = tuple(arg for arg in get_args(annotation) if arg is not type(None))
        if len(args) == 1:
            return args[0]
        return Union[args]
    return annotation


def classify(annotation: Any) -> FieldKind:
    """Map a field annotation onto the decode rule it follows."""
    annotation = _strip_optional(annotation)
    if annotation is str:
        return FieldKind.STRING
    if annotation is bool:
        return FieldKind.BOOLEAN
    if annotation is Any:
        return FieldKind.FREE_FORM

    origin = get_origin(annotation)
    args = get_args(annotation)
    if origin is Union and set(args) <= {int, float}:
        return FieldKind.NUMBER
    if origin is Union and bool in args:
        return FieldKind.ENTITY_OR_BOOLEAN
    if origin is list:
        if args[0] is str:
            return FieldKind.STRING_LIST
        if args[0] is Any:
            return FieldKind.VALUE_LIST
    if origin is dict and args[1] is str:
        return FieldKind.STRING_MAP
    return FieldKind.ENTITY


@lru_cache(maxsize=None)
def field_specs(cls: type[BaseModel]) -> tuple[FieldSpec, ...]:
    """Return the codec rules of a model's document fields, in declaration order.

    Fields declared with ``exclude=True`` (the extension bag, the path and
    callback entries) are not document keys and are handled by the entity.
    """
    specs = []
    for name, field in cls.model_fields.items():
        if field.exclude:
            continue
        specs.append(
            FieldSpec(
                name=name,
                alias=field.alias or name,
                kind=classify(field.annotation),
                none_only=field.default is None and field.default_factory is None,
            )
        )
    return tuple(specs)


def _string_keys(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {stringify(k): v for k, v in value.items()}
    return value


def decode_field(owner: str, spec: FieldSpec, raw: Any, strict: bool) -> tuple[bool, Any]:
    """Convert one raw generic value for a field.

    Returns ``(accepted, value)``. Malformed scalars are rejected (and the
    field keeps its default) unless ``strict`` is set, in which case a
    ``ValueError`` is raised for pydantic to report.
    """
    if raw is None:
        return False, None

    kind = spec.kind
    if kind is FieldKind.ENTITY:
        return True, _string_keys(raw)
    if kind is FieldKind.FREE_FORM:
        return True, normalize_value(raw)
    if kind is FieldKind.STRING and isinstance(raw, str):
        return True, raw
    if kind is FieldKind.BOOLEAN and isinstance(raw, bool):
        return True, raw
    if kind is FieldKind.NUMBER and isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return True, raw
    if kind is FieldKind.STRING_LIST and isinstance(raw, (list, tuple)):
        return True, [stringify(item) for item in raw]
    if kind is FieldKind.STRING_MAP and isinstance(raw, Mapping):
        return True, {stringify(k): stringify(v) for k, v in raw.items()}
    if kind is FieldKind.VALUE_LIST and isinstance(raw, (list, tuple)):
        return True, normalize_value(raw)
    if kind is FieldKind.ENTITY_OR_BOOLEAN:
        if isinstance(raw, bool):
            return True, raw
        if isinstance(raw, Mapping):
            return True, _string_keys(raw)

    message = f'{owner}.{spec.alias} expects a {kind.value}, got {type(raw).__name__}'
    if strict:
        raise ValueError(message)
    logger.debug(f'Ignoring malformed field: {message}')
    return False, None


def encode_entity(value: Any) -> Any:
    """Encode a child entity, or a list/dict of them, into the generic form."""
    if isinstance(value, GenericCodec):
        return value.to_generic()
    if isinstance(value, Mapping):
        return {key: encode_entity(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [encode_entity(item) for item in value]
    if value is None or isinstance(value, bool):
        return value
    raise TypeError(f'{type(value).__name__} is not an OpenAPI entity')


def _encode_field(spec: FieldSpec, value: Any) -> Any:
    if spec.kind in (FieldKind.ENTITY, FieldKind.ENTITY_OR_BOOLEAN):
        return encode_entity(value)
    if spec.kind in (FieldKind.FREE_FORM, FieldKind.VALUE_LIST):
        return normalize_value(value)
    if spec.kind is FieldKind.STRING_LIST:
        return list(value)
    if spec.kind is FieldKind.STRING_MAP:
        return dict(value)
    return value


def generic_context(info: ValidationInfo) -> tuple[bool, bool]:
    context = info.context or {}
    return bool(context.get(GENERIC_CONTEXT)), bool(context.get(STRICT_CONTEXT))


class GenericCodec:
    """Text codecs and deep copy, built on ``to_generic``/``from_generic``."""

    def to_generic(self) -> Any:
        raise NotImplementedError

    @classmethod
    def from_generic(cls, data: Any, config: CodecConfig | None = None) -> Self:
        """Build the entity from its generic form.

        Raises:
            DecodeError: If a structured field does not have the shape of its
                child entity, or strict mode rejects a mistyped scalar.
        """
        config = config or default_config()
        if data is None:
            data = {}
        try:
            return cls.model_validate(
                data, context={GENERIC_CONTEXT: True, STRICT_CONTEXT: config.strict}
            )
        except ValidationError as e:
            raise DecodeError(cls.__name__, cause=e) from e

    @classmethod
    def from_json(cls, data: bytes | str, config: CodecConfig | None = None) -> Self:
        return cls.from_generic(load_json(data), config)

    @classmethod
    def from_yaml(cls, data: bytes | str, config: CodecConfig | None = None) -> Self:
        return cls.from_generic(load_yaml(data), config)

    def to_json(self, config: CodecConfig | None = None) -> bytes:
        return dump_json(self.to_generic(), config)

    def to_yaml(self, config: CodecConfig | None = None) -> bytes:
        return dump_yaml(self.to_generic(), config)

    def clone(self) -> Self:
        """Return a fully independent deep copy.

        The copy is made by decoding the entity's own generic form, so a clone
        is always exactly what a round trip through JSON or YAML would give.
        """
        try:
            return type(self).from_generic(self.to_generic())
        except OasModelError as e:
            raise CloneError(type(self).__name__, cause=e) from e


class OpenAPIModel(GenericCodec, BaseModel):
    """Base of all field-based OpenAPI entities."""

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    #: Document keys written even when they hold a zero value.
    required_keys: ClassVar[frozenset[str]] = frozenset()

    #: Every key that is not an extension is an entry of the entity itself.
    free_keys: ClassVar[bool] = False

    @model_validator(mode='before')
    @classmethod
    def _decode_generic(cls, data: Any, info: ValidationInfo) -> Any:
        generic, strict = generic_context(info)
        if not generic or isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise ValueError(f'{cls.__name__} must be a mapping, got {type(data).__name__}')
        return cls._decode_mapping(_string_keys(data), strict)

    @classmethod
    def _decode_mapping(cls, data: Dict[str, Any], strict: bool) -> Dict[str, Any]:
        values = {}
        specs = field_specs(cls)
        if not cls.free_keys:
            known = {spec.alias for spec in specs}
            for key in data:
                if key not in known and not is_extension_key(key):
                    logger.debug(f'Ignoring unknown key: {cls.__name__}.{key}')
        for spec in specs:
            if spec.alias not in data:
                continue
            accepted, value = decode_field(cls.__name__, spec, data[spec.alias], strict)
            if accepted:
                values[spec.name] = value
        values.update(cls._decode_entries(data))
        return values

    @classmethod
    def _decode_entries(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Decode values stored as free keys of the entity's own mapping."""
        return {}

    def to_generic(self) -> Dict[str, Any]:
        # A reference stands in for the whole entity; required keys are only
        # forced on inline entities.
        required = frozenset() if getattr(self, 'ref', '') else self.required_keys
        obj = {}
        for spec in field_specs(type(self)):
            value = getattr(self, spec.name)
            if spec.alias not in required and spec.is_empty(value):
                continue
            try:
                obj[spec.alias] = _encode_field(spec, value)
            except (OasModelError, TypeError) as e:
                raise EncodeError(type(self).__name__, spec.alias, cause=e) from e
        obj.update(self._encode_entries())
        return obj

    def _encode_entries(self) -> Dict[str, Any]:
        """Encode values stored as free keys of the entity's own mapping."""
        return {}

    def _encode_entry_map(self, entries: Mapping[str, Any]) -> Dict[str, Any]:
        obj = {}
        for key, value in entries.items():
            try:
                obj[key] = encode_entity(value)
            except (OasModelError, TypeError) as e:
                raise EncodeError(type(self).__name__, key, cause=e) from e
        return obj


class ExtensibleModel(OpenAPIModel):
    """An entity that carries ``x-`` specification extensions."""

    extensions: Extensions = Field(default_factory=dict, exclude=True)

    @classmethod
    def _decode_mapping(cls, data: Dict[str, Any], strict: bool) -> Dict[str, Any]:
        values = super()._decode_mapping(data, strict)
        extensions = extract_extensions(data)
        if extensions:
            values['extensions'] = extensions
        return values

    def to_generic(self) -> Dict[str, Any]:
        obj = super().to_generic()
        obj.update(filter_extensions(self.extensions))
        return obj

