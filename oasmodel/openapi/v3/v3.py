"""OpenAPI 3.0 document model.

Every class below is an entity of the OpenAPI 3.0 specification. The codec
behaviour (generic form, JSON/YAML, extensions, cloning) lives in
:mod:`oasmodel.base`; this module only declares the fields, which keys are
always written, and the few entities whose document shape is a flat map
(``Paths``, ``Callback``, ``SecurityRequirement``).

``$ref`` strings are stored verbatim and never resolved.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, ClassVar, Dict, List, Optional, Union

from pydantic import Field, RootModel, ValidationInfo, model_validator

from oasmodel.base import (
    ExtensibleModel,
    GenericCodec,
    OpenAPIModel,
    generic_context,
)
from oasmodel.extensions import is_extension_key, stringify

HTTP_METHODS = ('get', 'put', 'post', 'delete', 'options', 'head', 'patch', 'trace')

REF_KEY = '$ref'

# Numeric constraints keep whichever literal the document used.
Number = Union[int, float]


class Contact(ExtensibleModel):
    name: str = ''
    url: str = ''
    email: str = ''


class License(ExtensibleModel):
    required_keys: ClassVar[frozenset[str]] = frozenset({'name'})

    name: str = ''
    url: str = ''


class Info(ExtensibleModel):
    """Metadata about the API."""

    required_keys: ClassVar[frozenset[str]] = frozenset({'title', 'version'})

    title: str = ''
    description: str = ''
    termsOfService: str = ''
    contact: Optional[Contact] = None
    license: Optional[License] = None
    version: str = ''


class ServerVariable(ExtensibleModel):
    """A variable for server URL template substitution."""

    required_keys: ClassVar[frozenset[str]] = frozenset({'default'})

    enum: List[str] = Field(default_factory=list)
    default: str = ''
    description: str = ''


class Server(ExtensibleModel):
    required_keys: ClassVar[frozenset[str]] = frozenset({'url'})

    url: str = ''
    description: str = ''
    variables: Dict[str, ServerVariable] = Field(default_factory=dict)


class ExternalDocumentation(ExtensibleModel):
    required_keys: ClassVar[frozenset[str]] = frozenset({'url'})

    description: str = ''
    url: str = ''


class Tag(ExtensibleModel):
    required_keys: ClassVar[frozenset[str]] = frozenset({'name'})

    name: str = ''
    description: str = ''
    externalDocs: Optional[ExternalDocumentation] = None


class XML(ExtensibleModel):
    name: str = ''
    namespace: str = ''
    prefix: str = ''
    attribute: bool = False
    wrapped: bool = False


class Discriminator(OpenAPIModel):
    """Polymorphism hint of a schema. Carries no extensions."""

    required_keys: ClassVar[frozenset[str]] = frozenset({'propertyName'})

    propertyName: str = ''
    mapping: Dict[str, str] = Field(default_factory=dict)


class Example(ExtensibleModel):
    ref: str = Field('', alias=REF_KEY)
    summary: str = ''
    description: str = ''
    value: Any = None
    externalValue: str = ''


class Schema(ExtensibleModel):
    """Schema Object: an extended subset of JSON Schema.

    Child schemas (``items``, ``not``, ``additionalProperties``, ``properties``
    and the ``allOf``/``anyOf``/``oneOf`` lists) are owned by their parent, so
    every level of a nested schema is an independent object.
    """

    ref: str = Field('', alias=REF_KEY)
    title: str = ''
    description: str = ''
    type: str = ''
    format: str = ''
    nullable: bool = False
    readOnly: bool = False
    writeOnly: bool = False
    deprecated: bool = False
    discriminator: Optional[Discriminator] = None
    xml: Optional[XML] = None
    externalDocs: Optional[ExternalDocumentation] = None
    example: Any = None
    default: Any = None
    enum: List[Any] = Field(default_factory=list)

    multipleOf: Optional[Number] = None
    maximum: Optional[Number] = None
    exclusiveMaximum: bool = False
    minimum: Optional[Number] = None
    exclusiveMinimum: bool = False
    maxLength: Optional[Number] = None
    minLength: Optional[Number] = None
    pattern: str = ''
    maxItems: Optional[Number] = None
    minItems: Optional[Number] = None
    uniqueItems: bool = False
    maxProperties: Optional[Number] = None
    minProperties: Optional[Number] = None
    required: List[str] = Field(default_factory=list)

    items: Optional[Schema] = None
    properties: Dict[str, Schema] = Field(default_factory=dict)
    additionalProperties: Optional[Union[Schema, bool]] = None
    allOf: List[Schema] = Field(default_factory=list)
    anyOf: List[Schema] = Field(default_factory=list)
    oneOf: List[Schema] = Field(default_factory=list)
    not_: Optional[Schema] = Field(None, alias='not')


class Encoding(ExtensibleModel):
    contentType: str = ''
    headers: Dict[str, Header] = Field(default_factory=dict)
    style: str = ''
    explode: bool = False
    allowReserved: bool = False


class MediaType(ExtensibleModel):
    schema_: Optional[Schema] = Field(None, alias='schema')
    example: Any = None
    examples: Dict[str, Example] = Field(default_factory=dict)
    encoding: Dict[str, Encoding] = Field(default_factory=dict)


class Header(ExtensibleModel):
    """Header Object; also the shared body of :class:`Parameter`."""

    ref: str = Field('', alias=REF_KEY)
    description: str = ''
    required: bool = False
    deprecated: bool = False
    allowEmptyValue: bool = False
    style: str = ''
    explode: bool = False
    allowReserved: bool = False
    schema_: Optional[Schema] = Field(None, alias='schema')
    example: Any = None
    examples: Dict[str, Example] = Field(default_factory=dict)
    content: Dict[str, MediaType] = Field(default_factory=dict)


class Parameter(Header):
    """A single operation parameter: every Header field plus name and location.

    ``in`` is one of query/header/path/cookie by convention but is stored as
    given.
    """

    required_keys: ClassVar[frozenset[str]] = frozenset({'name', 'in'})

    name: str = ''
    in_: str = Field('', alias='in')


class RequestBody(ExtensibleModel):
    required_keys: ClassVar[frozenset[str]] = frozenset({'content'})

    ref: str = Field('', alias=REF_KEY)
    description: str = ''
    content: Dict[str, MediaType] = Field(default_factory=dict)
    required: bool = False


class Link(ExtensibleModel):
    ref: str = Field('', alias=REF_KEY)
    operationRef: str = ''
    operationId: str = ''
    parameters: Dict[str, str] = Field(default_factory=dict)
    requestBody: str = ''
    description: str = ''
    server: Optional[Server] = None


class Response(ExtensibleModel):
    """A single response of an operation.

    Content keys are media types or media type ranges (``*/*``) and are kept
    verbatim; choosing the most specific one is up to the consumer.
    """

    required_keys: ClassVar[frozenset[str]] = frozenset({'description'})

    ref: str = Field('', alias=REF_KEY)
    description: str = ''
    headers: Dict[str, Header] = Field(default_factory=dict)
    content: Dict[str, MediaType] = Field(default_factory=dict)
    links: Dict[str, Link] = Field(default_factory=dict)


class Callback(ExtensibleModel):
    """Out-of-band callbacks, keyed by runtime expression.

    In the document the expressions, ``$ref`` and the extensions all share
    one flat mapping.
    """

    free_keys: ClassVar[bool] = True

    ref: str = Field('', alias=REF_KEY)
    callback_items: Dict[str, PathItem] = Field(default_factory=dict, exclude=True)

    @classmethod
    def _decode_entries(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        items = {
            key: {} if value is None else value
            for key, value in data.items()
            if key != REF_KEY and not is_extension_key(key)
        }
        return {'callback_items': items} if items else {}

    def _encode_entries(self) -> Dict[str, Any]:
        return self._encode_entry_map(
            {
                key: value
                for key, value in self.callback_items.items()
                if key != REF_KEY and not is_extension_key(key)
            }
        )


class Operation(ExtensibleModel):
    required_keys: ClassVar[frozenset[str]] = frozenset({'responses'})

    tags: List[str] = Field(default_factory=list)
    summary: str = ''
    description: str = ''
    externalDocs: Optional[ExternalDocumentation] = None
    operationId: str = ''
    parameters: List[Parameter] = Field(default_factory=list)
    requestBody: Optional[RequestBody] = None
    responses: Dict[str, Response] = Field(default_factory=dict)
    callbacks: Dict[str, Callback] = Field(default_factory=dict)
    deprecated: bool = False
    security: List[SecurityRequirement] = Field(default_factory=list)
    servers: List[Server] = Field(default_factory=list)


class PathItem(ExtensibleModel):
    """The operations available on a single path."""

    ref: str = Field('', alias=REF_KEY)
    summary: str = ''
    description: str = ''
    get: Optional[Operation] = None
    put: Optional[Operation] = None
    post: Optional[Operation] = None
    delete: Optional[Operation] = None
    options: Optional[Operation] = None
    head: Optional[Operation] = None
    patch: Optional[Operation] = None
    trace: Optional[Operation] = None
    servers: List[Server] = Field(default_factory=list)
    parameters: List[Parameter] = Field(default_factory=list)

    def operations(self) -> Iterator[tuple[str, Operation]]:
        """Yield ``(method, operation)`` for every defined method, in HTTP method order."""
        for method in HTTP_METHODS:
            operation = getattr(self, method)
            if operation is not None:
                yield method, operation


class Paths(ExtensibleModel):
    """Relative endpoint paths mapped to their path items.

    The document form is a single mapping in which path templates and
    ``x-`` extensions live side by side; decoding splits it into
    ``path_items`` and ``extensions``.
    """

    free_keys: ClassVar[bool] = True

    path_items: Dict[str, PathItem] = Field(default_factory=dict, exclude=True)

    @classmethod
    def _decode_entries(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        items = {
            key: {} if value is None else value
            for key, value in data.items()
            if not is_extension_key(key)
        }
        return {'path_items': items} if items else {}

    def _encode_entries(self) -> Dict[str, Any]:
        return self._encode_entry_map(
            {
                key: value
                for key, value in self.path_items.items()
                if not is_extension_key(key)
            }
        )

    def __getitem__(self, template: str) -> PathItem:
        return self.path_items[template]

    def __contains__(self, template: object) -> bool:
        return template in self.path_items

    def get(self, template: str, default: Optional[PathItem] = None) -> Optional[PathItem]:
        return self.path_items.get(template, default)

    def items(self) -> Iterator[tuple[str, PathItem]]:
        yield from self.path_items.items()


class OAuthFlow(ExtensibleModel):
    required_keys: ClassVar[frozenset[str]] = frozenset({'scopes'})

    authorizationUrl: str = ''
    tokenUrl: str = ''
    refreshUrl: str = ''
    scopes: Dict[str, str] = Field(default_factory=dict)


class OAuthFlows(ExtensibleModel):
    implicit: Optional[OAuthFlow] = None
    password: Optional[OAuthFlow] = None
    clientCredentials: Optional[OAuthFlow] = None
    authorizationCode: Optional[OAuthFlow] = None


class SecurityScheme(ExtensibleModel):
    """A security scheme usable by operations.

    Which fields apply depends on ``type`` (apiKey, http, oauth2,
    openIdConnect); all are kept as given.
    """

    required_keys: ClassVar[frozenset[str]] = frozenset({'type'})

    ref: str = Field('', alias=REF_KEY)
    type: str = ''
    description: str = ''
    name: str = ''
    in_: str = Field('', alias='in')
    scheme: str = ''
    bearerFormat: str = ''
    flows: Optional[OAuthFlows] = None
    openIdConnectUrl: str = ''


class SecurityRequirement(GenericCodec, RootModel[Dict[str, List[str]]]):
    """Security scheme names mapped to the scopes required from each.

    An empty requirement (``{}``) makes security optional when listed among
    the alternatives of ``OpenAPI.security`` or ``Operation.security``.
    """

    root: Dict[str, List[str]] = Field(default_factory=dict)

    @model_validator(mode='before')
    @classmethod
    def _decode_generic(cls, data: Any, info: ValidationInfo) -> Any:
        generic, _ = generic_context(info)
        if not generic or isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise ValueError(f'{cls.__name__} must be a mapping, got {type(data).__name__}')
        requirement = {}
        for name, scopes in data.items():
            if scopes is None:
                scopes = []
            elif isinstance(scopes, (list, tuple)):
                scopes = [stringify(scope) for scope in scopes]
            requirement[stringify(name)] = scopes
        return requirement

    def to_generic(self) -> Dict[str, Any]:
        return {name: list(scopes) for name, scopes in self.root.items()}

    def __getitem__(self, name: str) -> List[str]:
        return self.root[name]

    def __contains__(self, name: object) -> bool:
        return name in self.root


class Components(ExtensibleModel):
    """Reusable objects, each kind in its own name-keyed map."""

    schemas: Dict[str, Schema] = Field(default_factory=dict)
    responses: Dict[str, Response] = Field(default_factory=dict)
    parameters: Dict[str, Parameter] = Field(default_factory=dict)
    examples: Dict[str, Example] = Field(default_factory=dict)
    requestBodies: Dict[str, RequestBody] = Field(default_factory=dict)
    headers: Dict[str, Header] = Field(default_factory=dict)
    securitySchemes: Dict[str, SecurityScheme] = Field(default_factory=dict)
    links: Dict[str, Link] = Field(default_factory=dict)
    callbacks: Dict[str, Callback] = Field(default_factory=dict)


class OpenAPI(ExtensibleModel):
    """Root of an OpenAPI 3.0 document."""

    required_keys: ClassVar[frozenset[str]] = frozenset({'openapi', 'info', 'paths'})

    openapi: str = ''
    info: Info = Field(default_factory=Info)
    servers: List[Server] = Field(default_factory=list)
    paths: Paths = Field(default_factory=Paths)
    components: Optional[Components] = None
    security: List[SecurityRequirement] = Field(default_factory=list)
    tags: List[Tag] = Field(default_factory=list)
    externalDocs: Optional[ExternalDocumentation] = None


Schema.model_rebuild()
Encoding.model_rebuild()
MediaType.model_rebuild()
Header.model_rebuild()
Parameter.model_rebuild()
Callback.model_rebuild()
Operation.model_rebuild()
PathItem.model_rebuild()
Paths.model_rebuild()
Response.model_rebuild()
RequestBody.model_rebuild()
Components.model_rebuild()
OpenAPI.model_rebuild()
