"""oasmodel - OpenAPI 3.x documents as typed Python objects.

oasmodel models every entity of an OpenAPI 3.0 document as a Pydantic model
and converts it to and from JSON and YAML through one generic form, so the two
text formats always agree. Specification extensions (``x-`` keys) are kept
on every entity that allows them.

Quick Start:
    >>> from oasmodel import OpenAPI
    >>>
    >>> document = OpenAPI.from_yaml(open('openapi.yaml', 'rb').read())
    >>> document.info.title
    'Petstore'
    >>> document.paths['/pets'].get.operationId
    'listPets'
    >>> document.to_json()
    b'{\\n  "openapi": "3.0.0", ...'

Every entity offers ``to_generic``/``from_generic``, ``to_json``/``from_json``,
``to_yaml``/``from_yaml`` and ``clone``.
"""

from importlib.metadata import PackageNotFoundError, version

from oasmodel.config import CodecConfig, get_config
from oasmodel.document import dumps, loads
from oasmodel.exceptions import (
    CloneError,
    ConfigurationError,
    DecodeError,
    EncodeError,
    OasModelError,
)
from oasmodel.extensions import Extensions, is_extension_key, normalize_value
from oasmodel.openapi.v3 import (
    XML,
    Callback,
    Components,
    Contact,
    Discriminator,
    Encoding,
    Example,
    ExternalDocumentation,
    Header,
    Info,
    License,
    Link,
    MediaType,
    OAuthFlow,
    OAuthFlows,
    OpenAPI,
    Operation,
    Parameter,
    PathItem,
    Paths,
    RequestBody,
    Response,
    Schema,
    SecurityRequirement,
    SecurityScheme,
    Server,
    ServerVariable,
    Tag,
)

__all__ = [
    # Documents
    'loads',
    'dumps',
    # Entities
    'OpenAPI',
    'Info',
    'Contact',
    'License',
    'Server',
    'ServerVariable',
    'Paths',
    'PathItem',
    'Operation',
    'Parameter',
    'Header',
    'RequestBody',
    'MediaType',
    'Encoding',
    'Response',
    'Link',
    'Callback',
    'Example',
    'Schema',
    'Discriminator',
    'XML',
    'Components',
    'SecurityScheme',
    'SecurityRequirement',
    'OAuthFlows',
    'OAuthFlow',
    'Tag',
    'ExternalDocumentation',
    # Extensions
    'Extensions',
    'is_extension_key',
    'normalize_value',
    # Configuration
    'CodecConfig',
    'get_config',
    # Exceptions
    'OasModelError',
    'DecodeError',
    'EncodeError',
    'CloneError',
    'ConfigurationError',
]

try:
    __version__ = version('oasmodel')
except PackageNotFoundError:
    __version__ = 'unknown'
