"""OpenAPI 3.0 document model."""

from oasmodel.openapi.v3.v3 import (
    HTTP_METHODS,
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
    'HTTP_METHODS',
    'XML',
    'Callback',
    'Components',
    'Contact',
    'Discriminator',
    'Encoding',
    'Example',
    'ExternalDocumentation',
    'Header',
    'Info',
    'License',
    'Link',
    'MediaType',
    'OAuthFlow',
    'OAuthFlows',
    'OpenAPI',
    'Operation',
    'Parameter',
    'PathItem',
    'Paths',
    'RequestBody',
    'Response',
    'Schema',
    'SecurityRequirement',
    'SecurityScheme',
    'Server',
    'ServerVariable',
    'Tag',
]
