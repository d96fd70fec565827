from oasmodel.openapi.v3 import OpenAPI

__all__ = [
    'OpenAPI',
]
