"""Test fixtures for oasmodel tests.

This module provides sample OpenAPI documents in their generic form. The
documents below are canonical: every key they contain survives decoding and is
written back unchanged, so ``OpenAPI.from_generic(doc).to_generic() == doc``.
"""

# Minimal OpenAPI 3.0 document
MINIMAL_OPENAPI_SPEC = {
    'openapi': '3.0.3',
    'info': {'title': 'Minimal API', 'version': '1.0.0'},
    'paths': {},
}

# Petstore with references, parameters, security, callbacks and extensions
PETSTORE_SPEC = {
    'openapi': '3.0.3',
    'info': {
        'title': 'Swagger Petstore',
        'description': 'A sample API that uses a petstore as an example',
        'termsOfService': 'https://swagger.io/terms/',
        'contact': {
            'name': 'Swagger API Team',
            'url': 'https://swagger.io',
            'email': 'apiteam@swagger.io',
        },
        'license': {
            'name': 'Apache 2.0',
            'url': 'https://www.apache.org/licenses/LICENSE-2.0.html',
        },
        'version': '1.0.0',
        'x-logo': {'url': 'https://example.com/logo.png', 'altText': 'Petstore'},
    },
    'servers': [
        {
            'url': 'https://{environment}.petstore.example.com/v1',
            'description': 'Petstore server',
            'variables': {
                'environment': {
                    'enum': ['api', 'staging'],
                    'default': 'api',
                    'description': 'Deployment environment',
                }
            },
        }
    ],
    'paths': {
        '/pets': {
            'summary': 'Pet collection',
            'get': {
                'tags': ['pets'],
                'summary': 'List all pets',
                'operationId': 'listPets',
                'parameters': [
                    {'$ref': '#/components/parameters/limitParam'},
                    {
                        'description': 'Tags to filter by',
                        'style': 'form',
                        'explode': True,
                        'schema': {'type': 'array', 'items': {'type': 'string'}},
                        'name': 'tags',
                        'in': 'query',
                    },
                ],
                'responses': {
                    '200': {
                        'description': 'A paged array of pets',
                        'headers': {
                            'x-next': {
                                'description': 'A link to the next page of responses',
                                'schema': {'type': 'string'},
                            }
                        },
                        'content': {
                            'application/json': {
                                'schema': {'$ref': '#/components/schemas/Pets'}
                            }
                        },
                    },
                    'default': {'$ref': '#/components/responses/Error'},
                },
            },
            'post': {
                'tags': ['pets'],
                'summary': 'Create a pet',
                'operationId': 'createPets',
                'requestBody': {
                    'description': 'Pet to add to the store',
                    'content': {
                        'application/json': {
                            'schema': {'$ref': '#/components/schemas/NewPet'},
                            'examples': {
                                'cat': {
                                    'summary': 'A cat',
                                    'value': {'name': 'Tom', 'tag': 'cat'},
                                }
                            },
                        }
                    },
                    'required': True,
                },
                'responses': {
                    '201': {
                        'description': 'Pet created',
                        'links': {
                            'GetPetById': {
                                'operationId': 'showPetById',
                                'parameters': {'petId': '$response.body#/id'},
                            }
                        },
                    },
                    'default': {'$ref': '#/components/responses/Error'},
                },
                'callbacks': {
                    'onAdopted': {
                        '{$request.body#/callbackUrl}': {
                            'post': {
                                'requestBody': {
                                    'content': {
                                        'application/json': {
                                            'schema': {'$ref': '#/components/schemas/Pet'}
                                        }
                                    }
                                },
                                'responses': {'200': {'description': 'Callback received'}},
                            }
                        }
                    }
                },
                'security': [{'petstore_auth': ['write:pets', 'read:pets']}],
                'x-codegen-request-body-name': 'body',
            },
        },
        '/pets/{petId}': {
            'get': {
                'tags': ['pets'],
                'summary': 'Info for a specific pet',
                'operationId': 'showPetById',
                'responses': {
                    '200': {
                        'description': 'Expected response to a valid request',
                        'content': {
                            'application/json': {
                                'schema': {'$ref': '#/components/schemas/Pet'}
                            }
                        },
                    },
                    'default': {'$ref': '#/components/responses/Error'},
                },
                'deprecated': True,
            },
            'parameters': [
                {
                    'description': 'The id of the pet to retrieve',
                    'required': True,
                    'schema': {'type': 'integer', 'format': 'int64', 'minimum': 1},
                    'name': 'petId',
                    'in': 'path',
                }
            ],
        },
        'x-paths-owner': 'pets-team',
    },
    'components': {
        'schemas': {
            'NewPet': {
                'type': 'object',
                'required': ['name'],
                'properties': {
                    'name': {'type': 'string', 'maxLength': 64},
                    'tag': {'type': 'string', 'nullable': True},
                },
            },
            'Pet': {
                'allOf': [
                    {'$ref': '#/components/schemas/NewPet'},
                    {
                        'type': 'object',
                        'required': ['id'],
                        'properties': {
                            'id': {'type': 'integer', 'format': 'int64', 'readOnly': True}
                        },
                    },
                ],
            },
            'Pets': {
                'type': 'array',
                'maxItems': 100,
                'items': {'$ref': '#/components/schemas/Pet'},
            },
            'Error': {
                'type': 'object',
                'required': ['code', 'message'],
                'properties': {
                    'code': {'type': 'integer', 'format': 'int32'},
                    'message': {'type': 'string'},
                },
                'additionalProperties': False,
            },
        },
        'responses': {
            'Error': {
                'description': 'unexpected error',
                'content': {
                    'application/json': {'schema': {'$ref': '#/components/schemas/Error'}}
                },
            }
        },
        'parameters': {
            'limitParam': {
                'description': 'How many items to return at one time (max 100)',
                'schema': {'type': 'integer', 'format': 'int32', 'maximum': 100},
                'name': 'limit',
                'in': 'query',
            }
        },
        'securitySchemes': {
            'petstore_auth': {
                'type': 'oauth2',
                'flows': {
                    'implicit': {
                        'authorizationUrl': 'https://petstore.example.com/oauth/dialog',
                        'scopes': {
                            'write:pets': 'modify pets in your account',
                            'read:pets': 'read your pets',
                        },
                    }
                },
            },
            'api_key': {'type': 'apiKey', 'name': 'api_key', 'in': 'header'},
        },
    },
    'security': [{'api_key': []}, {}],
    'tags': [
        {
            'name': 'pets',
            'description': 'Everything about your pets',
            'externalDocs': {'url': 'https://swagger.io/docs'},
        }
    ],
    'x-generated-by': 'hand',
}

# The same kind of document written the way people write YAML by hand:
# unquoted status codes, unquoted numeric enum members, a bare date and
# null path items.
HANDWRITTEN_YAML = """\
openapi: 3.0.0
info:
  title: Handwritten
  version: 2020-01-01
servers:
  - url: https://{host}:{port}/v1
    variables:
      host:
        default: api.example.com
      port:
        enum: [8443, 443]
        default: '8443'
paths:
  /status:
    get:
      responses:
        200:
          description: OK
        404:
          description: Not found
  /reserved: ~
x-audience: internal
"""
