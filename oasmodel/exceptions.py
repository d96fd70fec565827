"""Custom exceptions for oasmodel.

This module defines the hierarchy of exceptions raised while converting
OpenAPI documents between their typed, generic and text forms. Every error
that wraps another one keeps it as ``cause`` and is raised with
``raise ... from cause`` so the full chain stays inspectable.
"""


class OasModelError(Exception):
    """Base exception for all oasmodel errors.

    All exceptions raised by oasmodel inherit from this class, making it easy
    to catch every codec failure with a single except clause.

    Example:
        try:
            document = OpenAPI.from_yaml(raw)
        except OasModelError as e:
            print(f"oasmodel error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class DecodeError(OasModelError):
    """Failed to decode an entity from its generic or text form.

    Raised when the input is not valid JSON/YAML, when a structured field
    does not have the shape of its child entity (for example ``items: 5``),
    or when strict mode rejects a mistyped scalar.

    Attributes:
        entity: Name of the entity (or text format) being decoded.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, entity: str, cause: Exception | None = None):
        self.entity = entity
        self.cause = cause
        message = f"Failed to decode '{entity}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class EncodeError(OasModelError):
    """Failed to encode an entity into its generic or text form.

    Nested failures are chained, so walking ``__cause__`` from the outermost
    error leads to the child that could not be encoded.

    Attributes:
        entity: Name of the entity being encoded.
        field: The key of the child whose encoding failed, if known.
        cause: The underlying exception that caused the failure.
    """

    def __init__(
        self, entity: str, field: str | None = None, cause: Exception | None = None
    ):
        self.entity = entity
        self.field = field
        self.cause = cause
        message = f"Failed to encode '{entity}'"
        if field:
            message += f" (field: {field})"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class CloneError(OasModelError):
    """Failed to deep copy an entity.

    Cloning goes through the generic form, so this only happens when the
    entity itself cannot be encoded or decoded back.

    Attributes:
        entity: Name of the entity being cloned.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, entity: str, cause: Exception | None = None):
        self.entity = entity
        self.cause = cause
        message = f"Failed to clone '{entity}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class ConfigurationError(OasModelError):
    """Error in configuration.

    This exception is raised when the codec configuration is invalid or
    cannot be loaded.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)
