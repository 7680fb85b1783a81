"""Exceptions raised while building Swagger documents."""


class SwaggerDocError(Exception):
    """Base class for all swagger-doc errors."""


class SchemaShapeError(SwaggerDocError):
    """A parameter schema does not have the shape its location requires."""


class DefinitionConflictError(SwaggerDocError):
    """Two structurally different schemas claim the same definition name."""

    def __init__(self, name: str):
        super().__init__(f"Conflicting schemas registered under definition name '{name}'")
        self.name = name


class RouteFileError(SwaggerDocError):
    """A route description file could not be read or validated."""
