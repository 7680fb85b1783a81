"""Collect the named schemas used by routes into Swagger definitions."""

import logging

from swagger_doc.config import SWAGGER_VERSION
from swagger_doc.errors import DefinitionConflictError
from swagger_doc.parser.base import ApiDocument
from swagger_doc.schema.base import schema_name
from swagger_doc.schema.json_schema import properties
from swagger_doc.schema.naming import with_named_sub_schemas
from swagger_doc.schema.predicates import (
    children,
    element_schema,
    is_map,
    property_fields,
    required_keys,
    requires_definition,
    same_shape,
)

logger = logging.getLogger(__name__)


def _walk(schema):
    """Yield every node of a schema tree, pre-order."""
    yield schema
    for child in children(schema):
        yield from _walk(child)


def _outermost_models(schema):
    if requires_definition(schema):
        yield schema
        return
    for child in children(schema):
        yield from _outermost_models(child)


def _route_schemas(doc: ApiDocument) -> list:
    """Schemas referenced by every route, containers unwrapped.

    That is body parameters, the values of the other parameters' keys, and
    responses.
    """
    schemas = []
    for operations in doc.paths.values():
        for operation in operations:
            for parameter in operation.parameters:
                if parameter.schema_ is None:
                    continue
                if parameter.location == "body":
                    schemas.append(element_schema(parameter.schema_))
                elif is_map(parameter.schema_):
                    schemas.extend(element_schema(f.value) for f in property_fields(parameter.schema_))
            for response in operation.responses.values():
                if response.schema_ is not None:
                    schemas.append(element_schema(response.schema_))
    return schemas


def extract_models(doc: ApiDocument) -> list:
    """Return the distinct top-level models used by the routes of ``doc``.

    Named schemas are run through :func:`with_named_sub_schemas`. Anonymous
    schemas are not models themselves, but the named schemas nested in them
    are. When several models share a name, the last one seen is kept.
    """
    models = []
    for schema in _route_schemas(doc):
        models.extend(_outermost_models(schema))

    by_name = {}
    for model in models:
        named = with_named_sub_schemas(model)
        by_name[schema_name(named)] = named
    logger.debug("Extracted %d models from %d paths", len(by_name), len(doc.paths))
    return list(by_name.values())


def collect_models(schemas: list, on_name_collision: str = "overwrite") -> dict:
    """Gather every named node, at any depth, into one name -> schema registry.

    Later schemas overwrite earlier ones of the same name. With
    ``on_name_collision="error"``, a structurally different schema
    claiming an already registered name raises DefinitionConflictError.
    """
    registry = {}
    for schema in schemas:
        for node in _walk(schema):
            if not requires_definition(node):
                continue
            name = schema_name(node)
            previous = registry.get(name)
            if previous is not None and not same_shape(previous, node):
                if on_name_collision == "error":
                    raise DefinitionConflictError(name)
                logger.warning("Definition '%s' overwritten by a different schema", name)
            registry[name] = node
    return registry


def transform(schema, spec_version: str = SWAGGER_VERSION) -> dict:
    """Convert a map schema to ``{"properties": ..., "required": [...]}``.

    ``required`` is left out when no key is required.
    """
    result = {"properties": properties(schema, spec_version)}
    required = required_keys(schema)
    if required:
        result["required"] = required
    return result


def transform_models(
    schemas: list,
    spec_version: str = SWAGGER_VERSION,
    on_name_collision: str = "overwrite",
) -> dict[str, dict]:
    """Build the Swagger ``definitions`` section for the given models."""
    registry = collect_models(schemas, on_name_collision)
    logger.debug("Collected %d definitions", len(registry))
    return {str(name): transform(schema, spec_version) for name, schema in registry.items()}
