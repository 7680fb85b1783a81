"""Convert schema nodes to JSON-Schema fragments.

The Swagger spec version is passed in by the caller: version ``"2.0"``
references definitions as ``#/definitions/<Name>``, version ``"1.2"``
references them by bare name.
"""

from typing import Any

from swagger_doc.config import SWAGGER_VERSION
from swagger_doc.schema.predicates import (
    is_container,
    is_leaf,
    is_set,
    property_fields,
    required_keys,
    requires_definition,
)

REF_PREFIXES = {"1.2": "", "2.0": "#/definitions/"}


def definition_ref(name: str, spec_version: str = SWAGGER_VERSION) -> str:
    return REF_PREFIXES[spec_version] + name


def to_json_schema(schema, spec_version: str = SWAGGER_VERSION) -> dict[str, Any]:
    """Return the JSON-Schema fragment describing ``schema``."""
    if is_leaf(schema):
        result = _leaf_schema(schema)
    elif is_container(schema):
        result = {"type": "array", "items": to_json_schema(schema.items, spec_version)}
        if is_set(schema):
            result["uniqueItems"] = True
    elif requires_definition(schema):
        result = {"$ref": definition_ref(schema.name, spec_version)}
    else:
        result = _object_schema(schema, spec_version)

    if schema.description:
        result["description"] = schema.description
    return result


def properties(schema, spec_version: str = SWAGGER_VERSION) -> dict[str, dict]:
    """Map each literal key of a map node to its value's JSON-Schema."""
    return {f.key: to_json_schema(f.value, spec_version) for f in property_fields(schema)}


def _leaf_schema(schema) -> dict[str, Any]:
    result: dict[str, Any] = {}
    if schema.type:
        result["type"] = schema.type
    if schema.format:
        result["format"] = schema.format
    if schema.enum is not None:
        result["enum"] = list(schema.enum)
    result.update(schema.constraints)
    return result


def _object_schema(schema, spec_version: str) -> dict[str, Any]:
    result: dict[str, Any] = {
        "type": "object",
        "properties": properties(schema, spec_version),
    }
    required = required_keys(schema)
    if required:
        result["required"] = required

    predicates = [f for f in schema.fields if f.predicate]
    if predicates:
        result["additionalProperties"] = to_json_schema(predicates[0].value, spec_version)
    return result


def to_parameter(base: dict[str, Any], schema_json: dict[str, Any]) -> dict[str, Any]:
    """Merge a parameter's location fields with its value's JSON-Schema."""
    return {**base, **{k: v for k, v in schema_json.items() if k not in base}}
