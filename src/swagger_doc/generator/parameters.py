"""Convert route parameters into Swagger parameter objects."""

from swagger_doc.config import SWAGGER_VERSION
from swagger_doc.errors import SchemaShapeError
from swagger_doc.parser.base import Parameter
from swagger_doc.schema.base import schema_name
from swagger_doc.schema.json_schema import to_json_schema, to_parameter
from swagger_doc.schema.predicates import is_leaf, is_map, is_sequence, is_set, property_fields

DEFAULT_BODY_NAME = "body"


def _body_parameter(schema, spec_version: str) -> dict:
    if is_sequence(schema) or is_set(schema):
        model = schema.items
        model_json = to_json_schema(model, spec_version)
        description = model_json.pop("description", None)
        body_schema = {"type": "array", "items": model_json}
        if is_set(schema):
            body_schema["uniqueItems"] = True
    elif is_leaf(schema):
        raise SchemaShapeError(
            f"Body parameter must be a map or a sequence/set, got a '{schema.type or 'any'}' leaf"
        )
    else:
        model = schema
        body_schema = to_json_schema(model, spec_version)
        description = body_schema.pop("description", None)

    parameter = {"in": "body", "name": schema_name(model) or DEFAULT_BODY_NAME}
    if description:
        parameter["description"] = description
    parameter["required"] = True
    parameter["schema"] = body_schema
    return parameter


def _location_parameters(location: str, schema, spec_version: str) -> list[dict]:
    if not is_map(schema):
        raise SchemaShapeError(f"'{location}' parameters must be described by a map schema")

    return [
        to_parameter(
            {"in": location, "name": f.key, "required": f.required},
            to_json_schema(f.value, spec_version),
        )
        for f in property_fields(schema)
    ]


def extract_parameter(parameter: Parameter, spec_version: str = SWAGGER_VERSION) -> list[dict]:
    """Swagger parameters for one declared parameter. No schema, no parameters."""
    if parameter.schema_ is None:
        return []
    if parameter.location == "body":
        return [_body_parameter(parameter.schema_, spec_version)]
    return _location_parameters(parameter.location, parameter.schema_, spec_version)


def convert_parameters(parameters: list[Parameter], spec_version: str = SWAGGER_VERSION) -> list[dict]:
    result = []
    for parameter in parameters:
        result.extend(extract_parameter(parameter, spec_version))
    return result
