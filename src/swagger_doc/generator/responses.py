"""Convert route responses into Swagger response objects."""

from swagger_doc.config import SWAGGER_VERSION
from swagger_doc.generator.models import transform
from swagger_doc.parser.base import Response
from swagger_doc.schema.json_schema import definition_ref, to_json_schema
from swagger_doc.schema.predicates import is_map, requires_definition


def response_schema(schema, spec_version: str = SWAGGER_VERSION):
    """A ``$ref`` string for models, an inline fragment for anything else."""
    if requires_definition(schema):
        return definition_ref(schema.name, spec_version)
    if is_map(schema):
        return transform(schema, spec_version)
    return to_json_schema(schema, spec_version)


def convert_responses(responses: dict[int | str, Response], spec_version: str = SWAGGER_VERSION) -> dict[str, dict]:
    result = {}
    for status, response in responses.items():
        converted = response.model_dump(exclude={"schema_"}, exclude_none=True)
        if response.schema_ is not None:
            converted["schema"] = response_schema(response.schema_, spec_version)
        result[str(status)] = converted
    return result
