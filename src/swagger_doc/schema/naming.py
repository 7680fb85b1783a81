"""Generate names for anonymous sub-schemas."""

import uuid

from .base import schema_name
from .predicates import is_container, is_map


def full_name(path: list[str]) -> str:
    """CamelCase a naming path: ``["Pet", "owner", "address"]`` -> ``PetOwnerAddress``."""
    return "".join(segment[:1].upper() + segment[1:] for segment in path)


def _name_schemas(path: list[str], schema):
    if is_map(schema):
        if len(path) > 1 and schema_name(schema):
            return schema
        fields = [
            f if f.predicate else f.model_copy(update={"value": _name_schemas(path + [f.key], f.value)})
            for f in schema.fields
        ]
        name = schema_name(schema) if len(path) == 1 and schema_name(schema) else full_name(path)
        return schema.model_copy(update={"name": name, "fields": fields})

    if is_container(schema):
        return schema.model_copy(update={"items": _name_schemas(path, schema.items)})

    return schema


def with_named_sub_schemas(schema):
    """Name every anonymous map between the root and any named schema.

    Generated names are the root schema's name (or a generated
    ``schema<random hex>`` placeholder) followed by every key on the way down,
    CamelCased. Explicit names are left alone, and named sub-schemas are
    not descended into.
    """
    return _name_schemas([schema_name(schema) or f"schema{uuid.uuid4().hex[:12]}"], schema)
