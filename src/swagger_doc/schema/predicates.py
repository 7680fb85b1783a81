"""Classify schema nodes."""

from .base import ANYTHING, NOTHING, Leaf, MapSchema, SequenceSchema, SetSchema, schema_name

PLACEHOLDER_NAMES = {NOTHING.name, ANYTHING.name}


def is_map(schema) -> bool:
    return isinstance(schema, MapSchema)


def is_sequence(schema) -> bool:
    return isinstance(schema, SequenceSchema)


def is_set(schema) -> bool:
    return isinstance(schema, SetSchema)


def is_container(schema) -> bool:
    return isinstance(schema, (SequenceSchema, SetSchema))


def is_leaf(schema) -> bool:
    return isinstance(schema, Leaf)


def requires_definition(schema) -> bool:
    """True if the schema should be listed under ``definitions``.

    Only named maps are. Anonymous nodes and the Nothing/Anything
    placeholders never are.
    """
    name = schema_name(schema)
    return is_map(schema) and name is not None and name not in PLACEHOLDER_NAMES


def element_schema(schema):
    """Unwrap nested containers down to the element schema."""
    while is_container(schema):
        schema = schema.items
    return schema


def property_fields(schema: MapSchema):
    """Fields of a map node that name literal properties."""
    return [f for f in schema.fields if not f.predicate]


def required_keys(schema: MapSchema) -> list[str]:
    return [f.key for f in property_fields(schema) if f.required]


def children(schema) -> list:
    """Direct child schemas of a node, in declaration order."""
    if is_map(schema):
        return [f.value for f in schema.fields]
    if is_container(schema):
        return [schema.items]
    return []


def anonymized(schema):
    """Copy of a schema tree with every name cleared, for shape comparison."""
    if is_map(schema):
        fields = [f.model_copy(update={"value": anonymized(f.value)}) for f in schema.fields]
        return schema.model_copy(update={"name": None, "fields": fields})
    if is_container(schema):
        return schema.model_copy(update={"name": None, "items": anonymized(schema.items)})
    return schema.model_copy(update={"name": None})


def same_shape(a, b) -> bool:
    return anonymized(a) == anonymized(b)
