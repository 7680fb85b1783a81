"""Schema tree models.

A schema tree describes the shape of a value: maps with ordered keys,
sequence and set containers wrapping one element schema, and leaf
primitives. Any node may carry an explicit name; named maps become
entries of the Swagger ``definitions`` section.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class SchemaBase(BaseModel):
    """Fields shared by every schema node."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    description: str | None = None


class Leaf(SchemaBase):
    """A primitive or opaque value. ``type=None`` accepts anything."""

    kind: Literal["leaf"] = "leaf"
    type: str | None = None  # string / integer / number / boolean / ...
    format: str | None = None
    enum: list[Any] | None = None
    constraints: dict[str, Any] = {}  # minimum, maximum, pattern, default, etc.


class MapField(BaseModel):
    """One key of a map node and the schema of its value.

    A predicate key is a wildcard (``*``, "any string key") rather than a
    literal property name.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    value: "SchemaNode"
    required: bool = True
    predicate: bool = False


class MapSchema(SchemaBase):
    kind: Literal["map"] = "map"
    fields: list[MapField] = []


class SequenceSchema(SchemaBase):
    kind: Literal["sequence"] = "sequence"
    items: "SchemaNode"


class SetSchema(SchemaBase):
    kind: Literal["set"] = "set"
    items: "SchemaNode"


SchemaNode = Annotated[
    Union[MapSchema, SequenceSchema, SetSchema, Leaf],
    Field(discriminator="kind"),
]

MapField.model_rebuild()
MapSchema.model_rebuild()
SequenceSchema.model_rebuild()
SetSchema.model_rebuild()


NOTHING = MapSchema(name="Nothing")
ANYTHING = MapSchema(
    name="Anything",
    fields=[MapField(key="*", value=Leaf(), required=False, predicate=True)],
)


def schema_name(schema) -> str | None:
    """Return the explicit name of a schema node, or None."""
    return getattr(schema, "name", None)
