"""Route metadata models.

The routing layer describes its API as an ``ApiDocument``: path templates
mapped to per-method operations, whose parameters and responses carry
schema trees. Unknown fields pass through to the generated document.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from swagger_doc.schema.base import SchemaNode

ParamLocation = Literal["body", "query", "path", "header", "formData"]


class Parameter(BaseModel):
    """Parameters of one location (body / query / path / header / formData)."""

    model_config = ConfigDict(populate_by_name=True)

    location: ParamLocation
    schema_: SchemaNode | None = Field(default=None, alias="schema")


class Response(BaseModel):
    """A response for one status code. Undeclared fields stay out of the output."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    description: str | None = None
    schema_: SchemaNode | None = Field(default=None, alias="schema")
    headers: dict | None = None


class Operation(BaseModel):
    """A single route: one HTTP method on one path template."""

    model_config = ConfigDict(extra="allow")

    method: str  # get / post / put / delete / patch
    parameters: list[Parameter] = []
    responses: dict[int | str, Response] = {}  # {status_code: Response}


class ApiDocument(BaseModel):
    """Routes keyed by path template (``/pets/:id``), plus top-level fields."""

    model_config = ConfigDict(extra="allow")

    paths: dict[str, list[Operation]] = {}
