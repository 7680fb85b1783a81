"""Build options and document defaults."""

from typing import Literal

from pydantic import BaseModel

SWAGGER_VERSION = "2.0"

SWAGGER_DEFAULTS = {
    "swagger": SWAGGER_VERSION,
    "info": {"title": "Swagger API", "version": "0.0.1"},
    "produces": ["application/json"],
    "consumes": ["application/json"],
}


class BuildOptions(BaseModel):
    """Options controlling a single document build."""

    spec_version: Literal["1.2", "2.0"] = SWAGGER_VERSION
    on_name_collision: Literal["overwrite", "error"] = "overwrite"
