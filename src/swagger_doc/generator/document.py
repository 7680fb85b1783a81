"""Assemble the Swagger 2.0 document."""

import copy
import logging
import re

from swagger_doc.config import SWAGGER_DEFAULTS, BuildOptions
from swagger_doc.generator.models import extract_models, transform_models
from swagger_doc.generator.parameters import convert_parameters
from swagger_doc.generator.responses import convert_responses
from swagger_doc.parser.base import ApiDocument, Operation

logger = logging.getLogger(__name__)

PATH_PARAM = re.compile(r":([^/]+)")


def swagger_path(uri: str) -> str:
    """Rewrite ``:param`` path tokens as ``{param}``."""
    return PATH_PARAM.sub(r"{\1}", uri)


def transform_path_operations(operations: list[Operation], spec_version: str) -> dict[str, dict]:
    """Map each operation's method to its Swagger operation object."""
    result = {}
    for operation in operations:
        converted = dict(operation.model_extra or {})
        converted["parameters"] = convert_parameters(operation.parameters, spec_version)
        converted["responses"] = convert_responses(operation.responses, spec_version)
        result[operation.method.lower()] = converted
    return result


def extract_paths_and_definitions(doc: ApiDocument, options: BuildOptions) -> tuple[dict, dict]:
    paths = {
        swagger_path(template): transform_path_operations(operations, options.spec_version)
        for template, operations in doc.paths.items()
    }
    definitions = transform_models(
        extract_models(doc),
        spec_version=options.spec_version,
        on_name_collision=options.on_name_collision,
    )
    return paths, definitions


def build_document(doc: ApiDocument | dict, options: BuildOptions | None = None) -> dict:
    """Build a Swagger 2.0 document from route metadata.

    Defaults are overridden by the input's own top-level fields, which are
    in turn overridden by the generated ``paths`` and ``definitions``.
    """
    if not isinstance(doc, ApiDocument):
        doc = ApiDocument.model_validate(doc)
    options = options or BuildOptions()

    paths, definitions = extract_paths_and_definitions(doc, options)
    logger.debug("Built %d paths and %d definitions", len(paths), len(definitions))

    result = copy.deepcopy(SWAGGER_DEFAULTS)
    result.update(doc.model_extra or {})
    result["paths"] = paths
    result["definitions"] = definitions
    return result
