"""Load route descriptions from YAML or JSON files."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from swagger_doc.errors import RouteFileError
from swagger_doc.parser.base import ApiDocument


def load_routes(file_path: Path) -> ApiDocument:
    """Parse a YAML/JSON route description file into an ApiDocument."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RouteFileError(f"{file_path}: cannot read: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise RouteFileError(f"{file_path}: not valid YAML/JSON: {e}") from e

    if not isinstance(data, dict):
        raise RouteFileError(f"{file_path}: expected a mapping at the top level")

    try:
        return ApiDocument.model_validate(data)
    except ValidationError as e:
        raise RouteFileError(f"{file_path}: invalid route description:\n{e}") from e
