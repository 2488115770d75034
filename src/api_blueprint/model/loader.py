"""Load a serialized documentation tree (YAML or JSON) into an Api model."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from api_blueprint.errors import DocumentationLoadError
from api_blueprint.model.base import Api

logger = logging.getLogger(__name__)


def load_documentation(file_path: Path) -> Api:
    """Read a documentation file and validate it into an Api tree.

    JSON is a subset of YAML, so both formats go through ``yaml.safe_load``.
    A top-level ``documentation`` key is unwrapped when present.
    """
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentationLoadError(f"Cannot read {file_path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentationLoadError(f"Invalid YAML/JSON in {file_path}: {e}") from e

    return parse_documentation(data, source=str(file_path))


def parse_documentation(data: object, source: str = "<data>") -> Api:
    """Validate an already-decoded documentation mapping."""
    if not isinstance(data, dict):
        raise DocumentationLoadError(f"{source}: expected a mapping at the top level")

    if "documentation" in data and isinstance(data["documentation"], dict):
        data = data["documentation"]

    try:
        api = Api.model_validate(data)
    except ValidationError as e:
        raise DocumentationLoadError(f"{source}: invalid documentation tree\n{e}") from e

    logger.debug("Loaded %s with %d resource groups", source, len(api.resource_groups))
    return api
