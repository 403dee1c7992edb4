"""
Error code registry.

error_registry.yaml (shipped next to this module) lists every error code the
data-access layer raises, with its HTTP status, category and default message.
The file is read once and kept for the life of the process.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from campus_types.errors import ErrorDefinition

logger = logging.getLogger(__name__)

REGISTRY_PATH = Path(__file__).parent / "error_registry.yaml"

_definitions: Optional[Dict[str, ErrorDefinition]] = None


def _parse_definition(entry: Dict[str, Any]) -> ErrorDefinition:
    try:
        return ErrorDefinition(**entry)
    except Exception as e:
        raise ValueError(f"Invalid registry entry {entry.get('code', '<no code>')}: {e}") from e


def load_error_registry(path: Optional[Path] = None) -> Dict[str, ErrorDefinition]:
    """
    Read error definitions from YAML, keyed by code.

    Without a path the bundled registry is loaded once and reused.

    Raises:
        FileNotFoundError: The registry file does not exist
        ValueError: The file has no "errors" list, an entry is invalid or a
            code appears twice
    """
    global _definitions
    if path is None and _definitions is not None:
        return _definitions

    source = Path(path) if path is not None else REGISTRY_PATH
    if not source.exists():
        raise FileNotFoundError(f"Error registry not found at {source}")

    with open(source, "r", encoding="utf-8") as f:
        content = yaml.safe_load(f) or {}

    entries = content.get("errors")
    if not isinstance(entries, list):
        raise ValueError(f"{source}: expected an 'errors' list")

    definitions: Dict[str, ErrorDefinition] = {}
    for entry in entries:
        definition = _parse_definition(entry)
        if definition.code in definitions:
            raise ValueError(f"{source}: error code {definition.code} defined twice")
        definitions[definition.code] = definition

    logger.debug(f"Loaded {len(definitions)} error definitions from {source}")
    if path is None:
        _definitions = definitions
    return definitions


def get_error_definition(error_code: str) -> ErrorDefinition:
    """Definition for error_code; unregistered codes map to a generic internal error."""
    definition = load_error_registry().get(error_code)
    if definition is not None:
        return definition

    return ErrorDefinition(
        code="UNKNOWN",
        http_status=500,
        category="internal",
        severity="error",
        title="Unregistered Error",
        message=f"An error occurred (code: {error_code})",
        internal_description=f"{error_code} is missing from error_registry.yaml",
    )
