"""Schema loading utilities for docspec."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


def load_content(content: str, format: str = "yaml") -> Any:
    """Load raw data from string content.

    Args:
        content: Content as string
        format: Format of the content ('yaml' or 'json')

    Returns:
        The loaded data

    Raises:
        ValueError: If format is not supported or parsing fails
    """
    if format == "yaml":
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML: {e}") from e
    elif format == "json":
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to parse JSON: {e}") from e
    else:
        raise ValueError(f"Unsupported format: {format}. Use 'yaml' or 'json'")


def format_for_path(path: str | Path) -> str:
    """Pick the content format from a file extension.

    Raises:
        ValueError: If the extension is neither YAML nor JSON
    """
    suffix = Path(path).suffix.lower()
    if suffix in [".yaml", ".yml"]:
        return "yaml"
    elif suffix == ".json":
        return "json"
    raise ValueError(f"Unsupported file extension: {suffix}. Use .yaml, .yml, or .json")


def load_schema(content: str, format: str = "yaml") -> Any:
    """Load a raw schema from string content.

    The schema is not validated here.

    Raises:
        ValueError: If format is not supported or parsing fails
    """
    return load_content(content, format=format)


def load_schema_from_file(path: str | Path) -> Any:
    """Load a raw schema from a YAML or JSON file.

    Args:
        path: Path to the schema file

    Returns:
        The raw schema

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format is not supported or parsing fails
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Schema file not found: {path}")

    format = format_for_path(path)

    logger.debug(f"Loading schema from: {path}")
    content = path.read_text(encoding="utf-8")
    return load_schema(content, format=format)
