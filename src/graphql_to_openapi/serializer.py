"""
Rendering of OpenAPI documents to YAML or JSON.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Union

import yaml

from .exceptions import SerializationError
from .models import OpenAPIDocument


class OutputFormat(str, Enum):
    YAML = "yaml"
    JSON = "json"


def render_document(doc: OpenAPIDocument, fmt: Union[OutputFormat, str] = OutputFormat.YAML) -> str:
    """Render a document as text.

    Args:
        doc: The converted OpenAPI document
        fmt: Output format, "yaml" or "json"

    Returns:
        The rendered document

    Raises:
        SerializationError: If the format is unknown or rendering fails
    """
    try:
        fmt = OutputFormat(fmt)
    except ValueError:
        raise SerializationError(f"Unsupported output format: {fmt}")

    content = doc.to_dict()
    try:
        if fmt is OutputFormat.JSON:
            return json.dumps(content, indent=2, ensure_ascii=False) + "\n"
        return yaml.safe_dump(content, sort_keys=False, allow_unicode=True)
    except (TypeError, ValueError, yaml.YAMLError) as e:
        raise SerializationError(f"Failed to render document as {fmt.value}: {e}")


def save_document(
    doc: OpenAPIDocument,
    output_path: Union[str, Path],
    fmt: Union[OutputFormat, str] = OutputFormat.YAML,
) -> None:
    """Render a document and write it to a file.

    Raises:
        SerializationError: If rendering or writing fails
    """
    text = render_document(doc, fmt)
    try:
        with open(output_path, "w") as f:
            f.write(text)
    except OSError as e:
        raise SerializationError(f"Failed to write {output_path}: {e}")
