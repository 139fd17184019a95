"""
Configuration for the GraphQL to OpenAPI converter.
"""

import json
from pathlib import Path
from typing import Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import ConfigError

DEFAULT_TITLE = "Converted from GraphQL"


class ConverterConfig(BaseModel):
    """Options consumed by a conversion run. Treated as read-only."""

    model_config = ConfigDict(frozen=True)

    title: str = DEFAULT_TITLE
    version: str = "1.0.0"
    base_url: str = ""
    path_prefix: str = ""
    detect_rest_patterns: bool = True
    custom_plurals: Dict[str, str] = Field(default_factory=dict)
    pluralize_es_suffixes: List[str] = Field(
        default_factory=lambda: ["s", "x", "z", "ch", "sh"]
    )
    pluralize_ies_suffix: str = "y"
    pluralize_default_suffix: str = "s"
    crud_prefix_create: str = "create"
    crud_prefix_update: str = "update"
    crud_prefix_delete: str = "delete"

    @field_validator("pluralize_es_suffixes", mode="before")
    @classmethod
    def _split_suffixes(cls, value: Union[str, List[str]]) -> List[str]:
        if isinstance(value, str):
            value = value.split(",")
        return [suffix.strip() for suffix in value if suffix.strip()]

    @property
    def has_default_title(self) -> bool:
        return self.title == DEFAULT_TITLE


def load_custom_plurals(path: Union[str, Path]) -> Dict[str, str]:
    """Load a suffix -> replacement pluralization table from a JSON file.

    Args:
        path: Path to a JSON object such as {"person": "people"}

    Returns:
        The suffix replacement table

    Raises:
        ConfigError: If the file cannot be read or is not a JSON object of strings
    """
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Failed to load pluralization rules from {path}: {e}")

    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise ConfigError(f"Pluralization rules in {path} must map strings to strings")
    return data
