"""
Detection of REST resource patterns among GraphQL root fields.

A resource is recognized from a plural list query (``users: [User]``)
paired with a prefixed create mutation (``createUser``). A singular get
query (``user(id: ID!)``) and update/delete mutations are folded in when
present but are not required.
"""

import logging
from typing import Dict, List, Optional

from graphql import GraphQLSchema, get_named_type
from pydantic import BaseModel

from .config import ConverterConfig
from .naming import Pluralizer, uncapitalize
from .type_mapper import is_list, list_element_type

logger = logging.getLogger(__name__)

OPERATION_NAMES = ("list", "get", "create", "update", "delete")


class ResourcePattern(BaseModel):
    """A detected REST resource and the operations found for it."""

    resource: str
    plural: str
    type_name: Optional[str] = None
    list: bool = False
    get: bool = False
    create: bool = False
    update: bool = False
    delete: bool = False

    @property
    def operations(self) -> List[str]:
        return [name for name in OPERATION_NAMES if getattr(self, name)]


def detect_rest_patterns(
    schema: GraphQLSchema, config: ConverterConfig, pluralizer: Pluralizer
) -> List[ResourcePattern]:
    """Find resources that expose at least a list query and a create mutation.

    Returns:
        The promoted patterns, sorted by resource name
    """
    patterns: Dict[str, ResourcePattern] = {}

    if schema.query_type is not None:
        for name, field in schema.query_type.fields.items():
            if is_list(field.type):
                element = list_element_type(field.type)
                if not is_list(element):
                    singular = pluralizer.singularize(name)
                    if singular != name:
                        pattern = patterns.setdefault(
                            singular, ResourcePattern(resource=singular, plural=name)
                        )
                        pattern.list = True
                        pattern.type_name = get_named_type(element).name

            if len(field.args) == 1 and "id" in field.args:
                type_name = get_named_type(field.type).name
                if name == pluralizer.singularize(type_name) or name.lower() == type_name.lower():
                    pattern = patterns.setdefault(
                        name, ResourcePattern(resource=name, plural=pluralizer.pluralize(name))
                    )
                    pattern.get = True
                    pattern.type_name = type_name

    if schema.mutation_type is not None:
        prefixes = (
            ("create", config.crud_prefix_create),
            ("update", config.crud_prefix_update),
            ("delete", config.crud_prefix_delete),
        )
        for name in schema.mutation_type.fields:
            for operation, prefix in prefixes:
                if not prefix or not name.startswith(prefix):
                    continue
                resource = uncapitalize(name[len(prefix):])
                if resource in patterns:
                    setattr(patterns[resource], operation, True)

    return sorted(
        (p for p in patterns.values() if p.list and p.create),
        key=lambda p: p.resource,
    )


def report_patterns(patterns: List[ResourcePattern]) -> None:
    """Log a notice for every consolidated resource."""
    for pattern in patterns:
        logger.info(
            "Detected REST pattern '%s': consolidated %d operations -> /%s",
            pattern.resource,
            len(pattern.operations),
            pattern.plural,
        )
