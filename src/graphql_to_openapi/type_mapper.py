"""
Mapping of GraphQL type references onto OpenAPI schema fragments.
"""

from typing import Set

from graphql import (
    GraphQLNamedType,
    GraphQLSchema,
    GraphQLType,
    get_named_type,
    get_nullable_type,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_leaf_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
    is_union_type,
)

from .models import Schema

SCALAR_TYPE_MAP = {
    "Int": ("integer", "int32"),
    "Float": ("number", "double"),
    "String": ("string", None),
    "Boolean": ("boolean", None),
    "ID": ("string", None),
}

INTROSPECTION_PREFIX = "__"


def root_type_names(schema: GraphQLSchema) -> Set[str]:
    """Names of the schema's query, mutation and subscription types."""
    roots = (schema.query_type, schema.mutation_type, schema.subscription_type)
    return {root.name for root in roots if root is not None}


def is_builtin_type(schema: GraphQLSchema, name: str) -> bool:
    """Root operation types and introspection types are never components."""
    return name.startswith(INTROSPECTION_PREFIX) or name in root_type_names(schema)


def is_list(type_: GraphQLType) -> bool:
    """True when the type is list-wrapped, ignoring an outer non-null."""
    return is_list_type(get_nullable_type(type_))


def is_required(type_: GraphQLType) -> bool:
    return is_non_null_type(type_)


def is_composite(named_type: GraphQLNamedType) -> bool:
    """Object-like types that are referenced rather than embedded as values."""
    return not is_leaf_type(named_type)


def list_element_type(type_: GraphQLType) -> GraphQLType:
    return get_nullable_type(type_).of_type


def map_type(type_: GraphQLType, schema: GraphQLSchema) -> Schema:
    """Map a GraphQL type reference to a schema fragment.

    Never fails: names that carry no structural information degrade to a
    plain string (custom scalars) or object (root operation types).
    """
    type_ = get_nullable_type(type_)
    if is_list_type(type_):
        return Schema.array_of(map_type(type_.of_type, schema))

    name = get_named_type(type_).name
    if name in SCALAR_TYPE_MAP:
        json_type, json_format = SCALAR_TYPE_MAP[name]
        return Schema(type=json_type, format=json_format)

    if is_builtin_type(schema, name):
        return Schema(type="object")

    declared = schema.get_type(name)
    if declared is not None and (
        is_object_type(declared)
        or is_input_object_type(declared)
        or is_enum_type(declared)
        or is_union_type(declared)
        or is_interface_type(declared)
    ):
        return Schema.reference(name)

    return Schema(type="string")
