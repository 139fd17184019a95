"""
Conversion of GraphQL type declarations into OpenAPI component schemas.
"""

from typing import Dict, List, Optional, Tuple, Union

from graphql import (
    GraphQLEnumType,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLUnionType,
    get_named_type,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_object_type,
    is_union_type,
)

from .directives import apply_field_directives, apply_type_directives
from .models import Schema
from .naming import Pluralizer, add_field_name_prefix
from .type_mapper import is_builtin_type, is_composite, is_list, is_required, map_type

AnyField = Union[GraphQLField, GraphQLInputField]
FieldOwner = Union[GraphQLObjectType, GraphQLInputObjectType, GraphQLInterfaceType]


class TypeConverter:
    """Builds one component schema per declared GraphQL type."""

    def __init__(self, schema: GraphQLSchema, pluralizer: Pluralizer):
        self.schema = schema
        self.pluralizer = pluralizer

    def convert_all(self) -> Dict[str, Schema]:
        """Convert every declared type, in the schema's type-map order.

        Scalars, root operation types and introspection types produce no
        component schema.
        """
        components: Dict[str, Schema] = {}
        for name, type_def in self.schema.type_map.items():
            if is_builtin_type(self.schema, name):
                continue
            component = self.convert(type_def)
            if component is not None:
                components[name] = component
        return components

    def convert(self, type_def: GraphQLNamedType) -> Optional[Schema]:
        if is_enum_type(type_def):
            return self.convert_enum(type_def)
        if is_union_type(type_def):
            return self.convert_union(type_def)
        if is_interface_type(type_def):
            return self.convert_interface(type_def)
        if is_object_type(type_def) or is_input_object_type(type_def):
            return self.convert_object(type_def)
        return None

    def convert_enum(self, type_def: GraphQLEnumType) -> Schema:
        return Schema(
            type="string",
            enum=list(type_def.values),
            description=type_def.description or None,
        )

    def convert_union(self, type_def: GraphQLUnionType) -> Schema:
        return Schema(
            one_of=[Schema.reference(member.name) for member in type_def.types],
            description=type_def.description or None,
        )

    def convert_interface(self, type_def: GraphQLInterfaceType) -> Schema:
        # Own fields only; no required list is computed
        properties, _ = self.convert_fields(type_def)
        return Schema(
            type="object",
            properties=properties,
            description=type_def.description or None,
        )

    def convert_object(
        self, type_def: Union[GraphQLObjectType, GraphQLInputObjectType]
    ) -> Schema:
        properties, required = self.convert_fields(type_def)
        return Schema(
            type="object",
            properties=properties,
            required=required or None,
            description=type_def.description or None,
        )

    def convert_fields(self, type_def: FieldOwner) -> Tuple[Dict[str, Schema], List[str]]:
        """Convert a type's declared fields into properties and a required list.

        Lists of composite types are left out entirely; they are exposed as
        sub-resource endpoints instead. Single composite references become a
        string `<field>Id` property pointing at the referenced resource.
        """
        properties: Dict[str, Schema] = {}
        required = []

        for name, field in type_def.fields.items():
            prop = self.convert_property(name, field)
            named = get_named_type(field.type)

            if is_composite(named):
                if is_list(field.type):
                    continue
                prop = Schema(
                    type="string",
                    description=(
                        f"Reference to {named.name}.id - use GET "
                        f"/{self.pluralizer.pluralize(named.name.lower())}/{{{name}Id}}"
                    ),
                )
                name = name + "Id"

            properties[name] = prop
            if is_required(field.type):
                required.append(name)

        return properties, required

    def convert_property(self, name: str, field: AnyField) -> Schema:
        """Map a field's type and apply its description and directives."""
        prop = map_type(field.type, self.schema)
        if field.description:
            prop.description = add_field_name_prefix(name, field.description)

        apply_field_directives(prop, name, field.ast_node)
        apply_type_directives(prop, name, get_named_type(field.type))
        return prop
