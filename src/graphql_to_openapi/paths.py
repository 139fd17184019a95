"""
Generation of OpenAPI path items from GraphQL root fields.
"""

import logging
from typing import List, Optional, Set

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLObjectType,
    GraphQLSchema,
    get_named_type,
    is_object_type,
    is_scalar_type,
)

from .config import ConverterConfig
from .directives import deprecate_operation
from .models import (
    MediaType,
    OpenAPIDocument,
    Operation,
    Parameter,
    RequestBody,
    Response,
    Schema,
)
from .naming import Pluralizer, add_field_name_prefix, camel_to_title, capitalize, split_description
from .rest_patterns import ResourcePattern
from .type_mapper import (
    INTROSPECTION_PREFIX,
    is_builtin_type,
    is_list,
    is_required,
    map_type,
)

logger = logging.getLogger(__name__)

SSE_DESCRIPTION = """Server-Sent Events (SSE) stream.

Each event is formatted as:
  event: {name}
  data: <JSON-encoded {type_name} object>

Example:
  event: {name}
  data: {{"id":"123",...}}

The connection remains open and events are pushed as they occur.
Use the EventSource API in browsers or any SSE client library."""


class PathBuilder:
    """Writes path items for queries, mutations and subscriptions into a document."""

    def __init__(
        self,
        schema: GraphQLSchema,
        config: ConverterConfig,
        pluralizer: Pluralizer,
        doc: OpenAPIDocument,
    ):
        self.schema = schema
        self.config = config
        self.pluralizer = pluralizer
        self.doc = doc

    def add_prefix(self, path: str) -> str:
        return self.config.path_prefix + path

    def build(self, patterns: List[ResourcePattern]) -> None:
        if self.schema.query_type is not None:
            self.build_queries(self.schema.query_type, patterns)
        if self.schema.mutation_type is not None:
            self.build_mutations(self.schema.mutation_type, patterns)
        if self.schema.subscription_type is not None:
            self.build_subscriptions(self.schema.subscription_type)

    # Queries

    def build_queries(self, query_type: GraphQLObjectType, patterns: List[ResourcePattern]) -> None:
        processed: Set[str] = set()

        for pattern in patterns:
            if pattern.list:
                self.doc.path_item(self.add_prefix(f"/{pattern.plural}")).get = Operation(
                    operation_id="list" + capitalize(pattern.plural),
                    summary=f"List {pattern.plural}",
                    responses={
                        "200": Response.json_content(
                            Schema.array_of(Schema.reference(pattern.type_name))
                        )
                    },
                )
                processed.add(pattern.plural)

            if pattern.get:
                self.doc.path_item(self.add_prefix(f"/{pattern.plural}/{{id}}")).get = Operation(
                    operation_id="get" + capitalize(pattern.resource),
                    summary=f"Get {pattern.resource} by ID",
                    parameters=[Parameter.path_id()],
                    responses={"200": Response.json_content(Schema.reference(pattern.type_name))},
                )
                processed.add(pattern.resource)

        for name, field in query_type.fields.items():
            if name in processed or name.startswith(INTROSPECTION_PREFIX):
                continue
            self.doc.path_item(self.add_prefix(f"/{name}")).get = self.query_operation(name, field)

        self.build_sub_resources()

    def query_operation(self, name: str, field: GraphQLField) -> Operation:
        summary, description = split_description(add_field_name_prefix(name, field.description or ""))
        if not summary:
            summary, description = camel_to_title(name), ""

        operation = Operation(
            operation_id=name,
            summary=summary,
            description=description,
            responses={"200": Response.json_content(map_type(field.type, self.schema))},
        )
        deprecate_operation(operation, field.ast_node)

        parameters = [self.query_parameter(arg_name, arg) for arg_name, arg in field.args.items()]
        operation.parameters = parameters or None
        return operation

    def query_parameter(self, name: str, arg: GraphQLArgument) -> Parameter:
        param = Parameter(
            name=name,
            location="query",
            required=is_required(arg.type) or None,
            schema_=map_type(arg.type, self.schema),
            description=arg.description or None,
        )
        if is_list(arg.type):
            param.style = "form"
            param.explode = True
        return param

    def build_sub_resources(self) -> None:
        """Expose list fields with a non-scalar element type as nested collections."""
        for type_name, type_def in self.schema.type_map.items():
            if is_builtin_type(self.schema, type_name) or not is_object_type(type_def):
                continue

            owner = type_name.lower()
            for name, field in type_def.fields.items():
                if not is_list(field.type):
                    continue
                element = get_named_type(field.type)
                if is_scalar_type(element):
                    continue

                path = self.add_prefix(f"/{self.pluralizer.pluralize(owner)}/{{id}}/{name}")
                self.doc.path_item(path).get = Operation(
                    operation_id="get" + type_name + capitalize(name),
                    summary=f"Get {name} by {owner}",
                    parameters=[Parameter.path_id()],
                    responses={
                        "200": Response.json_content(Schema.array_of(Schema.reference(element.name)))
                    },
                )

    # Mutations

    def _find_mutation(self, mutation_type: GraphQLObjectType, name: str) -> Optional[GraphQLField]:
        field = mutation_type.fields.get(name)
        if field is None:
            logger.debug("No mutation named %s; skipping its REST endpoint", name)
        return field

    def build_mutations(self, mutation_type: GraphQLObjectType, patterns: List[ResourcePattern]) -> None:
        processed: Set[str] = set()
        config = self.config

        for pattern in patterns:
            resource = capitalize(pattern.resource)
            collection = self.add_prefix(f"/{pattern.plural}")
            item = self.add_prefix(f"/{pattern.plural}/{{id}}")

            if pattern.create:
                name = config.crud_prefix_create + resource
                field = self._find_mutation(mutation_type, name)
                if field is not None:
                    self.doc.path_item(collection).post = self.mutation_operation(
                        name, field, f"Create {pattern.resource}"
                    )
                    processed.add(name)

            if pattern.update:
                name = config.crud_prefix_update + resource
                field = self._find_mutation(mutation_type, name)
                if field is not None:
                    operation = self.mutation_operation(name, field, f"Update {pattern.resource}")
                    operation.parameters = [Parameter.path_id()] + (operation.parameters or [])
                    self.doc.path_item(item).put = operation
                    processed.add(name)

            if pattern.delete:
                name = config.crud_prefix_delete + resource
                field = self._find_mutation(mutation_type, name)
                if field is not None:
                    operation = self.mutation_operation(name, field, f"Delete {pattern.resource}")
                    if list(field.args) == ["id"]:
                        operation.parameters = [Parameter.path_id()]
                        operation.request_body = None
                    self.doc.path_item(item).delete = operation
                    processed.add(name)

        for name, field in mutation_type.fields.items():
            if name in processed or name.startswith(INTROSPECTION_PREFIX):
                continue
            self.doc.path_item(self.add_prefix(f"/{name}")).post = self.mutation_operation(name, field)

    def mutation_operation(self, name: str, field: GraphQLField, fallback_summary: str = "") -> Operation:
        if field.description:
            summary, description = split_description(add_field_name_prefix(name, field.description))
        elif fallback_summary:
            summary, description = fallback_summary, fallback_summary
        else:
            summary, description = camel_to_title(name), ""

        operation = Operation(
            operation_id=name,
            summary=summary,
            description=description,
            responses={"200": Response.json_content(map_type(field.type, self.schema))},
        )
        deprecate_operation(operation, field.ast_node)

        if field.args:
            body = Schema(type="object", properties={})
            required = []
            for arg_name, arg in field.args.items():
                prop = map_type(arg.type, self.schema)
                if arg.description:
                    prop.description = arg.description
                body.properties[arg_name] = prop
                if is_required(arg.type):
                    required.append(arg_name)
            body.required = required or None

            operation.request_body = RequestBody(
                required=True,
                content={"application/json": MediaType(schema_=body)},
            )
        return operation

    # Subscriptions

    def build_subscriptions(self, subscription_type: GraphQLObjectType) -> None:
        for name, field in subscription_type.fields.items():
            if name.startswith(INTROSPECTION_PREFIX):
                continue
            path, path_arg = self.subscription_path(name, field)
            self.doc.path_item(path).get = self.subscription_operation(name, field, path_arg)

    def subscription_path(self, name: str, field: GraphQLField):
        """Place the first required argument, if any, in the path.

        Returns:
            Tuple of (path, name of the path argument or None)
        """
        for arg_name, arg in field.args.items():
            if is_required(arg.type):
                return self.add_prefix(f"/{name}/{{{arg_name}}}"), arg_name
        return self.add_prefix(f"/{name}"), None

    def subscription_operation(self, name: str, field: GraphQLField, path_arg: Optional[str]) -> Operation:
        summary, description = split_description(add_field_name_prefix(name, field.description or ""))

        type_name = get_named_type(field.type).name

        sse_description = SSE_DESCRIPTION.format(name=name, type_name=type_name)
        if description:
            sse_description = f"{description}\n\n{sse_description}"

        operation = Operation(
            operation_id="subscribe" + capitalize(name),
            summary=f"Subscribe: {summary}" if summary else f"Subscribe to {camel_to_title(name)}",
            description=sse_description,
            responses={
                "200": Response(
                    description=f"SSE stream of {type_name} events",
                    content={
                        "text/event-stream": MediaType(
                            schema_=Schema(
                                type="string",
                                description=(
                                    f"Server-Sent Events stream. Each event contains a "
                                    f"{type_name} object in JSON format."
                                ),
                            )
                        )
                    },
                )
            },
        )
        deprecate_operation(operation, field.ast_node)

        parameters = []
        for arg_name, arg in field.args.items():
            if arg_name == path_arg:
                parameters.append(
                    Parameter(
                        name=arg_name,
                        location="path",
                        required=True,
                        schema_=map_type(arg.type, self.schema),
                        description=arg.description or None,
                    )
                )
            else:
                parameters.append(self.query_parameter(arg_name, arg))
        operation.parameters = parameters or None
        return operation
