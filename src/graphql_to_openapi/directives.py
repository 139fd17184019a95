"""
Processing of the directives the converter understands.

Only @deprecated, @constraint and @specifiedBy are recognized. Any other
directive on a field or type is ignored.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from graphql import GraphQLNamedType, value_from_ast_untyped
from graphql.language import Node

from .models import Operation, Schema
from .naming import camel_to_title

logger = logging.getLogger(__name__)


class DirectiveKind(str, Enum):
    DEPRECATED = "deprecated"
    CONSTRAINT = "constraint"
    SPECIFIED_BY = "specifiedBy"


def iter_directives(node: Optional[Node]) -> Iterator[Tuple[DirectiveKind, Dict[str, Any]]]:
    """Yield (kind, arguments) for each recognized directive on an AST node."""
    if node is None:
        return
    for directive in getattr(node, "directives", None) or ():
        try:
            kind = DirectiveKind(directive.name.value)
        except ValueError:
            continue
        arguments = {
            argument.name.value: value_from_ast_untyped(argument.value)
            for argument in directive.arguments or ()
        }
        yield kind, arguments


def apply_deprecation(schema: Schema, field_name: str, arguments: Dict[str, Any]) -> None:
    schema.deprecated = True
    reason = arguments.get("reason")
    if reason is not None:
        schema.description = f"{camel_to_title(field_name)} - DEPRECATED: {reason}"


def _parse_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _parse_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def apply_constraint(schema: Schema, field_name: str, arguments: Dict[str, Any]) -> None:
    """Copy @constraint arguments onto the schema's validation keywords.

    Values that cannot be parsed are omitted.
    """
    for name, value in arguments.items():
        if name in ("minLength", "maxLength"):
            parsed = _parse_int(value)
            if parsed is None:
                logger.debug("Ignoring constraint %s=%r on %s", name, value, field_name)
            elif name == "minLength":
                schema.min_length = parsed
            else:
                schema.max_length = parsed
        elif name in ("min", "max"):
            parsed = _parse_float(value)
            if parsed is None:
                logger.debug("Ignoring constraint %s=%r on %s", name, value, field_name)
            elif name == "min":
                schema.minimum = parsed
            else:
                schema.maximum = parsed
        elif name == "pattern" and value is not None:
            schema.pattern = str(value)
        elif name == "format" and value is not None:
            schema.format = str(value)


def apply_specified_by(schema: Schema, field_name: str, arguments: Dict[str, Any]) -> None:
    url = arguments.get("url")
    if url is None:
        return
    url = str(url)

    lowered = url.lower()
    if "rfc4122" in url or "uuid" in lowered:
        schema.format = "uuid"
    elif "date-time" in lowered:
        schema.format = "date-time"

    if schema.description:
        schema.description += f"\n\nSpec: {url}"
    else:
        schema.description = f"Spec: {url}"


DirectiveProcessor = Callable[[Schema, str, Dict[str, Any]], None]

PROCESSORS: Dict[DirectiveKind, DirectiveProcessor] = {
    DirectiveKind.DEPRECATED: apply_deprecation,
    DirectiveKind.CONSTRAINT: apply_constraint,
    DirectiveKind.SPECIFIED_BY: apply_specified_by,
}


def apply_field_directives(schema: Schema, field_name: str, node: Optional[Node]) -> None:
    """Apply @deprecated and @constraint from a field definition."""
    for kind, arguments in iter_directives(node):
        if kind is DirectiveKind.SPECIFIED_BY:
            continue
        PROCESSORS[kind](schema, field_name, arguments)


def apply_type_directives(schema: Schema, field_name: str, named_type: GraphQLNamedType) -> None:
    """Apply @specifiedBy declared on the field's named (scalar) type."""
    for kind, arguments in iter_directives(named_type.ast_node):
        if kind is DirectiveKind.SPECIFIED_BY:
            PROCESSORS[kind](schema, field_name, arguments)


def deprecate_operation(operation: Operation, node: Optional[Node]) -> None:
    """Mark an operation deprecated when its root field carries @deprecated."""
    for kind, arguments in iter_directives(node):
        if kind is not DirectiveKind.DEPRECATED:
            continue
        operation.deprecated = True
        reason = arguments.get("reason")
        if reason is not None:
            notice = f"DEPRECATED: {reason}"
            operation.summary = notice
            if operation.description:
                operation.description = f"{notice}\n\n{operation.description}"
            else:
                operation.description = notice
