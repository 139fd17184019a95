"""GraphQL to OpenAPI converter package."""

from .config import ConverterConfig
from .converter import GraphQLToOpenAPIConverter, convert_schema
from .exceptions import ConverterError, SchemaParseError, SerializationError
from .models import OpenAPIDocument

__version__ = "0.1.0"
__all__ = [
    "ConverterConfig",
    "ConverterError",
    "GraphQLToOpenAPIConverter",
    "OpenAPIDocument",
    "SchemaParseError",
    "SerializationError",
    "convert_schema",
]
