class ConverterError(Exception):
    """Base exception for GraphQL to OpenAPI converter errors."""
    pass

class SchemaParseError(ConverterError):
    """Raised when the GraphQL schema source cannot be parsed."""
    pass

class SerializationError(ConverterError):
    """Raised when the OpenAPI document cannot be rendered or written."""
    pass

class ConfigError(ConverterError):
    """Raised when converter configuration cannot be loaded."""
    pass
