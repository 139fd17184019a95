"""
Core functionality for converting GraphQL schemas to OpenAPI documents.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from graphql import GraphQLError, GraphQLSchema, build_ast_schema, parse

from .config import ConverterConfig
from .exceptions import SchemaParseError
from .models import Components, Info, OpenAPIDocument, Server
from .naming import Pluralizer
from .paths import PathBuilder
from .rest_patterns import detect_rest_patterns, report_patterns
from .serializer import OutputFormat, save_document
from .type_converter import TypeConverter

logger = logging.getLogger(__name__)

DECLARATION_KEYWORDS = (
    "type ", "interface ", "scalar ", "enum ", "union ", "input ", "directive ",
)


def parse_schema(source: str) -> GraphQLSchema:
    """Parse GraphQL SDL into a schema.

    Only syntax and type references are checked. Directives that are used
    without being declared, such as @constraint, are accepted.

    Raises:
        SchemaParseError: If the source is not a valid GraphQL schema document
    """
    try:
        document = parse(source)
        return build_ast_schema(document, assume_valid_sdl=True)
    except (GraphQLError, TypeError) as e:
        raise SchemaParseError(f"failed to parse GraphQL schema: {e}") from e


def extract_schema_description(source: str) -> str:
    """Extract the description block at the top of a schema file.

    A leading triple-quoted block (single or multi-line) or run of `#`
    comment lines before the first declaration is recognized.
    """
    lines = []
    in_block = False

    for line in source.split("\n"):
        trimmed = line.strip()

        if trimmed.startswith('"""'):
            if in_block:
                in_block = False
                continue
            if trimmed.count('"""') >= 2:
                lines.append(trimmed[3:].rsplit('"""', 1)[0].strip())
            else:
                in_block = True
                opening = trimmed[3:].strip()
                if opening:
                    lines.append(opening)
            continue

        if in_block:
            if trimmed.endswith('"""'):
                lines.append(trimmed[:-3].strip())
                in_block = False
            else:
                lines.append(trimmed)
            continue

        if trimmed.startswith(DECLARATION_KEYWORDS):
            break

        if trimmed.startswith("#"):
            lines.append(trimmed.lstrip("#").strip())
            continue

        if not trimmed and lines:
            break

    return "\n".join(lines).strip()


class GraphQLToOpenAPIConverter:
    """Converts GraphQL schemas to OpenAPI 3.0 documents."""

    def __init__(self, config: Optional[ConverterConfig] = None):
        """Initialize the converter.

        Args:
            config: Conversion options. Defaults are used when omitted.
        """
        self.config = config or ConverterConfig()
        self.pluralizer = Pluralizer(self.config)

    def build_info(self, source: str) -> Info:
        """Derive title and description from the schema's leading description."""
        title = self.config.title
        description = extract_schema_description(source)

        if description:
            first_line, _, rest = description.partition("\n")
            first_line = first_line.strip()
            if first_line and self.config.has_default_title:
                title = first_line
                description = rest.strip()

        footer = f"Converted from GraphQL ({self.config.version})"
        if description:
            description = f"{description}\n\n---\n\n{footer}"
        else:
            description = footer

        return Info(title=title, version=self.config.version, description=description)

    def convert(self, source: str) -> OpenAPIDocument:
        """Convert GraphQL SDL to an OpenAPI document.

        Args:
            source: GraphQL schema definition language text

        Returns:
            The populated OpenAPI document

        Raises:
            SchemaParseError: If the source cannot be parsed
        """
        schema = parse_schema(source)

        doc = OpenAPIDocument(info=self.build_info(source), components=Components())
        if self.config.base_url:
            doc.servers = [Server(url=self.config.base_url)]

        doc.components.schemas = TypeConverter(schema, self.pluralizer).convert_all()

        patterns = []
        if self.config.detect_rest_patterns:
            patterns = detect_rest_patterns(schema, self.config, self.pluralizer)
            report_patterns(patterns)

        PathBuilder(schema, self.config, self.pluralizer, doc).build(patterns)
        logger.debug(
            "Converted schema into %d paths and %d component schemas",
            len(doc.paths),
            len(doc.components.schemas),
        )
        return doc

    def convert_file(
        self,
        schema_path: Union[str, Path],
        output_path: Union[str, Path],
        fmt: Union[OutputFormat, str] = OutputFormat.YAML,
    ) -> OpenAPIDocument:
        """Convert a schema file and save the result.

        Args:
            schema_path: Path to the GraphQL SDL file
            output_path: Where to write the OpenAPI document
            fmt: Output format, "yaml" or "json"

        Raises:
            SchemaParseError: If the file cannot be read or parsed
        """
        try:
            with open(schema_path, "r") as f:
                source = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SchemaParseError(f"failed to read GraphQL schema {schema_path}: {e}") from e
        doc = self.convert(source)
        save_document(doc, output_path, fmt)
        return doc


def convert_schema(source: str, config: Optional[ConverterConfig] = None) -> OpenAPIDocument:
    """Convert GraphQL SDL with the given (or default) configuration."""
    return GraphQLToOpenAPIConverter(config).convert(source)
