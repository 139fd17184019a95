"""
Data models for the generated OpenAPI 3.0 document.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class _OpenAPIModel(BaseModel):
    """Base for document nodes serialized under their OpenAPI field names."""

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class Schema(_OpenAPIModel):
    """Represents one OpenAPI schema node."""

    type: Optional[str] = None
    format: Optional[str] = None
    description: Optional[str] = None
    properties: Optional[Dict[str, "Schema"]] = None
    required: Optional[List[str]] = None
    items: Optional["Schema"] = None
    ref: Optional[str] = Field(default=None, alias="$ref")
    deprecated: Optional[bool] = None
    enum: Optional[List[str]] = None
    one_of: Optional[List["Schema"]] = Field(default=None, alias="oneOf")
    min_length: Optional[int] = Field(default=None, alias="minLength")
    max_length: Optional[int] = Field(default=None, alias="maxLength")
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    pattern: Optional[str] = None

    @classmethod
    def reference(cls, type_name: str) -> "Schema":
        """Build a `$ref` to a component schema."""
        return cls(ref=f"#/components/schemas/{type_name}")

    @classmethod
    def array_of(cls, items: "Schema") -> "Schema":
        return cls(type="array", items=items)


Schema.model_rebuild()


class Parameter(_OpenAPIModel):
    """Represents a single operation parameter."""

    name: str
    location: str = Field(alias="in")  # query / path / header / cookie
    description: Optional[str] = None
    required: Optional[bool] = None
    schema_: Optional[Schema] = Field(default=None, alias="schema")
    style: Optional[str] = None
    explode: Optional[bool] = None

    @classmethod
    def path_id(cls) -> "Parameter":
        """The `{id}` path parameter shared by resource item paths."""
        return cls(name="id", location="path", required=True, schema_=Schema(type="string"))


class MediaType(_OpenAPIModel):
    schema_: Optional[Schema] = Field(default=None, alias="schema")


class RequestBody(_OpenAPIModel):
    description: Optional[str] = None
    required: Optional[bool] = None
    content: Dict[str, MediaType] = Field(default_factory=dict)


class Response(_OpenAPIModel):
    description: str
    content: Optional[Dict[str, MediaType]] = None

    @classmethod
    def json_content(cls, schema: Schema, description: str = "Successful response") -> "Response":
        return cls(description=description, content={"application/json": MediaType(schema_=schema)})


class Operation(_OpenAPIModel):
    """Represents a single API operation."""

    operation_id: Optional[str] = Field(default=None, alias="operationId")
    summary: Optional[str] = None
    description: Optional[str] = None
    deprecated: Optional[bool] = None
    parameters: Optional[List[Parameter]] = None
    request_body: Optional[RequestBody] = Field(default=None, alias="requestBody")
    responses: Dict[str, Response] = Field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        # summary and description are omitted when empty
        for key in ("summary", "description"):
            if data.get(key) == "":
                del data[key]
        return data


class PathItem(_OpenAPIModel):
    """Describes the operations available on a path."""

    get: Optional[Operation] = None
    post: Optional[Operation] = None
    put: Optional[Operation] = None
    delete: Optional[Operation] = None
    patch: Optional[Operation] = None
    options: Optional[Operation] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {}
        for method in ("get", "post", "put", "delete", "patch", "options"):
            operation = getattr(self, method)
            if operation is not None:
                data[method] = operation.to_dict()
        return data


class Info(_OpenAPIModel):
    title: str
    description: Optional[str] = None
    version: str


class Server(_OpenAPIModel):
    url: str
    description: Optional[str] = None


class Components(_OpenAPIModel):
    schemas: Dict[str, Schema] = Field(default_factory=dict)


class OpenAPIDocument(_OpenAPIModel):
    """The OpenAPI document assembled by a single conversion run."""

    openapi: str = "3.0.0"
    info: Info
    servers: Optional[List[Server]] = None
    paths: Dict[str, PathItem] = Field(default_factory=dict)
    components: Components = Field(default_factory=Components)

    def path_item(self, path: str) -> PathItem:
        """Return the path item for `path`, creating it on first use."""
        if path not in self.paths:
            self.paths[path] = PathItem()
        return self.paths[path]

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "openapi": self.openapi,
            "info": self.info.to_dict(),
        }
        if self.servers:
            data["servers"] = [server.to_dict() for server in self.servers]
        data["paths"] = {path: item.to_dict() for path, item in self.paths.items()}
        if self.components.schemas:
            data["components"] = {
                "schemas": {
                    name: schema.to_dict()
                    for name, schema in self.components.schemas.items()
                }
            }
        return data
