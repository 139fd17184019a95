import pytest

from graphql_to_openapi.converter import parse_schema
from graphql_to_openapi.type_mapper import is_builtin_type, is_list, map_type, root_type_names

SDL = """
scalar JSON

enum Color { RED GREEN }

interface Node { id: ID! }

type Item implements Node { id: ID! }

union Anything = Item

input ItemInput { name: String }

type Query {
  count: Int!
  ratio: Float
  label: String
  flag: Boolean
  key: ID!
  item: Item
  node: Node
  anything: Anything
  color: Color
  payload: JSON
  names: [String!]!
  matrix: [[Int]]
  itemsById(input: ItemInput): [Item]
  root: Query
}

type Mutation { noop: Boolean }
"""


@pytest.fixture(scope="module")
def schema():
    return parse_schema(SDL)


def field_type(schema, name):
    return schema.query_type.fields[name].type


@pytest.mark.parametrize(
    "field,expected",
    [
        ("count", {"type": "integer", "format": "int32"}),
        ("ratio", {"type": "number", "format": "double"}),
        ("label", {"type": "string"}),
        ("flag", {"type": "boolean"}),
        ("key", {"type": "string"}),
    ],
)
def test_builtin_scalars(schema, field, expected):
    assert map_type(field_type(schema, field), schema).to_dict() == expected


@pytest.mark.parametrize("field,type_name", [
    ("item", "Item"),
    ("node", "Node"),
    ("anything", "Anything"),
    ("color", "Color"),
])
def test_declared_types_become_references(schema, field, type_name):
    result = map_type(field_type(schema, field), schema).to_dict()
    assert result == {"$ref": f"#/components/schemas/{type_name}"}


def test_input_object_reference(schema):
    arg_type = schema.query_type.fields["itemsById"].args["input"].type
    assert map_type(arg_type, schema).to_dict() == {"$ref": "#/components/schemas/ItemInput"}


def test_custom_scalar_degrades_to_string(schema):
    assert map_type(field_type(schema, "payload"), schema).to_dict() == {"type": "string"}


def test_root_type_degrades_to_object(schema):
    assert map_type(field_type(schema, "root"), schema).to_dict() == {"type": "object"}


def test_lists(schema):
    assert map_type(field_type(schema, "names"), schema).to_dict() == {
        "type": "array",
        "items": {"type": "string"},
    }
    assert map_type(field_type(schema, "matrix"), schema).to_dict() == {
        "type": "array",
        "items": {"type": "array", "items": {"type": "integer", "format": "int32"}},
    }


def test_is_list_ignores_non_null(schema):
    assert is_list(field_type(schema, "names"))
    assert not is_list(field_type(schema, "count"))


def test_builtin_types(schema):
    assert root_type_names(schema) == {"Query", "Mutation"}
    assert is_builtin_type(schema, "Query")
    assert is_builtin_type(schema, "__Schema")
    assert not is_builtin_type(schema, "Item")
