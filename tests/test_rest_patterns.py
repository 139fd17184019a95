import logging

from graphql_to_openapi.config import ConverterConfig
from graphql_to_openapi.converter import parse_schema
from graphql_to_openapi.naming import Pluralizer
from graphql_to_openapi.rest_patterns import ResourcePattern, detect_rest_patterns, report_patterns

USER_SDL = """
type Query {
  users: [User!]!
  user(id: ID!): User
}
type Mutation {
  createUser(name: String!): User!
}
type User { id: ID! name: String! }
"""


def detect(sdl, config=None):
    config = config or ConverterConfig()
    return detect_rest_patterns(parse_schema(sdl), config, Pluralizer(config))


def test_list_get_create_pattern():
    patterns = detect(USER_SDL)
    assert len(patterns) == 1
    pattern = patterns[0]
    assert pattern.resource == "user"
    assert pattern.plural == "users"
    assert pattern.type_name == "User"
    assert pattern.operations == ["list", "get", "create"]


def test_list_without_create_is_not_promoted():
    patterns = detect("""
        type Query { users: [User!]! }
        type Mutation { addUser(name: String!): User }
        type User { id: ID! }
    """)
    assert patterns == []


def test_create_without_list_is_not_promoted():
    patterns = detect("""
        type Query { user(id: ID!): User }
        type Mutation { createUser(name: String!): User }
        type User { id: ID! }
    """)
    assert patterns == []


def test_update_and_delete_are_collected():
    patterns = detect("""
        type Query { categories: [Category] }
        type Mutation {
          createCategory(name: String!): Category
          updateCategory(id: ID!, name: String): Category
          deleteCategory(id: ID!): Boolean
        }
        type Category { id: ID! }
    """)
    assert [p.resource for p in patterns] == ["category"]
    assert patterns[0].operations == ["list", "create", "update", "delete"]


def test_get_requires_single_id_argument():
    patterns = detect("""
        type Query {
          users: [User!]!
          user(id: ID!, locale: String): User
        }
        type Mutation { createUser(name: String!): User! }
        type User { id: ID! }
    """)
    assert patterns[0].get is False


def test_non_plural_list_field_is_ignored():
    patterns = detect("""
        type Query { search: [User] }
        type Mutation { createSearch(term: String): User }
        type User { id: ID! }
    """)
    assert patterns == []


def test_custom_crud_prefixes():
    config = ConverterConfig(
        crud_prefix_create="add", crud_prefix_update="modify", crud_prefix_delete="remove"
    )
    patterns = detect("""
        type Query { posts: [Post] }
        type Mutation {
          addPost(title: String): Post
          modifyPost(id: ID!, title: String): Post
          removePost(id: ID!): Boolean
          createPost(title: String): Post
        }
        type Post { id: ID! }
    """, config)
    assert patterns[0].operations == ["list", "create", "update", "delete"]


def test_empty_prefix_disables_operation():
    config = ConverterConfig(crud_prefix_delete="")
    patterns = detect("""
        type Query { posts: [Post] }
        type Mutation {
          createPost(title: String): Post
          deletePost(id: ID!): Boolean
        }
        type Post { id: ID! }
    """, config)
    assert patterns[0].delete is False


def test_patterns_are_sorted_by_resource():
    patterns = detect("""
        type Query { widgets: [Widget] apples: [Apple] }
        type Mutation {
          createWidget(name: String): Widget
          createApple(name: String): Apple
        }
        type Widget { id: ID! }
        type Apple { id: ID! }
    """)
    assert [p.resource for p in patterns] == ["apple", "widget"]


def test_report_patterns_logs_each_pattern(caplog):
    pattern = ResourcePattern(resource="user", plural="users", list=True, create=True)
    with caplog.at_level(logging.INFO, logger="graphql_to_openapi.rest_patterns"):
        report_patterns([pattern])
    assert "Detected REST pattern 'user': consolidated 2 operations -> /users" in caplog.text
