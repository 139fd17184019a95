import pytest

from graphql_to_openapi.config import ConverterConfig
from graphql_to_openapi.naming import (
    Pluralizer,
    add_field_name_prefix,
    camel_to_title,
    capitalize,
    split_description,
    uncapitalize,
)


@pytest.fixture
def pluralizer():
    return Pluralizer(ConverterConfig())


class TestPluralize:
    @pytest.mark.parametrize(
        "word,expected",
        [
            ("user", "users"),
            ("box", "boxes"),
            ("bus", "buses"),
            ("church", "churches"),
            ("wish", "wishes"),
            ("category", "categories"),
            ("key", "keys"),
        ],
    )
    def test_default_rules(self, pluralizer, word, expected):
        assert pluralizer.pluralize(word) == expected

    def test_custom_suffix_table(self):
        p = Pluralizer(ConverterConfig(custom_plurals={"person": "people", "child": "children"}))
        assert p.pluralize("salesperson") == "salespeople"
        assert p.pluralize("child") == "children"
        assert p.singularize("salespeople") == "salesperson"

    def test_longest_custom_suffix_wins(self):
        p = Pluralizer(ConverterConfig(custom_plurals={"s": "ses", "us": "i"}))
        assert p.pluralize("cactus") == "cacti"

    def test_configurable_suffixes(self):
        p = Pluralizer(
            ConverterConfig(pluralize_es_suffixes="", pluralize_default_suffix="en")
        )
        assert p.pluralize("box") == "boxen"
        assert p.singularize("boxen") == "box"

    def test_ies_disabled(self):
        p = Pluralizer(ConverterConfig(pluralize_ies_suffix=""))
        assert p.pluralize("category") == "categorys"


class TestSingularize:
    @pytest.mark.parametrize(
        "word,expected",
        [
            ("users", "user"),
            ("boxes", "box"),
            ("categories", "category"),
            ("games", "game"),
            ("search", "search"),
            ("data", "data"),
        ],
    )
    def test_default_rules(self, pluralizer, word, expected):
        assert pluralizer.singularize(word) == expected

    @pytest.mark.parametrize("word", ["user", "post", "comment", "game", "order", "item"])
    def test_default_suffix_round_trip(self, pluralizer, word):
        assert pluralizer.singularize(pluralizer.pluralize(word)) == word

    def test_not_an_inverse_for_ambiguous_words(self, pluralizer):
        assert pluralizer.singularize(pluralizer.pluralize("movie")) == "movy"


class TestCase:
    def test_capitalize(self):
        assert capitalize("user") == "User"
        assert capitalize("") == ""

    def test_uncapitalize(self):
        assert uncapitalize("BlogPost") == "blogPost"
        assert uncapitalize("") == ""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("addComment", "Add Comment"),
            ("emailAddress", "Email Address"),
            ("User", "User"),
            ("userID", "User I D"),
            ("", ""),
        ],
    )
    def test_camel_to_title(self, name, expected):
        assert camel_to_title(name) == expected


class TestAddFieldNamePrefix:
    def test_prefixes_plain_description(self):
        assert add_field_name_prefix("email", "The user's email") == "Email - The user's email"

    def test_keeps_action_verb_description(self):
        assert add_field_name_prefix("users", "List all users") == "List all users"
        assert add_field_name_prefix("addComment", "Add a comment") == "Add a comment"

    def test_verb_must_be_a_whole_word(self):
        assert add_field_name_prefix("lister", "Listing of things") == "Lister - Listing of things"

    def test_empty_description(self):
        assert add_field_name_prefix("emailAddress", "") == "Email Address"


class TestSplitDescription:
    def test_splits_on_first_sentence(self):
        summary, description = split_description("Get a user. Returns null if missing.")
        assert summary == "Get a user."
        assert description == "Get a user. Returns null if missing."

    def test_dash_separator_is_dropped(self):
        summary, description = split_description("Users - all registered users")
        assert summary == "Users"
        assert description == "Users - all registered users"

    def test_earliest_delimiter_wins(self):
        summary, _ = split_description("Note: read this. Then that")
        assert summary == "Note:"

    def test_no_delimiter(self):
        assert split_description("Hello world") == ("Hello world", "Hello world")

    def test_empty(self):
        assert split_description("") == ("", "")
