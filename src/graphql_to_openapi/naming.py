"""
Naming heuristics shared by schema and path generation.

Pluralization is a configurable suffix heuristic. It makes no attempt at
linguistic correctness, and `singularize` is not a true inverse of
`pluralize` for irregular or ambiguous words (e.g. "movies" -> "movy").
"""

from typing import Tuple

from .config import ConverterConfig

ACTION_VERBS = (
    "List ", "Get ", "Fetch ", "Retrieve ", "Find ",
    "Create ", "Add ", "Insert ", "Post ",
    "Update ", "Modify ", "Edit ", "Put ", "Patch ",
    "Delete ", "Remove ", "Destroy ",
    "Search ", "Query ", "Filter ",
)

SENTENCE_DELIMITERS = (". ", "! ", "? ", ": ", "; ", " - ")

VOWELS = "aeiouAEIOU"


class Pluralizer:
    """Suffix-rule pluralization driven by a ConverterConfig."""

    def __init__(self, config: ConverterConfig):
        self.es_suffixes = config.pluralize_es_suffixes
        self.ies_suffix = config.pluralize_ies_suffix
        self.default_suffix = config.pluralize_default_suffix
        # Longest suffix wins when several custom rules match
        self.custom_rules = sorted(
            config.custom_plurals.items(), key=lambda rule: (-len(rule[0]), rule[0])
        )
        self.reverse_rules = sorted(
            config.custom_plurals.items(), key=lambda rule: (-len(rule[1]), rule[1])
        )

    def pluralize(self, word: str) -> str:
        for suffix, replacement in self.custom_rules:
            if word.endswith(suffix):
                return word[: len(word) - len(suffix)] + replacement

        for suffix in self.es_suffixes:
            if word.endswith(suffix):
                return word + "es"

        ies = self.ies_suffix
        if (
            ies
            and word.endswith(ies)
            and len(word) > len(ies)
            and word[-len(ies) - 1] not in VOWELS
        ):
            return word[: -len(ies)] + "ies"

        return word + self.default_suffix

    def singularize(self, word: str) -> str:
        for suffix, replacement in self.reverse_rules:
            if replacement and word.endswith(replacement):
                return word[: len(word) - len(replacement)] + suffix

        if self.ies_suffix and word.endswith("ies") and len(word) > 3:
            return word[:-3] + self.ies_suffix

        if word.endswith("es") and len(word) > 2:
            base = word[:-2]
            if any(base.endswith(suffix) for suffix in self.es_suffixes):
                return base

        default = self.default_suffix
        if default and word.endswith(default) and len(word) > len(default):
            return word[: -len(default)]

        return word


def capitalize(s: str) -> str:
    return s[:1].upper() + s[1:]


def uncapitalize(s: str) -> str:
    return s[:1].lower() + s[1:]


def camel_to_title(name: str) -> str:
    """Convert camelCase or PascalCase to Title Case.

    "addComment" -> "Add Comment". Acronym runs are not special-cased,
    so "userID" becomes "User I D".
    """
    if not name:
        return name

    chars = [name[0].upper()]
    for ch in name[1:]:
        if "A" <= ch <= "Z":
            chars.append(" ")
        chars.append(ch)
    return "".join(chars)


def add_field_name_prefix(name: str, description: str) -> str:
    """Prefix a description with a readable form of the field name.

    Descriptions that already open with an action verb are returned as-is.
    """
    if not description:
        return camel_to_title(name)

    if description.startswith(ACTION_VERBS):
        return description

    return f"{camel_to_title(name)} - {description}"


def split_description(text: str) -> Tuple[str, str]:
    """Split text into (summary, description) at the first sentence break.

    The summary keeps its closing punctuation mark but not the " - "
    separator. The description is always the whole trimmed text.
    """
    if not text:
        return "", ""

    first_idx = -1
    first_delim = ""
    for delim in SENTENCE_DELIMITERS:
        idx = text.find(delim)
        if idx != -1 and (first_idx == -1 or idx < first_idx):
            first_idx = idx
            first_delim = delim

    if first_idx == -1:
        return text, text

    if first_delim == " - ":
        summary = text[:first_idx].strip()
    else:
        summary = text[: first_idx + 1].strip()
    return summary, text.strip()
