"""Case converter for string naming conventions."""

import re
from typing import Any, List

from ..context import CONVERTERS
from ..exceptions import InvalidArgumentError

# Runs of whitespace, hyphens and underscores separate words
_DELIMITER_PATTERN = re.compile(r"[\s\-_]+")
_LOWER_UPPER_PATTERN = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_PATTERN = re.compile(r"([A-Z])([A-Z][a-z])")


def _ensure_str(content: Any) -> str:
    if not isinstance(content, str):
        raise InvalidArgumentError()
    return content


def split_words(content: str) -> List[str]:
    """Split a string into words on whitespace, hyphens and underscores.

    Leading, trailing and repeated delimiters never produce empty words.

    Examples:
        >>> split_words("  user--name__test ")
        ['user', 'name', 'test']
        >>> split_words("-_-")
        []
    """
    return [word for word in _DELIMITER_PATTERN.split(content.strip()) if word]


@CONVERTERS.register("camel")
def to_camel_case(content: str) -> str:
    """Convert a delimited string to camelCase.

    Args:
        content: String whose words are separated by whitespace, hyphens or underscores.

    Returns:
        String in camelCase format, or an empty string when there are no words.

    Raises:
        InvalidArgumentError: If content is not a string.

    Examples:
        >>> to_camel_case("hello-world_test")
        'helloWorldTest'
        >>> to_camel_case("tHis_is-A tEsT")
        'thisIsATest'
    """
    words = split_words(_ensure_str(content))
    if not words:
        return ""

    return words[0].lower() + "".join(word[0].upper() + word[1:].lower() for word in words[1:])


@CONVERTERS.register("dot")
def to_dot_case(content: str) -> str:
    """Convert a delimited string to dot.case.

    Examples:
        >>> to_dot_case("Hello-World_test")
        'hello.world.test'
    """
    words = split_words(_ensure_str(content))
    return ".".join(word.lower() for word in words)


@CONVERTERS.register("kebab")
def to_kebab_case(content: str) -> str:
    """Convert camelCase or PascalCase to kebab-case.

    Words are found at case transitions only, existing hyphens, underscores
    and spaces are kept as they are.

    Examples:
        >>> to_kebab_case("myVariableName")
        'my-variable-name'
        >>> to_kebab_case("XMLHttpRequest")
        'xml-http-request'
    """
    content = _ensure_str(content)
    if not content.strip():
        return ""

    kebab_str = _LOWER_UPPER_PATTERN.sub(r"\1-\2", content)
    kebab_str = _ACRONYM_PATTERN.sub(r"\1-\2", kebab_str)
    return kebab_str.lower()
