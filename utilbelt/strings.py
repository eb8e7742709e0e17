"""
Utilbelt Strings

Case conversion, slugs and small text edits. Word splitting is ASCII based: any run of
characters outside [a-zA-Z0-9] separates words.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re
import unicodedata

# Local ----------------------------------------------------------------------------------------------------------------
from .validators import validate_index, validate_int

# Constants ------------------------------------------------------------------------------------------------------------

_LOWER_TO_UPPER = re.compile(r"([a-z0-9])([A-Z])")  # helloWorld -> hello World
_ACRONYM_TO_WORD = re.compile(r"([A-Z])([A-Z][a-z])")  # HTMLParser -> HTML Parser
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]+")
_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")


# Methods --------------------------------------------------------------------------------------------------------------

def capitalize(s: str) -> str:
    """
    Uppercase the first character and leave the rest untouched.

    Unlike str.capitalize(), the remaining characters are not lowercased.

    Examples:
        >>> capitalize("hello World")
        'Hello World'
    """
    return s[:1].upper() + s[1:]


def split_words(s: str) -> list[str]:
    """
    Split text into words at camelCase and acronym boundaries, dashes, underscores and spaces.

    Examples:
        >>> split_words("helloWorld")
        ['hello', 'World']
        >>> split_words("HTMLParser")
        ['HTML', 'Parser']
        >>> split_words("hello_world-test")
        ['hello', 'world', 'test']
    """
    s = _LOWER_TO_UPPER.sub(r"\1 \2", s)
    s = _ACRONYM_TO_WORD.sub(r"\1 \2", s)
    return _NON_ALNUM.sub(" ", s).split()


def camel_case(s: str) -> str:
    """
    Examples:
        >>> camel_case("Hello_world-test")
        'helloWorldTest'
    """
    words = [w.lower() for w in split_words(s)]
    return "".join(w if i == 0 else capitalize(w) for i, w in enumerate(words))


def kebab_case(s: str) -> str:
    """
    Examples:
        >>> kebab_case("Hello_worldTest")
        'hello-world-test'
    """
    return "-".join(w.lower() for w in split_words(s))


def snake_case(s: str) -> str:
    """
    Examples:
        >>> snake_case("Hello-worldTest")
        'hello_world_test'
    """
    return "_".join(w.lower() for w in split_words(s))


def truncate(s: str, n: int, *, ellipsis: str = "...") -> str:
    """
    Cut text to n characters and append ellipsis; text of n characters or less is returned as is.

    The ellipsis is not counted against n.

    Raises:
        TypeError: If n is not an integer.
        ValueError: If n is negative.

    Examples:
        >>> truncate("hello world", 5)
        'hello...'
        >>> truncate("hello", 10)
        'hello'
    """
    validate_int(n, name="truncate length", min_value=0)
    return s[:n] + ellipsis if len(s) > n else s


def reverse(s: str) -> str:
    """Reverse the characters of the text."""
    return s[::-1]


def is_empty(s: str) -> bool:
    """True if the text is empty or whitespace only."""
    return not s.strip()


def slugify(s: str) -> str:
    """
    Convert text into a lowercase URL slug.

    Accents are stripped after NFD normalization, every run of other characters outside
    [a-zA-Z0-9] becomes a single dash, leading and trailing dashes are removed.

    Examples:
        >>> slugify("Éléphant à l'été")
        'elephant-a-l-ete'
        >>> slugify("  --Hello__World--  ")
        'hello-world'
    """
    s = _COMBINING_MARKS.sub("", unicodedata.normalize("NFD", s))
    return _NON_ALNUM.sub("-", s).strip("-").lower()


def replace_range(s: str, start: int, end: int, replacement: str = "") -> str:
    """
    Replace the characters in [start, end) with replacement.

    Bounds are swapped when start > end. start == end == len(s) appends to the text.

    Args:
        s: Source text.
        start: First position to replace, in [0, len(s)].
        end: Position after the last one to replace, in [0, len(s)].
        replacement: Text to insert, empty by default (plain removal).

    Raises:
        TypeError: If start or end is not an integer.
        IndexError: If start or end is outside [0, len(s)].

    Examples:
        >>> replace_range("abcdef", 2, 5, "Z")
        'abZf'
        >>> replace_range("abcdef", 5, 2, "X")
        'abXf'
        >>> replace_range("abcdef", 1, 4)
        'aef'
    """
    validate_index(start, len(s), name="start", allow_end=True)
    validate_index(end, len(s), name="end", allow_end=True)
    if start > end:
        start, end = end, start
    return s[:start] + replacement + s[end:]
