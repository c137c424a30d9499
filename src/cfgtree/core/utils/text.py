"""Text helpers for deriving config keys from environment variable names."""
from __future__ import annotations

import re
from typing import List

# A word is a lowercase run, a capitalised word, an acronym (split before a
# following capitalised word) or a run of digits.
_WORD_RE = re.compile(
    r"""
    [A-Z]?[a-z]+(?=[^A-Za-z0-9]|[A-Z]|$)   # fooBar -> foo | Bar
    | [A-Z]+(?=[^A-Za-z0-9]|[A-Z][a-z]|$)  # HTTPServer -> HTTP | Server
    | [A-Z]?[a-z]+                         # lowercase run followed by digits
    | [A-Z]+                               # acronym followed by digits
    | [0-9]+
    """,
    re.VERBOSE,
)


def split_words(text: str) -> List[str]:
    """Split ``text`` into words.

    Example:
        >>> split_words("BAR_BAZ")
        ['BAR', 'BAZ']
        >>> split_words("jsonKeyPath")
        ['json', 'Key', 'Path']
    """
    return _WORD_RE.findall(text)


def camel_case(text: str) -> str:
    """Convert a delimiter-separated or mixed-case string to camelCase.

    Example:
        >>> camel_case("BAR_BAZ")
        'barBaz'
        >>> camel_case("HTTP2_PORT")
        'http2Port'
    """
    words = [word.lower() for word in split_words(text)]
    if not words:
        return ""
    return words[0] + "".join(word[:1].upper() + word[1:] for word in words[1:])


__all__ = ["split_words", "camel_case"]
