from __future__ import annotations

import pytest

from cfgtree.core.utils.text import camel_case, split_words


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("FOO", "foo"),
        ("BAR_BAZ", "barBaz"),
        ("HTTP2_PORT", "http2Port"),
        ("max_pool_size", "maxPoolSize"),
        ("alreadyCamel", "alreadyCamel"),
        ("XMLHttpRequest", "xmlHttpRequest"),
        ("", ""),
        ("___", ""),
    ],
)
def test_camel_case(raw: str, expected: str) -> None:
    assert camel_case(raw) == expected


def test_split_words_handles_acronyms_and_digits() -> None:
    assert split_words("HTTPServer") == ["HTTP", "Server"]
    assert split_words("v2_API") == ["v", "2", "API"]
