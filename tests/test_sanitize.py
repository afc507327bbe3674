from decimal import Decimal

import pytest

from flashstore.errors import InvalidPostedValueError
from flashstore.flash import sanitize_posted_values


def test_escapes_html_reserved_characters_and_quotes() -> None:
    values = sanitize_posted_values({"comment": """ <a href="x">Tom & 'Jerry'</a> """})

    assert values == {
        "comment": "&lt;a href=&quot;x&quot;&gt;Tom &amp; &#x27;Jerry&#x27;&lt;/a&gt;"
    }


@pytest.mark.parametrize("raw", ["plain", "  padded\t", "\nmulti word value ", "ünïcødé €"])
def test_safe_values_are_only_trimmed(raw: str) -> None:
    assert sanitize_posted_values({"field": raw}) == {"field": raw.strip()}


def test_scalars_are_stringified_and_none_is_empty() -> None:
    values = sanitize_posted_values(
        {"age": 42, "price": Decimal("9.90"), "ratio": 0.5, "agree": True, "note": None}
    )

    assert values == {"age": "42", "price": "9.90", "ratio": "0.5", "agree": "True", "note": ""}


def test_keys_are_stringified() -> None:
    assert sanitize_posted_values({1: "one"}) == {"1": "one"}


@pytest.mark.parametrize("value", [["a"], {"nested": "x"}, ("t",), b"bytes", object()])
def test_non_scalar_values_are_rejected(value) -> None:
    with pytest.raises(InvalidPostedValueError) as excinfo:
        sanitize_posted_values({"ok": "fine", "bad": value})

    assert excinfo.value.field == "bad"
    assert "bad" in str(excinfo.value)


def test_trims_ascii_whitespace_and_nul_only() -> None:
    values = sanitize_posted_values({"a": "Bob\x00", "b": "\xa0Bob\xa0", "c": "\x0b\r Bob \n"})

    assert values == {"a": "Bob", "b": "\xa0Bob\xa0", "c": "Bob"}
