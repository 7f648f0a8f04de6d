import pytest

from yaav.strings import (
    capitalize,
    decapitalize,
    remove_leading_spaces_tabs,
    remove_leading_trailing_spaces_tabs,
    remove_newlines,
    remove_trailing_spaces_tabs,
    replace_commas_by_spaces,
    tokenize,
)


def test_remove_leading_spaces_tabs():
    assert remove_leading_spaces_tabs(" \t value \t") == "value \t"


def test_remove_trailing_spaces_tabs():
    assert remove_trailing_spaces_tabs(" \t value \t") == " \t value"


def test_remove_leading_trailing_spaces_tabs():
    assert remove_leading_trailing_spaces_tabs(" \t value \t") == "value"


def test_strip_helpers_keep_empty_string_empty():
    assert remove_leading_trailing_spaces_tabs("") == ""
    assert remove_leading_trailing_spaces_tabs(" \t ") == ""


def test_strip_keeps_other_whitespace():
    assert remove_leading_trailing_spaces_tabs("\rvalue\r") == "\rvalue\r"


def test_replace_commas_by_spaces():
    result = replace_commas_by_spaces("1,2,3")
    assert result == "1 2 3"
    assert "," not in result
    assert len(result) == len("1,2,3")


def test_remove_newlines():
    assert remove_newlines("a\nb\n") == "ab"


@pytest.mark.parametrize(
    "text, delimiters, expected",
    [
        ("a  b c", " ", ["a", "b", "c"]),
        ("  a b  ", " ", ["a", "b"]),
        ("x,y;z", ",;", ["x", "y", "z"]),
        ("", " ", []),
        ("   ", " ", []),
    ],
)
def test_tokenize(text, delimiters, expected):
    assert tokenize(text, delimiters) == expected


def test_tokenize_default_delimiter_is_space():
    assert tokenize("one two") == ["one", "two"]


def test_tokenize_join_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert tokenize(" ".join(words)) == words


def test_capitalize_and_decapitalize():
    assert capitalize("MixEd 1") == "MIXED 1"
    assert decapitalize("MixEd 1") == "mixed 1"
    assert decapitalize(capitalize("abc")) == "abc"