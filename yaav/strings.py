"""Small string helpers used by the configuration reader."""

from __future__ import annotations

_SPACES_TABS = " \t"


def remove_leading_spaces_tabs(line: str) -> str:
    """Return ``line`` without leading spaces and tabs."""
    return line.lstrip(_SPACES_TABS)


def remove_trailing_spaces_tabs(line: str) -> str:
    """Return ``line`` without trailing spaces and tabs."""
    return line.rstrip(_SPACES_TABS)


def remove_leading_trailing_spaces_tabs(line: str) -> str:
    """Return ``line`` without leading and trailing spaces and tabs."""
    return line.strip(_SPACES_TABS)


def replace_commas_by_spaces(line: str) -> str:
    """Return ``line`` with every comma replaced by a space."""
    return line.replace(",", " ")


def remove_newlines(line: str) -> str:
    """Return ``line`` with every newline character removed."""
    return line.replace("\n", "")


def tokenize(text: str, delimiters: str = " ") -> list[str]:
    """Split ``text`` on any of the characters in ``delimiters``, dropping empty tokens."""
    tokens: list[str] = []
    current: list[str] = []
    for char in text:
        if char in delimiters:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return tokens


def capitalize(text: str) -> str:
    """Return ``text`` in upper case."""
    return text.upper()


def decapitalize(text: str) -> str:
    """Return ``text`` in lower case."""
    return text.lower()