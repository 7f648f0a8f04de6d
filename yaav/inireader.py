"""Reader for ``.ini`` style configuration files.

Values are stored as strings under keys ``section.name``.  Lines before the
first section are ignored, ``//`` starts a comment, commas in values become
spaces, and a line of the form ``= value`` adds another value to the previous
name.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable
from typing import TypeVar

from .strings import (
    remove_leading_trailing_spaces_tabs,
    remove_newlines,
    replace_commas_by_spaces,
)

T = TypeVar("T")

_ESCAPES = {"\\": "\\", '"': '"', "n": "\n", "t": "\t"}


class IniError(RuntimeError):
    """Raised for unreadable files, syntax errors and missing or malformed data."""


def _process_escapes(value: str) -> str:
    """Remove enclosing quotes and resolve backslash escapes in a quoted value."""
    if not (len(value) > 1 and value[0] == '"' and value[-1] == '"'):
        return value
    body = value[1:-1]
    out: list[str] = []
    i = 0
    while i < len(body):
        char = body[i]
        if char == "\\" and i + 1 < len(body):
            following = body[i + 1]
            out.append(_ESCAPES.get(following, following))
            i += 2
        else:
            out.append(char)
            i += 1
    return "".join(out)


def _is_section(line: str) -> bool:
    return line.startswith("[") and line.endswith("]")


class IniReader:
    """Stores configuration items as lists of strings keyed by ``section.name``."""

    COMMENT_SEPARATOR = "//"

    def __init__(self) -> None:
        self.filename = ""
        self._items: dict[str, list[str]] = {}

    def load(self, filename: str) -> None:
        """Read the named file and add its items."""
        try:
            handle = open(filename, encoding="utf-8")
        except OSError as exc:
            raise IniError(f"[INIreader] can't open file '{filename}'") from exc
        self.filename = filename
        with handle:
            self._parse(handle, None)

    def feed(self, stream: Iterable[str], end_line: str | None = None) -> None:
        """Add the items read from ``stream``, stopping at a line equal to ``end_line``."""
        self._parse(stream, end_line)

    def add(self, key: str, value: str) -> None:
        """Store a single value under ``key``, replacing what was there."""
        self._items[key] = [value]

    def get_string(self, name: str) -> str:
        """Return the first value of ``name`` with quotes and escapes resolved."""
        return _process_escapes(self._find(name)[0])

    def get_strings(self, name: str) -> list[str]:
        """Return all values of ``name`` with quotes and escapes resolved."""
        return [_process_escapes(value) for value in self._find(name)]

    def get_values(
        self, name: str, convert: Callable[[str], T] = float, count: int = 1
    ) -> list[T]:
        """Convert the first ``count`` whitespace-separated fields of the first value."""
        fields = self._find(name)[0].split()
        error = IniError(
            f"[INIreader] requested argument format for '{name}'  #{count} not correct"
        )
        if len(fields) < count:
            raise error
        try:
            return [convert(field) for field in fields[:count]]
        except (ValueError, TypeError) as exc:
            raise error from exc

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __str__(self) -> str:
        return "".join(
            f"{key} = {value}\n"
            for key in sorted(self._items)
            for value in self._items[key]
        )

    def _find(self, name: str) -> list[str]:
        try:
            return self._items[name]
        except KeyError:
            raise IniError(f"[INIreader] could not find '{name}'") from None

    def _clean(self, raw: str) -> str:
        line = remove_newlines(raw)
        position = line.find(self.COMMENT_SEPARATOR)
        if position != -1:
            line = line[:position]
        return remove_leading_trailing_spaces_tabs(line)

    @staticmethod
    def _split_assignment(line: str, number: int) -> tuple[str, str]:
        lhs, sep, rhs = line.partition("=")
        if not sep:
            raise IniError(
                f"[INIreader] syntax error in line {number}: '{line}', could not find ="
            )
        return (
            remove_leading_trailing_spaces_tabs(lhs),
            remove_leading_trailing_spaces_tabs(rhs),
        )

    def _parse(self, lines: Iterable[str], end_line: str | None) -> None:
        collecting = False
        prefix = ""
        previous = ""
        values: list[str] = []
        for number, raw in enumerate(lines, start=1):
            line = self._clean(raw)
            if not line:
                continue
            if end_line is not None and line == end_line:
                break
            if _is_section(line):
                prefix = remove_leading_trailing_spaces_tabs(line[1:-1])
                collecting = True
                previous = ""
                continue
            if not collecting:
                continue
            lhs, rhs = self._split_assignment(line, number)
            rhs = replace_commas_by_spaces(rhs)
            if lhs:
                previous = lhs
                values = [rhs]
            else:
                lhs = previous
                values.append(rhs)
            key = f"{prefix}.{lhs}" if prefix else lhs
            self._items[key] = list(values)


@functools.lru_cache(maxsize=None)
def ini_reader() -> IniReader:
    """Return the application-wide reader."""
    return IniReader()