"""Named argument store shared by processes, options and engines, and interactive input."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator, MutableMapping
from typing import Any, Protocol

from .exceptions import RequiredArgumentMissing

Reader = Callable[[], str]
Writer = Callable[[str], Any]

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


class Parameterised(Protocol):
    """Anything that can list the arguments it needs as (name, type) pairs."""

    @staticmethod
    def parameters() -> list[tuple[str, type]]: ...


class Arguments(MutableMapping):
    """A mapping of argument names to values; missing names raise RequiredArgumentMissing."""

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __getitem__(self, key: str) -> Any:
        try:
            return self._values[key]
        except KeyError:
            raise RequiredArgumentMissing(key) from None

    def __setitem__(self, key: str, value: Any) -> None:
        self._values[key] = value

    def __delitem__(self, key: str) -> None:
        try:
            del self._values[key]
        except KeyError:
            raise RequiredArgumentMissing(key) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Arguments({self._values!r})"

    def require(self, key: str) -> None:
        """Raise RequiredArgumentMissing unless ``key`` is present."""
        if key not in self._values:
            raise RequiredArgumentMissing(key)

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)


def _read_stdin() -> str:
    return sys.stdin.readline()


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _parse(kind: type, text: str) -> Any:
    if not text:
        raise ValueError("empty input")
    if kind is bool:
        lowered = text.lower()
        if lowered in _TRUE_WORDS:
            return True
        if lowered in _FALSE_WORDS:
            return False
        raise ValueError(f"not a boolean: {text!r}")
    return kind(text)


def ask(
    arguments: Arguments,
    key: str,
    kind: type,
    reader: Reader | None = None,
    writer: Writer | None = None,
) -> Any:
    """Return ``arguments[key]``, prompting for it first if it is not set.

    The prompt is repeated, after an ``err`` line, until the reply parses as
    ``kind``. Raises EOFError if the reader runs dry.
    """
    if key in arguments:
        return arguments[key]
    read = reader or _read_stdin
    write = writer or _write_stdout
    prompt = f"{key}({kind.__name__}) : "
    while True:
        write(prompt)
        line = read()
        if not line:
            raise EOFError(f"no value given for {key!r}")
        try:
            value = _parse(kind, line.strip())
        except (ValueError, TypeError):
            write("err\n")
            continue
        arguments[key] = value
        return value


def build_arguments(
    component: Parameterised,
    arguments: Arguments,
    reader: Reader | None = None,
    writer: Writer | None = None,
) -> Arguments:
    """Ask for every parameter ``component`` needs that ``arguments`` lacks."""
    for key, kind in component.parameters():
        ask(arguments, key, kind, reader, writer)
    return arguments