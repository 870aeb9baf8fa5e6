"""Argument accumulation shared by every runner variant."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

QUOTE_CHARS = ("'", '"')

ArgValue = str | Sequence[str] | None

BuilderT = TypeVar("BuilderT", bound="ArgumentBuilder")


def parse_arg_line(line: str) -> list[str]:
    """Split a command line into tokens.

    Whitespace separates tokens unless it is inside single or double quotes.
    Quote characters are stripped; inside a quoted section a backslash escapes
    the active quote character and is otherwise kept as-is, so Windows paths
    survive. Empty tokens are dropped.

    Args:
        line: Command line text

    Returns:
        Tokens in left-to-right order
    """
    tokens: list[str] = []
    current: list[str] = []
    quote: str | None = None
    escaped = False

    for char in line:
        if escaped:
            if char != quote:
                current.append("\\")
            current.append(char)
            escaped = False
        elif quote:
            if char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            else:
                current.append(char)
        elif char in QUOTE_CHARS:
            quote = char
        elif char.isspace():
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)

    if escaped:
        current.append("\\")
    if current:
        tokens.append("".join(current))

    return tokens


class ArgumentBuilder:
    """Fluent accumulator of argument tokens bound to one executable path.

    Builder methods never fail on empty or malformed input; they no-op and
    return self so chains keep going.
    """

    def __init__(self, path: str):
        self._path = path
        self._args: list[str] = []

    @property
    def path(self) -> str:
        """Executable this builder targets."""
        return self._path

    @property
    def args(self) -> list[str]:
        """Copy of the accumulated tokens."""
        return list(self._args)

    def arg(self: BuilderT, value: ArgValue) -> BuilderT:
        """Append one token or a sequence of tokens.

        A single string is trimmed first. Sequence elements go in unmodified.
        """
        if not value:
            return self

        if isinstance(value, str):
            token = value.strip()
            if token:
                self._args.append(token)
        elif isinstance(value, Sequence):
            self._args.extend(value)
        return self

    def line(self: BuilderT, value: str | None) -> BuilderT:
        """Append every token of a quote-aware command line."""
        if not value:
            return self

        self._args.extend(parse_arg_line(value))
        return self

    def arg_if(self: BuilderT, condition: Any, value: ArgValue) -> BuilderT:
        """Append when ``condition`` is truthy.

        The condition object itself is tested and never called, so passing a
        function always appends. Use ``arg_when`` to branch on a predicate.
        """
        if condition:
            self.arg(value)
        return self

    def arg_when(self: BuilderT, predicate: Callable[[], bool], value: ArgValue) -> BuilderT:
        """Call ``predicate`` and append only when it returns a truthy value."""
        if predicate():
            self.arg(value)
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self._path!r}, args={self._args!r})"
