"""Runner port for building and executing az commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from azwrap.domain.arguments import ArgValue
from azwrap.domain.models import ExecResult


@runtime_checkable
class RunnerPort(Protocol):
    """Port for one in-progress command invocation.

    Builder methods return the runner so calls can be chained. Calling code is
    written once against this port whether execution is real or simulated.
    """

    @property
    def path(self) -> str:
        """Executable path, fixed at construction."""
        ...

    @property
    def args(self) -> list[str]:
        """Copy of the accumulated argument tokens."""
        ...

    def start(self) -> RunnerPort:
        """Begin a fresh command.

        Returns:
            New runner bound to the same executable with no arguments
        """
        ...

    def arg(self, value: ArgValue) -> RunnerPort:
        """Append one token (trimmed) or a sequence of tokens (as-is).

        Args:
            value: Token or tokens; empty values are ignored

        Returns:
            This runner
        """
        ...

    def line(self, value: str | None) -> RunnerPort:
        """Append the tokens of a quote-aware command line.

        Args:
            value: Command line text; empty values are ignored

        Returns:
            This runner
        """
        ...

    def arg_if(self, condition: Any, value: ArgValue) -> RunnerPort:
        """Append when the condition object is truthy, without calling it."""
        ...

    def arg_when(self, predicate: Callable[[], bool], value: ArgValue) -> RunnerPort:
        """Append when calling the predicate returns a truthy value."""
        ...

    def exec(self) -> ExecResult:
        """Execute the accumulated command synchronously.

        Returns:
            ExecResult stamped with the runner's arguments
        """
        ...

    async def exec_async(self) -> ExecResult:
        """Execute the accumulated command asynchronously.

        Returns:
            ExecResult stamped with the runner's arguments
        """
        ...
