"""Mock runner that pops queued results instead of spawning processes."""

from __future__ import annotations

import logging
import weakref
from collections import deque

from azwrap.domain.arguments import ArgumentBuilder
from azwrap.domain.models import ExecResult

logger = logging.getLogger(__name__)


class ResponseQueue:
    """FIFO of results handed out one per mock execution.

    An empty queue yields a code-100 result rather than raising, so a missing
    test fixture shows up as an inspectable failure.
    """

    def __init__(self) -> None:
        self._responses: deque[ExecResult] = deque()

    def add(self, response: ExecResult) -> ResponseQueue:
        """Append a result to the tail of the queue."""
        self._responses.append(response)
        return self

    def get_next(self) -> ExecResult:
        """Remove and return the head, or the not-configured result when empty."""
        if self._responses:
            return self._responses.popleft()
        return ExecResult.not_configured()

    def clear(self) -> None:
        """Drop every pending result."""
        self._responses.clear()

    def __len__(self) -> int:
        return len(self._responses)


class MockScope:
    """Response source shared by a test and the wrapper under test.

    Holds the response queue and a weak reference to the most recently
    constructed MockRunner. Not thread-safe; use one scope per isolated test.
    """

    def __init__(self) -> None:
        self.responses = ResponseQueue()
        self._current_runner: weakref.ref[MockRunner] | None = None

    def register(self, runner: MockRunner) -> None:
        """Record ``runner`` as the current mock runner."""
        self._current_runner = weakref.ref(runner)

    @property
    def current_runner(self) -> MockRunner | None:
        """Most recently constructed runner, if it is still alive."""
        if self._current_runner is None:
            return None
        return self._current_runner()


# Process-wide scope for callers that do not pass one explicitly.
default_scope = MockScope()


class MockRunner(ArgumentBuilder):
    """Runner that returns results from a MockScope's response queue.

    The accumulated arguments are never checked against the queued result;
    tests assert on ``ExecResult.arguments`` instead.
    """

    def __init__(self, path: str, scope: MockScope | None = None):
        super().__init__(path)
        self._scope = scope if scope is not None else default_scope
        self._scope.register(self)

    @property
    def scope(self) -> MockScope:
        """Scope this runner reads responses from."""
        return self._scope

    def clear(self) -> None:
        """Reset accumulated arguments on this instance."""
        self._args = []

    def start(self) -> MockRunner:
        """Create a new runner for the same path and scope."""
        return MockRunner(self._path, scope=self._scope)

    def exec(self) -> ExecResult:
        """Pop the next queued result and stamp it with the arguments."""
        result = self._scope.responses.get_next().with_arguments(self._args)
        logger.debug("Mock exec %s %s -> code %d", self._path, self._args, result.code)
        return result

    async def exec_async(self) -> ExecResult:
        """Asynchronous variant of exec; resolves without suspending."""
        return self.exec()
