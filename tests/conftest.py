"""Pytest configuration and shared fixtures for azwrap tests."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from azwrap.domain.models import AzOptions, ExecResult, RunnerType
from azwrap.infrastructure.mock_runner import MockRunner, MockScope, default_scope
from azwrap.testing.harness import MockHarness, mock_response


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing.

    Yields:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_scope() -> MockScope:
    """Create an isolated response scope.

    Returns:
        A MockScope with an empty queue
    """
    return MockScope()


@pytest.fixture
def shared_scope() -> Generator[MockScope, None, None]:
    """Provide the process-wide default scope, emptied before and after the test."""
    default_scope.responses.clear()
    yield default_scope
    default_scope.responses.clear()


@pytest.fixture
def mock_runner(mock_scope: MockScope) -> MockRunner:
    """Create a mock runner bound to the isolated scope."""
    return MockRunner("az", scope=mock_scope)


@pytest.fixture
def harness(mock_scope: MockScope) -> MockHarness:
    """Create an AzCli wired to a mock runner in the isolated scope."""
    return mock_response(AzOptions(), scope=mock_scope)


@pytest.fixture
def mock_options() -> AzOptions:
    """Options selecting the mock runner."""
    return AzOptions(runner_type=RunnerType.MOCK)


@pytest.fixture
def success_result() -> ExecResult:
    """A successful result with JSON output."""
    return ExecResult(code=0, stdout='[{"name": "rg-test"}]\n')
