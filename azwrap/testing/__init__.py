"""Testing utilities for code built on azwrap."""

from azwrap.testing.harness import MockHarness, MockResponseFunctions, mock_response

__all__ = [
    "MockHarness",
    "MockResponseFunctions",
    "mock_response",
]
