"""Domain-specific exceptions following DDD principles."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from azwrap.domain.models import ExecResult


class AzWrapError(Exception):
    """Base exception for all azwrap errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class CommandError(AzWrapError):
    """A command finished with a failure code or produced unusable output."""

    def __init__(self, message: str, result: ExecResult | None = None):
        super().__init__(message)
        self.result = result
        if result is not None:
            self.details["code"] = result.code
            if result.arguments is not None:
                self.details["arguments"] = result.arguments


class ConfigurationError(AzWrapError):
    """Wrapper options could not be loaded or validated."""

    pass
