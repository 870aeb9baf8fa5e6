"""Domain layer for azwrap - value objects, argument building and errors."""

from azwrap.domain.arguments import ArgumentBuilder, parse_arg_line
from azwrap.domain.exceptions import AzWrapError, CommandError, ConfigurationError
from azwrap.domain.models import (
    AzOptions,
    ExecResult,
    MockResponseType,
    OutputFormat,
    RunnerType,
)

__all__ = [
    # Models
    "AzOptions",
    "ExecResult",
    "MockResponseType",
    "OutputFormat",
    "RunnerType",
    # Arguments
    "ArgumentBuilder",
    "parse_arg_line",
    # Exceptions
    "AzWrapError",
    "CommandError",
    "ConfigurationError",
]
