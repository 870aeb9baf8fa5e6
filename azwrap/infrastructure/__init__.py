"""Infrastructure layer for azwrap."""

from azwrap.infrastructure.configuration_adapter import ConfigurationAdapter
from azwrap.infrastructure.console_adapter import ConsoleAdapter
from azwrap.infrastructure.factory import InfrastructureFactory
from azwrap.infrastructure.log_config import configure_logging
from azwrap.infrastructure.mock_runner import MockRunner, MockScope, ResponseQueue, default_scope
from azwrap.infrastructure.shell_runner import ShellRunner

__all__ = [
    "ConfigurationAdapter",
    "ConsoleAdapter",
    "InfrastructureFactory",
    "MockRunner",
    "MockScope",
    "ResponseQueue",
    "ShellRunner",
    "configure_logging",
    "default_scope",
]
