"""azwrap - Azure CLI wrapper with a swappable command runner."""

from .application.az_cli import AzCli
from .domain.models import AzOptions, ExecResult, MockResponseType
from .infrastructure.mock_runner import MockRunner, MockScope
from .infrastructure.shell_runner import ShellRunner
from .ports.runner import RunnerPort

__all__ = [
    "AzCli",
    "AzOptions",
    "ExecResult",
    "MockResponseType",
    "MockRunner",
    "MockScope",
    "RunnerPort",
    "ShellRunner",
]
__version__ = "0.1.0"
