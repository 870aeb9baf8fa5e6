"""Ports (interfaces) for azwrap following hexagonal architecture."""

from azwrap.ports.console import ConsolePort
from azwrap.ports.runner import RunnerPort

__all__ = [
    "ConsolePort",
    "RunnerPort",
]
