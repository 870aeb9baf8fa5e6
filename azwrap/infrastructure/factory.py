"""Factory for creating infrastructure adapters."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from rich.console import Console

from azwrap.domain.models import AzOptions, RunnerType
from azwrap.infrastructure.configuration_adapter import ConfigurationAdapter
from azwrap.infrastructure.console_adapter import ConsoleAdapter
from azwrap.infrastructure.mock_runner import MockRunner, MockScope
from azwrap.infrastructure.shell_runner import ShellRunner
from azwrap.ports.console import ConsolePort
from azwrap.ports.runner import RunnerPort

RunnerFactory = Callable[[str], RunnerPort]


class InfrastructureFactory:
    """Factory for creating infrastructure adapters following hexagonal architecture."""

    @staticmethod
    def create_runner_factory(
        options: AzOptions | RunnerType | None = None,
        scope: MockScope | None = None,
    ) -> RunnerFactory:
        """Create a callable that builds runners for an executable path.

        Args:
            options: Wrapper options, or just the runner type to use
            scope: Mock scope for mock runners; the default scope when omitted

        Returns:
            Callable taking an executable path and returning a RunnerPort
        """
        if isinstance(options, RunnerType):
            options = AzOptions(runner_type=options)
        options = options or AzOptions()

        if options.runner_type == RunnerType.MOCK:
            return partial(MockRunner, scope=scope)
        return partial(ShellRunner, cwd=options.cwd, timeout=options.timeout)

    @classmethod
    def create_runner(
        cls,
        options: AzOptions | RunnerType | None = None,
        scope: MockScope | None = None,
    ) -> RunnerPort:
        """Create a runner for the configured az executable.

        Returns:
            RunnerPort implementation
        """
        az_path = options.az_path if isinstance(options, AzOptions) else AzOptions().az_path
        return cls.create_runner_factory(options, scope)(az_path)

    @staticmethod
    def create_console(console: Console | None = None) -> ConsolePort:
        """Create a console adapter.

        Args:
            console: Optional Rich console instance

        Returns:
            ConsolePort implementation
        """
        return ConsoleAdapter(console)

    @staticmethod
    def create_configuration() -> ConfigurationAdapter:
        """Create a configuration adapter.

        Returns:
            ConfigurationAdapter instance
        """
        return ConfigurationAdapter()
