"""Azure CLI wrapper application service."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from azwrap.domain.exceptions import CommandError
from azwrap.domain.models import AzOptions, ExecResult, OutputFormat
from azwrap.infrastructure.factory import InfrastructureFactory, RunnerFactory
from azwrap.ports.runner import RunnerPort

logger = logging.getLogger(__name__)

VERSION_PATTERN = re.compile(r"azure-cli\s+\(?([0-9][0-9A-Za-z.\-]*)")


class AzCli:
    """Wrapper issuing az commands through a RunnerPort.

    The runner variant is chosen by constructor injection, so the same calling
    code drives a real process or a mock. Construction probes ``az --version``
    once, which consumes one result from the runner.
    """

    def __init__(
        self,
        options: AzOptions | None = None,
        runner_factory: RunnerFactory | None = None,
    ):
        """Initialize the wrapper.

        Args:
            options: Wrapper options; defaults are used when omitted
            runner_factory: Callable building a runner for the az path. When
                omitted the factory is selected from ``options.runner_type``.
        """
        self._options = options or AzOptions()
        self._runner_factory = runner_factory or InfrastructureFactory.create_runner_factory(
            self._options
        )
        self._runner = self._runner_factory(self._options.az_path)
        self._last_runner: RunnerPort | None = None
        self._version = self._probe_version()

    @property
    def options(self) -> AzOptions:
        """Current wrapper options."""
        return self._options

    @property
    def runner(self) -> RunnerPort:
        """Base runner every command is started from."""
        return self._runner

    @property
    def last_runner(self) -> RunnerPort | None:
        """Runner used by the most recent command."""
        return self._last_runner

    @property
    def version(self) -> str | None:
        """az version detected at construction, or None if the probe failed."""
        return self._version

    def refresh_version(self) -> str | None:
        """Probe ``az --version`` again and return the detected version."""
        self._version = self._probe_version()
        return self._version

    # Fluent option surface

    def output(self, fmt: OutputFormat | str | None) -> AzCli:
        """Set the --output format for subsequent commands."""
        return self._update(output=OutputFormat(fmt) if fmt is not None else None)

    def subscription(self, subscription: str | None) -> AzCli:
        """Set the --subscription for subsequent commands."""
        return self._update(subscription=subscription)

    def query(self, query: str | None) -> AzCli:
        """Set the --query JMESPath for subsequent commands."""
        return self._update(query=query)

    def verbose(self, enabled: bool = True) -> AzCli:
        return self._update(verbose=enabled)

    def debug(self, enabled: bool = True) -> AzCli:
        return self._update(debug=enabled)

    def only_show_errors(self, enabled: bool = True) -> AzCli:
        return self._update(only_show_errors=enabled)

    # Commands

    def run(self, line: str | None = None, *args: str) -> ExecResult:
        """Run an az command synchronously.

        Args:
            line: Command line, e.g. ``"group list"``; quotes group tokens
            *args: Extra tokens appended verbatim after the line

        Returns:
            ExecResult of the command; failure codes are returned, not raised
        """
        result = self._build(line, args).exec()
        self._log_result(result)
        return result

    async def run_async(self, line: str | None = None, *args: str) -> ExecResult:
        """Run an az command asynchronously."""
        result = await self._build(line, args).exec_async()
        self._log_result(result)
        return result

    def run_json(self, line: str | None = None, *args: str) -> Any:
        """Run an az command with JSON output and decode it.

        Returns:
            Decoded JSON, or None when the command printed nothing

        Raises:
            CommandError: If the command fails or its output is not JSON
        """
        result = self._build(line, args, output=OutputFormat.JSON).exec()
        self._log_result(result)
        return self._decode_json(result)

    async def run_json_async(self, line: str | None = None, *args: str) -> Any:
        """Asynchronous variant of run_json."""
        result = await self._build(line, args, output=OutputFormat.JSON).exec_async()
        self._log_result(result)
        return self._decode_json(result)

    def _build(
        self,
        line: str | None,
        args: tuple[str, ...],
        output: OutputFormat | None = None,
    ) -> RunnerPort:
        runner = self._runner.start()
        runner.line(line).arg(list(args)).arg(self._global_args(output))
        self._last_runner = runner
        return runner

    def _global_args(self, output: OutputFormat | None = None) -> list[str]:
        opts = self._options
        output = output or opts.output
        global_args: list[str] = []
        if output is not None:
            global_args += ["--output", output.value]
        if opts.subscription:
            global_args += ["--subscription", opts.subscription]
        if opts.query:
            global_args += ["--query", opts.query]
        if opts.verbose:
            global_args.append("--verbose")
        if opts.debug:
            global_args.append("--debug")
        if opts.only_show_errors:
            global_args.append("--only-show-errors")
        return global_args

    def _probe_version(self) -> str | None:
        runner = self._runner.start().arg("--version")
        self._last_runner = runner
        result = runner.exec()
        if not result.succeeded:
            logger.warning(
                "az version probe failed with code %d: %s", result.code, (result.stderr or "").strip()
            )
            return None

        match = VERSION_PATTERN.search(result.stdout or "")
        if match is None:
            logger.warning("Could not find azure-cli version in probe output")
            return None
        return match.group(1)

    def _update(self, **changes: Any) -> AzCli:
        self._options = self._options.model_copy(update=changes)
        return self

    def _log_result(self, result: ExecResult) -> None:
        if result.succeeded:
            logger.debug("az %s succeeded", " ".join(result.arguments or []))
        else:
            logger.info("az %s failed with code %d", " ".join(result.arguments or []), result.code)

    @staticmethod
    def _decode_json(result: ExecResult) -> Any:
        result.raise_for_code()
        stdout = (result.stdout or "").strip()
        if not stdout:
            return None
        try:
            return json.loads(stdout)
        except json.JSONDecodeError as e:
            raise CommandError(f"Command output is not valid JSON: {e}", result=result) from e
