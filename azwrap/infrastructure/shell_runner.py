"""Shell runner adapter that executes az as a real process."""

from __future__ import annotations

import asyncio
import logging
import subprocess  # nosec B404

from azwrap.domain.arguments import ArgumentBuilder
from azwrap.domain.models import ExecResult

logger = logging.getLogger(__name__)

COMMAND_NOT_FOUND_CODE = 127
COMMAND_TIMEOUT_CODE = 124
COMMAND_FAILED_CODE = 126
OUTPUT_ENCODING = "utf-8"


class ShellRunner(ArgumentBuilder):
    """Runner that spawns the executable with the accumulated arguments.

    Failures to launch or complete the process are reported through the
    result code and stderr, never raised.
    """

    def __init__(self, path: str, cwd: str | None = None, timeout: float | None = None):
        """Initialize shell runner.

        Args:
            path: Executable to run
            cwd: Working directory for the process
            timeout: Execution timeout in seconds
        """
        super().__init__(path)
        self._cwd = cwd
        self._timeout = timeout

    def start(self) -> ShellRunner:
        """Create a new runner with the same executable and process settings."""
        return ShellRunner(self._path, cwd=self._cwd, timeout=self._timeout)

    def exec(self) -> ExecResult:
        """Execute the command synchronously."""
        command = [self._path, *self._args]
        logger.debug("Executing %s", command)

        try:
            completed = subprocess.run(  # nosec B603
                command,
                capture_output=True,
                encoding=OUTPUT_ENCODING,
                errors="replace",
                cwd=self._cwd,
                timeout=self._timeout,
            )
        except FileNotFoundError:
            return self._failure(COMMAND_NOT_FOUND_CODE, f"Command not found: {self._path}")
        except subprocess.TimeoutExpired:
            return self._failure(
                COMMAND_TIMEOUT_CODE, f"Command timed out after {self._timeout} seconds"
            )
        except OSError as e:
            return self._failure(COMMAND_FAILED_CODE, f"Failed to execute command: {e}")

        return self._result(completed.returncode, completed.stdout, completed.stderr)

    async def exec_async(self) -> ExecResult:
        """Execute the command asynchronously."""
        command = [self._path, *self._args]
        logger.debug("Executing async %s", command)

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=self._cwd,
            )
        except FileNotFoundError:
            return self._failure(COMMAND_NOT_FOUND_CODE, f"Command not found: {self._path}")
        except OSError as e:
            return self._failure(COMMAND_FAILED_CODE, f"Failed to execute command: {e}")

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self._timeout)
        except asyncio.TimeoutError:
            process.kill()
            await process.wait()
            return self._failure(
                COMMAND_TIMEOUT_CODE, f"Command timed out after {self._timeout} seconds"
            )

        return self._result(
            process.returncode or 0,
            stdout.decode(OUTPUT_ENCODING, errors="replace") if stdout else "",
            stderr.decode(OUTPUT_ENCODING, errors="replace") if stderr else "",
        )

    def _result(self, code: int, stdout: str, stderr: str) -> ExecResult:
        if code != 0:
            logger.info("Command %s exited with code %d", self._path, code)
        return ExecResult(code=code, stdout=stdout, stderr=stderr, arguments=tuple(self._args))

    def _failure(self, code: int, message: str) -> ExecResult:
        logger.error(message)
        return ExecResult(code=code, stderr=message, arguments=tuple(self._args))
