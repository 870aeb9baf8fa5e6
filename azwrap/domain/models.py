"""Domain models for azwrap following DDD principles."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from azwrap.domain.exceptions import CommandError

VERSION_BANNER = "azure-cli (2.0.0)\r\n\r\n"
MOCK_ERROR_MESSAGE = "mock error response"
NOT_CONFIGURED_CODE = 100
NOT_CONFIGURED_MESSAGE = "Mock ExecResults not set"


class RunnerType(str, Enum):
    """Value object selecting the runner variant used to execute commands."""

    SHELL = "shell"
    MOCK = "mock"


class OutputFormat(str, Enum):
    """Value object representing az output formats."""

    JSON = "json"
    JSONC = "jsonc"
    TABLE = "table"
    TSV = "tsv"
    YAML = "yaml"
    YAMLC = "yamlc"
    NONE = "none"


class MockResponseType(str, Enum):
    """Predefined response kinds for simple mock setup."""

    VERSION = "version"
    JUST_RETURN_CODE = "just_return_code"
    FAIL_CODE = "fail_code"

    def to_result(self) -> ExecResult:
        """Build the canned result for this response kind."""
        if self is MockResponseType.VERSION:
            return ExecResult(code=0, stdout=VERSION_BANNER)
        if self is MockResponseType.FAIL_CODE:
            return ExecResult(code=1, stderr=MOCK_ERROR_MESSAGE)
        return ExecResult(code=0)


class ExecResult(BaseModel):
    """Value object representing the outcome of one command execution."""

    code: int = Field(..., description="Process exit status")
    stdout: str | None = Field(None, description="Captured standard output")
    stderr: str | None = Field(None, description="Captured standard error")
    arguments: tuple[str, ...] | None = Field(
        None, description="Arguments that produced this result, set by the runner"
    )

    model_config = {"frozen": True, "strict": True}

    @classmethod
    def not_configured(cls) -> ExecResult:
        """Result returned when no mock response has been queued."""
        return cls(code=NOT_CONFIGURED_CODE, stderr=NOT_CONFIGURED_MESSAGE)

    @property
    def succeeded(self) -> bool:
        """Check if the command exited with status 0."""
        return self.code == 0

    def with_arguments(self, arguments: Sequence[str]) -> ExecResult:
        """Return a copy of this result stamped with the given arguments."""
        return self.model_copy(update={"arguments": tuple(arguments)})

    def raise_for_code(self) -> ExecResult:
        """Raise CommandError unless the command succeeded.

        Returns:
            This result, for chaining

        Raises:
            CommandError: If the exit code is non-zero
        """
        if not self.succeeded:
            message = (self.stderr or "").strip() or f"Command exited with code {self.code}"
            raise CommandError(message, result=self)
        return self


class AzOptions(BaseModel):
    """Value object for wrapper configuration."""

    az_path: str = Field(default="az", description="Path to the az executable")
    runner_type: RunnerType = Field(default=RunnerType.SHELL, description="Runner variant")
    output: OutputFormat | None = Field(None, description="Value passed to --output")
    subscription: str | None = Field(None, description="Value passed to --subscription")
    query: str | None = Field(None, description="JMESPath passed to --query")
    verbose: bool = Field(default=False, description="Pass --verbose")
    debug: bool = Field(default=False, description="Pass --debug")
    only_show_errors: bool = Field(default=False, description="Pass --only-show-errors")
    cwd: str | None = Field(None, description="Working directory for spawned processes")
    timeout: float | None = Field(None, gt=0, description="Execution timeout in seconds")

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    @field_validator("az_path")
    @classmethod
    def validate_az_path(cls, v: str) -> str:
        """Ensure the executable path is not blank."""
        if not v:
            raise ValueError("az_path must be a non-empty string")
        return v
