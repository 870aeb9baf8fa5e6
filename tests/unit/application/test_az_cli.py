"""Unit tests for the AzCli wrapper driven by mock runners."""

from functools import partial

import pytest

from azwrap.application.az_cli import AzCli
from azwrap.domain.exceptions import CommandError
from azwrap.domain.models import AzOptions, ExecResult, MockResponseType, OutputFormat
from azwrap.infrastructure.mock_runner import MockRunner


@pytest.fixture
def make_cli(mock_scope):
    """Build an AzCli on the isolated scope with the version probe answered."""

    def _make(options=None, probe=None):
        mock_scope.responses.add(probe or MockResponseType.VERSION.to_result())
        return AzCli(options, runner_factory=partial(MockRunner, scope=mock_scope))

    return _make


class TestAzCliConstruction:
    """Test wrapper construction and the version probe."""

    def test_probe_consumes_one_response(self, mock_scope):
        """Test that construction reads exactly one queued result."""
        # Arrange
        mock_scope.responses.add(MockResponseType.VERSION.to_result())
        mock_scope.responses.add(ExecResult(code=0, stdout="later"))

        # Act
        cli = AzCli(runner_factory=partial(MockRunner, scope=mock_scope))

        # Assert
        assert cli.version == "2.0.0"
        assert len(mock_scope.responses) == 1
        assert cli.last_runner.args == ["--version"]
        assert cli.run().stdout == "later"

    def test_base_runner_left_empty(self, make_cli):
        cli = make_cli(AzOptions(az_path="/opt/az"))

        assert isinstance(cli.runner, MockRunner)
        assert cli.runner.path == "/opt/az"
        assert cli.runner.args == []

    def test_modern_version_banner(self, make_cli):
        """Test parsing the banner printed by current az releases."""
        banner = "azure-cli                         2.61.0\n\ncore                              2.61.0\n"

        cli = make_cli(probe=ExecResult(code=0, stdout=banner))

        assert cli.version == "2.61.0"

    def test_failed_probe_does_not_raise(self, make_cli):
        cli = make_cli(probe=MockResponseType.FAIL_CODE.to_result())

        assert cli.version is None

    def test_unrecognised_banner(self, make_cli):
        cli = make_cli(probe=ExecResult(code=0, stdout="something else"))

        assert cli.version is None

    def test_refresh_version(self, make_cli, mock_scope):
        cli = make_cli(probe=ExecResult(code=1))
        mock_scope.responses.add(MockResponseType.VERSION.to_result())

        assert cli.refresh_version() == "2.0.0"
        assert cli.version == "2.0.0"

    def test_default_runner_factory_from_options(self, shared_scope, mock_options):
        """Test that runner_type selects the mock runner without injection."""
        shared_scope.responses.add(MockResponseType.VERSION.to_result())

        cli = AzCli(mock_options)

        assert isinstance(cli.runner, MockRunner)
        assert cli.version == "2.0.0"


class TestAzCliCommands:
    """Test command building and execution."""

    def test_run_builds_arguments(self, make_cli, mock_scope):
        """Test that the line and extra tokens are recorded on the result."""
        # Arrange
        cli = make_cli()
        mock_scope.responses.add(ExecResult(code=0, stdout="done"))

        # Act
        result = cli.run('vm create --name "my vm"', "--image", "Ubuntu2204")

        # Assert
        assert result.stdout == "done"
        assert result.arguments == ("vm", "create", "--name", "my vm", "--image", "Ubuntu2204")
        assert tuple(cli.last_runner.args) == result.arguments

    def test_run_returns_failures(self, make_cli, mock_scope):
        """Test that failing commands are returned, not raised."""
        cli = make_cli()
        mock_scope.responses.add(MockResponseType.FAIL_CODE.to_result())

        result = cli.run("group show -n missing")

        assert result.code == 1
        assert result.stderr == "mock error response"

    def test_commands_do_not_share_arguments(self, make_cli, mock_scope):
        cli = make_cli()
        mock_scope.responses.add(ExecResult(code=0)).add(ExecResult(code=0))

        first = cli.run("group list")
        second = cli.run("account show")

        assert first.arguments == ("group", "list")
        assert second.arguments == ("account", "show")

    def test_fluent_options_add_global_arguments(self, make_cli, mock_scope):
        """Test the global arguments appended after the command tokens."""
        # Arrange
        cli = make_cli()
        mock_scope.responses.add(ExecResult(code=0))

        # Act
        returned = (
            cli.output("table")
            .subscription("sub-1")
            .query("[].name")
            .verbose()
            .debug()
            .only_show_errors()
        )
        result = cli.run("group list")

        # Assert
        assert returned is cli
        assert cli.options.output == OutputFormat.TABLE
        assert result.arguments == (
            "group",
            "list",
            "--output",
            "table",
            "--subscription",
            "sub-1",
            "--query",
            "[].name",
            "--verbose",
            "--debug",
            "--only-show-errors",
        )

    def test_fluent_options_can_be_reset(self, make_cli, mock_scope):
        cli = make_cli(AzOptions(output="tsv", verbose=True))
        mock_scope.responses.add(ExecResult(code=0))

        result = cli.output(None).verbose(False).run("group list")

        assert result.arguments == ("group", "list")

    def test_invalid_output_format(self, make_cli):
        cli = make_cli()

        with pytest.raises(ValueError):
            cli.output("sideways")

    def test_run_json(self, make_cli, mock_scope, success_result):
        """Test that run_json forces JSON output and decodes stdout."""
        # Arrange
        cli = make_cli(AzOptions(output="table"))
        mock_scope.responses.add(success_result)

        # Act
        data = cli.run_json("group list")

        # Assert
        assert data == [{"name": "rg-test"}]
        assert cli.last_runner.args == ["group", "list", "--output", "json"]
        assert cli.options.output == OutputFormat.TABLE

    def test_run_json_empty_output(self, make_cli, mock_scope):
        cli = make_cli()
        mock_scope.responses.add(MockResponseType.JUST_RETURN_CODE.to_result())

        assert cli.run_json("group delete -n rg --yes") is None

    def test_run_json_failure_raises(self, make_cli, mock_scope):
        cli = make_cli()
        mock_scope.responses.add(MockResponseType.FAIL_CODE.to_result())

        with pytest.raises(CommandError) as exc_info:
            cli.run_json("group show -n missing")

        assert exc_info.value.message == "mock error response"
        assert exc_info.value.result.arguments == (
            "group",
            "show",
            "-n",
            "missing",
            "--output",
            "json",
        )

    def test_run_json_invalid_output(self, make_cli, mock_scope):
        cli = make_cli()
        mock_scope.responses.add(ExecResult(code=0, stdout="not json"))

        with pytest.raises(CommandError, match="not valid JSON"):
            cli.run_json("group list")

    @pytest.mark.asyncio
    async def test_run_async(self, make_cli, mock_scope):
        cli = make_cli()
        mock_scope.responses.add(ExecResult(code=0, stdout="async"))

        result = await cli.run_async("account show")

        assert result.stdout == "async"
        assert result.arguments == ("account", "show")

    @pytest.mark.asyncio
    async def test_run_json_async(self, make_cli, mock_scope, success_result):
        cli = make_cli()
        mock_scope.responses.add(success_result)

        data = await cli.run_json_async("group list")

        assert data == [{"name": "rg-test"}]

    @pytest.mark.asyncio
    async def test_run_async_without_responses(self, make_cli):
        cli = make_cli()

        result = await cli.run_async("account show")

        assert result.code == 100
        assert result.stderr == "Mock ExecResults not set"
