"""azwrap command line entry point."""

from __future__ import annotations

import click

from azwrap.application.az_cli import AzCli
from azwrap.domain.exceptions import AzWrapError
from azwrap.domain.models import OutputFormat
from azwrap.infrastructure.factory import InfrastructureFactory
from azwrap.infrastructure.log_config import configure_logging


@click.group()
@click.option("--config", "-c", "config_path", type=click.Path(), help="YAML or JSON options file")
@click.option("--az-path", help="Path to the az executable")
@click.option(
    "--output",
    "-o",
    type=click.Choice([fmt.value for fmt in OutputFormat]),
    help="Output format passed to az",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level",
)
@click.pass_context
def main(ctx, config_path, az_path, output, log_level):
    """Run Azure CLI commands through azwrap."""
    configure_logging(log_level)
    console = InfrastructureFactory.create_console()
    ctx.obj = {"console": console}

    try:
        options = InfrastructureFactory.create_configuration().load_options(config_path)
    except AzWrapError as e:
        console.print_error(e.message)
        ctx.exit(2)

    updates = {}
    if az_path:
        updates["az_path"] = az_path
    if output:
        updates["output"] = OutputFormat(output)
    ctx.obj["options"] = options.model_copy(update=updates)


@main.command()
@click.pass_context
def version(ctx):
    """Print the detected az version."""
    console = ctx.obj["console"]
    cli = AzCli(ctx.obj["options"])

    if cli.version is None:
        console.print_error("Unable to detect the az version")
        ctx.exit(1)
    console.print(cli.version)


@main.command(context_settings={"ignore_unknown_options": True, "help_option_names": []})
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def run(ctx, args):
    """Run an az command, e.g. ``azwrap run group list``.

    Every token is passed to az, including ``--help``.
    """
    console = ctx.obj["console"]
    cli = AzCli(ctx.obj["options"])
    result = cli.run(None, *args)

    if result.stdout:
        console.print_output(result.stdout)
    if result.stderr:
        console.print_error(result.stderr.strip())
    ctx.exit(result.code)


if __name__ == "__main__":
    main()
