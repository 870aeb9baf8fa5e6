"""Application layer for azwrap - Contains the az wrapper service."""

from azwrap.application.az_cli import AzCli

__all__ = ["AzCli"]
