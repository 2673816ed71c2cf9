# Copyright Krafter SAS <developer@krafter.io>
# MIT License (see LICENSE file).

import importlib
import inspect
import logging
import pkgutil

# Fastsort imports
from fastsort.config import BaseSettings

# Rich Click
import rich_click as click

# Rich
from rich.console import Console
from rich.table import Table

# Click Core
from rich_click import Context as Context

# Click Decorators
from rich_click import argument as argument
from rich_click import option as option
from rich_click import pass_context as pass_context
from rich_click import pass_obj as pass_cli_context

# Click Utilities
from rich_click import echo as echo


logger = logging.getLogger("cli.command")
console = Console()


def getCliLogger(suffix: str) -> logging.Logger:
    return logger.getChild(suffix)


def register_commands_in_group(package_name: str, cli_group: click.Group) -> None:
    """
    Register all CLI commands in the given package in the given CLI group.
    """
    package = importlib.import_module(package_name)

    for _, module_name, is_pkg in pkgutil.iter_modules(
        package.__path__, package.__name__ + "."
    ):
        if not is_pkg:
            module = importlib.import_module(module_name)

            for name, obj in inspect.getmembers(module):
                if isinstance(obj, click.Command) and not isinstance(obj, click.Group):
                    cli_group.add_command(obj)


def command(name: str | None = None, **attrs):
    return click.command(name, **attrs)


class CliContext:
    """CLI application context containing settings."""

    def __init__(self, settings: BaseSettings):
        self.settings = settings


@click.group()
@option(
    "--env-file", default=".env", help="The environment file to use (default: .env)."
)
@pass_context
def cli(ctx: Context, env_file: str):
    """Fastsort CLI"""
    from fastsort.config import init_settings
    from fastsort.logger import setup_logging

    settings = init_settings(env_file)

    setup_logging(
        level=settings.log_level,
        output=settings.log_output,
        format=settings.log_format,
        log_file=settings.log_path,
    )

    ctx.obj = CliContext(settings)


def main():
    register_commands_in_group(__name__, cli)
    cli()


__all__ = [
    # Click Core
    "Context",
    # Click Decorators
    "argument",
    "option",
    "pass_context",
    "pass_cli_context",
    # Click Utilities
    "echo",
    # Custom
    "CliContext",
    "command",
    "register_commands_in_group",
    # Console
    "console",
    "Table",
    # App
    "getCliLogger",
    "cli",
    "main",
]
