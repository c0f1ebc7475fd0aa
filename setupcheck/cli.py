"""
Command-line interface for the developer setup checker.

Runs every check against the local machine and prints a closing banner.
"""

import sys

import click
from rich.console import Console
from rich.text import Text

from . import __version__
from .config import ConfigError, ConfigLoader
from .preflight import InteractiveSession, PreflightChecker, default_checks

console = Console(soft_wrap=True)


@click.command()
@click.version_option(version=__version__, prog_name="setupcheck")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
@click.option("--strict", is_flag=True, help="Exit with status 1 when a check fails")
def cli(verbose: bool, strict: bool):
    """
    Check that this computer is ready for development.

    Verifies the default shell, the git version, the git email registered
    on GitHub, and the git editor. Requirements can be overridden with
    SETUPCHECK_* environment variables.
    """
    try:
        config = ConfigLoader().load()
    except ConfigError as e:
        console.print(Text(str(e), style="red"))
        sys.exit(2)

    with InteractiveSession(console) as session:
        checker = PreflightChecker(
            default_checks(config, session, console),
            console=console,
            verbose=verbose,
        )
        result = checker.run_all()

    if verbose:
        console.print(Text(result.summary(), style="dim"))

    if strict and not result.passed:
        sys.exit(1)


if __name__ == "__main__":
    cli()
