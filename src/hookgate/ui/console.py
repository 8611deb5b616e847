"""Console output formatting utilities for hookgate."""

from __future__ import annotations

import sys
from typing import Optional

import click

FAILURE_BANNER = "pre-commit hook failed during:"
SUCCESS_BANNER = "pre-commit hook succeeded"

WARNING_COLOR = "yellow"
SUCCESS_COLOR = "green"


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False):
        """
        Initialize console formatter.

        Args:
            debug: If True, show debug lines and stack traces
        """
        self.debug = debug

    def print_failure(self, step: str) -> None:
        """Print the banner naming the step that stopped the commit."""
        click.echo()
        click.secho(FAILURE_BANNER, fg=WARNING_COLOR)
        click.secho(step, fg=WARNING_COLOR)

    def print_success(self) -> None:
        """Print the banner shown when every check passed."""
        click.echo()
        click.secho(SUCCESS_BANNER, fg=SUCCESS_COLOR)

    def print_plan_step(self, position: int, name: str, cmd: str) -> None:
        """Print one configured check."""
        click.echo(f"  {position}. {name}")
        if cmd != name:
            click.echo(f"     runs: {cmd}")

    def print_error(
        self,
        title: str,
        message: str,
        details: Optional[list[str]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Print structured error message.

        Args:
            title: Error title
            message: Main error message
            details: Optional list of detail lines
            suggestion: Optional suggestion for user
        """
        click.echo(f"\nERROR: {title}", err=True)
        click.echo(message, err=True)
        if details:
            for detail in details:
                click.echo(f"  {detail}", err=True)
        if suggestion:
            click.echo(f"\n{suggestion}", err=True)

    def print_exception(self, exc: BaseException) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exception(type(exc), exc, exc.__traceback__, file=sys.stderr)
        else:
            click.echo(f"Error: {exc}", err=True)

    def print_info(self, message: str) -> None:
        """Print informational message."""
        click.echo(message)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            click.echo(f"[DEBUG] {message}", err=True)


# Global console instance (initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
