# cli.py
from __future__ import annotations

import sys

import click

from hookgate.install import HookExistsError, HookInstallError, install_hook
from hookgate.runner import run_checks
from hookgate.steps import CHECKS
from hookgate.ui.console import Console, set_console, get_console


@click.group(invoke_without_command=True)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show commands, exit codes and stack traces)",
)
@click.pass_context
def cli(ctx, debug):
    """hookgate — fail-fast pre-commit checks."""
    console = Console(debug=debug)
    set_console(console)

    # bare `hookgate` behaves like `hookgate run`
    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@cli.command()
def run():
    """Run the pre-commit checks, stopping at the first failure."""
    console = get_console()

    try:
        result = run_checks(CHECKS, console=console)
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)

    sys.exit(result.exit_code)


@cli.command(name="list")
def list_checks():
    """Show the checks that run before each commit."""
    console = get_console()
    console.print_info("Checks (run in order, fail-fast):")
    for position, step in enumerate(CHECKS, start=1):
        console.print_plan_step(position, step.name, step.cmd)


@cli.command()
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing pre-commit hook")
def install(force):
    """Install hookgate as this repository's git pre-commit hook."""
    console = get_console()

    try:
        hook = install_hook(force=force)
    except HookExistsError as e:
        console.print_error(
            "Hook already installed",
            str(e),
            suggestion="Re-run with --force to replace it:\n  hookgate install --force",
        )
        sys.exit(1)
    except HookInstallError as e:
        console.print_error("Could not install hook", str(e))
        sys.exit(1)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)

    console.print_info(f"Installed pre-commit hook -> {hook}")


if __name__ == "__main__":
    cli()
