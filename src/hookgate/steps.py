# steps.py
# The fixed list of checks run before every commit, in order.
from __future__ import annotations

from typing import Tuple

from .model import CheckStep


def check(name: str, *argv: str) -> CheckStep:
    """Create a check step: check("display name", "tool", "arg", ...)."""
    return CheckStep(name=name, argv=argv)


FORMAT_CHECK = check("cargo fmt -- --check", "cargo", "fmt", "--", "--check")

LINT_CHECK = check(
    "clippy --locked -- -D warning",
    "cargo", "clippy", "--locked", "--", "-D", "warnings",
)

CHECKS: Tuple[CheckStep, ...] = (FORMAT_CHECK, LINT_CHECK)
