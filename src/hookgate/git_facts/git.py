# git.py
# Small wrapper around the Git CLI.
# hookgate only asks git where the hooks live.

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional


def _git(args: list[str], cwd: Optional[str] = None) -> str:
    """
    Execute a git command and return its stdout as a clean string.

    Args:
        args: List of git arguments (e.g. ["rev-parse", "--git-path", "hooks"])
        cwd: Optional working directory in which to run the git command.

    Returns:
        Stdout from the git command with surrounding whitespace removed.

    Raises:
        subprocess.CalledProcessError: git exited non-zero (e.g. not a repo)
        FileNotFoundError: git is not installed
    """
    out = subprocess.check_output(
        ["git", *args],
        cwd=cwd,
        text=True,
        stderr=subprocess.DEVNULL,
    )
    return out.strip()


def hooks_dir(cwd: Optional[str] = None) -> Path:
    """
    Return the directory git reads hooks from.

    Honors core.hooksPath and worktrees, which a hard-coded
    `.git/hooks` would not.
    """
    out = Path(_git(["rev-parse", "--git-path", "hooks"], cwd=cwd))
    if not out.is_absolute():
        out = Path(cwd or ".").resolve() / out
    return out
