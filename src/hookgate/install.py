# install.py
# Writes a git pre-commit hook that runs hookgate.
from __future__ import annotations

import os
import stat
import subprocess
from pathlib import Path
from typing import Optional

from .git_facts.git import hooks_dir

HOOK_NAME = "pre-commit"

HOOK_SCRIPT = """#!/bin/sh
# installed by hookgate
exec hookgate run
"""


class HookInstallError(Exception):
    """The hook could not be written."""


class HookExistsError(HookInstallError):
    """A hook is already installed and `force` was not given."""


def install_hook(*, force: bool = False, cwd: Optional[str] = None) -> Path:
    """
    Install the pre-commit hook into the repository containing `cwd`.

    Returns the path of the written hook. An existing hook is only
    replaced when `force` is set.
    """
    try:
        target_dir = hooks_dir(cwd=cwd)
    except FileNotFoundError as e:
        raise HookInstallError("git is not installed or not on PATH") from e
    except subprocess.CalledProcessError as e:
        raise HookInstallError(f"not inside a git repository: {Path(cwd or '.').resolve()}") from e

    hook = target_dir / HOOK_NAME
    if hook.exists() and not force:
        raise HookExistsError(f"a {HOOK_NAME} hook already exists: {hook}")

    target_dir.mkdir(parents=True, exist_ok=True)
    hook.write_text(HOOK_SCRIPT)
    mode = os.stat(hook).st_mode
    os.chmod(hook, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return hook
