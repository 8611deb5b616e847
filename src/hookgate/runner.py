# runner.py
from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence

from .model import CheckStep, RunResult, RunState
from .ui.console import Console, get_console

# exit status recorded when the executable could not be started at all
NOT_RUNNABLE = 127


# ----------------------------------------------------------------------
# Errors
# ----------------------------------------------------------------------

@dataclass
class StepFailure(Exception):
    index: int
    step: str
    cmd: str
    exit_code: int

    def __str__(self) -> str:
        return f"step {self.index + 1} '{self.step}' failed (exit={self.exit_code}): {self.cmd}"


# ----------------------------------------------------------------------
# Execution primitives
# ----------------------------------------------------------------------

def run_step(index: int, step: CheckStep) -> None:
    """
    Run one step with the caller's stdout/stderr.

    Raises StepFailure on a non-zero exit or when the command cannot be
    started; both are reported the same way.
    """
    try:
        proc = subprocess.run(list(step.argv), shell=False, check=False)
        code = proc.returncode
    except OSError:
        # missing executable, not executable, bad interpreter...
        code = NOT_RUNNABLE

    if code != 0:
        raise StepFailure(index=index, step=step.name, cmd=step.cmd, exit_code=code)


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def run_checks(
    steps: Sequence[CheckStep],
    *,
    console: Optional[Console] = None,
) -> RunResult:
    """
    Run `steps` in order, stopping at the first failure.

    Prints the failure banner (naming the failed step) or the success
    banner, and returns the final RunResult.
    """
    if not steps:
        raise ValueError("run_checks needs at least one step")
    console = console or get_console()

    result = RunResult(state=RunState.PENDING)
    for index, step in enumerate(steps):
        result.state = RunState.RUNNING
        console.print_debug(f"running step {index + 1}/{len(steps)}: {step.cmd}")
        result.executed += 1
        try:
            run_step(index, step)
        except StepFailure as failure:
            console.print_debug(str(failure))
            console.print_failure(failure.step)
            result.state = RunState.FAILED
            result.failed_index = index
            result.failed_step = step
            result.failed_exit_code = failure.exit_code
            return result

    console.print_success()
    result.state = RunState.SUCCEEDED
    return result
