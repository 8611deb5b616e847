# model.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class CheckStep:
    """A single named command gating the commit."""
    name: str
    argv: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("CheckStep name must be non-empty")
        if not self.argv:
            raise ValueError(f"CheckStep {self.name!r} has an empty command")
        # accept lists, store an immutable tuple
        object.__setattr__(self, "argv", tuple(self.argv))

    @property
    def cmd(self) -> str:
        return " ".join(self.argv)


class RunState(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class RunResult:
    """
    Outcome of one pass over the check steps.

    `failed_index` / `failed_step` / `failed_exit_code` are only set when
    state is FAILED.
    """
    state: RunState
    executed: int = 0
    failed_index: Optional[int] = None
    failed_step: Optional[CheckStep] = None
    failed_exit_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.state is RunState.SUCCEEDED

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1
