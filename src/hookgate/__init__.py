from .model import CheckStep, RunResult, RunState
from .runner import StepFailure, run_checks
from .steps import CHECKS, check

__all__ = ["CheckStep", "RunResult", "RunState", "StepFailure", "run_checks", "CHECKS", "check"]
