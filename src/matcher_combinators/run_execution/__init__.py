"""Run execution domain exports."""

from .check_run_use_case import RunExecutionError, execute_check_run
from .run_contracts import RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "execute_check_run",
]
