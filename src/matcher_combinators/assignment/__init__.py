"""Multiset assignment solver exports."""

from .assignment_models import Assignment, Coverage
from .multiset_solver import solve_assignment

__all__ = [
    "Assignment",
    "Coverage",
    "solve_assignment",
]
