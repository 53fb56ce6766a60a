"""Shared utilities."""

from referent.utils.deadline import DeadlineOutcome, DeadlineResult, call_with_deadline
from referent.utils.logging import configure_logging

__all__ = [
    "DeadlineOutcome",
    "DeadlineResult",
    "call_with_deadline",
    "configure_logging",
]
