"""Result of a for_all() run.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["TrialReport"]


@dataclass(frozen=True, slots=True)
class TrialReport:
    """Outcome of running a property against generated arguments.

    Attributes:
        passed: Whether every requested trial held
        requested_trials: Number of trials asked for
        completed_trials: Trials that held before the first failure. Equal
            to requested_trials when passed; the failing trial itself is
            never counted.
        seed: Seed of the RandomSource active during the run. When the
            source was seeded right before the run, reseeding with it
            replays the same arguments.
        failing_arguments: Arguments of the first failing trial, in
            property parameter order. None when passed.

    Example:
        >>> report = for_all(lambda xs: sorted(xs) == xs, lists(int))
        >>> report.passed, report.requested_trials, report.completed_trials
        (False, 100, 3)
        >>> report.failure_repr
        '([97, 258, 173])'
    """

    passed: bool
    requested_trials: int
    completed_trials: int
    seed: int
    failing_arguments: tuple[Any, ...] | None = None

    def __post_init__(self) -> None:
        """Validate TrialReport invariants.

        Raises:
            ValueError: If completed_trials is outside [0, requested_trials],
                if passed disagrees with the trial counts, or if
                failing_arguments is set for a passing report (or missing
                for a failing one).
        """
        if self.requested_trials < 0:
            msg = f"requested_trials must be >= 0, got {self.requested_trials}"
            raise ValueError(msg)
        if not 0 <= self.completed_trials <= self.requested_trials:
            msg = (
                f"completed_trials ({self.completed_trials}) must be in "
                f"[0, {self.requested_trials}]"
            )
            raise ValueError(msg)
        if self.passed != (self.completed_trials == self.requested_trials):
            msg = (
                f"passed={self.passed} contradicts "
                f"{self.completed_trials}/{self.requested_trials} completed trials"
            )
            raise ValueError(msg)
        if self.passed and self.failing_arguments is not None:
            msg = "failing_arguments must be None when passed"
            raise ValueError(msg)
        if not self.passed and self.failing_arguments is None:
            msg = "failing_arguments is required when not passed"
            raise ValueError(msg)

    @property
    def failure_repr(self) -> str | None:
        """Failing arguments rendered as ``"(a, b, c)"``; None when passed."""
        if self.failing_arguments is None:
            return None
        return "(" + ", ".join(repr(value) for value in self.failing_arguments) + ")"
