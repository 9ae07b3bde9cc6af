"""Trial execution engine.

Exports:
    for_all: Run a property against generated arguments
    TrialReport: Outcome of a for_all() run

Python 3.13+.
"""

from .report import TrialReport
from .runner import for_all

__all__ = ["TrialReport", "for_all"]
