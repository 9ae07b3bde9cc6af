"""Core utilities shared by generators and the trial engine.

Exports:
    RandomSource: Seedable random stream with a recorded seed
    default_source: Process-wide RandomSource, created on first use
    reseed: Reseed the process-wide RandomSource

Python 3.13+.
"""

from .random_source import RandomSource, default_source, reseed

__all__ = ["RandomSource", "default_source", "reseed"]
