"""Shared constants for propcheck.

Centralized configuration constants used by the generators and the
trial engine. Every value here is a default only; each one can be
overridden per call by keyword.

Constants are grouped by domain:
- Collection limits: size caps for randomly sized sequences and mappings
- Engine defaults: trial and sample counts
- Seeding: width of unpredictable seeds

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Collection limits
    "ARRAY_MAX_SIZE",
    # Engine defaults
    "DEFAULT_TRIALS",
    "DEFAULT_SAMPLE_SIZE",
    # Seeding
    "SEED_BITS",
]

# ============================================================================
# COLLECTION LIMITS
# ============================================================================

# Maximum length (inclusive) of a randomly sized sequence, and maximum number
# of insertions into a randomly sized mapping.
# Bounds generation cost: a list of lists of ints is at most 1000 * 1000 draws.
ARRAY_MAX_SIZE: int = 1000

# ============================================================================
# ENGINE DEFAULTS
# ============================================================================

# Default number of trials run by for_all().
DEFAULT_TRIALS: int = 100

# Default number of values returned by sample().
DEFAULT_SAMPLE_SIZE: int = 10

# ============================================================================
# SEEDING
# ============================================================================

# Unpredictable seeds are drawn as unsigned integers of this width, so a
# reported seed always fits in 32 bits and is easy to paste back into reseed().
SEED_BITS: int = 32
