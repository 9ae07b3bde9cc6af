"""propcheck - property-based testing with composable random generators.

Checks that a boolean property holds for randomly generated arguments.
for_all() runs up to N trials, stops at the first counter-example and
returns a TrialReport carrying the seed needed to replay the run.

Public API:
    for_all - Run a property against generated arguments
    TrialReport - Outcome of a for_all() run
    generate - Generator for a type (bool, int, float, str, list[T], dict[K, V], ...)
    lists, fixed_lists, dicts, text - Collection generators
    one_of, choose, map_generate, constant - Combinators
    sample - Draw N values from a generator
    reseed - Reseed the process-wide random stream
    RandomSource - Explicit, independently seeded random stream
    Generator, Custom - Generator base class and user-function wrapper

Exceptions:
    PropCheckError - Base exception class
    UnsupportedTypeError - No generation rule for a type
    EmptyInputError - choose() from an empty sequence
    InvalidBoundsError - Unusable bounds passed to generate()
    ArityError - Wrong number of generators or candidates
    SourceMismatchError - Generators bound to a source the run cannot report

Submodules:
    propcheck.generators.types - Fixed-width numeric descriptors (INT8 .. UINT64, FLOAT32)
    propcheck.diagnostics - Diagnostic codes, templates and formatting
    propcheck.constants - Default sizes and counts
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .constants import ARRAY_MAX_SIZE, DEFAULT_SAMPLE_SIZE, DEFAULT_TRIALS
from .core import RandomSource, default_source, reseed
from .diagnostics import (
    ArityError,
    EmptyInputError,
    GenerationError,
    InvalidBoundsError,
    PropCheckError,
    SourceMismatchError,
    UnsupportedTypeError,
)
from .engine import TrialReport, for_all
from .generators import (
    Custom,
    Generator,
    choose,
    constant,
    dicts,
    fixed_lists,
    generate,
    lists,
    map_generate,
    one_of,
    sample,
    text,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("propcheck")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ARRAY_MAX_SIZE",
    "DEFAULT_SAMPLE_SIZE",
    "DEFAULT_TRIALS",
    "ArityError",
    "Custom",
    "EmptyInputError",
    "GenerationError",
    "Generator",
    "InvalidBoundsError",
    "PropCheckError",
    "SourceMismatchError",
    "RandomSource",
    "TrialReport",
    "UnsupportedTypeError",
    "__version__",
    "choose",
    "constant",
    "default_source",
    "dicts",
    "fixed_lists",
    "for_all",
    "generate",
    "lists",
    "map_generate",
    "one_of",
    "reseed",
    "sample",
    "text",
]
