"""propcheck exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
A property that returns False is not an error: it is reported through
TrialReport. Only misuse of the library surfaces as one of these types.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ArityError",
    "EmptyInputError",
    "GenerationError",
    "InvalidBoundsError",
    "PropCheckError",
    "SourceMismatchError",
    "UnsupportedTypeError",
]


class PropCheckError(Exception):
    """Base exception for all propcheck errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PropCheckError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class GenerationError(PropCheckError):
    """A generator could not be built from the given arguments.

    Raised at construction time, before any entropy is consumed.
    """


class UnsupportedTypeError(GenerationError):
    """No generation rule matches the requested type.

    Example:
        generate(object)  # no rule for arbitrary objects

    Not retried; surfaces to the caller of generate().
    """


class EmptyInputError(GenerationError):
    """A selection was requested from a zero-length input.

    Example:
        choose([])
    """


class InvalidBoundsError(GenerationError):
    """Bounds passed to generate() are unusable.

    Covers inverted bounds (min > max), integral bounds outside the
    type's range, non-finite float bounds, and bounds passed for a type
    that does not take them.
    """


class ArityError(PropCheckError):
    """Wrong number of callables or arguments for an operation.

    Examples:
    - one_of() with fewer than two candidates
    - for_all() with more generators than the property has parameters
    """


class SourceMismatchError(PropCheckError):
    """Generators passed to for_all() draw from a stream it cannot report.

    The report's seed only replays a run when every generator draws from
    the run's RandomSource.

    Example:
        for_all(prop, generate(int, source=RandomSource(1)), source=RandomSource(2))
    """
