"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Type dispatch errors (no generation rule for a type)
        2000-2999: Input errors (bounds, empty inputs, candidate counts)
        3000-3999: Engine errors (signature mismatches, unreplayable sources)
    """

    # Type dispatch errors (1000-1999)
    UNSUPPORTED_TYPE = 1001
    UNPARAMETERIZED_COLLECTION = 1002

    # Input errors (2000-2999)
    EMPTY_INPUT = 2001
    BOUNDS_INVERTED = 2002
    BOUND_OUT_OF_RANGE = 2003
    BOUND_NOT_FINITE = 2004
    BOUNDS_NOT_SUPPORTED = 2005
    TOO_FEW_CANDIDATES = 2006

    # Engine errors (3000-3999)
    PROPERTY_ARITY_MISMATCH = 3001
    REPORTER_ARITY_MISMATCH = 3002
    SOURCE_MISMATCH = 3003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for humans reading a failed test run and for tools parsing the JSON form.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        operation: Public operation that raised (generate, choose, for_all, ...)
        expected: What the operation expected (type, range, arity)
        received: What the operation actually received
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    operation: str | None = None
    expected: str | None = None
    received: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNSUPPORTED_TYPE]: No generation rule for type 'object'
              --> generate
              = expected: bool, int, float, str, list[T], dict[K, V] or a numeric type descriptor
              = received: object
              = help: Wrap a custom factory function in Custom() instead

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
