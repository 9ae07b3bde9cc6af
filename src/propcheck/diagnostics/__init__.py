"""Diagnostic system for propcheck errors.

Provides structured error diagnostics with codes, hints, and the
operation that raised. Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ArityError,
    EmptyInputError,
    GenerationError,
    InvalidBoundsError,
    PropCheckError,
    SourceMismatchError,
    UnsupportedTypeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ArityError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "EmptyInputError",
    "ErrorTemplate",
    "GenerationError",
    "InvalidBoundsError",
    "OutputFormat",
    "PropCheckError",
    "SourceMismatchError",
    "UnsupportedTypeError",
]
