"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output.

    Attributes:
        output_format: Output style (rust, simple, json)
        color: Enable ANSI color codes (for terminal output)

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.empty_input("choose")
        >>> print(formatter.format(diagnostic))
        error[EMPTY_INPUT]: choose() needs at least one element to pick from
          --> choose
          = expected: length >= 1
          = received: length 0
          = help: Pass a non-empty sequence

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        EMPTY_INPUT: choose() needs at least one element to pick from
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics, separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        parts = [f"{severity_str}[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.operation:
            parts.append(f"  --> {diagnostic.operation}")

        if diagnostic.expected:
            parts.append(f"  = expected: {diagnostic.expected}")

        if diagnostic.received:
            parts.append(f"  = received: {diagnostic.received}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        return f"{diagnostic.code.name}: {diagnostic.message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }

        if diagnostic.operation:
            data["operation"] = diagnostic.operation

        if diagnostic.expected:
            data["expected"] = diagnostic.expected

        if diagnostic.received:
            data["received"] = diagnostic.received

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        return json.dumps(data, ensure_ascii=False)
