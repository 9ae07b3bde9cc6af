"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from .codes import Diagnostic, DiagnosticCode

if TYPE_CHECKING:
    from propcheck.core.random_source import RandomSource

__all__ = ["ErrorTemplate"]

_SUPPORTED_SHAPES = (
    "bool, int, float, str, list[T], dict[K, V] or a numeric type descriptor"
)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps every message testable and documents every error case in
    one place.
    """

    @staticmethod
    def unsupported_type(type_name: str) -> Diagnostic:
        """No generation rule for the requested type.

        Args:
            type_name: Printable name of the requested type

        Returns:
            Diagnostic for UNSUPPORTED_TYPE
        """
        msg = f"No generation rule for type '{type_name}'"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_TYPE,
            message=msg,
            hint="Wrap a custom factory function in Custom() instead",
            operation="generate",
            expected=_SUPPORTED_SHAPES,
            received=type_name,
        )

    @staticmethod
    def unparameterized_collection(type_name: str) -> Diagnostic:
        """Collection type given without element types.

        Args:
            type_name: Printable name of the bare collection type

        Returns:
            Diagnostic for UNPARAMETERIZED_COLLECTION
        """
        msg = f"Collection type '{type_name}' needs element types"
        return Diagnostic(
            code=DiagnosticCode.UNPARAMETERIZED_COLLECTION,
            message=msg,
            hint="Parameterize the collection, e.g. list[int] or dict[str, int]",
            operation="generate",
            expected=_SUPPORTED_SHAPES,
            received=type_name,
        )

    @staticmethod
    def empty_input(operation: str) -> Diagnostic:
        """Selection requested from an empty input.

        Args:
            operation: Public operation that received the input

        Returns:
            Diagnostic for EMPTY_INPUT
        """
        msg = f"{operation}() needs at least one element to pick from"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_INPUT,
            message=msg,
            hint="Pass a non-empty sequence",
            operation=operation,
            expected="length >= 1",
            received="length 0",
        )

    @staticmethod
    def bounds_inverted(min_value: object, max_value: object) -> Diagnostic:
        """Lower bound greater than upper bound.

        Args:
            min_value: Resolved lower bound
            max_value: Resolved upper bound

        Returns:
            Diagnostic for BOUNDS_INVERTED
        """
        msg = f"Lower bound {min_value!r} is greater than upper bound {max_value!r}"
        return Diagnostic(
            code=DiagnosticCode.BOUNDS_INVERTED,
            message=msg,
            hint="Swap the bounds, or leave one unset to use the type default",
            operation="generate",
            expected="min_value <= max_value",
            received=f"[{min_value!r}, {max_value!r}]",
        )

    @staticmethod
    def bound_out_of_range(
        bound: object, type_name: str, type_min: object, type_max: object
    ) -> Diagnostic:
        """Numeric bound outside the range of its type.

        Args:
            bound: Offending bound value
            type_name: Name of the numeric type
            type_min: Smallest value of the type
            type_max: Largest value of the type

        Returns:
            Diagnostic for BOUND_OUT_OF_RANGE
        """
        msg = f"Bound {bound!r} does not fit in type '{type_name}'"
        return Diagnostic(
            code=DiagnosticCode.BOUND_OUT_OF_RANGE,
            message=msg,
            hint="Use a wider numeric type descriptor (e.g. INT64) or a smaller bound",
            operation="generate",
            expected=f"[{type_min!r}, {type_max!r}]",
            received=repr(bound),
        )

    @staticmethod
    def bound_not_finite(bound: float) -> Diagnostic:
        """NaN or infinite float bound.

        Args:
            bound: Offending bound value

        Returns:
            Diagnostic for BOUND_NOT_FINITE
        """
        msg = f"Float bound {bound!r} is not finite"
        return Diagnostic(
            code=DiagnosticCode.BOUND_NOT_FINITE,
            message=msg,
            hint="Leave the bound unset to use the type default",
            operation="generate",
            expected="finite float",
            received=repr(bound),
        )

    @staticmethod
    def bounds_not_supported(type_name: str) -> Diagnostic:
        """Bounds passed for a type that does not take them.

        Args:
            type_name: Printable name of the requested type

        Returns:
            Diagnostic for BOUNDS_NOT_SUPPORTED
        """
        msg = f"Type '{type_name}' does not accept bounds"
        return Diagnostic(
            code=DiagnosticCode.BOUNDS_NOT_SUPPORTED,
            message=msg,
            hint="Bound the element generator instead, e.g. lists(generate(int, 0, 9))",
            operation="generate",
            expected="numeric type",
            received=type_name,
        )

    @staticmethod
    def too_few_candidates(count: int) -> Diagnostic:
        """one_of() called with fewer than two candidates.

        Args:
            count: Number of candidates received

        Returns:
            Diagnostic for TOO_FEW_CANDIDATES
        """
        msg = f"one_of() needs at least 2 candidate generators, got {count}"
        return Diagnostic(
            code=DiagnosticCode.TOO_FEW_CANDIDATES,
            message=msg,
            hint="Use the generator directly when there is nothing to choose between",
            operation="one_of",
            expected=">= 2",
            received=str(count),
        )

    @staticmethod
    def property_arity_mismatch(name: str, expected: str, received: int) -> Diagnostic:
        """Generator count does not match the property's parameters.

        Args:
            name: Property name
            expected: Accepted parameter count (or range)
            received: Number of generators supplied

        Returns:
            Diagnostic for PROPERTY_ARITY_MISMATCH
        """
        msg = f"Property '{name}' takes {expected} argument(s) but {received} generator(s) given"
        return Diagnostic(
            code=DiagnosticCode.PROPERTY_ARITY_MISMATCH,
            message=msg,
            hint="Pass exactly one generator per property parameter, in order",
            operation="for_all",
            expected=expected,
            received=str(received),
        )

    @staticmethod
    def reporter_arity_mismatch(name: str, expected: str, received: int) -> Diagnostic:
        """Reporter cannot accept the property's argument list.

        Args:
            name: Reporter name
            expected: Accepted parameter count (or range)
            received: Number of arguments each trial produces

        Returns:
            Diagnostic for REPORTER_ARITY_MISMATCH
        """
        msg = f"Reporter '{name}' takes {expected} argument(s) but trials produce {received}"
        return Diagnostic(
            code=DiagnosticCode.REPORTER_ARITY_MISMATCH,
            message=msg,
            hint="Give the reporter the same parameter list as the property",
            operation="for_all",
            expected=expected,
            received=str(received),
        )

    @staticmethod
    def source_mismatch(engine: RandomSource | None, bound: Sequence[RandomSource]) -> Diagnostic:
        """Generators draw from a stream the report's seed cannot replay.

        Args:
            engine: Source passed to for_all(), or None when it was omitted
            bound: Distinct sources the generators are bound to

        Returns:
            Diagnostic for SOURCE_MISMATCH
        """
        received = ", ".join(repr(source) for source in bound)
        if engine is None:
            msg = (
                f"Generators draw from {len(bound)} different RandomSources; "
                "no single seed replays the run"
            )
            expected = "one shared RandomSource"
        else:
            msg = f"Generators draw from {received}, not from the run's {engine!r}"
            expected = repr(engine)
        return Diagnostic(
            code=DiagnosticCode.SOURCE_MISMATCH,
            message=msg,
            hint="Build every generator with the same source= and pass it to for_all()",
            operation="for_all",
            expected=expected,
            received=received,
        )
