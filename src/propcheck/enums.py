"""Enumerations for propcheck type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum

__all__ = ["GeneratorKind"]


class GeneratorKind(StrEnum):
    """Variant of a generator, fixed when the generator is constructed.

    The set is closed: every generator built by propcheck reports exactly
    one of these kinds. Combinators built from user callables report CUSTOM.

    StrEnum provides automatic string conversion: str(GeneratorKind.SCALAR) == "scalar"
    """

    SCALAR = "scalar"
    """Unbounded scalar value: bool"""

    BOUNDED = "bounded"
    """Numeric value drawn from an inclusive [min, max] range: int, float"""

    SEQUENCE = "sequence"
    """Sequence built from an element generator: list[int], str"""

    MAPPING = "mapping"
    """Key to value mapping built from key and value generators: dict[str, int]"""

    CUSTOM = "custom"
    """User function or combinator output: one_of, choose, map_generate"""
