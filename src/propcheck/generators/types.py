"""Fixed-width numeric type descriptors.

Python ints are unbounded and Python floats are always binary64, so the
intrinsic min/max a bounded draw falls back to must come from somewhere.
These descriptors supply it. Pass one to generate() wherever a numeric
type is expected:

    generate(UINT8)          # 0..255
    generate(INT64, -5)      # -5..2**63-1
    generate(FLOAT32, 0.0)   # 0.0..3.4028234663852886e38, single precision

Builtin ``int`` resolves to INT32 and builtin ``float`` to FLOAT64.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from typing import TypeAlias

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Descriptor types
    "IntegralType",
    "FloatType",
    "NumericType",
    # Integral descriptors
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "CHAR",
    # Float descriptors
    "FLOAT32",
    "FLOAT64",
]


@dataclass(frozen=True, slots=True)
class IntegralType:
    """Integral type with an intrinsic inclusive range.

    Attributes:
        name: Display name used in diagnostics
        min: Smallest value of the type
        max: Largest value of the type
    """

    name: str
    min: int
    max: int

    def __post_init__(self) -> None:
        """Validate the range.

        Raises:
            ValueError: If min is greater than max
        """
        if self.min > self.max:
            msg = f"IntegralType.min ({self.min}) must be <= max ({self.max})"
            raise ValueError(msg)

    def contains(self, value: int) -> bool:
        """Check whether value fits in the type."""
        return self.min <= value <= self.max


@dataclass(frozen=True, slots=True)
class FloatType:
    """Floating-point type with its extreme finite values.

    Attributes:
        name: Display name used in diagnostics
        min_normal: Smallest positive normal value (default lower bound)
        max: Largest finite value (default upper bound)
        single: Round every draw to IEEE 754 binary32
    """

    name: str
    min_normal: float
    max: float
    single: bool = False

    def narrow(self, value: float) -> float:
        """Round value to this type's precision."""
        if not self.single:
            return value
        narrowed: float = struct.unpack("f", struct.pack("f", value))[0]
        return narrowed


NumericType: TypeAlias = IntegralType | FloatType

INT8 = IntegralType("int8", -(2**7), 2**7 - 1)
INT16 = IntegralType("int16", -(2**15), 2**15 - 1)
INT32 = IntegralType("int32", -(2**31), 2**31 - 1)
INT64 = IntegralType("int64", -(2**63), 2**63 - 1)
UINT8 = IntegralType("uint8", 0, 2**8 - 1)
UINT16 = IntegralType("uint16", 0, 2**16 - 1)
UINT32 = IntegralType("uint32", 0, 2**32 - 1)
UINT64 = IntegralType("uint64", 0, 2**64 - 1)

# Code units of generated text; chr() of each draw is one character
CHAR = IntegralType("char", 0, 0xFF)

# max is the largest binary32 value, which rounds to itself under narrow()
FLOAT32 = FloatType("float32", 2.0**-126, (2.0 - 2.0**-23) * 2.0**127, single=True)
FLOAT64 = FloatType("float64", sys.float_info.min, sys.float_info.max)
