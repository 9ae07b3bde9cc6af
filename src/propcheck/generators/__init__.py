"""Random value generators and combinators.

Generators are zero-argument callables built once and invoked many times.
Building one validates its arguments and fixes its variant; invoking it
draws fresh values from its RandomSource.

Python 3.13+.
"""

from .base import Custom, Generator, as_generator, constant, is_type_spec
from .containers import (
    MappingGenerator,
    SequenceGenerator,
    TextGenerator,
    dicts,
    fixed_lists,
    lists,
    sample,
    text,
)
from .primitive import BoundedNumeric, Scalar, generate
from .selection import Choose, Mapped, OneOf, choose, map_generate, one_of
from .types import (
    CHAR,
    FLOAT32,
    FLOAT64,
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    FloatType,
    IntegralType,
    NumericType,
)

__all__ = [
    "CHAR",
    "FLOAT32",
    "FLOAT64",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "BoundedNumeric",
    "Choose",
    "Custom",
    "FloatType",
    "Generator",
    "IntegralType",
    "Mapped",
    "MappingGenerator",
    "NumericType",
    "OneOf",
    "Scalar",
    "SequenceGenerator",
    "TextGenerator",
    "as_generator",
    "choose",
    "constant",
    "dicts",
    "fixed_lists",
    "generate",
    "is_type_spec",
    "lists",
    "map_generate",
    "one_of",
    "sample",
    "text",
]
