"""Primitive generators and type-shape dispatch.

generate() turns a type spec into a Generator when the generator is
built, not when it runs. The shape of the spec is matched in a fixed
priority order:

1. Mapping shapes   dict[K, V], Mapping[K, V]      -> dicts(generate(V), generate(K))
2. Sequence shapes  list[E], Sequence[E], str     -> lists(generate(E)) / text()
3. Floating types   float, FLOAT32, FLOAT64       -> BoundedNumeric, uniform draw
4. bool                                           -> Scalar, fair coin
5. Integral types   int, INT8 .. UINT64, CHAR     -> BoundedNumeric, uniform draw
6. Anything else                                  -> UnsupportedTypeError

bool is matched before the integral rule because bool subclasses int.

Bound fallback rule:
    None is the only "unset" sentinel, for both bounds. Each unset bound
    falls back to its type default on its own. The float lower default is
    the smallest positive normal value, not the most negative float, so
    ``generate(float)`` only yields positive numbers; pass an explicit
    ``min_value`` to include negatives.

Python 3.13+.
"""

from __future__ import annotations

import math
import operator
import typing
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from propcheck.core.random_source import RandomSource, default_source
from propcheck.diagnostics import ErrorTemplate, InvalidBoundsError, UnsupportedTypeError
from propcheck.enums import GeneratorKind

from .base import Generator
from .types import FLOAT64, INT32, FloatType, IntegralType, NumericType

__all__ = ["BoundedNumeric", "Scalar", "generate"]

_MAPPING_SHAPES: tuple[object, ...] = (dict, Mapping, MutableMapping)
_SEQUENCE_SHAPES: tuple[object, ...] = (list, Sequence, MutableSequence)


@dataclass(frozen=True, slots=True)
class Scalar(Generator[bool]):
    """Fair coin: True or False with equal probability.

    Attributes:
        source: RandomSource to draw from
    """

    kind: ClassVar[GeneratorKind] = GeneratorKind.SCALAR

    source: RandomSource

    def __call__(self) -> bool:
        return self.source.coin()


@dataclass(frozen=True, slots=True)
class BoundedNumeric(Generator[Any]):
    """Uniform draw from an inclusive numeric range.

    Integral types draw ints; float types draw floats, rounded to the
    type's precision (FLOAT32 values may sit within half a single
    precision ulp of a bound that is not itself representable).

    Attributes:
        numeric_type: Type descriptor the range belongs to
        min_value: Resolved inclusive lower bound
        max_value: Resolved inclusive upper bound
        source: RandomSource to draw from
    """

    kind: ClassVar[GeneratorKind] = GeneratorKind.BOUNDED

    numeric_type: NumericType
    min_value: int | float
    max_value: int | float
    source: RandomSource

    def __call__(self) -> int | float:
        if isinstance(self.numeric_type, IntegralType):
            return self.source.randint(int(self.min_value), int(self.max_value))
        return self.numeric_type.narrow(self.source.uniform(self.min_value, self.max_value))


def _type_name(spec: object) -> str:
    if isinstance(spec, (IntegralType, FloatType)):
        return spec.name
    if isinstance(spec, type) and typing.get_origin(spec) is None:
        return spec.__name__
    return repr(spec)


def _matches(spec: object, shapes: tuple[object, ...]) -> bool:
    return any(spec is shape for shape in shapes)


def _resolve_numeric(spec: object) -> NumericType | None:
    if spec is int:
        return INT32
    if spec is float:
        return FLOAT64
    if isinstance(spec, (IntegralType, FloatType)):
        return spec
    return None


def _integral_bounds(
    numeric_type: IntegralType, min_value: Any, max_value: Any
) -> tuple[int, int]:
    low = numeric_type.min if min_value is None else operator.index(min_value)
    high = numeric_type.max if max_value is None else operator.index(max_value)
    for bound in (low, high):
        if not numeric_type.contains(bound):
            raise InvalidBoundsError(
                ErrorTemplate.bound_out_of_range(
                    bound, numeric_type.name, numeric_type.min, numeric_type.max
                )
            )
    if low > high:
        raise InvalidBoundsError(ErrorTemplate.bounds_inverted(low, high))
    return low, high


def _to_float(bound: Any, numeric_type: FloatType) -> float:
    try:
        return float(bound)
    except OverflowError as exc:
        # ints past the float range cannot be converted at all
        raise InvalidBoundsError(
            ErrorTemplate.bound_out_of_range(
                bound, numeric_type.name, -numeric_type.max, numeric_type.max
            )
        ) from exc


def _float_bounds(
    numeric_type: FloatType, min_value: Any, max_value: Any
) -> tuple[float, float]:
    low = numeric_type.min_normal if min_value is None else _to_float(min_value, numeric_type)
    high = numeric_type.max if max_value is None else _to_float(max_value, numeric_type)
    for bound in (low, high):
        if not math.isfinite(bound):
            raise InvalidBoundsError(ErrorTemplate.bound_not_finite(bound))
        if abs(bound) > numeric_type.max:
            raise InvalidBoundsError(
                ErrorTemplate.bound_out_of_range(
                    bound, numeric_type.name, -numeric_type.max, numeric_type.max
                )
            )
    if low > high:
        raise InvalidBoundsError(ErrorTemplate.bounds_inverted(low, high))
    return low, high


def _reject_bounds(spec: object, min_value: object, max_value: object) -> None:
    if min_value is not None or max_value is not None:
        raise InvalidBoundsError(ErrorTemplate.bounds_not_supported(_type_name(spec)))


def _element_specs(spec: object, expected: int) -> tuple[Any, ...]:
    args = typing.get_args(spec)
    if len(args) != expected:
        raise UnsupportedTypeError(ErrorTemplate.unparameterized_collection(_type_name(spec)))
    return args


def generate(
    type_spec: Any,
    min_value: int | float | None = None,
    max_value: int | float | None = None,
    *,
    source: RandomSource | None = None,
) -> Generator[Any]:
    """Build a generator for a type.

    Args:
        type_spec: Type to generate values of (see module docstring for
            the accepted shapes)
        min_value: Inclusive lower bound for numeric types (None: type default)
        max_value: Inclusive upper bound for numeric types (None: type default)
        source: RandomSource to draw from (None: process-wide default)

    Returns:
        Generator producing values of type_spec

    Raises:
        UnsupportedTypeError: If no generation rule matches type_spec
        InvalidBoundsError: If the bounds are inverted, out of the type's
            range, not finite, or given for a non-numeric type
        TypeError: If an integral bound is not an integer

    Examples:
        >>> generate(bool)()                       # True
        >>> generate(int, 10)()                    # 392874
        >>> generate(float, 10.0, 11.0)()          # 10.7329
        >>> generate(list[int])()                  # [-12885020, ..., 48124]
        >>> generate(dict[bool, int])()            # {False: 21249894, True: -832194}
    """
    if source is None:
        source = default_source()

    origin = typing.get_origin(type_spec)
    shape = origin if origin is not None else type_spec

    if _matches(shape, _MAPPING_SHAPES):
        _reject_bounds(type_spec, min_value, max_value)
        key_spec, value_spec = _element_specs(type_spec, 2)
        from .containers import dicts  # noqa: PLC0415 - circular

        return dicts(
            generate(value_spec, source=source),
            generate(key_spec, source=source),
            source=source,
        )

    if type_spec is str:
        _reject_bounds(type_spec, min_value, max_value)
        from .containers import text  # noqa: PLC0415 - circular

        return text(source=source)

    if _matches(shape, _SEQUENCE_SHAPES):
        _reject_bounds(type_spec, min_value, max_value)
        (element_spec,) = _element_specs(type_spec, 1)
        from .containers import lists  # noqa: PLC0415 - circular

        return lists(generate(element_spec, source=source), source=source)

    numeric_type = _resolve_numeric(type_spec)

    if isinstance(numeric_type, FloatType):
        low, high = _float_bounds(numeric_type, min_value, max_value)
        return BoundedNumeric(numeric_type, low, high, source)

    if type_spec is bool:
        _reject_bounds(type_spec, min_value, max_value)
        return Scalar(source)

    if isinstance(numeric_type, IntegralType):
        low_int, high_int = _integral_bounds(numeric_type, min_value, max_value)
        return BoundedNumeric(numeric_type, low_int, high_int, source)

    raise UnsupportedTypeError(ErrorTemplate.unsupported_type(_type_name(type_spec)))
