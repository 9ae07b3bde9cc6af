"""Generator base class and the user-function variant.

A generator is a zero-argument, re-invokable producer of values. Every
call draws fresh entropy from the RandomSource the generator was bound
to at construction; a generator keeps no memory between calls.

Variants form a closed set, reported by ``Generator.kind``:
    SCALAR    - Scalar (bool)                          primitive.py
    BOUNDED   - BoundedNumeric (int, float, descriptors) primitive.py
    SEQUENCE  - SequenceGenerator, TextGenerator       containers.py
    MAPPING   - MappingGenerator                       containers.py
    CUSTOM    - Custom, and the selection combinators  base.py, selection.py

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import typing
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from propcheck.core.random_source import RandomSource
from propcheck.enums import GeneratorKind

from .types import FloatType, IntegralType

__all__ = ["Custom", "Generator", "as_generator", "constant", "is_type_spec"]

T = TypeVar("T")
U = TypeVar("U")


class Generator(ABC, Generic[T]):
    """Zero-argument producer of random values of type T.

    Subclasses are frozen dataclasses holding their child generators and
    the RandomSource they draw from. Calling the generator yields one value.
    """

    __slots__ = ()

    kind: ClassVar[GeneratorKind]

    @abstractmethod
    def __call__(self) -> T:
        """Produce one value."""

    def map(self, mapper: Callable[[T], U]) -> Generator[U]:
        """Return a generator yielding ``mapper(self())``.

        Shorthand for ``map_generate(mapper, self)``.
        """
        from .selection import map_generate  # noqa: PLC0415 - circular

        return map_generate(mapper, self)

    def sources(self) -> Iterator[RandomSource]:
        """Yield the RandomSources this generator and its children draw from.

        Sources used inside a Custom function are not visible here.
        Duplicates are yielded once per holder.
        """
        for field in dataclasses.fields(self):  # type: ignore[arg-type]
            value = getattr(self, field.name)
            if isinstance(value, RandomSource):
                yield value
            elif isinstance(value, Generator):
                yield from value.sources()


@dataclass(frozen=True, slots=True)
class Custom(Generator[T]):
    """Generator backed by a user function.

    The function is called once per value and is expected to draw its own
    randomness, typically by calling other generators.

    Attributes:
        func: Zero-argument callable producing one value

    Example:
        >>> small = generate(float, -1.0, 1.0)
        >>> pair = Custom(lambda: (small(), small()))
    """

    kind: ClassVar[GeneratorKind] = GeneratorKind.CUSTOM

    func: Callable[[], T]

    def __call__(self) -> T:
        return self.func()


def constant(value: T) -> Custom[T]:
    """Generator that always returns value and consumes no entropy.

    Useful as a one_of() candidate: ``one_of(constant(2), constant(4))``.
    """
    return Custom(lambda: value)


def is_type_spec(spec: object) -> bool:
    """Check whether spec names a type rather than a producer function.

    Classes, parameterized generics (``list[int]``) and numeric type
    descriptors are type specs. Plain functions and lambdas are not.
    """
    if isinstance(spec, (type, IntegralType, FloatType)):
        return True
    return typing.get_origin(spec) is not None


def as_generator(spec: Any, *, source: RandomSource | None = None) -> Generator[Any]:
    """Coerce an element/candidate argument into a Generator.

    Resolution order:
    1. A Generator is returned as is
    2. A type spec is routed through generate() (so ``lists(int)`` works)
    3. Any other callable is wrapped in Custom

    Args:
        spec: Generator, type spec, or zero-argument callable
        source: RandomSource for generators built from type specs

    Returns:
        Generator for spec

    Raises:
        TypeError: If spec is none of the above
        UnsupportedTypeError: If spec is a type with no generation rule
    """
    if isinstance(spec, Generator):
        return spec
    if is_type_spec(spec):
        from .primitive import generate  # noqa: PLC0415 - circular

        return generate(spec, source=source)
    if callable(spec):
        return Custom(spec)
    msg = f"Expected a generator, type or zero-argument callable, got {type(spec).__name__}"
    raise TypeError(msg)
