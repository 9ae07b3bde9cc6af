"""Selection combinators: one_of, choose, map_generate.

Entropy per call:
    one_of()        every candidate is called once, left to right, then one
                    index draw picks the returned value. Candidates that are
                    not picked still consume their entropy and run their
                    side effects, so adding a candidate shifts every later
                    draw under a fixed seed.
    choose()        1 index draw
    map_generate()  whatever its generator consumes; the mapper draws nothing

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, TypeVar

from propcheck.core.random_source import RandomSource, default_source
from propcheck.diagnostics import ArityError, EmptyInputError, ErrorTemplate
from propcheck.enums import GeneratorKind

from .base import Generator, as_generator

__all__ = [
    "Choose",
    "Mapped",
    "OneOf",
    "choose",
    "map_generate",
    "one_of",
]

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class OneOf(Generator[T]):
    """Value of one candidate generator, picked uniformly at random.

    Attributes:
        candidates: Two or more generators, all called on every invocation
        source: RandomSource for the pick
    """

    kind: ClassVar[GeneratorKind] = GeneratorKind.CUSTOM

    candidates: tuple[Generator[T], ...]
    source: RandomSource

    def __call__(self) -> T:
        values = [candidate() for candidate in self.candidates]
        return values[self.source.index(len(values))]

    def sources(self) -> Iterator[RandomSource]:
        yield self.source
        for candidate in self.candidates:
            yield from candidate.sources()


@dataclass(frozen=True, slots=True)
class Choose(Generator[T]):
    """Element of a fixed, non-empty tuple, picked uniformly at random.

    Attributes:
        elements: Values to pick from
        source: RandomSource for the pick
    """

    kind: ClassVar[GeneratorKind] = GeneratorKind.CUSTOM

    elements: tuple[T, ...]
    source: RandomSource

    def __call__(self) -> T:
        return self.elements[self.source.index(len(self.elements))]


@dataclass(frozen=True, slots=True)
class Mapped(Generator[U]):
    """Output of a generator passed through a mapping function.

    Attributes:
        mapper: One-argument function applied to each generated value
        generator: Generator called once per invocation
    """

    kind: ClassVar[GeneratorKind] = GeneratorKind.CUSTOM

    mapper: Callable[[Any], U]
    generator: Generator[Any]

    def __call__(self) -> U:
        return self.mapper(self.generator())


def one_of(*generators: Any, source: RandomSource | None = None) -> OneOf[Any]:
    """Build a generator returning the value of a randomly picked candidate.

    All candidates run on every call before the pick; see the module
    docstring for what that means for reproducibility.

    Args:
        *generators: Two or more generators, type specs or callables
        source: RandomSource to draw from (None: process-wide default)

    Returns:
        OneOf generator

    Raises:
        ArityError: If fewer than two candidates are given

    Examples:
        >>> one_of(generate(float, -1.0, 1.0), generate(float, 99.0, 100.0))()
        >>> one_of(constant(2), constant(4), constant(0))()
    """
    if len(generators) < 2:
        raise ArityError(ErrorTemplate.too_few_candidates(len(generators)))
    if source is None:
        source = default_source()
    candidates = tuple(as_generator(g, source=source) for g in generators)
    return OneOf(candidates, source)


def choose(sequence: Iterable[T], *, source: RandomSource | None = None) -> Choose[T]:
    """Build a generator picking a random element of sequence.

    The input is copied into a tuple when the generator is built, so later
    changes to it are not seen.

    Args:
        sequence: Non-empty iterable of values
        source: RandomSource to draw from (None: process-wide default)

    Returns:
        Choose generator

    Raises:
        EmptyInputError: If sequence has no elements

    Example:
        >>> choose([1, -1, 8, -8, 23])()
    """
    elements = tuple(sequence)
    if not elements:
        raise EmptyInputError(ErrorTemplate.empty_input("choose"))
    if source is None:
        source = default_source()
    return Choose(elements, source)


def map_generate(
    mapper: Callable[[Any], U],
    generator: Any,
    *,
    source: RandomSource | None = None,
) -> Mapped[U]:
    """Build a generator applying mapper to another generator's output.

    Args:
        mapper: One-argument function
        generator: Generator, type spec or callable to map over
        source: RandomSource used when generator is a type spec

    Returns:
        Mapped generator

    Examples:
        >>> odd = map_generate(lambda a: a + 1 if a % 2 == 0 else a, int)
        >>> digit = map_generate(lambda a: a % 10, int)
    """
    return Mapped(mapper, as_generator(generator, source=source))
