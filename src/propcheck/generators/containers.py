"""Collection generators: sequences, text and mappings.

Every collection re-invokes its child generator once per slot, so no two
slots share a generated value. Per call:
    lists()        1 length draw + one element call per slot
    fixed_lists()  one element call per slot, length never drawn
    text()         1 length draw + one code unit call per character
    dicts()        1 size draw + one key call and one value call per insertion
    sample()       exactly ``count`` calls, returned eagerly

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from propcheck.constants import ARRAY_MAX_SIZE, DEFAULT_SAMPLE_SIZE
from propcheck.core.random_source import RandomSource, default_source
from propcheck.enums import GeneratorKind

from .base import Generator, as_generator
from .types import CHAR

if TYPE_CHECKING:
    from collections.abc import Hashable

__all__ = [
    "MappingGenerator",
    "SequenceGenerator",
    "TextGenerator",
    "dicts",
    "fixed_lists",
    "lists",
    "sample",
    "text",
]

T = TypeVar("T")
K = TypeVar("K", bound="Hashable")
V = TypeVar("V")


def _check_size(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an int, got {type(value).__name__}"
        raise TypeError(msg)
    if value < 0:
        msg = f"{name} must be non-negative, got {value}"
        raise ValueError(msg)
    return value


@dataclass(frozen=True, slots=True)
class SequenceGenerator(Generator[list[T]]):
    """List of independently generated elements.

    Attributes:
        element: Generator called once per slot
        max_length: Inclusive length cap, or the exact length when fixed
        source: RandomSource for the length draw
        fixed: Always produce exactly max_length elements
    """

    kind: ClassVar[GeneratorKind] = GeneratorKind.SEQUENCE

    element: Generator[T]
    max_length: int
    source: RandomSource
    fixed: bool = False

    def __call__(self) -> list[T]:
        length = self.max_length if self.fixed else self.source.randint(0, self.max_length)
        return [self.element() for _ in range(length)]


@dataclass(frozen=True, slots=True)
class TextGenerator(Generator[str]):
    """String whose characters are generated code units.

    Attributes:
        code_units: Generator of ints passed through chr()
        max_length: Inclusive length cap
        source: RandomSource for the length draw
    """

    kind: ClassVar[GeneratorKind] = GeneratorKind.SEQUENCE

    code_units: Generator[int]
    max_length: int
    source: RandomSource

    def __call__(self) -> str:
        length = self.source.randint(0, self.max_length)
        return "".join(chr(self.code_units()) for _ in range(length))


@dataclass(frozen=True, slots=True)
class MappingGenerator(Generator[dict[K, V]]):
    """Mapping filled by a random number of key/value insertions.

    Keys may repeat, in which case the later value overwrites the earlier
    one. The result can therefore hold fewer entries than insertions; with
    bool keys it never holds more than two.

    Attributes:
        values: Generator for values
        keys: Generator for keys (must produce hashable values)
        max_size: Inclusive cap on the number of insertions
        source: RandomSource for the insertion count draw
    """

    kind: ClassVar[GeneratorKind] = GeneratorKind.MAPPING

    values: Generator[V]
    keys: Generator[K]
    max_size: int
    source: RandomSource

    def __call__(self) -> dict[K, V]:
        result: dict[K, V] = {}
        for _ in range(self.source.randint(0, self.max_size)):
            key = self.keys()
            result[key] = self.values()
        return result


def lists(
    element: Any,
    max_length: int = ARRAY_MAX_SIZE,
    *,
    source: RandomSource | None = None,
) -> SequenceGenerator[Any]:
    """Build a generator of lists with random length in [0, max_length].

    Args:
        element: Generator, type spec or callable producing one element
        max_length: Inclusive maximum length (default: ARRAY_MAX_SIZE)
        source: RandomSource to draw from (None: process-wide default)

    Returns:
        SequenceGenerator

    Raises:
        ValueError: If max_length is negative

    Examples:
        >>> lists(int)()                          # [-12885020, ..., 48124]
        >>> lists(bool, 4)()                      # [True]
        >>> lists(constant(0))()                  # [0, 0, ..., 0]
        >>> lists(generate(float, 3.0, 5.0), 3)() # [4.2852, 3.4924]
    """
    if source is None:
        source = default_source()
    max_length = _check_size("max_length", max_length)
    return SequenceGenerator(as_generator(element, source=source), max_length, source)


def fixed_lists(
    element: Any,
    length: int,
    *,
    source: RandomSource | None = None,
) -> SequenceGenerator[Any]:
    """Build a generator of lists with exactly ``length`` elements.

    Args:
        element: Generator, type spec or callable producing one element
        length: Exact length of every produced list
        source: RandomSource used when element is a type spec

    Returns:
        SequenceGenerator

    Raises:
        ValueError: If length is negative

    Examples:
        >>> fixed_lists(int, 5)()                 # [4, 3, 2, 5, 6]
        >>> fixed_lists(constant(0), 3)()         # [0, 0, 0]
    """
    if source is None:
        source = default_source()
    length = _check_size("length", length)
    return SequenceGenerator(as_generator(element, source=source), length, source, fixed=True)


def text(
    code_units: Any = None,
    max_length: int = ARRAY_MAX_SIZE,
    *,
    source: RandomSource | None = None,
) -> TextGenerator:
    """Build a generator of strings with random length in [0, max_length].

    Args:
        code_units: Generator of ints to turn into characters
            (None: generate(CHAR), i.e. code points 0..0xFF)
        max_length: Inclusive maximum length (default: ARRAY_MAX_SIZE)
        source: RandomSource to draw from (None: process-wide default)

    Returns:
        TextGenerator

    Examples:
        >>> text()()                                    # 'necxTT!30'
        >>> text(generate(int, ord("a"), ord("z")), 8)()  # 'qwhz'
    """
    if source is None:
        source = default_source()
    max_length = _check_size("max_length", max_length)
    if code_units is None:
        code_units = CHAR
    return TextGenerator(as_generator(code_units, source=source), max_length, source)


def dicts(
    values: Any,
    keys: Any,
    max_size: int = ARRAY_MAX_SIZE,
    *,
    source: RandomSource | None = None,
) -> MappingGenerator[Any, Any]:
    """Build a generator of dicts filled by [0, max_size] insertions.

    Args:
        values: Generator, type spec or callable producing one value
        keys: Generator, type spec or callable producing one hashable key
        max_size: Inclusive maximum number of insertions (default: ARRAY_MAX_SIZE)
        source: RandomSource to draw from (None: process-wide default)

    Returns:
        MappingGenerator

    Raises:
        ValueError: If max_size is negative

    Examples:
        >>> dicts(int, int)()                     # {-84: 92831, 8492: 4589284, ...}
        >>> dicts(int, bool)()                    # {False: 21249894, True: -832194}
        >>> dicts(constant(3), bool, 10000)()     # {False: 3, True: 3}
    """
    if source is None:
        source = default_source()
    max_size = _check_size("max_size", max_size)
    return MappingGenerator(
        as_generator(values, source=source),
        as_generator(keys, source=source),
        max_size,
        source,
    )


def sample(generator: Any, count: int = DEFAULT_SAMPLE_SIZE) -> list[Any]:
    """Call a generator exactly ``count`` times and return the values in order.

    Unlike lists(), the result always has exactly ``count`` values, which
    makes it handy for eyeballing what a generator produces.

    Args:
        generator: Generator, type spec or callable to sample
        count: Number of values (default: DEFAULT_SAMPLE_SIZE)

    Returns:
        List of ``count`` generated values

    Raises:
        ValueError: If count is negative

    Examples:
        >>> sample(int)                           # [1541546906, -1397396910, ...]
        >>> sample(bool, 2)                       # [False, False]
        >>> sample(generate(float, -1.0, 1.0), 3) # [0.942426, -0.182376, -0.223072]
    """
    count = _check_size("count", count)
    producer = as_generator(generator)
    return [producer() for _ in range(count)]
