"""Seedable random stream shared by generators and the trial engine.

All randomness in propcheck flows through a RandomSource. A source is an
explicit object: generators bind to one when they are constructed, and
for_all() reads the seed from one when it reports. Independent sources
never interfere, so separate test runs can each own a stream.

For the common single-stream case a process-wide default source exists.
It is created lazily by default_source() and reseeded by reseed().

Thread Safety:
    Not thread-safe. A source is one sequential stream of draws; sharing
    it across threads requires external synchronization.

Python 3.13+.
"""

from __future__ import annotations

import logging
import random
import secrets

from propcheck.constants import SEED_BITS

__all__ = ["RandomSource", "default_source", "reseed"]

logger = logging.getLogger(__name__)

# uniform() weights: 53-bit draws divided by the largest one span [0.0, 1.0]
_UNIT_BITS = 53
_UNIT_SPAN = (1 << _UNIT_BITS) - 1


def _check_seed(seed: int) -> int:
    # bool is an int subclass; reseed(True) is almost certainly a mistake
    if isinstance(seed, bool) or not isinstance(seed, int):
        msg = f"seed must be an int, got {type(seed).__name__}"
        raise TypeError(msg)
    if seed < 0:
        msg = f"seed must be non-negative, got {seed}"
        raise ValueError(msg)
    return seed


class RandomSource:
    """Deterministic random stream with a recorded seed.

    Two sources created with the same seed produce identical draws for
    the same sequence of calls. A source created without a seed picks an
    unpredictable one at construction and records it, so ``seed`` is
    always available for replaying a run.

    Attributes:
        seed: Seed the current stream was built from

    Example:
        >>> source = RandomSource(seed=42)
        >>> first = [source.randint(0, 9) for _ in range(5)]
        >>> source.reseed(42)
        >>> first == [source.randint(0, 9) for _ in range(5)]
        True
    """

    __slots__ = ("_rng", "_seed")

    def __init__(self, seed: int | None = None) -> None:
        """Initialize the stream.

        Args:
            seed: Non-negative seed, or None for an unpredictable one

        Raises:
            TypeError: If seed is not an int
            ValueError: If seed is negative
        """
        self._seed = 0
        self._rng = random.Random()
        self.reseed(seed)

    @property
    def seed(self) -> int:
        """Seed the current stream was built from."""
        return self._seed

    def reseed(self, seed: int | None = None) -> None:
        """Restart the stream from a seed and record it.

        Args:
            seed: Non-negative seed, or None for an unpredictable one

        Raises:
            TypeError: If seed is not an int
            ValueError: If seed is negative
        """
        if seed is None:
            seed = secrets.randbits(SEED_BITS)
        else:
            seed = _check_seed(seed)
        self._rng.seed(seed)
        self._seed = seed
        logger.debug("RandomSource reseeded with %d", seed)

    def randint(self, low: int, high: int) -> int:
        """Draw an int uniformly from [low, high], both inclusive."""
        return self._rng.randint(low, high)

    def uniform(self, low: float, high: float) -> float:
        """Draw a float uniformly from [low, high], both inclusive.

        The interpolation weight is a 53-bit draw scaled onto [0.0, 1.0],
        so both low and high are reachable. Safe over the full float range:
        ``high - low`` is never computed, so spans wider than
        ``sys.float_info.max`` do not overflow.
        """
        r = self._rng.getrandbits(_UNIT_BITS) / _UNIT_SPAN
        value = low * (1.0 - r) + high * r
        # Rounding at the extremes can step one ulp outside the range
        return min(max(value, low), high)

    def coin(self) -> bool:
        """Draw True or False with equal probability."""
        return self._rng.getrandbits(1) == 1

    def index(self, length: int) -> int:
        """Draw a position uniformly from [0, length)."""
        return self._rng.randrange(length)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed})"


_default: RandomSource | None = None


def default_source() -> RandomSource:
    """Return the process-wide source, creating it on first use.

    The source starts from an unpredictable seed; call reseed() to fix it.
    """
    global _default  # noqa: PLW0603 - process-wide default stream
    if _default is None:
        _default = RandomSource()
    return _default


def reseed(seed: int | None = None) -> None:
    """Reseed the process-wide source.

    Every generator built without an explicit ``source`` draws from it,
    so reseeding makes subsequent generation reproducible.

    Args:
        seed: Non-negative seed, or None for an unpredictable one

    Example:
        >>> from propcheck import generate, reseed
        >>> ints = generate(int)
        >>> reseed(7)
        >>> a = [ints() for _ in range(3)]
        >>> reseed(7)
        >>> a == [ints() for _ in range(3)]
        True
    """
    default_source().reseed(seed)
