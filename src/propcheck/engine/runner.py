"""Trial engine: run a property against freshly generated arguments.

for_all() is a two-state loop. While Running, each trial calls every
generator once, in order, to build the argument tuple, then evaluates
the property. A truthy verdict counts the trial and moves on. A falsy
verdict calls the optional reporter with the same arguments and moves
to Terminated; no further trials run. Running out of trials also
terminates, with every trial counted.

Only a falsy verdict is a handled failure. Exceptions raised by the
property, the reporter or a generator propagate to the caller and no
TrialReport is produced. Nothing is retried; no counter-example is
shrunk (the reporter is the hook for manual diagnosis).

Python 3.13+.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any

from propcheck.constants import DEFAULT_TRIALS
from propcheck.core.random_source import RandomSource, default_source
from propcheck.diagnostics import ArityError, Diagnostic, ErrorTemplate, SourceMismatchError
from propcheck.generators.base import Generator, as_generator

from .report import TrialReport

__all__ = ["for_all"]

logger = logging.getLogger(__name__)

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def _callable_name(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", None) or repr(func)


def _positional_arity(func: Callable[..., Any]) -> tuple[int, int | None] | None:
    """Return (required, maximum) positional argument counts.

    maximum is None when func takes ``*args``. Returns None when func has
    no introspectable signature (some builtins and C extensions).
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return None
    required = 0
    maximum = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return required, None
        if parameter.kind in _POSITIONAL:
            maximum += 1
            if parameter.default is inspect.Parameter.empty:
                required += 1
    return required, maximum


def _distinct_sources(generators: tuple[Any, ...]) -> list[RandomSource]:
    found: dict[int, RandomSource] = {}
    for generator in generators:
        if isinstance(generator, Generator):
            for bound in generator.sources():
                found.setdefault(id(bound), bound)
    return list(found.values())


def _resolve_source(source: RandomSource | None, generators: tuple[Any, ...]) -> RandomSource:
    """Return the source whose seed replays the run.

    Without an explicit source, the one source shared by the already built
    generators is used, or the process-wide default when none is bound.
    Type specs are bound to the result afterwards.
    """
    bound = _distinct_sources(generators)
    if source is None:
        if len(bound) > 1:
            raise SourceMismatchError(ErrorTemplate.source_mismatch(None, bound))
        return bound[0] if bound else default_source()
    strays = [other for other in bound if other is not source]
    if strays:
        raise SourceMismatchError(ErrorTemplate.source_mismatch(source, strays))
    return source


def _describe_arity(required: int, maximum: int | None) -> str:
    if maximum is None:
        return f"at least {required}"
    if required == maximum:
        return str(required)
    return f"{required} to {maximum}"


def _check_arity(
    func: Callable[..., Any],
    count: int,
    template: Callable[[str, str, int], Diagnostic],
) -> None:
    arity = _positional_arity(func)
    if arity is None:
        return
    required, maximum = arity
    if count < required or (maximum is not None and count > maximum):
        raise ArityError(template(_callable_name(func), _describe_arity(required, maximum), count))


def for_all(
    prop: Callable[..., Any],
    *generators: Any,
    trials: int = DEFAULT_TRIALS,
    reporter: Callable[..., Any] | None = None,
    source: RandomSource | None = None,
) -> TrialReport:
    """Run prop against up to ``trials`` generated argument tuples.

    Args:
        prop: Property to check; called as ``prop(*arguments)``. Its
            truthiness is the verdict.
        *generators: One generator (or type spec, or zero-argument
            callable) per property parameter, in parameter order
        trials: Number of trials to run (default: DEFAULT_TRIALS)
        reporter: Called as ``reporter(*arguments)`` on the first failing
            trial, for diagnostics only; its return value is discarded
        source: RandomSource whose seed is reported, also used for type
            specs among generators. None takes the source the generators
            are bound to (the process-wide default when they name none).

    Returns:
        TrialReport for the run

    Raises:
        ArityError: If the generator count does not fit prop's (or
            reporter's) positional parameters
        TypeError: If trials is not an int
        ValueError: If trials is negative
        SourceMismatchError: If generators draw from more than one
            RandomSource, or from one other than source
        Exception: Anything raised by prop, reporter or a generator

    Examples:
        >>> def idempotent_sort(xs: list[int]) -> bool:
        ...     return sorted(xs) == sorted(sorted(xs))
        >>> for_all(idempotent_sort, lists(int)).passed
        True

        >>> def distributes(a: float, b: float, c: float) -> bool:
        ...     return a * (b + c) == a * b + a * c
        >>> small = generate(float, -1.0, 1.0)
        >>> report = for_all(distributes, small, small, small, trials=10_000)
        >>> report.passed
        False
    """
    if isinstance(trials, bool) or not isinstance(trials, int):
        msg = f"trials must be an int, got {type(trials).__name__}"
        raise TypeError(msg)
    if trials < 0:
        msg = f"trials must be non-negative, got {trials}"
        raise ValueError(msg)
    source = _resolve_source(source, generators)
    producers: tuple[Generator[Any], ...] = tuple(
        as_generator(g, source=source) for g in generators
    )
    _check_arity(prop, len(producers), ErrorTemplate.property_arity_mismatch)
    if reporter is not None:
        _check_arity(reporter, len(producers), ErrorTemplate.reporter_arity_mismatch)

    name = _callable_name(prop)
    seed = source.seed
    logger.debug("Checking property %s: %d trial(s), seed %d", name, trials, seed)

    completed = 0
    for trial in range(trials):
        arguments = tuple(producer() for producer in producers)
        if prop(*arguments):
            completed += 1
            continue

        logger.warning(
            "Property %s falsified on trial %d of %d (seed %d)",
            name,
            trial + 1,
            trials,
            seed,
        )
        if reporter is not None:
            reporter(*arguments)
        return TrialReport(
            passed=False,
            requested_trials=trials,
            completed_trials=completed,
            seed=seed,
            failing_arguments=arguments,
        )

    logger.info("Property %s held for %d trial(s)", name, completed)
    return TrialReport(
        passed=True,
        requested_trials=trials,
        completed_trials=completed,
        seed=seed,
    )
