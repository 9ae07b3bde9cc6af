"""Tests for one_of, choose and map_generate."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from propcheck import (
    ArityError,
    Custom,
    EmptyInputError,
    RandomSource,
    choose,
    constant,
    generate,
    map_generate,
    one_of,
)
from propcheck.diagnostics import DiagnosticCode
from propcheck.enums import GeneratorKind
from tests.strategies import seeds


class TestOneOf:
    """Uniform pick among eagerly evaluated candidates."""

    @pytest.mark.statistical
    def test_two_constants_split_evenly(self, source: RandomSource) -> None:
        """one_of(1, 2) returns each about half the time over 10,000 calls."""
        generator = one_of(constant(1), constant(2), source=source)
        ones = sum(1 for _ in range(10_000) if generator() == 1)
        # 6 standard deviations (sigma = 50) either side of 5,000
        assert 4_700 <= ones <= 5_300

    def test_every_candidate_runs_on_every_call(self, source: RandomSource) -> None:
        """Candidates that are not picked still run."""
        calls = {"a": 0, "b": 0, "c": 0}

        def counting(name: str) -> Custom[str]:
            def produce() -> str:
                calls[name] += 1
                return name

            return Custom(produce)

        generator = one_of(counting("a"), counting("b"), counting("c"), source=source)
        picked = {generator() for _ in range(100)}
        assert calls == {"a": 100, "b": 100, "c": 100}
        assert picked <= {"a", "b", "c"}

    @given(seed=seeds)
    def test_entropy_consumed_by_all_candidates(self, seed: int) -> None:
        """The stream advances by both candidates' draws plus one pick."""
        source = RandomSource(seed=seed)
        generator = one_of(
            generate(int, source=source), generate(int, source=source), source=source
        )
        generator()
        after_one_of = source.randint(0, 10**9)

        replay = RandomSource(seed=seed)
        ints = generate(int, source=replay)
        ints()
        ints()
        replay.index(2)
        assert replay.randint(0, 10**9) == after_one_of

    @given(seed=seeds)
    def test_result_is_one_of_the_candidate_values(self, seed: int) -> None:
        """Value is drawn from one of the candidates' ranges."""
        source = RandomSource(seed=seed)
        generator = one_of(
            generate(float, -1.0, 1.0, source=source),
            generate(float, 99.0, 100.0, source=source),
            source=source,
        )
        value = generator()
        assert -1.0 <= value <= 1.0 or 99.0 <= value <= 100.0

    @pytest.mark.parametrize("count", [0, 1])
    def test_fewer_than_two_candidates_rejected(self, count: int) -> None:
        """one_of needs at least two candidates."""
        with pytest.raises(ArityError) as exc_info:
            one_of(*[constant(0)] * count)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.TOO_FEW_CANDIDATES

    def test_type_specs_accepted_as_candidates(self, source: RandomSource) -> None:
        """Type specs are coerced via generate()."""
        value = one_of(bool, str, source=source)()
        assert isinstance(value, (bool, str))

    def test_kind_is_custom(self) -> None:
        """Combinators report the CUSTOM variant."""
        assert one_of(constant(1), constant(2)).kind == GeneratorKind.CUSTOM


class TestChoose:
    """Uniform pick from a materialized sequence."""

    def test_empty_input_rejected(self) -> None:
        """choose([]) raises EmptyInputError."""
        with pytest.raises(EmptyInputError) as exc_info:
            choose([])
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.EMPTY_INPUT

    def test_single_element_always_returned(self, source: RandomSource) -> None:
        """choose([7]) always returns 7."""
        generator = choose([7], source=source)
        assert {generator() for _ in range(50)} == {7}

    @given(seed=seeds, elements=st.lists(st.integers(), min_size=1, max_size=20))
    def test_result_is_an_element(self, seed: int, elements: list[int]) -> None:
        """Every pick is a member of the input."""
        generator = choose(elements, source=RandomSource(seed=seed))
        for _ in range(10):
            assert generator() in elements

    def test_all_elements_reachable(self, source: RandomSource) -> None:
        """Every element of a small input is eventually picked."""
        generator = choose([1, -1, 8, -8, 23], source=source)
        assert {generator() for _ in range(500)} == {1, -1, 8, -8, 23}

    def test_input_is_copied(self, source: RandomSource) -> None:
        """Mutating the input after construction has no effect."""
        elements = [1, 2]
        generator = choose(elements, source=source)
        elements.append(3)
        assert all(generator() in (1, 2) for _ in range(100))

    def test_accepts_any_iterable(self, source: RandomSource) -> None:
        """Generators and ranges are materialized."""
        generator = choose((n * n for n in range(4)), source=source)
        assert generator() in {0, 1, 4, 9}


class TestMapGenerate:
    """Output transformation."""

    @given(seed=seeds)
    def test_odd_numbers(self, seed: int) -> None:
        """Mapping even values to the next odd yields only odd values."""
        source = RandomSource(seed=seed)
        odd = map_generate(
            lambda a: a + 1 if a % 2 == 0 else a, generate(int, -1000, 1000, source=source)
        )
        for _ in range(20):
            assert odd() % 2 == 1

    def test_generator_called_once_per_value(self, source: RandomSource) -> None:
        """mapper sees exactly one generated value per call."""
        seen: list[int] = []

        def record(value: int) -> int:
            seen.append(value)
            return value * 10

        base = generate(int, 0, 9, source=source)
        mapped = map_generate(record, base)
        results = [mapped() for _ in range(5)]
        assert len(seen) == 5
        assert results == [value * 10 for value in seen]

    def test_method_form(self, source: RandomSource) -> None:
        """Generator.map is map_generate."""
        digits = generate(int, source=source).map(lambda a: a % 10)
        assert all(0 <= digits() <= 9 for _ in range(50))

    def test_type_spec_generator(self) -> None:
        """A type spec is coerced before mapping."""
        negated = map_generate(lambda b: not b, bool)
        assert isinstance(negated(), bool)
