"""Tests for generate(): type-shape dispatch, defaults and bounds."""

import sys
from collections.abc import Mapping, Sequence

import pytest
from hypothesis import given
from hypothesis import strategies as st

from propcheck import (
    InvalidBoundsError,
    RandomSource,
    UnsupportedTypeError,
    generate,
)
from propcheck.diagnostics import DiagnosticCode
from propcheck.enums import GeneratorKind
from propcheck.generators import (
    CHAR,
    FLOAT32,
    INT8,
    INT32,
    INT64,
    UINT8,
    UINT64,
    BoundedNumeric,
    MappingGenerator,
    Scalar,
    SequenceGenerator,
    TextGenerator,
)
from tests.strategies import int_bound_pairs, seeds


class TestDispatch:
    """Shape of the type spec selects the generator variant."""

    @pytest.mark.parametrize(
        ("spec", "expected_type", "expected_kind"),
        [
            (dict[str, int], MappingGenerator, GeneratorKind.MAPPING),
            (Mapping[int, bool], MappingGenerator, GeneratorKind.MAPPING),
            (list[int], SequenceGenerator, GeneratorKind.SEQUENCE),
            (Sequence[float], SequenceGenerator, GeneratorKind.SEQUENCE),
            (str, TextGenerator, GeneratorKind.SEQUENCE),
            (float, BoundedNumeric, GeneratorKind.BOUNDED),
            (FLOAT32, BoundedNumeric, GeneratorKind.BOUNDED),
            (bool, Scalar, GeneratorKind.SCALAR),
            (int, BoundedNumeric, GeneratorKind.BOUNDED),
            (UINT8, BoundedNumeric, GeneratorKind.BOUNDED),
        ],
    )
    def test_variant_selected_at_construction(
        self, spec: object, expected_type: type, expected_kind: GeneratorKind
    ) -> None:
        """Each accepted shape builds its variant."""
        generator = generate(spec)
        assert isinstance(generator, expected_type)
        assert generator.kind == expected_kind

    def test_bool_is_not_treated_as_int(self, source: RandomSource) -> None:
        """bool subclasses int but dispatches to the coin, not a range."""
        values = {generate(bool, source=source)() for _ in range(100)}
        assert values == {True, False}

    def test_int_defaults_to_int32_range(self) -> None:
        """Builtin int resolves to INT32."""
        generator = generate(int)
        assert isinstance(generator, BoundedNumeric)
        assert (generator.min_value, generator.max_value) == (INT32.min, INT32.max)

    def test_mapping_dispatch_builds_value_and_key_generators(self) -> None:
        """dict[K, V] delegates to dicts(generate(V), generate(K))."""
        generator = generate(dict[bool, str])
        assert isinstance(generator, MappingGenerator)
        assert isinstance(generator.keys, Scalar)
        assert isinstance(generator.values, TextGenerator)

    def test_nested_collections(self, source: RandomSource) -> None:
        """list[list[bool]] produces lists of lists of bools."""
        value = generate(list[list[bool]], source=source)()
        assert isinstance(value, list)
        for inner in value:
            assert isinstance(inner, list)
            assert all(isinstance(item, bool) for item in inner)

    def test_text_uses_char_code_units(self, source: RandomSource) -> None:
        """str values consist of characters in the CHAR range."""
        value = generate(str, source=source)()
        assert isinstance(value, str)
        assert all(CHAR.min <= ord(ch) <= CHAR.max for ch in value)

    @pytest.mark.parametrize("spec", [object, complex, type(None), bytes, tuple[int, str]])
    def test_unsupported_types_raise(self, spec: object) -> None:
        """Types without a rule raise UnsupportedTypeError."""
        with pytest.raises(UnsupportedTypeError) as exc_info:
            generate(spec)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.UNSUPPORTED_TYPE

    @pytest.mark.parametrize("spec", [list, dict, Sequence, Mapping])
    def test_bare_collections_raise(self, spec: object) -> None:
        """Collections without element types cannot be generated."""
        with pytest.raises(UnsupportedTypeError) as exc_info:
            generate(spec)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.UNPARAMETERIZED_COLLECTION

    def test_construction_consumes_no_entropy(self) -> None:
        """Building a generator leaves the stream untouched."""
        a = RandomSource(seed=11)
        b = RandomSource(seed=11)
        generate(list[int], source=a)
        generate(dict[str, float], source=a)
        assert a.randint(0, 10**9) == b.randint(0, 10**9)


class TestIntegralBounds:
    """Inclusive integral ranges with per-bound defaults."""

    @given(seed=seeds, bounds=int_bound_pairs(INT32))
    def test_values_within_bounds(self, seed: int, bounds: tuple[int, int]) -> None:
        """Every draw lies in [min, max]."""
        low, high = bounds
        generator = generate(int, low, high, source=RandomSource(seed=seed))
        for _ in range(20):
            assert low <= generator() <= high

    @given(seed=seeds, low=st.integers(INT8.min, INT8.max))
    def test_unset_max_falls_back_to_type_max(self, seed: int, low: int) -> None:
        """Only min given: max is the type maximum."""
        generator = generate(INT8, low, source=RandomSource(seed=seed))
        assert isinstance(generator, BoundedNumeric)
        assert generator.max_value == INT8.max
        assert low <= generator() <= INT8.max

    def test_unset_min_falls_back_to_type_min(self) -> None:
        """Only max given: min is the type minimum."""
        generator = generate(INT8, None, 0)
        assert isinstance(generator, BoundedNumeric)
        assert (generator.min_value, generator.max_value) == (INT8.min, 0)

    def test_degenerate_range(self, source: RandomSource) -> None:
        """min == max always returns that value."""
        generator = generate(int, 5, 5, source=source)
        assert {generator() for _ in range(20)} == {5}

    def test_wide_types_cover_their_range(self) -> None:
        """INT64 and UINT64 bounds resolve to their full ranges."""
        assert generate(INT64).min_value == -(2**63)  # type: ignore[attr-defined]
        assert generate(UINT64).max_value == 2**64 - 1  # type: ignore[attr-defined]

    def test_inverted_bounds_raise(self) -> None:
        """min > max is rejected at construction."""
        with pytest.raises(InvalidBoundsError) as exc_info:
            generate(int, 10, 1)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.BOUNDS_INVERTED

    @pytest.mark.parametrize(("low", "high"), [(-1, None), (None, 256), (0, 1000)])
    def test_out_of_range_bounds_raise(self, low: int | None, high: int | None) -> None:
        """Bounds outside the type's range are rejected."""
        with pytest.raises(InvalidBoundsError) as exc_info:
            generate(UINT8, low, high)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.BOUND_OUT_OF_RANGE

    def test_float_bound_for_integral_type_raises_type_error(self) -> None:
        """Integral bounds must be integers."""
        with pytest.raises(TypeError):
            generate(int, 1.5, 10)


class TestFloatBounds:
    """Inclusive float ranges and the positive-normal lower default."""

    @given(
        seed=seeds,
        low=st.floats(-1e6, 1e6),
        span=st.floats(0.0, 1e6),
    )
    def test_values_within_bounds(self, seed: int, low: float, span: float) -> None:
        """Every draw lies in [min, max]."""
        high = low + span
        generator = generate(float, low, high, source=RandomSource(seed=seed))
        for _ in range(20):
            assert low <= generator() <= high

    def test_default_min_is_smallest_positive_normal(self) -> None:
        """Unset min is the smallest positive normal, not -max."""
        generator = generate(float)
        assert isinstance(generator, BoundedNumeric)
        assert generator.min_value == sys.float_info.min
        assert generator.max_value == sys.float_info.max

    def test_default_range_yields_positive_values(self, source: RandomSource) -> None:
        """With both bounds unset every draw is positive and finite."""
        generator = generate(float, source=source)
        for _ in range(100):
            value = generator()
            assert sys.float_info.min <= value <= sys.float_info.max

    def test_negative_max_with_unset_min_is_inverted(self) -> None:
        """The positive lower default makes a negative-only range invalid."""
        with pytest.raises(InvalidBoundsError):
            generate(float, None, -1.0)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_bounds_raise(self, bad: float) -> None:
        """NaN and infinities are rejected as bounds."""
        with pytest.raises(InvalidBoundsError) as exc_info:
            generate(float, bad, None)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.BOUND_NOT_FINITE

    def test_float32_values_are_single_precision(self, source: RandomSource) -> None:
        """FLOAT32 draws survive a round trip through FLOAT32.narrow()."""
        generator = generate(FLOAT32, -1.0, 1.0, source=source)
        for _ in range(50):
            value = generator()
            assert FLOAT32.narrow(value) == value
            assert -1.0 <= value <= 1.0

    def test_float32_bound_beyond_range_raises(self) -> None:
        """A binary64-only magnitude does not fit FLOAT32."""
        with pytest.raises(InvalidBoundsError):
            generate(FLOAT32, 0.0, 1e300)

    @pytest.mark.parametrize(("low", "high"), [(-(10**400), 0.0), (0.0, 10**400)])
    def test_int_bound_past_float_range_raises(self, low: float, high: float) -> None:
        """Ints too large to convert to float are out of range, not OverflowError."""
        with pytest.raises(InvalidBoundsError) as exc_info:
            generate(float, low, high)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.BOUND_OUT_OF_RANGE
        assert isinstance(exc_info.value.__cause__, OverflowError)


class TestBoundsOnNonNumericShapes:
    """Bounds only apply to numeric types."""

    @pytest.mark.parametrize("spec", [bool, str, list[int], dict[int, int]])
    def test_bounds_rejected(self, spec: object) -> None:
        """Passing bounds for a non-numeric shape raises."""
        with pytest.raises(InvalidBoundsError) as exc_info:
            generate(spec, 0, 1)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.BOUNDS_NOT_SUPPORTED
