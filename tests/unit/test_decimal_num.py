"""
Тесты для DecimalNum

Проверяет:
1. Фабрику value_of (парсинг, точность, нефинитные значения → NaN)
2. Арифметику с контекстом decimal и взаимодействие с NaN
3. Степени, логарифм, корень и их области определения
4. Сравнения и приближённое равенство matches
5. Конверсии int/long (wrap), float (single precision), double
6. Протокол операторов Python
"""

import math
from decimal import Decimal

import pytest

from src.core.num import DEFAULT_PRECISION, DecimalNum, DoubleNum, NaN


def d(value) -> DecimalNum:
    return DecimalNum.value_of(value)


# =============================================================================
# ФАБРИКА
# =============================================================================


class TestDecimalNumValueOf:
    """Тесты для DecimalNum.value_of"""

    def test_supported_inputs(self) -> None:
        assert str(d("1.5")) == "1.5"
        assert str(d(2)) == "2"
        assert str(d(Decimal("3.25"))) == "3.25"
        assert str(d(DoubleNum.value_of(0.5))) == "0.5"

    def test_float_uses_shortest_repr(self) -> None:
        """0.1 → "0.1", а не двоичное разложение"""
        assert str(d(0.1)) == "0.1"

    def test_default_precision(self) -> None:
        assert d(1).precision == DEFAULT_PRECISION == 32

    def test_precision_rounds_half_up(self) -> None:
        assert str(DecimalNum.value_of("1.23456", precision=3)) == "1.23"
        assert str(DecimalNum.value_of("2.5", precision=1)) == "3"
        assert str(DecimalNum.value_of("1.25", precision=2)) == "1.3"

    @pytest.mark.parametrize(
        "value",
        ["NaN", float("nan"), float("inf"), float("-inf"), Decimal("Infinity"), NaN],
        ids=repr,
    )
    def test_non_finite_input_is_nan(self, value) -> None:
        assert DecimalNum.value_of(value) is NaN

    def test_unparseable_string_raises(self) -> None:
        with pytest.raises(ValueError, match="Cannot parse"):
            DecimalNum.value_of("abc")

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(TypeError, match="Unsupported type"):
            DecimalNum.value_of([1])

    def test_constructor_rejects_non_finite(self) -> None:
        with pytest.raises(ValueError, match="finite"):
            DecimalNum(Decimal("NaN"))

    def test_function_keeps_precision(self) -> None:
        five_digits = DecimalNum.value_of(1, precision=5)
        assert str(five_digits.num_of("1.234567")) == "1.2346"
        assert five_digits.zero() == d(0)
        assert five_digits.hundred() == d(100)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestDecimalNumArithmetic:
    """Арифметика DecimalNum"""

    def test_basic_operations(self) -> None:
        assert d(2).plus(d(3)) == d(5)
        assert d(2).minus(d(3)) == d(-1)
        assert d("1.5").multiplied_by(d(4)) == d(6)
        assert d(7).divided_by(d(2)) == d("3.5")

    def test_decimal_exactness(self) -> None:
        assert d(0.1).plus(d(0.2)) == d("0.3")

    def test_division_rounds_to_precision(self) -> None:
        assert str(d(1).divided_by(d(3))) == "0." + "3" * 32

    def test_remainder_sign_follows_dividend(self) -> None:
        assert d(7).remainder(d(3)) == d(1)
        assert d(-7).remainder(d(3)) == d(-1)

    def test_division_by_zero_is_nan(self) -> None:
        assert d(1).divided_by(d(0)) is NaN
        assert d(1).remainder(d(0)) is NaN

    @pytest.mark.parametrize(
        "operation",
        ["plus", "minus", "multiplied_by", "divided_by", "remainder", "min", "max"],
    )
    def test_nan_operand_gives_nan(self, operation: str) -> None:
        assert getattr(d(5), operation)(NaN) is NaN

    def test_floor_and_ceil(self) -> None:
        assert d("1.5").floor() == d(1)
        assert d("-1.5").floor() == d(-2)
        assert d("1.2").ceil() == d(2)
        assert d("-1.2").ceil() == d(-1)

    def test_abs_and_negate(self) -> None:
        assert d(-3).abs() == d(3)
        assert d(3).negate() == d(-3)

    def test_min_max(self) -> None:
        assert d(1).min(d(2)) == d(1)
        assert d(1).max(d(2)) == d(2)

    def test_mixed_variant_operand(self) -> None:
        """DoubleNum-операнд приводится через строковое представление"""
        assert d(1).plus(DoubleNum.value_of(0.5)) == d("1.5")

    def test_overflow_is_nan(self) -> None:
        """Выход за границы экспоненты decimal → NaN, а не decimal.Overflow"""
        assert d("9e999999").multiplied_by(d(10)) is NaN
        assert d("1e999999").divided_by(d("1e-10")) is NaN
        assert d("9e999999").plus(d("9e999999")) is NaN

    def test_remainder_with_quotient_beyond_precision_is_nan(self) -> None:
        """Частное длиннее точности (DivisionImpossible) → NaN"""
        assert d("1e40").remainder(d(3)) is NaN
        assert d("1e40") % 3 is NaN

    def test_value_of_out_of_range_is_nan(self) -> None:
        assert d("1e1000000") is NaN
        assert d(Decimal("-1e1000000")) is NaN


class TestDecimalNumPowLogSqrt:
    """Степени, логарифм и корень"""

    def test_integer_pow(self) -> None:
        assert d(3).pow(2) == d(9)
        assert d(2).pow(-1) == d("0.5")
        assert d(5).pow(0) == d(1)
        assert d(0).pow(0) == d(1)

    def test_zero_to_negative_power_is_nan(self) -> None:
        assert d(0).pow(-1) is NaN

    def test_num_pow_integral_exponent(self) -> None:
        assert d(3).pow(d(2)) == d(9)
        assert d(3).pow(d("2.0")) == d(9)

    def test_num_pow_fractional_exponent(self) -> None:
        assert d(4).pow(d("0.5")).matches(d(2), 20)

    def test_fractional_pow_of_non_positive_is_nan(self) -> None:
        assert d(-4).pow(d("0.5")) is NaN
        assert d(0).pow(d("0.5")) is NaN

    def test_pow_nan_exponent(self) -> None:
        assert d(2).pow(NaN) is NaN

    def test_log(self) -> None:
        assert d(1).log().is_zero()
        assert d(math.e).log().matches(d(1), 10)

    def test_log_of_non_positive_is_nan(self) -> None:
        assert d(0).log() is NaN
        assert d(-1).log() is NaN

    def test_sqrt(self) -> None:
        assert d(16).sqrt() == d(4)

    def test_sqrt_with_precision(self) -> None:
        root = d(2).sqrt(5)
        assert str(root) == "1.4142"
        assert root.precision == 5

    def test_sqrt_of_negative_is_nan(self) -> None:
        assert d(-1).sqrt() is NaN


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


class TestDecimalNumComparisons:
    """Сравнения DecimalNum"""

    def test_sign_predicates(self) -> None:
        assert d(0).is_zero()
        assert d(0).is_positive_or_zero()
        assert d(0).is_negative_or_zero()
        assert not d(0).is_positive()
        assert not d(0).is_negative()
        assert d(1).is_positive()
        assert d(-1).is_negative()

    def test_ordering(self) -> None:
        assert d(1).is_less_than(d(2))
        assert d(2).is_greater_than(d(1))
        assert d(2).is_greater_than_or_equal(d(2))
        assert d(2).is_less_than_or_equal(d(2))
        assert d("2.0").is_equal(d(2))
        assert d(1).compare_to(d(2)) == -1
        assert d(2).compare_to(d(1)) == 1
        assert d(2).compare_to(d("2.00")) == 0

    def test_comparisons_against_nan_are_false(self) -> None:
        x = d(1)
        assert not x.is_equal(NaN)
        assert not x.is_greater_than(NaN)
        assert not x.is_greater_than_or_equal(NaN)
        assert not x.is_less_than(NaN)
        assert not x.is_less_than_or_equal(NaN)
        assert x.compare_to(NaN) == 0

    def test_equality_and_hash(self) -> None:
        assert d("1.0") == d(1)
        assert hash(d("1.0")) == hash(d(1))
        assert d(1) != DoubleNum.value_of(1)
        assert d(1) != NaN

    def test_matches_significant_digits(self) -> None:
        assert d("1.23456").matches(d("1.23457"), 4)
        assert not d("1.23456").matches(d("1.23457"), 6)

    def test_matches_delta(self) -> None:
        assert d("1.0").matches(d("1.05"), 0.1)
        assert not d("1.0").matches(d("1.2"), d("0.1"))
        assert not d(1).matches(NaN, 1)


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


class TestDecimalNumConversions:
    """Конверсии DecimalNum"""

    def test_int_value_truncates(self) -> None:
        assert d("3.9").int_value() == 3
        assert d("-3.9").int_value() == -3

    def test_int_value_wraps_to_32_bits(self) -> None:
        assert d(2**31).int_value() == -(2**31)
        assert d(2**32 + 5).int_value() == 5

    def test_long_value_wraps_to_64_bits(self) -> None:
        assert d(2**40).long_value() == 2**40
        assert d(2**63).long_value() == -(2**63)

    def test_float_value_is_single_precision(self) -> None:
        assert d("0.1").float_value() == pytest.approx(0.1, rel=1e-7)
        assert d("0.1").float_value() != 0.1

    def test_double_value(self) -> None:
        assert d("0.1").double_value() == 0.1

    def test_delegate(self) -> None:
        assert d("2.5").delegate == Decimal("2.5")


# =============================================================================
# ОПЕРАТОРЫ
# =============================================================================


class TestDecimalNumOperators:
    """Протокол операторов Python"""

    def test_arithmetic_operators(self) -> None:
        assert d(2) + d(3) == d(5)
        assert d(2) + 3 == d(5)
        assert 3 - d(1) == d(2)
        assert d(7) / 2 == d("3.5")
        assert 2 * d("1.5") == d(3)
        assert d(7) % 3 == d(1)
        assert d(2) ** 3 == d(8)
        assert 2 ** d(3) == d(8)

    def test_unary_operators(self) -> None:
        assert -d(2) == d(-2)
        assert +d(2) == d(2)
        assert abs(d(-2)) == d(2)
        assert math.floor(d("2.7")) == d(2)
        assert math.ceil(d("2.1")) == d(3)

    def test_builtin_conversions(self) -> None:
        assert int(d("2.7")) == 2
        assert float(d("2.5")) == 2.5

    def test_comparison_operators(self) -> None:
        assert d(1) < 2
        assert d(2) <= d(2)
        assert d(3) > d(2)
        assert d(3) >= 3

    def test_nan_absorbs_through_operators(self) -> None:
        assert d(2) + NaN is NaN
        assert d(2) / 0 is NaN

    def test_sorting(self) -> None:
        values = [d(3), d(1), d(2)]
        assert sorted(values) == [d(1), d(2), d(3)]

    def test_unsupported_operand_raises(self) -> None:
        with pytest.raises(TypeError):
            d(1) + "1"  # type: ignore[operator]
