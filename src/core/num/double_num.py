"""
DoubleNum — Num поверх IEEE-754 double (float)

Быстрый вариант для расчётов, где точность decimal не требуется.
Любой нефинитный результат (переполнение, выход из области определения)
превращается в NaN, поэтому DoubleNum всегда хранит конечное значение.

Взаимодействие с NaN совпадает с DecimalNum.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Any, Final

from src.core.num.nan import NaN
from src.core.num.num import (
    INT_BITS,
    LONG_BITS,
    Num,
    NumberLike,
    NumFunction,
    saturate_signed,
    to_single_precision,
)

logger = logging.getLogger(__name__)

# Допуск по умолчанию для matches()
DEFAULT_MATCH_DELTA: Final[float] = 1e-5


def _to_float(value: Num) -> float:
    return float(value.delegate)


class DoubleNum(Num):
    """Определённое значение двойной точности."""

    __slots__ = ("_delegate",)

    def __init__(self, value: float):
        if not math.isfinite(value):
            raise ValueError(f"DoubleNum requires a finite value, got {value}")
        self._delegate = float(value)

    @classmethod
    def value_of(cls, value: NumberLike) -> Num:
        """
        Фабрика DoubleNum.

        Raises:
            ValueError: Если строку нельзя разобрать как число
            TypeError: Если тип value не поддерживается

        Examples:
            >>> DoubleNum.value_of("2.5")
            DoubleNum(2.5)
            >>> DoubleNum.value_of(float("inf"))
            NaN
        """
        if isinstance(value, Num):
            if value.is_nan():
                return NaN
            parsed = _to_float(value)
        elif isinstance(value, (int, float, Decimal)):
            try:
                parsed = float(value)
            except OverflowError:
                parsed = math.inf
        elif isinstance(value, str):
            try:
                parsed = float(value.strip())
            except ValueError as e:
                raise ValueError(f"Cannot parse {value!r} as a number") from e
        else:
            raise TypeError(f"Unsupported type for DoubleNum: {type(value).__name__}")

        return cls._finite_or_nan(parsed, value)

    @classmethod
    def _finite_or_nan(cls, result: float, source: Any = None) -> Num:
        if not math.isfinite(result):
            logger.debug("Non-finite value %r converted to NaN", source if source is not None else result)
            return NaN
        return cls(result)

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    @property
    def delegate(self) -> float:
        return self._delegate

    def function(self) -> NumFunction:
        return DoubleNum.value_of

    def __str__(self) -> str:
        return repr(self._delegate)

    def __repr__(self) -> str:
        return f"DoubleNum({self._delegate!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DoubleNum):
            return False
        return self._delegate == other._delegate

    def __hash__(self) -> int:
        return hash(self._delegate)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def plus(self, augend: Num) -> Num:
        if augend.is_nan():
            return NaN
        return self._finite_or_nan(self._delegate + _to_float(augend))

    def minus(self, subtrahend: Num) -> Num:
        if subtrahend.is_nan():
            return NaN
        return self._finite_or_nan(self._delegate - _to_float(subtrahend))

    def multiplied_by(self, multiplicand: Num) -> Num:
        if multiplicand.is_nan():
            return NaN
        return self._finite_or_nan(self._delegate * _to_float(multiplicand))

    def divided_by(self, divisor: Num) -> Num:
        if divisor.is_nan() or divisor.is_zero():
            return NaN
        return self._finite_or_nan(self._delegate / _to_float(divisor))

    def remainder(self, divisor: Num) -> Num:
        if divisor.is_nan() or divisor.is_zero():
            return NaN
        # math.fmod: знак остатка совпадает со знаком делимого
        return self._finite_or_nan(math.fmod(self._delegate, _to_float(divisor)))

    def floor(self) -> Num:
        return DoubleNum(float(math.floor(self._delegate)))

    def ceil(self) -> Num:
        return DoubleNum(float(math.ceil(self._delegate)))

    def pow(self, n: int | Num) -> Num:
        if isinstance(n, Num):
            if n.is_nan():
                return NaN
            exponent = _to_float(n)
        else:
            exponent = n
        try:
            result = math.pow(self._delegate, exponent)
        except (OverflowError, ValueError):
            # Переполнение (в том числе int-степени вне диапазона float)
            # или отрицательное основание с нецелой степенью
            return NaN
        return self._finite_or_nan(result)

    def log(self) -> Num:
        if self._delegate <= 0:
            return NaN
        return DoubleNum(math.log(self._delegate))

    def sqrt(self, precision: int | None = None) -> Num:
        # precision не влияет: точность double фиксирована
        if self._delegate < 0:
            return NaN
        return DoubleNum(math.sqrt(self._delegate))

    def abs(self) -> Num:
        return DoubleNum(abs(self._delegate))

    def negate(self) -> Num:
        return DoubleNum(-self._delegate)

    def min(self, other: Num) -> Num:
        if other.is_nan():
            return NaN
        return self if self.compare_to(other) <= 0 else other

    def max(self, other: Num) -> Num:
        if other.is_nan():
            return NaN
        return self if self.compare_to(other) >= 0 else other

    # -------------------------------------------------------------------------
    # Предикаты и сравнения
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self._delegate == 0

    def is_positive(self) -> bool:
        return self._delegate > 0

    def is_positive_or_zero(self) -> bool:
        return self._delegate >= 0

    def is_negative(self) -> bool:
        return self._delegate < 0

    def is_negative_or_zero(self) -> bool:
        return self._delegate <= 0

    def is_equal(self, other: Num) -> bool:
        return not other.is_nan() and self.compare_to(other) == 0

    def is_greater_than(self, other: Num) -> bool:
        return not other.is_nan() and self.compare_to(other) > 0

    def is_greater_than_or_equal(self, other: Num) -> bool:
        return not other.is_nan() and self.compare_to(other) >= 0

    def is_less_than(self, other: Num) -> bool:
        return not other.is_nan() and self.compare_to(other) < 0

    def is_less_than_or_equal(self, other: Num) -> bool:
        return not other.is_nan() and self.compare_to(other) <= 0

    def compare_to(self, other: Num) -> int:
        if other.is_nan():
            return 0
        value = _to_float(other)
        return (self._delegate > value) - (self._delegate < value)

    def matches(self, other: Num, delta: float | Num = DEFAULT_MATCH_DELTA) -> bool:
        """Приближённое равенство: |self - other| <= delta."""
        if other.is_nan() or (isinstance(delta, Num) and delta.is_nan()):
            return False
        tolerance = _to_float(delta) if isinstance(delta, Num) else float(delta)
        return abs(self._delegate - _to_float(other)) <= tolerance

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def int_value(self) -> int:
        return saturate_signed(int(self._delegate), INT_BITS)

    def long_value(self) -> int:
        return saturate_signed(int(self._delegate), LONG_BITS)

    def float_value(self) -> float:
        return to_single_precision(self._delegate)

    def double_value(self) -> float:
        return self._delegate
