"""
DecimalNum — Num произвольной точности поверх decimal.Decimal

Точность задаётся числом значащих цифр (по умолчанию 32), округление
ROUND_HALF_UP. Результат бинарной операции наследует точность левого
операнда.

Взаимодействие с NaN:
- арифметика с NaN-операндом → NaN
- деление/остаток на ноль → NaN
- log(x ≤ 0), sqrt(x < 0), нецелая степень неположительного → NaN
- is_equal / is_greater_than / ... против NaN → False
- compare_to(NaN) → 0, min/max с NaN → NaN
"""

from __future__ import annotations

import logging
from decimal import (
    ROUND_CEILING,
    ROUND_FLOOR,
    ROUND_HALF_UP,
    Context,
    Decimal,
    InvalidOperation,
    Overflow,
)
from functools import lru_cache, partial
from typing import Callable, Final

from src.core.num.nan import NaN
from src.core.num.num import (
    INT_BITS,
    LONG_BITS,
    Num,
    NumberLike,
    NumFunction,
    to_single_precision,
    wrap_signed,
)

logger = logging.getLogger(__name__)

# Число значащих цифр по умолчанию
DEFAULT_PRECISION: Final[int] = 32


@lru_cache(maxsize=None)
def decimal_context(precision: int) -> Context:
    """Контекст decimal для заданной точности (кэшируется)."""
    if precision <= 0:
        raise ValueError(f"precision must be positive, got {precision}")
    return Context(prec=precision, rounding=ROUND_HALF_UP)


def _to_decimal(value: Num) -> Decimal:
    delegate = value.delegate
    if isinstance(delegate, Decimal):
        return delegate
    if isinstance(delegate, float):
        return Decimal(repr(delegate))
    return Decimal(delegate)


class DecimalNum(Num):
    """Определённое значение с произвольной точностью."""

    __slots__ = ("_delegate", "_precision")

    def __init__(self, value: Decimal, precision: int = DEFAULT_PRECISION):
        if not value.is_finite():
            raise ValueError(f"DecimalNum requires a finite value, got {value}")
        self._precision = precision
        self._delegate = decimal_context(precision).plus(value)

    @classmethod
    def value_of(cls, value: NumberLike, precision: int | None = None) -> Num:
        """
        Фабрика DecimalNum.

        Args:
            value: int, float, str, Decimal или Num
            precision: Число значащих цифр (default: DEFAULT_PRECISION)

        Returns:
            DecimalNum, либо NaN для нечисловых значений ("NaN", inf, NaN)

        Raises:
            ValueError: Если строку нельзя разобрать как число
            TypeError: Если тип value не поддерживается

        Examples:
            >>> DecimalNum.value_of("1.5").plus(DecimalNum.value_of(2))
            DecimalNum(3.5)
            >>> DecimalNum.value_of(float("nan"))
            NaN
        """
        if precision is None:
            precision = DEFAULT_PRECISION

        if isinstance(value, Num):
            if value.is_nan():
                return NaN
            parsed = _to_decimal(value)
        elif isinstance(value, Decimal):
            parsed = value
        elif isinstance(value, float):
            parsed = Decimal(repr(value))
        elif isinstance(value, int):
            parsed = Decimal(value)
        elif isinstance(value, str):
            try:
                parsed = Decimal(value.strip())
            except InvalidOperation as e:
                raise ValueError(f"Cannot parse {value!r} as a number") from e
        else:
            raise TypeError(f"Unsupported type for DecimalNum: {type(value).__name__}")

        if not parsed.is_finite():
            logger.debug("Non-finite input %r converted to NaN", value)
            return NaN

        try:
            return cls(parsed, precision)
        except (Overflow, InvalidOperation):
            logger.debug("Input %r out of decimal range, result is NaN", value)
            return NaN

    def _new(self, value: Decimal, precision: int | None = None) -> DecimalNum:
        return DecimalNum(value, self._precision if precision is None else precision)

    def _apply(
        self,
        operation: Callable[..., Decimal],
        *operands: Decimal,
        precision: int | None = None,
    ) -> Num:
        """
        Выполнение операции контекста decimal.

        Переполнение и невыполнимые операции (например, DivisionImpossible
        у remainder при частном длиннее точности) дают NaN.
        """
        try:
            return self._new(operation(*operands), precision)
        except (Overflow, InvalidOperation) as e:
            logger.debug("%s%r failed (%s), result is NaN", operation.__name__, operands, type(e).__name__)
            return NaN

    @property
    def _ctx(self) -> Context:
        return decimal_context(self._precision)

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    @property
    def delegate(self) -> Decimal:
        return self._delegate

    @property
    def precision(self) -> int:
        return self._precision

    def function(self) -> NumFunction:
        return partial(DecimalNum.value_of, precision=self._precision)

    def __str__(self) -> str:
        return str(self._delegate)

    def __repr__(self) -> str:
        return f"DecimalNum({self._delegate})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecimalNum):
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
        return self._apply(self._ctx.add, self._delegate, _to_decimal(augend))

    def minus(self, subtrahend: Num) -> Num:
        if subtrahend.is_nan():
            return NaN
        return self._apply(self._ctx.subtract, self._delegate, _to_decimal(subtrahend))

    def multiplied_by(self, multiplicand: Num) -> Num:
        if multiplicand.is_nan():
            return NaN
        return self._apply(self._ctx.multiply, self._delegate, _to_decimal(multiplicand))

    def divided_by(self, divisor: Num) -> Num:
        if divisor.is_nan() or divisor.is_zero():
            return NaN
        return self._apply(self._ctx.divide, self._delegate, _to_decimal(divisor))

    def remainder(self, divisor: Num) -> Num:
        if divisor.is_nan() or divisor.is_zero():
            return NaN
        # Знак остатка совпадает со знаком делимого
        return self._apply(self._ctx.remainder, self._delegate, _to_decimal(divisor))

    def floor(self) -> Num:
        return self._new(self._delegate.to_integral_value(rounding=ROUND_FLOOR))

    def ceil(self) -> Num:
        return self._new(self._delegate.to_integral_value(rounding=ROUND_CEILING))

    def pow(self, n: int | Num) -> Num:
        if isinstance(n, Num):
            if n.is_nan():
                return NaN
            exponent = _to_decimal(n)
            if exponent != exponent.to_integral_value():
                return self._pow_fractional(exponent)
            n = int(exponent)

        if n == 0:
            return self._new(Decimal(1))
        if n < 0 and self._delegate.is_zero():
            return NaN

        return self._apply(self._ctx.power, self._delegate, Decimal(n))

    def _pow_fractional(self, exponent: Decimal) -> Num:
        # x^y = exp(y * ln x), определено только для x > 0
        if self._delegate <= 0:
            return NaN
        ctx = self._ctx
        try:
            return self._new(ctx.exp(ctx.multiply(exponent, ctx.ln(self._delegate))))
        except (Overflow, InvalidOperation):
            logger.debug("%s ** %s is out of decimal range, result is NaN", self, exponent)
            return NaN

    def log(self) -> Num:
        if self._delegate <= 0:
            return NaN
        return self._apply(self._ctx.ln, self._delegate)

    def sqrt(self, precision: int | None = None) -> Num:
        if self._delegate < 0:
            return NaN
        precision = self._precision if precision is None else precision
        return self._apply(decimal_context(precision).sqrt, self._delegate, precision=precision)

    def abs(self) -> Num:
        return self._new(abs(self._delegate))

    def negate(self) -> Num:
        return self._new(-self._delegate)

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
        return self._delegate.is_zero()

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
        value = _to_decimal(other)
        return (self._delegate > value) - (self._delegate < value)

    def matches(self, other: Num, delta: int | float | Decimal | Num) -> bool:
        """
        Приближённое равенство.

        Args:
            other: Сравниваемое значение
            delta: int задаёт число значащих цифр, до которых округляются оба
                значения; иначе это допустимое абсолютное отклонение

        Examples:
            >>> DecimalNum.value_of("1.23456").matches(DecimalNum.value_of("1.23457"), 4)
            True
            >>> DecimalNum.value_of("1.0").matches(DecimalNum.value_of("1.2"), 0.1)
            False
        """
        if other.is_nan():
            return False
        if isinstance(delta, int) and not isinstance(delta, bool):
            ctx = decimal_context(delta)
            return ctx.plus(self._delegate) == ctx.plus(_to_decimal(other))
        tolerance = delta if isinstance(delta, Num) else self.num_of(delta)
        return self.minus(other).abs().is_less_than_or_equal(tolerance)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def int_value(self) -> int:
        return wrap_signed(int(self._delegate), INT_BITS)

    def long_value(self) -> int:
        return wrap_signed(int(self._delegate), LONG_BITS)

    def float_value(self) -> float:
        return to_single_precision(float(self._delegate))

    def double_value(self) -> float:
        return float(self._delegate)
