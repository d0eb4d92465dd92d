"""
Num — Полиморфный числовой тип

Единый интерфейс для всех числовых представлений движка (Decimal, float,
неопределённое значение NaN). Код индикаторов и стратегий пишется один раз
против Num и работает с любым вариантом, выбранным вызывающей стороной.

Варианты (закрытый набор):
- DecimalNum: произвольная точность поверх decimal.Decimal
- DoubleNum: IEEE-754 double поверх float
- NaN: единственный экземпляр "неопределённого" значения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Множество Num замкнуто относительно всех операций (результат всегда Num)
2. Экземпляры неизменяемы
3. Неопределённое значение существует ровно в одном экземпляре (NaN)

Операторы Python (+, -, *, /, %, **, <, <=, >, >=) делегируют в методы
plus/minus/.../is_less_than и т.д. Обычные числа в операндах приводятся
через num_of() к варианту Num-операнда, поэтому в паре с NaN сырое число
тоже становится NaN: 5 + NaN и NaN + 5 дают NaN.
"""

from __future__ import annotations

import math
import struct
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Callable, Union

# Сырые значения, которые принимают фабрики value_of / num_of
NumberLike = Union[int, float, str, Decimal, "Num"]

# Функция-конструктор варианта: сырое значение → Num
NumFunction = Callable[[Any], "Num"]

_RAW_NUMBER_TYPES = (int, float, Decimal)


class Num(ABC):
    """
    Базовый числовой тип.

    Подклассы обязаны реализовать всю арифметику, сравнения и конверсии.
    Поведение при взаимодействии с NaN определяется каждым вариантом
    явно (см. nan.py).
    """

    __slots__ = ()

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    @property
    @abstractmethod
    def delegate(self) -> int | float | Decimal | None:
        """Нижележащее значение (None для NaN)."""

    @property
    def name(self) -> str:
        """Человекочитаемое имя значения."""
        return str(self)

    @abstractmethod
    def function(self) -> NumFunction:
        """Конструктор варианта: сырое число → Num того же варианта."""

    def is_nan(self) -> bool:
        return False

    def num_of(self, value: Any) -> Num:
        """Преобразование value в Num того же варианта."""
        return self.function()(value)

    def zero(self) -> Num:
        return self.num_of(0)

    def one(self) -> Num:
        return self.num_of(1)

    def hundred(self) -> Num:
        return self.num_of(100)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    @abstractmethod
    def plus(self, augend: Num) -> Num: ...

    @abstractmethod
    def minus(self, subtrahend: Num) -> Num: ...

    @abstractmethod
    def multiplied_by(self, multiplicand: Num) -> Num: ...

    @abstractmethod
    def divided_by(self, divisor: Num) -> Num: ...

    @abstractmethod
    def remainder(self, divisor: Num) -> Num: ...

    @abstractmethod
    def floor(self) -> Num: ...

    @abstractmethod
    def ceil(self) -> Num: ...

    @abstractmethod
    def pow(self, n: int | Num) -> Num:
        """Возведение в степень: целую (int) или произвольную (Num)."""

    @abstractmethod
    def log(self) -> Num:
        """Натуральный логарифм."""

    @abstractmethod
    def sqrt(self, precision: int | None = None) -> Num:
        """Квадратный корень; precision задаёт число значащих цифр результата."""

    @abstractmethod
    def abs(self) -> Num: ...

    @abstractmethod
    def negate(self) -> Num: ...

    @abstractmethod
    def min(self, other: Num) -> Num: ...

    @abstractmethod
    def max(self, other: Num) -> Num: ...

    # -------------------------------------------------------------------------
    # Предикаты и сравнения
    # -------------------------------------------------------------------------

    @abstractmethod
    def is_zero(self) -> bool: ...

    @abstractmethod
    def is_positive(self) -> bool: ...

    @abstractmethod
    def is_positive_or_zero(self) -> bool: ...

    @abstractmethod
    def is_negative(self) -> bool: ...

    @abstractmethod
    def is_negative_or_zero(self) -> bool: ...

    @abstractmethod
    def is_equal(self, other: Num) -> bool: ...

    @abstractmethod
    def is_greater_than(self, other: Num) -> bool: ...

    @abstractmethod
    def is_greater_than_or_equal(self, other: Num) -> bool: ...

    @abstractmethod
    def is_less_than(self, other: Num) -> bool: ...

    @abstractmethod
    def is_less_than_or_equal(self, other: Num) -> bool: ...

    @abstractmethod
    def compare_to(self, other: Num) -> int:
        """
        Трёхзначное сравнение: -1, 0, 1.

        Пригодно для sorted(..., key=functools.cmp_to_key(Num.compare_to)).
        """

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    @abstractmethod
    def int_value(self) -> int:
        """Значение как 32-битное знаковое целое."""

    @abstractmethod
    def long_value(self) -> int:
        """Значение как 64-битное знаковое целое."""

    @abstractmethod
    def float_value(self) -> float:
        """Значение, округлённое до IEEE-754 single precision."""

    @abstractmethod
    def double_value(self) -> float:
        """Значение как IEEE-754 double."""

    # -------------------------------------------------------------------------
    # Протокол операторов Python
    # -------------------------------------------------------------------------

    def _coerce(self, other: Any) -> Num | None:
        if isinstance(other, Num):
            return other
        if isinstance(other, _RAW_NUMBER_TYPES):
            return self.num_of(other)
        return None

    def __add__(self, other: Any) -> Num:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.plus(operand)

    def __radd__(self, other: Any) -> Num:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.plus(self)

    def __sub__(self, other: Any) -> Num:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.minus(operand)

    def __rsub__(self, other: Any) -> Num:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.minus(self)

    def __mul__(self, other: Any) -> Num:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.multiplied_by(operand)

    def __rmul__(self, other: Any) -> Num:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.multiplied_by(self)

    def __truediv__(self, other: Any) -> Num:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.divided_by(operand)

    def __rtruediv__(self, other: Any) -> Num:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.divided_by(self)

    def __mod__(self, other: Any) -> Num:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.remainder(operand)

    def __rmod__(self, other: Any) -> Num:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.remainder(self)

    def __pow__(self, other: Any) -> Num:
        if isinstance(other, int) and not isinstance(other, bool):
            return self.pow(other)
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.pow(operand)

    def __rpow__(self, other: Any) -> Num:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.pow(self)

    def __neg__(self) -> Num:
        return self.negate()

    def __pos__(self) -> Num:
        return self

    def __abs__(self) -> Num:
        return self.abs()

    def __floor__(self) -> Num:
        return self.floor()

    def __ceil__(self) -> Num:
        return self.ceil()

    def __lt__(self, other: Any) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.is_less_than(operand)

    def __le__(self, other: Any) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.is_less_than_or_equal(operand)

    def __gt__(self, other: Any) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.is_greater_than(operand)

    def __ge__(self, other: Any) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.is_greater_than_or_equal(operand)

    def __int__(self) -> int:
        return self.int_value()

    def __float__(self) -> float:
        return self.double_value()


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ И SINGLE-PRECISION КОНВЕРСИИ
# =============================================================================

INT_BITS = 32
LONG_BITS = 64


def wrap_signed(value: int, bits: int) -> int:
    """
    Младшие bits битов value как знаковое целое (дополнительный код).

    Examples:
        >>> wrap_signed(2**31, 32)
        -2147483648
        >>> wrap_signed(-1, 64)
        -1
    """
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def saturate_signed(value: int, bits: int) -> int:
    """Ограничение value диапазоном знакового целого разрядности bits."""
    upper = (1 << (bits - 1)) - 1
    lower = -(1 << (bits - 1))
    return max(lower, min(upper, value))


def to_single_precision(value: float) -> float:
    """Округление double до ближайшего IEEE-754 single (переполнение → ±inf)."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)
