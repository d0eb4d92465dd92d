"""
NumConfig — Конфигурация числового представления

Immutable Pydantic модель, определяющая, каким вариантом Num движок
представляет числа: DECIMAL (произвольная точность) или DOUBLE (float).

Код индикаторов получает функцию-конструктор из конфигурации и не ветвится
по типу варианта:

    to_num = NumConfig(kind="DOUBLE").function()
    close = to_num(42000.5)
"""

import logging
from enum import Enum
from functools import partial
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from src.core.num.decimal_num import DEFAULT_PRECISION, DecimalNum
from src.core.num.double_num import DoubleNum
from src.core.num.num import Num, NumFunction

logger = logging.getLogger(__name__)

# Верхняя граница точности DecimalNum (значащих цифр)
MAX_PRECISION: Final[int] = 1000


class NumKind(str, Enum):
    """Вариант числового представления."""

    DECIMAL = "DECIMAL"
    DOUBLE = "DOUBLE"


class NumConfig(BaseModel):
    """
    Параметры числового представления.

    precision используется только вариантом DECIMAL.
    """

    kind: NumKind = Field(NumKind.DECIMAL, description="Вариант Num")
    precision: int = Field(
        DEFAULT_PRECISION,
        ge=1,
        le=MAX_PRECISION,
        description="Число значащих цифр DecimalNum",
    )

    model_config = {"frozen": True}

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, v: Any) -> Any:
        """Допускает имя варианта в любом регистре ("double", "Decimal")"""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    def function(self) -> NumFunction:
        """Конструктор Num для сконфигурированного варианта."""
        logger.debug("Building Num function: kind=%s precision=%d", self.kind.value, self.precision)
        if self.kind is NumKind.DOUBLE:
            return DoubleNum.value_of
        return partial(DecimalNum.value_of, precision=self.precision)

    def num_of(self, value: Any) -> Num:
        """Разовое преобразование value (без построения функции)."""
        if self.kind is NumKind.DOUBLE:
            return DoubleNum.value_of(value)
        return DecimalNum.value_of(value, self.precision)


DEFAULT_NUM_CONFIG: Final[NumConfig] = NumConfig()
