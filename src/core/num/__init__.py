"""
Num — числовая абстракция движка

Полиморфный тип Num и его варианты:
- DecimalNum: произвольная точность (decimal.Decimal)
- DoubleNum: IEEE-754 double (float)
- NaN: единственный экземпляр неопределённого значения
"""

from src.core.num.config import DEFAULT_NUM_CONFIG, MAX_PRECISION, NumConfig, NumKind
from src.core.num.decimal_num import DEFAULT_PRECISION, DecimalNum
from src.core.num.double_num import DEFAULT_MATCH_DELTA, DoubleNum
from src.core.num.exceptions import NumError, UnsupportedRepresentationError
from src.core.num.nan import NAN_NAME, NaN, NaNType
from src.core.num.num import Num, NumberLike, NumFunction

__all__ = [
    # Base
    "Num",
    "NumberLike",
    "NumFunction",
    # Variants
    "DecimalNum",
    "DoubleNum",
    "NaN",
    "NaNType",
    # Constants
    "DEFAULT_PRECISION",
    "DEFAULT_MATCH_DELTA",
    "MAX_PRECISION",
    "NAN_NAME",
    # Config
    "NumConfig",
    "NumKind",
    "DEFAULT_NUM_CONFIG",
    # Exceptions
    "NumError",
    "UnsupportedRepresentationError",
]
