"""
Исключения числового слоя (Num).

Все ошибки пакета наследуются от NumError.
"""


class NumError(Exception):
    """Базовое исключение числового слоя."""


class UnsupportedRepresentationError(NumError):
    """
    Значение не имеет представления в запрошенном типе.

    Возникает при попытке получить целое (int/long) из NaN. Это ошибка
    вызывающего кода, а не транзиентное состояние: не перехватывается
    внутри пакета и не ретраится.
    """
