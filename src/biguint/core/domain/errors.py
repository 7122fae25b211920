"""
Errors — иерархия исключений движка BigUInt

Все ошибки движка наследуются от BigUIntError, чтобы вызывающий код мог
перехватывать их одним except. Ошибки формы аргументов (отрицательные int,
неверные типы) остаются стандартными ValueError/TypeError.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна операция не оборачивает и не усекает результат молча
2. Каждая ошибка сообщается через исключение, а не через неверное значение
"""


class BigUIntError(Exception):
    """Базовое исключение движка беззнаковых целых произвольной точности."""

    pass


class UnderflowError(BigUIntError):
    """
    Вычитание дало бы отрицательный беззнаковый результат (b > a).

    Содержимое dest после ошибки не специфицировано: вызывающий код
    не должен на него полагаться.
    """

    pass


class ShiftOverflowError(BigUIntError, OverflowError):
    """Величина сдвига превышает поддерживаемый максимум (MAX_SHIFT_BITS)."""

    pass


class AllocationFailure(BigUIntError, MemoryError):
    """
    Аллокатор не смог удовлетворить запрос на рост буфера.

    Фатально для текущей операции, не повторяется внутри движка.
    Предыдущее состояние значения остаётся валидным.
    """

    pass


class UseAfterReleaseError(BigUIntError):
    """Обращение к значению, арена которого уже освобождена."""

    pass
