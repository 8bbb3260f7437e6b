"""
Calc — Pairwise Summation Primitive

Базовая бинарная операция сложения, используемая редуктором total().

Операция намеренно ничего не проверяет: семантика целиком определяется
нативным сложением Python (int + int → int, int + float → float,
NaN/Inf распространяются по правилам IEEE 754).
"""

__all__ = ["sum"]


def sum(a: float, b: float) -> float:  # noqa: A001
    """
    Сумма двух чисел.

    Args:
        a: Первый операнд (обычно аккумулятор)
        b: Второй операнд (очередное значение)

    Returns:
        a + b

    Examples:
        >>> sum(1, 2)
        3
        >>> sum(0.5, 0.25)
        0.75
    """
    return a + b
