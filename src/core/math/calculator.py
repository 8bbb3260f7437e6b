"""
Calculator — Left-Fold Totals

Редукция последовательности чисел в итоговую сумму через парный
примитив сложения (src.core.math.calc.sum).

Аккумулятор стартует с 0, значения складываются строго слева направо:
    total(v0, ..., vn-1) = sum(...sum(sum(0, v0), v1)..., vn-1)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Примитив вызывается ровно один раз на каждое значение, включая
   первое (sum(0, v0) не сокращается до v0)
2. Пустой вход → 0 без единого вызова примитива
3. Порядок вызовов = порядок значений; первый аргумент всегда текущий
   аккумулятор, второй — очередное значение
4. Значения не проверяются; ошибки примитива пробрасываются без изменений

Примитив подменяем: его можно передать явно (sum_fn), а по умолчанию он
берётся из модуля calc в момент вызова.
"""

import logging
from typing import Callable, Final, Iterable, Optional

from src.core.domain.totals import TotalRequest, TotalResult
from src.core.math import calc

logger = logging.getLogger(__name__)

SumFunction = Callable[[float, float], float]

# Начальное значение аккумулятора
INITIAL_ACCUMULATOR: Final[int] = 0


# =============================================================================
# REDUCTION
# =============================================================================


def _resolve(sum_fn: Optional[SumFunction]) -> SumFunction:
    """Подменный примитив, если передан, иначе текущий calc.sum."""
    if sum_fn is not None:
        return sum_fn
    return calc.sum


def _fold(
    values: Iterable[float],
    sum_fn: SumFunction,
    trajectory: Optional[list] = None,
) -> tuple[float, int]:
    """Левая свёртка: (финальный аккумулятор, число вызовов примитива)."""
    accumulator = INITIAL_ACCUMULATOR
    count = 0

    for value in values:
        accumulator = sum_fn(accumulator, value)
        count += 1
        if trajectory is not None:
            trajectory.append(accumulator)

    return accumulator, count


def total(*values: float, sum_fn: Optional[SumFunction] = None) -> float:
    """
    Итоговая сумма значений (левая свёртка от 0).

    Args:
        *values: Значения в порядке сложения (может быть пусто)
        sum_fn: Подменный примитив сложения (default: calc.sum)

    Returns:
        Финальный аккумулятор

    Examples:
        >>> total(1, 2, 3)
        6
        >>> total()
        0
        >>> total(1, 2, 3, sum_fn=lambda a, b: 2)
        2
    """
    result, count = _fold(values, _resolve(sum_fn))
    logger.debug("total: reduced %d values to %r", count, result)
    return result


def running_totals(*values: float, sum_fn: Optional[SumFunction] = None) -> list[float]:
    """
    Траектория аккумулятора: [0, a1, ..., an].

    Примитив вызывается ровно так же, как в total(); последний элемент
    траектории равен total(*values).

    Examples:
        >>> running_totals(1, 2, 3)
        [0, 1, 3, 6]
        >>> running_totals()
        [0]
    """
    trajectory = [INITIAL_ACCUMULATOR]
    _fold(values, _resolve(sum_fn), trajectory=trajectory)
    return trajectory


# =============================================================================
# TOTALIZER
# =============================================================================


class Totalizer:
    """Редуктор с привязанным примитивом сложения.

    Принимает доменные TotalRequest и возвращает TotalResult.
    """

    def __init__(self, sum_fn: Optional[SumFunction] = None):
        self._sum_fn = sum_fn

    def total(self, values: Iterable[float]) -> float:
        """Свёртка произвольного iterable."""
        result, count = _fold(values, _resolve(self._sum_fn))
        logger.debug("Totalizer.total: reduced %d values to %r", count, result)
        return result

    def evaluate(self, request: TotalRequest) -> TotalResult:
        """Вычисление TotalResult (итог, число вызовов, траектория) по запросу."""
        trajectory = [INITIAL_ACCUMULATOR]
        result, count = _fold(
            request.values,
            _resolve(self._sum_fn),
            trajectory=trajectory,
        )
        logger.debug("Totalizer.evaluate: reduced %d values to %r", count, result)
        return TotalResult(total=result, count=count, running_totals=trajectory)
