"""
Core math modules

Парный примитив сложения и редукция последовательностей в итог.
"""

# Summation primitive
from src.core.math import calc

# Totals
from src.core.math.calculator import (
    INITIAL_ACCUMULATOR,
    SumFunction,
    Totalizer,
    running_totals,
    total,
)

__all__ = [
    # Summation primitive
    "calc",
    # Totals
    "INITIAL_ACCUMULATOR",
    "SumFunction",
    "Totalizer",
    "running_totals",
    "total",
]
