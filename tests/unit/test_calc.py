"""
Тесты для Calc — парный примитив сложения

Примитив не переопределяет нативную семантику сложения:
int остаётся int, float округляется по IEEE 754, NaN/Inf распространяются.
"""

import math

from src.core.math import calc


class TestSum:
    """Тесты calc.sum."""

    def test_integers(self):
        """int + int → int."""
        result = calc.sum(1, 2)
        assert result == 3
        assert isinstance(result, int)

    def test_mixed_int_float(self):
        """int + float → float."""
        result = calc.sum(0, 1.5)
        assert result == 1.5
        assert isinstance(result, float)

    def test_negative(self):
        assert calc.sum(-5, 3) == -2

    def test_float_rounding_is_native(self):
        """Округление float не корректируется."""
        assert calc.sum(0.1, 0.2) == 0.1 + 0.2
        assert calc.sum(0.1, 0.2) != 0.3

    def test_big_integers_do_not_overflow(self):
        big = 10**30
        assert calc.sum(big, big) == 2 * 10**30

    def test_nan_propagates(self):
        assert math.isnan(calc.sum(1.0, float("nan")))

    def test_inf_propagates(self):
        assert calc.sum(1.0, float("inf")) == float("inf")
        assert math.isnan(calc.sum(float("inf"), float("-inf")))
