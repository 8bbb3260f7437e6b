"""
Totals — Модели запроса и результата суммирования

Immutable Pydantic модели для Totalizer.evaluate():
- TotalRequest: значения для свёртки
- TotalResult: итог, число вызовов примитива и траектория аккумулятора

Контракты: contracts/schema/total_request.json, total_result.json
"""

import math
from typing import Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, model_validator

Number = Union[int, float]

# Только int/float: строки и bool не приводятся к числам
StrictNumber = Union[StrictInt, StrictFloat]


# =============================================================================
# REQUEST
# =============================================================================


class TotalRequest(BaseModel):
    """
    Запрос на суммирование.

    Порядок values значим: он определяет порядок парных сложений.
    """

    values: list[StrictNumber] = Field(
        default_factory=list, description="Значения в порядке сложения"
    )

    model_config = {"frozen": True}  # Immutable


# =============================================================================
# RESULT
# =============================================================================


class TotalResult(BaseModel):
    """
    Результат суммирования.

    running_totals = [0, a1, ..., an], где ai — аккумулятор после i-го
    вызова примитива; len(running_totals) == count + 1.

    NaN/Inf сериализуются в JSON как NaN/Infinity, чтобы результат
    читался обратно через model_validate_json.
    """

    total: Number = Field(..., description="Финальный аккумулятор")
    count: int = Field(..., ge=0, description="Число сложенных значений (= вызовов примитива)")
    running_totals: list[Number] = Field(
        ..., min_length=1, description="Траектория аккумулятора, начиная с 0"
    )

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    @model_validator(mode="after")
    def validate_trajectory(self) -> "TotalResult":
        """Траектория согласована с count и total"""
        if len(self.running_totals) != self.count + 1:
            raise ValueError(
                f"running_totals length {len(self.running_totals)} must equal count + 1 = {self.count + 1}"
            )
        if self.running_totals[0] != 0:
            raise ValueError(f"running_totals must start at 0, got {self.running_totals[0]}")
        last = self.running_totals[-1]
        both_nan = (
            isinstance(last, float) and isinstance(self.total, float)
            and math.isnan(last) and math.isnan(self.total)
        )
        if last != self.total and not both_nan:
            raise ValueError(f"running_totals[-1] {last} must equal total {self.total}")
        return self

    @property
    def is_empty(self) -> bool:
        """Пустой вход (примитив не вызывался)"""
        return self.count == 0
