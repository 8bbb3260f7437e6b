"""
Contract Validation Module

Валидация JSON контрактов запроса и результата суммирования.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    TotalRequestValidator,
    TotalResultValidator,
    validate_total_request,
    validate_total_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TotalRequestValidator",
    "TotalResultValidator",
    # Functions
    "validate_total_request",
    "validate_total_result",
]
