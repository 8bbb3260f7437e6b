"""
Domain models and value objects.

Contains request/result models for the totals reduction.
"""

from src.core.domain.totals import Number, TotalRequest, TotalResult

__all__ = [
    "Number",
    "TotalRequest",
    "TotalResult",
]
