"""
Domain models and value objects.

Contains the JSON-facing request/result models for Natural arithmetic.
"""

from src.core.domain.arithmetic import ArithmeticRequest, ArithmeticResult, Operation

__all__ = [
    "Operation",
    "ArithmeticRequest",
    "ArithmeticResult",
]
