"""
Contract Validation Module

Модуль для валидации JSON контрактов арифметических запросов и результатов.
"""

from .validators import (
    ArithmeticRequestValidator,
    ArithmeticResultValidator,
    ContractValidator,
    SchemaLoader,
    validate_arithmetic_request,
    validate_arithmetic_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ArithmeticRequestValidator",
    "ArithmeticResultValidator",
    # Functions
    "validate_arithmetic_request",
    "validate_arithmetic_result",
]
