"""
Core math modules

Десятичная арифметика произвольной точности на поразрядных примитивах.
"""

# Errors
from src.core.math.errors import (
    DivisionByZero,
    EmptyNumber,
    InvalidDigit,
    NaturalError,
    Underflow,
)

# Digit primitives
from src.core.math.digit import (
    BASE,
    MAX_CARRY_PRODUCT_TOTAL,
    MAX_CARRY_SUM_TOTAL,
    CarryProduct,
    CarrySum,
    Digit,
    DigitDifference,
    add_two,
    mul_two,
    subtract_two,
)

# Natural numbers
from src.core.math.natural import (
    DEFAULT_ARITHMETIC_CONFIG,
    ArithmeticConfig,
    DivisionStrategy,
    Natural,
)

__all__ = [
    # Errors
    "NaturalError",
    "InvalidDigit",
    "EmptyNumber",
    "Underflow",
    "DivisionByZero",
    # Digit — Constants
    "BASE",
    "MAX_CARRY_SUM_TOTAL",
    "MAX_CARRY_PRODUCT_TOTAL",
    # Digit — Types
    "Digit",
    "CarrySum",
    "CarryProduct",
    "DigitDifference",
    # Digit — Functions
    "add_two",
    "mul_two",
    "subtract_two",
    # Natural — Config
    "DEFAULT_ARITHMETIC_CONFIG",
    "ArithmeticConfig",
    "DivisionStrategy",
    # Natural — Types
    "Natural",
]
