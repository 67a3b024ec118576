"""
Arithmetic — Модели запроса и результата арифметической операции

Immutable Pydantic модели для обмена операциями над Natural в JSON.
Соответствуют схемам src/core/contracts/schema/arithmetic_request.json и
src/core/contracts/schema/arithmetic_result.json.

Операнды хранятся как десятичные строки и проверяются парсером Natural:
InvalidDigit/EmptyNumber превращаются в pydantic ValidationError.
Арифметические ошибки (Underflow, DivisionByZero) возникают при evaluate()
и пробрасываются вызывающему коду.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.core.math.natural import ArithmeticConfig, Natural


# =============================================================================
# ENUMS
# =============================================================================


class Operation(str, Enum):
    """Бинарная операция над Natural"""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    REMAINDER = "remainder"


# =============================================================================
# MODELS
# =============================================================================


class ArithmeticResult(BaseModel):
    """Результат вычисления: операнды и результат как десятичные строки."""

    operation: Operation = Field(..., description="Выполненная операция")
    left: str = Field(..., min_length=1, description="Левый операнд")
    right: str = Field(..., min_length=1, description="Правый операнд")
    result: str = Field(..., min_length=1, description="Результат операции")

    model_config = {"frozen": True}

    def result_natural(self) -> Natural:
        return Natural.parse(self.result)


class ArithmeticRequest(BaseModel):
    """
    Запрос на бинарную операцию над двумя Natural.

    Immutable модель (frozen=True). Операнды валидируются Natural.parse,
    поэтому "007" допустим (ведущие нули сохраняются), а "" и "-1" — нет.
    """

    operation: Operation = Field(..., description="Операция (add/subtract/multiply/divide/remainder)")
    left: str = Field(..., description="Левый операнд, десятичная строка")
    right: str = Field(..., description="Правый операнд, десятичная строка")

    model_config = {"frozen": True}

    @field_validator("left", "right")
    @classmethod
    def validate_operand(cls, v: str) -> str:
        """Операнд должен разбираться как Natural."""
        Natural.parse(v)
        return v

    def left_natural(self) -> Natural:
        return Natural.parse(self.left)

    def right_natural(self) -> Natural:
        return Natural.parse(self.right)

    def evaluate(self, config: Optional[ArithmeticConfig] = None) -> ArithmeticResult:
        """
        Вычисление операции.

        Args:
            config: Конфигурация арифметики (стратегия деления)

        Returns:
            ArithmeticResult с результатом в виде десятичной строки

        Raises:
            Underflow: SUBTRACT при left < right
            DivisionByZero: DIVIDE/REMAINDER при right == 0
        """
        a = self.left_natural()
        b = self.right_natural()

        if self.operation == Operation.ADD:
            value = a.add(b)
        elif self.operation == Operation.SUBTRACT:
            value = a.subtract(b)
        elif self.operation == Operation.MULTIPLY:
            value = a.multiply(b)
        elif self.operation == Operation.DIVIDE:
            value = a.divide(b, config)
        else:
            value = a.remainder(b, config)

        return ArithmeticResult(
            operation=self.operation,
            left=self.left,
            right=self.right,
            result=value.format(),
        )
