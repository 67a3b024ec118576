"""
Digit — Single Digit Decimal Arithmetic

Элементарный тип одной десятичной цифры (0–9) и примитивы, которые
выполняются в одной позиции числа:
- Сложение двух цифр с входным/выходным переносом (carry)
- Умножение двух цифр с входным/выходным переносом-цифрой
- Вычитание двух цифр с флагом заёма (borrow)
- Парсинг из символа/байта и рендеринг в символ

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значение Digit всегда в [0, 9] (закрытое перечисление)
2. a + b + carry_in ≤ 19 → carry_out ∈ {False, True}
3. a * b + carry_in ≤ 90 → carry_out ≤ 9, всегда представим как Digit
4. Все примитивы тотальны: ни одна комбинация цифр не приводит к ошибке
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from src.core.math.errors import InvalidDigit

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления
BASE: Final[int] = 10

# Максимум a + b + carry_in до редукции (9 + 9 + 1)
MAX_CARRY_SUM_TOTAL: Final[int] = 19

# Максимум a * b + carry_in до редукции (9 * 9 + 9)
MAX_CARRY_PRODUCT_TOTAL: Final[int] = 90

_DIGIT_CHARS: Final[str] = "0123456789"


# =============================================================================
# DIGIT
# =============================================================================


class Digit(int, Enum):
    """
    Одна десятичная цифра.

    Порядок совпадает с числовым (int mixin), поэтому Digit.ZERO < Digit.ONE.
    Новые значения создаются только через from_char/from_byte, которые
    проверяют диапазон.
    """

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9

    @classmethod
    def from_char(cls, char: str) -> "Digit":
        """
        Парсинг одного символа '0'..'9'.

        Args:
            char: Один символ

        Returns:
            Соответствующая цифра

        Raises:
            InvalidDigit: Если это не ровно один ASCII-символ цифры

        Examples:
            >>> Digit.from_char("7")
            <Digit.SEVEN: 7>
        """
        if not isinstance(char, str) or len(char) != 1 or char not in _DIGIT_CHARS:
            raise InvalidDigit(f"not a digit: {char!r}")
        return cls(ord(char) - ord("0"))

    @classmethod
    def from_byte(cls, value: int) -> "Digit":
        """
        Конверсия байта 0..9 в цифру.

        Raises:
            InvalidDigit: Если value не целое в диапазоне 0..9
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDigit(f"not a digit: {value!r}")
        if not 0 <= value < BASE:
            raise InvalidDigit(f"not a digit: {value!r}")
        return cls(value)

    def to_char(self) -> str:
        """Рендер цифры в один десятичный символ."""
        return _DIGIT_CHARS[self.value]

    def __str__(self) -> str:
        return self.to_char()


# =============================================================================
# РЕЗУЛЬТАТЫ ПРИМИТИВОВ
# =============================================================================


@dataclass(frozen=True)
class CarrySum:
    """Результат a + b + carry_in: выходной перенос и цифра суммы."""

    carry_out: bool
    sum: Digit


@dataclass(frozen=True)
class CarryProduct:
    """Результат a * b + carry_in: перенос-цифра и цифра произведения."""

    carry_out: Digit
    product: Digit


@dataclass(frozen=True)
class DigitDifference:
    """
    Результат a - b в одной позиции.

    borrow=True означает, что из следующего разряда занят десяток
    и difference = a + 10 - b.
    """

    borrow: bool
    difference: Digit


# =============================================================================
# ПРИМИТИВЫ
# =============================================================================


def add_two(carry_in: bool, a: Digit, b: Digit) -> CarrySum:
    """
    Сложение двух цифр с входным переносом.

    Args:
        carry_in: Перенос из младшего разряда
        a: Первая цифра
        b: Вторая цифра

    Returns:
        CarrySum(carry_out, sum), где sum = (a + b + carry_in) mod 10

    Examples:
        >>> add_two(False, Digit.NINE, Digit.THREE)
        CarrySum(carry_out=True, sum=<Digit.TWO: 2>)
        >>> add_two(False, Digit.TWO, Digit.THREE)
        CarrySum(carry_out=False, sum=<Digit.FIVE: 5>)
    """
    total = a.value + b.value + (1 if carry_in else 0)
    # total <= MAX_CARRY_SUM_TOTAL, поэтому перенос не больше единицы
    if total < BASE:
        return CarrySum(carry_out=False, sum=Digit(total))
    return CarrySum(carry_out=True, sum=Digit(total - BASE))


def mul_two(carry_in: Digit, a: Digit, b: Digit) -> CarryProduct:
    """
    Умножение двух цифр с входным переносом-цифрой.

    Args:
        carry_in: Перенос из младшего разряда (цифра)
        a: Первая цифра
        b: Вторая цифра

    Returns:
        CarryProduct(carry_out, product):
            - carry_out = (a * b + carry_in) // 10
            - product = (a * b + carry_in) mod 10

    Examples:
        >>> mul_two(Digit.ZERO, Digit.SIX, Digit.SEVEN)
        CarryProduct(carry_out=<Digit.FOUR: 4>, product=<Digit.TWO: 2>)
    """
    total = a.value * b.value + carry_in.value
    # total <= MAX_CARRY_PRODUCT_TOTAL, поэтому carry_out <= 9
    carry, product = divmod(total, BASE)
    return CarryProduct(carry_out=Digit(carry), product=Digit(product))


def subtract_two(a: Digit, b: Digit) -> DigitDifference:
    """
    Вычитание двух цифр без входного заёма.

    Если a < b, разность вычисляется после заёма десятка из старшего
    разряда; сам заём выполняет вызывающий код (Natural.subtract).

    Examples:
        >>> subtract_two(Digit.SEVEN, Digit.THREE)
        DigitDifference(borrow=False, difference=<Digit.FOUR: 4>)
        >>> subtract_two(Digit.THREE, Digit.SEVEN)
        DigitDifference(borrow=True, difference=<Digit.SIX: 6>)
    """
    if a >= b:
        return DigitDifference(borrow=False, difference=Digit(a.value - b.value))
    return DigitDifference(borrow=True, difference=Digit(a.value + BASE - b.value))
