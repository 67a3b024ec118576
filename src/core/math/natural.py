"""
Natural — Arbitrary-Precision Natural Numbers на десятичных цифрах

Неотрицательное целое произвольной длины, хранимое как последовательность
Digit от младшего разряда к старшему (индекс = степень десяти).
Все операции сводятся к поразрядным примитивам из digit.py с явным
протаскиванием переноса (carry) или заёма (borrow) через позиции.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Последовательность цифр никогда не пуста: ноль = [0]
2. Каноническая форма не навязывается: сложение не обрезает ведущие нули,
   вычитание и умножение обрезают их до одной цифры
3. Сравнение и равенство по значению: ведущие нули игнорируются логически,
   хранилище при сравнении не изменяется
4. Вычитание при a < b → Underflow, деление на ноль → DivisionByZero

ДЕЛЕНИЕ:
    По умолчанию используется повторное вычитание: стоимость пропорциональна значению
    частного, а не числу цифр. LONG_DIVISION даёт те же результаты и ошибки,
    но стоит O(число цифр) итераций; выбирается явно через ArithmeticConfig.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from src.core.math.digit import BASE, Digit, add_two, mul_two, subtract_two
from src.core.math.errors import DivisionByZero, EmptyNumber, Underflow

logger = logging.getLogger(__name__)


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


class DivisionStrategy(str, Enum):
    """Алгоритм целочисленного деления."""

    REPEATED_SUBTRACTION = "repeated_subtraction"
    LONG_DIVISION = "long_division"


@dataclass(frozen=True)
class ArithmeticConfig:
    """Конфигурация арифметики Natural.

    division_strategy:
    - REPEATED_SUBTRACTION: считает, сколько раз делитель укладывается
      в делимое (стоимость ~ значению частного)
    - LONG_DIVISION: деление столбиком, по одной цифре частного за шаг
    """

    division_strategy: DivisionStrategy = DivisionStrategy.REPEATED_SUBTRACTION


DEFAULT_ARITHMETIC_CONFIG = ArithmeticConfig()


# =============================================================================
# NATURAL
# =============================================================================


class Natural:
    """
    Натуральное число (включая ноль) произвольной точности.

    Хранилище: список Digit, index 0 = разряд единиц. Экземпляр
    принадлежит владельцу эксклюзивно: increment/add_assign/set_coefficient
    меняют только собственную последовательность цифр.
    """

    def __init__(self, digits: Iterable[Digit]):
        """
        Args:
            digits: Цифры от младшего разряда к старшему (Digit или int 0..9)

        Raises:
            EmptyNumber: Если последовательность пуста
            InvalidDigit: Если элемент не является цифрой 0..9
        """
        stored = [d if isinstance(d, Digit) else Digit.from_byte(d) for d in digits]
        if not stored:
            raise EmptyNumber("a natural number needs at least one digit")
        self._digits = stored

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Natural":
        """
        Парсинг десятичной строки (старший разряд первым).

        Ведущие нули сохраняются: "007" хранится как три цифры.

        Raises:
            EmptyNumber: Если строка пуста
            InvalidDigit: Если встречен символ вне '0'..'9'

        Examples:
            >>> str(Natural.parse("123"))
            '123'
        """
        if text == "":
            raise EmptyNumber("cannot parse a natural number from an empty string")
        digits = [Digit.from_char(c) for c in text]
        digits.reverse()
        return cls(digits)

    @classmethod
    def zero(cls) -> "Natural":
        return cls([Digit.ZERO])

    @classmethod
    def one(cls) -> "Natural":
        return cls([Digit.ONE])

    @classmethod
    def from_int(cls, value: int) -> "Natural":
        """
        Конверсия неотрицательного int в Natural.

        Цифры снимаются через divmod по основанию, без строкового
        представления, поэтому длина числа не ограничена.
        """
        if value < 0:
            raise ValueError(f"natural numbers cannot be negative: {value}")
        digits = []
        while True:
            value, digit = divmod(value, BASE)
            digits.append(Digit(digit))
            if value == 0:
                return cls(digits)

    def copy(self) -> "Natural":
        return Natural(self._digits)

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    @property
    def digits(self) -> Tuple[Digit, ...]:
        """Снимок хранимых цифр (от младшего разряда к старшему)."""
        return tuple(self._digits)

    def degree(self) -> int:
        """Старший индекс хранилища: len(digits) - 1."""
        return len(self._digits) - 1

    def significant_degree(self) -> int:
        """Индекс старшей ненулевой цифры (0 для нуля)."""
        for power in range(self.degree(), 0, -1):
            if self._digits[power] != Digit.ZERO:
                return power
        return 0

    def coefficient(self, power: int) -> Digit:
        """
        Цифра при 10^power с виртуальным расширением нулями.

        Raises:
            IndexError: Если power отрицательна
        """
        if power < 0:
            raise IndexError(f"power must be non-negative, got {power}")
        if power > self.degree():
            return Digit.ZERO
        return self._digits[power]

    def set_coefficient(self, power: int, digit: Digit) -> None:
        """
        Запись цифры при 10^power.

        Если power > degree(), хранилище сначала дополняется нулями.
        """
        if power < 0:
            raise IndexError(f"power must be non-negative, got {power}")
        if not isinstance(digit, Digit):
            digit = Digit.from_byte(digit)
        if power > self.degree():
            self._digits.extend([Digit.ZERO] * (power - self.degree()))
        self._digits[power] = digit

    def is_zero(self) -> bool:
        return all(d == Digit.ZERO for d in self._digits)

    def is_canonical(self) -> bool:
        """True, если нет незначащих ведущих нулей."""
        return self.significant_degree() == self.degree()

    def canonical(self) -> "Natural":
        """Копия без незначащих ведущих нулей."""
        return Natural(self._digits[: self.significant_degree() + 1])

    def format(self) -> str:
        """Рендер от старшего разряда к младшему; длина = degree() + 1."""
        return "".join(d.to_char() for d in reversed(self._digits))

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Natural('{self.format()}')"

    def __int__(self) -> int:
        # Схема Горнера от старшего разряда
        value = 0
        for digit in reversed(self._digits):
            value = value * BASE + digit.value
        return value

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: "Natural") -> int:
        """
        Сравнение по значению.

        Сначала по significant_degree, затем поразрядно от старшей позиции
        к младшей; первая отличающаяся позиция решает.

        Returns:
            -1 если self < other, 0 если равны, 1 если self > other
        """
        self_degree = self.significant_degree()
        other_degree = other.significant_degree()
        if self_degree != other_degree:
            return -1 if self_degree < other_degree else 1

        for power in range(self_degree, -1, -1):
            a = self.coefficient(power)
            b = other.coefficient(power)
            if a != b:
                return -1 if a < b else 1
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Natural):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: "Natural") -> bool:
        if not isinstance(other, Natural):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "Natural") -> bool:
        if not isinstance(other, Natural):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "Natural") -> bool:
        if not isinstance(other, Natural):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "Natural") -> bool:
        if not isinstance(other, Natural):
            return NotImplemented
        return self.compare(other) >= 0

    # Mutable value type (increment/add_assign)
    __hash__ = None

    # -------------------------------------------------------------------------
    # Сложение
    # -------------------------------------------------------------------------

    def add(self, other: "Natural") -> "Natural":
        """
        Сложение столбиком.

        Результат имеет max(degree) + 1 цифр, плюс одна при финальном
        переносе. Ведущие нули операндов наследуются, но не обрезаются.
        """
        n = max(self.degree(), other.degree()) + 1
        digits = []
        carry = False
        for power in range(n):
            cs = add_two(carry, self.coefficient(power), other.coefficient(power))
            digits.append(cs.sum)
            carry = cs.carry_out

        if carry:
            digits.append(Digit.ONE)

        return Natural(digits)

    def add_assign(self, other: "Natural") -> None:
        """self ← self + other (in place)."""
        self._digits = self.add(other)._digits

    def increment(self) -> None:
        """self ← self + 1 (in place)."""
        self.add_assign(Natural.one())

    # -------------------------------------------------------------------------
    # Вычитание
    # -------------------------------------------------------------------------

    def subtract(self, other: "Natural") -> "Natural":
        """
        Вычитание столбиком с заёмом через нули.

        Заём выполняется в локальной рабочей копии уменьшаемого: ищется
        ближайшая старшая ненулевая цифра, она уменьшается на единицу,
        а все промежуточные позиции становятся девятками.

        Raises:
            Underflow: Если self < other (заём прошёл все разряды)

        Examples:
            >>> str(Natural.parse("1099511627776") - Natural.parse("1099511626000"))
            '1776'
        """
        n = max(self.degree(), other.degree()) + 1
        work = [self.coefficient(power) for power in range(n)]
        digits = []

        for power in range(n):
            dd = subtract_two(work[power], other.coefficient(power))
            if dd.borrow:
                lender = power + 1
                while lender < n and work[lender] == Digit.ZERO:
                    lender += 1
                if lender == n:
                    logger.debug("Borrow scan exhausted at power %d: %s - %s", power, self, other)
                    raise Underflow(f"cannot subtract {other} from smaller {self}")
                work[lender] = Digit(work[lender].value - 1)
                for between in range(power + 1, lender):
                    work[between] = Digit.NINE
            digits.append(dd.difference)

        return Natural(_strip_leading_zeros(digits))

    # -------------------------------------------------------------------------
    # Умножение
    # -------------------------------------------------------------------------

    def multiply(self, other: "Natural") -> "Natural":
        """
        Умножение столбиком.

        Для каждой цифры a_i строится частичное произведение: i нулей
        (сдвиг) и поразрядные mul_two по цифрам other с переносом-цифрой.
        Частичные произведения суммируются слева направо от zero().
        """
        partials = []
        for i in range(self.degree() + 1):
            a = self.coefficient(i)
            digits = [Digit.ZERO] * i
            carry = Digit.ZERO
            for power in range(other.degree() + 1):
                cp = mul_two(carry, a, other.coefficient(power))
                digits.append(cp.product)
                carry = cp.carry_out
            if carry != Digit.ZERO:
                digits.append(carry)
            partials.append(Natural(digits))

        total = Natural.zero()
        for partial in partials:
            total = total.add(partial)
        return total.canonical()

    # -------------------------------------------------------------------------
    # Деление
    # -------------------------------------------------------------------------

    def divide_with_remainder(
        self, other: "Natural", config: Optional[ArithmeticConfig] = None
    ) -> Tuple["Natural", "Natural"]:
        """
        Целочисленное деление с остатком (усечение).

        Args:
            other: Делитель
            config: Конфигурация арифметики (default: DEFAULT_ARITHMETIC_CONFIG)

        Returns:
            (quotient, remainder): self = quotient * other + remainder,
            remainder < other

        Raises:
            DivisionByZero: Если other равен нулю
        """
        if other.is_zero():
            raise DivisionByZero(f"cannot divide {self} by zero")

        config = config or DEFAULT_ARITHMETIC_CONFIG
        if config.division_strategy == DivisionStrategy.LONG_DIVISION:
            return self._long_division(other)
        return self._repeated_subtraction(other)

    def divide(self, other: "Natural", config: Optional[ArithmeticConfig] = None) -> "Natural":
        """
        Целочисленное частное self // other.

        Examples:
            >>> str(Natural.parse("16").divide(Natural.parse("5")))
            '3'
        """
        quotient, _ = self.divide_with_remainder(other, config)
        return quotient

    def remainder(self, other: "Natural", config: Optional[ArithmeticConfig] = None) -> "Natural":
        """Остаток self mod other."""
        _, remainder = self.divide_with_remainder(other, config)
        return remainder

    def _repeated_subtraction(self, other: "Natural") -> Tuple["Natural", "Natural"]:
        # accumulator == quotient * other на каждом шаге цикла
        quotient = Natural.one()
        accumulator = other.copy()
        steps = 0
        while self >= accumulator:
            quotient.increment()
            accumulator.add_assign(other)
            steps += 1

        logger.debug("Repeated-subtraction division of %s by %s took %d steps", self, other, steps)
        remainder = self.subtract(accumulator.subtract(other))
        return quotient.subtract(Natural.one()), remainder

    def _long_division(self, other: "Natural") -> Tuple["Natural", "Natural"]:
        remainder = Natural.zero()
        quotient_digits = []
        for power in range(self.degree(), -1, -1):
            # remainder = remainder * 10 + a_power
            remainder = Natural([self.coefficient(power)] + list(remainder.canonical().digits))
            count = 0
            while remainder >= other:
                remainder = remainder.subtract(other)
                count += 1
            quotient_digits.append(Digit(count))

        quotient_digits.reverse()
        logger.debug("Long division of %s by %s over %d digits", self, other, self.degree() + 1)
        return Natural(_strip_leading_zeros(quotient_digits)), remainder.canonical()

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: "Natural") -> "Natural":
        if not isinstance(other, Natural):
            return NotImplemented
        return self.add(other)

    def __iadd__(self, other: "Natural") -> "Natural":
        if not isinstance(other, Natural):
            return NotImplemented
        self.add_assign(other)
        return self

    def __sub__(self, other: "Natural") -> "Natural":
        if not isinstance(other, Natural):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: "Natural") -> "Natural":
        if not isinstance(other, Natural):
            return NotImplemented
        return self.multiply(other)

    def __floordiv__(self, other: "Natural") -> "Natural":
        if not isinstance(other, Natural):
            return NotImplemented
        return self.divide(other)

    def __mod__(self, other: "Natural") -> "Natural":
        if not isinstance(other, Natural):
            return NotImplemented
        return self.remainder(other)

    def __divmod__(self, other: "Natural") -> Tuple["Natural", "Natural"]:
        if not isinstance(other, Natural):
            return NotImplemented
        return self.divide_with_remainder(other)


def _strip_leading_zeros(digits: list) -> list:
    """Обрезка старших нулей до одной цифры (список от младшего разряда)."""
    while len(digits) > 1 and digits[-1] == Digit.ZERO:
        digits.pop()
    return digits
