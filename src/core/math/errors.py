"""
Errors — Иерархия исключений decimal-арифметики

Все ошибки ядра наследуются от NaturalError и дополнительно от
подходящего встроенного исключения, чтобы вызывающий код мог
перехватывать их привычным способом (ValueError, ZeroDivisionError и т.д.).

Примитивы Digit тотальны и никогда не бросают исключений:
ошибки возникают только на границе (parse) и в операциях Natural.
"""


class NaturalError(Exception):
    """Базовое исключение для всех ошибок арифметики Natural/Digit."""

    pass


class InvalidDigit(NaturalError, ValueError):
    """Символ или байт вне диапазона 0..9 передан в парсер цифры."""

    pass


class EmptyNumber(NaturalError, ValueError):
    """Пустая строка (или пустая последовательность цифр) передана в парсер Natural."""

    pass


class Underflow(NaturalError, ArithmeticError):
    """
    Вычитание с уменьшаемым меньше вычитаемого.

    Обнаруживается, когда поиск заёма (borrow) проходит все разряды
    рабочей копии и не находит ненулевой цифры.
    """

    pass


class DivisionByZero(NaturalError, ZeroDivisionError):
    """Делитель равен нулю."""

    pass
