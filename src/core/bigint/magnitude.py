"""
Magnitude — беззнаковые алгоритмы над последовательностями цифр

Модуль работает только с модулями чисел: кортежами цифр 0-9, младший
разряд первым. Знак здесь не хранится и не учитывается; его расставляет
вызывающая сторона (Bigint).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат каждой функции нормализован (нет старших нулей)
2. Ноль представлен пустым кортежем
3. Вычитание никогда не оставляет заём после старшего разряда
"""

import logging
from typing import Final

from src.core.bigint.constants import DIGIT_BASE
from src.core.bigint.errors import MagnitudeInvariantViolation

logger = logging.getLogger(__name__)

Digits = tuple[int, ...]

ZERO_DIGITS: Final[Digits] = ()


# =============================================================================
# NORMALIZER
# =============================================================================


def normalize_digits(digits: Digits) -> Digits:
    """
    Удаление незначащих старших нулей.

    Args:
        digits: Цифры, младший разряд первым (старшие нули допустимы)

    Returns:
        Кортеж без старших нулей; () для нуля

    Examples:
        >>> normalize_digits((7, 0, 0))
        (7,)
        >>> normalize_digits((0, 0))
        ()
    """
    end = len(digits)
    while end > 0 and digits[end - 1] == 0:
        end -= 1
    return tuple(digits[:end])


def digit_at(digits: Digits, position: int) -> int:
    """Цифра в позиции position (от младшего разряда); 0 за пределами"""
    if 0 <= position < len(digits):
        return digits[position]
    return 0


# =============================================================================
# COMPARATOR
# =============================================================================


def magnitude_less(a: Digits, b: Digits) -> bool:
    """
    Строгое сравнение модулей |a| < |b|.

    Оба операнда должны быть нормализованы: тогда длина является точной
    мерой порядка величины. При равной длине решает первая различающаяся
    цифра, начиная со старшего разряда.

    Args:
        a: Левый операнд (нормализован)
        b: Правый операнд (нормализован)

    Returns:
        True если |a| < |b|

    Examples:
        >>> magnitude_less((9, 9), (0, 0, 1))
        True
        >>> magnitude_less((0, 0, 1), (9, 9))
        False
        >>> magnitude_less((1, 2), (1, 2))
        False
    """
    if len(a) != len(b):
        return len(a) < len(b)

    for position in range(len(a) - 1, -1, -1):
        if a[position] != b[position]:
            return a[position] < b[position]

    return False


# =============================================================================
# MAGNITUDE ADDER
# =============================================================================


def add_magnitudes(a: Digits, b: Digits) -> Digits:
    """
    Сумма модулей |a| + |b| с переносом.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое

    Returns:
        Нормализованные цифры суммы
    """
    result: list[int] = []
    carry = 0

    for position in range(max(len(a), len(b))):
        total = digit_at(a, position) + digit_at(b, position) + carry
        carry = 1 if total >= DIGIT_BASE else 0
        result.append(total % DIGIT_BASE)

    # Перенос из старшего разряда даёт новую цифру
    if carry:
        result.append(carry)

    return normalize_digits(tuple(result))


# =============================================================================
# MAGNITUDE SUBTRACTOR
# =============================================================================


def _subtract_ordered(minuend: Digits, subtrahend: Digits) -> Digits:
    """
    Разность модулей при условии |minuend| >= |subtrahend|.

    Raises:
        MagnitudeInvariantViolation: если после старшего разряда остался заём
    """
    result: list[int] = []
    borrow = 0

    for position in range(max(len(minuend), len(subtrahend))):
        value = digit_at(minuend, position) - digit_at(subtrahend, position) - borrow
        if value < 0:
            result.append(value + DIGIT_BASE)
            borrow = 1
        else:
            result.append(value)
            borrow = 0

    if borrow:
        logger.error(
            "Borrow left after subtraction: minuend_len=%d subtrahend_len=%d",
            len(minuend),
            len(subtrahend),
        )
        raise MagnitudeInvariantViolation(
            f"Subtraction underflow: minuend of {len(minuend)} digits is smaller "
            f"than subtrahend of {len(subtrahend)} digits despite comparator check"
        )

    return normalize_digits(tuple(result))


def subtract_magnitudes(a: Digits, b: Digits) -> tuple[Digits, bool]:
    """
    Разность модулей |a| - |b|.

    Сравнение выполняется один раз: если |a| < |b|, вычисляется |b| - |a|
    и результат помечается как отрицательный. Рекурсии нет.

    Args:
        a: Уменьшаемое
        b: Вычитаемое

    Returns:
        (digits, negative):
            - digits: нормализованный модуль разности
            - negative: True если |a| < |b| (знак для вызывающей стороны)

    Examples:
        >>> subtract_magnitudes((0, 0, 1), (1,))
        ((9, 9), False)
        >>> subtract_magnitudes((5,), (0, 1))
        ((5,), True)
    """
    if magnitude_less(a, b):
        return _subtract_ordered(b, a), True

    return _subtract_ordered(a, b), False
