"""
Parser — разбор десятичной строки в цифры и знак

Формат: необязательный ведущий "-", затем одна или более ASCII-цифр.
Незначащие старшие нули допустимы и удаляются нормализацией.
"""

import logging
from typing import NamedTuple, Optional

from src.core.bigint.constants import DECIMAL_DIGITS, SIGN_NEGATIVE
from src.core.bigint.errors import BigintError
from src.core.bigint.magnitude import ZERO_DIGITS, Digits, normalize_digits

logger = logging.getLogger(__name__)


class ParsedNumber(NamedTuple):
    """Результат разбора: цифры (младший разряд первым), знак, ошибка"""

    digits: Digits
    negative: bool
    error: BigintError


def _rejected(error: BigintError, text: str, position: Optional[int] = None) -> ParsedNumber:
    logger.debug("Rejected decimal input %r: %s (position=%s)", text, error.value, position)
    return ParsedNumber(digits=ZERO_DIGITS, negative=False, error=error)


def parse_decimal(text: str) -> ParsedNumber:
    """
    Разбор строки в нормализованные цифры.

    При любой ошибке цифры пусты, а знак положителен, независимо от того,
    что успело разобраться.

    Args:
        text: Строковое представление числа

    Returns:
        ParsedNumber; error == BigintError.NO_ERROR при успехе

    Examples:
        >>> parse_decimal("-120")
        ParsedNumber(digits=(0, 2, 1), negative=True, error=<BigintError.NO_ERROR: 'no_error'>)
        >>> parse_decimal("-0").negative
        False
    """
    if not text:
        return _rejected(BigintError.EMPTY_STRING, text)

    negative = text[0] == SIGN_NEGATIVE
    body = text[1:] if negative else text

    if not body:
        return _rejected(BigintError.NO_DIGITS_PROVIDED, text)

    for index, char in enumerate(body):
        if char not in DECIMAL_DIGITS:
            return _rejected(BigintError.UNEXPECTED_CHARACTER, text, index + int(negative))

    digits = normalize_digits(tuple(int(char) for char in reversed(body)))

    # "-0" и "-000" дают канонический ноль
    if not digits:
        negative = False

    return ParsedNumber(digits=digits, negative=negative, error=BigintError.NO_ERROR)
