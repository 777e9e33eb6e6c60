"""
Bigint — таксономия ошибок

Ошибки разбора не выбрасываются, а возвращаются как значение
(BigintResult.error). Исключение здесь одно: MagnitudeInvariantViolation,
сигнал внутреннего дефекта, а не пользовательской ошибки.
"""

from enum import Enum
from typing import Final


# =============================================================================
# ENUMS
# =============================================================================


class BigintError(str, Enum):
    """
    Вид ошибки, прикреплённой к результату.

    - NO_ERROR: значение валидно
    - UNEXPECTED_CHARACTER: во входной строке есть не-цифра (кроме ведущего "-")
    - NO_DIGITS_PROVIDED: строка состоит только из знака "-"
    - EMPTY_STRING: пустая строка
    """

    NO_ERROR = "no_error"
    UNEXPECTED_CHARACTER = "unexpected_character"
    NO_DIGITS_PROVIDED = "no_digits_provided"
    EMPTY_STRING = "empty_string"

    @property
    def message(self) -> str:
        """Человекочитаемое описание ошибки"""
        return ERROR_MESSAGES.get(self, UNKNOWN_ERROR_MESSAGE)


ERROR_MESSAGES: Final[dict[BigintError, str]] = {
    BigintError.NO_ERROR: "No error",
    BigintError.UNEXPECTED_CHARACTER: "Unexpected character",
    BigintError.NO_DIGITS_PROVIDED: "No digits provided",
    BigintError.EMPTY_STRING: "Empty input string",
}

UNKNOWN_ERROR_MESSAGE: Final[str] = "Unknown error"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MagnitudeInvariantViolation(Exception):
    """
    Нарушение контракта Comparator/Subtractor.

    Возникает, если после вычитания |A| - |B| при |A| >= |B| остался заём
    из старшего разряда. При корректных инвариантах нормализации это
    недостижимо; появление исключения означает дефект реализации.
    """

    pass
