"""
Bigint — целые числа произвольной точности в десятичном представлении

Разбор из строки, сложение, вычитание, смена знака, сравнение и обратное
форматирование без ограничений машинного слова.
"""

from src.core.bigint.bigint import Bigint
from src.core.bigint.constants import (
    DECIMAL_DIGITS,
    DIGIT_BASE,
    NAN_STRING,
    NO_DIGIT,
    SIGN_NEGATIVE,
    ZERO_STRING,
)
from src.core.bigint.errors import (
    ERROR_MESSAGES,
    UNKNOWN_ERROR_MESSAGE,
    BigintError,
    MagnitudeInvariantViolation,
)
from src.core.bigint.magnitude import (
    add_magnitudes,
    magnitude_less,
    normalize_digits,
    subtract_magnitudes,
)
from src.core.bigint.parser import ParsedNumber, parse_decimal
from src.core.bigint.result import BigintResult, from_int, parse

__all__ = [
    # Constants
    "DECIMAL_DIGITS",
    "DIGIT_BASE",
    "NAN_STRING",
    "NO_DIGIT",
    "SIGN_NEGATIVE",
    "ZERO_STRING",
    # Errors
    "ERROR_MESSAGES",
    "UNKNOWN_ERROR_MESSAGE",
    "BigintError",
    "MagnitudeInvariantViolation",
    # Magnitude primitives
    "add_magnitudes",
    "magnitude_less",
    "normalize_digits",
    "subtract_magnitudes",
    # Parser
    "ParsedNumber",
    "parse_decimal",
    # Types
    "Bigint",
    "BigintResult",
    # Public constructors
    "from_int",
    "parse",
]
