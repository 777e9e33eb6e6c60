"""
Bigint — константы представления и форматирования

Все параметры модуля фиксированы (Final) и не читаются из окружения.
"""

from typing import Final

# =============================================================================
# ПРЕДСТАВЛЕНИЕ ЦИФР
# =============================================================================

# Основание системы счисления (одна цифра на позицию)
DIGIT_BASE: Final[int] = 10

# Допустимые символы цифр (только ASCII, Unicode-цифры отвергаются)
DECIMAL_DIGITS: Final[str] = "0123456789"

# Маркер отрицательного числа (допускается только первым символом)
SIGN_NEGATIVE: Final[str] = "-"


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================

# Строковое представление числа с ошибкой
NAN_STRING: Final[str] = "NaN"

# Строковое представление канонического нуля
ZERO_STRING: Final[str] = "0"

# Sentinel для get_first_digit при выходе за пределы
NO_DIGIT: Final[int] = -1
