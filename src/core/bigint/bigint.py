"""
Bigint — знаковое целое произвольной точности

Immutable Pydantic модель. Хранит модуль числа как кортеж десятичных цифр
(младший разряд первым) и флаг знака. Модель всегда валидна: ошибки
разбора живут уровнем выше, в BigintResult.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая цифра в диапазоне 0-9
2. Старшая цифра не равна 0; ноль представлен пустым кортежем
3. Ноль никогда не отрицателен
4. Операции не изменяют операнды, а создают новый экземпляр
"""

from pydantic import BaseModel, Field, StrictBool, StrictInt, field_validator

from src.core.bigint.constants import DIGIT_BASE, NO_DIGIT, SIGN_NEGATIVE, ZERO_STRING
from src.core.bigint.magnitude import (
    ZERO_DIGITS,
    Digits,
    add_magnitudes,
    digit_at,
    magnitude_less,
    subtract_magnitudes,
)


class Bigint(BaseModel):
    """
    Знаковое целое произвольной точности.

    Immutable модель (frozen=True): любое изменение значения создаёт
    новый экземпляр. Сравнение операторами <, <=, >, >= учитывает знак;
    сравнение только по модулю доступно через magnitude_lt.
    """

    digits: tuple[StrictInt, ...] = Field(
        default=ZERO_DIGITS, description="Цифры модуля, младший разряд первым"
    )
    negative: StrictBool = Field(default=False, description="Знак числа (True для отрицательных)")

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digits(cls, v: Digits) -> Digits:
        """Проверка диапазона цифр и отсутствия старших нулей"""
        for position, digit in enumerate(v):
            if not 0 <= digit < DIGIT_BASE:
                raise ValueError(f"digit {digit} at position {position} is out of range 0-9")
        if v and v[-1] == 0:
            raise ValueError("digits must not contain a most-significant zero")
        return v

    @field_validator("negative")
    @classmethod
    def validate_zero_sign(cls, v: bool, info) -> bool:
        """Канонический ноль (пустые цифры) не может быть отрицательным"""
        if v and "digits" in info.data and not info.data["digits"]:
            raise ValueError("canonical zero cannot be negative")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "Bigint":
        """Канонический ноль"""
        return cls(digits=ZERO_DIGITS, negative=False)

    @classmethod
    def from_magnitude(cls, digits: Digits, negative: bool = False) -> "Bigint":
        """
        Создание числа из нормализованного модуля и знака.

        Знак нуля принудительно сбрасывается.
        """
        return cls(digits=digits, negative=negative and bool(digits))

    # -------------------------------------------------------------------------
    # Доступ к цифрам
    # -------------------------------------------------------------------------

    def size(self) -> int:
        """Количество значащих цифр (0 для нуля)"""
        return len(self.digits)

    def is_zero(self) -> bool:
        return not self.digits

    def is_negative(self) -> bool:
        return self.negative

    def get_last_digit(self, n: int) -> int:
        """
        n-ная цифра с конца (от младшего разряда).

        За пределами числа возвращает 0 (незначащий ноль).
        """
        return digit_at(self.digits, n)

    def get_first_digit(self, n: int) -> int:
        """
        n-ная цифра с начала (от старшего разряда).

        За пределами числа возвращает NO_DIGIT (-1).
        """
        if 0 <= n < len(self.digits):
            return self.digits[len(self.digits) - n - 1]
        return NO_DIGIT

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def magnitude_lt(self, other: "Bigint") -> bool:
        """Сравнение модулей |self| < |other| без учёта знака"""
        return magnitude_less(self.digits, other.digits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bigint):
            return NotImplemented
        return self.digits == other.digits and self.negative == other.negative

    def __hash__(self) -> int:
        return hash((self.digits, self.negative))

    def _signed_less(self, other: "Bigint") -> bool:
        if self.negative != other.negative:
            return self.negative
        if self.negative:
            return magnitude_less(other.digits, self.digits)
        return magnitude_less(self.digits, other.digits)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Bigint):
            return NotImplemented
        return self._signed_less(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Bigint):
            return NotImplemented
        return not other._signed_less(self)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Bigint):
            return NotImplemented
        return other._signed_less(self)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Bigint):
            return NotImplemented
        return not self._signed_less(other)

    # -------------------------------------------------------------------------
    # Арифметика (Sign Dispatcher)
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Bigint":
        if not isinstance(other, Bigint):
            return NotImplemented

        if not self.negative and not other.negative:
            # (+) + (+) = |a| + |b|
            return Bigint.from_magnitude(add_magnitudes(self.digits, other.digits))

        if not self.negative and other.negative:
            # (+) + (-) = |a| - |b|
            digits, negative = subtract_magnitudes(self.digits, other.digits)
            return Bigint.from_magnitude(digits, negative)

        if self.negative and not other.negative:
            # (-) + (+) = |b| - |a|
            digits, negative = subtract_magnitudes(other.digits, self.digits)
            return Bigint.from_magnitude(digits, negative)

        # (-) + (-) = -(|a| + |b|)
        return Bigint.from_magnitude(add_magnitudes(self.digits, other.digits), True)

    def __sub__(self, other: object) -> "Bigint":
        if not isinstance(other, Bigint):
            return NotImplemented

        if not self.negative and not other.negative:
            # (+) - (+) = |a| - |b|
            digits, negative = subtract_magnitudes(self.digits, other.digits)
            return Bigint.from_magnitude(digits, negative)

        if not self.negative and other.negative:
            # (+) - (-) = |a| + |b|
            return Bigint.from_magnitude(add_magnitudes(self.digits, other.digits))

        if self.negative and other.negative:
            # (-) - (-) = |b| - |a|
            digits, negative = subtract_magnitudes(other.digits, self.digits)
            return Bigint.from_magnitude(digits, negative)

        # (-) - (+) = -(|a| + |b|)
        return Bigint.from_magnitude(add_magnitudes(self.digits, other.digits), True)

    def __neg__(self) -> "Bigint":
        return Bigint.from_magnitude(self.digits, not self.negative)

    def __abs__(self) -> "Bigint":
        return Bigint.from_magnitude(self.digits)

    def __bool__(self) -> bool:
        return bool(self.digits)

    # -------------------------------------------------------------------------
    # Formatter
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """
        Десятичное представление: "-" для отрицательных, затем цифры от старшей.

        Examples:
            >>> Bigint(digits=(3, 2, 1), negative=True).to_string()
            '-123'
            >>> Bigint.zero().to_string()
            '0'
        """
        if not self.digits:
            return ZERO_STRING

        body = "".join(str(digit) for digit in reversed(self.digits))
        return f"{SIGN_NEGATIVE}{body}" if self.negative else body

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Bigint({self.to_string()!r})"
