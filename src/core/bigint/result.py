"""
BigintResult — результат разбора и арифметики с ошибкой-значением

Тегированный результат {Ok(Bigint), Err(BigintError)}. Арифметика
выполняется только над Ok-значениями; при ошибке хотя бы в одном операнде
результат несёт ошибку, причём ошибка левого операнда имеет приоритет.

Ошибочный результат наблюдаемо ведёт себя как ноль (size() == 0,
is_negative() == False), но форматируется как "NaN" и сравнивается
всегда как False.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from src.core.bigint.bigint import Bigint
from src.core.bigint.constants import DIGIT_BASE, NAN_STRING, NO_DIGIT
from src.core.bigint.errors import BigintError
from src.core.bigint.parser import parse_decimal


@dataclass(frozen=True)
class BigintResult:
    """Результат операции над Bigint."""

    value: Optional[Bigint]
    error: BigintError

    def __post_init__(self) -> None:
        if (self.value is None) != (self.error != BigintError.NO_ERROR):
            raise ValueError(
                f"BigintResult requires exactly one of value/error, "
                f"got value={self.value!r}, error={self.error.value}"
            )

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def ok(cls, value: Bigint) -> "BigintResult":
        return cls(value=value, error=BigintError.NO_ERROR)

    @classmethod
    def from_error(cls, error: BigintError) -> "BigintResult":
        """Ошибочный результат (ноль с заданной ошибкой)"""
        if error == BigintError.NO_ERROR:
            raise ValueError("from_error requires an actual error kind")
        return cls(value=None, error=error)

    # -------------------------------------------------------------------------
    # Ошибки
    # -------------------------------------------------------------------------

    def get_error(self) -> BigintError:
        return self.error

    def is_error(self) -> bool:
        return self.error != BigintError.NO_ERROR

    def get_error_message(self) -> str:
        return self.error.message

    def unwrap(self) -> Bigint:
        """
        Извлечение значения.

        Raises:
            ValueError: Если результат содержит ошибку
        """
        if self.value is None:
            raise ValueError(f"Cannot unwrap errored Bigint: {self.get_error_message()}")
        return self.value

    @property
    def _number(self) -> Bigint:
        # Ошибочный результат наблюдаемо равен нулю
        return self.value if self.value is not None else Bigint.zero()

    # -------------------------------------------------------------------------
    # Доступ к цифрам
    # -------------------------------------------------------------------------

    def size(self) -> int:
        """Количество значащих цифр; 0 для нуля и для ошибки"""
        return self._number.size()

    def is_negative(self) -> bool:
        return self._number.is_negative()

    def get_last_digit(self, n: int) -> int:
        """n-ная цифра от младшего разряда; 0 за пределами и при ошибке"""
        return self._number.get_last_digit(n)

    def get_first_digit(self, n: int) -> int:
        """n-ная цифра от старшего разряда; NO_DIGIT за пределами и при ошибке"""
        if self.value is None:
            return NO_DIGIT
        return self.value.get_first_digit(n)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: "BigintResult") -> bool:
        """
        Сравнение по модулю: |self| < |other|.

        Знак не учитывается. Для знакового порядка используйте оператор <.

        Returns:
            True если |self| < |other|; False если хотя бы один операнд с ошибкой
        """
        if self.value is None or other.value is None:
            return False
        return self.value.magnitude_lt(other.value)

    def _ordered(self, other: object, predicate: Callable[[Bigint, Bigint], bool]) -> bool:
        if not isinstance(other, BigintResult):
            return NotImplemented  # type: ignore[return-value]
        if self.value is None or other.value is None:
            return False
        return predicate(self.value, other.value)

    def __lt__(self, other: object) -> bool:
        return self._ordered(other, lambda a, b: a < b)

    def __le__(self, other: object) -> bool:
        return self._ordered(other, lambda a, b: a <= b)

    def __gt__(self, other: object) -> bool:
        return self._ordered(other, lambda a, b: a > b)

    def __ge__(self, other: object) -> bool:
        return self._ordered(other, lambda a, b: a >= b)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def _combine(
        self, other: "BigintResult", operation: Callable[[Bigint, Bigint], Bigint]
    ) -> "BigintResult":
        # Ошибка левого операнда имеет приоритет
        if self.value is None:
            return BigintResult.from_error(self.error)
        if other.value is None:
            return BigintResult.from_error(other.error)
        return BigintResult.ok(operation(self.value, other.value))

    def add(self, other: "BigintResult") -> "BigintResult":
        return self._combine(other, lambda a, b: a + b)

    def subtract(self, other: "BigintResult") -> "BigintResult":
        return self._combine(other, lambda a, b: a - b)

    def negate(self) -> "BigintResult":
        """Копия с противоположным знаком; ошибка сохраняется"""
        if self.value is None:
            return self
        return BigintResult.ok(-self.value)

    def __add__(self, other: object) -> "BigintResult":
        if not isinstance(other, BigintResult):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "BigintResult":
        if not isinstance(other, BigintResult):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "BigintResult":
        return self.negate()

    # -------------------------------------------------------------------------
    # Formatter
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        if self.value is None:
            return NAN_STRING
        return self.value.to_string()

    def __str__(self) -> str:
        return self.to_string()


# =============================================================================
# PUBLIC CONSTRUCTORS
# =============================================================================


def parse(text: str) -> BigintResult:
    """
    Разбор десятичной строки.

    Никогда не выбрасывает исключение для строкового входа: ошибка
    возвращается в BigintResult.error.

    Args:
        text: Необязательный ведущий "-", затем цифры 0-9

    Returns:
        BigintResult с нормализованным значением или с ошибкой

    Examples:
        >>> parse("-007").to_string()
        '-7'
        >>> parse("12a").get_error()
        <BigintError.UNEXPECTED_CHARACTER: 'unexpected_character'>
    """
    parsed = parse_decimal(text)
    if parsed.error != BigintError.NO_ERROR:
        return BigintResult.from_error(parsed.error)
    return BigintResult.ok(Bigint.from_magnitude(parsed.digits, parsed.negative))


def from_int(n: int) -> BigintResult:
    """
    Создание из встроенного int.

    Цифры извлекаются делением на DIGIT_BASE, без str(n): преобразование
    int в строку ограничено по длине (sys.set_int_max_str_digits).

    Raises:
        TypeError: Если n не int (bool тоже отвергается)
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"from_int expects int, got {type(n).__name__}")

    digits: list[int] = []
    remainder = abs(n)
    while remainder:
        remainder, digit = divmod(remainder, DIGIT_BASE)
        digits.append(digit)

    return BigintResult.ok(Bigint.from_magnitude(tuple(digits), n < 0))
