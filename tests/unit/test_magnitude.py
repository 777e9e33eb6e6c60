"""
Тесты для модуля Magnitude (беззнаковые алгоритмы над цифрами)

Проверяет:
1. Нормализацию (удаление старших нулей)
2. Сравнение модулей
3. Сложение с переносом
4. Вычитание с заёмом и сменой порядка операндов
5. Защиту от нарушения контракта Comparator/Subtractor
"""

import logging

import pytest

from src.core.bigint.errors import MagnitudeInvariantViolation
from src.core.bigint.magnitude import (
    ZERO_DIGITS,
    _subtract_ordered,
    add_magnitudes,
    digit_at,
    magnitude_less,
    normalize_digits,
    subtract_magnitudes,
)


def digits_of(n: int) -> tuple[int, ...]:
    """Цифры неотрицательного int, младший разряд первым"""
    return tuple(int(c) for c in reversed(str(n))) if n else ()


# =============================================================================
# NORMALIZER
# =============================================================================


class TestNormalizeDigits:
    """Тесты для normalize_digits"""

    def test_strips_most_significant_zeros(self) -> None:
        """Старшие нули удаляются"""
        assert normalize_digits((7, 0, 0)) == (7,)
        assert normalize_digits((0, 1, 0)) == (0, 1)

    def test_all_zeros_become_empty(self) -> None:
        """Последовательность из нулей → канонический ноль"""
        assert normalize_digits((0,)) == ZERO_DIGITS
        assert normalize_digits((0, 0, 0)) == ZERO_DIGITS

    def test_already_normalized_unchanged(self) -> None:
        """Нормализованные цифры не изменяются"""
        assert normalize_digits((1, 2, 3)) == (1, 2, 3)
        assert normalize_digits(()) == ()

    def test_idempotent(self) -> None:
        """Повторная нормализация ничего не меняет"""
        once = normalize_digits((5, 0, 3, 0, 0))
        assert normalize_digits(once) == once == (5, 0, 3)


class TestDigitAt:
    """Тесты для digit_at"""

    def test_in_range(self) -> None:
        assert digit_at((3, 2, 1), 0) == 3
        assert digit_at((3, 2, 1), 2) == 1

    def test_out_of_range_is_zero(self) -> None:
        """За пределами (в том числе отрицательный индекс) → 0"""
        assert digit_at((3, 2, 1), 3) == 0
        assert digit_at((3, 2, 1), 100) == 0
        assert digit_at((3, 2, 1), -1) == 0
        assert digit_at((), 0) == 0


# =============================================================================
# COMPARATOR
# =============================================================================


class TestMagnitudeLess:
    """Тесты для magnitude_less"""

    def test_shorter_is_less(self) -> None:
        """Более короткое число всегда меньше"""
        assert magnitude_less(digits_of(99), digits_of(100)) is True
        assert magnitude_less(digits_of(100), digits_of(99)) is False

    def test_equal_length_decided_by_first_difference(self) -> None:
        """При равной длине решает первая различающаяся старшая цифра"""
        assert magnitude_less(digits_of(123), digits_of(124)) is True
        assert magnitude_less(digits_of(124), digits_of(123)) is False

    def test_greater_leading_digit_wins_over_smaller_lower_digits(self) -> None:
        """Большая старшая цифра решает, даже если младшие меньше"""
        assert magnitude_less(digits_of(21), digits_of(19)) is False
        assert magnitude_less(digits_of(19), digits_of(21)) is True

    def test_equal_is_not_less(self) -> None:
        """Равные модули не меньше друг друга"""
        assert magnitude_less(digits_of(555), digits_of(555)) is False
        assert magnitude_less((), ()) is False

    def test_zero_is_less_than_any_nonzero(self) -> None:
        assert magnitude_less((), (1,)) is True
        assert magnitude_less((1,), ()) is False


# =============================================================================
# MAGNITUDE ADDER
# =============================================================================


class TestAddMagnitudes:
    """Тесты для add_magnitudes"""

    @pytest.mark.parametrize(
        "a, b",
        [
            (0, 0),
            (0, 7),
            (1, 9),
            (999, 1),
            (123, 877),
            (99999999999999999999, 1),
            (5, 123456789),
        ],
    )
    def test_matches_int_addition(self, a: int, b: int) -> None:
        """Сумма совпадает со встроенной арифметикой"""
        assert add_magnitudes(digits_of(a), digits_of(b)) == digits_of(a + b)

    def test_final_carry_appends_digit(self) -> None:
        """Перенос из старшего разряда добавляет новую цифру"""
        assert add_magnitudes((9, 9), (1,)) == (0, 0, 1)

    def test_zero_is_identity(self) -> None:
        assert add_magnitudes((4, 3), ()) == (4, 3)
        assert add_magnitudes((), ()) == ()


# =============================================================================
# MAGNITUDE SUBTRACTOR
# =============================================================================


class TestSubtractMagnitudes:
    """Тесты для subtract_magnitudes"""

    @pytest.mark.parametrize(
        "a, b",
        [
            (0, 0),
            (10, 1),
            (100, 1),
            (1000, 999),
            (12345, 12345),
            (5, 10),
            (1, 100000000000000000000),
            (7, 0),
            (0, 7),
        ],
    )
    def test_matches_int_subtraction(self, a: int, b: int) -> None:
        """Модуль и знак разности совпадают со встроенной арифметикой"""
        digits, negative = subtract_magnitudes(digits_of(a), digits_of(b))
        assert digits == digits_of(abs(a - b))
        assert negative is (a < b)

    def test_swap_when_minuend_smaller(self) -> None:
        """|a| < |b| → вычисляется |b| - |a| с отрицательной пометкой"""
        assert subtract_magnitudes((5,), (0, 1)) == ((5,), True)

    def test_result_normalized(self) -> None:
        """Старшие нули разности удаляются"""
        digits, negative = subtract_magnitudes(digits_of(1000), digits_of(999))
        assert digits == (1,)
        assert negative is False

    def test_equal_operands_give_zero(self) -> None:
        """Равные модули → канонический ноль без знака"""
        assert subtract_magnitudes((3, 2, 1), (3, 2, 1)) == ((), False)


class TestSubtractOrderedInvariant:
    """Тесты защиты от нарушения контракта"""

    def test_leftover_borrow_raises(self) -> None:
        """Заём после старшего разряда → MagnitudeInvariantViolation"""
        with pytest.raises(MagnitudeInvariantViolation, match="underflow"):
            _subtract_ordered((5,), (0, 1))

    def test_leftover_borrow_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Нарушение инварианта логируется на уровне ERROR"""
        with caplog.at_level(logging.ERROR, logger="src.core.bigint.magnitude"):
            with pytest.raises(MagnitudeInvariantViolation):
                _subtract_ordered((1,), (2,))
        assert any("Borrow left" in record.message for record in caplog.records)
