"""
Numeral Validation — Грамматика римской записи и проверка диапазона

Модуль решает, какие строки и числа допустимы:
- Грамматика стандартной записи: четыре группы (thousands, hundreds, tens,
  units) в фиксированном порядке, каждая — замкнутая альтернатива
- Проверка диапазона [MIN_VALUE, MAX_VALUE]
- Исключения NumeralRangeError / NumeralFormatError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Строка принимается только при полном совпадении (оба конца якорены)
2. Пустая строка отклоняется
3. Группа thousands грамматикой не ограничена: "MMMM" грамматически верна,
   диапазон проверяется отдельно после декодирования
4. Значения вне диапазона никогда не ограничиваются (clamp), только ошибка
"""

import re
from typing import Any, Final

from src.core.numerals.symbols import MAX_VALUE, MIN_VALUE


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumeralError(ValueError):
    """Базовая ошибка римской записи."""


class NumeralRangeError(NumeralError):
    """
    Число вне представимого диапазона [MIN_VALUE, MAX_VALUE].

    Возникает при конструировании из int, при декодировании строки
    и при арифметике, результат которой выходит за диапазон.
    """


class NumeralFormatError(NumeralError):
    """Строка не является стандартной римской записью."""


# =============================================================================
# ГРАММАТИКА
# =============================================================================

# thousands | hundreds | tens | units; lookahead запрещает пустую строку
NUMERAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?=[MDCLXVI])"
    r"M*"
    r"(C[MD]|D?C{0,3})"
    r"(X[CL]|L?X{0,3})"
    r"(I[XV]|V?I{0,3})"
)


def is_valid(roman: Any) -> bool:
    """
    Проверка, что строка — стандартная римская запись.

    Грамматика (старшие группы первыми):
        M* (CM|CD|D?C{0,3}) (XC|XL|L?X{0,3}) (IX|IV|V?I{0,3})

    Args:
        roman: Проверяемое значение (не-str всегда невалидно)

    Returns:
        True если строка целиком соответствует грамматике

    Examples:
        >>> is_valid("MCMXCIX")
        True
        >>> is_valid("IIII")
        False
        >>> is_valid("")
        False
    """
    if not isinstance(roman, str):
        return False

    return NUMERAL_PATTERN.fullmatch(roman) is not None


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_number(number: int) -> None:
    """
    Валидация, что целое число представимо римской записью.

    Args:
        number: Проверяемое число

    Raises:
        TypeError: Если number не int (bool тоже отклоняется)
        NumeralRangeError: Если number вне [MIN_VALUE, MAX_VALUE]
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"number must be an int, got {type(number).__name__}")

    if number < MIN_VALUE:
        raise NumeralRangeError(
            f"Numbers lower than {MIN_VALUE} cannot be represented by Roman numerals, "
            f"got {number}"
        )

    if number > MAX_VALUE:
        raise NumeralRangeError(
            f"Numbers greater than {MAX_VALUE} cannot be represented by Roman numerals, "
            f"got {number}"
        )


def validate_roman(roman: str) -> None:
    """
    Валидация строки римской записи.

    Raises:
        NumeralFormatError: Если строка не проходит грамматику
    """
    if not is_valid(roman):
        raise NumeralFormatError(f"Input is not a valid Roman numeral: {roman!r}")
