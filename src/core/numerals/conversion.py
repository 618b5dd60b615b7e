"""
Numeral Conversion — Encoder/Decoder римской записи

Двунаправленная конверсия int ↔ каноническая римская строка:
- Encoder: десятичные разряды → unary-серии символов → compaction
- Decoder: validation → expansion → подсчёт символов по степеням десяти

Compaction и expansion — линейные конвейеры замен по фиксированным таблицам.
Порядок внутри tier (hundreds/tens/units) значим, между tier — нет,
так как tier используют разные алфавиты (C / X / I).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. to_number(to_roman(n)) == n для всех n в [MIN_VALUE, MAX_VALUE]
2. to_roman(to_number(s)) == s для всех канонических s
3. Compaction внутри tier: 9-серия → 5-серия → 4-серия
4. Expansion внутри tier: 9-токен → 4-токен → 5-токен
"""

from typing import Final, Tuple

from src.core.numerals.symbols import (
    FIFTY,
    FIVE,
    FIVE_HUNDRED,
    ONE,
    ONE_HUNDRED,
    ONE_THOUSAND,
    SYMBOL_TABLE,
    TEN,
)
from src.core.numerals.validation import validate_number, validate_roman


# =============================================================================
# ТАБЛИЦЫ ЗАМЕН
# =============================================================================

# (unary-серия, компактная форма) для каждого tier, старшие tier первыми
COMPACTION_RULES: Final[Tuple[Tuple[str, str], ...]] = (
    (ONE_HUNDRED * 9, ONE_HUNDRED + ONE_THOUSAND),
    (ONE_HUNDRED * 5, FIVE_HUNDRED),
    (ONE_HUNDRED * 4, ONE_HUNDRED + FIVE_HUNDRED),
    (TEN * 9, TEN + ONE_HUNDRED),
    (TEN * 5, FIFTY),
    (TEN * 4, TEN + FIFTY),
    (ONE * 9, ONE + TEN),
    (ONE * 5, FIVE),
    (ONE * 4, ONE + FIVE),
)

# Обратный порядок внутри tier: "CM" и "CD" раскрываются раньше "D",
# иначе "D" внутри "CD" раскрылся бы первым
EXPANSION_RULES: Final[Tuple[Tuple[str, str], ...]] = (
    (ONE_HUNDRED + ONE_THOUSAND, ONE_HUNDRED * 9),
    (ONE_HUNDRED + FIVE_HUNDRED, ONE_HUNDRED * 4),
    (FIVE_HUNDRED, ONE_HUNDRED * 5),
    (TEN + ONE_HUNDRED, TEN * 9),
    (TEN + FIFTY, TEN * 4),
    (FIFTY, TEN * 5),
    (ONE + TEN, ONE * 9),
    (ONE + FIVE, ONE * 4),
    (FIVE, ONE * 5),
)


# =============================================================================
# HELPERS
# =============================================================================


def decimal_length(number: int) -> int:
    """
    Количество десятичных разрядов неотрицательного числа.

    Examples:
        >>> decimal_length(1982)
        4
        >>> decimal_length(0)
        0
    """
    count = 0
    while number > 0:
        number //= 10
        count += 1
    return count


def digit_count(expanded: str, symbol: str) -> int:
    """Сколько раз базовый символ встречается в unary-записи."""
    return expanded.count(symbol)


def compact(unary: str) -> str:
    """
    Compaction: unary-серии → стандартная/вычитательная форма.

    Args:
        unary: Запись из серий I/X/C/M (например, "MCCCCCCCCCXXXXXXXXXIIIIIIIII")

    Returns:
        Каноническая запись (например, "MCMXCIX")
    """
    for run, token in COMPACTION_RULES:
        unary = unary.replace(run, token)
    return unary


def expand(roman: str) -> str:
    """
    Expansion: обратная к compaction.

    После expansion строка содержит только символы SYMBOL_TABLE,
    и значение каждого разряда равно числу его символов.
    """
    for token, run in EXPANSION_RULES:
        roman = roman.replace(token, run)
    return roman


# =============================================================================
# ENCODER / DECODER
# =============================================================================


def to_roman(number: int) -> str:
    """
    Конверсия: int → каноническая римская запись.

    Разряды обрабатываются от младшего к старшему: разряд p с цифрой d
    даёт d повторов SYMBOL_TABLE[p], блок добавляется слева. Затем compaction.

    Args:
        number: Целое в [MIN_VALUE, MAX_VALUE]

    Returns:
        Каноническая римская запись

    Raises:
        TypeError: Если number не int
        NumeralRangeError: Если number вне диапазона

    Examples:
        >>> to_roman(1982)
        'MCMLXXXII'
        >>> to_roman(3999)
        'MMMCMXCIX'
    """
    validate_number(number)

    unary = ""
    remaining = number
    for position in range(decimal_length(number)):
        digit = remaining % 10
        unary = SYMBOL_TABLE[position] * digit + unary
        remaining //= 10

    return compact(unary)


def to_number(roman: str) -> int:
    """
    Конверсия: римская запись → int.

    Args:
        roman: Стандартная римская запись

    Returns:
        Целое в [MIN_VALUE, MAX_VALUE]

    Raises:
        NumeralFormatError: Если строка не проходит грамматику
        NumeralRangeError: Если значение вне диапазона (например, "MMMM")

    Examples:
        >>> to_number("MCMLXXXII")
        1982
        >>> to_number("IX")
        9
    """
    validate_roman(roman)

    expanded = expand(roman)
    result = 0
    power = 1
    for symbol in SYMBOL_TABLE:
        result += digit_count(expanded, symbol) * power
        power *= 10

    # Грамматика не ограничивает thousands
    validate_number(result)

    return result
