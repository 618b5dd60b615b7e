"""
Roman Symbols — Символы римской записи и границы диапазона

Единственный источник символов для encoder/decoder/validator:
- Семь стандартных символов (I, V, X, L, C, D, M)
- Архаичные Unicode-эквиваленты (только константы, validator их не принимает)
- Таблица символов степеней десяти (SYMBOL_TABLE)
- Границы представимого диапазона [MIN_VALUE, MAX_VALUE]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. SYMBOL_TABLE упорядочена по степени десяти: индекс p ↔ 10**p
2. SYMBOL_TABLE не расширяется (расширение требует чисел > 3999)
"""

from typing import Final, Tuple

# =============================================================================
# СТАНДАРТНЫЕ СИМВОЛЫ
# =============================================================================

ONE: Final[str] = "I"
FIVE: Final[str] = "V"
TEN: Final[str] = "X"
FIFTY: Final[str] = "L"
ONE_HUNDRED: Final[str] = "C"
FIVE_HUNDRED: Final[str] = "D"
ONE_THOUSAND: Final[str] = "M"


# =============================================================================
# АРХАИЧНЫЕ UNICODE-СИМВОЛЫ (Number Forms, U+2160..U+2188)
# =============================================================================

UNICODE_ONE: Final[str] = "\u2160"  # Ⅰ
UNICODE_FIVE: Final[str] = "\u2164"  # Ⅴ
UNICODE_TEN: Final[str] = "\u2169"  # Ⅹ
UNICODE_FIFTY: Final[str] = "\u216C"  # Ⅼ
UNICODE_ONE_HUNDRED: Final[str] = "\u216D"  # Ⅽ
UNICODE_FIVE_HUNDRED: Final[str] = "\u216E"  # Ⅾ
UNICODE_ONE_THOUSAND: Final[str] = "\u216F"  # Ⅿ
UNICODE_ONE_THOUSAND_CD: Final[str] = "\u2180"  # ↀ
UNICODE_FIVE_THOUSAND: Final[str] = "\u2181"  # ↁ
UNICODE_TEN_THOUSAND: Final[str] = "\u2182"  # ↂ
UNICODE_FIFTY_THOUSAND: Final[str] = "\u2187"  # ↇ
UNICODE_ONE_HUNDRED_THOUSAND: Final[str] = "\u2188"  # ↈ


# =============================================================================
# ТАБЛИЦА СИМВОЛОВ И ДИАПАЗОН
# =============================================================================

# Символ для каждой степени десяти: units, tens, hundreds, thousands
SYMBOL_TABLE: Final[Tuple[str, ...]] = (ONE, TEN, ONE_HUNDRED, ONE_THOUSAND)

# Все символы, допустимые в стандартной записи
STANDARD_SYMBOLS: Final[str] = (
    ONE_THOUSAND + FIVE_HUNDRED + ONE_HUNDRED + FIFTY + TEN + FIVE + ONE
)

MIN_VALUE: Final[int] = 1
MAX_VALUE: Final[int] = 3999
