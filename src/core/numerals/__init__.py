"""
Core numerals modules

Encoder/decoder римской записи, грамматика и символы.
"""

# Symbols
from src.core.numerals.symbols import (
    FIFTY,
    FIVE,
    FIVE_HUNDRED,
    MAX_VALUE,
    MIN_VALUE,
    ONE,
    ONE_HUNDRED,
    ONE_THOUSAND,
    STANDARD_SYMBOLS,
    SYMBOL_TABLE,
    TEN,
    UNICODE_FIFTY,
    UNICODE_FIFTY_THOUSAND,
    UNICODE_FIVE,
    UNICODE_FIVE_HUNDRED,
    UNICODE_FIVE_THOUSAND,
    UNICODE_ONE,
    UNICODE_ONE_HUNDRED,
    UNICODE_ONE_HUNDRED_THOUSAND,
    UNICODE_ONE_THOUSAND,
    UNICODE_ONE_THOUSAND_CD,
    UNICODE_TEN,
    UNICODE_TEN_THOUSAND,
)

# Validation
from src.core.numerals.validation import (
    NUMERAL_PATTERN,
    NumeralError,
    NumeralFormatError,
    NumeralRangeError,
    is_valid,
    validate_number,
    validate_roman,
)

# Conversion
from src.core.numerals.conversion import (
    COMPACTION_RULES,
    EXPANSION_RULES,
    compact,
    decimal_length,
    digit_count,
    expand,
    to_number,
    to_roman,
)

__all__ = [
    # Symbols — Standard
    "ONE",
    "FIVE",
    "TEN",
    "FIFTY",
    "ONE_HUNDRED",
    "FIVE_HUNDRED",
    "ONE_THOUSAND",
    # Symbols — Unicode
    "UNICODE_ONE",
    "UNICODE_FIVE",
    "UNICODE_TEN",
    "UNICODE_FIFTY",
    "UNICODE_ONE_HUNDRED",
    "UNICODE_FIVE_HUNDRED",
    "UNICODE_ONE_THOUSAND",
    "UNICODE_ONE_THOUSAND_CD",
    "UNICODE_FIVE_THOUSAND",
    "UNICODE_TEN_THOUSAND",
    "UNICODE_FIFTY_THOUSAND",
    "UNICODE_ONE_HUNDRED_THOUSAND",
    # Symbols — Table and range
    "SYMBOL_TABLE",
    "STANDARD_SYMBOLS",
    "MIN_VALUE",
    "MAX_VALUE",
    # Validation — Exceptions
    "NumeralError",
    "NumeralFormatError",
    "NumeralRangeError",
    # Validation — Functions
    "NUMERAL_PATTERN",
    "is_valid",
    "validate_number",
    "validate_roman",
    # Conversion — Tables
    "COMPACTION_RULES",
    "EXPANSION_RULES",
    # Conversion — Functions
    "compact",
    "decimal_length",
    "digit_count",
    "expand",
    "to_number",
    "to_roman",
]
