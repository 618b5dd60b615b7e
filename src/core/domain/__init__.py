"""
Domain models and value objects.

Contains the RomanNumber value type and its range bounds.
"""

from src.core.domain.roman_number import (
    ROMAN_MAX_VALUE,
    ROMAN_MIN_VALUE,
    RomanNumber,
)

__all__ = [
    "RomanNumber",
    "ROMAN_MIN_VALUE",
    "ROMAN_MAX_VALUE",
]
