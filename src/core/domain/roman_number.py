"""
RomanNumber — Значение, представимое римской записью

Immutable Pydantic модель: целое число в [MIN_VALUE, MAX_VALUE] и его
каноническая римская запись. Конструируется из int или из строки,
арифметика создаёт новый экземпляр с повторной проверкой диапазона.
"""

import logging
from typing import Any, Callable, Final, Union

from pydantic import BaseModel, Field, computed_field

from src.core.numerals.conversion import to_number, to_roman
from src.core.numerals.symbols import MAX_VALUE, MIN_VALUE
from src.core.numerals.validation import NumeralError, validate_number

logger = logging.getLogger(__name__)


# =============================================================================
# ROMAN NUMBER MODEL
# =============================================================================


class RomanNumber(BaseModel):
    """
    Значение римской записи.

    Immutable модель (frozen=True): арифметика и сравнения не изменяют
    экземпляр, а создают новый. Сравнение и hash — по целому значению,
    независимо от способа конструирования.

    Examples:
        >>> RomanNumber(1982).roman
        'MCMLXXXII'
        >>> RomanNumber("MCMLXXXII") + RomanNumber("XL")
        RomanNumber(number=2022, roman='MMXXII')
    """

    number: int = Field(
        ..., ge=MIN_VALUE, le=MAX_VALUE, strict=True, description="Целое значение"
    )

    model_config = {"frozen": True}  # Immutable

    def __init__(self, value: Union[int, str, None] = None, /, **data: Any) -> None:
        """
        Args:
            value: int или римская строка; без value ожидается number=...

        Raises:
            NumeralRangeError: Если число вне [MIN_VALUE, MAX_VALUE]
                (только позиционная форма)
            NumeralFormatError: Если строка не является римской записью
            ValidationError: Если number=... передан ключевым аргументом
                и вне диапазона (как в model_validate)
        """
        if value is not None:
            data["number"] = _resolve_number(value)
        super().__init__(**data)

    @classmethod
    def from_int(cls, number: int) -> "RomanNumber":
        """Конструирование из целого числа."""
        return cls(number)

    @classmethod
    def from_roman(cls, roman: str) -> "RomanNumber":
        """Конструирование из римской записи."""
        return cls(roman)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def roman(self) -> str:
        """Каноническая римская запись."""
        return to_roman(self.number)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def __int__(self) -> int:
        return self.number

    def __str__(self) -> str:
        return self.roman

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RomanNumber):
            return NotImplemented
        return self.number == other.number

    def __hash__(self) -> int:
        return hash(self.number)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RomanNumber):
            return NotImplemented
        return self.number < other.number

    def __le__(self, other: object) -> bool:
        if not isinstance(other, RomanNumber):
            return NotImplemented
        return self.number <= other.number

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, RomanNumber):
            return NotImplemented
        return self.number > other.number

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, RomanNumber):
            return NotImplemented
        return self.number >= other.number

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "RomanNumber":
        return self._apply(other, "+", lambda a, b: a + b)

    def __sub__(self, other: object) -> "RomanNumber":
        return self._apply(other, "-", lambda a, b: a - b)

    def __mul__(self, other: object) -> "RomanNumber":
        return self._apply(other, "*", lambda a, b: a * b)

    def __floordiv__(self, other: object) -> "RomanNumber":
        return self._apply(other, "//", lambda a, b: a // b)

    def __mod__(self, other: object) -> "RomanNumber":
        return self._apply(other, "%", lambda a, b: a % b)

    def _apply(
        self, other: object, symbol: str, operation: Callable[[int, int], int]
    ) -> "RomanNumber":
        """
        Операция над целыми значениями с повторной проверкой диапазона.

        Raises:
            NumeralRangeError: Если результат вне [MIN_VALUE, MAX_VALUE]
        """
        if not isinstance(other, RomanNumber):
            return NotImplemented

        result = operation(self.number, other.number)
        logger.debug("%s %s %s = %d", self.roman, symbol, other.roman, result)
        return RomanNumber(result)


def _resolve_number(value: Union[int, str]) -> int:
    """Целое значение для int или римской строки (с валидацией)."""
    try:
        if isinstance(value, str):
            return to_number(value)
        validate_number(value)
    except NumeralError as e:
        logger.debug("Rejected numeral input %r: %s", value, e)
        raise
    return value


# =============================================================================
# ГРАНИЦЫ
# =============================================================================

ROMAN_MIN_VALUE: Final[RomanNumber] = RomanNumber(MIN_VALUE)
ROMAN_MAX_VALUE: Final[RomanNumber] = RomanNumber(MAX_VALUE)
