"""
BigNum — Беззнаковое целое произвольной точности

Immutable Pydantic модель, представляющая неотрицательное целое как
последовательность десятичных цифр (старшая цифра первой).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Последовательность цифр никогда не пустая
2. Только ASCII цифры 0-9 (без знака, разделителей и группировки)
3. Нет ведущих нулей, кроме самого значения "0"
4. Значение неизменяемо: каждая операция возвращает новый экземпляр
"""

from enum import IntEnum
from typing import Final, Union

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO_DIGITS: Final[str] = "0"
ONE_DIGITS: Final[str] = "1"

_ASCII_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidDigitString(ValueError):
    """
    Текст не является корректной записью беззнакового десятичного целого.

    Возникает при пустой строке, не-строковом входе или символе вне 0-9.
    """

    def __init__(self, text: object, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid digit string {text!r}: {reason}")


# =============================================================================
# ENUMS
# =============================================================================


class Ordering(IntEnum):
    """Результат сравнения двух значений"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_digit_string(text: object) -> str:
    """
    Проверка и нормализация текстовой записи числа.

    Ведущие нули отбрасываются ("007" → "7", "000" → "0").

    Args:
        text: Проверяемый текст

    Returns:
        Каноническая строка цифр

    Raises:
        InvalidDigitString: Если text не str, пустой или содержит не-цифру

    Examples:
        >>> validate_digit_string("12345")
        '12345'
        >>> validate_digit_string("0042")
        '42'
        >>> validate_digit_string("000")
        '0'
    """
    if not isinstance(text, str):
        raise InvalidDigitString(text, f"expected str, got {type(text).__name__}")

    if not text:
        raise InvalidDigitString(text, "empty string")

    for position, char in enumerate(text):
        # str.isdigit() пропускает не-ASCII цифры, поэтому явный набор
        if char not in _ASCII_DIGITS:
            raise InvalidDigitString(
                text, f"non-digit character {char!r} at position {position}"
            )

    return text.lstrip("0") or ZERO_DIGITS


# =============================================================================
# BIGNUM MODEL
# =============================================================================


class BigNum(BaseModel):
    """
    Беззнаковое целое произвольной точности.

    Immutable модель (frozen=True). Текстовое представление совпадает
    с последовательностью цифр: str(BigNum.parse("120")) == "120".

    Прямое создание BigNum(digits=...) валидирует вход через Pydantic
    (ошибка → ValidationError). Для явной ошибки InvalidDigitString
    используйте BigNum.parse() или to_bignum().
    """

    digits: str = Field(
        ...,
        min_length=1,
        description="Десятичные цифры, старшая первой, без ведущих нулей",
    )

    model_config = {"frozen": True}

    @field_validator("digits", mode="before")
    @classmethod
    def validate_digits(cls, v: object) -> str:
        """Проверка алфавита и нормализация ведущих нулей"""
        return validate_digit_string(v)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "BigNum":
        """
        Создание значения из текста с явной ошибкой.

        Raises:
            InvalidDigitString: Если текст некорректен
        """
        return cls.model_construct(digits=validate_digit_string(text))

    @classmethod
    def from_canonical(cls, digits: str) -> "BigNum":
        """
        Создание из заведомо канонической строки без повторной проверки.

        Используется арифметическим ядром: его результаты канонические
        по построению.
        """
        return cls.model_construct(digits=digits)

    @classmethod
    def zero(cls) -> "BigNum":
        return cls.from_canonical(ZERO_DIGITS)

    @classmethod
    def one(cls) -> "BigNum":
        return cls.from_canonical(ONE_DIGITS)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.digits == ZERO_DIGITS

    @property
    def digit_length(self) -> int:
        """Количество цифр (определяет приоритет при сравнении)"""
        return len(self.digits)

    def __str__(self) -> str:
        return self.digits


# Вход публичного API: готовое значение или сырой текст
BigNumLike = Union[BigNum, str]


def to_bignum(value: BigNumLike) -> BigNum:
    """
    Приведение входа публичного API к BigNum.

    BigNum возвращается как есть, текст разбирается через BigNum.parse().

    Raises:
        InvalidDigitString: Если текст некорректен
    """
    if isinstance(value, BigNum):
        return value
    return BigNum.parse(value)
