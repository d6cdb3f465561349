"""
Scientific Notation — Отображение значения в научной нотации

Формат: первая цифра, затем (если significant_figures > 1) точка и ещё
significant_figures - 1 цифр, затем 'E' и десятичный порядок (длина - 1).

ВАЖНО: Это усечение, а не округление. Лишние цифры просто отбрасываются,
последняя сохранённая цифра не корректируется. Результат предназначен
только для отображения и обратно в BigNum не разбирается.
"""

from typing import Final

from src.bignum.domain.value import BigNumLike, to_bignum

# Количество значащих цифр по умолчанию
DEFAULT_SIGNIFICANT_FIGURES: Final[int] = 5

EXPONENT_MARKER: Final[str] = "E"


def format_scientific(
    value: BigNumLike,
    significant_figures: int = DEFAULT_SIGNIFICANT_FIGURES,
) -> str:
    """
    Научная нотация с заданным количеством значащих цифр.

    Если у значения меньше цифр, чем запрошено, мантисса дополняется нулями.

    Args:
        value: Значение для отображения
        significant_figures: Количество значащих цифр (>= 1)

    Returns:
        Строка вида "1.23E4"

    Raises:
        ValueError: Если significant_figures не положительное целое
        InvalidDigitString: Если value является некорректным текстом

    Examples:
        >>> format_scientific("12345", 3)
        '1.23E4'
        >>> format_scientific("5")
        '5.0000E0'
        >>> format_scientific("100", 1)
        '1E2'
    """
    # bool является подклассом int, но не годится как количество цифр
    if isinstance(significant_figures, bool) or not isinstance(significant_figures, int):
        raise ValueError(
            f"significant_figures must be an int, got {type(significant_figures).__name__}"
        )
    if significant_figures < 1:
        raise ValueError(f"significant_figures must be >= 1, got {significant_figures}")

    digits = to_bignum(value).digits
    mantissa = digits[0]

    if significant_figures > 1:
        fraction = digits[1:significant_figures].ljust(significant_figures - 1, "0")
        mantissa = f"{mantissa}.{fraction}"

    return f"{mantissa}{EXPONENT_MARKER}{len(digits) - 1}"
