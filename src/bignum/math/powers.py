"""
Powers — Возведение в степень и факториал

Обе операции построены только из multiply и decrement:
- power: результат = 1; пока показатель != 0: результат *= основание, показатель -= 1
- factorial: n! = n * (n-1) * ... * 2, явный цикл-аккумулятор без рекурсии

Стоимость линейна по ЧИСЛОВОЙ величине показателя / аргумента, а не по
количеству его цифр. Быстрое возведение (по квадратам) не используется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. power(x, 0) = 1 для любого x, включая power(0, 0) = 1
2. factorial(0) = factorial(1) = 1
3. Цикл завершается: decrement строго уменьшает счётчик и имеет пол в нуле
4. Превышение лимитов ArithmeticLimits → ResourceExhausted
5. MemoryError / RecursionError → ResourceExhausted (исходная ошибка в __cause__)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from src.bignum.domain.value import BigNum, BigNumLike, to_bignum
from src.bignum.math.arithmetic import decrement, multiply

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ResourceExhausted(Exception):
    """
    Вычисление упёрлось в лимит ресурсов.

    Либо превышен лимит из ArithmeticLimits, либо интерпретатор сообщил
    о нехватке памяти / глубины стека. Единственный режим отказа
    арифметики помимо некорректного создания значения.
    """

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"{operation}: {message}")


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class ArithmeticLimits:
    """Лимиты для операций с неограниченным ростом.

    None означает отсутствие лимита.
    - max_result_digits: максимальная длина аккумулятора (в цифрах)
    - max_iterations: максимальное количество умножений
    """

    max_result_digits: Optional[int] = None
    max_iterations: Optional[int] = None

    def __post_init__(self):
        for name in ("max_result_digits", "max_iterations"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be positive or None, got {value}")


DEFAULT_LIMITS = ArithmeticLimits()


# =============================================================================
# ЦИКЛ ПОВТОРНОГО УМНОЖЕНИЯ
# =============================================================================


def _repeat_multiply(
    operation: str,
    counter: BigNum,
    stop: Callable[[BigNum], bool],
    factor: Callable[[BigNum], BigNum],
    limits: ArithmeticLimits,
) -> tuple[BigNum, int]:
    """
    Общий цикл: result *= factor(counter); counter -= 1, пока не stop(counter).

    Returns:
        (result, iterations)

    Raises:
        ResourceExhausted: При превышении лимитов или нехватке памяти/стека
    """
    result = BigNum.one()
    iterations = 0

    try:
        while not stop(counter):
            if limits.max_iterations is not None and iterations >= limits.max_iterations:
                raise ResourceExhausted(
                    operation,
                    f"iteration limit {limits.max_iterations} exceeded",
                )

            result = multiply(factor(counter), result)
            counter = decrement(counter)
            iterations += 1

            if (
                limits.max_result_digits is not None
                and result.digit_length > limits.max_result_digits
            ):
                raise ResourceExhausted(
                    operation,
                    f"result digit limit {limits.max_result_digits} exceeded "
                    f"after {iterations} iterations",
                )
    except ResourceExhausted as e:
        logger.warning("%s aborted: %s", operation, e)
        raise
    except (MemoryError, RecursionError) as e:
        logger.warning("%s aborted after %d iterations: %r", operation, iterations, e)
        raise ResourceExhausted(
            operation, f"{type(e).__name__} after {iterations} iterations"
        ) from e

    return result, iterations


# =============================================================================
# EXPONENTIATOR
# =============================================================================


def power(
    base: BigNumLike,
    exponent: BigNumLike,
    limits: Optional[ArithmeticLimits] = None,
) -> BigNum:
    """
    Возведение base в степень exponent повторным умножением.

    Цикл проверяет показатель на точное равенство нулю, поэтому основание
    при нулевом показателе не рассматривается: power("0", "0") = "1".

    Args:
        base: Основание
        exponent: Показатель (количество умножений равно его величине)
        limits: Лимиты ресурсов (default: без лимитов)

    Returns:
        base ** exponent

    Raises:
        ResourceExhausted: При превышении лимитов или нехватке памяти

    Examples:
        >>> str(power("2", "10"))
        '1024'
        >>> str(power("0", "0"))
        '1'
    """
    n = to_bignum(base)
    p = to_bignum(exponent)

    result, iterations = _repeat_multiply(
        "power",
        p,
        stop=lambda counter: counter.is_zero,
        factor=lambda _counter: n,
        limits=limits or DEFAULT_LIMITS,
    )

    logger.debug(
        "power: base_digits=%d exponent=%s result_digits=%d iterations=%d",
        n.digit_length,
        p.digits if p.digit_length <= 12 else f"<{p.digit_length} digits>",
        result.digit_length,
        iterations,
    )
    return result


# =============================================================================
# FACTORIAL
# =============================================================================


def factorial(n: BigNumLike, limits: Optional[ArithmeticLimits] = None) -> BigNum:
    """
    Факториал n.

    База: 0! = 1! = 1. Иначе n * (n-1)!, вычисляемое явным циклом
    с аккумулятором, поэтому стек не растёт вместе с n.

    Args:
        n: Аргумент
        limits: Лимиты ресурсов (default: без лимитов)

    Returns:
        n!

    Raises:
        ResourceExhausted: При превышении лимитов или нехватке памяти

    Examples:
        >>> str(factorial("5"))
        '120'
        >>> str(factorial("0"))
        '1'
    """
    value = to_bignum(n)

    result, iterations = _repeat_multiply(
        "factorial",
        value,
        stop=lambda counter: counter.digits in ("0", "1"),
        factor=lambda counter: counter,
        limits=limits or DEFAULT_LIMITS,
    )

    logger.debug(
        "factorial: n_digits=%d result_digits=%d iterations=%d",
        value.digit_length,
        result.digit_length,
        iterations,
    )
    return result
