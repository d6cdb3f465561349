"""
Arithmetic — Примитивы над десятичными строками цифр

Модуль реализует четыре примитива, из которых строятся все остальные операции:
- compare: порядок по длине, затем по цифрам от старшей
- add: сложение в столбик с переносом справа налево
- multiply: умножение в столбик через сдвинутые частичные произведения и add
- decrement: вычитание единицы с заёмом, с полом в нуле

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат каждой операции либо "0", либо без ведущего нуля
2. Операции тотальны на корректных значениях (не бросают исключений)
3. Входные значения не изменяются, результат всегда новый BigNum
4. Каждая точка входа принимает BigNum или сырой текст цифр
"""

from src.bignum.domain.value import (
    ONE_DIGITS,
    ZERO_DIGITS,
    BigNum,
    BigNumLike,
    Ordering,
    to_bignum,
)


def _digit(char: str) -> int:
    return ord(char) - 48


def _char(value: int) -> str:
    return chr(value + 48)


# =============================================================================
# COMPARATOR
# =============================================================================


def compare(x: BigNumLike, y: BigNumLike) -> Ordering:
    """
    Сравнение двух значений.

    Без ведущих нулей более длинное значение всегда больше. При равной длине
    решает первое несовпадение цифр, начиная со старшей.

    Args:
        x: Первое значение
        y: Второе значение

    Returns:
        Ordering.LESS / Ordering.EQUAL / Ordering.GREATER

    Examples:
        >>> compare("100", "99")
        <Ordering.GREATER: 1>
        >>> compare("123", "124")
        <Ordering.LESS: -1>
        >>> compare("7", "7")
        <Ordering.EQUAL: 0>
    """
    a = to_bignum(x).digits
    b = to_bignum(y).digits

    if len(a) != len(b):
        return Ordering.GREATER if len(a) > len(b) else Ordering.LESS

    # Для ASCII цифр одинаковой длины посимвольное сравнение совпадает с числовым
    for da, db in zip(a, b):
        if da != db:
            return Ordering.GREATER if da > db else Ordering.LESS

    return Ordering.EQUAL


# =============================================================================
# ADDER
# =============================================================================


def _add_digits(a: str, b: str) -> str:
    """Сложение канонических строк цифр"""
    ia = len(a) - 1
    ib = len(b) - 1
    carry = 0
    out: list[str] = []

    while ia >= 0 or ib >= 0 or carry:
        total = carry
        if ia >= 0:
            total += _digit(a[ia])
        if ib >= 0:
            total += _digit(b[ib])

        if total >= 10:
            total -= 10
            carry = 1
        else:
            carry = 0

        out.append(_char(total))
        ia -= 1
        ib -= 1

    out.reverse()
    return "".join(out)


def add(x: BigNumLike, y: BigNumLike) -> BigNum:
    """
    Сумма двух значений.

    Операнды выравниваются по младшему разряду, цикл продолжается, пока
    остались цифры в любом операнде или есть перенос. Поэтому финальный
    перенос даёт корректную старшую цифру, а ложный ведущий ноль невозможен.

    Длина результата: max(len(x), len(y)) или на единицу больше.

    Examples:
        >>> str(add("999", "1"))
        '1000'
        >>> str(add("0", "0"))
        '0'
    """
    a = to_bignum(x).digits
    b = to_bignum(y).digits
    return BigNum.from_canonical(_add_digits(a, b))


# =============================================================================
# MULTIPLIER
# =============================================================================


def _partial_product(longer: str, multiplier_digit: int, shift: int) -> str:
    """
    Частичное произведение на одну цифру со сдвигом на shift разрядов.

    Перенос может превышать 9 (максимум 9 * 9 + 8 = 89 → перенос 8).
    """
    carry = 0
    out: list[str] = ["0"] * shift

    for i in range(len(longer) - 1, -1, -1):
        carry, digit = divmod(_digit(longer[i]) * multiplier_digit + carry, 10)
        out.append(_char(digit))

    if carry:
        out.append(_char(carry))

    out.reverse()
    return "".join(out)


def multiply(x: BigNumLike, y: BigNumLike) -> BigNum:
    """
    Произведение двух значений (умножение в столбик).

    Для каждой цифры более короткого операнда, начиная с младшей, строится
    частичное произведение с более длинным операндом, дополняется нулями
    по позиции и накапливается через сложение. Сложность O(len(x) * len(y)).

    Если любой операнд равен нулю, сразу возвращается "0".

    Examples:
        >>> str(multiply("25", "100"))
        '2500'
        >>> str(multiply("12345", "0"))
        '0'
    """
    a = to_bignum(x).digits
    b = to_bignum(y).digits

    if a == ZERO_DIGITS or b == ZERO_DIGITS:
        return BigNum.zero()

    # longer всегда не короче shorter
    if len(a) >= len(b):
        longer, shorter = a, b
    else:
        longer, shorter = b, a

    product = ZERO_DIGITS
    for shift, char in enumerate(reversed(shorter)):
        multiplier_digit = _digit(char)
        if multiplier_digit == 0:
            continue
        product = _add_digits(product, _partial_product(longer, multiplier_digit, shift))

    return BigNum.from_canonical(product)


# =============================================================================
# DECREMENTER
# =============================================================================


def decrement(x: BigNumLike) -> BigNum:
    """
    Значение, уменьшенное на единицу, с полом в нуле.

    Сканирование от младшего разряда: пока идёт заём, '0' становится '9';
    первая ненулевая цифра уменьшается на единицу и заём прекращается;
    цифры левее копируются. Затем ведущие нули отбрасываются, а пустая
    последовательность (или незакрытый заём при входе "0") даёт "0".

    Единственный примитив, который может уменьшить длину значения.

    Examples:
        >>> str(decrement("1000"))
        '999'
        >>> str(decrement("1"))
        '0'
        >>> str(decrement("0"))
        '0'
    """
    digits = to_bignum(x).digits
    if digits in (ZERO_DIGITS, ONE_DIGITS):
        return BigNum.zero()

    out = list(digits)
    for i in range(len(out) - 1, -1, -1):
        if out[i] == "0":
            out[i] = "9"
            continue
        out[i] = _char(_digit(out[i]) - 1)
        break
    else:
        # Заём не закрылся: все цифры были нулями
        return BigNum.zero()

    return BigNum.from_canonical("".join(out).lstrip("0") or ZERO_DIGITS)
