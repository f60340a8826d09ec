"""
Primitives — Total-order сравнение примитивных типов

Единое определение знака сравнения для примитивов, переиспользуемое
natural order и вызывающим кодом:
- int: сравнение по знаковой величине
- float: total-order расширение IEEE 754
- bool: False < True
- char (строка длины 1): сравнение по code point

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN строго больше любого другого значения, включая +inf
2. NaN эквивалентен NaN (reflexivity сохраняется)
3. -0.0 и 0.0 эквивалентны
4. Все функции возвращают Sign, никогда не сырую разность
"""

import math
from numbers import Real
from typing import Final

from src.core.domain.sign import Sign
from src.core.errors import InvalidArgumentError

# Длина строки, которая считается символом (char)
CHAR_LENGTH: Final[int] = 1


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ И ЛОГИЧЕСКИЕ
# =============================================================================


def compare_int(a: int, b: int) -> Sign:
    """
    Сравнение двух целых чисел.

    Python int не ограничен по разрядности, поэтому отдельные функции
    для byte/short/long не нужны: знак определяется величиной.

    Examples:
        >>> compare_int(-5, 3)
        <Sign.NEGATIVE: -1>
        >>> compare_int(2**70, 2**70)
        <Sign.ZERO: 0>
    """
    if a < b:
        return Sign.NEGATIVE
    if a > b:
        return Sign.POSITIVE
    return Sign.ZERO


def compare_bool(a: bool, b: bool) -> Sign:
    """
    Сравнение двух bool: False строго меньше True.

    Examples:
        >>> compare_bool(False, True)
        <Sign.NEGATIVE: -1>
        >>> compare_bool(True, True)
        <Sign.ZERO: 0>
    """
    if a == b:
        return Sign.ZERO
    return Sign.POSITIVE if a else Sign.NEGATIVE


def compare_char(a: str, b: str) -> Sign:
    """
    Сравнение двух символов по code point.

    Args:
        a: Строка длины 1
        b: Строка длины 1

    Raises:
        InvalidArgumentError: Если любой из операндов не является одним символом
    """
    for value in (a, b):
        if not isinstance(value, str) or len(value) != CHAR_LENGTH:
            raise InvalidArgumentError(f"Expected a single character, got {value!r}")

    return compare_int(ord(a), ord(b))


# =============================================================================
# FLOAT TOTAL ORDER
# =============================================================================


def is_nan(value: Real) -> bool:
    """
    Проверка на NaN для любого Real (int никогда не NaN).

    Args:
        value: Проверяемое значение

    Returns:
        True если value является float NaN
    """
    return isinstance(value, float) and math.isnan(value)


def compare_float(a: float, b: float) -> Sign:
    """
    Total-order сравнение float.

    Порядок: -inf < ... < -0.0 == 0.0 < ... < +inf < NaN

    В отличие от операторов `<`/`>` (для которых любое сравнение с NaN
    ложно), эта функция задаёт total order: NaN строго больше всех значений
    и эквивалентен сам себе. Операнды могут быть int: сравнение выполняется
    без приведения к float, поэтому большие int не теряют точность.

    Args:
        a: Первое значение
        b: Второе значение

    Returns:
        Sign сравнения

    Examples:
        >>> compare_float(float("nan"), 1.0)
        <Sign.POSITIVE: 1>
        >>> compare_float(1.0, float("nan"))
        <Sign.NEGATIVE: -1>
        >>> compare_float(-0.0, 0.0)
        <Sign.ZERO: 0>
        >>> compare_float(float("inf"), float("nan"))
        <Sign.NEGATIVE: -1>
    """
    a_nan = is_nan(a)
    b_nan = is_nan(b)

    if a_nan or b_nan:
        # NaN максимален; два NaN эквивалентны
        return Sign.of(int(a_nan) - int(b_nan))

    if a < b:
        return Sign.NEGATIVE
    if a > b:
        return Sign.POSITIVE
    return Sign.ZERO


def is_real_number(value: object) -> bool:
    """True для int/float/Fraction и других numbers.Real"""
    return isinstance(value, Real)
