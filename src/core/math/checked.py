"""
Checked Primitives — Нативные checked-операции для fixed-width unsigned

Каждая функция возвращает:
- int, если истинный математический результат представим в разрядности
- None, если результат не представим (или делитель равен нулю)

Никакого wrapping, saturation или округления. Python int не ограничен,
поэтому границы проверяются явно по UintWidth.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат (если не None) всегда в [0, width.max_value]
2. Операнды вне разрядности отклоняются (ValueError/TypeError), а не усекаются
3. checked_pow не строит промежуточных значений больше max разрядности
"""

from typing import Optional

from src.core.domain.uint_width import UintWidth, validate_exponent, validate_uint


def checked_add(a: int, b: int, width: UintWidth) -> Optional[int]:
    """
    a + b, если результат <= max(width), иначе None.

    Examples:
        >>> checked_add(100, 50, UintWidth.U8)
        150
        >>> checked_add(200, 100, UintWidth.U8) is None
        True
    """
    a = validate_uint(a, width, "a")
    b = validate_uint(b, width, "b")

    result = a + b
    if result > width.max_value:
        return None
    return result


def checked_sub(a: int, b: int, width: UintWidth) -> Optional[int]:
    """a - b, если b <= a, иначе None"""
    a = validate_uint(a, width, "a")
    b = validate_uint(b, width, "b")

    if b > a:
        return None
    return a - b


def checked_mul(a: int, b: int, width: UintWidth) -> Optional[int]:
    """a * b, если результат <= max(width), иначе None"""
    a = validate_uint(a, width, "a")
    b = validate_uint(b, width, "b")

    result = a * b
    if result > width.max_value:
        return None
    return result


def checked_div(a: int, b: int, width: UintWidth) -> Optional[int]:
    """
    a // b (усечение к нулю), если b != 0, иначе None.

    Для беззнаковых операндов floor-деление совпадает с усечением к нулю,
    а частное никогда не превышает a.
    """
    a = validate_uint(a, width, "a")
    b = validate_uint(b, width, "b")

    if b == 0:
        return None
    return a // b


def checked_pow(base: int, exp: int, width: UintWidth) -> Optional[int]:
    """
    base ** exp, если результат <= max(width), иначе None.

    Возведение в степень через squaring: O(log exp) умножений, каждое
    промежуточное значение проверяется на переполнение. Квадраты основания
    являются множителями результата, поэтому ранний выход не даёт ложных
    переполнений.

    Args:
        base: Основание (в разрядности width)
        exp: Показатель степени (u32)
        width: Разрядность основания и результата

    Returns:
        base ** exp или None при переполнении

    Examples:
        >>> checked_pow(2, 7, UintWidth.U8)
        128
        >>> checked_pow(2, 8, UintWidth.U8) is None
        True
        >>> checked_pow(0, 0, UintWidth.U8)
        1
    """
    base = validate_uint(base, width, "base")
    exp = validate_exponent(exp, "exp")

    if exp == 0:
        return 1

    acc = 1
    while exp > 1:
        if exp & 1:
            acc = checked_mul(acc, base, width)
            if acc is None:
                return None
        exp >>= 1
        base = checked_mul(base, base, width)
        if base is None:
            return None

    return checked_mul(acc, base, width)
