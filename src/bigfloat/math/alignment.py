"""
Scale Alignment — общие целочисленные примитивы

Все бинарные операции над конечными значениями приводят мантиссы
к общему (большему) scale перед сравнением, сложением, остатком
или побитовой операцией.

Деление и остаток здесь усекающие (toward zero): знак остатка
совпадает со знаком делимого. Python `//` и `%` округляют к -inf,
поэтому напрямую не используются.
"""

from functools import lru_cache


@lru_cache(maxsize=256)
def pow10(n: int) -> int:
    """10**n для n >= 0 (кэшируется: scale-разности повторяются)."""
    if n < 0:
        raise ValueError(f"exponent must be non-negative, got {n}")
    return 10**n


def align(
    a_mantissa: int, a_scale: int, b_mantissa: int, b_scale: int
) -> tuple[int, int, int]:
    """
    Приведение двух мантисс к общему scale.

    Мантисса операнда с меньшим scale домножается на 10^(разница).

    Args:
        a_mantissa: Мантисса первого операнда
        a_scale: Scale первого операнда (>= 0)
        b_mantissa: Мантисса второго операнда
        b_scale: Scale второго операнда (>= 0)

    Returns:
        (a, b, scale): выровненные мантиссы и общий scale = max(a_scale, b_scale)

    Examples:
        >>> align(15, 1, 225, 2)
        (150, 225, 2)
        >>> align(7, 0, 7, 0)
        (7, 7, 0)
    """
    if a_scale == b_scale:
        return a_mantissa, b_mantissa, a_scale
    if a_scale > b_scale:
        return a_mantissa, b_mantissa * pow10(a_scale - b_scale), a_scale
    return a_mantissa * pow10(b_scale - a_scale), b_mantissa, b_scale


def trunc_div(n: int, d: int) -> int:
    """Частное с усечением к нулю."""
    q = abs(n) // abs(d)
    return -q if (n < 0) != (d < 0) else q


def trunc_divmod(n: int, d: int) -> tuple[int, int]:
    """
    Частное и остаток с усечением к нулю.

    Examples:
        >>> trunc_divmod(7, 2)
        (3, 1)
        >>> trunc_divmod(-7, 2)
        (-3, -1)
    """
    q = trunc_div(n, d)
    return q, n - q * d
