"""
Rounding — округление до целого или до заданного числа дробных разрядов

Четыре режима, каждый в двух формах (scale=None → до целого):
- round_half_away: половина и больше по модулю округляется от нуля
- truncate: к нулю
- floor: к -inf
- ceiling: к +inf

Значения со scale <= целевого и sentinel возвращаются без изменений.
"""

from bigfloat.domain.bigfloat import BigFloat
from bigfloat.math.alignment import pow10, trunc_div, trunc_divmod


def _target_scale(scale: int | None) -> int:
    if scale is None:
        return 0
    if scale < 0:
        raise ValueError(f"scale must be non-negative, got {scale}")
    return scale


def round_half_away(value: BigFloat, scale: int | None = None) -> BigFloat:
    """
    Округление half-away-from-zero.

    Мантисса усекается до target + 1 дробных разрядов; решение
    принимается по последней оставшейся цифре.

    Args:
        value: Округляемое значение
        scale: Число дробных разрядов результата (None → до целого)

    Raises:
        ValueError: Если scale < 0

    Examples:
        >>> round_half_away(BigFloat(25, 1))
        BigFloat('3')
        >>> round_half_away(BigFloat(-25, 1))
        BigFloat('-3')
        >>> round_half_away(BigFloat(31415, 4), 2)
        BigFloat('3.14')
    """
    target = _target_scale(scale)
    if not value.is_finite or value.scale <= target:
        return value

    kept = trunc_div(value.mantissa, pow10(value.scale - target - 1))
    head, digit = trunc_divmod(kept, 10)
    if digit >= 5:
        head += 1
    elif digit <= -5:
        head -= 1
    return BigFloat(head, target)


def truncate(value: BigFloat, scale: int | None = None) -> BigFloat:
    """Отбрасывание разрядов за target (к нулю)."""
    target = _target_scale(scale)
    if not value.is_finite or value.scale <= target:
        return value
    return BigFloat(trunc_div(value.mantissa, pow10(value.scale - target)), target)


def floor(value: BigFloat, scale: int | None = None) -> BigFloat:
    """
    Округление к -inf.

    Отрицательное значение с ненулевой отброшенной частью уменьшается
    на единицу последнего сохранённого разряда.

    Examples:
        >>> floor(BigFloat(-105, 2))
        BigFloat('-2')
    """
    target = _target_scale(scale)
    if not value.is_finite or value.scale <= target:
        return value
    head, dropped = trunc_divmod(value.mantissa, pow10(value.scale - target))
    if dropped < 0:
        head -= 1
    return BigFloat(head, target)


def ceiling(value: BigFloat, scale: int | None = None) -> BigFloat:
    """
    Округление к +inf.

    Положительное значение с ненулевой отброшенной частью увеличивается
    на единицу последнего сохранённого разряда.
    """
    target = _target_scale(scale)
    if not value.is_finite or value.scale <= target:
        return value
    head, dropped = trunc_divmod(value.mantissa, pow10(value.scale - target))
    if dropped > 0:
        head += 1
    return BigFloat(head, target)
