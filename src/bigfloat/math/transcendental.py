"""
Transcendental Engine — exp, log, sqrt, pow и тригонометрия

Итеративные алгоритмы с фиксированными пределами сходимости
(см. config.PrecisionLimits):
- exp: ряд Тейлора Σ x^n / n!, сходимость на exp_digits разрядах
- sqrt: Newton-Raphson, сходимость на sqrt_digits разрядах
- log: знакопеременный ряд для ln(1 ± x) после сведения аргумента,
  сходимость только на log_digits (10) разрядах
- pow: точное целое возведение, возведение квадратированием или
  exp(y * log(x))

Итерация останавливается, когда округлённый результат перестаёт
меняться. Ограничения числа итераций нет: для конечных аргументов
ряды сходятся.

Тригонометрия и гиперболические функции вычисляются в double
(numpy ufuncs) и конвертируются обратно; точность — double.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Доменные ошибки дают NaN/Infinity, исключения не бросаются
2. Результат exp/sqrt округлён до exp_digits/sqrt_digits разрядов
3. Результат log округлён до log_digits разрядов
"""

import logging
from typing import Final

import numpy as np

from bigfloat.codec.native import from_numpy_float, to_float
from bigfloat.config import DEFAULT_LIMITS, PrecisionLimits
from bigfloat.constants import NAN, ONE, ZERO, ln10
from bigfloat.domain.bigfloat import BigFloat, divide
from bigfloat.math.rounding import round_half_away

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

TWO: Final[BigFloat] = BigFloat(2)
FOUR: Final[BigFloat] = BigFloat(4)
TEN: Final[BigFloat] = BigFloat(10)

# Верхняя граница показателя для точного целочисленного возведения
INT32_MAX: Final[int] = 2**31 - 1


# =============================================================================
# EXP
# =============================================================================


def exp(value: BigFloat, limits: PrecisionLimits | None = None) -> BigFloat:
    """
    Экспонента e^x.

    -Infinity → 0; +Infinity и NaN возвращаются без изменений.

    Args:
        value: Показатель
        limits: Пределы точности (default: DEFAULT_LIMITS)

    Returns:
        e^x, округлённое до limits.exp_digits дробных разрядов

    Examples:
        >>> exp(BigFloat(0))
        BigFloat('1')
    """
    if value.is_negative_infinity:
        return ZERO
    if not value.is_finite:
        return value

    limits = limits or DEFAULT_LIMITS
    digits = limits.exp_digits

    last, total = ZERO, ONE
    n, factorial = 1, 1
    power_term = value
    while round_half_away(total, digits) != round_half_away(last, digits):
        last = total
        factorial *= n
        total = total + divide(power_term, BigFloat(factorial), limits)
        power_term = power_term * value
        n += 1

    logger.debug("exp_converged", extra={"terms": n - 1, "digits": digits})
    return round_half_away(total, digits)


# =============================================================================
# SQRT
# =============================================================================


def sqrt(value: BigFloat, limits: PrecisionLimits | None = None) -> BigFloat:
    """
    Квадратный корень (Newton-Raphson).

    0, +Infinity и NaN возвращаются без изменений; отрицательное → NaN.

    Начальное приближение x / 2; итерация root = (root + x / root) / 2
    до совпадения двух последовательных приближений на sqrt_digits
    разрядах. Начиная со второго шага последовательность убывает;
    если усечение деления останавливает убывание, итерация завершается.

    Examples:
        >>> sqrt(BigFloat(4))
        BigFloat('2')
        >>> sqrt(BigFloat(-1))
        BigFloat('NaN')
    """
    if value.is_zero or value.is_positive_infinity or value.is_nan:
        return value
    if value.sign == -1:
        return NAN

    limits = limits or DEFAULT_LIMITS
    digits = limits.sqrt_digits

    root = divide(value, TWO, limits)
    iterations = 0
    while True:
        next_root = divide(root + divide(value, root, limits), TWO, limits)
        iterations += 1
        converged = round_half_away(next_root, digits) == round_half_away(root, digits)
        stalled = iterations > 1 and next_root >= root
        root = next_root
        if converged or stalled:
            break

    logger.debug("sqrt_converged", extra={"iterations": iterations, "digits": digits})
    return round_half_away(root, digits)


# =============================================================================
# LOG
# =============================================================================


def log(value: BigFloat, limits: PrecisionLimits | None = None) -> BigFloat:
    """
    Натуральный логарифм.

    Неположительный аргумент (включая -Infinity) → NaN; +Infinity → +Infinity.

    Сведение аргумента:
        x < 1       → -Σ (1 - x)^n / n
        1 <= x < 2  → Σ (-1)^(n+1) (x - 1)^n / n
        2 <= x < 4  → 2 · log(√x)
        4 <= x <= 10 → 4 · log(⁴√x)
        x > 10      → log(x / 10^k) + k · ln(10)

    Returns:
        ln(x), округлённый до limits.log_digits (10) дробных разрядов
    """
    if value.sign != 1:
        return NAN
    if not value.is_finite:
        return value

    limits = limits or DEFAULT_LIMITS

    if value < ONE:
        negative_series = True
        x = ONE - value
    elif value < TWO:
        negative_series = False
        x = value - ONE
    elif value < FOUR:
        return log(sqrt(value, limits), limits) * TWO
    elif value <= TEN:
        return log(sqrt(sqrt(value, limits), limits), limits) * FOUR
    else:
        shifts = 0
        reduced = value
        while reduced > TEN:
            reduced = BigFloat(reduced.mantissa, reduced.scale + 1)
            shifts += 1
        return log(reduced, limits) + BigFloat(shifts) * ln10()

    digits = limits.log_digits
    last, total = ONE, ZERO
    n = 1
    power_term = x
    while round_half_away(total, digits) != round_half_away(last, digits):
        last = total
        term = divide(power_term, BigFloat(n), limits)
        if n % 2 == 0 or negative_series:
            total = total - term
        else:
            total = total + term
        power_term = power_term * x
        n += 1

    logger.debug("log_converged", extra={"terms": n - 1, "digits": digits})
    return round_half_away(total, digits)


def log_base(
    value: BigFloat, base: BigFloat, limits: PrecisionLimits | None = None
) -> BigFloat:
    """log_base(x) = log(x) / log(base)"""
    return divide(log(value, limits), log(base, limits), limits)


def log10(value: BigFloat, limits: PrecisionLimits | None = None) -> BigFloat:
    """log10(x) = log(x) / ln(10)"""
    return divide(log(value, limits), ln10(), limits)


# =============================================================================
# POW
# =============================================================================


def _pow_by_squaring(base: BigFloat, exponent: int, limits: PrecisionLimits) -> BigFloat:
    if exponent == 0:
        return ONE
    if exponent < 0:
        base = divide(ONE, base, limits)
        exponent = -exponent

    result = ONE
    while exponent > 1:
        if exponent % 2 == 0:
            base = base * base
            exponent //= 2
        else:
            result = result * base
            base = base * base
            exponent = (exponent - 1) // 2
    return base * result


def power(
    base: BigFloat, exponent: BigFloat, limits: PrecisionLimits | None = None
) -> BigFloat:
    """
    Возведение в степень x^y.

    Порядок:
    1. NaN в любом операнде → NaN
    2. y == 0 → 1 (включая 0^0)
    3. Sentinel в любом операнде → double-арифметика
    4. Целый y, целый x, 0 <= y <= INT32_MAX → точное целое возведение
    5. Целый y иначе → возведение квадратированием (y < 0 через 1/x)
    6. Дробный y → exp(y · log(x))

    Examples:
        >>> power(BigFloat(2), BigFloat(10))
        BigFloat('1024')
        >>> power(BigFloat(15, 1), BigFloat(2))
        BigFloat('2.25')
    """
    if base.is_nan or exponent.is_nan:
        return NAN
    if exponent.is_zero:
        return ONE

    limits = limits or DEFAULT_LIMITS

    if not base.is_finite or not exponent.is_finite:
        logger.debug("power_double_fallback", extra={"base": str(base), "exponent": str(exponent)})
        return _delegate(np.power, base, exponent)

    if exponent.scale == 0:
        if base.scale == 0 and 0 <= exponent.mantissa <= INT32_MAX:
            return BigFloat(base.mantissa**exponent.mantissa)
        return _pow_by_squaring(base, exponent.mantissa, limits)

    return exp(exponent * log(base, limits), limits)


# =============================================================================
# DOUBLE-PRECISION DELEGATES
# =============================================================================


def _delegate(ufunc, *operands: BigFloat) -> BigFloat:
    # IEEE-результаты (nan/inf) вместо ValueError/OverflowError модуля math
    with np.errstate(all="ignore"):
        result = ufunc(*(np.float64(to_float(op)) for op in operands))
    return from_numpy_float(np.float64(result))


def sin(value: BigFloat) -> BigFloat:
    return _delegate(np.sin, value)


def cos(value: BigFloat) -> BigFloat:
    return _delegate(np.cos, value)


def tan(value: BigFloat) -> BigFloat:
    return _delegate(np.tan, value)


def asin(value: BigFloat) -> BigFloat:
    return _delegate(np.arcsin, value)


def acos(value: BigFloat) -> BigFloat:
    return _delegate(np.arccos, value)


def atan(value: BigFloat) -> BigFloat:
    return _delegate(np.arctan, value)


def atan2(y: BigFloat, x: BigFloat) -> BigFloat:
    """Угол вектора (x, y) с учётом квадранта."""
    return _delegate(np.arctan2, y, x)


def sinh(value: BigFloat) -> BigFloat:
    return _delegate(np.sinh, value)


def cosh(value: BigFloat) -> BigFloat:
    return _delegate(np.cosh, value)


def tanh(value: BigFloat) -> BigFloat:
    return _delegate(np.tanh, value)
