"""
PrecisionLimits — Конфигурация пределов сходимости

Пределы дробных разрядов для операций, результат которых не обязан
завершаться конечной десятичной дробью:
- division_digits: деление (усечение, не округление)
- sqrt_digits: Newton-Raphson для квадратного корня
- exp_digits: ряд Тейлора для exp
- log_digits: ряд для log (намеренно грубый, 10 разрядов)

Значения по умолчанию являются контрактом точности библиотеки.
Изменение default меняет младшие разряды всех бесконечных дробей.
"""

from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# DEFAULTS
# =============================================================================

# Максимум дробных разрядов частного (1/3 → 1000 троек)
DIVISION_DIGITS_DEFAULT: Final[int] = 1000

# Разряды, на которых проверяется сходимость sqrt и exp
SQRT_DIGITS_DEFAULT: Final[int] = DIVISION_DIGITS_DEFAULT - 1
EXP_DIGITS_DEFAULT: Final[int] = DIVISION_DIGITS_DEFAULT - 1

# Ряд логарифма сходится медленно, поэтому проверка только на 10 разрядах
LOG_DIGITS_DEFAULT: Final[int] = 10


# =============================================================================
# CONFIG
# =============================================================================


class PrecisionLimits(BaseModel):
    """
    Пределы точности итеративных алгоритмов.

    Immutable модель; передаётся в функции math-слоя опционально,
    при None используется DEFAULT_LIMITS.
    """

    division_digits: int = Field(
        DIVISION_DIGITS_DEFAULT, ge=1, description="Дробные разряды частного"
    )
    sqrt_digits: int = Field(
        SQRT_DIGITS_DEFAULT, ge=1, description="Разряды сходимости sqrt"
    )
    exp_digits: int = Field(
        EXP_DIGITS_DEFAULT, ge=1, description="Разряды сходимости exp"
    )
    log_digits: int = Field(
        LOG_DIGITS_DEFAULT, ge=1, description="Разряды сходимости log"
    )

    model_config = {"frozen": True}


DEFAULT_LIMITS: Final[PrecisionLimits] = PrecisionLimits()
