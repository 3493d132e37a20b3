"""
Constants — общие значения BigFloat

Sentinel и базовые значения создаются при импорте. PI и Ln10 хранятся
как wire-блобы (см. codec.binary) и декодируются при первом обращении;
E вычисляется как exp(1) при первом обращении. Все результаты
кэшируются на процесс и не меняются.
"""

from functools import lru_cache
from typing import Final

from bigfloat.codec.binary import from_bytes
from bigfloat.domain.bigfloat import BigFloat


# =============================================================================
# BASIC VALUES
# =============================================================================

ZERO: Final[BigFloat] = BigFloat(0)
ONE: Final[BigFloat] = BigFloat(1)
POSITIVE_INFINITY: Final[BigFloat] = BigFloat.positive_infinity()
NEGATIVE_INFINITY: Final[BigFloat] = BigFloat.negative_infinity()
NAN: Final[BigFloat] = BigFloat.nan()


# =============================================================================
# EMBEDDED HIGH-PRECISION VALUES
# =============================================================================

# PI, 57 дробных разрядов
_PI_WIRE: Final[bytes] = bytes.fromhex(
    "39000000"
    "2e09cf682891e532df626237d370bd220523305efac11f8000"
)

# ln(10), 100 дробных разрядов (ряд логарифма со сходимостью на 100 разрядах)
_LN10_WIRE: Final[bytes] = bytes.fromhex(
    "64000000"
    "8851810aa003dd3df0ad423c70dd55fc52fbeba33a0425342a191365022a8ca5d8a800c7f1944bf51b2a"
)


@lru_cache(maxsize=None)
def pi() -> BigFloat:
    return from_bytes(_PI_WIRE)


@lru_cache(maxsize=None)
def ln10() -> BigFloat:
    return from_bytes(_LN10_WIRE)


@lru_cache(maxsize=None)
def e() -> BigFloat:
    """exp(1) с пределами по умолчанию."""
    from bigfloat.math.transcendental import exp

    return exp(ONE)
