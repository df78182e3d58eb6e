"""
Units — Единицы фиксированной точки и basis points

Единственный допустимый способ описания величин для PercentageEngine:
- Amount (беззнаковое целое, масштаб 10**6 / 10**18 знает только вызывающий)
- BasisPoints (беззнаковое целое, 10000 = 100%)

Типы — pydantic Annotated-алиасы: валидация выполняется на границе
(validate_call в strict-режиме), отрицательные и нецелые значения отвергаются.
"""

from typing import Annotated, Final

from pydantic import ConfigDict, Field, validate_call

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# 10000 bps = 100%
BASIS_POINTS_DENOMINATOR: Final[int] = 10_000

# 100 bps = 1%
BPS_PER_PERCENT: Final[int] = 100


# =============================================================================
# ТИПЫ
# =============================================================================

Amount = Annotated[
    int,
    Field(ge=0, description="Fixed-point amount scaled by a caller-known factor."),
]

BasisPoints = Annotated[
    int,
    Field(ge=0, description="A value in basis points (1/10000). Values above 10000 are valid."),
]

Iterations = Annotated[int, Field(ge=0, description="Number of compounding steps.")]

PrecisionFactor = Annotated[
    int,
    Field(ge=0, description="Intermediate scale factor; zero is rejected with DivisionByZero."),
]


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


@validate_call(config=ConfigDict(strict=True))
def percent_to_bps(whole_percent: Annotated[int, Field(ge=0)]) -> int:
    """
    Конверсия: целые проценты → basis points

    Args:
        whole_percent: Проценты (например, 5 = 5%)

    Returns:
        Basis points (5% → 500)

    Raises:
        pydantic.ValidationError: если whole_percent отрицательный или не int
    """
    return whole_percent * BPS_PER_PERCENT


@validate_call(config=ConfigDict(strict=True))
def bps_to_percent(bps: BasisPoints) -> int:
    """
    Конверсия: basis points → целые проценты (с отбрасыванием дробной части)

    Args:
        bps: Basis points

    Returns:
        Целые проценты (550 bps → 5)
    """
    return bps // BPS_PER_PERCENT
