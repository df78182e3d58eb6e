"""
Domain value types.

Contains the fixed-point unit types: Amount, BasisPoints and converters.
"""

from src.core.domain.units import (
    BASIS_POINTS_DENOMINATOR,
    BPS_PER_PERCENT,
    Amount,
    BasisPoints,
    Iterations,
    PrecisionFactor,
    bps_to_percent,
    percent_to_bps,
)

__all__ = [
    "BASIS_POINTS_DENOMINATOR",
    "BPS_PER_PERCENT",
    "Amount",
    "BasisPoints",
    "Iterations",
    "PrecisionFactor",
    "bps_to_percent",
    "percent_to_bps",
]
