"""
Core math modules

Целочисленная basis-point арифметика с явной проверкой переполнения.
"""

# Integer Safeguards
from src.core.math.integer_safeguards import (
    # Width constants
    DEFAULT_UINT_BITS,
    MAX_UINT_BITS,
    UINT64_MAX,
    UINT128_MAX,
    UINT256_MAX,
    # Exceptions
    ArithmeticOverflow,
    DivisionByZero,
    PercentageMathError,
    # Checked arithmetic
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    is_multiplication_safe,
    # Validation
    max_uint,
    require_nonzero,
    validate_bits,
    validate_uint,
)

# Percentage
from src.core.math.percentage import (
    PercentageDiff,
    PercentageSteps,
    apply_percentage_decrease,
    apply_percentage_increase,
    calculate_compound_percentage,
    calculate_compound_trajectory,
    calculate_percentage,
    calculate_percentage_diff,
    calculate_percentage_with_precision,
    calculate_percentage_with_steps,
    calculate_what_percentage,
)

__all__ = [
    # Integer Safeguards — Constants
    "DEFAULT_UINT_BITS",
    "MAX_UINT_BITS",
    "UINT64_MAX",
    "UINT128_MAX",
    "UINT256_MAX",
    # Integer Safeguards — Exceptions
    "ArithmeticOverflow",
    "DivisionByZero",
    "PercentageMathError",
    # Integer Safeguards — Checked arithmetic
    "checked_add",
    "checked_div",
    "checked_mul",
    "checked_sub",
    "is_multiplication_safe",
    # Integer Safeguards — Validation
    "max_uint",
    "require_nonzero",
    "validate_bits",
    "validate_uint",
    # Percentage — Types
    "PercentageDiff",
    "PercentageSteps",
    # Percentage — Functions
    "apply_percentage_decrease",
    "apply_percentage_increase",
    "calculate_compound_percentage",
    "calculate_compound_trajectory",
    "calculate_percentage",
    "calculate_percentage_diff",
    "calculate_percentage_with_precision",
    "calculate_percentage_with_steps",
    "calculate_what_percentage",
]
