"""PercentageEngine — basis-point арифметика с фиксированной шириной целого.

Движок не хранит состояния кроме неизменяемой конфигурации, поэтому один
экземпляр можно разделять между потоками. Все вычисления выполняются
чистыми функциями из src.core.math.percentage.
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from src.core.math.integer_safeguards import DEFAULT_UINT_BITS, max_uint, validate_bits
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


@dataclass(frozen=True)
class PercentageEngineConfig:
    """Конфигурация PercentageEngine.

    bits — ширина беззнакового целого, в пределах которой проверяется
    переполнение (256 соответствует uint256).
    """

    bits: int = DEFAULT_UINT_BITS

    def __post_init__(self) -> None:
        validate_bits(self.bits)


class PercentageEngine:
    """Фасад basis-point арифметики.

    Методы повторяют функции модуля percentage, подставляя ширину из
    конфигурации:
    - percentage / percentage_with_steps / percentage_with_precision
    - what_percentage
    - compound / compound_trajectory / increase / decrease
    - diff
    """

    def __init__(self, config: Optional[PercentageEngineConfig] = None):
        """
        Args:
            config: конфигурация движка (опционально, используется default)
        """
        self.config = config or PercentageEngineConfig()
        logger.debug(f"PercentageEngine initialised: uint{self.config.bits}")

    @property
    def bits(self) -> int:
        return self.config.bits

    @property
    def max_value(self) -> int:
        """Наибольшее представимое значение (2**bits - 1)."""
        return max_uint(self.config.bits)

    def percentage(self, value: int, percentage_bps: int) -> int:
        return calculate_percentage(value, percentage_bps, bits=self.bits)

    def percentage_with_steps(self, value: int, percentage_bps: int) -> PercentageSteps:
        return calculate_percentage_with_steps(value, percentage_bps, bits=self.bits)

    def percentage_with_precision(
        self, value: int, percentage_bps: int, precision_factor: int
    ) -> int:
        return calculate_percentage_with_precision(
            value, percentage_bps, precision_factor, bits=self.bits
        )

    def what_percentage(self, part: int, whole: int) -> int:
        return calculate_what_percentage(part, whole, bits=self.bits)

    def compound(self, value: int, percentage_bps: int, iterations: int) -> int:
        return calculate_compound_percentage(value, percentage_bps, iterations, bits=self.bits)

    def compound_trajectory(
        self, value: int, percentage_bps: int, iterations: int
    ) -> list[int]:
        return calculate_compound_trajectory(value, percentage_bps, iterations, bits=self.bits)

    def increase(self, value: int, percentage_bps: int) -> int:
        return apply_percentage_increase(value, percentage_bps, bits=self.bits)

    def decrease(self, value: int, percentage_bps: int) -> int:
        return apply_percentage_decrease(value, percentage_bps, bits=self.bits)

    def diff(self, value1: int, value2: int) -> PercentageDiff:
        return calculate_percentage_diff(value1, value2, bits=self.bits)
