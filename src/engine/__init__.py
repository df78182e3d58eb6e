"""PercentageEngine — объектная обёртка над basis-point арифметикой.

- Конфигурация ширины целого (uint64 ... uint256)
- Делегирование в чистые функции src.core.math.percentage
"""

from .percentage_engine import (
    PercentageEngine,
    PercentageEngineConfig,
)

__all__ = [
    "PercentageEngine",
    "PercentageEngineConfig",
]
