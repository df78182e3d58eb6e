"""
Percentage — Basis-Point Fixed-Point Arithmetic

Модуль вычисляет проценты над беззнаковыми целыми фиксированной ширины:
- Доля от суммы: floor(value * bps / 10000)
- Обратная операция: какую долю (в bps) part составляет от whole
- Сложный рост (compounding) с шагом bps
- Изменение между двумя значениями в bps с флагом направления

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Округление всегда к нулю (floor для неотрицательных операндов); это
   документированное поведение, а не дефект
2. Переполнение промежуточного произведения/суммы → ArithmeticOverflow
3. Нулевой делитель → DivisionByZero
4. Ошибка не сопровождается частичным результатом
5. Функции чистые: без состояния и побочных эффектов

ФОРМУЛЫ:
    percentage(v, p)          = floor(v * p / 10000)
    what_percentage(part, w)  = floor(part * 10000 / w)
    compound(v, p, n):  r_0 = v,  r_i = r_{i-1} + percentage(r_{i-1}, p)
    diff(v1, v2)              = (what_percentage(|v1 - v2|, v2), v1 >= v2)
"""

from typing import NamedTuple

from pydantic import ConfigDict, validate_call

from src.core.domain.units import (
    BASIS_POINTS_DENOMINATOR,
    Amount,
    BasisPoints,
    Iterations,
    PrecisionFactor,
)
from src.core.math.integer_safeguards import (
    DEFAULT_UINT_BITS,
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    require_nonzero,
    validate_bits,
    validate_uint,
)

# Строгая валидация входов: только int, без bool/float/str
_STRICT = ConfigDict(strict=True)


# =============================================================================
# РЕЗУЛЬТАТЫ
# =============================================================================


class PercentageSteps(NamedTuple):
    """Промежуточные значения calculate_percentage (для диагностики)."""

    product: int  # value * percentage_bps до деления
    quotient: int  # product // 10000
    result: int  # == quotient


class PercentageDiff(NamedTuple):
    """Изменение value1 относительно value2."""

    change_bps: int  # Модуль изменения в bps
    is_increase: bool  # True при value1 >= value2 (ничья → increase)


# =============================================================================
# ВНУТРЕННИЕ ПРИМИТИВЫ
# =============================================================================


def _check_inputs(bits: int, **operands: int) -> None:
    validate_bits(bits)
    for name, operand in operands.items():
        validate_uint(operand, name, bits)


def _percentage(value: int, percentage_bps: int, bits: int) -> int:
    product = checked_mul(value, percentage_bps, bits)
    return product // BASIS_POINTS_DENOMINATOR


def _what_percentage(part: int, whole: int, bits: int) -> int:
    # Делитель проверяется до умножения
    require_nonzero(whole, name="whole")
    scaled = checked_mul(part, BASIS_POINTS_DENOMINATOR, bits)
    return checked_div(scaled, whole, name="whole")


def _compound_step(current: int, percentage_bps: int, bits: int) -> int:
    return checked_add(current, _percentage(current, percentage_bps, bits), bits)


# =============================================================================
# PERCENTAGE OF VALUE
# =============================================================================


@validate_call(config=_STRICT)
def calculate_percentage(
    value: Amount,
    percentage_bps: BasisPoints,
    *,
    bits: int = DEFAULT_UINT_BITS,
) -> int:
    """
    Доля percentage_bps от value.

    Формула: floor(value * percentage_bps / 10000)

    Округление к нулю намеренное: для сохранения точности вызывающий код
    должен заранее масштабировать value.

    Args:
        value: Сумма (fixed-point, масштаб задаёт вызывающий)
        percentage_bps: Процент в basis points (10000 = 100%)
        bits: Ширина целого для проверки переполнения

    Returns:
        Доля от value в тех же единицах

    Raises:
        ArithmeticOverflow: если value * percentage_bps > 2**bits - 1
        pydantic.ValidationError: если вход отрицательный или не int

    Examples:
        >>> calculate_percentage(1000, 500)  # 5% от 1000
        50
        >>> calculate_percentage(99, 100)  # 1% от 99, отброшено
        0
    """
    _check_inputs(bits, value=value, percentage_bps=percentage_bps)
    return _percentage(value, percentage_bps, bits)


@validate_call(config=_STRICT)
def calculate_percentage_with_steps(
    value: Amount,
    percentage_bps: BasisPoints,
    *,
    bits: int = DEFAULT_UINT_BITS,
) -> PercentageSteps:
    """
    То же, что calculate_percentage, но с промежуточным произведением.

    Returns:
        PercentageSteps(product, quotient, result), где quotient == result

    Raises:
        ArithmeticOverflow: если value * percentage_bps > 2**bits - 1

    Examples:
        >>> calculate_percentage_with_steps(1000, 500)
        PercentageSteps(product=500000, quotient=50, result=50)
    """
    _check_inputs(bits, value=value, percentage_bps=percentage_bps)
    product = checked_mul(value, percentage_bps, bits)
    quotient = product // BASIS_POINTS_DENOMINATOR
    return PercentageSteps(product=product, quotient=quotient, result=quotient)


@validate_call(config=_STRICT)
def calculate_percentage_with_precision(
    value: Amount,
    percentage_bps: BasisPoints,
    precision_factor: PrecisionFactor,
    *,
    bits: int = DEFAULT_UINT_BITS,
) -> int:
    """
    Доля с промежуточным масштабированием на precision_factor.

    Формула: floor(floor(value * percentage_bps * precision_factor / 10000) / precision_factor)

    ВНИМАНИЕ: итоговое значение совпадает с calculate_percentage (оба деления
    сводятся к одному floor). Функция оставляет воспроизводимый путь
    вычисления, но не добавляет дробной точности. Для настоящей суб-единичной
    точности храните результат без деления на precision_factor и отслеживайте
    масштаб явно.

    Args:
        value: Сумма
        percentage_bps: Процент в basis points
        precision_factor: Промежуточный множитель (> 0)
        bits: Ширина целого

    Raises:
        DivisionByZero: если precision_factor == 0
        ArithmeticOverflow: если value * percentage_bps * precision_factor > 2**bits - 1

    Examples:
        >>> calculate_percentage_with_precision(99, 100, 100)
        0
    """
    _check_inputs(
        bits, value=value, percentage_bps=percentage_bps, precision_factor=precision_factor
    )
    require_nonzero(precision_factor, name="precision_factor")

    scaled = checked_mul(checked_mul(value, percentage_bps, bits), precision_factor, bits)
    scaled_result = scaled // BASIS_POINTS_DENOMINATOR
    return checked_div(scaled_result, precision_factor, name="precision_factor")


# =============================================================================
# WHAT PERCENTAGE
# =============================================================================


@validate_call(config=_STRICT)
def calculate_what_percentage(
    part: Amount,
    whole: Amount,
    *,
    bits: int = DEFAULT_UINT_BITS,
) -> int:
    """
    Какую долю (в bps) part составляет от whole.

    Формула: floor(part * 10000 / whole)

    Ограничения part <= whole нет: результат может превышать 10000 (>100%).

    Raises:
        DivisionByZero: если whole == 0
        ArithmeticOverflow: если part * 10000 > 2**bits - 1

    Examples:
        >>> calculate_what_percentage(50, 1000)
        500
        >>> calculate_what_percentage(150, 100)
        15000
    """
    _check_inputs(bits, part=part, whole=whole)
    return _what_percentage(part, whole, bits)


# =============================================================================
# COMPOUNDING
# =============================================================================


@validate_call(config=_STRICT)
def calculate_compound_percentage(
    value: Amount,
    percentage_bps: BasisPoints,
    iterations: Iterations,
    *,
    bits: int = DEFAULT_UINT_BITS,
) -> int:
    """
    Сложный рост value на percentage_bps за iterations шагов.

    r_0 = value
    r_i = r_{i-1} + calculate_percentage(r_{i-1}, percentage_bps)

    Каждый шаг округляется к нулю отдельно. Ошибка на любом шаге прерывает
    весь вызов: частичный результат не возвращается.

    Args:
        value: Начальная сумма
        percentage_bps: Рост за шаг в basis points
        iterations: Количество шагов (0 → value без изменений)
        bits: Ширина целого

    Raises:
        ArithmeticOverflow: на первом шаге, где произведение или сумма переполняется

    Examples:
        >>> calculate_compound_percentage(100, 500, 2)  # 100 → 105 → 110.25
        110
        >>> calculate_compound_percentage(100, 500, 0)
        100
    """
    _check_inputs(bits, value=value, percentage_bps=percentage_bps)

    # Храним только текущее значение: память не растёт с iterations
    current = value
    for _ in range(iterations):
        current = _compound_step(current, percentage_bps, bits)
    return current


@validate_call(config=_STRICT)
def calculate_compound_trajectory(
    value: Amount,
    percentage_bps: BasisPoints,
    iterations: Iterations,
    *,
    bits: int = DEFAULT_UINT_BITS,
) -> list[int]:
    """
    Полная траектория сложного роста.

    Returns:
        [r_0, r_1, ..., r_iterations] длины iterations + 1

    Raises:
        ArithmeticOverflow: как в calculate_compound_percentage

    Examples:
        >>> calculate_compound_trajectory(100, 500, 2)
        [100, 105, 110]
        >>> calculate_compound_trajectory(100, 500, 0)
        [100]
    """
    _check_inputs(bits, value=value, percentage_bps=percentage_bps)

    trajectory = [value]
    for _ in range(iterations):
        trajectory.append(_compound_step(trajectory[-1], percentage_bps, bits))
    return trajectory


@validate_call(config=_STRICT)
def apply_percentage_increase(
    value: Amount,
    percentage_bps: BasisPoints,
    *,
    bits: int = DEFAULT_UINT_BITS,
) -> int:
    """
    value + calculate_percentage(value, percentage_bps): один шаг роста.

    Examples:
        >>> apply_percentage_increase(1000, 250)
        1025
    """
    _check_inputs(bits, value=value, percentage_bps=percentage_bps)
    return _compound_step(value, percentage_bps, bits)


@validate_call(config=_STRICT)
def apply_percentage_decrease(
    value: Amount,
    percentage_bps: BasisPoints,
    *,
    bits: int = DEFAULT_UINT_BITS,
) -> int:
    """
    value - calculate_percentage(value, percentage_bps).

    Raises:
        ValueError: если percentage_bps > 10000 (результат стал бы отрицательным)

    Examples:
        >>> apply_percentage_decrease(1000, 250)
        975
    """
    _check_inputs(bits, value=value, percentage_bps=percentage_bps)
    if percentage_bps > BASIS_POINTS_DENOMINATOR:
        raise ValueError(
            f"percentage_bps must be <= {BASIS_POINTS_DENOMINATOR} for a decrease, "
            f"got {percentage_bps}"
        )
    return checked_sub(value, _percentage(value, percentage_bps, bits))


# =============================================================================
# PERCENTAGE DIFF
# =============================================================================


@validate_call(config=_STRICT)
def calculate_percentage_diff(
    value1: Amount,
    value2: Amount,
    *,
    bits: int = DEFAULT_UINT_BITS,
) -> PercentageDiff:
    """
    Изменение value1 относительно базы value2 в bps и направление.

    value1 >= value2 → (what_percentage(value1 - value2, value2), True)
    value1 <  value2 → (what_percentage(value2 - value1, value2), False)

    Равные значения дают (0, True): ничья разрешается в пользу increase
    сравнением >=.

    Raises:
        DivisionByZero: если value2 == 0
        ArithmeticOverflow: если |value1 - value2| * 10000 > 2**bits - 1

    Examples:
        >>> calculate_percentage_diff(150, 100)
        PercentageDiff(change_bps=5000, is_increase=True)
        >>> calculate_percentage_diff(50, 100)
        PercentageDiff(change_bps=5000, is_increase=False)
        >>> calculate_percentage_diff(100, 100)
        PercentageDiff(change_bps=0, is_increase=True)
    """
    _check_inputs(bits, value1=value1, value2=value2)

    if value1 >= value2:
        change_bps = _what_percentage(checked_sub(value1, value2), value2, bits)
        return PercentageDiff(change_bps=change_bps, is_increase=True)

    change_bps = _what_percentage(checked_sub(value2, value1), value2, bits)
    return PercentageDiff(change_bps=change_bps, is_increase=False)
