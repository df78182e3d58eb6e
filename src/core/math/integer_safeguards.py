"""
Integer Safeguards — Checked Fixed-Width Unsigned Arithmetic

Модуль обеспечивает явную проверку переполнения для беззнаковых целых
фиксированной ширины (uint64 ... uint256):
- Checked add/sub/mul с исключением вместо wraparound
- Floor-деление с защитой от деления на ноль
- Валидация ширины и диапазона операндов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение никогда не "заворачивается": результат > 2**bits - 1 → ArithmeticOverflow
2. Деление на ноль никогда не происходит: делитель 0 → DivisionByZero
3. Частичные результаты не возвращаются вместе с ошибкой
4. Все операции детерминированы и воспроизводимы
"""

from typing import Final

from loguru import logger

# =============================================================================
# ШИРИНА ЦЕЛЫХ
# =============================================================================

# Ширина по умолчанию: EVM uint256
DEFAULT_UINT_BITS: Final[int] = 256

# Максимально допустимая ширина
MAX_UINT_BITS: Final[int] = 256

UINT64_MAX: Final[int] = 2**64 - 1
UINT128_MAX: Final[int] = 2**128 - 1
UINT256_MAX: Final[int] = 2**256 - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PercentageMathError(ArithmeticError):
    """Базовое исключение целочисленной арифметики процентов."""


class ArithmeticOverflow(PercentageMathError, OverflowError):
    """
    Промежуточный результат вышел за пределы [0, 2**bits - 1].

    Не восстанавливается внутри вызова: вызывающий код должен использовать
    большую ширину либо заранее ограничить/масштабировать входы.
    """


class DivisionByZero(PercentageMathError, ZeroDivisionError):
    """
    Делитель (whole, value2 или precision_factor) равен нулю.

    Всегда исправляется на стороне вызывающего: проверить положительность
    до вызова.
    """


# =============================================================================
# ШИРИНА И ДИАПАЗОН
# =============================================================================


def validate_bits(bits: int) -> int:
    """
    Валидация ширины целого.

    Args:
        bits: Ширина в битах (кратна 8, 8..256)

    Returns:
        bits без изменений

    Raises:
        TypeError: если bits не int (bool тоже отвергается)
        ValueError: если ширина не кратна 8 или вне диапазона (0, 256]
    """
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise TypeError(f"bits must be an int, got {type(bits).__name__}")

    if bits <= 0 or bits > MAX_UINT_BITS or bits % 8 != 0:
        raise ValueError(
            f"bits must be a positive multiple of 8 not greater than {MAX_UINT_BITS}, got {bits}"
        )

    return bits


def max_uint(bits: int = DEFAULT_UINT_BITS) -> int:
    """
    Максимальное представимое значение для ширины bits.

    Examples:
        >>> max_uint(8)
        255
        >>> max_uint(64) == UINT64_MAX
        True
    """
    return (1 << validate_bits(bits)) - 1


def validate_uint(value: int, name: str, bits: int = DEFAULT_UINT_BITS) -> int:
    """
    Валидация, что value — беззнаковое целое, представимое в bits.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        bits: Ширина целого

    Returns:
        value без изменений

    Raises:
        TypeError: если value не int (bool тоже отвергается)
        ValueError: если value < 0
        ArithmeticOverflow: если value > 2**bits - 1
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

    limit = max_uint(bits)
    if value > limit:
        logger.debug(f"uint{bits} range exceeded: {name}={value}")
        raise ArithmeticOverflow(f"{name}={value} does not fit in uint{bits}")

    return value


# =============================================================================
# CHECKED ARITHMETIC
# =============================================================================


def is_multiplication_safe(a: int, b: int, bits: int = DEFAULT_UINT_BITS) -> bool:
    """
    Проверка без исключения на переполнение: помещается ли a * b в uint{bits}.

    Raises:
        ValueError: если a или b отрицательные

    Examples:
        >>> is_multiplication_safe(2**128, 2**127)
        True
        >>> is_multiplication_safe(2**128, 2**128)
        False
    """
    if a < 0 or b < 0:
        raise ValueError(f"operands must be non-negative, got {a} * {b}")
    return a * b <= max_uint(bits)


def checked_mul(a: int, b: int, bits: int = DEFAULT_UINT_BITS) -> int:
    """
    Умножение с проверкой переполнения.

    Python int не переполняется, поэтому произведение вычисляется точно и
    сравнивается с границей ширины (эквивалент wide accumulator).

    Raises:
        ArithmeticOverflow: если a * b > 2**bits - 1

    Examples:
        >>> checked_mul(1000, 500)
        500000
        >>> checked_mul(2**255, 2)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ArithmeticOverflow: ...
    """
    if not is_multiplication_safe(a, b, bits):
        logger.debug(f"uint{bits} multiplication overflow: {a} * {b}")
        raise ArithmeticOverflow(f"Multiplication overflow in uint{bits}: {a} * {b}")
    return a * b


def checked_add(a: int, b: int, bits: int = DEFAULT_UINT_BITS) -> int:
    """
    Сложение с проверкой переполнения.

    Raises:
        ArithmeticOverflow: если a + b > 2**bits - 1
    """
    total = a + b
    if total > max_uint(bits):
        logger.debug(f"uint{bits} addition overflow: {a} + {b}")
        raise ArithmeticOverflow(f"Addition overflow in uint{bits}: {a} + {b}")
    return total


def checked_sub(a: int, b: int) -> int:
    """
    Вычитание без ухода ниже нуля.

    Raises:
        ArithmeticOverflow: если b > a (underflow)
    """
    if b > a:
        logger.debug(f"unsigned subtraction underflow: {a} - {b}")
        raise ArithmeticOverflow(f"Subtraction underflow: {a} - {b}")
    return a - b


def require_nonzero(denominator: int, name: str = "denominator") -> int:
    """
    Проверка делителя до любых вычислений.

    Raises:
        DivisionByZero: если denominator == 0
    """
    if denominator == 0:
        logger.debug(f"division by zero: {name}=0")
        raise DivisionByZero(f"{name} must be non-zero")
    return denominator


def checked_div(numerator: int, denominator: int, name: str = "denominator") -> int:
    """
    Floor-деление с защитой от деления на ноль.

    Для неотрицательных операндов floor совпадает с округлением к нулю.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        name: Имя знаменателя (для сообщения об ошибке)

    Raises:
        DivisionByZero: если denominator == 0

    Examples:
        >>> checked_div(10_000, 3)
        3333
    """
    if denominator == 0:
        logger.debug(f"division by zero: {name}=0, numerator={numerator}")
        raise DivisionByZero(f"{name} must be non-zero (numerator={numerator})")
    return numerator // denominator
