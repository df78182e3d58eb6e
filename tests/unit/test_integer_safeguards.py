"""
Тесты для Integer Safeguards — Checked Fixed-Width Unsigned Arithmetic

Проверяемые инварианты:
1. Переполнение → ArithmeticOverflow, без wraparound
2. Деление на ноль → DivisionByZero
3. Валидация ширины и диапазона
4. Иерархия исключений совместима со встроенными
"""

import pytest

from src.core.math.integer_safeguards import (
    DEFAULT_UINT_BITS,
    UINT64_MAX,
    UINT128_MAX,
    UINT256_MAX,
    ArithmeticOverflow,
    DivisionByZero,
    PercentageMathError,
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    is_multiplication_safe,
    max_uint,
    require_nonzero,
    validate_bits,
    validate_uint,
)


# =============================================================================
# ТЕСТЫ: Ширина
# =============================================================================


class TestWidth:
    """Тесты validate_bits и max_uint."""

    def test_default_is_uint256(self):
        assert DEFAULT_UINT_BITS == 256
        assert max_uint() == UINT256_MAX

    def test_known_widths(self):
        assert max_uint(8) == 255
        assert max_uint(64) == UINT64_MAX
        assert max_uint(128) == UINT128_MAX
        assert max_uint(256) == 2**256 - 1

    @pytest.mark.parametrize("bits", [0, -8, 12, 264, 512])
    def test_invalid_bits_rejected(self, bits):
        with pytest.raises(ValueError, match="multiple of 8"):
            validate_bits(bits)

    def test_non_int_bits_rejected(self):
        with pytest.raises(TypeError, match="must be an int"):
            validate_bits(64.0)
        with pytest.raises(TypeError, match="must be an int"):
            validate_bits(True)


class TestValidateUint:
    """Тесты validate_uint."""

    def test_valid_values_pass(self):
        assert validate_uint(0, "value") == 0
        assert validate_uint(UINT256_MAX, "value") == UINT256_MAX
        assert validate_uint(UINT64_MAX, "value", bits=64) == UINT64_MAX

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="value must be non-negative"):
            validate_uint(-1, "value")

    def test_non_int_rejected(self):
        with pytest.raises(TypeError):
            validate_uint(1.0, "value")
        with pytest.raises(TypeError):
            validate_uint(True, "value")

    def test_out_of_width_is_overflow(self):
        with pytest.raises(ArithmeticOverflow, match="uint64"):
            validate_uint(UINT64_MAX + 1, "value", bits=64)


# =============================================================================
# ТЕСТЫ: Checked arithmetic
# =============================================================================


class TestCheckedMul:
    """Тесты checked_mul."""

    def test_basic(self):
        assert checked_mul(1000, 500) == 500_000
        assert checked_mul(0, UINT256_MAX) == 0

    def test_boundary_exact_max(self):
        assert checked_mul(UINT256_MAX, 1) == UINT256_MAX

    def test_overflow(self):
        with pytest.raises(ArithmeticOverflow, match="Multiplication overflow"):
            checked_mul(2**255, 2)

    def test_overflow_narrow_width(self):
        assert checked_mul(2**32, 2**31, bits=64) == 2**63
        with pytest.raises(ArithmeticOverflow):
            checked_mul(2**32, 2**32, bits=64)


class TestCheckedAdd:
    """Тесты checked_add."""

    def test_basic(self):
        assert checked_add(100, 5) == 105

    def test_overflow(self):
        with pytest.raises(ArithmeticOverflow, match="Addition overflow"):
            checked_add(UINT256_MAX, 1)
        with pytest.raises(ArithmeticOverflow):
            checked_add(UINT64_MAX, 1, bits=64)


class TestCheckedSub:
    """Тесты checked_sub."""

    def test_basic(self):
        assert checked_sub(150, 100) == 50
        assert checked_sub(100, 100) == 0

    def test_underflow(self):
        with pytest.raises(ArithmeticOverflow, match="underflow"):
            checked_sub(50, 100)


class TestCheckedDiv:
    """Тесты checked_div."""

    def test_floor_division(self):
        assert checked_div(10_000, 3) == 3333
        assert checked_div(9_900, 10_000) == 0

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZero, match="whole must be non-zero"):
            checked_div(100, 0, name="whole")


class TestIsMultiplicationSafe:
    """Тесты is_multiplication_safe."""

    def test_boundary(self):
        assert is_multiplication_safe(2**128, 2**127) is True
        assert is_multiplication_safe(2**128, 2**128) is False
        assert is_multiplication_safe(2**32, 2**32, bits=64) is False

    def test_negative_operands_rejected(self):
        """Произведение двух отрицательных не должно считаться безопасным."""
        with pytest.raises(ValueError, match="non-negative"):
            is_multiplication_safe(-(2**200), -(2**200))
        with pytest.raises(ValueError, match="non-negative"):
            is_multiplication_safe(-1, 5)

    def test_checked_mul_uses_same_boundary(self):
        a, b = 2**32, 2**31
        assert is_multiplication_safe(a, b, bits=64)
        assert checked_mul(a, b, bits=64) == a * b
        assert not is_multiplication_safe(2 * a, b, bits=64)
        with pytest.raises(ArithmeticOverflow):
            checked_mul(2 * a, b, bits=64)


class TestRequireNonzero:
    """Тесты require_nonzero."""

    def test_nonzero_passes(self):
        assert require_nonzero(7) == 7

    def test_zero_raises(self):
        with pytest.raises(DivisionByZero, match="precision_factor must be non-zero"):
            require_nonzero(0, name="precision_factor")


# =============================================================================
# ТЕСТЫ: Иерархия исключений
# =============================================================================


class TestExceptionHierarchy:
    """Ошибки ловятся как общим, так и встроенным типом."""

    def test_overflow_is_builtin_overflow(self):
        assert issubclass(ArithmeticOverflow, PercentageMathError)
        assert issubclass(ArithmeticOverflow, OverflowError)

    def test_division_is_builtin_zero_division(self):
        assert issubclass(DivisionByZero, PercentageMathError)
        assert issubclass(DivisionByZero, ZeroDivisionError)

    def test_base_is_arithmetic_error(self):
        with pytest.raises(ArithmeticError):
            checked_div(1, 0)
