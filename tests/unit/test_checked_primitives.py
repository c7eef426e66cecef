"""
Тесты для checked-примитивов

Проверяет:
1. None тогда и только тогда, когда результат не представим
2. Граничные значения (0, max - 1, max)
3. checked_pow: squaring без ложных переполнений, большие показатели
"""

import pytest

from src.core.domain import U8_MAX, U32_EXP_MAX, U64_MAX, U128_MAX, UintWidth
from src.core.math import (
    checked_add,
    checked_div,
    checked_mul,
    checked_pow,
    checked_sub,
)


class TestCheckedAdd:
    """Тесты для checked_add"""

    def test_in_range(self) -> None:
        assert checked_add(100, 50, UintWidth.U8) == 150
        assert checked_add(0, 0, UintWidth.U8) == 0

    def test_exactly_max(self) -> None:
        assert checked_add(U8_MAX - 1, 1, UintWidth.U8) == U8_MAX
        assert checked_add(U128_MAX, 0, UintWidth.U128) == U128_MAX

    def test_one_past_max_is_none(self) -> None:
        assert checked_add(U8_MAX, 1, UintWidth.U8) is None
        assert checked_add(U64_MAX, 1, UintWidth.U64) is None
        assert checked_add(U128_MAX, 1, UintWidth.U128) is None

    def test_same_values_different_widths(self) -> None:
        """Изоляция разрядностей: 200 + 100 переполняет u8, но не u16"""
        assert checked_add(200, 100, UintWidth.U8) is None
        assert checked_add(200, 100, UintWidth.U16) == 300

    def test_operand_out_of_width_raises(self) -> None:
        """Операнды вне разрядности отклоняются, а не усекаются"""
        with pytest.raises(ValueError, match="b must be in"):
            checked_add(1, 256, UintWidth.U8)


class TestCheckedSub:
    """Тесты для checked_sub"""

    def test_in_range(self) -> None:
        assert checked_sub(20, 10, UintWidth.U8) == 10
        assert checked_sub(10, 10, UintWidth.U8) == 0

    def test_negative_is_none(self) -> None:
        assert checked_sub(10, 20, UintWidth.U8) is None
        assert checked_sub(0, 1, UintWidth.U128) is None

    def test_full_range(self) -> None:
        assert checked_sub(U64_MAX, U64_MAX, UintWidth.U64) == 0
        assert checked_sub(U64_MAX, 0, UintWidth.U64) == U64_MAX


class TestCheckedMul:
    """Тесты для checked_mul"""

    def test_in_range(self) -> None:
        assert checked_mul(15, 17, UintWidth.U8) == 255
        assert checked_mul(0, U8_MAX, UintWidth.U8) == 0

    def test_overflow_is_none(self) -> None:
        assert checked_mul(16, 16, UintWidth.U8) is None
        assert checked_mul(2**64, 2**64, UintWidth.U128) is None

    def test_largest_u128_square(self) -> None:
        assert checked_mul(2**64 - 1, 2**64 - 1, UintWidth.U128) == (2**64 - 1) ** 2


class TestCheckedDiv:
    """Тесты для checked_div"""

    def test_truncation(self) -> None:
        assert checked_div(10, 3, UintWidth.U8) == 3
        assert checked_div(1, 2, UintWidth.U8) == 0
        assert checked_div(U8_MAX, 1, UintWidth.U8) == U8_MAX

    def test_division_by_zero_is_none(self) -> None:
        for width in UintWidth:
            assert checked_div(0, 0, width) is None
            assert checked_div(width.max_value, 0, width) is None


class TestCheckedPow:
    """Тесты для checked_pow"""

    def test_zero_exponent_is_one(self) -> None:
        """a^0 = 1 для любого a, включая 0"""
        for width in UintWidth:
            assert checked_pow(0, 0, width) == 1
            assert checked_pow(width.max_value, 0, width) == 1

    def test_u8_boundary(self) -> None:
        assert checked_pow(2, 7, UintWidth.U8) == 128
        assert checked_pow(2, 8, UintWidth.U8) is None
        assert checked_pow(3, 5, UintWidth.U8) == 243
        assert checked_pow(3, 6, UintWidth.U8) is None
        assert checked_pow(15, 2, UintWidth.U8) == 225
        assert checked_pow(16, 2, UintWidth.U8) is None

    def test_exact_max_power(self) -> None:
        """2^127 помещается в u128, 2^128 — нет"""
        assert checked_pow(2, 127, UintWidth.U128) == 2**127
        assert checked_pow(2, 128, UintWidth.U128) is None
        assert checked_pow(2, 63, UintWidth.U64) == 2**63
        assert checked_pow(2, 64, UintWidth.U64) is None

    def test_odd_exponents(self) -> None:
        assert checked_pow(3, 13, UintWidth.U32) == 3**13
        assert checked_pow(7, 22, UintWidth.U64) == 7**22
        assert checked_pow(7, 23, UintWidth.U64) is None
        assert checked_pow(7, 45, UintWidth.U128) == 7**45
        assert checked_pow(7, 46, UintWidth.U128) is None

    def test_zero_and_one_base_with_huge_exponent(self) -> None:
        """0^e = 0 и 1^e = 1 без построения огромных чисел"""
        assert checked_pow(0, U32_EXP_MAX, UintWidth.U8) == 0
        assert checked_pow(1, U32_EXP_MAX, UintWidth.U128) == 1

    def test_huge_exponent_overflows_quickly(self) -> None:
        assert checked_pow(2, U32_EXP_MAX, UintWidth.U128) is None

    def test_exponent_out_of_u32_raises(self) -> None:
        with pytest.raises(ValueError, match=r"\(u32\)"):
            checked_pow(2, U32_EXP_MAX + 1, UintWidth.U8)
