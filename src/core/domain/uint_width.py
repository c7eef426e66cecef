"""
UintWidth — Разрядности беззнаковых целых

Единственный источник границ для fixed-width unsigned integers:
- u8, u16, u32, u64, u128
- min = 0, max = 2^bits - 1
- Валидация входов перед любой checked-операцией

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Границы каждой разрядности независимы друг от друга
2. Значение вне [0, max] никогда не попадает в арифметику (ValueError)
3. bool не считается целым числом (TypeError)
"""

from enum import Enum
from typing import Final


# =============================================================================
# ГРАНИЦЫ РАЗРЯДНОСТЕЙ
# =============================================================================

U8_MAX: Final[int] = 2**8 - 1
U16_MAX: Final[int] = 2**16 - 1
U32_MAX: Final[int] = 2**32 - 1
U64_MAX: Final[int] = 2**64 - 1
U128_MAX: Final[int] = 2**128 - 1

# Показатель степени для safe_pow — всегда u32, независимо от разрядности основания
U32_EXP_MAX: Final[int] = U32_MAX


# =============================================================================
# ENUMS
# =============================================================================


class UintWidth(int, Enum):
    """Разрядность беззнакового целого (в битах)"""

    U8 = 8
    U16 = 16
    U32 = 32
    U64 = 64
    U128 = 128

    @property
    def bits(self) -> int:
        return int(self.value)

    @property
    def min_value(self) -> int:
        return 0

    @property
    def max_value(self) -> int:
        return (1 << self.bits) - 1

    @property
    def type_name(self) -> str:
        """Каноническое имя типа: 'u8', 'u16', ..."""
        return f"u{self.bits}"

    def contains(self, value: int) -> bool:
        """True если value представимо в этой разрядности"""
        return self.min_value <= value <= self.max_value

    @classmethod
    def from_name(cls, name: str) -> "UintWidth":
        """
        Разрядность по имени типа.

        Args:
            name: Имя типа ('u8', 'U64', 'u128')

        Returns:
            Соответствующий UintWidth

        Raises:
            ValueError: Если имя не соответствует поддерживаемой разрядности

        Examples:
            >>> UintWidth.from_name("u64")
            <UintWidth.U64: 64>
        """
        normalized = name.strip().lower()
        for width in cls:
            if width.type_name == normalized:
                return width
        raise ValueError(f"Unsupported unsigned integer type: {name!r}")


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _require_int(value: object, name: str) -> int:
    # bool — подкласс int, но как операнд арифметики не допускается
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def validate_uint(value: object, width: UintWidth, name: str = "value") -> int:
    """
    Валидация, что значение представимо в заданной разрядности.

    Args:
        value: Проверяемое значение
        width: Разрядность
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как int

    Raises:
        TypeError: Если value не int (или bool)
        ValueError: Если value вне [0, width.max_value]
    """
    int_value = _require_int(value, name)

    if not width.contains(int_value):
        raise ValueError(
            f"{name} must be in [0, {width.max_value}] for {width.type_name}, got {int_value}"
        )

    return int_value


def validate_exponent(exp: object, name: str = "exp") -> int:
    """
    Валидация показателя степени (u32).

    Raises:
        TypeError: Если exp не int (или bool)
        ValueError: Если exp вне [0, U32_EXP_MAX]
    """
    int_exp = _require_int(exp, name)

    if int_exp < 0 or int_exp > U32_EXP_MAX:
        raise ValueError(f"{name} must be in [0, {U32_EXP_MAX}] (u32), got {int_exp}")

    return int_exp
