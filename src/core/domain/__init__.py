"""
Domain value types.

Разрядности беззнаковых целых и валидация входов.
"""

from src.core.domain.uint_width import (
    U8_MAX,
    U16_MAX,
    U32_EXP_MAX,
    U32_MAX,
    U64_MAX,
    U128_MAX,
    UintWidth,
    validate_exponent,
    validate_uint,
)

__all__ = [
    "U8_MAX",
    "U16_MAX",
    "U32_MAX",
    "U64_MAX",
    "U128_MAX",
    "U32_EXP_MAX",
    "UintWidth",
    "validate_exponent",
    "validate_uint",
]
