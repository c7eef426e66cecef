"""
Core math modules

Checked-арифметика фиксированной разрядности: результат или типизированная ошибка.
"""

# Errors
from src.core.math.errors import (
    SafeMathDivisionByZero,
    SafeMathError,
    SafeMathErrorKind,
    SafeMathOverflow,
    SafeMathUnderflow,
    error_for_kind,
)

# Checked primitives
from src.core.math.checked import (
    checked_add,
    checked_div,
    checked_mul,
    checked_pow,
    checked_sub,
)

# SafeMath
from src.core.math.safe_math import (
    DEFAULT_CONFIG,
    LEGACY_CONFIG,
    SAFE_MATH_BY_WIDTH,
    SAFE_MATH_U8,
    SAFE_MATH_U16,
    SAFE_MATH_U32,
    SAFE_MATH_U64,
    SAFE_MATH_U128,
    OperationResult,
    SafeMath,
    SafeMathConfig,
    SafeMathOp,
    get_safe_math,
)

# Uint value object
from src.core.math.uint import Uint, u8, u16, u32, u64, u128

__all__ = [
    # Errors
    "SafeMathDivisionByZero",
    "SafeMathError",
    "SafeMathErrorKind",
    "SafeMathOverflow",
    "SafeMathUnderflow",
    "error_for_kind",
    # Checked primitives
    "checked_add",
    "checked_div",
    "checked_mul",
    "checked_pow",
    "checked_sub",
    # SafeMath — Config
    "DEFAULT_CONFIG",
    "LEGACY_CONFIG",
    "SafeMathConfig",
    # SafeMath — Types
    "OperationResult",
    "SafeMath",
    "SafeMathOp",
    # SafeMath — Instances
    "SAFE_MATH_BY_WIDTH",
    "SAFE_MATH_U8",
    "SAFE_MATH_U16",
    "SAFE_MATH_U32",
    "SAFE_MATH_U64",
    "SAFE_MATH_U128",
    "get_safe_math",
    # Uint
    "Uint",
    "u8",
    "u16",
    "u32",
    "u64",
    "u128",
]
