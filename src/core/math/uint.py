"""
Uint — Immutable значение фиксированной разрядности с safe-операциями

Pydantic value object: int, привязанный к UintWidth. Все safe_* методы
возвращают новый Uint той же разрядности, что позволяет писать цепочки:

    total = u64(1_000).safe_add(amount).safe_mul(3).safe_div(2)

Смешивание разрядностей запрещено (TypeError): границы каждой разрядности
независимы.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field, StrictInt, model_validator

from src.core.domain.uint_width import UintWidth
from src.core.math.safe_math import SafeMathConfig, get_safe_math


class Uint(BaseModel):
    """
    Беззнаковое целое фиксированной разрядности.

    Immutable модель (frozen=True).
    """

    value: StrictInt = Field(..., ge=0, description="Значение в [0, width.max_value]")
    width: UintWidth = Field(..., description="Разрядность (8/16/32/64/128)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_fits_width(self) -> "Uint":
        """Проверка, что значение представимо в разрядности"""
        if self.value > self.width.max_value:
            raise ValueError(
                f"value {self.value} exceeds {self.width.type_name} max {self.width.max_value}"
            )
        return self

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.value}{self.width.type_name}"

    def _operand(self, rhs: Union["Uint", int]) -> int:
        if isinstance(rhs, Uint):
            if rhs.width != self.width:
                raise TypeError(
                    f"Operand width mismatch: {self.width.type_name} vs {rhs.width.type_name}"
                )
            return rhs.value
        return rhs

    def _new(self, value: int) -> "Uint":
        return Uint(value=value, width=self.width)

    def safe_add(self, rhs: Union["Uint", int], config: Optional[SafeMathConfig] = None) -> "Uint":
        return self._new(get_safe_math(self.width, config).safe_add(self.value, self._operand(rhs)))

    def safe_sub(self, rhs: Union["Uint", int], config: Optional[SafeMathConfig] = None) -> "Uint":
        return self._new(get_safe_math(self.width, config).safe_sub(self.value, self._operand(rhs)))

    def safe_mul(self, rhs: Union["Uint", int], config: Optional[SafeMathConfig] = None) -> "Uint":
        return self._new(get_safe_math(self.width, config).safe_mul(self.value, self._operand(rhs)))

    def safe_div(self, rhs: Union["Uint", int], config: Optional[SafeMathConfig] = None) -> "Uint":
        return self._new(get_safe_math(self.width, config).safe_div(self.value, self._operand(rhs)))

    def safe_pow(self, exp: int, config: Optional[SafeMathConfig] = None) -> "Uint":
        """Показатель степени — всегда u32 (raw int), не Uint основания"""
        return self._new(get_safe_math(self.width, config).safe_pow(self.value, exp))


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def u8(value: int) -> Uint:
    return Uint(value=value, width=UintWidth.U8)


def u16(value: int) -> Uint:
    return Uint(value=value, width=UintWidth.U16)


def u32(value: int) -> Uint:
    return Uint(value=value, width=UintWidth.U32)


def u64(value: int) -> Uint:
    return Uint(value=value, width=UintWidth.U64)


def u128(value: int) -> Uint:
    return Uint(value=value, width=UintWidth.U128)
