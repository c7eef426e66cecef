"""
SafeMath — Checked-арифметика с результатом-или-ошибкой

Пять checked-операций, единообразно для всех беззнаковых разрядностей
(u8, u16, u32, u64, u128):

    safe_add(a, b)  → a + b        | OVERFLOW
    safe_sub(a, b)  → a - b        | UNDERFLOW
    safe_mul(a, b)  → a * b        | SafeMathConfig.mul_overflow_kind
    safe_div(a, b)  → a // b       | DIVISION_BY_ZERO
    safe_pow(a, e)  → a ** e       | OVERFLOW

Алгоритм один для всех разрядностей: операция делегирует нативному
checked-примитиву (src.core.math.checked), None транслируется в вид ошибки,
значение возвращается как есть. Каждая разрядность получает собственный
экземпляр SafeMath со своими границами.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда в пределах разрядности источника (без расширения)
2. Ошибка возникает тогда и только тогда, когда checked-примитив вернул None
3. Нет побочных эффектов и разделяемого изменяемого состояния
4. Ядро не логирует: вид ошибки — единственный сигнал
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final, Optional

from src.core.domain.uint_width import UintWidth
from src.core.math.checked import (
    checked_add,
    checked_div,
    checked_mul,
    checked_pow,
    checked_sub,
)
from src.core.math.errors import SafeMathError, SafeMathErrorKind, error_for_kind


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SafeMathConfig:
    """Конфигурация SafeMath.

    mul_overflow_kind — вид ошибки при переполнении умножения:
    - OVERFLOW (default): семантически корректный вид
    - UNDERFLOW: совместимость с исторической реализацией, где переполнение
      умножения сообщалось как underflow (см. LEGACY_CONFIG)
    """

    mul_overflow_kind: SafeMathErrorKind = SafeMathErrorKind.OVERFLOW

    def __post_init__(self):
        if not isinstance(self.mul_overflow_kind, SafeMathErrorKind) or self.mul_overflow_kind not in (
            SafeMathErrorKind.OVERFLOW,
            SafeMathErrorKind.UNDERFLOW,
        ):
            raise ValueError(
                f"mul_overflow_kind must be OVERFLOW or UNDERFLOW, got {self.mul_overflow_kind!r}"
            )


DEFAULT_CONFIG: Final[SafeMathConfig] = SafeMathConfig()

LEGACY_CONFIG: Final[SafeMathConfig] = SafeMathConfig(
    mul_overflow_kind=SafeMathErrorKind.UNDERFLOW
)


# =============================================================================
# ENUMS
# =============================================================================


class SafeMathOp(str, Enum):
    """Операция SafeMath (для диспетчеризации через evaluate)"""

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    POW = "pow"


# =============================================================================
# OPERATION RESULT
# =============================================================================


@dataclass(frozen=True)
class OperationResult:
    """Результат операции: значение ИЛИ вид ошибки, других состояний нет."""

    op: SafeMathOp
    width: UintWidth
    value: Optional[int] = None
    error: Optional[SafeMathErrorKind] = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("OperationResult must hold exactly one of value or error")

    @classmethod
    def ok(cls, op: SafeMathOp, width: UintWidth, value: int) -> "OperationResult":
        return cls(op=op, width=width, value=value)

    @classmethod
    def err(cls, op: SafeMathOp, width: UintWidth, error: SafeMathErrorKind) -> "OperationResult":
        return cls(op=op, width=width, error=error)

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None

    def unwrap(self) -> int:
        """
        Значение успешного результата.

        Raises:
            SafeMathError: Подкласс, соответствующий виду ошибки
        """
        if self.error is not None:
            raise error_for_kind(self.error, f"{self.width.type_name} {self.op.value}")
        return self.value

    def unwrap_or(self, default: int) -> int:
        """Значение или default, если результат — ошибка"""
        if self.error is not None:
            return default
        return self.value

    def to_dict(self) -> dict:
        """Сериализация (совместима с контрактом operation_result.json)"""
        return {
            "op": self.op.value,
            "width": self.width.type_name,
            "ok": self.is_ok(),
            "value": self.value,
            "error": self.error.value if self.error is not None else None,
        }


# =============================================================================
# SAFE MATH
# =============================================================================


class SafeMath:
    """Набор checked-операций для одной разрядности.

    Stateless: экземпляр хранит только разрядность и конфигурацию,
    поэтому безопасен для одновременного использования из любых потоков.

    Examples:
        >>> SAFE_MATH_U8.safe_add(100, 50)
        150
        >>> SAFE_MATH_U8.safe_add(200, 100)
        Traceback (most recent call last):
            ...
        src.core.math.errors.SafeMathOverflow: overflow: u8 add(200, 100)
    """

    def __init__(self, width: UintWidth, config: Optional[SafeMathConfig] = None):
        self.width = UintWidth(width)
        self.config = config or DEFAULT_CONFIG

        self._dispatch: dict[SafeMathOp, Callable[[int, int], int]] = {
            SafeMathOp.ADD: self.safe_add,
            SafeMathOp.SUB: self.safe_sub,
            SafeMathOp.MUL: self.safe_mul,
            SafeMathOp.DIV: self.safe_div,
            SafeMathOp.POW: self.safe_pow,
        }

    def __repr__(self) -> str:
        return f"SafeMath({self.width.type_name}, mul_overflow_kind={self.config.mul_overflow_kind.value})"

    def _check(self, result: Optional[int], kind: SafeMathErrorKind, op: SafeMathOp, a: int, b: int) -> int:
        if result is None:
            raise error_for_kind(kind, f"{self.width.type_name} {op.value}({a}, {b})")
        return result

    def safe_add(self, a: int, b: int) -> int:
        """
        a + b.

        Raises:
            SafeMathOverflow: a + b > max разрядности
        """
        return self._check(
            checked_add(a, b, self.width), SafeMathErrorKind.OVERFLOW, SafeMathOp.ADD, a, b
        )

    def safe_sub(self, a: int, b: int) -> int:
        """
        a - b.

        Raises:
            SafeMathUnderflow: b > a
        """
        return self._check(
            checked_sub(a, b, self.width), SafeMathErrorKind.UNDERFLOW, SafeMathOp.SUB, a, b
        )

    def safe_mul(self, a: int, b: int) -> int:
        """
        a * b.

        Raises:
            SafeMathOverflow: a * b > max разрядности (DEFAULT_CONFIG)
            SafeMathUnderflow: то же условие при LEGACY_CONFIG
        """
        return self._check(
            checked_mul(a, b, self.width), self.config.mul_overflow_kind, SafeMathOp.MUL, a, b
        )

    def safe_div(self, a: int, b: int) -> int:
        """
        a // b (усечение к нулю).

        Raises:
            SafeMathDivisionByZero: b == 0
        """
        return self._check(
            checked_div(a, b, self.width), SafeMathErrorKind.DIVISION_BY_ZERO, SafeMathOp.DIV, a, b
        )

    def safe_pow(self, a: int, exp: int) -> int:
        """
        a ** exp, exp — u32. safe_pow(a, 0) == 1 для любого a, включая 0.

        Raises:
            SafeMathOverflow: a ** exp > max разрядности
        """
        return self._check(
            checked_pow(a, exp, self.width), SafeMathErrorKind.OVERFLOW, SafeMathOp.POW, a, exp
        )

    def evaluate(self, op: SafeMathOp, a: int, b: int) -> OperationResult:
        """
        Выполнение операции без исключения для арифметических ошибок.

        Ошибки домена входов (TypeError/ValueError) по-прежнему выбрасываются:
        это ошибки вызывающего кода, а не исход арифметики.

        Args:
            op: Операция
            a: Левый операнд (основание для POW)
            b: Правый операнд (показатель для POW)

        Returns:
            OperationResult со значением или видом ошибки
        """
        op = SafeMathOp(op)
        try:
            value = self._dispatch[op](a, b)
        except SafeMathError as e:
            return OperationResult.err(op, self.width, e.kind)
        return OperationResult.ok(op, self.width, value)


# =============================================================================
# ЭКЗЕМПЛЯРЫ ПО РАЗРЯДНОСТЯМ
# =============================================================================

SAFE_MATH_U8: Final[SafeMath] = SafeMath(UintWidth.U8)
SAFE_MATH_U16: Final[SafeMath] = SafeMath(UintWidth.U16)
SAFE_MATH_U32: Final[SafeMath] = SafeMath(UintWidth.U32)
SAFE_MATH_U64: Final[SafeMath] = SafeMath(UintWidth.U64)
SAFE_MATH_U128: Final[SafeMath] = SafeMath(UintWidth.U128)

SAFE_MATH_BY_WIDTH: Final[dict[UintWidth, SafeMath]] = {
    UintWidth.U8: SAFE_MATH_U8,
    UintWidth.U16: SAFE_MATH_U16,
    UintWidth.U32: SAFE_MATH_U32,
    UintWidth.U64: SAFE_MATH_U64,
    UintWidth.U128: SAFE_MATH_U128,
}


def get_safe_math(width: UintWidth, config: Optional[SafeMathConfig] = None) -> SafeMath:
    """
    SafeMath для разрядности.

    Без config (или с DEFAULT_CONFIG) возвращает общий экземпляр,
    иначе — новый экземпляр с переданной конфигурацией.
    """
    width = UintWidth(width)
    if config is None or config == DEFAULT_CONFIG:
        return SAFE_MATH_BY_WIDTH[width]
    return SafeMath(width, config)
