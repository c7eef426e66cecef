"""
SafeMath Errors — Таксономия ошибок checked-арифметики

Ровно три вида ошибок, взаимоисключающие в рамках одного вызова:
- OVERFLOW: истинный результат больше max разрядности
- UNDERFLOW: истинный результат отрицателен
- DIVISION_BY_ZERO: делитель равен нулю

Вид ошибки — стабильное перечислимое значение. Конверсия в представление
ошибок внешней среды выполняется на границе (src.host), не здесь.
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class SafeMathErrorKind(str, Enum):
    """Вид ошибки checked-операции (порядок объявления стабилен)"""

    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"
    DIVISION_BY_ZERO = "division_by_zero"

    @property
    def message(self) -> str:
        """Человекочитаемое сообщение: 'overflow', 'underflow', 'division by zero'"""
        return self.value.replace("_", " ")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SafeMathError(ArithmeticError):
    """
    Базовая ошибка checked-операции.

    Не несёт payload кроме kind; detail используется только для диагностики
    и не влияет на классификацию.
    """

    kind: SafeMathErrorKind

    def __init__(self, kind: SafeMathErrorKind, detail: str = ""):
        self.kind = SafeMathErrorKind(kind)
        self.detail = detail
        super().__init__(f"{self.kind.message}: {detail}" if detail else self.kind.message)


class SafeMathOverflow(SafeMathError):
    """Результат превышает max разрядности"""

    def __init__(self, detail: str = ""):
        super().__init__(SafeMathErrorKind.OVERFLOW, detail)


class SafeMathUnderflow(SafeMathError):
    """Результат был бы отрицательным (или legacy-маппинг переполнения умножения)"""

    def __init__(self, detail: str = ""):
        super().__init__(SafeMathErrorKind.UNDERFLOW, detail)


class SafeMathDivisionByZero(SafeMathError):
    """Делитель равен нулю"""

    def __init__(self, detail: str = ""):
        super().__init__(SafeMathErrorKind.DIVISION_BY_ZERO, detail)


_ERROR_CLASSES: dict[SafeMathErrorKind, type[SafeMathError]] = {
    SafeMathErrorKind.OVERFLOW: SafeMathOverflow,
    SafeMathErrorKind.UNDERFLOW: SafeMathUnderflow,
    SafeMathErrorKind.DIVISION_BY_ZERO: SafeMathDivisionByZero,
}


def error_for_kind(kind: SafeMathErrorKind, detail: str = "") -> SafeMathError:
    """
    Построение исключения нужного подкласса по виду ошибки.

    Examples:
        >>> error_for_kind(SafeMathErrorKind.OVERFLOW, "u8 add")
        SafeMathOverflow('overflow: u8 add')
    """
    return _ERROR_CLASSES[SafeMathErrorKind(kind)](detail)
