"""
Host Errors — Конверсия ошибок SafeMath на границе внешней среды

Ядро SafeMath возвращает только стабильный SafeMathErrorKind. Внешняя среда
исполнения инструкций ожидает свою ошибку программы: числовой код + сообщение.
Конверсия выполняется здесь, детерминированно:

    code = HOST_ERROR_CODE_OFFSET + порядковый номер вида ошибки

    OVERFLOW          → 300 "overflow"
    UNDERFLOW         → 301 "underflow"
    DIVISION_BY_ZERO  → 302 "division by zero"

Необработанная ошибка на границе прерывает всю операцию внешней среды
(all-or-nothing): host_boundary превращает SafeMathError в HostErrorException.
"""

import functools
import logging
from typing import Callable, Final, TypeVar, Union

from pydantic import BaseModel, Field, StrictInt

from src.core.math.errors import SafeMathError, SafeMathErrorKind
from src.core.math.safe_math import OperationResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Смещение пользовательских кодов ошибок внешней среды
HOST_ERROR_CODE_OFFSET: Final[int] = 300

_KIND_ORDER: Final[tuple[SafeMathErrorKind, ...]] = tuple(SafeMathErrorKind)

_KIND_NAMES: Final[dict[SafeMathErrorKind, str]] = {
    SafeMathErrorKind.OVERFLOW: "Overflow",
    SafeMathErrorKind.UNDERFLOW: "Underflow",
    SafeMathErrorKind.DIVISION_BY_ZERO: "DivisionByZero",
}


# =============================================================================
# MODELS
# =============================================================================


class HostError(BaseModel):
    """
    Ошибка в представлении внешней среды.

    Immutable модель (frozen=True). Совместима с контрактом host_error.json.
    """

    code: StrictInt = Field(..., ge=HOST_ERROR_CODE_OFFSET, description="Код ошибки программы")
    name: str = Field(..., min_length=1, description="Имя вида ошибки (например, 'Overflow')")
    message: str = Field(..., min_length=1, description="Сообщение (например, 'overflow')")

    model_config = {"frozen": True}

    @property
    def kind(self) -> SafeMathErrorKind:
        return kind_from_host_code(self.code)


class HostErrorException(Exception):
    """Операция внешней среды прервана ошибкой SafeMath"""

    def __init__(self, error: HostError):
        self.error = error
        super().__init__(f"Error {error.code} ({error.name}): {error.message}")


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def host_error_code(kind: SafeMathErrorKind) -> int:
    """Код ошибки внешней среды для вида ошибки"""
    return HOST_ERROR_CODE_OFFSET + _KIND_ORDER.index(SafeMathErrorKind(kind))


def to_host_error(error: Union[SafeMathErrorKind, SafeMathError]) -> HostError:
    """
    Конверсия вида ошибки (или исключения) в HostError.

    Args:
        error: SafeMathErrorKind или SafeMathError

    Returns:
        HostError с кодом, именем и сообщением

    Examples:
        >>> to_host_error(SafeMathErrorKind.DIVISION_BY_ZERO).code
        302
    """
    kind = error.kind if isinstance(error, SafeMathError) else SafeMathErrorKind(error)

    host_error = HostError(
        code=host_error_code(kind),
        name=_KIND_NAMES[kind],
        message=kind.message,
    )
    logger.debug("Converted %s into host error %d", kind.value, host_error.code)
    return host_error


def kind_from_host_code(code: int) -> SafeMathErrorKind:
    """
    Обратная конверсия: код ошибки внешней среды → вид ошибки.

    Raises:
        ValueError: Если код не принадлежит SafeMath
    """
    index = code - HOST_ERROR_CODE_OFFSET
    if not 0 <= index < len(_KIND_ORDER):
        raise ValueError(f"Unknown SafeMath host error code: {code}")
    return _KIND_ORDER[index]


def host_result(result: OperationResult) -> int:
    """
    Значение результата или прерывание операции внешней среды.

    Raises:
        HostErrorException: Если результат — ошибка
    """
    if result.is_err():
        raise HostErrorException(to_host_error(result.error))
    return result.value


def host_boundary(func: Callable[..., T]) -> Callable[..., T]:
    """
    Декоратор границы внешней среды.

    Любая SafeMathError внутри func прерывает вызов целиком и всплывает как
    HostErrorException. Прочие исключения проходят без изменений.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> T:
        try:
            return func(*args, **kwargs)
        except SafeMathError as e:
            host_error = to_host_error(e)
            logger.warning(
                "%s aborted: %s (code %d)", func.__qualname__, e, host_error.code
            )
            raise HostErrorException(host_error) from e

    return wrapper
