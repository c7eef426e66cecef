"""Unit тесты для конверсии ошибок SafeMath на границе внешней среды.

Coverage:
- Стабильные коды ошибок (offset 300)
- Конверсия вида ошибки и исключения в HostError
- Обратная конверсия кода
- host_boundary: прерывание операции, логирование, прозрачность прочих исключений
- host_result для OperationResult
"""

import logging

import pytest
from pydantic import ValidationError

from src.core.math import (
    SAFE_MATH_U8,
    SAFE_MATH_U64,
    SafeMathErrorKind,
    SafeMathOp,
    SafeMathOverflow,
    u64,
)
from src.host import (
    HOST_ERROR_CODE_OFFSET,
    HostError,
    HostErrorException,
    host_boundary,
    host_error_code,
    host_result,
    kind_from_host_code,
    to_host_error,
)


# =============================================================================
# КОДЫ И КОНВЕРСИЯ
# =============================================================================


def test_error_codes_are_stable():
    """Коды: offset + порядок объявления вида ошибки."""
    assert HOST_ERROR_CODE_OFFSET == 300
    assert host_error_code(SafeMathErrorKind.OVERFLOW) == 300
    assert host_error_code(SafeMathErrorKind.UNDERFLOW) == 301
    assert host_error_code(SafeMathErrorKind.DIVISION_BY_ZERO) == 302


def test_to_host_error_from_kind():
    """Вид ошибки → HostError."""
    error = to_host_error(SafeMathErrorKind.DIVISION_BY_ZERO)

    assert error == HostError(code=302, name="DivisionByZero", message="division by zero")
    assert error.kind is SafeMathErrorKind.DIVISION_BY_ZERO


def test_to_host_error_from_exception():
    """SafeMathError → HostError того же вида."""
    with pytest.raises(SafeMathOverflow) as exc_info:
        SAFE_MATH_U8.safe_add(200, 100)

    error = to_host_error(exc_info.value)

    assert error.code == 300
    assert error.name == "Overflow"
    assert error.message == "overflow"


def test_kind_from_host_code_round_trip():
    """Обратная конверсия для всех видов."""
    for kind in SafeMathErrorKind:
        assert kind_from_host_code(to_host_error(kind).code) is kind


def test_kind_from_unknown_code_raises():
    with pytest.raises(ValueError, match="Unknown SafeMath host error code: 303"):
        kind_from_host_code(303)

    with pytest.raises(ValueError, match="Unknown SafeMath host error code"):
        kind_from_host_code(299)


def test_host_error_is_frozen():
    error = to_host_error(SafeMathErrorKind.OVERFLOW)
    with pytest.raises(ValidationError):
        error.code = 301


def test_host_error_exception_message():
    exc = HostErrorException(to_host_error(SafeMathErrorKind.UNDERFLOW))

    assert exc.error.code == 301
    assert str(exc) == "Error 301 (Underflow): underflow"


def test_conversion_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="src.host.errors"):
        to_host_error(SafeMathErrorKind.OVERFLOW)

    assert "Converted overflow into host error 300" in caplog.text


# =============================================================================
# HOST BOUNDARY
# =============================================================================


@host_boundary
def _deposit(total: int, amount: int) -> int:
    """Пример инструкции внешней среды."""
    return SAFE_MATH_U64.safe_add(total, amount)


@host_boundary
def _withdraw_all(balances: dict) -> dict:
    """Инструкция с несколькими шагами: первая ошибка прерывает всё."""
    updated = dict(balances)
    for key in updated:
        updated[key] = SAFE_MATH_U64.safe_sub(updated[key], 10)
    return updated


def test_host_boundary_passes_success():
    assert _deposit(1, 2) == 3
    assert _deposit.__name__ == "_deposit"


def test_host_boundary_converts_error():
    with pytest.raises(HostErrorException) as exc_info:
        _deposit(u64(2**64 - 1).value, 1)

    assert exc_info.value.error.code == 300
    assert isinstance(exc_info.value.__cause__, SafeMathOverflow)


def test_host_boundary_aborts_whole_operation():
    """All-or-nothing: исходное состояние не изменено, результата нет."""
    balances = {"a": 50, "b": 5, "c": 70}

    with pytest.raises(HostErrorException) as exc_info:
        _withdraw_all(balances)

    assert exc_info.value.error.kind is SafeMathErrorKind.UNDERFLOW
    assert balances == {"a": 50, "b": 5, "c": 70}


def test_host_boundary_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="src.host.errors"):
        with pytest.raises(HostErrorException):
            _deposit(2**64 - 1, 1)

    assert "_deposit aborted" in caplog.text
    assert "code 300" in caplog.text


def test_host_boundary_does_not_convert_other_errors():
    """Ошибки домена входов проходят без изменений."""
    with pytest.raises(ValueError):
        _deposit(-1, 1)


# =============================================================================
# HOST RESULT
# =============================================================================


def test_host_result_success():
    assert host_result(SAFE_MATH_U8.evaluate(SafeMathOp.DIV, 10, 3)) == 3


def test_host_result_error():
    with pytest.raises(HostErrorException) as exc_info:
        host_result(SAFE_MATH_U8.evaluate(SafeMathOp.DIV, 10, 0))

    assert exc_info.value.error.code == 302
