"""Host boundary — конверсия ошибок SafeMath в ошибки внешней среды исполнения."""

from .errors import (
    HOST_ERROR_CODE_OFFSET,
    HostError,
    HostErrorException,
    host_boundary,
    host_error_code,
    host_result,
    kind_from_host_code,
    to_host_error,
)

__all__ = [
    "HOST_ERROR_CODE_OFFSET",
    "HostError",
    "HostErrorException",
    "host_boundary",
    "host_error_code",
    "host_result",
    "kind_from_host_code",
    "to_host_error",
]
