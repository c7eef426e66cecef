"""
Contract Validation Module

Модуль для валидации JSON контрактов на границе SafeMath.
"""

from .validators import (
    ContractValidator,
    HostErrorValidator,
    OperationResultValidator,
    SchemaLoader,
    validate_host_error,
    validate_operation_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "HostErrorValidator",
    "OperationResultValidator",
    # Functions
    "validate_host_error",
    "validate_operation_result",
]
