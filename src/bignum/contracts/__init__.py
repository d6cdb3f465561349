"""
Contract Validation Module

Модуль для валидации JSON контрактов значений и результатов операций.
"""

from .validators import (
    BigNumValueValidator,
    ContractValidator,
    OperationResultValidator,
    SchemaLoader,
    validate_bignum_value,
    validate_operation_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigNumValueValidator",
    "OperationResultValidator",
    # Functions
    "validate_bignum_value",
    "validate_operation_result",
]
