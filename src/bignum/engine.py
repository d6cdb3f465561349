"""
Engine — Единая точка входа для операций над BigNum

evaluate() принимает имя операции и операнды (BigNum или сырой текст),
проверяет арность, вызывает соответствующий примитив и возвращает
OperationResult, сериализуемый в контракт operation_result.json.
"""

import logging
from enum import Enum
from typing import Any, Dict, Final, Optional, Union

from pydantic import BaseModel, Field

from src.bignum.contracts import validate_operation_result
from src.bignum.domain.value import BigNumLike, to_bignum
from src.bignum.math.arithmetic import add, compare, decrement, multiply
from src.bignum.math.powers import ArithmeticLimits, factorial, power
from src.bignum.math.scientific_notation import (
    DEFAULT_SIGNIFICANT_FIGURES,
    format_scientific,
)

logger = logging.getLogger(__name__)

CONTRACT_SCHEMA_VERSION: Final[str] = "1"


# =============================================================================
# ENUMS
# =============================================================================


class Operation(str, Enum):
    """Поддерживаемые операции"""

    COMPARE = "compare"
    ADD = "add"
    MULTIPLY = "multiply"
    DECREMENT = "decrement"
    POWER = "power"
    FACTORIAL = "factorial"
    SCIENTIFIC = "scientific"


_ARITY: Final[Dict[Operation, int]] = {
    Operation.COMPARE: 2,
    Operation.ADD: 2,
    Operation.MULTIPLY: 2,
    Operation.DECREMENT: 1,
    Operation.POWER: 2,
    Operation.FACTORIAL: 1,
    Operation.SCIENTIFIC: 1,
}


# =============================================================================
# RESULT MODEL
# =============================================================================


class OperationResult(BaseModel):
    """
    Результат одной операции.

    Immutable модель (frozen=True). В result лежит строка цифр, научная нотация
    (для SCIENTIFIC) или имя Ordering (для COMPARE).
    """

    operation: Operation = Field(..., description="Выполненная операция")
    operands: tuple[str, ...] = Field(..., min_length=1, max_length=2)
    result: str = Field(..., min_length=1)
    significant_figures: Optional[int] = Field(None, ge=1)

    model_config = {"frozen": True}

    def to_contract(self) -> Dict[str, Any]:
        """
        Сериализация в контракт operation_result.json.

        Raises:
            jsonschema.ValidationError: Если запись нарушает контракт
        """
        data: Dict[str, Any] = {
            "schema_version": CONTRACT_SCHEMA_VERSION,
            "operation": self.operation.value,
            "operands": list(self.operands),
            "result": self.result,
        }
        if self.significant_figures is not None:
            data["significant_figures"] = self.significant_figures

        validate_operation_result(data)
        return data


# =============================================================================
# DISPATCH
# =============================================================================


def evaluate(
    operation: Union[Operation, str],
    *operands: BigNumLike,
    significant_figures: Optional[int] = None,
    limits: Optional[ArithmeticLimits] = None,
) -> OperationResult:
    """
    Выполнение операции по имени.

    Args:
        operation: Operation или её строковое имя ("add", "power", ...)
        operands: Операнды (BigNum или текст цифр)
        significant_figures: Только для SCIENTIFIC (default: 5)
        limits: Лимиты для POWER / FACTORIAL

    Returns:
        OperationResult

    Raises:
        ValueError: Неизвестная операция, неверная арность или
            significant_figures для операции, отличной от SCIENTIFIC
        InvalidDigitString: Некорректный текст операнда
        ResourceExhausted: Превышение лимитов в POWER / FACTORIAL

    Examples:
        >>> evaluate("multiply", "25", "100").result
        '2500'
        >>> evaluate("compare", "7", "10").result
        'LESS'
    """
    op = Operation(operation)

    expected = _ARITY[op]
    if len(operands) != expected:
        raise ValueError(
            f"{op.value} expects {expected} operand(s), got {len(operands)}"
        )

    if significant_figures is not None and op is not Operation.SCIENTIFIC:
        raise ValueError(f"significant_figures is only valid for scientific, not {op.value}")

    values = [to_bignum(operand) for operand in operands]
    logger.debug(
        "evaluate %s on operands of %s digits",
        op.value,
        [v.digit_length for v in values],
    )

    if op is Operation.COMPARE:
        rendered = compare(values[0], values[1]).name
    elif op is Operation.ADD:
        rendered = add(values[0], values[1]).digits
    elif op is Operation.MULTIPLY:
        rendered = multiply(values[0], values[1]).digits
    elif op is Operation.DECREMENT:
        rendered = decrement(values[0]).digits
    elif op is Operation.POWER:
        rendered = power(values[0], values[1], limits=limits).digits
    elif op is Operation.FACTORIAL:
        rendered = factorial(values[0], limits=limits).digits
    else:
        if significant_figures is None:
            significant_figures = DEFAULT_SIGNIFICANT_FIGURES
        rendered = format_scientific(values[0], significant_figures)

    return OperationResult(
        operation=op,
        operands=tuple(v.digits for v in values),
        result=rendered,
        significant_figures=significant_figures,
    )
