"""
Evaluator facade: the validate-then-evaluate pass a form submission makes.

Callers never touch calculator classes directly.
"""

import logging

from .inputs import InputSchema, validate
from .registry import get_calculator

logger = logging.getLogger(__name__)


def schema_for(kind: str) -> type[InputSchema]:
    """The InputSchema a calculator kind accepts. Raises UnknownCalculatorError."""
    return get_calculator(kind).schema


def evaluate(kind: str, record: InputSchema) -> dict:
    """
    Run a calculator on an already validated InputRecord.

    The record must be an instance of the kind's schema; passing another
    calculator's record is a programming error.
    """
    calculator = get_calculator(kind)
    if not isinstance(record, calculator.schema):
        raise TypeError(
            f"{kind} expects {calculator.schema.__name__}, got {type(record).__name__}"
        )
    logger.debug("Evaluating %s", kind)
    return calculator.calculate(record)


def estimate(kind: str, raw: dict) -> tuple[InputSchema, dict]:
    """
    Validate raw form values then evaluate them.

    Returns (InputRecord, ResultRecord). Raises FieldErrors before any
    formula runs when the input is invalid.
    """
    record = validate(schema_for(kind), raw)
    return record, evaluate(kind, record)


__all__ = ["estimate", "evaluate", "schema_for", "validate"]
