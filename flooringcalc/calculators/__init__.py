"""
Flooring calculators: deterministic formula layer.

Pure Python math. Given validated form inputs for one calculator kind,
produce the ResultRecord with quantities, costs and advice.
"""

from .evaluator import estimate, evaluate, schema_for
from .inputs import FieldErrors, InputSchema, validate
from .registry import (
    CALCULATOR_REGISTRY,
    UnknownCalculatorError,
    get_calculator,
    has_calculator,
    list_calculators,
)

__all__ = [
    "CALCULATOR_REGISTRY",
    "FieldErrors",
    "InputSchema",
    "UnknownCalculatorError",
    "estimate",
    "evaluate",
    "get_calculator",
    "has_calculator",
    "list_calculators",
    "schema_for",
    "validate",
]
