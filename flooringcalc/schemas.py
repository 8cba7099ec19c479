from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from .catalog.listing import CalculatorDefinition
from .catalog.seo import HeadTagSet


# --- Catalogue ---

class CalculatorDetail(CalculatorDefinition):
    """A catalogue entry with the page metadata built for it."""
    head_tags: HeadTagSet
    structured_data: dict
    breadcrumbs: dict


# --- Calculator runs ---

class ValidationResult(BaseModel):
    valid: bool = True
    inputs: dict[str, Any]


class Estimate(BaseModel):
    kind: str
    inputs: dict[str, Any]
    results: dict[str, Any]


class FieldErrorResponse(BaseModel):
    detail: str = "Invalid input"
    errors: dict[str, str]


# --- Stored calculations ---

class CalculationBase(BaseModel):
    calculator_type: str
    inputs: dict[str, Any]
    results: dict[str, Any]

class CalculationCreate(CalculationBase):
    pass

class Calculation(CalculationBase):
    id: int
    created_at: Optional[datetime] = None
    class Config:
        from_attributes = True
