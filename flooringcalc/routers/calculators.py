"""
Calculator API: the catalogue plus the validate-then-evaluate pass.

GET  /api/calculators                  Catalogue listing, optionally by category
GET  /api/calculators/{kind}           One definition with its head tags and JSON-LD
GET  /api/calculators/{kind}/schema    Input schema as JSON Schema (form field names)
POST /api/calculators/{kind}/validate  Validate raw form values
POST /api/calculators/{kind}/evaluate  Validate, then run the calculator
"""

import logging
from typing import Any, List, Literal

from fastapi import APIRouter, Body, HTTPException

from .. import schemas
from ..calculators import UnknownCalculatorError, estimate, schema_for, validate
from ..catalog import listing
from ..catalog.seo import calculator_breadcrumbs, head_tags, structured_data

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculators", tags=["calculators"])


def _schema_or_404(kind: str):
    try:
        return schema_for(kind)
    except UnknownCalculatorError:
        logger.warning("Unknown calculator requested: %s", kind)
        raise HTTPException(status_code=404, detail=f"Unknown calculator: {kind}")


@router.get("", response_model=List[listing.CalculatorDefinition])
def list_calculators(category: Literal["all", "basic", "materials", "advanced"] = "all"):
    return listing.get_by_category(category)


@router.get("/{kind}", response_model=schemas.CalculatorDetail)
def get_calculator_page(kind: str):
    definition = listing.get_by_kind(kind)
    if definition is None:
        logger.warning("Unknown calculator requested: %s", kind)
        raise HTTPException(status_code=404, detail=f"Unknown calculator: {kind}")
    return schemas.CalculatorDetail(
        **definition.model_dump(),
        head_tags=head_tags(definition),
        structured_data=structured_data(definition),
        breadcrumbs=calculator_breadcrumbs(definition),
    )


@router.get("/{kind}/schema")
def get_input_schema(kind: str):
    return _schema_or_404(kind).model_json_schema(by_alias=True)


@router.post("/{kind}/validate", response_model=schemas.ValidationResult,
             responses={422: {"model": schemas.FieldErrorResponse}})
def validate_inputs(kind: str, raw: dict[str, Any] = Body(...)):
    """FieldErrors propagate to the app's 422 handler."""
    record = validate(_schema_or_404(kind), raw)
    return schemas.ValidationResult(inputs=record.model_dump(mode="json"))


@router.post("/{kind}/evaluate", response_model=schemas.Estimate,
             responses={422: {"model": schemas.FieldErrorResponse}})
def evaluate_inputs(kind: str, raw: dict[str, Any] = Body(...)):
    _schema_or_404(kind)
    record, results = estimate(kind, raw)
    return schemas.Estimate(kind=kind, inputs=record.model_dump(mode="json"), results=results)
