"""
Calculation storage. Write-only: the row comes back from the POST and
nothing reads it after that.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import models, schemas
from ..calculators import has_calculator
from ..config import settings
from ..database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculations", tags=["calculations"])


@router.post("", response_model=schemas.Calculation)
def store_calculation(calculation: schemas.CalculationCreate, db: Session = Depends(get_db)):
    if not settings.STORE_CALCULATIONS:
        raise HTTPException(status_code=404, detail="Calculation storage is disabled")
    if not has_calculator(calculation.calculator_type):
        logger.warning("Refusing to store unknown calculator: %s", calculation.calculator_type)
        raise HTTPException(status_code=404,
                            detail=f"Unknown calculator: {calculation.calculator_type}")

    db_calculation = models.Calculation(**calculation.model_dump())
    db.add(db_calculation)
    db.commit()
    db.refresh(db_calculation)
    logger.info("Stored %s calculation %d", db_calculation.calculator_type, db_calculation.id)
    return db_calculation
