from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Integer, String

from .database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Calculation(Base):
    """One stored calculator run: the validated inputs and what they produced."""
    __tablename__ = "calculations"

    id = Column(Integer, primary_key=True, index=True)
    calculator_type = Column(String, nullable=False, index=True)  # registry kind
    inputs = Column(JSON, nullable=False, default=dict)  # InputRecord by field name
    results = Column(JSON, nullable=False, default=dict)  # ResultRecord
    created_at = Column(DateTime, default=_utcnow)
