"""
Calculator catalogue: the static CalculatorDefinition list the site navigates.

Loaded once from data/calculators.json at import time. Definitions are frozen;
nothing here mutates them.
"""

import json
import logging
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "calculators.json"

Category = Literal["basic", "materials", "advanced"]
CATEGORIES = ("basic", "materials", "advanced")


class CalculatorDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    category: Category
    icon: str
    color: str
    route: str
    meta_title: str
    meta_description: str
    keywords: tuple[str, ...] = ()

    @property
    def kind(self) -> str:
        """Registry kind this entry lists. Catalogue ids are registry kinds."""
        return self.id


def _load() -> tuple[CalculatorDefinition, ...]:
    with open(_CATALOG_PATH, encoding="utf-8") as f:
        raw = json.load(f)
    definitions = tuple(CalculatorDefinition(**entry) for entry in raw)
    logger.info("Loaded %d calculator definitions from %s", len(definitions), _CATALOG_PATH.name)
    return definitions


_DEFINITIONS = _load()
_BY_ID = {d.id: d for d in _DEFINITIONS}
_BY_ROUTE = {d.route: d for d in _DEFINITIONS}


def all_definitions() -> list[CalculatorDefinition]:
    return list(_DEFINITIONS)


def get_by_id(calculator_id: str) -> Optional[CalculatorDefinition]:
    return _BY_ID.get(calculator_id)


def get_by_kind(kind: str) -> Optional[CalculatorDefinition]:
    return _BY_ID.get(kind)


def get_by_route(route: str) -> Optional[CalculatorDefinition]:
    return _BY_ROUTE.get(route)


def get_by_category(category: str) -> list[CalculatorDefinition]:
    """Definitions in one category, in catalogue order. "all" returns everything."""
    if category == "all":
        return list(_DEFINITIONS)
    return [d for d in _DEFINITIONS if d.category == category]
