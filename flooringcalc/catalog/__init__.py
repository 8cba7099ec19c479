"""Calculator catalogue and page metadata builders."""

from .listing import CATEGORIES, CalculatorDefinition
from .seo import HeadTagSet, breadcrumbs, calculator_breadcrumbs, head_tags, structured_data

__all__ = [
    "CATEGORIES",
    "CalculatorDefinition",
    "HeadTagSet",
    "breadcrumbs",
    "calculator_breadcrumbs",
    "head_tags",
    "structured_data",
]
