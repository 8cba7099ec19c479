"""
Abstract base class for all flooring calculators.

Input: a validated InputRecord (instance of the calculator's InputSchema)
Output: ResultRecord dict of derived quantities, costs and advice text
"""

import math
from abc import ABC, abstractmethod

from .inputs import InputSchema

SQ_IN_PER_SQ_FT = 144.0
SQ_FT_PER_SQ_YD = 9.0

# Products like 20 × 1.1 land a hair above the whole number in binary floats
CEIL_PRECISION = 9


def ceil_units(value: float) -> int:
    """Round up to whole units, ignoring float noise below CEIL_PRECISION digits."""
    return math.ceil(round(value, CEIL_PRECISION))


class BaseCalculator(ABC):
    """All calculators inherit from this."""

    kind: str = ""
    schema: type[InputSchema] = InputSchema

    @abstractmethod
    def calculate(self, inputs: InputSchema) -> dict:
        """
        Takes a validated InputRecord.
        Returns the ResultRecord dict. Never fails on valid input.
        """
        pass

    # --- Geometry ---

    def rectangle_area(self, length: float, width: float) -> float:
        return length * width

    def rectangle_perimeter(self, length: float, width: float) -> float:
        return 2 * (length + width)

    def circle_area(self, radius: float) -> float:
        return math.pi * radius ** 2

    def circle_circumference(self, radius: float) -> float:
        return 2 * math.pi * radius

    def triangle_area(self, base: float, height: float) -> float:
        return 0.5 * base * height

    def l_shape_area(self, length1: float, width1: float,
                     length2: float, width2: float) -> float:
        """Two rectangles joined into an L."""
        return length1 * width1 + length2 * width2

    def octagon_area(self, side: float) -> float:
        """Regular octagon from its side length."""
        return 2 * (1 + math.sqrt(2)) * side ** 2

    # --- Units ---

    def feet_to_inches(self, feet: float) -> float:
        return feet * 12.0

    def inches_to_feet(self, inches: float) -> float:
        return inches / 12.0

    def sq_ft_from_inches(self, length_in: float, width_in: float) -> float:
        """Area in sq ft of a piece measured in inches."""
        return (length_in * width_in) / SQ_IN_PER_SQ_FT

    def sq_ft_to_sq_yd(self, sq_ft: float) -> float:
        return sq_ft / SQ_FT_PER_SQ_YD

    def sq_ft_to_sq_in(self, sq_ft: float) -> float:
        return sq_ft * SQ_IN_PER_SQ_FT

    # --- Waste and whole units ---

    def with_waste(self, quantity: float, waste_percentage: float) -> float:
        """Quantity marked up by a waste percentage. Left continuous."""
        return quantity * (1 + waste_percentage / 100)

    def apply_waste(self, quantity: float, waste_percentage: float) -> int:
        """Waste markup rounded UP to whole units. You can't buy half a tile."""
        return ceil_units(self.with_waste(quantity, waste_percentage))

    def units_for(self, quantity: float, per_unit: float) -> int:
        """Whole units (boxes, bags, rolls) needed to cover a quantity."""
        return ceil_units(quantity / per_unit)

    # --- Cost ---

    def sum_costs(self, *line_totals: float) -> float:
        """Cost aggregation. Disabled line items are passed as 0."""
        return sum(line_totals)

    def cost_per_sq_ft(self, total: float, area: float) -> float:
        return total / area


def format_number(value: float) -> str:
    """Render a number the way the calculator pages print user input (10, 10.5)."""
    value = float(value)
    if value.is_integer():
        return "%d" % value
    return repr(value)
