"""
Waste percentage recommender.

Works backwards from the job: start at a 5% baseline, add fixed increments for
room complexity, material, installation method and an irregular shape, then
clamp. The only calculator whose output is a waste percentage rather than a
quantity.
"""

from typing import Literal

from .base import BaseCalculator
from .inputs import InputSchema, choice
from .tables import FlooringType, RoomComplexity

BASELINE_WASTE = 5
RECOMMENDED_RANGE = (5, 30)
ADVISORY_RANGE = (5, 35)
ADVISORY_BELOW = 3
ADVISORY_ABOVE = 5

# option -> (added percentage points, factor text)
COMPLEXITY_WASTE = {
    "simple": (0, "Simple room layout"),
    "moderate": (5, "Moderate complexity with some cuts"),
    "complex": (10, "Complex room with many angles and cuts"),
}

MATERIAL_WASTE = {
    "tile": (2, "Ceramic/porcelain tile installation"),
    "hardwood": (3, "Hardwood flooring installation"),
    "vinyl": (1, "Vinyl flooring installation"),
    "laminate": (2, "Laminate flooring installation"),
    "carpet": (1, "Carpet installation"),
}

METHOD_WASTE = {
    "straight": (0, "Straight installation pattern"),
    "diagonal": (10, "Diagonal installation (+10% waste)"),
    "pattern": (15, "Complex pattern installation (+15% waste)"),
}

IRREGULAR_SHAPE_WASTE = (5, "Irregular room shape")


class WastePercentageInputs(InputSchema):
    room_complexity: RoomComplexity = choice("simple")
    material_type: FlooringType = choice("tile")
    installation_method: Literal["straight", "diagonal", "pattern"] = choice("straight")
    room_shape: Literal["rectangular", "irregular"] = choice("rectangular")


class WastePercentageCalculator(BaseCalculator):

    kind = "waste-percentage"
    schema = WastePercentageInputs

    def calculate(self, inputs: WastePercentageInputs) -> dict:
        contributions = [
            COMPLEXITY_WASTE[inputs.room_complexity],
            MATERIAL_WASTE[inputs.material_type],
            METHOD_WASTE[inputs.installation_method],
        ]
        if inputs.room_shape == "irregular":
            contributions.append(IRREGULAR_SHAPE_WASTE)

        base_waste = BASELINE_WASTE + sum(points for points, _ in contributions)
        low, high = RECOMMENDED_RANGE
        recommended = min(max(base_waste, low), high)
        minimum = max(recommended - ADVISORY_BELOW, ADVISORY_RANGE[0])
        maximum = min(recommended + ADVISORY_ABOVE, ADVISORY_RANGE[1])

        return {
            "base_waste": base_waste,
            "recommended_waste": recommended,
            "min_waste": minimum,
            "max_waste": maximum,
            "explanation": (
                "Based on your project parameters, we recommend %d%% waste factor. "
                "This accounts for cuts, breakage, and future repairs." % recommended
            ),
            "factors": [text for _, text in contributions],
        }
