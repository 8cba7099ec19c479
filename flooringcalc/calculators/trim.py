"""
Trim and stairs: baseboard and casing, molding runs, transition strips and
stair coverings. Trim is sold by the linear foot or in 8 ft sticks.
"""

import math
from typing import Literal, Optional

from .base import BaseCalculator, ceil_units
from .inputs import InputSchema, Toggle, choice, measure, waste
from .tables import CAULK_TUBE_PRICE, NAIL_BOX_PRICE, TRANSITION_STRIP_PRICE

STICK_LENGTH_FT = 8


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


# ============================================================
# Baseboard and trim
# ============================================================

BaseboardStyle = Literal["standard", "colonial", "modern", "craftsman", "victorian"]
BaseboardHeight = Literal["3-inch", "4-inch", "5-inch", "6-inch", "custom"]

# $/linear ft by style and height
BASEBOARD_PRICES = {
    "standard": {"3-inch": 1.50, "4-inch": 2.25, "5-inch": 3.00, "6-inch": 4.50, "custom": 5.00},
    "colonial": {"3-inch": 2.00, "4-inch": 3.25, "5-inch": 4.50, "6-inch": 6.00, "custom": 7.00},
    "modern": {"3-inch": 2.50, "4-inch": 3.75, "5-inch": 5.25, "6-inch": 7.50, "custom": 8.50},
    "craftsman": {"3-inch": 3.00, "4-inch": 4.50, "5-inch": 6.25, "6-inch": 8.50, "custom": 10.00},
    "victorian": {"3-inch": 4.00, "4-inch": 6.00, "5-inch": 8.50, "6-inch": 12.00, "custom": 15.00},
}

QUARTER_ROUND_PRICE = 1.25
CROWN_MOLDING_PRICE = 3.50
CASING_PRICE = 2.75
WINDOW_HEIGHT_FT = 4
TRIM_FT_PER_NAIL_BOX = 100
TRIM_FT_PER_CAULK_TUBE = 50
# Half an hour per 10 linear ft
TRIM_HOURS_PER_FT = 0.5 / 10


class BaseboardInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    ceiling_height: float = measure(8, ge=6, message="Ceiling height must be at least 6 feet")
    door_width: float = measure(32, ge=24, message="Door width must be at least 24 inches")
    number_of_doors: int = measure(1, ge=0, le=20, message="Number of doors must be between 0-20")
    number_of_windows: int = measure(2, ge=0, le=50,
                                     message="Number of windows must be between 0-50")
    window_width: float = measure(36, ge=12,
                                  message="Average window width must be at least 12 inches")
    baseboard_style: BaseboardStyle = choice("standard")
    baseboard_height: BaseboardHeight = choice("4-inch")
    custom_height: Optional[float] = measure(None, ge=2, le=12)
    include_quarter_round: Toggle = False
    include_crown_molding: Toggle = False
    include_casing: Toggle = True
    waste_percentage: float = waste(10, 5, 25)


class BaseboardCalculator(BaseCalculator):
    """Baseboard around the room less door and window openings, with optional trim."""

    kind = "baseboard"
    schema = BaseboardInputs

    def calculate(self, inputs: BaseboardInputs) -> dict:
        waste_pct = inputs.waste_percentage
        room_perimeter = self.rectangle_perimeter(inputs.room_length, inputs.room_width)
        door_feet = self.inches_to_feet(inputs.door_width)
        window_feet = self.inches_to_feet(inputs.window_width)

        openings = inputs.number_of_doors * door_feet + inputs.number_of_windows * window_feet
        adjusted_perimeter = max(room_perimeter - openings, 0)
        baseboard = self.with_waste(adjusted_perimeter, waste_pct)
        quarter_round = baseboard if inputs.include_quarter_round else 0
        # Crown runs the full perimeter, openings included
        crown = self.with_waste(room_perimeter, waste_pct) if inputs.include_crown_molding else 0

        door_casing = window_casing = 0
        if inputs.include_casing:
            per_door = inputs.ceiling_height * 2 + door_feet
            door_casing = self.with_waste(inputs.number_of_doors * per_door, waste_pct)
            per_window = WINDOW_HEIGHT_FT * 2 + window_feet * 2
            window_casing = self.with_waste(inputs.number_of_windows * per_window, waste_pct)

        total_feet = baseboard + quarter_round + crown + door_casing + window_casing
        nails = self.units_for(total_feet, TRIM_FT_PER_NAIL_BOX)
        caulk = self.units_for(total_feet, TRIM_FT_PER_CAULK_TUBE)

        total = self.sum_costs(
            baseboard * BASEBOARD_PRICES[inputs.baseboard_style][inputs.baseboard_height],
            quarter_round * QUARTER_ROUND_PRICE,
            crown * CROWN_MOLDING_PRICE,
            door_casing * CASING_PRICE,
            window_casing * CASING_PRICE,
            nails * NAIL_BOX_PRICE,
            caulk * CAULK_TUBE_PRICE,
        )

        cutting_list = {"Baseboard": round_half_up(baseboard)}
        for label, feet in (("Quarter Round", quarter_round), ("Crown Molding", crown),
                            ("Door Casing", door_casing), ("Window Casing", window_casing)):
            if feet > 0:
                cutting_list[label] = round_half_up(feet)

        return {
            "room_perimeter": room_perimeter,
            "adjusted_perimeter": adjusted_perimeter,
            "baseboard_needed": baseboard,
            "quarter_round_needed": quarter_round,
            "crown_molding_needed": crown,
            "door_casing_needed": door_casing,
            "window_casing_needed": window_casing,
            "total_linear_feet": total_feet,
            "nails_needed": nails,
            "caulk_needed": caulk,
            "total_cost": total,
            "labor_hours": total_feet * TRIM_HOURS_PER_FT,
            "cutting_list": cutting_list,
        }


# ============================================================
# Molding
# ============================================================

# $ per 8 ft stick
MOLDING_PRICES = {
    "pine": 2.85,
    "oak": 5.25,
    "maple": 6.15,
    "mdf": 1.95,
    "pvc": 4.35,
}

DOOR_GAP_FT = 3
WINDOW_GAP_FT = 4
MOLDING_FT_PER_NAIL_LB = 12
MOLDING_FT_PER_CAULK_TUBE = 350


class MoldingInputs(InputSchema):
    room_length: float = measure(ge=0.1)
    room_width: float = measure(ge=0.1)
    molding_type: Literal["quarter-round", "shoe-molding", "crown-molding", "chair-rail",
                          "wainscoting"] = choice("quarter-round")
    material: Literal["pine", "oak", "maple", "mdf", "pvc"] = choice("pine")
    doors: int = measure(1, ge=0)
    windows: int = measure(2, ge=0)
    waste_percentage: float = waste(15, 10, 25)


class MoldingCalculator(BaseCalculator):

    kind = "molding"
    schema = MoldingInputs

    def calculate(self, inputs: MoldingInputs) -> dict:
        perimeter = self.rectangle_perimeter(inputs.room_length, inputs.room_width)
        net_perimeter = max(perimeter - inputs.doors * DOOR_GAP_FT
                            - inputs.windows * WINDOW_GAP_FT, 0)
        adjusted_length = self.with_waste(net_perimeter, inputs.waste_percentage)

        sticks = self.units_for(adjusted_length, STICK_LENGTH_FT)
        nails = self.units_for(adjusted_length, MOLDING_FT_PER_NAIL_LB)
        caulk = self.units_for(adjusted_length, MOLDING_FT_PER_CAULK_TUBE)

        return {
            "total_perimeter": perimeter,
            "adjusted_length": adjusted_length,
            "molding_needed": sticks,
            "nails_needed": nails,
            "caulk_needed": caulk,
            "total_cost": self.sum_costs(
                sticks * MOLDING_PRICES[inputs.material],
                nails * NAIL_BOX_PRICE,
                caulk * CAULK_TUBE_PRICE,
            ),
            "cutting_list": [
                "%d full 8-foot pieces" % math.floor(adjusted_length / STICK_LENGTH_FT),
                "1 piece at %.1f feet" % (adjusted_length % STICK_LENGTH_FT),
                "Cut 45° miters for inside corners",
                "Cut 90° joints for outside corners",
            ],
        }


# ============================================================
# Transition strips
# ============================================================

# $ per 8 ft strip
TRANSITION_PRICES = {
    "oak": 12,
    "maple": 14,
    "cherry": 18,
    "vinyl": 8,
    "aluminum": 25,
    "brass": 35,
}

TRANSITION_TIPS = [
    "Measure exact length before ordering",
    "Account for expansion gaps at walls",
    "Pre-drill screw holes to prevent splitting",
    "Use appropriate fasteners for subfloor type",
]


class TransitionStripInputs(InputSchema):
    number_of_transitions: int = measure(1, ge=1)
    transition_type: Literal["t-molding", "reducer", "threshold", "quarter-round",
                             "stair-nose"] = choice("t-molding")
    material: Literal["oak", "maple", "cherry", "vinyl", "aluminum", "brass"] = choice("oak")
    total_length: float = measure(ge=0.1)
    waste_percentage: float = waste(10, 5, 20)


class TransitionStripCalculator(BaseCalculator):

    kind = "transition-strip"
    schema = TransitionStripInputs

    def calculate(self, inputs: TransitionStripInputs) -> dict:
        adjusted_length = self.with_waste(inputs.total_length, inputs.waste_percentage)
        pieces = self.units_for(adjusted_length, STICK_LENGTH_FT)
        return {
            "total_length": inputs.total_length,
            "adjusted_length": adjusted_length,
            "pieces_needed": pieces,
            "total_cost": pieces * TRANSITION_PRICES[inputs.material],
            "installation_tips": list(TRANSITION_TIPS),
        }


# ============================================================
# Stairs
# ============================================================

RISER_HEIGHT_IN = 7.5
NOSING_PRICE = 8
# One transition at the top of the flight, one at the bottom
STAIR_TRANSITIONS = 2

STAIR_TIPS = [
    "Measure each step individually as they may vary",
    "Use appropriate stair nosing for safety and code compliance",
    "Ensure proper expansion gaps at walls",
    "Consider professional installation for curved stairs",
    "Test fit all pieces before final installation",
    "Use construction adhesive for secure attachment",
]


class StairInputs(InputSchema):
    number_of_steps: int = measure(ge=1, message="Must have at least 1 step")
    step_width: float = measure(36, ge=12, message="Step width must be at least 12 inches")
    step_depth: float = measure(11, ge=10, message="Step depth must be at least 10 inches")
    flooring_type: Literal["hardwood", "laminate", "vinyl", "carpet", "tile"] = choice("hardwood")
    nosing: Toggle = True
    riser_covering: Toggle = False
    waste_percentage: float = waste(15, 5, 25)
    material_cost: float = measure(6.75, ge=0)


class StairCalculator(BaseCalculator):

    kind = "stair"
    schema = StairInputs

    def calculate(self, inputs: StairInputs) -> dict:
        treads = inputs.number_of_steps
        risers = inputs.number_of_steps if inputs.riser_covering else 0

        tread_area = (treads * inputs.step_width * inputs.step_depth) / 144
        riser_area = (risers * inputs.step_width * RISER_HEIGHT_IN) / 144 if risers else 0
        total_area = tread_area + riser_area
        adjusted_area = self.with_waste(total_area, inputs.waste_percentage)
        nosing = ceil_units((treads * inputs.step_width) / 12) if inputs.nosing else 0

        return {
            "total_treads": treads,
            "total_risers": risers,
            "tread_area": tread_area,
            "riser_area": riser_area,
            "total_area": total_area,
            "adjusted_area": adjusted_area,
            "nosing_needed": nosing,
            "transition_strips": STAIR_TRANSITIONS,
            "total_cost": self.sum_costs(
                adjusted_area * inputs.material_cost,
                nosing * NOSING_PRICE,
                STAIR_TRANSITIONS * TRANSITION_STRIP_PRICE,
            ),
            "installation_tips": list(STAIR_TIPS),
        }
