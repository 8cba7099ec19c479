"""
Cost estimators: project cost, installation, labor, material takeoff and repairs.

Everything here is area × rate with categorical multipliers.
"""

from typing import Literal, Optional

from .base import BaseCalculator, ceil_units
from .inputs import InputSchema, Toggle, choice, measure, waste
from .tables import (
    COMPLEXITY_MULTIPLIERS, FlooringType, RoomComplexity, REPAIR_LABOR_RATE,
)


# ============================================================
# Flooring cost
# ============================================================

class FlooringCostInputs(InputSchema):
    length: float = measure(ge=0.1, message="Length must be greater than 0")
    width: float = measure(ge=0.1, message="Width must be greater than 0")
    material_cost: float = measure(ge=0, message="Material cost must be 0 or greater")
    labor_cost: float = measure(ge=0, message="Labor cost must be 0 or greater")
    waste_percentage: float = waste(10)
    additional_costs: Optional[float] = measure(
        None, ge=0, message="Additional costs must be 0 or greater")


class FlooringCostCalculator(BaseCalculator):
    """Material + labor over the waste-adjusted area, plus flat extras."""

    kind = "flooring-cost"
    schema = FlooringCostInputs

    def calculate(self, inputs: FlooringCostInputs) -> dict:
        base_area = self.rectangle_area(inputs.length, inputs.width)
        adjusted_area = self.with_waste(base_area, inputs.waste_percentage)
        material_total = adjusted_area * inputs.material_cost
        labor_total = adjusted_area * inputs.labor_cost
        additional_total = inputs.additional_costs or 0
        grand_total = self.sum_costs(material_total, labor_total, additional_total)

        return {
            "base_area": base_area,
            "adjusted_area": adjusted_area,
            "material_total": material_total,
            "labor_total": labor_total,
            "additional_total": additional_total,
            "grand_total": grand_total,
            "cost_per_sq_ft": self.cost_per_sq_ft(grand_total, base_area),
        }


# ============================================================
# Installation cost
# ============================================================

# Installed labor $/sq ft by flooring
INSTALL_LABOR_RATES = {
    "tile": 8.50,
    "hardwood": 12.00,
    "vinyl": 6.00,
    "laminate": 4.50,
    "carpet": 3.50,
    "stone": 15.00,
}

REGION_MULTIPLIERS = {
    "low-cost": 0.8,
    "average": 1.0,
    "high-cost": 1.4,
}

REMOVAL_RATE = 2.50     # $/sq ft, tear-out of old flooring
SUBFLOOR_PREP_RATE = 4.00


class InstallationCostInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    flooring_type: Literal["tile", "hardwood", "vinyl", "laminate", "carpet", "stone"] = choice("tile")
    room_complexity: RoomComplexity = choice("simple")
    region: Literal["low-cost", "average", "high-cost"] = choice("average")
    include_removal: Toggle = False
    include_subfloor: Toggle = False


class InstallationCostCalculator(BaseCalculator):

    kind = "installation-cost"
    schema = InstallationCostInputs

    def calculate(self, inputs: InstallationCostInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        base_labor_rate = INSTALL_LABOR_RATES[inputs.flooring_type]
        complexity = COMPLEXITY_MULTIPLIERS[inputs.room_complexity]
        region = REGION_MULTIPLIERS[inputs.region]

        installation_cost = room_area * base_labor_rate * complexity * region
        removal_cost = room_area * REMOVAL_RATE * region if inputs.include_removal else 0
        subfloor_cost = room_area * SUBFLOOR_PREP_RATE * region if inputs.include_subfloor else 0
        total_cost = self.sum_costs(installation_cost, removal_cost, subfloor_cost)

        return {
            "room_area": room_area,
            "base_labor_rate": base_labor_rate,
            "complexity_multiplier": complexity,
            "region_multiplier": region,
            "installation_cost": installation_cost,
            "removal_cost": removal_cost,
            "subfloor_cost": subfloor_cost,
            "total_cost": total_cost,
            "cost_per_sq_ft": self.cost_per_sq_ft(total_cost, room_area),
        }


# ============================================================
# Labor cost
# ============================================================

HOURLY_RATES = {
    "apprentice": 25,
    "journeyman": 45,
    "master": 65,
    "specialist": 85,
}

HOURS_PER_SQ_FT = {
    "tile": 0.45,
    "hardwood": 0.35,
    "vinyl": 0.25,
    "laminate": 0.20,
    "carpet": 0.15,
    "stone": 0.60,
    "concrete": 0.30,
}

LABOR_COMPLEXITY = {
    "basic": 0.8,
    "standard": 1.0,
    "complex": 1.4,
    "premium": 1.8,
}

TIMELINE_MULTIPLIERS = {
    "standard": 1.0,
    "rush": 1.5,
    "weekend": 1.3,
}

# Bigger crews finish faster at a lower effective rate per head
CREW_MULTIPLIERS = {
    "1-person": 1.0,
    "2-person": 0.85,
    "3-person": 0.75,
    "crew": 0.70,
}

CREW_HEADCOUNT = {
    "1-person": 1,
    "2-person": 2,
    "3-person": 3,
    "crew": 4,
}

LABOR_REGION_MULTIPLIERS = {
    "rural": 0.75,
    "suburban": 1.0,
    "urban": 1.25,
    "metro": 1.6,
}

# Reported alongside the estimate; the hourly rate already reflects experience
EXPERIENCE_MULTIPLIERS = {
    "apprentice": 0.8,
    "journeyman": 1.0,
    "master": 1.3,
    "specialist": 1.6,
}

WORKING_HOURS_PER_DAY = 8
WORKING_DAYS_PER_WEEK = 5


class LaborCostInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    flooring_type: Literal["tile", "hardwood", "vinyl", "laminate",
                           "carpet", "stone", "concrete"] = choice("tile")
    installation_complexity: Literal["basic", "standard", "complex", "premium"] = choice("standard")
    project_timeline: Literal["standard", "rush", "weekend"] = choice("standard")
    crew_size: Literal["1-person", "2-person", "3-person", "crew"] = choice("2-person")
    region: Literal["rural", "suburban", "urban", "metro"] = choice("suburban")
    experience_level: Literal["apprentice", "journeyman", "master", "specialist"] = choice("journeyman")


class LaborCostCalculator(BaseCalculator):

    kind = "labor-cost"
    schema = LaborCostInputs

    def calculate(self, inputs: LaborCostInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        hourly_rate = HOURLY_RATES[inputs.experience_level]
        complexity = LABOR_COMPLEXITY[inputs.installation_complexity]
        timeline = TIMELINE_MULTIPLIERS[inputs.project_timeline]
        crew = CREW_MULTIPLIERS[inputs.crew_size]
        region = LABOR_REGION_MULTIPLIERS[inputs.region]

        adjusted_hours = room_area * HOURS_PER_SQ_FT[inputs.flooring_type] * complexity
        subtotal = adjusted_hours * hourly_rate
        total = subtotal * timeline * crew * region

        effective_hours_per_day = WORKING_HOURS_PER_DAY * CREW_HEADCOUNT[inputs.crew_size] * crew
        days = ceil_units(adjusted_hours / effective_hours_per_day)

        return {
            "room_area": room_area,
            "base_hourly_rate": hourly_rate,
            "hours_required": adjusted_hours,
            "complexity_multiplier": complexity,
            "timeline_multiplier": timeline,
            "crew_multiplier": crew,
            "region_multiplier": region,
            "experience_multiplier": EXPERIENCE_MULTIPLIERS[inputs.experience_level],
            "subtotal": subtotal,
            "total_labor_cost": total,
            "cost_per_sq_ft": self.cost_per_sq_ft(total, room_area),
            "days_required": days,
            "recommended_duration": self._duration(days),
        }

    def _duration(self, days: int) -> str:
        if days <= 1:
            return "1 day"
        if days <= 3:
            return "%d days" % days
        weeks = ceil_units(days / WORKING_DAYS_PER_WEEK)
        return "%d week%s" % (weeks, "s" if weeks > 1 else "")


# ============================================================
# Material quantity
# ============================================================

# Flooring material $/sq ft
MATERIAL_PRICES = {
    "tile": 3.50,
    "hardwood": 8.00,
    "vinyl": 4.50,
    "laminate": 3.00,
    "carpet": 2.50,
}

# sq ft covered per bag/gallon of adhesive; laminate floats, hardwood is nailed
ADHESIVE_COVERAGE = {
    "tile": 50,
    "vinyl": 200,
    "carpet": 150,
}
NAIL_BOX_COVERAGE = 75      # hardwood, sq ft per box

TAKEOFF_ADHESIVE_PRICE = 35.00
TAKEOFF_UNDERLAYMENT_PRICE = 0.75   # $/sq ft
TAKEOFF_TRANSITION_PRICE = 25.00
TAKEOFF_MOLDING_PRICE = 2.50        # $/linear ft
TAKEOFF_NAIL_BOX_PRICE = 45.00
TRANSITION_SPACING_FT = 8


class MaterialQuantityInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    flooring_type: FlooringType = choice("tile")
    waste_percentage: float = waste(10)
    include_underlayment: Toggle = False
    include_transitions: Toggle = False
    include_molding: Toggle = False


class MaterialQuantityCalculator(BaseCalculator):

    kind = "material-quantity"
    schema = MaterialQuantityInputs

    def calculate(self, inputs: MaterialQuantityInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        adjusted_area = self.with_waste(room_area, inputs.waste_percentage)
        perimeter = self.rectangle_perimeter(inputs.room_length, inputs.room_width)

        adhesive = 0
        nails = 0
        if inputs.flooring_type in ADHESIVE_COVERAGE:
            adhesive = self.units_for(adjusted_area, ADHESIVE_COVERAGE[inputs.flooring_type])
        elif inputs.flooring_type == "hardwood":
            nails = self.units_for(adjusted_area, NAIL_BOX_COVERAGE)

        underlayment = ceil_units(adjusted_area) if inputs.include_underlayment else 0
        transitions = (self.units_for(perimeter, TRANSITION_SPACING_FT)
                       if inputs.include_transitions else 0)
        molding = ceil_units(perimeter) if inputs.include_molding else 0

        total = self.sum_costs(
            adjusted_area * MATERIAL_PRICES[inputs.flooring_type],
            adhesive * TAKEOFF_ADHESIVE_PRICE,
            underlayment * TAKEOFF_UNDERLAYMENT_PRICE,
            transitions * TAKEOFF_TRANSITION_PRICE,
            molding * TAKEOFF_MOLDING_PRICE,
            nails * TAKEOFF_NAIL_BOX_PRICE,
        )

        return {
            "room_area": room_area,
            "adjusted_area": adjusted_area,
            "flooring_needed": adjusted_area,
            "adhesive_needed": adhesive,
            "underlayment_needed": underlayment,
            "transition_strips": transitions,
            "molding_needed": molding,
            "nails_staples": nails,
            "total_material_cost": total,
        }


# ============================================================
# Floor repair
# ============================================================

# $/sq ft of damaged area
REPAIR_MATERIAL_RATES = {
    "sand-refinish": 2.5,
    "patch-repair": 8.0,
    "board-replacement": 12.0,
    "spot-treatment": 1.5,
}

# Labor hours per 10 sq ft of damaged area
REPAIR_HOURS_PER_10_SQ_FT = {
    "sand-refinish": 6,
    "patch-repair": 4,
    "board-replacement": 8,
    "spot-treatment": 2,
}

REPAIR_STEPS = [
    "Assess damage extent and cause",
    "Clean area thoroughly",
    "Apply repair method",
    "Allow proper cure time",
    "Apply finish to match existing",
]


class FloorRepairInputs(InputSchema):
    flooring_type: Literal["hardwood", "laminate", "vinyl", "tile", "carpet"] = choice("hardwood")
    damage_type: Literal["scratches", "water-damage", "burn-marks",
                         "gouges", "loose-boards"] = choice("scratches")
    damage_area: float = measure(ge=0.1)
    repair_method: Literal["sand-refinish", "patch-repair",
                           "board-replacement", "spot-treatment"] = choice("sand-refinish")


class FloorRepairCalculator(BaseCalculator):

    kind = "floor-repair"
    schema = FloorRepairInputs

    def calculate(self, inputs: FloorRepairInputs) -> dict:
        material_cost = inputs.damage_area * REPAIR_MATERIAL_RATES[inputs.repair_method]
        labor_hours = ceil_units(
            inputs.damage_area * REPAIR_HOURS_PER_10_SQ_FT[inputs.repair_method] / 10)
        return {
            "material_cost": material_cost,
            "labor_hours": labor_hours,
            "total_cost": material_cost + labor_hours * REPAIR_LABOR_RATE,
            "repair_steps": list(REPAIR_STEPS),
        }
