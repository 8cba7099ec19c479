"""
What sits under and inside the floor: subfloor panels, joists, load
checks, leveling, moisture barriers, acoustic underlayment, expansion
gaps, radiant heat and HVAC floor registers.

Most of these report rule-of-thumb sizing; none replaces an engineer or
the local building code, and the advice strings say so.
"""

import math
from typing import Literal

from .base import BaseCalculator, ceil_units
from .inputs import InputSchema, Toggle, choice, measure, waste
from .tables import MOISTURE_BARRIER_OVERLAP, UNDERLAYMENT_OVERLAP

SHEET_SQ_FT = 32  # 4x8 panel


# ============================================================
# Subfloor
# ============================================================

PanelThickness = Literal["1/2-inch", "5/8-inch", "3/4-inch", "1-inch", "1-1/8-inch"]

# $ per sheet by panel and thickness
SUBFLOOR_PRICES = {
    "plywood": {"1/2-inch": 32, "5/8-inch": 38, "3/4-inch": 45, "1-inch": 62, "1-1/8-inch": 68},
    "osb": {"1/2-inch": 22, "5/8-inch": 26, "3/4-inch": 30, "1-inch": 42, "1-1/8-inch": 46},
    "particle-board": {"1/2-inch": 18, "5/8-inch": 22, "3/4-inch": 26, "1-inch": 36,
                       "1-1/8-inch": 40},
    "cement-board": {"1/2-inch": 45, "5/8-inch": 52, "3/4-inch": 58, "1-inch": 75,
                     "1-1/8-inch": 82},
    "drycore": {"1/2-inch": 55, "5/8-inch": 62, "3/4-inch": 68, "1-inch": 85, "1-1/8-inch": 92},
}

SUBFLOOR_JOIST_SPACING = {
    "12-inch": 12.0,
    "16-inch": 16.0,
    "19.2-inch": 19.2,
    "24-inch": 24.0,
}

# Labor multiplier by what is already on the joists
EXISTING_SUBFLOOR_FACTORS = {
    "none": 1.0,
    "remove": 2.5,
    "over-existing": 1.3,
}

SCREWS_PER_JOIST_CROSSING = 2
SCREW_SPACING_IN = 8
SCREW_BOX_SIZE = 100
SCREW_BOX_PRICE = 12
SHEETS_PER_ADHESIVE_TUBE = 4
ADHESIVE_TUBE_PRICE = 8
BARRIER_PRICE_SQ_FT = 0.35
DAMPENING_PRICE_SQ_FT = 1.25
SUBFLOOR_HOURS_PER_SQ_FT = 0.15

SUBFLOOR_TOOLS = [
    "Circular saw",
    "Drill/driver",
    "Chalk line",
    "Measuring tape",
    "Safety glasses",
    "Hearing protection",
    "Knee pads",
]


class SubfloorInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    subfloor_type: Literal["plywood", "osb", "particle-board", "cement-board",
                           "drycore"] = choice("plywood")
    thickness: PanelThickness = choice("3/4-inch")
    joist_spacing: Literal["12-inch", "16-inch", "19.2-inch", "24-inch"] = choice("16-inch")
    existing: Literal["none", "remove", "over-existing"] = choice("none")
    moisture_barrier: Toggle = False
    sound_dampening: Toggle = False
    radiant_heat: Toggle = False
    waste_percentage: float = waste(10, 5, 20)


class SubfloorCalculator(BaseCalculator):
    """Panels, fasteners and extras for a new subfloor."""

    kind = "subfloor"
    schema = SubfloorInputs

    def calculate(self, inputs: SubfloorInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        adjusted_area = self.with_waste(room_area, inputs.waste_percentage)
        sheets = self.units_for(adjusted_area, SHEET_SQ_FT)

        spacing = SUBFLOOR_JOIST_SPACING[inputs.joist_spacing]
        screws_per_sheet = ceil_units((48 / spacing) * (96 / SCREW_SPACING_IN)) \
            * SCREWS_PER_JOIST_CROSSING
        screws = sheets * screws_per_sheet
        adhesive = self.units_for(sheets, SHEETS_PER_ADHESIVE_TUBE)

        barrier = ceil_units(room_area * MOISTURE_BARRIER_OVERLAP) if inputs.moisture_barrier else 0
        dampening = ceil_units(room_area * UNDERLAYMENT_OVERLAP) if inputs.sound_dampening else 0

        labor_hours = room_area * SUBFLOOR_HOURS_PER_SQ_FT \
            * EXISTING_SUBFLOOR_FACTORS[inputs.existing]

        total = self.sum_costs(
            sheets * SUBFLOOR_PRICES[inputs.subfloor_type][inputs.thickness],
            self.units_for(screws, SCREW_BOX_SIZE) * SCREW_BOX_PRICE,
            adhesive * ADHESIVE_TUBE_PRICE,
            barrier * BARRIER_PRICE_SQ_FT,
            dampening * DAMPENING_PRICE_SQ_FT,
        )

        steps = []
        if inputs.existing == "remove":
            steps.append("Remove existing subfloor")
        steps += ["Check joist level and spacing", "Mark joist locations on walls"]
        if inputs.moisture_barrier:
            steps.append("Install moisture barrier")
        if inputs.sound_dampening:
            steps.append("Install sound dampening material")
        steps += [
            "Cut subfloor panels to fit",
            "Apply construction adhesive to joists",
            'Install subfloor panels with 1/8" gaps',
            "Secure with appropriate fasteners",
            "Check for squeaks and refasten if needed",
        ]

        tools = list(SUBFLOOR_TOOLS)
        if inputs.subfloor_type == "cement-board":
            tools += ["Carbide blade", "Dust mask"]

        return {
            "room_area": room_area,
            "sheets_needed": sheets,
            "square_feet_needed": sheets * SHEET_SQ_FT,
            "fasteners": {"screws": screws, "adhesive": adhesive},
            "moisture_barrier_needed": barrier,
            "sound_dampening_needed": dampening,
            "labor_hours": labor_hours,
            "total_cost": total,
            "installation_steps": steps,
            "tools_required": tools,
        }


# ============================================================
# Floor joists
# ============================================================

# psf design load by use
JOIST_LOADS = {
    "residential": 40,
    "commercial-light": 50,
    "commercial-heavy": 80,
}

# (longest span for the size, size, its rated max span); None means "whatever the span is"
JOIST_SIZES = (
    (10, "2x8", 11.5),
    (14, "2x10", 15.2),
    (18, "2x12", 18.8),
    (None, "Engineered I-Joist", None),
)

# $ per joist
JOIST_PRICES = {
    "2x8": 8.50,
    "2x10": 12.75,
    "2x12": 18.25,
    "Engineered I-Joist": 28.50,
}

JOIST_RUN_FT = 16

JOIST_TIPS = [
    "Check local building codes for span requirements",
    "Use proper hangers at beam connections",
    "Crown joists with bow up during installation",
    "Block or cross-bridge at mid-span for long spans",
    "Ensure proper bearing at supports",
    "Consider engineered lumber for longer spans",
]


class FloorJoistInputs(InputSchema):
    span_length: float = measure(ge=6, le=32)
    joist_spacing: Literal["12", "16", "19.2", "24"] = choice("16")
    lumber_grade: Literal["select-structural", "no1", "no2", "stud"] = choice("no2")
    species: Literal["douglas-fir", "southern-pine", "hem-fir",
                     "spruce-pine-fir"] = choice("douglas-fir")
    load_type: Literal["residential", "commercial-light", "commercial-heavy"] = \
        choice("residential")
    deflection_limit: Literal["L/240", "L/360", "L/480"] = choice("L/360")


class FloorJoistCalculator(BaseCalculator):
    """Joist size from span alone; grade and species are recorded but not rated."""

    kind = "floor-joist"
    schema = FloorJoistInputs

    def calculate(self, inputs: FloorJoistInputs) -> dict:
        spacing = float(inputs.joist_spacing)
        for limit, size, max_span in JOIST_SIZES:
            if limit is None or inputs.span_length <= limit:
                break
        if max_span is None:
            max_span = inputs.span_length

        joists = ceil_units(JOIST_RUN_FT / spacing) + 1
        return {
            "recommended_size": size,
            "max_span": max_span,
            "deflection": inputs.deflection_limit,
            "load_capacity": JOIST_LOADS[inputs.load_type] * (16 / spacing),
            "material_cost": joists * JOIST_PRICES[size],
            "installation_tips": list(JOIST_TIPS),
        }


# ============================================================
# Floor load
# ============================================================

# psf live load by occupancy
LIVE_LOADS = {
    "residential": 40,
    "office": 50,
    "retail": 75,
    "warehouse": 125,
    "industrial": 150,
}

STRUCTURE_DEAD_LOAD = 10

LOAD_RECOMMENDATIONS = [
    "Verify with structural engineer for critical applications",
    "Check local building codes for specific requirements",
    "Consider point loads from heavy equipment",
    "Ensure adequate bearing surfaces at supports",
]


class FloorLoadInputs(InputSchema):
    room_length: float = measure(ge=0.1)
    room_width: float = measure(ge=0.1)
    occupancy_type: Literal["residential", "office", "retail", "warehouse",
                            "industrial"] = choice("residential")
    flooring_weight: float = measure(4, ge=1, le=20)
    additional_load: float = measure(0, ge=0)
    safety_factor: float = measure(2, ge=1.5, le=3)


class FloorLoadCalculator(BaseCalculator):

    kind = "floor-load"
    schema = FloorLoadInputs

    def calculate(self, inputs: FloorLoadInputs) -> dict:
        dead_load = inputs.flooring_weight + STRUCTURE_DEAD_LOAD
        live_load = LIVE_LOADS[inputs.occupancy_type]
        total_load = (dead_load + live_load + inputs.additional_load) * inputs.safety_factor

        if total_load > 150:
            requirement = "Reinforced framing required"
        elif total_load > 100:
            requirement = "Enhanced structural support recommended"
        else:
            requirement = "Standard construction adequate"

        return {
            "room_area": self.rectangle_area(inputs.room_length, inputs.room_width),
            "dead_load": dead_load,
            "live_load": live_load,
            "total_load": total_load,
            "load_per_sq_ft": total_load,
            "structural_requirements": requirement,
            "recommendations": list(LOAD_RECOMMENDATIONS),
        }


# ============================================================
# Unlevel floor
# ============================================================

LevelingMethod = Literal["self-leveling", "floor-patch", "shims", "plywood-overlay"]

# coverage is sq ft per bag/bundle/sheet; additional is flat hardware cost
LEVELING_METHODS = {
    "self-leveling": {"coverage": 50, "cost": 35, "primer": True, "dry_time": "24-48 hours",
                      "tolerance": '1/8" over 10 feet', "additional": 0},
    "floor-patch": {"coverage": 30, "cost": 25, "primer": True, "dry_time": "4-6 hours",
                    "tolerance": '1/4" over 10 feet', "additional": 0},
    "shims": {"coverage": 100, "cost": 45, "primer": False, "dry_time": "Immediate",
              "tolerance": '1/16" precision', "additional": 15},
    "plywood-overlay": {"coverage": 32, "cost": 65, "primer": False, "dry_time": "Immediate",
                        "tolerance": '1/8" over 10 feet', "additional": 25},
}

LEVELING_STEPS = {
    "self-leveling": [
        "Clean and vacuum subfloor thoroughly",
        "Apply primer if required for substrate",
        "Mix self-leveling compound per manufacturer specs",
        "Pour and spread compound with gauge rake",
        "Use spiked roller to remove air bubbles",
        "Allow to cure completely before foot traffic",
    ],
    "floor-patch": [
        "Mark low areas and clean thoroughly",
        "Apply primer to patch areas if needed",
        "Mix floor patch compound to thick consistency",
        "Apply with trowel in thin lifts",
        "Feather edges to blend with surrounding floor",
        "Sand smooth when dry if necessary",
    ],
    "shims": [
        "Identify high and low spots with level",
        "Cut shims to appropriate thickness",
        "Place shims at joist locations",
        "Secure with appropriate fasteners",
        "Check level frequently during installation",
        "Fill gaps with appropriate filler",
    ],
    "plywood-overlay": [
        "Check subfloor for loose boards and secure",
        "Mark high spots and sand if necessary",
        "Install plywood with staggered joints",
        'Leave 1/8" gap between sheets',
        "Secure with ring shank nails or screws",
        "Sand joints smooth if needed",
    ],
}

PRIMER_SQ_FT_PER_GALLON = 200
LEVELING_PRIMER_PRICE = 45


class UnlevelFloorInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    max_variation: float = measure(0.25, ge=0.0625, message="Minimum variation is 1/16 inch")
    leveling_method: LevelingMethod = choice("self-leveling")
    current_subfloor: Literal["concrete", "plywood", "osb", "hardwood"] = choice("concrete")
    target_flooring: Literal["tile", "hardwood", "laminate", "vinyl", "carpet"] = choice("tile")


class UnlevelFloorCalculator(BaseCalculator):

    kind = "unlevel-floor"
    schema = UnlevelFloorInputs

    def calculate(self, inputs: UnlevelFloorInputs) -> dict:
        method = LEVELING_METHODS[inputs.leveling_method]
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)

        units = self.units_for(room_area, method["coverage"])
        primer = self.units_for(room_area, PRIMER_SQ_FT_PER_GALLON) if method["primer"] else 0
        total = self.sum_costs(
            units * method["cost"],
            primer * LEVELING_PRIMER_PRICE,
            method["additional"],
        )

        return {
            "room_area": room_area,
            "leveling_material": units,
            "primer_needed": primer,
            "additional_material": method["additional"],
            "total_cost": total,
            "cost_per_sq_ft": self.cost_per_sq_ft(total, room_area),
            "leveling_method": inputs.leveling_method,
            "application_steps": list(LEVELING_STEPS[inputs.leveling_method]),
            "dry_time": method["dry_time"],
            "tolerance_achieved": method["tolerance"],
        }


# ============================================================
# Moisture barrier
# ============================================================

BarrierType = Literal["plastic-sheeting", "vapor-retarder", "membrane", "primer-sealer"]

# barrier -> (sq ft per roll, $ per roll)
BARRIER_ROLLS = {
    "plastic-sheeting": (1000, 125),
    "vapor-retarder": (500, 285),
    "membrane": (200, 450),
    "primer-sealer": (300, 350),
}

MOISTURE_RATINGS = {
    "low": "Standard protection adequate",
    "moderate": "Enhanced vapor retarder recommended",
    "high": "Premium membrane barrier required",
    "extreme": "Multiple barrier system needed",
}

SEAM_TAPE_ROLL_FT = 50
SEAM_TAPE_PRICE = 45
BARRIER_PRIMER_PRICE = 65
# 20 ft of internal seam for every 200 sq ft laid
INTERNAL_SEAM_FT = 20
INTERNAL_SEAM_EVERY_SQ_FT = 200


class MoistureBarrierInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    subfloor_type: Literal["concrete", "crawlspace", "basement", "slab"] = choice("concrete")
    moisture_level: Literal["low", "moderate", "high", "extreme"] = choice("moderate")
    barrier_type: BarrierType = choice("vapor-retarder")
    waste_percentage: float = waste(10, 0, 50)
    include_seam_tape: Toggle = True
    include_primer: Toggle = False


class MoistureBarrierCalculator(BaseCalculator):

    kind = "moisture-barrier"
    schema = MoistureBarrierInputs

    def calculate(self, inputs: MoistureBarrierInputs) -> dict:
        roll_coverage, roll_price = BARRIER_ROLLS[inputs.barrier_type]
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        adjusted_area = self.with_waste(room_area, inputs.waste_percentage)
        rolls = self.units_for(adjusted_area, roll_coverage)

        seam_tape = 0
        if inputs.include_seam_tape:
            perimeter = self.rectangle_perimeter(inputs.room_length, inputs.room_width)
            internal = math.floor(adjusted_area / INTERNAL_SEAM_EVERY_SQ_FT) * INTERNAL_SEAM_FT
            seam_tape = self.units_for(perimeter + internal, SEAM_TAPE_ROLL_FT)
        primer = self.units_for(room_area, PRIMER_SQ_FT_PER_GALLON) if inputs.include_primer else 0

        tips = [
            "Clean and prepare subfloor before installation",
            "Overlap seams by minimum 6 inches",
            "Seal all penetrations with appropriate sealant",
        ]
        if inputs.subfloor_type == "concrete":
            tips.append("Test concrete moisture levels before installation")
        if inputs.moisture_level in ("high", "extreme"):
            tips += ["Consider professional moisture testing", "Install dehumidification if needed"]
        if inputs.barrier_type == "membrane":
            tips.append("Use compatible adhesives for membrane systems")
        tips.append("Allow proper cure time before flooring installation")

        return {
            "room_area": room_area,
            "adjusted_area": adjusted_area,
            "rolls_needed": rolls,
            "seam_tape_needed": seam_tape,
            "primer_needed": primer,
            "total_cost": self.sum_costs(
                rolls * roll_price,
                seam_tape * SEAM_TAPE_PRICE,
                primer * BARRIER_PRIMER_PRICE,
            ),
            "installation_tips": tips,
            "moisture_rating": MOISTURE_RATINGS[inputs.moisture_level],
        }


# ============================================================
# Acoustic underlayment
# ============================================================

# rating -> ($ per sq ft, published sound ratings)
SOUND_RATINGS = {
    "standard": (1.25, "IIC 65, STC 66"),
    "enhanced": (2.15, "IIC 72, STC 71"),
    "premium": (3.85, "IIC 74, STC 73"),
}

ACOUSTIC_ROLL_SQ_FT = 100
ACOUSTIC_TAPE_ROLL_FT = 50
ACOUSTIC_TAPE_PRICE = 35

ACOUSTIC_TIPS = [
    "Install perpendicular to flooring direction",
    "Butt seams tightly without overlapping",
    "Use acoustic tape on all seams",
    "Trim excess at walls with sharp knife",
    "Do not cover with plastic vapor barrier",
    "Install flooring immediately after underlayment",
]


class AcousticUnderlaymentInputs(InputSchema):
    room_length: float = measure(ge=0.1)
    room_width: float = measure(ge=0.1)
    flooring_type: Literal["laminate", "hardwood", "vinyl", "tile"] = choice("laminate")
    sound_rating: Literal["standard", "enhanced", "premium"] = choice("standard")
    building_type: Literal["single-family", "condo", "apartment",
                           "commercial"] = choice("single-family")
    waste_percentage: float = waste(10, 5, 15)


class AcousticUnderlaymentCalculator(BaseCalculator):

    kind = "acoustic-underlayment"
    schema = AcousticUnderlaymentInputs

    def calculate(self, inputs: AcousticUnderlaymentInputs) -> dict:
        price, rating = SOUND_RATINGS[inputs.sound_rating]
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        adjusted_area = self.with_waste(room_area, inputs.waste_percentage)
        perimeter = self.rectangle_perimeter(inputs.room_length, inputs.room_width)
        tape = self.units_for(perimeter, ACOUSTIC_TAPE_ROLL_FT)

        return {
            "room_area": room_area,
            "adjusted_area": adjusted_area,
            "rolls_needed": self.units_for(adjusted_area, ACOUSTIC_ROLL_SQ_FT),
            "acoustic_tape": tape,
            "total_cost": self.sum_costs(adjusted_area * price, tape * ACOUSTIC_TAPE_PRICE),
            "sound_reduction": rating,
            "installation_tips": list(ACOUSTIC_TIPS),
        }


# ============================================================
# Floating floor expansion gap
# ============================================================

# inches of movement per foot of run per 10°F
EXPANSION_COEFFICIENTS = {
    "laminate": 0.004,
    "engineered-wood": 0.003,
    "vinyl-plank": 0.006,
    "bamboo": 0.0035,
}

SEASONAL_FACTORS = {
    "low": 1.0,
    "moderate": 1.3,
    "high": 1.8,
}

# feet of continuous floor before an expansion joint is needed
MAX_RUN_LENGTHS = {
    "laminate": 39,
    "engineered-wood": 32,
    "vinyl-plank": 50,
    "bamboo": 35,
}

HEATED_EXPANSION_FACTOR = 1.4
HEATED_RUN_FACTOR = 0.75

# location -> (minimum gap in inches, multiple of expected movement)
GAP_RULES = {
    "perimeter": (0.25, 2),
    "doorway": (0.375, 1.5),
    "transition": (0.5, 2.5),
}


class FloatingFloorGapInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    flooring_type: Literal["laminate", "engineered-wood", "vinyl-plank",
                           "bamboo"] = choice("laminate")
    plank_length: float = measure(48, ge=12, message="Plank length must be at least 12 inches")
    plank_width: float = measure(7, ge=3, message="Plank width must be at least 3 inches")
    seasonal_variation: Literal["low", "moderate", "high"] = choice("moderate")
    underfloor_heating: Toggle = False


class FloatingFloorGapCalculator(BaseCalculator):
    """Expansion gaps at walls, doorways and transitions for a floating floor."""

    kind = "floating-floor-gap"
    schema = FloatingFloorGapInputs

    def calculate(self, inputs: FloatingFloorGapInputs) -> dict:
        heated = inputs.underfloor_heating
        expansion_rate = EXPANSION_COEFFICIENTS[inputs.flooring_type] \
            * SEASONAL_FACTORS[inputs.seasonal_variation] \
            * (HEATED_EXPANSION_FACTOR if heated else 1.0)
        expected = max(inputs.room_length, inputs.room_width) * expansion_rate

        gaps = {where: max(minimum, expected * multiple)
                for where, (minimum, multiple) in GAP_RULES.items()}

        max_run = MAX_RUN_LENGTHS[inputs.flooring_type]
        if heated:
            max_run = max_run * HEATED_RUN_FACTOR

        perimeter = self.rectangle_perimeter(inputs.room_length, inputs.room_width)
        trim_pieces = ceil_units(perimeter / 8)

        guidelines = [
            'Maintain %.2f" gap at all walls and fixed objects' % gaps["perimeter"],
            'Use %.2f" gap at doorways and openings' % gaps["doorway"],
            'Provide %.2f" gap when transitioning to other materials' % gaps["transition"],
            "Maximum continuous run: %.0f feet" % max_run,
            "Reduce gaps gradually during heating season startup" if heated
            else "Standard seasonal expansion expected",
            'Expected seasonal movement: %.3f" per direction' % expected,
        ]
        tips = [
            "Use spacers consistently around entire perimeter",
            "Remove spacers only after installation completion",
            "Install baseboards with gap to allow floor movement",
            "Never nail or screw through floating floor",
            "Maintain gaps at all penetrations (pipes, vents, etc.)",
            "Gradually increase heating temperature over 7 days" if heated
            else "Acclimate flooring 48-72 hours before installation",
        ]

        return {
            "room_area": self.rectangle_area(inputs.room_length, inputs.room_width),
            "perimeter_gap": gaps["perimeter"],
            "doorway_gap": gaps["doorway"],
            "transition_gap": gaps["transition"],
            "max_run_length": max_run,
            "t_molding_needed": trim_pieces,
            "quarter_round_needed": trim_pieces,
            "expansion_rate": expansion_rate,
            "gap_guidelines": guidelines,
            "installation_tips": tips,
        }


# ============================================================
# Radiant floor heating
# ============================================================

HEATED_COVERAGE = 0.9
MAT_SQ_FT = 10.76
CABLE_FT_PER_SQ_FT = 3.3
THERMOSTATS = 1
RADIANT_LABOR_SQ_FT = 4.5
DAILY_HOURS = 8
KWH_PRICE = 0.12
HEATING_DAYS = 120

# system -> (watts per sq ft, material $ per sq ft, thermostat $)
RADIANT_SYSTEMS = {
    "electric": (12, 8, 275),
    "hydronic": (8, 12, 350),
}


class RadiantHeatingInputs(InputSchema):
    room_length: float = measure(ge=0.1)
    room_width: float = measure(ge=0.1)
    heating_type: Literal["electric", "hydronic"] = choice("electric")
    flooring_type: Literal["tile", "stone", "engineered-wood", "laminate"] = choice("tile")
    insulation_r_value: float = measure(10, ge=1, le=50)
    target_temp: float = measure(75, ge=65, le=85)


class RadiantHeatingCalculator(BaseCalculator):

    kind = "radiant-heating"
    schema = RadiantHeatingInputs

    def calculate(self, inputs: RadiantHeatingInputs) -> dict:
        watts, material_price, thermostat_price = RADIANT_SYSTEMS[inputs.heating_type]
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        heating_area = room_area * HEATED_COVERAGE
        power = heating_area * watts
        electric = inputs.heating_type == "electric"

        installation = self.sum_costs(
            heating_area * material_price + THERMOSTATS * thermostat_price,
            heating_area * RADIANT_LABOR_SQ_FT,
        )
        daily_kwh = power * DAILY_HOURS / 1000

        return {
            "room_area": room_area,
            "heating_area": heating_area,
            "power_required": power,
            "cable_length": heating_area * CABLE_FT_PER_SQ_FT if electric else 0,
            "mat_quantity": ceil_units(heating_area / MAT_SQ_FT),
            "thermostat_needed": THERMOSTATS,
            "installation_cost": installation,
            "operating_cost": daily_kwh * KWH_PRICE * HEATING_DAYS,
            "total_project_cost": installation,
        }


# ============================================================
# HVAC floor registers
# ============================================================

# register size -> (CFM delivered, $ each)
REGISTER_SIZES = {
    "4x10": (75, 25),
    "4x12": (90, 30),
    "6x10": (110, 35),
    "6x12": (135, 45),
    "4x14": (105, 40),
}

REGISTER_PLACEMENT_TIPS = [
    "Position registers away from furniture placement areas",
    "Maintain 6-inch clearance from walls when possible",
    "Consider traffic flow patterns in register placement",
    "Place return air registers opposite supply registers",
]

REGISTER_FLOORING_NOTES = [
    "Plan register locations before flooring installation",
    "Use proper transition strips around register openings",
    "Ensure adequate support under register frames",
    "Consider floor thickness when sizing ductwork",
]


class HvacRegisterInputs(InputSchema):
    room_length: float = measure(ge=0.1)
    room_width: float = measure(ge=0.1)
    ceiling_height: float = measure(8, ge=7, le=20)
    hvac_type: Literal["forced-air", "radiant", "baseboard"] = choice("forced-air")
    register_size: Literal["4x10", "4x12", "6x10", "6x12", "4x14"] = choice("4x10")
    flooring_type: Literal["hardwood", "tile", "carpet", "vinyl"] = choice("hardwood")


class HvacRegisterCalculator(BaseCalculator):

    kind = "hvac-register"
    schema = HvacRegisterInputs

    def calculate(self, inputs: HvacRegisterInputs) -> dict:
        cfm, price = REGISTER_SIZES[inputs.register_size]
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        cfm_per_sq_ft = 1.5 if inputs.hvac_type == "forced-air" else 1.0
        registers = self.units_for(room_area * cfm_per_sq_ft, cfm)
        return {
            "room_volume": room_area * inputs.ceiling_height,
            "registers_needed": registers,
            "total_cost": registers * price,
            "placement_tips": list(REGISTER_PLACEMENT_TIPS),
            "flooring_considerations": list(REGISTER_FLOORING_NOTES),
        }
