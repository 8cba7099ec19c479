"""
Wood-look plank and block floors: hardwood, engineered wood, bamboo,
laminate, parquet, plus refinishing an existing wood floor.
"""

from typing import Literal

from .base import BaseCalculator, ceil_units
from .inputs import InputSchema, Toggle, choice, measure, waste
from .tables import COMPLEXITY_MULTIPLIERS, RoomComplexity


# ============================================================
# Hardwood
# ============================================================

NAIL_BOX_SQ_FT = 100
HARDWOOD_ADHESIVE_SQ_FT = 200


class HardwoodInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    board_width: float = measure(3.25, ge=1, message="Board width must be greater than 0")
    board_length: float = measure(84, ge=1, message="Board length must be greater than 0")
    waste_percentage: float = waste(10)
    installation_type: Literal["nail-down", "glue-down", "floating"] = choice("nail-down")


class HardwoodCalculator(BaseCalculator):
    """Boards for a room plus the one consumable the install method needs."""

    kind = "hardwood-calculator"
    schema = HardwoodInputs

    def calculate(self, inputs: HardwoodInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        adjusted_area = self.with_waste(room_area, inputs.waste_percentage)
        board_area = self.sq_ft_from_inches(inputs.board_width, inputs.board_length)

        nails = adhesive = underlayment = None
        if inputs.installation_type == "nail-down":
            nails = self.units_for(room_area, NAIL_BOX_SQ_FT)
        elif inputs.installation_type == "glue-down":
            adhesive = self.units_for(room_area, HARDWOOD_ADHESIVE_SQ_FT)
        else:
            underlayment = ceil_units(adjusted_area)

        return {
            "room_area": room_area,
            "adjusted_area": adjusted_area,
            "boards_needed": self.units_for(adjusted_area, board_area),
            "square_feet_needed": adjusted_area,
            "nails_needed": nails,
            "adhesive_needed": adhesive,
            "underlayment_needed": underlayment,
        }


# ============================================================
# Engineered wood
# ============================================================

ENGINEERED_SQ_FT_PER_BOX = 20
# Click-lock rooms above this size get a separate underlayment roll
CLICK_LOCK_UNDERLAYMENT_OVER = 500
ENGINEERED_UNDERLAYMENT_PRICE = 0.75
ENGINEERED_ADHESIVE_PRICE = 45
ENGINEERED_ADHESIVE_SQ_FT = 200
# 8 crew hours per 100 sq ft before the method multiplier
HOURS_PER_100_SQ_FT = 8

# method -> (labor multiplier, tips)
ENGINEERED_METHODS = {
    "click-lock": (0.8, [
        "Ensure subfloor is level within 3/16\" over 10 feet",
        "Leave 1/4\" expansion gap around perimeter",
        "Install perpendicular to longest wall",
        "Use tapping block to avoid damage during installation",
    ]),
    "glue-down": (1.2, [
        "Test adhesive compatibility with subfloor",
        "Apply adhesive with recommended trowel size",
        "Work in small sections to prevent skin-over",
        "Roll planks with 100lb roller after installation",
    ]),
    "nail-down": (1.0, [
        "Use proper nail spacing: 6-8\" apart",
        "Pre-drill near ends to prevent splitting",
        "Set nails flush with surface",
        "Check moisture content before installation",
    ]),
}


class EngineeredWoodInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    plank_width: float = measure(5, ge=1, message="Plank width must be greater than 0")
    plank_length: float = measure(48, ge=1, message="Plank length must be greater than 0")
    installation_type: Literal["click-lock", "glue-down", "nail-down"] = choice("click-lock")
    waste_percentage: float = waste(10)
    plank_cost: float = measure(4.50, ge=0, message="Plank cost must be positive")


class EngineeredWoodCalculator(BaseCalculator):

    kind = "engineered-wood"
    schema = EngineeredWoodInputs

    def calculate(self, inputs: EngineeredWoodInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        adjusted_area = self.with_waste(room_area, inputs.waste_percentage)
        plank_area = self.sq_ft_from_inches(inputs.plank_width, inputs.plank_length)
        labor_multiplier, tips = ENGINEERED_METHODS[inputs.installation_type]

        underlayment = adhesive = None
        if inputs.installation_type == "click-lock" and room_area > CLICK_LOCK_UNDERLAYMENT_OVER:
            underlayment = ceil_units(adjusted_area)
        elif inputs.installation_type == "glue-down":
            adhesive = self.units_for(adjusted_area, ENGINEERED_ADHESIVE_SQ_FT)

        total = self.sum_costs(
            adjusted_area * inputs.plank_cost,
            (underlayment or 0) * ENGINEERED_UNDERLAYMENT_PRICE,
            (adhesive or 0) * ENGINEERED_ADHESIVE_PRICE,
        )

        return {
            "room_area": room_area,
            "adjusted_area": adjusted_area,
            "planks_needed": self.units_for(adjusted_area, plank_area),
            "boxes_needed": self.units_for(adjusted_area, ENGINEERED_SQ_FT_PER_BOX),
            "square_feet_needed": adjusted_area,
            "underlayment_needed": underlayment,
            "adhesive_needed": adhesive,
            "total_material_cost": total,
            "cost_per_sq_ft": self.cost_per_sq_ft(total, room_area),
            "labor_hours": ceil_units((room_area / 100) * HOURS_PER_100_SQ_FT * labor_multiplier),
            "installation_tips": list(tips),
        }


# ============================================================
# Bamboo
# ============================================================

BambooType = Literal["solid", "engineered", "strand-woven", "click-lock"]
BambooGrade = Literal["select", "natural", "rustic"]

BOARD_FEET_FACTORS = {
    "solid": 1.0,
    "engineered": 0.85,
    "strand-woven": 0.9,
    "click-lock": 0.8,
}

# $/sq ft by type and grade
BAMBOO_PRICES = {
    "solid": {"select": 6.50, "natural": 5.50, "rustic": 4.50},
    "engineered": {"select": 5.50, "natural": 4.50, "rustic": 3.50},
    "strand-woven": {"select": 7.50, "natural": 6.50, "rustic": 5.50},
    "click-lock": {"select": 4.50, "natural": 3.50, "rustic": 2.50},
}

BAMBOO_INSTALL_FACTORS = {
    "nail-down": 1.2,
    "glue-down": 1.4,
    "floating": 1.0,
}

BAMBOO_GRADE_FACTORS = {
    "select": 1.0,
    "natural": 1.1,
    "rustic": 1.2,
}

BAMBOO_DURABILITY = {
    "solid": "Excellent - 25+ years with proper care",
    "engineered": "Very Good - 15-25 years",
    "strand-woven": "Excellent - 20-30 years (hardest)",
    "click-lock": "Good - 10-20 years",
}

BAMBOO_TIPS = [
    "Acclimate bamboo 72 hours before installation",
    "Check moisture content - should be 6-9%",
    "Maintain 1/4\" expansion gap around perimeter",
    "Bamboo is harder than most hardwoods - use proper cutting tools",
]

BAMBOO_MAINTENANCE = [
    "Sweep or vacuum regularly with soft bristle attachment",
    "Clean with bamboo-specific cleaners only",
    "Avoid excessive moisture - mop with damp (not wet) cloth",
    "Use felt pads under furniture legs",
    "Maintain 30-50% relative humidity",
    "Refinish every 3-5 years depending on traffic",
]

BAMBOO_ECO_BENEFITS = [
    "Bamboo grows 30x faster than hardwood trees",
    "Regenerates from root system without replanting",
    "Absorbs 35% more CO2 than equivalent hardwood forests",
    "Formaldehyde-free options available",
    "Biodegradable and renewable resource",
    "Often locally sourced reducing transportation impact",
]


class BambooInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    bamboo_type: BambooType = choice("engineered")
    plank_width: Literal["3-inch", "4-inch", "5-inch", "6-inch", "7-inch"] = choice("5-inch")
    plank_length: Literal["36-inch", "48-inch", "72-inch", "random"] = choice("48-inch")
    grade: BambooGrade = choice("natural")
    finish: Literal["unfinished", "pre-finished", "hand-scraped", "smooth"] = choice("pre-finished")
    installation_type: Literal["nail-down", "glue-down", "floating"] = choice("floating")
    subfloor_type: Literal["concrete", "plywood", "osb", "existing-floor"] = choice("plywood")
    include_underlayment: Toggle = True
    include_moisture_barrier: Toggle = False
    include_transitions: Toggle = False
    include_molding: Toggle = False
    waste_percentage: float = waste(10, 5, 25)
    room_complexity: RoomComplexity = choice("simple")


class BambooCalculator(BaseCalculator):

    kind = "bamboo"
    schema = BambooInputs

    def calculate(self, inputs: BambooInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        perimeter = self.rectangle_perimeter(inputs.room_length, inputs.room_width)
        square_feet = self.with_waste(room_area, inputs.waste_percentage)
        sq_ft_per_box = 20 if inputs.bamboo_type == "solid" else 22

        underlayment = 0
        if inputs.include_underlayment and inputs.installation_type == "floating":
            underlayment = ceil_units(room_area * 1.05)
        # Concrete always gets a vapor barrier
        moisture_barrier = 0
        if inputs.include_moisture_barrier or inputs.subfloor_type == "concrete":
            moisture_barrier = ceil_units(room_area * 1.1)
        transitions = self.units_for(perimeter, 8) if inputs.include_transitions else 0
        molding = ceil_units(perimeter * 0.9) if inputs.include_molding else 0

        nails = adhesive = 0
        if inputs.installation_type == "nail-down":
            nails = self.units_for(square_feet, 100)
        elif inputs.installation_type == "glue-down":
            adhesive = self.units_for(square_feet, 150)

        labor_hours = (room_area * 0.4
                       * COMPLEXITY_MULTIPLIERS[inputs.room_complexity]
                       * BAMBOO_INSTALL_FACTORS[inputs.installation_type]
                       * BAMBOO_GRADE_FACTORS[inputs.grade])

        total = self.sum_costs(
            square_feet * BAMBOO_PRICES[inputs.bamboo_type][inputs.grade],
            underlayment * 0.60,
            moisture_barrier * 0.40,
            transitions * 28,
            molding * 3.50,
            nails * 12,
            adhesive * 40,
        )

        tips = list(BAMBOO_TIPS)
        if inputs.subfloor_type == "concrete":
            tips.append("Test concrete for moisture - use moisture barrier if >3 lbs/24hrs")
        if inputs.installation_type == "nail-down":
            tips.append("Pre-drill nail holes to prevent splitting")
        if inputs.finish == "unfinished":
            tips.append("Sand progressively 80-100-120 grit before finishing")

        return {
            "room_area": room_area,
            "square_feet_needed": square_feet,
            "board_feet_needed": square_feet * BOARD_FEET_FACTORS[inputs.bamboo_type],
            "boxes": self.units_for(square_feet, sq_ft_per_box),
            "underlayment_needed": underlayment,
            "moisture_barrier_needed": moisture_barrier,
            "transition_strips": transitions,
            "molding_needed": molding,
            "nails_needed": nails,
            "adhesive_needed": adhesive,
            "labor_hours": labor_hours,
            "total_material_cost": total,
            "installation_tips": tips,
            "maintenance_guide": list(BAMBOO_MAINTENANCE),
            "eco_friendly_benefits": list(BAMBOO_ECO_BENEFITS),
            "durability_rating": BAMBOO_DURABILITY[inputs.bamboo_type],
        }


# ============================================================
# Laminate
# ============================================================

LAMINATE_PRICES = {
    "6mm": 2.50,
    "7mm": 3.20,
    "8mm": 4.00,
    "10mm": 5.50,
    "12mm": 7.20,
}

LAMINATE_INSTALL_FACTORS = {
    "floating": 1.0,
    "glue-down": 1.4,
}

LAMINATE_SQ_FT_PER_BOX = 22
LAMINATE_CLOSING_TIPS = [
    "Acclimate flooring 48 hours before installation",
    "Start installation from longest, straightest wall",
    "Use tapping block to protect tongue and groove edges",
]


class LaminateInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    plank_length: float = measure(48, ge=12, message="Plank length must be at least 12 inches")
    plank_width: float = measure(7.5, ge=3, message="Plank width must be at least 3 inches")
    laminate_thickness: Literal["6mm", "7mm", "8mm", "10mm", "12mm"] = choice("8mm")
    installation_type: Literal["floating", "glue-down"] = choice("floating")
    room_complexity: RoomComplexity = choice("simple")
    waste_percentage: float = waste(10, 5, 25)
    include_underlayment: Toggle = True
    include_molding: Toggle = False
    include_transitions: Toggle = False
    include_quarter_round: Toggle = False


class LaminateCalculator(BaseCalculator):

    kind = "laminate"
    schema = LaminateInputs

    def calculate(self, inputs: LaminateInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        perimeter = self.rectangle_perimeter(inputs.room_length, inputs.room_width)
        plank_area = self.sq_ft_from_inches(inputs.plank_length, inputs.plank_width)
        base_planks = self.units_for(room_area, plank_area)
        planks = self.apply_waste(base_planks, inputs.waste_percentage)
        square_feet = planks * plank_area

        underlayment = ceil_units(room_area * 1.05) if inputs.include_underlayment else 0
        molding = ceil_units(perimeter * 0.9) if inputs.include_molding else 0
        quarter_round = ceil_units(perimeter * 0.85) if inputs.include_quarter_round else 0
        transitions = self.units_for(perimeter, 15) if inputs.include_transitions else 0

        labor_hours = (room_area * 0.4
                       * COMPLEXITY_MULTIPLIERS[inputs.room_complexity]
                       * LAMINATE_INSTALL_FACTORS[inputs.installation_type])

        total = self.sum_costs(
            square_feet * LAMINATE_PRICES[inputs.laminate_thickness],
            underlayment * 0.65,
            molding * 2.80,
            quarter_round * 1.50,
            transitions * 28,
        )

        tips = []
        if inputs.installation_type == "floating":
            tips.append("Allow 1/4\" expansion gap around perimeter")
            tips.append("Stagger end joints by at least 6 inches")
        if inputs.laminate_thickness == "12mm":
            tips.append("Thicker planks provide better sound dampening")
        if inputs.include_underlayment:
            tips.append("Use moisture barrier in basements and concrete subfloors")
        tips.extend(LAMINATE_CLOSING_TIPS)

        return {
            "room_area": room_area,
            "plank_area": plank_area,
            "planks_needed": planks,
            "square_feet_needed": square_feet,
            "boxes": self.units_for(square_feet, LAMINATE_SQ_FT_PER_BOX),
            "underlayment_needed": underlayment,
            "molding_needed": molding,
            "transition_strips": transitions,
            "quarter_round_needed": quarter_round,
            "labor_hours": labor_hours,
            "total_material_cost": total,
            "installation_tips": tips,
        }


# ============================================================
# Parquet
# ============================================================

# pattern -> waste multiplier, complexity, time multiplier, border multiplier, description
PARQUET_PATTERNS = {
    "herringbone": {
        "waste": 1.15,
        "complexity": "High",
        "time": 1.5,
        "border": 1.2,
        "description": "Classic V-shaped pattern with 45° or 90° angles",
    },
    "chevron": {
        "waste": 1.20,
        "complexity": "Very High",
        "time": 1.8,
        "border": 1.3,
        "description": "Continuous zigzag pattern with angled cuts",
    },
    "basket-weave": {
        "waste": 1.10,
        "complexity": "Medium",
        "time": 1.2,
        "border": 1.1,
        "description": "Alternating horizontal and vertical rectangles",
    },
    "brick": {
        "waste": 1.08,
        "complexity": "Low",
        "time": 1.0,
        "border": 1.0,
        "description": "Offset brick pattern with staggered joints",
    },
    "versailles": {
        "waste": 1.25,
        "complexity": "Expert",
        "time": 2.2,
        "border": 1.4,
        "description": "Complex French pattern with multiple sizes",
    },
}

PARQUET_LAYOUT_TIPS = {
    "herringbone": [
        "Start from center of room and work outward",
        "Use chalk lines to maintain straight rows",
        "Pre-cut border pieces for consistent gaps",
        "Maintain consistent 45° angles throughout",
    ],
    "chevron": [
        "All pieces must be cut at precise angles",
        "Create templates for consistent cuts",
        "Plan starting point carefully to minimize waste",
        "Use laser level for perfect alignment",
    ],
    "basket-weave": [
        "Establish grid pattern before starting",
        "Ensure equal spacing between blocks",
        "Alternate direction every other section",
        "Check square frequently during installation",
    ],
    "brick": [
        "Offset each row by half block length",
        "Start with full blocks on longest wall",
        "Plan cuts to avoid small pieces at edges",
        "Maintain consistent grout lines",
    ],
    "versailles": [
        "Order pre-manufactured panels when possible",
        "Create detailed layout drawing first",
        "Sort pieces by size before starting",
        "Consider hiring specialized installer",
    ],
}

PARQUET_CUTTING_GUIDE = {
    "herringbone": [
        "Use miter saw for 45° angle cuts",
        "Cut in batches for consistency",
        "Allow 5% extra for cutting errors",
        "Pre-fit pieces before final installation",
    ],
    "chevron": [
        "All pieces require angled end cuts",
        "Use jig for consistent angles",
        "Test fit pattern before cutting all pieces",
        "Sharp blade essential for clean cuts",
    ],
    "basket-weave": [
        "Most pieces install without cutting",
        "Border pieces need straight cuts only",
        "Use table saw for long straight cuts",
        "Measure twice, cut once approach",
    ],
    "brick": [
        "Standard brick pattern requires minimal cuts",
        "Cut border pieces to fit room dimensions",
        "Use chop saw for quick, clean cuts",
        "Stack cut pieces by size",
    ],
    "versailles": [
        "Multiple piece sizes require careful planning",
        "Create cutting list before starting",
        "Use various saw types for different cuts",
        "Consider professional cutting service",
    ],
}

PARQUET_SQ_FT_PER_HOUR = 50


class ParquetInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    parquet_pattern: Literal["herringbone", "chevron", "basket-weave", "brick",
                             "versailles"] = choice("herringbone")
    block_size: float = measure(12, ge=6, message="Block size must be at least 6 inches")
    waste_percentage: float = waste(15, 5, 25)
    parquet_cost: float = measure(8.50, ge=0, message="Cost must be positive")


class ParquetCalculator(BaseCalculator):

    kind = "parquet"
    schema = ParquetInputs

    def calculate(self, inputs: ParquetInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        perimeter = self.rectangle_perimeter(inputs.room_length, inputs.room_width)
        pattern = PARQUET_PATTERNS[inputs.parquet_pattern]

        adjusted_area = room_area * (pattern["waste"] * (1 + inputs.waste_percentage / 100))
        block_area = self.sq_ft_from_inches(inputs.block_size, inputs.block_size)
        border_blocks = ceil_units(perimeter * pattern["border"] / self.inches_to_feet(inputs.block_size))
        total = adjusted_area * inputs.parquet_cost

        return {
            "room_area": room_area,
            "adjusted_area": adjusted_area,
            "blocks_needed": self.units_for(adjusted_area, block_area),
            "square_feet_needed": adjusted_area,
            "border_tiles_needed": border_blocks,
            "cutting_waste": adjusted_area - room_area,
            "labor_complexity": pattern["complexity"],
            "installation_time": ceil_units(room_area / PARQUET_SQ_FT_PER_HOUR * pattern["time"]),
            "total_material_cost": total,
            "cost_per_sq_ft": self.cost_per_sq_ft(total, room_area),
            "pattern_description": pattern["description"],
            "layout_tips": list(PARQUET_LAYOUT_TIPS[inputs.parquet_pattern]),
            "cutting_guide": list(PARQUET_CUTTING_GUIDE[inputs.parquet_pattern]),
        }


# ============================================================
# Floor finishing
# ============================================================

# finish -> (sq ft per gallon per coat, $ per gallon, drying time)
FINISHES = {
    "polyurethane": (500, 65, "8-12 hours between coats"),
    "water-based": (450, 75, "2-4 hours between coats"),
    "oil-based": (400, 55, "12-24 hours between coats"),
    "wax": (600, 45, "30 minutes between coats"),
    "penetrating-sealer": (350, 50, "4-6 hours between coats"),
}

PRIMER_SQ_FT_PER_GALLON = 400
PRIMER_PRICE = 45
SANDING_SUPPLIES_COST = 85


class FloorFinishingInputs(InputSchema):
    room_length: float = measure(ge=0.1)
    room_width: float = measure(ge=0.1)
    finish_type: Literal["polyurethane", "water-based", "oil-based", "wax",
                         "penetrating-sealer"] = choice("polyurethane")
    coats: int = measure(3, ge=1, le=5)
    floor_condition: Literal["new", "previously-finished", "bare-wood"] = choice("new")
    application_method: Literal["brush", "roller", "spray"] = choice("brush")


class FloorFinishingCalculator(BaseCalculator):

    kind = "floor-finishing"
    schema = FloorFinishingInputs

    def calculate(self, inputs: FloorFinishingInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        coverage, price, drying_time = FINISHES[inputs.finish_type]
        finish_needed = ceil_units(room_area / coverage * inputs.coats)

        needs_primer = inputs.floor_condition == "bare-wood"
        primer_needed = self.units_for(room_area, PRIMER_SQ_FT_PER_GALLON) if needs_primer else 0
        sanding = SANDING_SUPPLIES_COST if inputs.floor_condition != "new" else 0

        steps = [
            "Ensure room temperature is 65-75°F",
            "Clean floor thoroughly with tack cloth",
        ]
        if needs_primer:
            steps.append("Apply primer and allow to dry")
        steps.extend([
            "Apply thin, even coats with chosen method",
            "Sand lightly between coats with 220 grit",
            "Apply final coat without sanding",
            "Allow 24-48 hours before light traffic",
        ])

        return {
            "room_area": room_area,
            "finish_needed": finish_needed,
            "primer_needed": primer_needed,
            "sanding_supplies": sanding,
            "total_cost": self.sum_costs(finish_needed * price, primer_needed * PRIMER_PRICE, sanding),
            "drying_time": drying_time,
            "application_steps": steps,
        }
