"""
Resilient and soft floors: vinyl (plank, tile and sheet), linoleum, cork,
rubber and carpet.

Sheet goods and carpet come off a roll of fixed width, so their layouts are
worked out in roll widths and seams rather than in unit counts.
"""

from typing import Literal, Optional

from .base import BaseCalculator, ceil_units
from .inputs import InputSchema, Toggle, choice, measure, waste


# ============================================================
# Vinyl
# ============================================================

class VinylInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    vinyl_type: Literal["lvt", "lvp", "sheet"] = choice("lvt")
    plank_width: float = measure(6, ge=1, message="Plank width must be greater than 0")
    plank_length: float = measure(48, ge=1, message="Plank length must be greater than 0")
    roll_width: float = measure(12, ge=1, message="Roll width must be greater than 0")
    waste_percentage: float = waste(10)


class VinylCalculator(BaseCalculator):
    """Luxury vinyl planks/tiles by the piece, sheet vinyl by the roll."""

    kind = "vinyl-calculator"
    schema = VinylInputs

    def calculate(self, inputs: VinylInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        adjusted_area = self.with_waste(room_area, inputs.waste_percentage)
        perimeter = self.rectangle_perimeter(inputs.room_length, inputs.room_width)

        planks = rolls = linear_feet = None
        if inputs.vinyl_type == "sheet":
            linear_feet = ceil_units(inputs.room_length)
            rolls = self.units_for(inputs.room_width, inputs.roll_width)
        else:
            plank_area = self.sq_ft_from_inches(inputs.plank_width, inputs.plank_length)
            planks = self.units_for(adjusted_area, plank_area)

        return {
            "room_area": room_area,
            "adjusted_area": adjusted_area,
            "planks_needed": planks,
            "square_feet_needed": adjusted_area,
            "rolls_needed": rolls,
            "linear_feet_needed": linear_feet,
            "underlayment_needed": ceil_units(adjusted_area),
            "molding_needed": ceil_units(perimeter),
        }


# ============================================================
# Sheet vinyl
# ============================================================

class SheetVinylInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    roll_width: float = measure(12, ge=6, message="Roll width must be at least 6 feet")
    waste_percentage: float = waste(10, 0, 30)
    seam_tolerance: float = measure(6, ge=0, le=12,
                                    message="Seam tolerance must be between 0-12 inches")
    vinyl_cost: float = measure(2.85, ge=0, message="Vinyl cost must be positive")


class SheetVinylCalculator(BaseCalculator):

    kind = "sheet-vinyl"
    schema = SheetVinylInputs

    def calculate(self, inputs: SheetVinylInputs) -> dict:
        length, width, roll = inputs.room_length, inputs.room_width, inputs.roll_width
        room_area = self.rectangle_area(length, width)
        linear_feet, rolls, layout = self._layout(length, width, roll)

        # Each drop gets its seam allowance before the waste markup
        seam_allowance = self.inches_to_feet(inputs.seam_tolerance) * rolls
        linear_feet = self.with_waste(linear_feet + seam_allowance, inputs.waste_percentage)
        total_square_feet = linear_feet * roll
        total_cost = total_square_feet * inputs.vinyl_cost

        return {
            "room_area": room_area,
            "linear_feet_needed": ceil_units(linear_feet),
            "total_square_feet": ceil_units(total_square_feet),
            "seam_layout": layout,
            "waste_amount": total_square_feet - room_area,
            "total_cost": total_cost,
            "cost_per_sq_ft": self.cost_per_sq_ft(total_cost, room_area),
            "installation_tips": [
                "Acclimate vinyl for 24 hours before installation",
                "Ensure subfloor is smooth and level",
                "Use sharp utility knife for clean cuts",
                "Roll out seams with 100lb roller",
                ("Pattern match at seams for best appearance" if rolls > 1
                 else "Single piece installation minimizes seams"),
                "Leave 1/8\" gap at walls for expansion",
            ],
            "rolls_needed": rolls,
        }

    def _layout(self, length: float, width: float, roll: float):
        """Returns (linear feet off the roll, drops, layout text)."""
        if width <= roll and length <= roll:
            return max(length, width), 1, "Single piece installation - no seams required"
        if width <= roll:
            return length, 1, "Single width - vinyl runs lengthwise"
        if length <= roll:
            return width, 1, "Single width - vinyl runs widthwise"

        pieces_across_width = self.units_for(width, roll)
        pieces_across_length = self.units_for(length, roll)
        if pieces_across_width <= pieces_across_length:
            return (length * pieces_across_width, pieces_across_width,
                    "%d pieces running lengthwise with %d seam(s)"
                    % (pieces_across_width, pieces_across_width - 1))
        return (width * pieces_across_length, pieces_across_length,
                "%d pieces running widthwise with %d seam(s)"
                % (pieces_across_length, pieces_across_length - 1))


# ============================================================
# Linoleum
# ============================================================

# type -> adhesive multiplier against 1 gallon per 200 sq ft
LINOLEUM_ADHESIVE = {
    "tile": 0.8,
    "sheet": 1.2,
    "click": 0.5,
}

LINOLEUM_ADHESIVE_SQ_FT = 200
LINOLEUM_ADHESIVE_PRICE = 45
SEAM_SEALER_PRICE = 12
# One tube of seam sealer per 10 ft of room length
SEAM_SEALER_FT_PER_TUBE = 10

LINOLEUM_ECO_BENEFITS = [
    "Made from renewable raw materials (linseed oil, cork dust, wood flour)",
    "Biodegradable and recyclable at end of life",
    "Antimicrobial properties reduce need for chemical cleaners",
    "Low VOC emissions improve indoor air quality",
    "Durable construction reduces replacement frequency",
    "Natural static resistance eliminates need for treatments",
]

LINOLEUM_TIPS = [
    "Acclimate linoleum 24-48 hours before installation",
    "Ensure subfloor temperature is 65-75°F during installation",
    "Use pH-neutral adhesive specifically designed for linoleum",
    "Roll installation with 100lb roller to ensure proper adhesion",
    "Allow 24 hours before heavy traffic",
    "Install transition strips at doorways and material changes",
]

LINOLEUM_MAINTENANCE = [
    "Sweep or vacuum daily to prevent grit accumulation",
    "Damp mop weekly with pH-neutral cleaner",
    "Avoid harsh chemicals, bleach, or ammonia-based products",
    "Apply protective coating every 2-3 years in high-traffic areas",
    "Clean spills immediately to prevent staining",
    "Use furniture pads to prevent scratches and indentations",
]


class LinoleumInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    linoleum_type: Literal["sheet", "tile", "click"] = choice("tile")
    tile_size: float = measure(12, ge=6, message="Tile size must be at least 6 inches")
    waste_percentage: float = waste(8, 0, 30)
    linoleum_cost: float = measure(3.75, ge=0, message="Cost must be positive")


class LinoleumCalculator(BaseCalculator):

    kind = "linoleum"
    schema = LinoleumInputs

    def calculate(self, inputs: LinoleumInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        adjusted_area = self.with_waste(room_area, inputs.waste_percentage)

        tiles = seam_sealer = None
        if inputs.linoleum_type == "tile":
            tile_area = self.sq_ft_from_inches(inputs.tile_size, inputs.tile_size)
            tiles = self.units_for(adjusted_area, tile_area)
        elif inputs.linoleum_type == "sheet":
            seam_sealer = self.units_for(inputs.room_length, SEAM_SEALER_FT_PER_TUBE)

        adhesive = ceil_units((adjusted_area / LINOLEUM_ADHESIVE_SQ_FT)
                             * LINOLEUM_ADHESIVE[inputs.linoleum_type])
        total = self.sum_costs(
            adjusted_area * inputs.linoleum_cost,
            adhesive * LINOLEUM_ADHESIVE_PRICE,
            (seam_sealer or 0) * SEAM_SEALER_PRICE,
        )

        return {
            "room_area": room_area,
            "adjusted_area": adjusted_area,
            "tiles_needed": tiles,
            "square_feet_needed": adjusted_area,
            "adhesive_needed": adhesive,
            "seam_sealer_needed": seam_sealer,
            "total_material_cost": total,
            "cost_per_sq_ft": self.cost_per_sq_ft(total, room_area),
            "eco_friendly_benefits": list(LINOLEUM_ECO_BENEFITS),
            "installation_tips": list(LINOLEUM_TIPS),
            "maintenance_guide": list(LINOLEUM_MAINTENANCE),
        }


# ============================================================
# Cork
# ============================================================

CorkType = Literal["tile", "plank", "sheet"]
CorkGrade = Literal["commercial", "residential", "premium"]

# $/sq ft by type and grade
CORK_PRICES = {
    "tile": {"commercial": 4.50, "residential": 6.50, "premium": 9.50},
    "plank": {"commercial": 5.50, "residential": 7.50, "premium": 11.50},
    "sheet": {"commercial": 3.50, "residential": 5.50, "premium": 8.50},
}

CORK_FINISH_FACTORS = {
    "unfinished": 0.8,
    "wax": 1.0,
    "urethane": 1.2,
}

CORK_THICKNESS_FACTORS = {
    "6mm": 1.0,
    "8mm": 1.1,
    "10mm": 1.2,
    "12mm": 1.3,
}

CORK_INSTALL_FACTORS = {
    "floating": 1.0,
    "glue-down": 1.4,
}

CORK_SQ_FT_PER_BOX = 11

CORK_ECO_BENEFITS = [
    "Cork is harvested without damaging trees",
    "Cork oak trees live 150-200 years and regenerate bark",
    "Naturally antimicrobial and hypoallergenic",
    "Excellent thermal and acoustic insulation",
    "Biodegradable and recyclable material",
    "Low VOC emissions for healthy indoor air",
    "Sustainably harvested every 9 years",
]

CORK_TIPS = [
    "Acclimate cork 48-72 hours before installation",
    "Maintain room temperature 65-75°F during installation",
    "Cork is softer than other materials - handle with care",
    "Use sharp utility knife for clean cuts",
]

CORK_MAINTENANCE = [
    "Sweep or vacuum regularly with soft brush attachment",
    "Damp mop with cork-specific cleaner only",
    "Avoid standing water - wipe spills immediately",
    "Use furniture pads to prevent indentations",
    "Reapply protective finish every 3-5 years",
    "Avoid high heels and sharp objects",
    "Maintain 35-65% humidity levels",
]


class CorkInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    cork_type: CorkType = choice("tile")
    thickness: Literal["6mm", "8mm", "10mm", "12mm"] = choice("10mm")
    tile_size: Literal["12x12", "12x24", "6x36", "custom"] = choice("12x12")
    custom_length: Optional[float] = measure(None, ge=6)
    custom_width: Optional[float] = measure(None, ge=6)
    grade: CorkGrade = choice("residential")
    finish: Literal["urethane", "wax", "unfinished"] = choice("urethane")
    installation_type: Literal["floating", "glue-down"] = choice("floating")
    subfloor_type: Literal["concrete", "plywood", "existing-floor"] = choice("plywood")
    include_underlayment: Toggle = True
    include_moisture_barrier: Toggle = False
    include_transitions: Toggle = False
    waste_percentage: float = waste(10, 5, 25)

    REQUIRED_WHEN = {
        "custom_length": ("tile_size", "custom"),
        "custom_width": ("tile_size", "custom"),
    }


class CorkCalculator(BaseCalculator):

    kind = "cork"
    schema = CorkInputs

    def calculate(self, inputs: CorkInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        perimeter = self.rectangle_perimeter(inputs.room_length, inputs.room_width)

        # Planks and sheets use a nominal 12x12 unless a custom size is given
        tile_length, tile_width = 12, 12
        if inputs.tile_size == "custom":
            tile_length, tile_width = inputs.custom_length, inputs.custom_width
        elif inputs.cork_type == "tile":
            tile_length, tile_width = (int(side) for side in inputs.tile_size.split("x"))

        tiles = 0
        if inputs.cork_type == "sheet":
            square_feet = self.with_waste(room_area, inputs.waste_percentage)
        else:
            tile_area = self.sq_ft_from_inches(tile_length, tile_width)
            tiles = self.apply_waste(self.units_for(room_area, tile_area), inputs.waste_percentage)
            square_feet = tiles * tile_area

        adhesive = self.units_for(square_feet, 200) if inputs.installation_type == "glue-down" else 0
        underlayment = 0
        if inputs.include_underlayment and inputs.installation_type == "floating":
            underlayment = ceil_units(room_area * 1.05)
        moisture_barrier = 0
        if inputs.include_moisture_barrier or inputs.subfloor_type == "concrete":
            moisture_barrier = ceil_units(room_area * 1.1)
        transitions = self.units_for(perimeter, 10) if inputs.include_transitions else 0

        labor_hours = (room_area * 0.45 * CORK_THICKNESS_FACTORS[inputs.thickness]
                       * CORK_INSTALL_FACTORS[inputs.installation_type])

        total = self.sum_costs(
            square_feet * CORK_PRICES[inputs.cork_type][inputs.grade]
            * CORK_FINISH_FACTORS[inputs.finish],
            adhesive * 45,
            underlayment * 0.70,
            moisture_barrier * 0.40,
            transitions * 30,
        )

        tips = list(CORK_TIPS)
        if inputs.subfloor_type == "concrete":
            tips.append("Test concrete for moisture - cork is sensitive to moisture")
        if inputs.installation_type == "floating":
            tips.append("Allow 1/4\" expansion gap around perimeter")
        if inputs.finish == "unfinished":
            tips.append("Apply 3 coats of polyurethane finish after installation")

        return {
            "room_area": room_area,
            "tiles_needed": tiles,
            "square_feet_needed": square_feet,
            "boxes": self.units_for(square_feet, CORK_SQ_FT_PER_BOX),
            "adhesive_needed": adhesive,
            "underlayment_needed": underlayment,
            "moisture_barrier_needed": moisture_barrier,
            "transition_strips": transitions,
            "labor_hours": labor_hours,
            "total_cost": total,
            "eco_friendly_benefits": list(CORK_ECO_BENEFITS),
            "installation_tips": tips,
            "maintenance_guide": list(CORK_MAINTENANCE),
        }


# ============================================================
# Rubber
# ============================================================

# type -> (sq ft covered by one unit, result key, adhesive multiplier)
RUBBER_UNITS = {
    "tiles": ((24 * 24) / 144, "tiles_needed", 0.7),
    "rolls": (4 * 10, "rolls_needed", 1.2),
    "mats": (4 * 6, "mats_needed", 0.5),
    "interlocking": ((20 * 20) / 144, "tiles_needed", 0.3),
}

# lb per sq ft
RUBBER_WEIGHTS = {
    "6mm": 1.2,
    "8mm": 1.6,
    "10mm": 2.0,
    "12mm": 2.4,
    "15mm": 3.0,
    "20mm": 4.0,
}

RUBBER_ADHESIVE_SQ_FT = 300
RUBBER_ADHESIVE_PRICE = 55
RUBBER_STRIP_FT = 8
RUBBER_STRIP_PRICE = 25

RUBBER_TIPS = [
    "Allow rubber flooring to acclimate 24-48 hours before installation",
    "Ensure subfloor is clean, dry, and level within 1/8\" over 10 feet",
    "Use manufacturer-recommended adhesive for permanent installations",
    "Install in temperatures between 65-75°F for best results",
    "Use a 100lb roller for proper adhesion and seam bonding",
    "Install transition strips at doorways and material changes",
]

RUBBER_MAINTENANCE = [
    "Sweep daily to remove dirt and debris",
    "Damp mop weekly with neutral pH cleaner",
    "Avoid petroleum-based cleaners and solvents",
    "Use entrance mats to reduce tracked-in dirt",
    "Inspect seams regularly and repair if needed",
    "Deep clean monthly with approved rubber floor cleaner",
]


class RubberInputs(InputSchema):
    area_length: float = measure(ge=0.1, message="Area length must be greater than 0")
    area_width: float = measure(ge=0.1, message="Area width must be greater than 0")
    rubber_type: Literal["tiles", "rolls", "mats", "interlocking"] = choice("tiles")
    thickness: Literal["6mm", "8mm", "10mm", "12mm", "15mm", "20mm"] = choice("8mm")
    application: Literal["gym", "playground", "commercial", "home-gym",
                         "warehouse"] = choice("gym")
    waste_percentage: float = waste(5, 0, 20)
    rubber_cost: float = measure(3.25, ge=0, message="Cost must be positive")


class RubberCalculator(BaseCalculator):

    kind = "rubber"
    schema = RubberInputs

    def calculate(self, inputs: RubberInputs) -> dict:
        total_area = self.rectangle_area(inputs.area_length, inputs.area_width)
        adjusted_area = self.with_waste(total_area, inputs.waste_percentage)

        unit_area, unit_key, adhesive_multiplier = RUBBER_UNITS[inputs.rubber_type]
        units = {"tiles_needed": None, "rolls_needed": None, "mats_needed": None}
        units[unit_key] = self.units_for(adjusted_area, unit_area)

        adhesive = ceil_units((adjusted_area / RUBBER_ADHESIVE_SQ_FT) * adhesive_multiplier)
        transitions = self.units_for(
            self.rectangle_perimeter(inputs.area_length, inputs.area_width), RUBBER_STRIP_FT)
        total = self.sum_costs(
            adjusted_area * inputs.rubber_cost,
            adhesive * RUBBER_ADHESIVE_PRICE,
            transitions * RUBBER_STRIP_PRICE,
        )

        return {
            "total_area": total_area,
            "adjusted_area": adjusted_area,
            **units,
            "adhesive_needed": adhesive,
            "transition_strips": transitions,
            "total_material_cost": total,
            "cost_per_sq_ft": self.cost_per_sq_ft(total, total_area),
            "weight_estimate": adjusted_area * RUBBER_WEIGHTS[inputs.thickness],
            "installation_tips": list(RUBBER_TIPS),
            "maintenance_guide": list(RUBBER_MAINTENANCE),
        }


# ============================================================
# Carpet
# ============================================================

CarpetStyle = Literal["cut-pile", "loop-pile", "cut-loop", "frieze", "berber", "shag"]

CARPET_ROLL_WIDTHS = {
    "12-ft": 12,
    "13.2-ft": 13.2,
    "15-ft": 15,
}

# style -> (labor factor, $/sq ft)
CARPET_STYLES = {
    "cut-pile": (1.0, 4.50),
    "loop-pile": (1.1, 3.80),
    "cut-loop": (1.2, 5.20),
    "frieze": (1.3, 6.00),
    "berber": (1.4, 4.20),
    "shag": (1.5, 7.50),
}

CARPET_INSTALL_FACTORS = {
    "stretch-in": 1.0,
    "glue-down": 1.3,
    "double-stick": 1.5,
}

PADDING_PRICES = {
    "6-lb": 0.85,
    "8-lb": 1.20,
    "10-lb": 1.50,
    "none": 0,
}

# 10" tread + 7" riser, 3 ft wide
STAIR_CARPET_SQ_FT = 17 / 12 * 3
TACK_STRIP_PRICE = 1.25
CARPET_TRANSITION_PRICE = 25
# Each seam adds half again to the install time
SEAM_LABOR = 0.5


class CarpetInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    carpet_type: CarpetStyle = choice("cut-pile")
    carpet_width: Literal["12-ft", "13.2-ft", "15-ft"] = choice("12-ft")
    installation_type: Literal["stretch-in", "glue-down", "double-stick"] = choice("stretch-in")
    padding_thickness: Literal["6-lb", "8-lb", "10-lb", "none"] = choice("8-lb")
    waste_percentage: float = waste(10, 0, 25)
    include_stairs: Toggle = False
    stair_count: int = measure(0, ge=0, le=50)
    include_padding: Toggle = True
    include_tack_strips: Toggle = True
    include_transitions: Toggle = False


class CarpetCalculator(BaseCalculator):

    kind = "carpet"
    schema = CarpetInputs

    def calculate(self, inputs: CarpetInputs) -> dict:
        length, width = inputs.room_length, inputs.room_width
        room_area = self.rectangle_area(length, width)
        perimeter = self.rectangle_perimeter(length, width)
        roll = CARPET_ROLL_WIDTHS[inputs.carpet_width]

        seams = 0
        if width <= roll:
            carpet = length * roll
        elif length <= roll:
            # Turn the roll
            carpet = width * roll
        else:
            drops = self.units_for(width, roll)
            seams = drops - 1
            carpet = length * roll * drops

        carpet_with_waste = self.with_waste(carpet, inputs.waste_percentage)
        stair_carpet = 0
        if inputs.include_stairs and inputs.stair_count:
            stair_carpet = inputs.stair_count * STAIR_CARPET_SQ_FT

        padding = room_area * 1.05 if inputs.include_padding else 0
        tack_strips = perimeter * 0.85 if inputs.include_tack_strips else 0
        transitions = self.units_for(perimeter, 20) if inputs.include_transitions else 0

        style_factor, price = CARPET_STYLES[inputs.carpet_type]
        labor_hours = (room_area * 0.5 * style_factor
                       * CARPET_INSTALL_FACTORS[inputs.installation_type]
                       * (1 + seams * SEAM_LABOR))

        total = self.sum_costs(
            (carpet_with_waste + stair_carpet) * price,
            padding * PADDING_PRICES[inputs.padding_thickness],
            tack_strips * TACK_STRIP_PRICE,
            transitions * CARPET_TRANSITION_PRICE,
        )

        tips = []
        if seams > 0:
            tips.append("%d seam(s) required - plan seam placement carefully" % seams)
        if inputs.carpet_type == "berber":
            tips.append("Berber carpet requires precise cutting to prevent unraveling")
        if inputs.installation_type == "stretch-in":
            tips.append("Allow carpet to acclimate for 24 hours before installation")
        if inputs.padding_thickness == "10-lb":
            tips.append("Premium padding extends carpet life significantly")
        tips.append("Maintain consistent pile direction for uniform appearance")
        tips.append("Use seaming tape and iron for professional seam quality")

        return {
            "room_area": room_area,
            "carpet_needed": carpet,
            "carpet_with_waste": carpet_with_waste,
            "padding_needed": padding,
            "tack_strips_needed": tack_strips,
            "transition_strips": transitions,
            "stair_carpet": stair_carpet,
            "labor_hours": labor_hours,
            "total_material_cost": total,
            "installation_tips": tips,
            "seams": seams,
        }
