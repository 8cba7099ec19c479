"""
Tile and natural stone calculators.

Tile sizes are entered in inches, rooms in feet. Tiles are sold whole, so
counts are rounded up before and after the waste markup.
"""

from typing import Literal, Optional

from .base import BaseCalculator, ceil_units
from .inputs import InputSchema, Toggle, choice, measure, waste

CUBIC_IN_PER_CUBIC_FT = 1728


def tile_area_sq_ft(length_in: float, width_in: float) -> float:
    """Face area of one tile in sq ft, converting each side to feet first."""
    return (length_in / 12) * (width_in / 12)


# ============================================================
# Tile requirements
# ============================================================

# Rough allowances: 0.05 lb of grout per sq ft, one bag of thinset per 50 sq ft
GROUT_LB_PER_SQ_FT = 0.05
ADHESIVE_SQ_FT_PER_BAG = 50


class TileInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    tile_length: float = measure(12, ge=0.1, message="Tile length must be greater than 0")
    tile_width: float = measure(12, ge=0.1, message="Tile width must be greater than 0")
    grout_width: float = measure(0.125, ge=0, message="Grout width must be 0 or greater")
    waste_percentage: float = waste(10)


class TileCalculator(BaseCalculator):
    """Tile count, waste-adjusted count, grout and adhesive for a rectangular room."""

    kind = "tile-calculator"
    schema = TileInputs

    def calculate(self, inputs: TileInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        tile_area = tile_area_sq_ft(inputs.tile_length, inputs.tile_width)
        tiles_needed = self.units_for(room_area, tile_area)

        return {
            "room_area": room_area,
            "tile_area": tile_area,
            "tiles_needed": tiles_needed,
            "tiles_with_waste": self.apply_waste(tiles_needed, inputs.waste_percentage),
            "grout_needed": ceil_units(room_area * GROUT_LB_PER_SQ_FT),
            "adhesive_needed": self.units_for(room_area, ADHESIVE_SQ_FT_PER_BAG),
        }


# ============================================================
# Tile adhesive
# ============================================================

# sq ft per gallon, before adjustments
ADHESIVE_COVERAGE = {
    "standard": 60,
    "premium": 55,
    "epoxy": 45,
    "rapid-set": 50,
}

ADHESIVE_GALLON_PRICES = {
    "standard": 35,
    "premium": 50,
    "epoxy": 75,
    "rapid-set": 45,
}

TILE_TYPE_FACTORS = {
    "ceramic": 1.0,
    "porcelain": 0.9,
    "natural-stone": 0.8,
    "glass": 1.1,
    "metal": 1.0,
}

SUBSTRATE_FACTORS = {
    "concrete": 1.0,
    "plywood": 1.2,
    "cement-board": 1.1,
    "existing-tile": 1.3,
    "drywall": 1.4,
}

APPLICATION_FACTORS = {
    "trowel": 1.0,
    "back-butter": 1.5,
    "full-coverage": 1.8,
}

# Tiles thicker than this (mm) spread coverage proportionally thinner
REFERENCE_THICKNESS_MM = 8

ADHESIVE_TIPS = [
    ("tile_type", "natural-stone", "Use white adhesive to prevent staining light-colored stone"),
    ("tile_type", "porcelain", "Use premium adhesive for better bond with dense porcelain"),
    ("application_method", "back-butter",
     "Apply adhesive to both tile back and substrate for maximum bond"),
    ("substrate_type", "plywood", "Prime plywood substrate before adhesive application"),
    ("adhesive_type", "rapid-set", "Work in small sections - rapid-set adhesive cures quickly"),
]

ADHESIVE_GENERAL_TIPS = [
    "Allow adhesive to cure for 24-48 hours before grouting",
    "Check manufacturer specifications for trowel notch size",
]


class TileAdhesiveInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    tile_length: float = measure(12, ge=0.1, message="Tile length must be greater than 0")
    tile_width: float = measure(12, ge=0.1, message="Tile width must be greater than 0")
    tile_type: Literal["ceramic", "porcelain", "natural-stone", "glass", "metal"] = choice("ceramic")
    adhesive_type: Literal["standard", "premium", "epoxy", "rapid-set"] = choice("standard")
    substrate_type: Literal["concrete", "plywood", "cement-board", "existing-tile",
                            "drywall"] = choice("concrete")
    tile_thickness: float = measure(8, ge=1, le=50,
                                    message="Tile thickness must be between 1-50mm")
    application_method: Literal["trowel", "back-butter", "full-coverage"] = choice("trowel")
    waste_percentage: float = waste(10, 0, 30)


class TileAdhesiveCalculator(BaseCalculator):

    kind = "tile-adhesive"
    schema = TileAdhesiveInputs

    def calculate(self, inputs: TileAdhesiveInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        tile_area = tile_area_sq_ft(inputs.tile_length, inputs.tile_width)

        thickness_factor = max(1.0, inputs.tile_thickness / REFERENCE_THICKNESS_MM)
        tile_factor = TILE_TYPE_FACTORS[inputs.tile_type]
        substrate_factor = SUBSTRATE_FACTORS[inputs.substrate_type]
        method_factor = APPLICATION_FACTORS[inputs.application_method]
        coverage_rate = (ADHESIVE_COVERAGE[inputs.adhesive_type] * tile_factor
                         * substrate_factor * method_factor / thickness_factor)

        adhesive_needed = room_area / coverage_rate
        adhesive_with_waste = self.with_waste(adhesive_needed, inputs.waste_percentage)

        tips = [tip for field, value, tip in ADHESIVE_TIPS if getattr(inputs, field) == value]
        tips.extend(ADHESIVE_GENERAL_TIPS)

        return {
            "room_area": room_area,
            "tile_area": tile_area,
            "tiles_needed": self.units_for(room_area, tile_area),
            "coverage_rate": coverage_rate,
            "adhesive_needed": adhesive_needed,
            "adhesive_with_waste": adhesive_with_waste,
            "total_cost": ceil_units(adhesive_with_waste) * ADHESIVE_GALLON_PRICES[inputs.adhesive_type],
            "application_tips": tips,
            "coverage_factors": {
                "Tile Type": tile_factor,
                "Substrate": substrate_factor,
                "Application": method_factor,
                "Thickness": 1 / thickness_factor,
            },
        }


# ============================================================
# Tile grout
# ============================================================

# lb per cubic foot of cured grout
GROUT_DENSITY = {
    "sanded": 105,
    "unsanded": 100,
    "epoxy": 110,
}

GROUT_BAG_PRICES = {
    "sanded": 18,
    "unsanded": 16,
    "epoxy": 45,
}

GROUT_BAG_LB = 25
NARROW_JOINT_IN = 0.125

GROUT_TIPS = [
    "Mix only what you can use in 30 minutes",
    "Work diagonally across tiles to avoid pulling grout out",
    "Clean excess grout before it cures completely",
    "Allow 24-48 hours before sealing grout lines",
]


class TileGroutInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    tile_length: float = measure(12, ge=1, message="Tile length must be greater than 0")
    tile_width: float = measure(12, ge=1, message="Tile width must be greater than 0")
    grout_width: float = measure(0.125, ge=0.0625, message="Grout width must be at least 1/16 inch")
    grout_depth: float = measure(0.25, ge=0.125, message="Grout depth must be at least 1/8 inch")
    grout_type: Literal["sanded", "unsanded", "epoxy"] = choice("sanded")


class TileGroutCalculator(BaseCalculator):

    kind = "tile-grout"
    schema = TileGroutInputs

    def calculate(self, inputs: TileGroutInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        tile_area = self.sq_ft_from_inches(inputs.tile_length, inputs.tile_width)
        tiles_needed = self.units_for(room_area, tile_area)

        # Every tile owns a joint along its full perimeter
        joint_volume = (2 * (inputs.tile_length + inputs.tile_width)
                        * inputs.grout_width * inputs.grout_depth)
        grout_volume = joint_volume * tiles_needed / CUBIC_IN_PER_CUBIC_FT
        grout_pounds = grout_volume * GROUT_DENSITY[inputs.grout_type]
        grout_bags = self.units_for(grout_pounds, GROUT_BAG_LB)

        tips = list(GROUT_TIPS)
        if inputs.grout_type == "epoxy":
            tips.append("Epoxy grout requires immediate cleanup - have multiple sponges ready")
        if inputs.grout_width < NARROW_JOINT_IN:
            tips.append("Use unsanded grout for joints less than 1/8 inch")

        return {
            "room_area": room_area,
            "tile_area": tile_area,
            "tiles_needed": tiles_needed,
            "grout_volume": grout_volume,
            "grout_pounds": grout_pounds,
            "grout_bags": grout_bags,
            "total_cost": grout_bags * GROUT_BAG_PRICES[inputs.grout_type],
            "application_tips": tips,
        }


# ============================================================
# Tile pattern
# ============================================================

# pattern -> (extra waste fraction, labor multiplier, cut fraction, complexity)
PATTERN_FACTORS = {
    "straight": (0.05, 1.0, 0.2, "Simple"),
    "diagonal": (0.15, 1.3, 0.4, "Moderate"),
    "herringbone": (0.20, 1.8, 0.6, "Complex"),
    "chevron": (0.25, 2.0, 0.7, "Complex"),
    "basketweave": (0.15, 1.5, 0.5, "Moderate"),
    "pinwheel": (0.18, 1.6, 0.5, "Moderate"),
}

PATTERN_TIPS = {
    "straight": [
        "Start from center of room for balanced borders",
        "Use chalk lines to ensure straight rows",
        "Plan tile layout to minimize small cuts at edges",
    ],
    "diagonal": [
        "Mark 45-degree reference lines from room center",
        "Start with full tiles in center, work outward",
        "Border tiles will all need diagonal cuts",
    ],
    "herringbone": [
        "Use rectangular tiles (not square) for best effect",
        "Start from room center with perpendicular chalk lines",
        "Maintain consistent 90-degree angles between tiles",
    ],
    "chevron": [
        "Requires precise 45-degree cuts on tile ends",
        "Start with center line and work symmetrically",
        "Consider factory-cut chevron tiles to reduce waste",
    ],
    "basketweave": [
        "Works best with square tiles",
        "Maintain consistent spacing between tile groups",
        "Plan layout to avoid awkward partial patterns at edges",
    ],
    "pinwheel": [
        "Combine large and small tiles for visual interest",
        "Mark grid pattern before starting installation",
        "Keep grout lines consistent throughout pattern",
    ],
}

TILES_PER_BOX = 15
INSTALL_HOURS_PER_SQ_FT = 0.75
TILE_PRICE = 3.50
TILE_LABOR_RATE = 45


class TilePatternInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    tile_length: float = measure(12, ge=1, message="Tile length must be greater than 0")
    tile_width: float = measure(12, ge=1, message="Tile width must be greater than 0")
    pattern: Literal["straight", "diagonal", "herringbone", "chevron",
                     "basketweave", "pinwheel"] = choice("straight")
    waste_percentage: float = waste(10)


class TilePatternCalculator(BaseCalculator):

    kind = "tile-pattern"
    schema = TilePatternInputs

    def calculate(self, inputs: TilePatternInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        tile_area = self.sq_ft_from_inches(inputs.tile_length, inputs.tile_width)
        base_tiles = self.units_for(room_area, tile_area)

        pattern_waste, labor, cut_fraction, complexity = PATTERN_FACTORS[inputs.pattern]
        total_waste = inputs.waste_percentage / 100 + pattern_waste
        tiles_with_waste = ceil_units(base_tiles * (1 + total_waste))
        installation_time = room_area * INSTALL_HOURS_PER_SQ_FT * labor

        return {
            "room_area": room_area,
            "tiles_needed": base_tiles,
            "tiles_with_waste": tiles_with_waste,
            "boxes": self.units_for(tiles_with_waste, TILES_PER_BOX),
            "cuts": ceil_units(base_tiles * cut_fraction),
            "labor_multiplier": labor,
            "installation_time": installation_time,
            "total_cost": tiles_with_waste * TILE_PRICE + installation_time * TILE_LABOR_RATE,
            "pattern_tips": list(PATTERN_TIPS[inputs.pattern]),
            "complexity": complexity,
        }


# ============================================================
# Natural stone
# ============================================================

StoneType = Literal["marble", "granite", "travertine", "limestone", "slate",
                    "sandstone", "quartzite"]
Thickness = Literal["3/8", "1/2", "5/8", "3/4", "1-inch"]

# $/sq ft by stone and thickness
STONE_PRICES = {
    "marble": {"3/8": 8.50, "1/2": 12.00, "5/8": 15.50, "3/4": 18.00, "1-inch": 25.00},
    "granite": {"3/8": 7.50, "1/2": 10.50, "5/8": 14.00, "3/4": 16.50, "1-inch": 22.00},
    "travertine": {"3/8": 5.50, "1/2": 7.50, "5/8": 9.50, "3/4": 12.00, "1-inch": 16.00},
    "limestone": {"3/8": 6.00, "1/2": 8.50, "5/8": 11.00, "3/4": 13.50, "1-inch": 18.00},
    "slate": {"3/8": 7.00, "1/2": 9.50, "5/8": 12.50, "3/4": 15.00, "1-inch": 20.00},
    "sandstone": {"3/8": 4.50, "1/2": 6.50, "5/8": 8.50, "3/4": 11.00, "1-inch": 15.00},
    "quartzite": {"3/8": 9.50, "1/2": 13.50, "5/8": 17.00, "3/4": 20.00, "1-inch": 28.00},
}

STONE_LABOR_FACTORS = {
    "marble": 1.3,
    "granite": 1.4,
    "travertine": 1.1,
    "limestone": 1.2,
    "slate": 1.5,
    "sandstone": 1.2,
    "quartzite": 1.4,
}

THICKNESS_LABOR_FACTORS = {
    "3/8": 1.0,
    "1/2": 1.1,
    "5/8": 1.2,
    "3/4": 1.3,
    "1-inch": 1.5,
}

DURABILITY = {
    "marble": "Good - 25+ years with proper care",
    "granite": "Excellent - 50+ years",
    "travertine": "Good - 20-30 years",
    "limestone": "Good - 25-35 years",
    "slate": "Excellent - 50+ years",
    "sandstone": "Fair - 15-25 years",
    "quartzite": "Excellent - 50+ years",
}

JOINT_WIDTHS = {
    "1/16": 0.0625,
    "1/8": 0.125,
    "3/16": 0.1875,
    "1/4": 0.25,
    "3/8": 0.375,
}

# sq ft per 50 lb bag; dry-lay uses none
THINSET_COVERAGE = {
    "thin-set": 95,
    "thick-bed": 40,
    "dry-lay": None,
}

# sq ft per gallon
SEALER_COVERAGE = {
    "none": None,
    "penetrating": 150,
    "topical": 200,
    "enhancing": 175,
}

STONE_GROUT_BAG_LB = 50
STONE_GROUT_BAG_PRICE = 18
THINSET_BAG_PRICE = 22
SEALER_GALLON_PRICE = 45
STONE_UNDERLAYMENT_PRICE = 1.25
WATERPROOFING_PRICE = 2.50
STONE_HOURS_PER_SQ_FT = 0.8
UNDERLAYMENT_ALLOWANCE = 1.05
WATERPROOFING_ALLOWANCE = 1.1

STAIN_PRONE_STONES = ("marble", "limestone")

STONE_GENERAL_TIPS = [
    "Ensure subfloor is level within 1/8\" over 10 feet",
    "Allow stone to acclimate 24-48 hours before installation",
    "Use proper stone-specific cutting tools with water cooling",
    "Back-butter large format tiles for better adhesion",
]

STONE_MAINTENANCE = [
    "Sweep or vacuum regularly to remove grit and debris",
    "Clean with pH-neutral stone cleaner only",
    "Avoid acidic cleaners that can etch natural stone",
]


class StoneInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    stone_type: StoneType = choice("marble")
    tile_size: Literal["12x12", "18x18", "24x24", "12x24", "16x16", "custom"] = choice("12x12")
    custom_length: Optional[float] = measure(None, ge=6)
    custom_width: Optional[float] = measure(None, ge=6)
    thickness: Thickness = choice("1/2")
    finish: Literal["polished", "honed", "tumbled", "brushed", "natural"] = choice("polished")
    grout_joint_size: Literal["1/16", "1/8", "3/16", "1/4", "3/8"] = choice("1/8")
    installation_type: Literal["thin-set", "thick-bed", "dry-lay"] = choice("thin-set")
    sealer_type: Literal["none", "penetrating", "topical", "enhancing"] = choice("penetrating")
    include_underlayment: Toggle = False
    include_waterproofing: Toggle = False
    waste_percentage: float = waste(15, 5, 25)

    REQUIRED_WHEN = {
        "custom_length": ("tile_size", "custom"),
        "custom_width": ("tile_size", "custom"),
    }


class StoneCalculator(BaseCalculator):

    kind = "stone"
    schema = StoneInputs

    def calculate(self, inputs: StoneInputs) -> dict:
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        if inputs.tile_size == "custom":
            tile_length, tile_width = inputs.custom_length, inputs.custom_width
        else:
            tile_length, tile_width = (int(side) for side in inputs.tile_size.split("x"))

        tile_area = self.sq_ft_from_inches(tile_length, tile_width)
        base_tiles = self.units_for(room_area, tile_area)
        tiles_needed = self.apply_waste(base_tiles, inputs.waste_percentage)
        square_feet_needed = tiles_needed * tile_area

        # Rough joint estimate per sq ft of laid stone
        joint_width = JOINT_WIDTHS[inputs.grout_joint_size]
        grout_coverage = (tile_length + tile_width) * joint_width * 2 / 144
        grout_needed = ceil_units(square_feet_needed * grout_coverage / STONE_GROUT_BAG_LB)

        thinset_coverage = THINSET_COVERAGE[inputs.installation_type]
        thinset_needed = self.units_for(square_feet_needed, thinset_coverage) if thinset_coverage else 0
        sealer_coverage = SEALER_COVERAGE[inputs.sealer_type]
        sealer_needed = self.units_for(square_feet_needed, sealer_coverage) if sealer_coverage else 0

        underlayment_needed = 0
        if inputs.include_underlayment:
            underlayment_needed = ceil_units(room_area * UNDERLAYMENT_ALLOWANCE)
        waterproofing_needed = 0
        if inputs.include_waterproofing:
            waterproofing_needed = ceil_units(room_area * WATERPROOFING_ALLOWANCE)

        labor_hours = (room_area * STONE_HOURS_PER_SQ_FT
                       * THICKNESS_LABOR_FACTORS[inputs.thickness]
                       * STONE_LABOR_FACTORS[inputs.stone_type])

        total_material_cost = self.sum_costs(
            square_feet_needed * STONE_PRICES[inputs.stone_type][inputs.thickness],
            grout_needed * STONE_GROUT_BAG_PRICE,
            thinset_needed * THINSET_BAG_PRICE,
            sealer_needed * SEALER_GALLON_PRICE,
            underlayment_needed * STONE_UNDERLAYMENT_PRICE,
            waterproofing_needed * WATERPROOFING_PRICE,
        )

        tips = list(STONE_GENERAL_TIPS)
        if inputs.stone_type in STAIN_PRONE_STONES:
            tips.append("Use white or light-colored thin-set to prevent staining")
        if inputs.finish == "polished":
            tips.append("Handle polished surfaces carefully to avoid scratches")
        if inputs.include_waterproofing:
            tips.append("Apply waterproofing membrane before tile installation")

        maintenance = list(STONE_MAINTENANCE)
        if inputs.sealer_type != "none":
            maintenance.append("Reseal stone every 1-3 years depending on traffic")
        if inputs.stone_type in STAIN_PRONE_STONES:
            maintenance.append("Wipe up spills immediately to prevent staining")

        return {
            "room_area": room_area,
            "tile_area": tile_area,
            "tiles_needed": tiles_needed,
            "square_feet_needed": square_feet_needed,
            "grout_needed": grout_needed,
            "thin_set_needed": thinset_needed,
            "sealer_needed": sealer_needed,
            "underlayment_needed": underlayment_needed,
            "waterproofing_needed": waterproofing_needed,
            "labor_hours": labor_hours,
            "total_material_cost": total_material_cost,
            "installation_tips": tips,
            "maintenance_guide": maintenance,
            "durability_rating": DURABILITY[inputs.stone_type],
        }
