"""
Area and room-layout calculators.

Square footage by shape, irregular rooms broken into sections, and the
room-specific estimators (rectangular, circular, L-shaped, multi-room) that
turn an area into material units, cuts and layout tips.
"""

import math
from typing import Literal, Optional

from pydantic import Field

from .base import BaseCalculator, ceil_units, format_number
from .inputs import InputSchema, RecordSchema, Toggle, choice, measure, waste
from .tables import FlooringType

# Calculators below assume 12" x 12" tiles and 48" x 6" planks
TILE_SQ_FT = 1.0
PLANK_SQ_FT = (48 * 6) / 144


# ============================================================
# Square footage
# ============================================================

class SquareFootageInputs(InputSchema):
    shape: Literal["rectangle", "square", "circle", "l-shape", "triangle"] = choice("rectangle")
    length: Optional[float] = measure(None, ge=0.1, message="Length must be greater than 0")
    width: Optional[float] = measure(None, ge=0.1, message="Width must be greater than 0")
    radius: Optional[float] = measure(None, ge=0.1, message="Radius must be greater than 0")
    length1: Optional[float] = measure(None, ge=0.1, label="Length 1",
                                       message="Length 1 must be greater than 0")
    width1: Optional[float] = measure(None, ge=0.1, label="Width 1",
                                      message="Width 1 must be greater than 0")
    length2: Optional[float] = measure(None, ge=0.1, label="Length 2",
                                       message="Length 2 must be greater than 0")
    width2: Optional[float] = measure(None, ge=0.1, label="Width 2",
                                      message="Width 2 must be greater than 0")
    base: Optional[float] = measure(None, ge=0.1, message="Base must be greater than 0")
    height: Optional[float] = measure(None, ge=0.1, message="Height must be greater than 0")

    REQUIRED_WHEN = {
        "length": ("shape", ("rectangle", "square")),
        "width": ("shape", ("rectangle", "square")),
        "radius": ("shape", "circle"),
        "length1": ("shape", "l-shape"),
        "width1": ("shape", "l-shape"),
        "length2": ("shape", "l-shape"),
        "width2": ("shape", "l-shape"),
        "base": ("shape", "triangle"),
        "height": ("shape", "triangle"),
    }


class SquareFootageCalculator(BaseCalculator):
    """Area, perimeter and unit conversions for one regular shape."""

    kind = "square-footage"
    schema = SquareFootageInputs

    def calculate(self, inputs: SquareFootageInputs) -> dict:
        shape = inputs.shape
        perimeter = 0.0

        if shape in ("rectangle", "square"):
            area = self.rectangle_area(inputs.length, inputs.width)
            perimeter = self.rectangle_perimeter(inputs.length, inputs.width)
            calculation = "%s ft × %s ft" % (format_number(inputs.length),
                                            format_number(inputs.width))
        elif shape == "circle":
            area = self.circle_area(inputs.radius)
            perimeter = self.circle_circumference(inputs.radius)
            calculation = "π × %s²" % format_number(inputs.radius)
        elif shape == "l-shape":
            area = self.l_shape_area(inputs.length1, inputs.width1,
                                     inputs.length2, inputs.width2)
            calculation = "(%s × %s) + (%s × %s)" % tuple(
                format_number(v) for v in (inputs.length1, inputs.width1,
                                           inputs.length2, inputs.width2))
        else:
            area = self.triangle_area(inputs.base, inputs.height)
            calculation = "0.5 × %s × %s" % (format_number(inputs.base),
                                            format_number(inputs.height))

        return {
            "area": area,
            "perimeter": perimeter,
            "calculation": "%s = %.2f sq ft" % (calculation, area),
            "area_in_yards": self.sq_ft_to_sq_yd(area),
            "area_in_inches": self.sq_ft_to_sq_in(area),
        }


# ============================================================
# Room area (irregular and regular rooms)
# ============================================================

# room type -> (complexity factor, recommended waste %, tips)
ROOM_TYPES = {
    "simple-rectangle": (1.0, 8, [
        "Start from the center of the room",
        "Maintain consistent expansion gaps",
    ]),
    "l-shape": (1.3, 12, [
        "Plan layout to minimize cuts at the corner",
        "Use transition strips at direction changes",
        "Consider running planks parallel to longest wall",
    ]),
    "u-shape": (1.6, 15, [
        "Create detailed layout plan before starting",
        "Use professional installer for complex cuts",
        "Order 20% extra material for pattern matching",
    ]),
    "curved": (1.8, 18, [
        "Use flexible flooring materials for curves",
        "Make template for curved cuts",
        "Consider professional installation",
    ]),
    "irregular": (1.5, 20, [
        "Measure carefully and create detailed drawings",
        "Use laser measuring tools for accuracy",
        "Plan for significant material waste",
    ]),
    "multi-room": (1.4, 14, [
        "Plan flooring direction across all rooms",
        "Use transition strips between different floor levels",
        "Consider bulk ordering for cost savings",
    ]),
}

# Perimeter from area when only an approximate area is known
IRREGULAR_PERIMETER_FACTOR = 4
MULTI_ROOM_PERIMETER_FACTOR = 6


class RoomAreaInputs(InputSchema):
    room_type: Literal["simple-rectangle", "l-shape", "u-shape", "curved",
                       "irregular", "multi-room"] = choice("simple-rectangle")
    length: Optional[float] = measure(None, ge=0.1)
    width: Optional[float] = measure(None, ge=0.1)
    length1: Optional[float] = measure(None, ge=0.1, label="Length 1")
    width1: Optional[float] = measure(None, ge=0.1, label="Width 1")
    length2: Optional[float] = measure(None, ge=0.1, label="Length 2")
    width2: Optional[float] = measure(None, ge=0.1, label="Width 2")
    length3: Optional[float] = measure(None, ge=0.1, label="Length 3")
    width3: Optional[float] = measure(None, ge=0.1, label="Width 3")
    radius: Optional[float] = measure(None, ge=0.1)
    approximate_area: Optional[float] = measure(None, ge=0.1)

    REQUIRED_WHEN = {
        "length": ("room_type", "simple-rectangle"),
        "width": ("room_type", "simple-rectangle"),
        "length1": ("room_type", ("l-shape", "u-shape")),
        "width1": ("room_type", ("l-shape", "u-shape")),
        "length2": ("room_type", ("l-shape", "u-shape")),
        "width2": ("room_type", ("l-shape", "u-shape")),
        "length3": ("room_type", "u-shape"),
        "width3": ("room_type", "u-shape"),
        "radius": ("room_type", "curved"),
        "approximate_area": ("room_type", ("irregular", "multi-room")),
    }


class RoomAreaCalculator(BaseCalculator):

    kind = "room-area"
    schema = RoomAreaInputs

    def calculate(self, inputs: RoomAreaInputs) -> dict:
        room_type = inputs.room_type
        breakdown = {}

        if room_type == "simple-rectangle":
            breakdown["Main Room"] = self.rectangle_area(inputs.length, inputs.width)
            perimeter = self.rectangle_perimeter(inputs.length, inputs.width)
        elif room_type == "l-shape":
            breakdown["Section 1"] = inputs.length1 * inputs.width1
            breakdown["Section 2"] = inputs.length2 * inputs.width2
            # The two sections share an edge; drop it from both sides
            perimeter = (2 * (inputs.length1 + inputs.width1 + inputs.length2 + inputs.width2)
                         - min(inputs.width1, inputs.width2) * 2)
        elif room_type == "u-shape":
            breakdown["Section 1"] = inputs.length1 * inputs.width1
            breakdown["Section 2"] = inputs.length2 * inputs.width2
            breakdown["Section 3"] = inputs.length3 * inputs.width3
            perimeter = 2 * (inputs.length1 + inputs.width1 + inputs.length2
                             + inputs.width2 + inputs.length3 + inputs.width3)
        elif room_type == "curved":
            breakdown["Circular Area"] = self.circle_area(inputs.radius)
            perimeter = self.circle_circumference(inputs.radius)
        elif room_type == "irregular":
            breakdown["Irregular Area"] = inputs.approximate_area
            perimeter = math.sqrt(inputs.approximate_area) * IRREGULAR_PERIMETER_FACTOR
        else:
            breakdown["Combined Rooms"] = inputs.approximate_area
            perimeter = math.sqrt(inputs.approximate_area) * MULTI_ROOM_PERIMETER_FACTOR

        complexity, recommended_waste, tips = ROOM_TYPES[room_type]
        return {
            "total_area": sum(breakdown.values()),
            "perimeter": perimeter,
            "room_count": len(breakdown),
            "complexity_factor": complexity,
            "recommended_waste": recommended_waste,
            "area_breakdown": breakdown,
            "installation_tips": list(tips),
        }


# ============================================================
# Room shape
# ============================================================

SHAPE_COMPLEXITY = {
    "rectangle": 1.0,
    "l-shape": 1.3,
    "u-shape": 1.5,
    "circle": 1.4,
    "triangle": 1.6,
    "octagon": 1.7,
    "custom": 1.2,
}

# Extra material lost to cuts, on top of the chosen waste percentage
CUTTING_WASTE_FACTORS = {
    "rectangle": 0.05,
    "l-shape": 0.15,
    "u-shape": 0.20,
    "circle": 0.25,
    "triangle": 0.30,
    "octagon": 0.35,
    "custom": 0.15,
}

DIFFICULTY_LEVELS = {
    "rectangle": "Easy - Minimal cuts required",
    "l-shape": "Moderate - Some complex cuts",
    "u-shape": "Moderate-Hard - Multiple inside corners",
    "circle": "Hard - Curved cuts required",
    "triangle": "Hard - Angled cuts throughout",
    "octagon": "Very Hard - Multiple angles",
    "custom": "Varies - Depends on shape complexity",
}

SHAPE_TIPS = {
    "rectangle": [
        "Start from the longest, straightest wall",
        "Ensure first row is perfectly straight",
    ],
    "l-shape": [
        "Plan layout to minimize cuts in visible areas",
        "Start installation from the main room area",
        "Use transition strips at direction changes if needed",
    ],
    "u-shape": [
        "Plan material direction for best visual flow",
        "Consider expansion gaps at inside corners",
    ],
    "circle": [
        "Create paper template for curved cuts",
        "Work from center outward in concentric patterns",
        "Use fine-tooth saw for smooth curves",
    ],
    "triangle": [
        "Calculate all angles before cutting",
        "Use miter saw for precise angle cuts",
        "Test fit pieces before final installation",
    ],
    "octagon": [
        "Create detailed cutting diagram",
        "Number all pieces for reference",
        "Consider professional installation",
    ],
    "custom": [],
}

GENERAL_SHAPE_TIPS = [
    "Order 10-15% extra material for complex shapes",
    "Allow material to acclimate before installation",
]

# Simplified L perimeter discount for the shared inside corner
L_SHAPE_PERIMETER_FACTOR = 0.8


class RoomShapeInputs(InputSchema):
    room_shape: Literal["rectangle", "l-shape", "u-shape", "circle",
                        "triangle", "octagon", "custom"] = choice("rectangle")
    length: Optional[float] = measure(None, ge=0.1)
    width: Optional[float] = measure(None, ge=0.1)
    length1: Optional[float] = measure(None, ge=0.1, label="Length 1")
    width1: Optional[float] = measure(None, ge=0.1, label="Width 1")
    length2: Optional[float] = measure(None, ge=0.1, label="Length 2")
    width2: Optional[float] = measure(None, ge=0.1, label="Width 2")
    outer_length: Optional[float] = measure(None, ge=0.1)
    outer_width: Optional[float] = measure(None, ge=0.1)
    inner_length: Optional[float] = measure(None, ge=0.1)
    inner_width: Optional[float] = measure(None, ge=0.1)
    radius: Optional[float] = measure(None, ge=0.1)
    diameter: Optional[float] = measure(None, ge=0.1)
    base: Optional[float] = measure(None, ge=0.1)
    height: Optional[float] = measure(None, ge=0.1)
    side1: Optional[float] = measure(None, ge=0.1, label="Side 1")
    side2: Optional[float] = measure(None, ge=0.1, label="Side 2")
    side3: Optional[float] = measure(None, ge=0.1, label="Side 3")
    side_length: Optional[float] = measure(None, ge=0.1)
    total_area: Optional[float] = measure(None, ge=0.1)
    perimeter: Optional[float] = measure(None, ge=0.1)
    waste_percentage: float = waste(10, 5, 30)
    include_closets: Toggle = False
    number_of_closets: int = measure(0, ge=0, le=10)
    closet_area: float = measure(0, ge=0)

    REQUIRED_WHEN = {
        "length": ("room_shape", "rectangle"),
        "width": ("room_shape", "rectangle"),
        "length1": ("room_shape", "l-shape"),
        "width1": ("room_shape", "l-shape"),
        "length2": ("room_shape", "l-shape"),
        "width2": ("room_shape", "l-shape"),
        "outer_length": ("room_shape", "u-shape"),
        "outer_width": ("room_shape", "u-shape"),
        "inner_length": ("room_shape", "u-shape"),
        "inner_width": ("room_shape", "u-shape"),
        ("radius", "diameter"): ("room_shape", "circle"),
        "base": ("room_shape", "triangle"),
        "height": ("room_shape", "triangle"),
        "side_length": ("room_shape", "octagon"),
        "total_area": ("room_shape", "custom"),
    }


class RoomShapeCalculator(BaseCalculator):

    kind = "room-shape"
    schema = RoomShapeInputs

    def calculate(self, inputs: RoomShapeInputs) -> dict:
        shape = inputs.room_shape
        area, perimeter, breakdown = self._measure(inputs)

        if inputs.include_closets and inputs.number_of_closets and inputs.closet_area:
            closets = inputs.number_of_closets * inputs.closet_area
            area += closets
            breakdown["Closets"] = closets

        cutting_factor = CUTTING_WASTE_FACTORS[shape]
        total_waste_percentage = inputs.waste_percentage + cutting_factor * 100
        material_needed = self.with_waste(area, total_waste_percentage)

        return {
            "total_area": area,
            "perimeter": perimeter,
            "adjusted_area": area,
            "complexity_factor": SHAPE_COMPLEXITY[shape],
            "material_needed": material_needed,
            "waste_amount": material_needed - area,
            "cutting_waste": area * cutting_factor,
            "installation_difficulty": DIFFICULTY_LEVELS[shape],
            "installation_tips": SHAPE_TIPS[shape] + GENERAL_SHAPE_TIPS,
            "area_breakdown": breakdown,
        }

    def _measure(self, inputs: RoomShapeInputs):
        """Returns (area, perimeter, breakdown) for the chosen shape."""
        shape = inputs.room_shape
        if shape == "rectangle":
            area = self.rectangle_area(inputs.length, inputs.width)
            return (area, self.rectangle_perimeter(inputs.length, inputs.width),
                    {"Main Rectangle": area})

        if shape == "l-shape":
            first = inputs.length1 * inputs.width1
            second = inputs.length2 * inputs.width2
            perimeter = 2 * (inputs.length1 + inputs.width1 + inputs.length2
                             + inputs.width2) * L_SHAPE_PERIMETER_FACTOR
            return first + second, perimeter, {"Section 1": first, "Section 2": second}

        if shape == "u-shape":
            outer = inputs.outer_length * inputs.outer_width
            inner = inputs.inner_length * inputs.inner_width
            perimeter = 2 * (inputs.outer_length + inputs.outer_width
                             + inputs.inner_length + inputs.inner_width)
            return outer - inner, perimeter, {"Outer Area": outer, "Inner Cutout": -inner}

        if shape == "circle":
            radius = inputs.radius or inputs.diameter / 2
            area = self.circle_area(radius)
            return area, self.circle_circumference(radius), {"Circular Area": area}

        if shape == "triangle":
            area = self.triangle_area(inputs.base, inputs.height)
            # Missing sides assume an isosceles triangle on the base
            slant = math.sqrt(inputs.height ** 2 + (inputs.base / 2) ** 2)
            perimeter = (inputs.side1 or inputs.base) + (inputs.side2 or slant) + (inputs.side3 or slant)
            return area, perimeter, {"Triangle Area": area}

        if shape == "octagon":
            area = self.octagon_area(inputs.side_length)
            return area, 8 * inputs.side_length, {"Octagon Area": area}

        return inputs.total_area, inputs.perimeter or 0, {"Custom Area": inputs.total_area}


# ============================================================
# Rectangular room
# ============================================================

ROOM_GENERAL_TIPS = [
    "Measure room twice to ensure accuracy",
    "Check walls for square using 3-4-5 triangle method",
    "Mark center points for balanced installation",
]

HARDWOOD_DIRECTION_TIPS = {
    "length": "Run planks parallel to longest wall",
    "width": "Running across width makes room appear wider",
    "diagonal": "Diagonal installation adds visual interest but increases waste",
}

RECTANGULAR_TIPS = {
    "tile": [
        "Start from room center for balanced borders",
        "Use chalk lines for straight tile rows",
        "Dry lay tiles before final installation",
    ],
    "hardwood": [
        "Leave 1/2\" expansion gap at all walls",
        "Stagger end joints by at least 6 inches",
    ],
    "vinyl": [
        "Acclimate materials 48 hours before installation",
        "Use underlayment if not pre-attached",
        "Click-lock systems need precise fitting",
    ],
    "carpet": [
        "Install tack strips 1/4\" from walls",
        "Stretch carpet evenly to prevent wrinkles",
        "Use knee kicker and power stretcher",
    ],
}
RECTANGULAR_TIPS["laminate"] = RECTANGULAR_TIPS["vinyl"]

CARPET_PERIMETER_CUTS = 4
TILE_BORDER_CUT_RATIO = 0.5
PLANK_CUT_SPACING_FT = 4


class RectangularRoomInputs(InputSchema):
    room_length: float = measure(ge=0.1, message="Room length must be greater than 0")
    room_width: float = measure(ge=0.1, message="Room width must be greater than 0")
    waste_percentage: float = waste(10)
    flooring_type: FlooringType = choice("tile")
    plank_direction: Literal["length", "width", "diagonal"] = choice("length")


class RectangularRoomCalculator(BaseCalculator):

    kind = "rectangular-room"
    schema = RectangularRoomInputs

    def calculate(self, inputs: RectangularRoomInputs) -> dict:
        length, width = inputs.room_length, inputs.room_width
        flooring = inputs.flooring_type
        room_area = self.rectangle_area(length, width)
        perimeter = self.rectangle_perimeter(length, width)
        adjusted_area = self.with_waste(room_area, inputs.waste_percentage)
        material_needed = ceil_units(adjusted_area)

        tiles = planks = border_tiles = full_tiles = None
        if flooring == "tile":
            tiles = ceil_units(adjusted_area / TILE_SQ_FT)
            # Outer ring of 1 ft tiles gets cut; the rest lay whole
            full_tiles = max(0, (ceil_units(length) - 2) * (ceil_units(width) - 2))
            border_tiles = tiles - full_tiles
            cuts = ceil_units(border_tiles * TILE_BORDER_CUT_RATIO)
        elif flooring == "carpet":
            cuts = CARPET_PERIMETER_CUTS
        else:
            planks = self.units_for(adjusted_area, PLANK_SQ_FT)
            if inputs.plank_direction == "diagonal":
                cuts = self.units_for(perimeter, PLANK_CUT_SPACING_FT)
            elif inputs.plank_direction == "width":
                cuts = self.units_for(length, PLANK_CUT_SPACING_FT)
            else:
                cuts = self.units_for(width, PLANK_CUT_SPACING_FT)

        tips = list(ROOM_GENERAL_TIPS)
        if flooring == "hardwood":
            tips.append(HARDWOOD_DIRECTION_TIPS[inputs.plank_direction])
        tips.extend(RECTANGULAR_TIPS[flooring])
        if inputs.plank_direction == "diagonal":
            tips.append("Start at 45-degree angle from longest wall")

        return {
            "room_area": room_area,
            "perimeter": perimeter,
            "adjusted_area": adjusted_area,
            "material_needed": material_needed,
            "planks_needed": planks,
            "tiles_needed": tiles,
            "cuts": cuts,
            "border_tiles": border_tiles,
            "full_tiles": full_tiles,
            "installation_tips": tips,
        }


# ============================================================
# Circular room
# ============================================================

CIRCULAR_GENERAL_TIPS = [
    "Mark center point and use string compass for layout",
    "Work from center outward in concentric circles",
    "Pre-plan cuts to minimize waste at perimeter",
]

CIRCULAR_TIPS = {
    "tile": [
        "Use flexible tile spacers for curved edges",
        "Consider mosaic or smaller tiles for easier fitting",
        "Plan grout lines to follow circular pattern",
    ],
    "hardwood": [
        "Run planks toward center from multiple directions",
        "Steam bend planks for curved borders if possible",
        "Leave expansion gap around entire perimeter",
    ],
    "vinyl": [
        "Score and snap for clean curved cuts",
        "Heat material slightly for easier bending",
        "Install transition strip around entire perimeter",
    ],
    "carpet": [
        "Template with cardboard before cutting carpet",
        "Use sharp carpet knife for clean circular cut",
        "Stretch evenly to prevent wrinkles",
    ],
}
CIRCULAR_TIPS["laminate"] = CIRCULAR_TIPS["vinyl"]

# feet of circumference per cut
CIRCULAR_CUT_SPACING = {
    "hardwood": 4,
    "vinyl": 3,
    "laminate": 3,
}
TILE_EDGE_CUT_RATIO = 0.8


class CircularRoomInputs(InputSchema):
    radius: float = measure(ge=0.1, message="Radius must be greater than 0")
    measurement_type: Literal["radius", "diameter"] = choice("radius")
    waste_percentage: float = waste(15)
    flooring_type: FlooringType = choice("tile")


class CircularRoomCalculator(BaseCalculator):

    kind = "circular-room"
    schema = CircularRoomInputs

    def calculate(self, inputs: CircularRoomInputs) -> dict:
        radius = inputs.radius
        if inputs.measurement_type == "diameter":
            radius = inputs.radius / 2

        area = self.circle_area(radius)
        circumference = self.circle_circumference(radius)
        adjusted_area = self.with_waste(area, inputs.waste_percentage)
        material_needed = ceil_units(adjusted_area)
        flooring = inputs.flooring_type

        center_tiles = 0
        border_tiles = 0
        if flooring == "tile":
            # Whole tiles fit inside a circle half a tile smaller than the room
            full_radius = max(0, math.floor(radius - 0.5))
            center_tiles = math.floor(math.pi * full_radius * full_radius)
            border_tiles = material_needed - center_tiles
            cuts = ceil_units(border_tiles * TILE_EDGE_CUT_RATIO)
        elif flooring == "carpet":
            cuts = 1
        else:
            cuts = self.units_for(circumference, CIRCULAR_CUT_SPACING[flooring])

        return {
            "radius": radius,
            "diameter": radius * 2,
            "area": area,
            "circumference": circumference,
            "adjusted_area": adjusted_area,
            "material_needed": material_needed,
            "border_tiles": border_tiles,
            "center_tiles": center_tiles,
            "cuts": cuts,
            "installation_tips": CIRCULAR_GENERAL_TIPS + CIRCULAR_TIPS[flooring],
        }


# ============================================================
# L-shaped room
# ============================================================

L_ROOM_GENERAL_TIPS = [
    "Start installation from the longest straight wall",
    "Plan layout to minimize cuts at the L-junction",
    "Measure and mark the L-junction carefully",
]

L_ROOM_TIPS = {
    "tile": [
        "Use chalk lines to establish grid patterns for both sections",
        "Consider running tiles in same direction through both sections",
        "Plan grout lines to align across the junction",
    ],
    "hardwood": [
        "Run planks parallel to longest wall when possible",
        "Consider T-molding transition at junction if direction changes",
        "Ensure expansion gaps at all walls",
    ],
    "vinyl": [
        "Maintain same plank direction throughout if possible",
        "Use transition strips where floor direction changes",
        "Stagger joints to avoid weak points at corners",
    ],
    "carpet": [
        "Seam carpet at the narrowest point of junction",
        "Run carpet pile in same direction for consistent appearance",
        "Use hot melt tape for strong seam connection",
    ],
}
L_ROOM_TIPS["laminate"] = L_ROOM_TIPS["vinyl"]

L_ROOM_CLOSING_TIPS = [
    "Work from inside corner outward when possible",
    "Check square at the L-junction frequently",
]

# Floating plank floors get a T-molding at the junction
JUNCTION_TRANSITION_FLOORS = ("hardwood", "laminate")


class LShapedRoomInputs(InputSchema):
    length1: float = measure(ge=0.1, label="Length 1", message="Length 1 must be greater than 0")
    width1: float = measure(ge=0.1, label="Width 1", message="Width 1 must be greater than 0")
    length2: float = measure(ge=0.1, label="Length 2", message="Length 2 must be greater than 0")
    width2: float = measure(ge=0.1, label="Width 2", message="Width 2 must be greater than 0")
    waste_percentage: float = waste(15)
    flooring_type: FlooringType = choice("tile")


class LShapedRoomCalculator(BaseCalculator):

    kind = "l-shaped-room"
    schema = LShapedRoomInputs

    def calculate(self, inputs: LShapedRoomInputs) -> dict:
        section1 = self.rectangle_area(inputs.length1, inputs.width1)
        section2 = self.rectangle_area(inputs.length2, inputs.width2)
        total_area = section1 + section2
        adjusted_area = self.with_waste(total_area, inputs.waste_percentage)
        transitions = 1 if inputs.flooring_type in JUNCTION_TRANSITION_FLOORS else 0

        return {
            "section1_area": section1,
            "section2_area": section2,
            "total_area": total_area,
            "adjusted_area": adjusted_area,
            "material_needed": ceil_units(adjusted_area),
            "seam_length": min(inputs.width1, inputs.width2),
            "transition_strips": transitions,
            "installation_tips": (L_ROOM_GENERAL_TIPS + L_ROOM_TIPS[inputs.flooring_type]
                                  + L_ROOM_CLOSING_TIPS),
        }


# ============================================================
# Multi-room
# ============================================================

MULTI_ROOM_PRICES = {
    "tile": 4.50,
    "hardwood": 8.00,
    "vinyl": 3.25,
    "laminate": 2.75,
    "carpet": 3.00,
}

# Rough L-shape: a bounding rectangle minus a quarter
L_SHAPE_FILL = 0.75

MULTI_ROOM_GENERAL_TIPS = [
    "Order all materials at once to ensure consistent dye lots",
    "Plan installation sequence to minimize disruption",
    "Consider transition strips between rooms",
    "Schedule delivery to accommodate installation timeline",
]

MULTI_ROOM_TIPS = {
    "hardwood": [
        "Run planks in same direction throughout connected spaces",
        "Acclimate all wood in climate-controlled area",
    ],
    "tile": [
        "Maintain consistent grout lines between rooms",
        "Plan tile layout to minimize cuts at doorways",
    ],
    "vinyl": [
        "Use transition strips at doorways and level changes",
        "Install underlayment consistently throughout",
    ],
    "carpet": [
        "Plan seams in low-traffic areas",
        "Maintain pile direction consistency",
    ],
}
MULTI_ROOM_TIPS["laminate"] = MULTI_ROOM_TIPS["vinyl"]

LARGE_PROJECT_ROOMS = 3


class Room(RecordSchema):
    name: str = Field(min_length=1, json_schema_extra={"message": "Room name is required"})
    length: float = measure(ge=0.1, message="Length must be greater than 0")
    width: float = measure(ge=0.1, message="Width must be greater than 0")
    shape: Literal["rectangle", "l-shape", "circle"] = choice("rectangle")


class MultiRoomInputs(InputSchema):
    rooms: list[Room] = Field(min_length=1, json_schema_extra={
        "message": "At least one room is required"})
    flooring_type: FlooringType = choice("vinyl")
    waste_percentage: float = waste(10)
    bulk_discount: float = measure(5, ge=0, le=50, message="Bulk discount must be between 0-50%")


class MultiRoomCalculator(BaseCalculator):

    kind = "multi-room"
    schema = MultiRoomInputs

    def calculate(self, inputs: MultiRoomInputs) -> dict:
        rooms = []
        for room in inputs.rooms:
            area = self._room_area(room)
            rooms.append({
                "name": room.name,
                "area": area,
                "adjusted_area": self.with_waste(area, inputs.waste_percentage),
            })

        total_area = sum(r["area"] for r in rooms)
        total_adjusted = sum(r["adjusted_area"] for r in rooms)
        material_needed = ceil_units(total_adjusted)
        base_cost = material_needed * MULTI_ROOM_PRICES[inputs.flooring_type]
        savings = base_cost * (inputs.bulk_discount / 100)

        tips = list(MULTI_ROOM_GENERAL_TIPS)
        if len(inputs.rooms) > LARGE_PROJECT_ROOMS:
            tips.append("Large projects may qualify for contractor discounts")
        tips.extend(MULTI_ROOM_TIPS[inputs.flooring_type])

        return {
            "rooms": rooms,
            "total_area": total_area,
            "total_adjusted_area": total_adjusted,
            "material_needed": material_needed,
            "estimated_cost": base_cost - savings,
            "savings": savings,
            "installation_tips": tips,
        }

    def _room_area(self, room: Room) -> float:
        if room.shape == "l-shape":
            return room.length * room.width * L_SHAPE_FILL
        if room.shape == "circle":
            # Length is the diameter
            return self.circle_area(room.length / 2)
        return self.rectangle_area(room.length, room.width)
