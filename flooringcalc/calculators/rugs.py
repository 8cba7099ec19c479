"""
Area rug sizing.

Picks a standard rug size for a furniture layout. Living and dining rooms size
off the furniture when it is given, falling back to room area; bedrooms size
off the bed.
"""

from typing import Literal, Optional

from .base import BaseCalculator
from .inputs import InputSchema, choice, measure

FurnitureLayout = Literal["living-room", "dining-room", "bedroom", "office", "entryway"]
BedSize = Literal["twin", "full", "queen", "king", "california-king"]


def rug(size: str, suitability: str, placement: str) -> dict:
    width, length = size.split("x")
    return {
        "size": size,
        "dimensions": "%s' x %s'" % (width, length),
        "suitability": suitability,
        "placement": placement,
    }


# layout -> four candidate sizes, smallest first
RUG_SIZES = {
    "living-room": [
        rug("5x8", "Small seating area", "Front legs on rug"),
        rug("6x9", "Medium seating area", "All front legs on rug"),
        rug("8x10", "Large seating area", "All furniture legs on rug"),
        rug("9x12", "Spacious living room", "Room-defining rug"),
    ],
    "dining-room": [
        rug("6x9", "4-seat table", "Chairs remain on rug when pulled out"),
        rug("8x10", "6-seat table", "All legs on rug with pull-out space"),
        rug("9x12", "8-seat table", "Generous pull-out space"),
        rug("10x14", "10+ seat table", "Large dining room"),
    ],
    "bedroom": [
        rug("5x8", "Twin/Full bed", "At foot of bed"),
        rug("6x9", "Queen bed", "Partial under bed"),
        rug("8x10", "King bed", "Under bed with borders"),
        rug("9x12", "Large bedroom", "Room-defining rug"),
    ],
    "office": [
        rug("4x6", "Small desk area", "Under desk and chair"),
        rug("5x8", "Medium office", "Desk and seating area"),
        rug("6x9", "Large office", "Multiple work zones"),
        rug("8x10", "Executive office", "Room-defining"),
    ],
    "entryway": [
        rug("3x5", "Small entryway", "Inside door area"),
        rug("4x6", "Medium entryway", "Welcome area"),
        rug("5x8", "Large foyer", "Central focus"),
        rug("6x9", "Grand entryway", "Statement piece"),
    ],
}

# Room-area breakpoints (sq ft) choosing among the four sizes
AREA_BREAKPOINTS = {
    "living-room": (80, 120, 180),
    "dining-room": (80, 120, 180),
    "office": (50, 80, 120),
    "entryway": (30, 50, 80),
}

# (length, width) in feet
BED_DIMENSIONS = {
    "twin": (6.25, 3.25),
    "full": (6.25, 4.5),
    "queen": (6.67, 5),
    "king": (6.67, 6.33),
    "california-king": (7, 6),
}

# Clearance added around furniture, feet
SOFA_CLEARANCE = 2
CHAIR_CLEARANCE = 4

PLACEMENT_TIPS = {
    "living-room": [
        "Place rug so front legs of all seating are on the rug",
        "Allow 18-24 inches of space between rug edge and walls",
        "Center the rug with the main seating piece (sofa)",
        "Ensure coffee table sits entirely on the rug",
    ],
    "dining-room": [
        "Rug should extend 24 inches beyond table on all sides",
        "All chair legs should remain on rug when pulled out",
        "Center the rug under the dining table",
        "Consider round rugs for round tables",
    ],
    "bedroom": [
        "Place rug so it extends 18-24 inches beyond foot of bed",
        "Option 1: Rug partially under bed with 2-3 feet extending",
        "Option 2: Rug at foot of bed only",
        "Ensure rug is centered with the bed",
    ],
    "office": [
        "Rug should accommodate desk chair rolling",
        "Extend beyond chair's furthest position",
        "Consider chair mat for hard surface rugs",
        "Center rug with main work surface",
    ],
    "entryway": [
        "Position rug to catch dirt and moisture",
        "Allow for door swing clearance",
        "Center in the entryway space",
        "Consider runners for long, narrow entries",
    ],
}

SIZING_GUIDELINES = {
    "living-room": [
        "Rug should be large enough for furniture grouping",
        "All front legs of seating should touch or sit on rug",
        "Leave consistent border around furniture group",
        "Consider traffic flow around the rug",
    ],
    "dining-room": [
        "Add 4-5 feet to table length and width",
        "Ensure chairs stay on rug when pulled out",
        "Maintain proportion with room size",
        "Allow walking space around rug perimeter",
    ],
    "bedroom": [
        "Rug should complement bed size",
        "Consider bedside walking areas",
        "Leave space for nightstands if placing under bed",
        "Maintain visual balance in the room",
    ],
    "office": [
        "Account for chair movement and rolling",
        "Include guest seating area if applicable",
        "Maintain professional appearance",
        "Consider rug material for chair compatibility",
    ],
    "entryway": [
        "Choose durable, easy-to-clean materials",
        "Size for foot traffic patterns",
        "Allow space for furniture like console tables",
        "Consider both function and aesthetics",
    ],
}


class AreaRugInputs(InputSchema):
    room_length: float = measure(ge=1, message="Room length must be greater than 0")
    room_width: float = measure(ge=1, message="Room width must be greater than 0")
    furniture_layout: FurnitureLayout = choice("living-room")
    sofa_length: Optional[float] = measure(None, ge=0)
    table_length: Optional[float] = measure(None, ge=0)
    table_width: Optional[float] = measure(None, ge=0)
    bed_size: BedSize = choice("queen")


class AreaRugCalculator(BaseCalculator):

    kind = "area-rug"
    schema = AreaRugInputs

    def calculate(self, inputs: AreaRugInputs) -> dict:
        layout = inputs.furniture_layout
        room_area = self.rectangle_area(inputs.room_length, inputs.room_width)
        sizes = RUG_SIZES[layout]
        index = self._pick(inputs, room_area)

        return {
            "room_area": room_area,
            "recommended_sizes": [dict(size) for size in sizes],
            "primary_recommendation": dict(sizes[index]),
            "placement_tips": list(PLACEMENT_TIPS[layout]),
            "sizing_guidelines": list(SIZING_GUIDELINES[layout]),
        }

    def _pick(self, inputs: AreaRugInputs, room_area: float) -> int:
        """Index into the layout's size list."""
        layout = inputs.furniture_layout

        if layout == "living-room" and inputs.sofa_length:
            rug_width = inputs.sofa_length + SOFA_CLEARANCE
            return _first_fit([rug_width <= 6, rug_width <= 8, rug_width <= 10])

        if layout == "dining-room" and inputs.table_length and inputs.table_width:
            length = inputs.table_length + CHAIR_CLEARANCE
            width = inputs.table_width + CHAIR_CLEARANCE
            return _first_fit([
                length <= 8 and width <= 6,
                length <= 10 and width <= 8,
                length <= 12 and width <= 9,
            ])

        if layout == "bedroom":
            length, width = BED_DIMENSIONS[inputs.bed_size]
            return _first_fit([
                length <= 6.5 and width <= 4,
                length <= 7 and width <= 5.5,
                length <= 7 and width <= 6.5,
            ])

        return _first_fit([room_area < limit for limit in AREA_BREAKPOINTS[layout]])


def _first_fit(conditions) -> int:
    for index, fits in enumerate(conditions):
        if fits:
            return index
    return len(conditions)
