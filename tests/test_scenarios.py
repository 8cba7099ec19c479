"""
Worked cases for the calculators, checked against hand-computed figures.

Tests:
1-4.   Base calculator helpers (waste, whole units, geometry)
5-9.   Area and shape calculators
10-21. Cost, labor, material takeoff and waste recommendation
22-28. Tile, adhesive, grout and stone
29-31. Carpet
32-35. Trim and stairs
36-39. Structure
"""

import pytest

from flooringcalc.calculators import estimate, get_calculator
from flooringcalc.calculators.base import format_number


def run(kind, **raw):
    return estimate(kind, raw)[1]


# ============================================================
# Base helpers
# ============================================================

def test_apply_waste_rounds_up():
    """apply_waste always rounds up to the next whole unit."""
    calc = get_calculator("tile-calculator")
    assert calc.apply_waste(10, 5) == 11    # 10.5 -> 11
    assert calc.apply_waste(20, 10) == 22   # exactly 22, float noise ignored
    assert calc.apply_waste(100, 10) == 110
    assert calc.apply_waste(3, 15) == 4     # 3.45 -> 4


def test_units_for_rounds_up():
    """units_for rounds up: you can't buy half a box."""
    calc = get_calculator("tile-calculator")
    assert calc.units_for(100, 50) == 2
    assert calc.units_for(101, 50) == 3
    assert calc.units_for(0.5, 50) == 1


def test_geometry_helpers():
    calc = get_calculator("square-footage")
    assert calc.rectangle_perimeter(10, 12) == 44
    assert calc.triangle_area(10, 6) == 30
    assert calc.l_shape_area(10, 8, 6, 4) == 104
    assert calc.octagon_area(1) == pytest.approx(4.828427, rel=1e-6)


def test_format_number():
    assert format_number(10) == "10"
    assert format_number(10.5) == "10.5"


# ============================================================
# Area
# ============================================================

def test_square_footage_rectangle():
    results = run("square-footage", shape="rectangle", length=10, width=12)
    assert results["area"] == 120
    assert results["perimeter"] == 44
    assert results["calculation"] == "10 ft × 12 ft = 120.00 sq ft"
    assert results["area_in_yards"] == pytest.approx(13.3333, rel=1e-4)


def test_square_footage_circle():
    results = run("square-footage", shape="circle", radius=5)
    assert results["area"] == pytest.approx(78.5398, rel=1e-5)
    assert results["perimeter"] == pytest.approx(31.4159, rel=1e-5)
    assert results["area_in_yards"] == pytest.approx(8.7266, rel=1e-4)
    assert results["area_in_inches"] == pytest.approx(11309.73, rel=1e-6)
    assert results["calculation"] == "π × 5² = 78.54 sq ft"


def test_square_footage_l_shape_has_no_perimeter():
    results = run("square-footage", shape="l-shape", length1=10, width1=8, length2=6, width2=4)
    assert results["area"] == 104
    assert results["perimeter"] == 0


def test_circular_room_from_diameter():
    by_radius = run("circular-room", radius=5, measurementType="radius")
    by_diameter = run("circular-room", radius=10, measurementType="diameter")
    assert by_diameter["radius"] == 5
    assert by_diameter["area"] == pytest.approx(by_radius["area"])


def test_rectangular_room_tile_counts():
    results = run("rectangular-room", roomLength=12, roomWidth=10, wastePercentage=10,
                  flooringType="tile")
    assert results["room_area"] == 120
    assert results["adjusted_area"] == pytest.approx(132)
    assert results["tiles_needed"] == 132
    assert results["full_tiles"] == 80
    assert results["border_tiles"] == results["tiles_needed"] - 80
    assert results["planks_needed"] is None


# ============================================================
# Cost and waste
# ============================================================

def test_flooring_cost_worked_example():
    """10 x 12 ft at $3 material + $2 labor with 10% waste."""
    results = run("flooring-cost", length=10, width=12, materialCost=3, laborCost=2,
                  wastePercentage=10)
    assert results["base_area"] == 120
    assert results["adjusted_area"] == pytest.approx(132)
    assert results["material_total"] == pytest.approx(396)
    assert results["labor_total"] == pytest.approx(264)
    assert results["additional_total"] == 0
    assert results["grand_total"] == pytest.approx(660)
    assert results["cost_per_sq_ft"] == pytest.approx(5.5)


def test_flooring_cost_additional_costs_added_flat():
    results = run("flooring-cost", length=10, width=12, materialCost=3, laborCost=2,
                  additionalCosts=150)
    assert results["grand_total"] == pytest.approx(810)


def test_waste_recommendation_clamped():
    """Complex room, hardwood, pattern, irregular: 38 points, clamped to 30."""
    results = run("waste-percentage", roomComplexity="complex", materialType="hardwood",
                  installationMethod="pattern", roomShape="irregular")
    assert results["base_waste"] == 38
    assert results["recommended_waste"] == 30
    assert results["min_waste"] == 27
    assert results["max_waste"] == 35
    assert len(results["factors"]) == 4
    assert "30%" in results["explanation"]


def test_waste_recommendation_simple_job():
    results = run("waste-percentage")
    assert results["recommended_waste"] == 7
    assert results["min_waste"] == 5
    assert results["max_waste"] == 12


def test_installation_cost_optional_lines():
    """12 x 10 tile room: $8.50/sq ft install, removal and subfloor prep only when asked."""
    bare = run("installation-cost", roomLength=12, roomWidth=10)
    assert bare["installation_cost"] == pytest.approx(1020)
    assert bare["removal_cost"] == 0
    assert bare["subfloor_cost"] == 0
    assert bare["total_cost"] == pytest.approx(1020)
    assert bare["cost_per_sq_ft"] == pytest.approx(8.5)

    full = run("installation-cost", roomLength=12, roomWidth=10,
               includeRemoval=True, includeSubfloor=True)
    assert full["removal_cost"] == pytest.approx(300)
    assert full["subfloor_cost"] == pytest.approx(480)
    assert full["total_cost"] == pytest.approx(1800)

    no_subfloor = run("installation-cost", roomLength=12, roomWidth=10,
                      includeRemoval=True, includeSubfloor=False)
    assert full["total_cost"] - no_subfloor["total_cost"] == pytest.approx(full["subfloor_cost"])


def test_installation_cost_multipliers():
    results = run("installation-cost", roomLength=12, roomWidth=10, flooringType="hardwood",
                  roomComplexity="complex", region="high-cost", includeRemoval=True)
    assert results["installation_cost"] == pytest.approx(120 * 12 * 1.6 * 1.4)
    assert results["removal_cost"] == pytest.approx(120 * 2.5 * 1.4)


def test_labor_cost_hours_and_days():
    """Journeyman two-person crew: 13.6 effective hours a day."""
    results = run("labor-cost", roomLength=12, roomWidth=10)
    assert results["hours_required"] == pytest.approx(54)
    assert results["subtotal"] == pytest.approx(2430)
    assert results["total_labor_cost"] == pytest.approx(2430 * 0.85)
    assert results["cost_per_sq_ft"] == pytest.approx(2065.5 / 120)
    assert results["days_required"] == 4          # 54 / 13.6 = 3.97
    assert results["recommended_duration"] == "1 week"


@pytest.mark.parametrize("length, width, days, duration", [
    (5, 4, 1, "1 day"),          # 9 h
    (10, 6, 2, "2 days"),        # 27 h
    (40, 30, 40, "8 weeks"),     # 540 h
])
def test_labor_cost_duration_text(length, width, days, duration):
    results = run("labor-cost", roomLength=length, roomWidth=width)
    assert results["days_required"] == days
    assert results["recommended_duration"] == duration


def test_labor_cost_rush_metro_master():
    results = run("labor-cost", roomLength=12, roomWidth=10, projectTimeline="rush",
                  region="metro", experienceLevel="master", crewSize="1-person")
    assert results["subtotal"] == pytest.approx(54 * 65)
    assert results["total_labor_cost"] == pytest.approx(54 * 65 * 1.5 * 1.6)
    assert results["experience_multiplier"] == 1.3
    assert results["days_required"] == 7          # 54 / 8


def test_material_quantity_toggles_off():
    """12 x 10 tile at 10% waste: 132 sq ft of tile and 3 bags of adhesive, nothing else."""
    results = run("material-quantity", roomLength=12, roomWidth=10)
    assert results["adjusted_area"] == pytest.approx(132)
    assert results["adhesive_needed"] == 3
    assert results["underlayment_needed"] == 0
    assert results["transition_strips"] == 0
    assert results["molding_needed"] == 0
    assert results["nails_staples"] == 0
    assert results["total_material_cost"] == pytest.approx(132 * 3.5 + 3 * 35)


def test_material_quantity_toggles_on():
    off = run("material-quantity", roomLength=12, roomWidth=10)
    on = run("material-quantity", roomLength=12, roomWidth=10, includeUnderlayment=True,
             includeTransitions=True, includeMolding=True)
    assert on["underlayment_needed"] == 132
    assert on["transition_strips"] == 6           # 44 ft perimeter / 8
    assert on["molding_needed"] == 44
    assert on["total_material_cost"] - off["total_material_cost"] == pytest.approx(
        132 * 0.75 + 6 * 25 + 44 * 2.5)
    assert on["total_material_cost"] == pytest.approx(926)


def test_material_quantity_hardwood_uses_nails():
    results = run("material-quantity", roomLength=12, roomWidth=10, flooringType="hardwood")
    assert results["adhesive_needed"] == 0
    assert results["nails_staples"] == 2          # 132 / 75
    assert results["total_material_cost"] == pytest.approx(132 * 8 + 2 * 45)


# ============================================================
# Tile
# ============================================================

def test_tile_ten_by_ten_room():
    results = run("tile-calculator", roomLength=10, roomWidth=10, tileLength=12, tileWidth=12,
                  wastePercentage=10)
    assert results["room_area"] == 100
    assert results["tile_area"] == 1.0
    assert results["tiles_needed"] == 100
    assert results["tiles_with_waste"] == 110
    assert results["grout_needed"] == 5
    assert results["adhesive_needed"] == 2


def test_tile_partial_tiles_round_up():
    results = run("tile-calculator", roomLength=10, roomWidth=10, tileLength=18, tileWidth=18,
                  wastePercentage=0)
    assert results["tile_area"] == pytest.approx(2.25)
    assert results["tiles_needed"] == 45    # 44.4 -> 45
    assert results["tiles_with_waste"] == 45


def test_tile_adhesive_applies_every_factor():
    """Plywood (1.2) x back-butter (1.5) with a 16 mm tile (twice the 8 mm reference)."""
    results = run("tile-adhesive", roomLength=10, roomWidth=10, substrateType="plywood",
                  applicationMethod="back-butter", tileThickness=16)
    assert results["coverage_rate"] == pytest.approx(60 * 1.0 * 1.2 * 1.5 / 2)
    assert results["adhesive_needed"] == pytest.approx(100 / 54)
    assert results["adhesive_with_waste"] == pytest.approx(100 / 54 * 1.1)
    assert results["total_cost"] == 3 * 35
    assert results["coverage_factors"] == {
        "Tile Type": 1.0, "Substrate": 1.2, "Application": 1.5, "Thickness": 0.5,
    }
    assert results["application_tips"][:2] == [
        "Apply adhesive to both tile back and substrate for maximum bond",
        "Prime plywood substrate before adhesive application",
    ]


def test_tile_adhesive_thin_tile_not_boosted():
    """Tiles thinner than 8 mm keep the base coverage."""
    results = run("tile-adhesive", roomLength=10, roomWidth=10, tileThickness=4,
                  tileType="porcelain", adhesiveType="epoxy")
    assert results["coverage_rate"] == pytest.approx(45 * 0.9)
    assert results["coverage_factors"]["Thickness"] == 1.0
    assert results["total_cost"] == 3 * 75      # 100 / 40.5 * 1.1 = 2.72 gal


def test_tile_grout_volume_and_bags():
    """100 tiles of 12 x 12 in, 1/8 in joints 1/4 in deep: 1.5 cu in of grout each."""
    results = run("tile-grout", roomLength=10, roomWidth=10)
    assert results["tiles_needed"] == 100
    assert results["grout_volume"] == pytest.approx(150 / 1728)
    assert results["grout_pounds"] == pytest.approx(150 / 1728 * 105)
    assert results["grout_bags"] == 1
    assert results["total_cost"] == 18
    assert len(results["application_tips"]) == 4


def test_tile_grout_epoxy_narrow_joint():
    results = run("tile-grout", roomLength=10, roomWidth=10, groutType="epoxy",
                  groutWidth=0.0625)
    assert results["grout_pounds"] == pytest.approx(75 / 1728 * 110)
    assert results["total_cost"] == 45
    assert results["application_tips"][-2:] == [
        "Epoxy grout requires immediate cleanup - have multiple sponges ready",
        "Use unsanded grout for joints less than 1/8 inch",
    ]


def test_stone_custom_size_used():
    results = run("stone", roomLength=10, roomWidth=10, tileSize="custom",
                  customLength=12, customWidth=12)
    standard = run("stone", roomLength=10, roomWidth=10, tileSize="12x12")
    assert results["room_area"] == standard["room_area"] == 100


# ============================================================
# Carpet
# ============================================================

def test_carpet_wide_room_needs_a_seam():
    """16 x 14 room on a 12 ft roll: two 16 ft drops and one seam."""
    results = run("carpet", roomLength=16, roomWidth=14)
    assert results["seams"] == 1
    assert results["carpet_needed"] == 384
    assert results["carpet_with_waste"] == pytest.approx(422.4)
    assert results["padding_needed"] == pytest.approx(224 * 1.05)
    assert results["tack_strips_needed"] == pytest.approx(60 * 0.85)
    assert results["labor_hours"] == pytest.approx(224 * 0.5 * 1.5)
    assert results["total_material_cost"] == pytest.approx(
        422.4 * 4.5 + 235.2 * 1.2 + 51 * 1.25)
    assert results["installation_tips"][0] == "1 seam(s) required - plan seam placement carefully"


def test_carpet_fits_roll_without_seams():
    narrow = run("carpet", roomLength=16, roomWidth=10)
    assert narrow["seams"] == 0
    assert narrow["carpet_needed"] == 16 * 12

    # Turning the roll covers a short, wide room in one piece
    turned = run("carpet", roomLength=10, roomWidth=14)
    assert turned["seams"] == 0
    assert turned["carpet_needed"] == 14 * 12


def test_carpet_optional_lines_off():
    with_extras = run("carpet", roomLength=16, roomWidth=10, includeStairs=True, stairCount=12)
    bare = run("carpet", roomLength=16, roomWidth=10, includePadding=False,
               includeTackStrips=False)
    assert bare["padding_needed"] == 0
    assert bare["tack_strips_needed"] == 0
    assert bare["stair_carpet"] == 0
    assert bare["total_material_cost"] == pytest.approx(192 * 1.1 * 4.5)
    assert with_extras["stair_carpet"] == pytest.approx(12 * 17 / 12 * 3)


# ============================================================
# Trim and stairs
# ============================================================

def test_baseboard_subtracts_openings():
    """12 x 10 room, one 32 in door and two 36 in windows, casings on."""
    results = run("baseboard", roomLength=12, roomWidth=10)
    assert results["room_perimeter"] == 44
    assert results["adjusted_perimeter"] == pytest.approx(44 - 32 / 12 - 6)
    assert results["baseboard_needed"] == pytest.approx((44 - 32 / 12 - 6) * 1.1)
    assert results["quarter_round_needed"] == 0
    assert results["crown_molding_needed"] == 0
    assert results["door_casing_needed"] == pytest.approx((16 + 32 / 12) * 1.1)
    assert results["window_casing_needed"] == pytest.approx(28 * 1.1)
    assert results["total_linear_feet"] == pytest.approx(90.2)
    assert results["nails_needed"] == 1
    assert results["caulk_needed"] == 2
    assert set(results["cutting_list"]) == {"Baseboard", "Door Casing", "Window Casing"}


def test_baseboard_openings_never_negative():
    results = run("baseboard", roomLength=2, roomWidth=2, numberOfDoors=5, doorWidth=36)
    assert results["adjusted_perimeter"] == 0
    assert results["baseboard_needed"] == 0


def test_molding_sticks_and_supplies():
    results = run("molding", roomLength=12, roomWidth=10)
    assert results["total_perimeter"] == 44
    assert results["adjusted_length"] == pytest.approx(33 * 1.15)
    assert results["molding_needed"] == 5
    assert results["nails_needed"] == 4
    assert results["caulk_needed"] == 1
    assert results["total_cost"] == pytest.approx(5 * 2.85 + 4 * 8.5 + 4.25)
    assert results["cutting_list"][0] == "4 full 8-foot pieces"


def test_stair_treads_nosing_and_cost():
    results = run("stair", numberOfSteps=10)
    assert results["total_treads"] == 10
    assert results["total_risers"] == 0
    assert results["tread_area"] == pytest.approx(27.5)
    assert results["adjusted_area"] == pytest.approx(27.5 * 1.15)
    assert results["nosing_needed"] == 30
    assert results["total_cost"] == pytest.approx(27.5 * 1.15 * 6.75 + 30 * 8 + 2 * 25)


# ============================================================
# Structure
# ============================================================

def test_floor_joist_size_by_span():
    results = run("floor-joist", spanLength=12)
    assert results["recommended_size"] == "2x10"
    assert results["max_span"] == 15.2
    assert results["load_capacity"] == pytest.approx(40)
    assert results["material_cost"] == pytest.approx(2 * 12.75)

    long_span = run("floor-joist", spanLength=20, joistSpacing="24")
    assert long_span["recommended_size"] == "Engineered I-Joist"
    assert long_span["max_span"] == 20
    assert long_span["load_capacity"] == pytest.approx(40 * 16 / 24)


def test_floor_load_thresholds():
    residential = run("floor-load", roomLength=12, roomWidth=10)
    assert residential["dead_load"] == 14
    assert residential["total_load"] == pytest.approx(108)
    assert residential["structural_requirements"] == "Enhanced structural support recommended"

    light = run("floor-load", roomLength=12, roomWidth=10, safetyFactor=1.5)
    assert light["total_load"] == pytest.approx(81)
    assert light["structural_requirements"] == "Standard construction adequate"

    warehouse = run("floor-load", roomLength=12, roomWidth=10, occupancyType="warehouse")
    assert warehouse["structural_requirements"] == "Reinforced framing required"


def test_subfloor_sheets_and_extras():
    results = run("subfloor", roomLength=12, roomWidth=10, moistureBarrier=True,
                  subfloorType="cement-board")
    assert results["room_area"] == 120
    assert results["sheets_needed"] == 5        # 132 sq ft / 32
    assert results["square_feet_needed"] == 160
    assert results["moisture_barrier_needed"] == 132
    assert results["sound_dampening_needed"] == 0
    assert "Install moisture barrier" in results["installation_steps"]
    assert "Carbide blade" in results["tools_required"]


def test_floating_floor_gap_guidelines():
    results = run("floating-floor-gap", roomLength=30, roomWidth=20)
    assert results["t_molding_needed"] == 13      # 100 ft perimeter / 8
    assert results["max_run_length"] > 0
    assert results["gap_guidelines"][0].startswith("Maintain ")
    assert results["gap_guidelines"][3].startswith("Maximum continuous run: ")
