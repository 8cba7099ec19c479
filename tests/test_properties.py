"""
Properties every calculator must hold, run across the whole registry.

Tests:
1. Every registered kind has a sample form and evaluates it
2. Result keys are snake_case
3. Rectangular rooms report exactly length x width
4. More waste never means less material or cost
5. Evaluation is repeatable
6. Every pair of options across enumerated fields evaluates
7. The waste recommender stays within 5-30%
"""

import itertools
import re

import pytest

from flooringcalc.calculators import estimate, list_calculators, schema_for
from flooringcalc.calculators.inputs import form_name, options

ROOM = {"room_length": 12, "room_width": 10}

# One valid form per calculator, with every shape-dependent dimension filled so
# switching an option never leaves a conditionally required field empty.
SAMPLES = {
    "flooring-cost": {"length": 12, "width": 10, "material_cost": 3.5, "labor_cost": 2,
                      "additional_costs": 100},
    "square-footage": {"shape": "rectangle", "length": 12, "width": 10, "radius": 5,
                       "length1": 10, "width1": 8, "length2": 6, "width2": 4,
                       "base": 10, "height": 6},
    "waste-percentage": {},
    "room-area": {"room_type": "simple-rectangle", "length": 12, "width": 10,
                  "length1": 10, "width1": 8, "length2": 6, "width2": 4,
                  "length3": 5, "width3": 3, "radius": 6, "approximate_area": 150},
    "room-shape": {"room_shape": "rectangle", "length": 12, "width": 10,
                   "length1": 10, "width1": 8, "length2": 6, "width2": 4,
                   "outer_length": 20, "outer_width": 16, "inner_length": 8, "inner_width": 6,
                   "radius": 6, "base": 10, "height": 8, "side1": 10, "side2": 8, "side3": 6,
                   "side_length": 5, "total_area": 150, "perimeter": 50,
                   "include_closets": True, "number_of_closets": 2, "closet_area": 12},
    "rectangular-room": dict(ROOM),
    "circular-room": {"radius": 6},
    "l-shaped-room": {"length1": 12, "width1": 10, "length2": 6, "width2": 4},
    "multi-room": {"rooms": [
        {"name": "Kitchen", "length": 12, "width": 10},
        {"name": "Hall", "length": 8, "width": 4, "shape": "l-shape"},
        {"name": "Nook", "length": 6, "width": 6, "shape": "circle"},
    ]},
    "area-rug": {"room_length": 14, "room_width": 12, "sofa_length": 7,
                 "table_length": 4, "table_width": 2},
    "installation-cost": dict(ROOM, include_removal=True, include_subfloor=True),
    "labor-cost": dict(ROOM),
    "material-quantity": dict(ROOM, include_underlayment=True, include_transitions=True,
                              include_molding=True),
    "floor-repair": {"damage_area": 6},
    "tile-calculator": dict(ROOM),
    "tile-adhesive": dict(ROOM),
    "tile-grout": dict(ROOM),
    "tile-pattern": dict(ROOM),
    "stone": dict(ROOM, custom_length=16, custom_width=16, include_underlayment=True,
                  include_waterproofing=True),
    "hardwood-calculator": dict(ROOM),
    "engineered-wood": dict(ROOM),
    "bamboo": dict(ROOM, include_moisture_barrier=True, include_transitions=True,
                   include_molding=True),
    "laminate": dict(ROOM, include_molding=True, include_transitions=True,
                     include_quarter_round=True),
    "parquet": dict(ROOM),
    "vinyl-calculator": dict(ROOM),
    "sheet-vinyl": {"room_length": 16, "room_width": 14},
    "linoleum": dict(ROOM),
    "cork": dict(ROOM, custom_length=12, custom_width=12, include_moisture_barrier=True,
                 include_transitions=True),
    "rubber": {"area_length": 20, "area_width": 15},
    "carpet": {"room_length": 16, "room_width": 14, "include_stairs": True, "stair_count": 12,
               "include_transitions": True},
    "epoxy": {"room_length": 20, "room_width": 20},
    "garage-floor": {"garage_length": 24, "garage_width": 22, "decorative_flakes": True},
    "concrete": {"room_length": 20, "room_width": 20},
    "baseboard": dict(ROOM, include_quarter_round=True, include_crown_molding=True),
    "molding": dict(ROOM),
    "transition-strip": {"total_length": 24},
    "stair": {"number_of_steps": 12, "riser_covering": True},
    "subfloor": dict(ROOM, moisture_barrier=True, sound_dampening=True, radiant_heat=True),
    "floor-joist": {"span_length": 14},
    "floor-load": dict(ROOM),
    "unlevel-floor": dict(ROOM),
    "moisture-barrier": dict(ROOM),
    "acoustic-underlayment": dict(ROOM),
    "floating-floor-gap": dict(ROOM),
    "radiant-heating": dict(ROOM),
    "hvac-register": dict(ROOM),
    "floor-finishing": dict(ROOM),
}

SNAKE_CASE = re.compile(r"^[a-z][a-z0-9_]*$")


def numeric_results(results):
    """Top-level numbers only; flags, text, lists and "not applicable" are skipped."""
    return {key: value for key, value in results.items()
            if isinstance(value, (int, float)) and not isinstance(value, bool)}


def waste_bounds(kind):
    prop = schema_for(kind).model_json_schema()["properties"].get("wastePercentage")
    if prop is None:
        return None
    return prop["minimum"], prop["maximum"]


def test_every_kind_has_a_sample():
    assert set(SAMPLES) == set(list_calculators())


@pytest.mark.parametrize("kind", sorted(SAMPLES))
def test_sample_evaluates_with_snake_case_keys(kind):
    _, results = estimate(kind, SAMPLES[kind])
    assert results
    for key in results:
        assert SNAKE_CASE.match(key), f"{kind} result key {key!r} is not snake_case"


@pytest.mark.parametrize("kind", sorted(k for k, raw in SAMPLES.items()
                                        if "room_length" in raw and "room_width" in raw))
def test_room_area_is_length_times_width(kind):
    raw = SAMPLES[kind]
    _, results = estimate(kind, raw)
    if "room_area" in results:
        assert results["room_area"] == pytest.approx(raw["room_length"] * raw["room_width"])


@pytest.mark.parametrize("kind", sorted(k for k in SAMPLES if waste_bounds(k)))
def test_more_waste_never_reduces_quantities(kind):
    low, high = waste_bounds(kind)
    _, at_low = estimate(kind, dict(SAMPLES[kind], waste_percentage=low))
    _, at_high = estimate(kind, dict(SAMPLES[kind], waste_percentage=high))

    low_numbers = numeric_results(at_low)
    for key, value in numeric_results(at_high).items():
        if key in low_numbers:
            assert value >= low_numbers[key] - 1e-9, f"{kind}.{key} fell as waste rose"


@pytest.mark.parametrize("kind", sorted(SAMPLES))
def test_evaluation_is_repeatable(kind):
    record, first = estimate(kind, SAMPLES[kind])
    again, second = estimate(kind, SAMPLES[kind])
    assert record == again
    assert first == second


@pytest.mark.parametrize("kind", sorted(SAMPLES))
def test_every_option_pair_evaluates(kind):
    """
    Every pair of options across enumerated fields evaluates, so lookup tables
    keyed by two options (style by height, type by thickness) are complete.
    """
    schema = schema_for(kind)
    fields = options(schema)
    pairs = list(itertools.combinations(fields, 2)) or [(name,) for name in fields]
    for names in pairs:
        for values in itertools.product(*(fields[name] for name in names)):
            raw = dict(SAMPLES[kind])
            for name, value in zip(names, values):
                raw.pop(name, None)
                raw[form_name(schema, name)] = value
            _, results = estimate(kind, raw)
            assert results, f"{kind} with {dict(zip(names, values))} returned nothing"


def test_waste_recommendation_stays_in_range():
    schema = schema_for("waste-percentage")
    fields = options(schema)
    for values in itertools.product(*fields.values()):
        _, results = estimate("waste-percentage", dict(zip(fields, values)))
        assert 5 <= results["recommended_waste"] <= 30
        assert results["min_waste"] <= results["recommended_waste"] <= results["max_waste"]
