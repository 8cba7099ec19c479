"""
Form validation and the calculator registry.

Tests:
1-6.   Required, range and option messages
7-13.  Type errors: whole numbers, numbers, toggles, booleans, non-finite values
14-17. Conditionally required fields
18-20. Nested room records
21-24. Form names, blank inputs and frozen records
25-29. Registry and evaluator facade
"""

import pytest
from pydantic import ValidationError

from flooringcalc.calculators import (
    FieldErrors,
    UnknownCalculatorError,
    estimate,
    evaluate,
    get_calculator,
    has_calculator,
    list_calculators,
    schema_for,
    validate,
)
from flooringcalc.calculators.inputs import options


def errors_for(kind, raw):
    with pytest.raises(FieldErrors) as exc_info:
        validate(schema_for(kind), raw)
    return exc_info.value.errors


# ============================================================
# Messages
# ============================================================

def test_missing_required_fields_all_reported():
    """Every missing required field is listed, keyed by its form name."""
    errors = errors_for("flooring-cost", {})
    assert errors["length"] == "Length is required"
    assert errors["width"] == "Width is required"
    assert errors["materialCost"] == "Material cost is required"
    assert errors["laborCost"] == "Labor cost is required"


def test_below_minimum_uses_field_message():
    errors = errors_for("flooring-cost", {
        "length": 0, "width": 10, "materialCost": 3, "laborCost": 2,
    })
    assert errors == {"length": "Length must be greater than 0"}


def test_waste_out_of_range_message():
    errors = errors_for("flooring-cost", {
        "length": 10, "width": 10, "materialCost": 3, "laborCost": 2,
        "wastePercentage": 60,
    })
    assert errors == {"wastePercentage": "Waste percentage must be between 0-50%"}


def test_waste_range_follows_calculator_bounds():
    """Calculators with a narrower waste range say so in the message."""
    errors = errors_for("acoustic-underlayment", {
        "roomLength": 10, "roomWidth": 10, "wastePercentage": 2,
    })
    assert errors == {"wastePercentage": "Waste percentage must be between 5-15%"}


def test_generic_bound_message_without_custom_text():
    errors = errors_for("floor-finishing", {"roomLength": 10, "roomWidth": 10, "coats": 9})
    assert errors == {"coats": "Coats must be at most 5"}


def test_unknown_option_lists_allowed_values():
    errors = errors_for("square-footage", {"shape": "hexagon"})
    assert errors == {
        "shape": "Shape must be one of: rectangle, square, circle, l-shape, triangle"
    }


# ============================================================
# Types
# ============================================================

def test_fractional_count_rejected():
    errors = errors_for("stair", {"numberOfSteps": 2.5})
    assert errors == {"numberOfSteps": "Number of steps must be a whole number"}


def test_non_numeric_measure_rejected():
    errors = errors_for("rectangular-room", {"roomLength": "ten", "roomWidth": 10})
    assert errors == {"roomLength": "Room length must be a number"}


def test_toggle_must_be_boolean():
    errors = errors_for("baseboard", {"roomLength": 12, "roomWidth": 10, "includeCasing": "yes"})
    assert errors == {"includeCasing": "Include casing must be true or false"}


def test_boolean_rejected_for_numeric_fields():
    """true/false is not read as 1/0 for measures or counts."""
    with pytest.raises(FieldErrors) as exc_info:
        estimate("flooring-cost", {"length": True, "width": 10, "materialCost": 3, "laborCost": 2})
    assert exc_info.value.errors == {"length": "Length must be a number"}

    errors = errors_for("stair", {"numberOfSteps": False})
    assert errors == {"numberOfSteps": "Number of steps must be a number"}


def test_boolean_rejected_inside_nested_room():
    errors = errors_for("multi-room", {"rooms": [{"name": "Hall", "length": True, "width": 4}]})
    assert errors == {"rooms.0.length": "Length must be a number"}


def test_numeric_count_string_accepted():
    record = validate(schema_for("stair"), {"numberOfSteps": "12"})
    assert record.number_of_steps == 12


def test_infinite_value_rejected():
    errors = errors_for("rectangular-room", {"roomLength": float("inf"), "roomWidth": 10})
    assert "roomLength" in errors


# ============================================================
# Conditionally required fields
# ============================================================

def test_shape_dimension_required_for_selected_shape():
    errors = errors_for("square-footage", {"shape": "circle"})
    assert errors == {"radius": "Radius is required when shape is circle"}


def test_dimensions_of_other_shapes_not_required():
    record = validate(schema_for("square-footage"), {"shape": "circle", "radius": 5})
    assert record.radius == 5
    assert record.length is None


def test_either_of_two_fields_satisfies_requirement():
    """A circular room needs a radius or a diameter, not both."""
    errors = errors_for("room-shape", {"roomShape": "circle"})
    assert errors == {
        "radius": "Radius or diameter is required when room shape is circle"
    }
    record = validate(schema_for("room-shape"), {"roomShape": "circle", "diameter": 10})
    assert record.diameter == 10


def test_custom_tile_size_requires_custom_dimensions():
    errors = errors_for("stone", {"roomLength": 10, "roomWidth": 10, "tileSize": "custom"})
    assert set(errors) == {"customLength", "customWidth"}
    assert errors["customLength"] == "Custom length is required when tile size is custom"


# ============================================================
# Nested records
# ============================================================

def test_nested_room_error_keyed_by_position():
    errors = errors_for("multi-room", {"rooms": [
        {"name": "Kitchen", "length": 12, "width": 10},
        {"name": "Hall", "length": 0, "width": 4},
    ]})
    assert errors == {"rooms.1.length": "Length must be greater than 0"}


def test_nested_room_name_required():
    errors = errors_for("multi-room", {"rooms": [{"name": "", "length": 12, "width": 10}]})
    assert errors == {"rooms.0.name": "Room name is required"}


def test_empty_room_list_rejected():
    errors = errors_for("multi-room", {"rooms": []})
    assert errors == {"rooms": "At least one room is required"}


# ============================================================
# Form names, blanks, records
# ============================================================

def test_snake_case_names_accepted():
    record = validate(schema_for("rectangular-room"), {"room_length": 12, "room_width": 10})
    assert record.room_length == 12
    assert record.waste_percentage == 10


def test_blank_inputs_treated_as_missing():
    errors = errors_for("flooring-cost", {
        "length": "", "width": 10, "materialCost": 3, "laborCost": 2,
        "additionalCosts": "",
    })
    assert errors == {"length": "Length is required"}


def test_numeric_strings_and_unknown_keys():
    record = validate(schema_for("rectangular-room"), {
        "roomLength": "12.5", "roomWidth": "10", "submit": "Calculate",
    })
    assert record.room_length == 12.5
    assert record.room_width == 10.0


def test_validated_record_is_frozen():
    record = validate(schema_for("rectangular-room"), {"roomLength": 12, "roomWidth": 10})
    with pytest.raises(ValidationError):
        record.room_length = 20


# ============================================================
# Registry and evaluator
# ============================================================

def test_registry_lists_every_calculator_once():
    kinds = list_calculators()
    assert len(kinds) == 47
    assert len(set(kinds)) == 47
    assert has_calculator("tile-calculator")
    assert not has_calculator("roof-pitch")


def test_unknown_kind_raises():
    with pytest.raises(UnknownCalculatorError) as exc_info:
        get_calculator("roof-pitch")
    assert exc_info.value.kind == "roof-pitch"
    with pytest.raises(UnknownCalculatorError):
        estimate("roof-pitch", {})


def test_every_schema_declares_its_options():
    """Each kind owns a schema; enumerated fields expose a non-empty option set."""
    for kind in list_calculators():
        calculator = get_calculator(kind)
        assert calculator.kind == kind
        for name, values in options(calculator.schema).items():
            assert values, f"{kind}.{name} has no options"


def test_evaluate_rejects_another_calculators_record():
    record = validate(schema_for("rectangular-room"), {"roomLength": 12, "roomWidth": 10})
    with pytest.raises(TypeError):
        evaluate("area-rug", record)


def test_estimate_validates_before_evaluating():
    record, results = estimate("rectangular-room", {"roomLength": 12, "roomWidth": 10})
    assert record.flooring_type == "tile"
    assert results["room_area"] == 120
    with pytest.raises(FieldErrors):
        estimate("rectangular-room", {"roomLength": -1, "roomWidth": 10})
