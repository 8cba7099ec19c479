"""
HTTP API: catalogue, validation, evaluation and calculation storage.

Tests:
1.     Health check
2-5.   Catalogue endpoints
6.     Input schema
7-10.  Validate and evaluate
11-13. Stored calculations
"""

from flooringcalc import models
from flooringcalc.config import settings


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "app": "flooringcalc"}


# ============================================================
# Catalogue
# ============================================================

def test_list_calculators(client):
    response = client.get("/api/calculators")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 47
    assert data[0]["id"] == "flooring-cost"


def test_list_calculators_by_category(client):
    response = client.get("/api/calculators", params={"category": "advanced"})
    assert response.status_code == 200
    assert response.json()
    assert {entry["category"] for entry in response.json()} == {"advanced"}

    assert client.get("/api/calculators", params={"category": "premium"}).status_code == 422


def test_calculator_detail_includes_page_metadata(client):
    response = client.get("/api/calculators/tile-calculator")
    assert response.status_code == 200
    data = response.json()
    assert data["route"] == "/calculator/tile"
    assert data["head_tags"]["title"] == data["meta_title"]
    assert any(tag.get("rel") == "canonical" for tag in data["head_tags"]["tags"])
    assert data["structured_data"]["@type"] == "WebApplication"
    assert data["breadcrumbs"]["@type"] == "BreadcrumbList"


def test_unknown_calculator_detail_404(client):
    response = client.get("/api/calculators/roof-pitch")
    assert response.status_code == 404
    assert "roof-pitch" in response.json()["detail"]


def test_input_schema_uses_form_names(client):
    response = client.get("/api/calculators/flooring-cost/schema")
    assert response.status_code == 200
    schema = response.json()
    assert "materialCost" in schema["properties"]
    assert "materialCost" in schema["required"]
    assert schema["properties"]["wastePercentage"]["maximum"] == 50

    assert client.get("/api/calculators/roof-pitch/schema").status_code == 404


# ============================================================
# Validate and evaluate
# ============================================================

def test_validate_returns_record(client):
    response = client.post("/api/calculators/rectangular-room/validate",
                           json={"roomLength": 12, "roomWidth": "10"})
    assert response.status_code == 200
    data = response.json()
    assert data["valid"] is True
    assert data["inputs"]["room_width"] == 10
    assert data["inputs"]["flooring_type"] == "tile"


def test_validate_reports_field_errors(client):
    response = client.post("/api/calculators/flooring-cost/validate",
                           json={"length": 0, "width": 12, "materialCost": 3})
    assert response.status_code == 422
    data = response.json()
    assert data["detail"] == "Invalid input"
    assert data["errors"] == {
        "length": "Length must be greater than 0",
        "laborCost": "Labor cost is required",
    }


def test_evaluate_tile(client):
    response = client.post("/api/calculators/tile-calculator/evaluate",
                           json={"roomLength": 10, "roomWidth": 10})
    assert response.status_code == 200
    data = response.json()
    assert data["kind"] == "tile-calculator"
    assert data["inputs"]["tile_length"] == 12
    assert data["results"]["tiles_needed"] == 100
    assert data["results"]["tiles_with_waste"] == 110


def test_evaluate_unknown_kind_404(client):
    response = client.post("/api/calculators/roof-pitch/evaluate", json={"pitch": 4})
    assert response.status_code == 404


# ============================================================
# Stored calculations
# ============================================================

def test_store_calculation(client, db):
    evaluated = client.post("/api/calculators/flooring-cost/evaluate", json={
        "length": 10, "width": 12, "materialCost": 3, "laborCost": 2,
    }).json()

    response = client.post("/api/calculations", json={
        "calculator_type": "flooring-cost",
        "inputs": evaluated["inputs"],
        "results": evaluated["results"],
    })
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 1
    assert data["created_at"] is not None
    assert data["results"]["grand_total"] == evaluated["results"]["grand_total"]

    stored = db.query(models.Calculation).one()
    assert stored.calculator_type == "flooring-cost"
    assert stored.inputs["material_cost"] == 3


def test_store_calculation_unknown_kind(client, db):
    response = client.post("/api/calculations", json={
        "calculator_type": "roof-pitch", "inputs": {}, "results": {},
    })
    assert response.status_code == 404
    assert db.query(models.Calculation).count() == 0


def test_store_calculation_disabled(client, db, monkeypatch):
    monkeypatch.setattr(settings, "STORE_CALCULATIONS", False)
    response = client.post("/api/calculations", json={
        "calculator_type": "flooring-cost", "inputs": {}, "results": {},
    })
    assert response.status_code == 404
    assert db.query(models.Calculation).count() == 0
