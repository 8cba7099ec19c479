"""
Calculator catalogue and page metadata.

Tests:
1-4.  Catalogue contents and lookups
5-7.  Head tags
8-9.  Structured data
10-11. Breadcrumbs
"""

import pytest
from pydantic import ValidationError

from flooringcalc.calculators import list_calculators
from flooringcalc.catalog import listing
from flooringcalc.catalog.seo import (
    breadcrumbs, calculator_breadcrumbs, canonical_url, head_tags, structured_data,
)
from flooringcalc.config import Settings

SITE = Settings(SITE_URL="https://floors.example", SITE_NAME="Floors", TWITTER_SITE="@floors",
                PUBLISHER_NAME="Floors Inc")


def tag_map(tag_set):
    """{name or property: content} for meta tags, plus the canonical href."""
    found = {}
    for tag in tag_set.tags:
        if tag["tag"] == "link":
            found["canonical"] = tag["href"]
        else:
            found[tag.get("name") or tag.get("property")] = tag["content"]
    return found


# ============================================================
# Catalogue
# ============================================================

def test_catalogue_lists_every_calculator_once():
    definitions = listing.all_definitions()
    ids = [d.id for d in definitions]
    assert len(ids) == 47
    assert len(set(ids)) == 47
    assert set(ids) == set(list_calculators())
    assert all(d.kind == d.id for d in definitions)


def test_featured_routes_are_short():
    assert listing.get_by_id("tile-calculator").route == "/calculator/tile"
    assert listing.get_by_id("hardwood-calculator").route == "/calculator/hardwood"
    assert listing.get_by_id("vinyl-calculator").route == "/calculator/vinyl"
    assert listing.get_by_id("baseboard").route == "/calculator/baseboard"
    assert listing.get_by_route("/calculator/tile").id == "tile-calculator"
    assert listing.get_by_route("/calculator/nope") is None


def test_categories_partition_catalogue():
    sizes = {category: len(listing.get_by_category(category))
             for category in listing.CATEGORIES}
    assert sum(sizes.values()) == 47
    assert all(sizes.values())
    assert len(listing.get_by_category("all")) == 47
    assert listing.get_by_category("premium") == []


def test_definitions_are_frozen():
    definition = listing.get_by_kind("stair")
    with pytest.raises(ValidationError):
        definition.title = "Other"
    assert listing.get_by_kind("roof-pitch") is None


# ============================================================
# Head tags
# ============================================================

def test_head_tags_for_calculator_page():
    definition = listing.get_by_id("tile-calculator")
    tags = head_tags(definition, settings=SITE)
    found = tag_map(tags)

    assert tags.title == definition.meta_title
    assert found["description"] == definition.meta_description
    assert found["keywords"] == ", ".join(definition.keywords)
    assert found["og:title"] == definition.meta_title
    assert found["og:url"] == "https://floors.example/calculator/tile"
    assert found["og:type"] == "website"
    assert found["og:site_name"] == "Floors"
    assert found["twitter:card"] == "summary_large_image"
    assert found["twitter:site"] == "@floors"
    assert found["canonical"] == "https://floors.example/calculator/tile"


def test_head_tags_explicit_canonical_wins():
    definition = listing.get_by_id("stair")
    found = tag_map(head_tags(definition, path="/stairs", canonical="https://x.test/s",
                              settings=SITE))
    assert found["canonical"] == "https://x.test/s"
    assert found["og:url"] == "https://x.test/s"


def test_canonical_url_strips_trailing_slash():
    site = Settings(SITE_URL="https://floors.example/")
    assert canonical_url("/calculator/stair", site) == "https://floors.example/calculator/stair"


# ============================================================
# Structured data
# ============================================================

def test_structured_data_is_web_application():
    definition = listing.get_by_id("subfloor")
    data = structured_data(definition, settings=SITE)
    assert data["@context"] == "https://schema.org"
    assert data["@type"] == "WebApplication"
    assert data["name"] == definition.title
    assert data["url"] == "https://floors.example/calculator/subfloor"
    assert data["publisher"]["name"] == "Floors Inc"
    assert data["publisher"]["logo"]["url"] == "https://floors.example/logo.png"
    assert data["offers"]["price"] == "0"
    assert data["about"]["category"] == definition.category


def test_structured_data_feature_list_not_shared():
    definition = listing.get_by_id("subfloor")
    structured_data(definition, settings=SITE)["featureList"].append("Extra")
    assert "Extra" not in structured_data(definition, settings=SITE)["featureList"]


# ============================================================
# Breadcrumbs
# ============================================================

def test_breadcrumbs_positions_and_links():
    data = breadcrumbs([("Calculators", "/"), ("Materials", "/materials"), ("Tile", None)],
                       settings=SITE)
    items = data["itemListElement"]
    assert data["@type"] == "BreadcrumbList"
    assert [i["position"] for i in items] == [1, 2, 3]
    assert items[1]["item"] == "https://floors.example/materials"
    assert "item" not in items[2]


def test_calculator_breadcrumbs_end_at_page():
    definition = listing.get_by_id("molding")
    items = calculator_breadcrumbs(definition, settings=SITE)["itemListElement"]
    assert items[0]["name"] == "Calculators"
    assert items[-1]["name"] == definition.title
    assert "item" not in items[-1]
