"""
Head tags and schema.org structured data for calculator pages.

Pure builders: they take a CalculatorDefinition (or breadcrumb items) and
return plain data. Whatever renders the page decides how to emit it.
"""

from typing import Optional

from pydantic import BaseModel

from ..config import Settings, settings as default_settings
from .listing import CalculatorDefinition

FEATURE_LIST = [
    "Material quantity calculations",
    "Cost estimation",
    "Installation guidance",
    "Waste percentage calculations",
]


class HeadTagSet(BaseModel):
    title: str
    tags: list[dict[str, str]]


def _meta(key: str, name: str, content: str) -> dict[str, str]:
    return {"tag": "meta", key: name, "content": content}


def canonical_url(path: str, settings: Settings = default_settings) -> str:
    return settings.SITE_URL.rstrip("/") + path


def head_tags(definition: CalculatorDefinition, path: Optional[str] = None,
              canonical: Optional[str] = None,
              settings: Settings = default_settings) -> HeadTagSet:
    """Title, description, Open Graph, Twitter and canonical tags for one page."""
    title = definition.meta_title
    description = definition.meta_description
    url = canonical or canonical_url(path or definition.route, settings)

    tags = [_meta("name", "description", description)]
    if definition.keywords:
        tags.append(_meta("name", "keywords", ", ".join(definition.keywords)))
    tags += [
        _meta("property", "og:title", title),
        _meta("property", "og:description", description),
        _meta("property", "og:url", url),
        _meta("property", "og:type", "website"),
        _meta("property", "og:site_name", settings.SITE_NAME),
        _meta("name", "twitter:card", "summary_large_image"),
        _meta("name", "twitter:site", settings.TWITTER_SITE),
        _meta("property", "twitter:title", title),
        _meta("property", "twitter:description", description),
        {"tag": "link", "rel": "canonical", "href": url},
    ]
    return HeadTagSet(title=title, tags=tags)


def structured_data(definition: CalculatorDefinition, url: Optional[str] = None,
                    settings: Settings = default_settings) -> dict:
    """schema.org WebApplication JSON-LD for a calculator page."""
    base_url = settings.SITE_URL.rstrip("/")
    return {
        "@context": "https://schema.org",
        "@type": "WebApplication",
        "name": definition.title,
        "description": definition.description,
        "url": url or canonical_url(definition.route, settings),
        "publisher": {
            "@type": "Organization",
            "name": settings.PUBLISHER_NAME,
            "url": base_url,
            "logo": {"@type": "ImageObject", "url": f"{base_url}/logo.png"},
        },
        "applicationCategory": "BusinessApplication",
        "applicationSubCategory": "Calculator",
        "operatingSystem": "Web Browser",
        "offers": {"@type": "Offer", "price": "0", "priceCurrency": "USD"},
        "featureList": list(FEATURE_LIST),
        "about": {
            "@type": "Thing",
            "name": definition.title,
            "category": definition.category,
        },
    }


def breadcrumbs(items: list[tuple[str, Optional[str]]],
                settings: Settings = default_settings) -> dict:
    """
    schema.org BreadcrumbList from (label, href) pairs.

    The last crumb is usually the current page and has no href; its item
    is left out.
    """
    base_url = settings.SITE_URL.rstrip("/")
    elements = []
    for position, (label, href) in enumerate(items, start=1):
        element = {"@type": "ListItem", "position": position, "name": label}
        if href:
            element["item"] = f"{base_url}{href}"
        elements.append(element)
    return {
        "@context": "https://schema.org",
        "@type": "BreadcrumbList",
        "itemListElement": elements,
    }


def calculator_breadcrumbs(definition: CalculatorDefinition,
                           settings: Settings = default_settings) -> dict:
    return breadcrumbs([("Calculators", "/"), (definition.title, None)], settings)
