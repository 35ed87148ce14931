"""Shared ePI builders for DiaLens tests."""

import sys
from pathlib import Path

import pytest

# Add package root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

HTML_ELEMENT_LINK = "http://hl7.eu/fhir/ig/gravitate-health/StructureDefinition/HtmlElementLink"
HYPO_SYSTEM = "https://dialens.example.org/CodeSystem/hypo-category"

LEAFLET_HTML = (
    "<html><head><title>Package leaflet</title></head>"
    "<body><h1>Package leaflet: information for the user</h1>"
    "<p>Read all of this leaflet carefully.</p></body></html>"
)


def _annotation_extension(text, code, text_key="valueString"):
    return {
        "url": HTML_ELEMENT_LINK,
        "extension": [
            {"url": "elementClass", text_key: text},
            {
                "url": "concept",
                "valueCodeableReference": {
                    "concept": {"coding": [{"system": HYPO_SYSTEM, "code": code}]}
                },
            },
        ],
    }


def _build_bundle(annotations=(), composition_language="en", bundle_language=None,
                  bundle_id="epibundle-humalog-en", product_ids=(), product_name=None,
                  include_composition=True, extensions=None, **extra):
    entries = []
    if include_composition:
        composition = {
            "resourceType": "Composition",
            "extension": list(extensions or [])
            + [_annotation_extension(text, code) for text, code in annotations],
        }
        if composition_language is not None:
            composition["language"] = composition_language
        entries.append({"resource": composition})

    if product_ids or product_name:
        product = {
            "resourceType": "MedicinalProductDefinition",
            "identifier": [{"system": "https://spor.ema.europa.eu/pmswi", "value": v}
                           for v in product_ids],
        }
        if product_name:
            product["name"] = [{"productName": product_name}]
        entries.append({"resource": product})

    entries.append({"resource": {"resourceType": "Organization", "name": "Holder"}})

    bundle = {"resourceType": "Bundle", "type": "document", "entry": entries}
    if bundle_id is not None:
        bundle["identifier"] = {"system": "https://example.org/epi", "value": bundle_id}
    if bundle_language is not None:
        bundle["language"] = bundle_language
    bundle.update(extra)
    return bundle


@pytest.fixture
def annotation_extension():
    return _annotation_extension


@pytest.fixture
def build_bundle():
    return _build_bundle


@pytest.fixture
def leaflet_html():
    return LEAFLET_HTML
