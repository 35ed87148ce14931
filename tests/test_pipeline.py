"""
Tests for the lens pipeline
"""

import json
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from dialens import enhance, get_specification
from dialens.config import Config
from dialens.exceptions import InvalidDocument, NoCompositionFound, RenderingFailure
from dialens.models import LensStatus
from dialens.pipeline import HypoLens
from dialens.templates import TEMPLATES


def _slot(soup, slot):
    return soup.select_one(f'.dialens-row-value[data-slot="{slot}"]').get_text()


def _items(soup, slot):
    return [li.get_text() for li in soup.select(f'ul[data-slot="{slot}"] li')]


def test_pipeline_initialization():
    lens = HypoLens(Config)
    assert lens.get_specification() == "1.0.0-dialens-hypo"
    assert get_specification() == "1.0.0-dialens-hypo"


def test_out_of_scope_html_is_returned_unchanged(build_bundle):
    html = "<html><body>\n  <p>Paracetamol  leaflet</p ></body></html>"
    bundle = build_bundle(bundle_id="epibundle-paracetamol-en",
                          annotations=[("Onset 15 minutes", "hypo-onset")])

    result = HypoLens().apply(bundle, html)

    assert result.status is LensStatus.OUT_OF_SCOPE
    assert result.html is html
    assert not result.enhanced
    assert enhance(bundle, html) == html


@pytest.mark.parametrize("document", [None, {}, {"entry": []}])
def test_documents_without_entries_fail(document, leaflet_html):
    with pytest.raises(InvalidDocument):
        HypoLens().enhance(document, leaflet_html)


@pytest.mark.parametrize("bundle_id,product_ids", [
    ("epibundle-humalog-en", ["EU/1/96/007/002"]),
    ("unrelated-bundle", ["EU/1/99/999/999"]),
])
def test_documents_without_composition_fail(build_bundle, leaflet_html, bundle_id, product_ids):
    bundle = build_bundle(include_composition=False, bundle_id=bundle_id,
                          product_ids=product_ids)
    with pytest.raises(NoCompositionFound):
        HypoLens().enhance(bundle, leaflet_html)


def test_matched_document_without_annotations_renders_defaults(build_bundle, leaflet_html):
    result = HypoLens().apply(build_bundle(), leaflet_html)
    soup = BeautifulSoup(result.html, "html.parser")
    template = TEMPLATES["en"]

    assert result.status is LensStatus.ENHANCED
    assert result.annotations == 0
    assert _slot(soup, "onset") == template.default_onset
    assert _slot(soup, "peak") == template.default_peak
    assert _slot(soup, "duration") == template.default_duration
    assert _items(soup, "increase") == list(template.default_increase)
    assert _items(soup, "decrease") == list(template.default_decrease)
    assert soup.select(".dialens-timeline") == []


def test_matched_document_with_partial_annotations(build_bundle, leaflet_html):
    bundle = build_bundle(
        bundle_id=None,
        product_ids=["EU/1/96/007/002"],
        product_name="Humalog 100 units/ml KwikPen",
        annotations=[
            ("Onset of action within 15 minutes", "hypo-onset"),
            ("Alcohol can increase the risk of hypoglycaemia", "hypo-increase-factor"),
            ("Store in a refrigerator", "hypo-duration"),
        ],
    )
    result = HypoLens().apply(bundle, leaflet_html)
    soup = BeautifulSoup(result.html, "html.parser")
    template = TEMPLATES["en"]

    assert result.annotations == 3
    assert _slot(soup, "onset") == "Onset of action within 15 minutes"
    assert _slot(soup, "peak") == template.default_peak
    assert _slot(soup, "duration") == template.default_duration
    assert _items(soup, "increase") == ["Alcohol can increase the risk of hypoglycaemia"]
    assert _items(soup, "decrease") == list(template.default_decrease)
    # annotations present, so no estimated timeline
    assert soup.select(".dialens-timeline") == []
    assert result.timelines == ()


def test_panel_is_first_child_of_body(build_bundle, leaflet_html):
    html = HypoLens().enhance(build_bundle(), leaflet_html)
    soup = BeautifulSoup(html, "html.parser")
    first = next(child for child in soup.body.children if getattr(child, "name", None))

    assert first.name == "section"
    assert "dialens-hypo-card" in first["class"]
    assert soup.body.find("h1").get_text() == "Package leaflet: information for the user"
    assert len(soup.select(".dialens-hypo-card")) == 1


def test_html_without_body_gets_panel_at_root(build_bundle):
    html = HypoLens().enhance(build_bundle(), "<p>Leaflet fragment</p>")
    soup = BeautifulSoup(html, "html.parser")
    top_level = [child for child in soup.children if getattr(child, "name", None)]

    assert [tag.name for tag in top_level] == ["section", "p"]
    assert "dialens-hypo-card" in top_level[0]["class"]
    assert top_level[1].get_text() == "Leaflet fragment"


def test_short_long_acting_embedded_profile_still_renders(build_bundle, leaflet_html):
    bundle = build_bundle(dialensInsulinProfiles=[{
        "id": "short-basal", "name": "Short basal", "type": "long-acting",
        "onsetHours": [1, 2], "peakHours": [2, 3], "durationHours": [3, 3.5],
    }])
    result = HypoLens().apply(bundle, leaflet_html)
    soup = BeautifulSoup(result.html, "html.parser")

    assert result.timelines == ("short-basal",)
    card = soup.select_one('.dialens-timeline[data-profile="short-basal"]')
    assert card["data-window-start"] == "3.5"
    assert card["data-window-end"] == "3.5"


def test_malformed_product_name_is_ignored(build_bundle, leaflet_html):
    bundle = build_bundle()
    bundle["entry"].append({"resource": {"resourceType": "MedicinalProductDefinition", "name": 5}})

    result = HypoLens().apply(bundle, leaflet_html)

    assert result.status is LensStatus.ENHANCED
    assert result.timelines == ()


def test_empty_html_starts_from_blank_document(build_bundle):
    html = HypoLens().enhance(build_bundle(), "")
    soup = BeautifulSoup(html, "html.parser")
    assert soup.body.select_one(".dialens-hypo-card") is not None


def test_language_selects_template(build_bundle, leaflet_html):
    result = HypoLens().apply(build_bundle(composition_language="pt-BR"), leaflet_html)
    soup = BeautifulSoup(result.html, "html.parser")

    assert result.language == "pt"
    assert _slot(soup, "onset") == TEMPLATES["pt"].default_onset


def test_named_profile_adds_timeline_without_annotations(build_bundle, leaflet_html):
    bundle = build_bundle(bundle_id="epibundle-levemir-da", composition_language="da",
                          product_name="Levemir 100 enheder/ml FlexPen")
    result = HypoLens().apply(bundle, leaflet_html)
    soup = BeautifulSoup(result.html, "html.parser")

    assert result.timelines == ("levemir",)
    card = soup.select_one('.dialens-timeline[data-profile="levemir"]')
    assert card["data-window-start"] == "4"
    assert card["data-window-end"] == "24"
    assert _slot(soup, "onset") == TEMPLATES["da"].default_onset


def test_json_string_document(build_bundle, leaflet_html):
    result = HypoLens().apply(json.dumps(build_bundle()), leaflet_html)
    assert result.status is LensStatus.ENHANCED


class _BrokenDocument:
    def insert_first(self, markup):
        pass

    def serialize(self):
        return ""


class _BrokenProvider:
    def from_html(self, html):
        return _BrokenDocument()


def test_empty_serialization_is_a_rendering_failure(build_bundle, leaflet_html):
    lens = HypoLens(document_provider=_BrokenProvider())
    with pytest.raises(RenderingFailure):
        lens.enhance(build_bundle(), leaflet_html)


def test_process_batch(tmp_path, build_bundle, leaflet_html):
    (tmp_path / "humalog.json").write_text(json.dumps(build_bundle()), encoding="utf-8")
    (tmp_path / "humalog.html").write_text(leaflet_html, encoding="utf-8")
    other = build_bundle(bundle_id="epibundle-paracetamol-en")
    (tmp_path / "paracetamol.json").write_text(json.dumps(other), encoding="utf-8")
    (tmp_path / "paracetamol.html").write_text(leaflet_html, encoding="utf-8")
    (tmp_path / "broken.json").write_text(json.dumps({"entry": []}), encoding="utf-8")

    output_dir = tmp_path / "out"
    results = HypoLens().process_batch(str(tmp_path), str(output_dir))

    statuses = {Path(r["epi"]).name: r["status"] for r in results}
    assert statuses == {
        "broken.json": "failed",
        "humalog.json": "enhanced",
        "paracetamol.json": "out_of_scope",
    }
    assert "dialens-hypo-card" in (output_dir / "humalog.html").read_text(encoding="utf-8")
    assert (output_dir / "paracetamol.html").read_text(encoding="utf-8") == leaflet_html

    summary = json.loads((output_dir / "batch_summary.json").read_text(encoding="utf-8"))
    assert summary["total_documents"] == 3
    assert summary["enhanced"] == 1
    assert summary["out_of_scope"] == 1
    assert summary["failed"] == 1
