from __future__ import annotations

from unittest.mock import patch

from fastapi.testclient import TestClient

from treatment_matcher.app import app
from treatment_matcher.matching.cache import clear_cache
from treatment_matcher.records import data_store
from treatment_matcher.records.data_store import RecordStoreError

client = TestClient(app)

LIP_PHOTOS = [
    {"id": "both", "name": "Balance Lips - Thin Lips", "general_treatments": ["Filler"], "area_names": ["Lips"]},
    {"id": "interest", "name": "Balance Lips", "general_treatments": ["Filler"], "area_names": ["Lips"]},
    {"id": "tox", "name": "Lip Flip", "general_treatments": ["Neurotoxin"], "area_names": ["Lips"]},
    {"id": "nose", "name": "Liquid Rhinoplasty", "general_treatments": ["Liquid Rhinoplasty"], "area_names": ["Nose"]},
]


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_metadata_lists_catalogues():
    body = client.get("/metadata").json()
    assert "Balance Lips" in body["interests"]
    assert body["photo_regions"] == ["Eyes", "Forehead", "Cheeks", "Nose", "Lips", "Jawline", "Skin"]
    assert "Threadlift" not in body["treatments"]
    assert body["timelines"][2] == "Wishlist"


# ── Photo matching ───────────────────────────────────────────────────────


class TestPhotoMatch:
    def setup_method(self):
        clear_cache()

    def test_interest_and_issue(self):
        resp = client.post(
            "/photos/match",
            json={"interest": "Balance Lips", "issue": "Thin Lips", "candidates": LIP_PHOTOS},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert [r["candidate"]["id"] for r in body["exact"]] == ["both"]
        assert [r["candidate"]["id"] for r in body["close"]] == ["interest"]
        assert body["close"][0]["reason"] == "Matches Interest: Balance Lips"
        assert body["exact"][0]["match_type"] == "exact"
        assert body["treatment_options"] == ["Filler"]
        assert body["total_candidates"] == 2

    def test_issue_only_resolves_interest(self):
        resp = client.post("/photos/match", json={"issue": "Thin Lips", "candidates": LIP_PHOTOS})
        body = resp.json()
        assert [r["candidate"]["id"] for r in body["exact"]] == ["both"]

    def test_no_criteria_puts_everything_in_first_bucket(self):
        resp = client.post("/photos/match", json={"candidates": LIP_PHOTOS})
        body = resp.json()
        assert len(body["exact"]) == 4
        assert body["close"] == []
        assert body["exact"][0]["reason"] == ""

    def test_in_plan_flags(self):
        resp = client.post(
            "/photos/match",
            json={
                "interest": "Balance Lips",
                "candidates": LIP_PHOTOS,
                "plan_items": [{"treatment": "Filler", "region": "Lips", "interest": "Balance Lips"}],
            },
        )
        assert sorted(resp.json()["in_plan"]) == ["both", "interest"]

    def test_limit(self):
        resp = client.post("/photos/match", json={"candidates": LIP_PHOTOS, "limit": 1})
        body = resp.json()
        assert len(body["exact"]) + len(body["close"]) == 1

    def test_uses_record_store_when_no_candidates(self):
        data_store.reset()
        resp = client.post("/photos/match", json={"interest": "Balance Lips"})
        assert resp.status_code == 200
        ids = [r["candidate"]["id"] for r in resp.json()["exact"]]
        assert ids == ["rec002", "rec001"]

    def test_relevance_from_client_profile(self):
        data_store.reset()
        resp = client.post(
            "/photos/match",
            json={"interest": "Balance Lips", "issue": "Thin Lips", "client": {"skin_type": "dry", "skin_tone": "Light"}},
        )
        exact = resp.json()["exact"]
        assert exact[0]["candidate"]["id"] == "rec001"
        assert exact[0]["relevance"] == ["Similar skin type", "Similar skin tone"]

    @patch("treatment_matcher.matching.service.get_candidates", side_effect=RecordStoreError("export missing"))
    def test_record_store_failure_is_503(self, mock_candidates):
        resp = client.post("/photos/match", json={"interest": "Hydrate Skin"})
        assert resp.status_code == 503
        assert "export missing" in resp.json()["detail"]

    def test_validation_rejects_bad_limit(self):
        resp = client.post("/photos/match", json={"limit": 0})
        assert resp.status_code == 422


# ── Suggestions ──────────────────────────────────────────────────────────


class TestSuggestionMatch:
    def setup_method(self):
        clear_cache()

    def test_region_filter(self):
        resp = client.post("/suggestions/match", json={"region_filters": ["Lips"]})
        names = [r["candidate"]["name"] for r in resp.json()["exact"]]
        assert names == ["Balance Lips", "Hydrate Lips"]

    def test_findings_filter(self):
        resp = client.post("/suggestions/match", json={"findings": ["Thin Lips"]})
        names = [r["candidate"]["name"] for r in resp.json()["exact"]]
        assert names == ["Balance Lips"]

    def test_general_concerns_expand_to_findings(self):
        resp = client.post("/suggestions/match", json={"general_concerns": ["Pigmentation"]})
        names = [r["candidate"]["name"] for r in resp.json()["exact"]]
        assert names == ["Even Skin Tone"]

    def test_interest_scoring(self):
        resp = client.post(
            "/suggestions/match",
            json={"interest": "Balance Lips", "suggestions": ["Hydrate Lips", "Balance Lips"]},
        )
        body = resp.json()
        assert [r["candidate"]["name"] for r in body["exact"]] == ["Balance Lips"]
        assert [r["candidate"]["name"] for r in body["close"]] == ["Hydrate Lips"]


# ── Recommender ──────────────────────────────────────────────────────────


def test_finding_recommendation():
    resp = client.get("/findings/Thin Lips/recommendation")
    assert resp.status_code == 200
    assert resp.json() == {"goal": "Balance Lips", "region": "Lips", "treatments": ["Filler", "Neurotoxin"]}


def test_unknown_finding_is_404():
    assert client.get("/findings/Other finding/recommendation").status_code == 404


def test_treatment_goals_fallback():
    body = client.get("/treatments/Rhinoplasty/goals").json()
    assert "Fade Scars" in body["goals"]
    assert body["findings_by_area"] == []


def test_treatment_products():
    resp = client.post("/treatments/Filler/products", json={"context": "cheek volume"})
    body = resp.json()
    assert body["recommended"] == [
        "Hyaluronic acid (HA) – cheek",
        "PLLA / Sculptra",
        "Calcium hydroxyapatite (e.g. Radiesse)",
    ]
    assert body["allowed"] == body["recommended"]


def test_treatment_products_without_context():
    body = client.post("/treatments/Kybella/products", json={}).json()
    assert body["recommended"] == []
    assert body["allowed"] == ["Kybella (deoxycholic acid)", "Other injectable"]


def test_treatment_meta():
    body = client.get("/treatments/Neurotoxin/meta").json()
    assert body["price_range"] == "$5.20–$995"
    assert body["quantity_unit"] == "Units"
    assert body["products"][-1] == "Other"


def test_unknown_treatment_meta_is_empty():
    body = client.get("/treatments/Unknown/meta").json()
    assert body["longevity"] is None
    assert body["products"] == []


# ── Plan ─────────────────────────────────────────────────────────────────


def test_plan_prefill():
    resp = client.post(
        "/plan/prefill",
        json={"candidate": LIP_PHOTOS[0], "issue": "Thin Lips", "form": {"when": "Now"}},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["interest"] == "Balance Lips"
    assert body["region"] == "Lips"
    assert body["treatment"] == "Filler"
    assert body["findings"] == ["Thin Lips"]
    assert body["timeline"] == "Now"


def test_plan_prefill_requires_candidate():
    assert client.post("/plan/prefill", json={}).status_code == 422
