"""Tests for the HTTP surface.

Covers:
- Health check and catalog loading at startup
- Location-filtered benefit listing
- Ranked and grouped matches (camelCase in and out)
- 422 on invalid profiles
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from unlockvet.main import app

AUSTIN_PROFILE = {
    "zipCode": "78701",
    "disabilityRating": 80,
    "dischargeStatus": "honorable",
    "yearsOfService": 5,
}


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c


class TestHealth:
    def test_health(self, client) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "ok"
        assert body["catalog_size"] == 8


class TestBenefits:
    def test_austin(self, client) -> None:
        resp = client.get("/benefits", params={"zip": "78701"})
        assert resp.status_code == 200
        assert len(resp.json()) == 8

    def test_unknown_zip_federal_only(self, client) -> None:
        resp = client.get("/benefits", params={"zip": "99999"})
        assert resp.status_code == 200
        body = resp.json()
        assert len(body) == 4
        assert {b["level"] for b in body} == {"federal"}

    def test_zip_required(self, client) -> None:
        assert client.get("/benefits").status_code == 422


class TestBenefitDetail:
    def test_related_resolved(self, client) -> None:
        resp = client.get("/benefits/tx-property-tax")
        assert resp.status_code == 200
        body = resp.json()
        assert body["benefit"]["id"] == "tx-property-tax"
        assert [b["id"] for b in body["related"]] == ["va-disability"]

    def test_related_skips_ids_outside_catalog(self, client) -> None:
        body = client.get("/benefits/va-healthcare").json()
        assert [b["id"] for b in body["related"]] == ["va-disability"]

    def test_unknown_benefit(self, client) -> None:
        assert client.get("/benefits/nope").status_code == 404


class TestMatches:
    def test_ranked(self, client) -> None:
        resp = client.post("/matches", json=AUSTIN_PROFILE)
        assert resp.status_code == 200
        body = resp.json()
        assert [m["benefit"]["id"] for m in body[:2]] == ["va-healthcare", "gi-bill-post-911"]
        assert body[0]["matchScore"] == 100
        assert body[0]["eligibilityStatus"] == "likely"
        assert body[-1]["eligibilityStatus"] == "unknown"

    def test_missing_info_serialized(self, client) -> None:
        body = client.post("/matches", json=AUSTIN_PROFILE).json()
        tax = next(m for m in body if m["benefit"]["id"] == "tx-property-tax")
        assert tax["matchedRequirements"] == ["Have a VA disability rating of 10% or higher"]
        assert tax["missingInfo"] == ["Own property in Texas as your residence"]

    def test_invalid_rating(self, client) -> None:
        resp = client.post("/matches", json={"zipCode": "78701", "disabilityRating": 150})
        assert resp.status_code == 422

    def test_fractional_rating(self, client) -> None:
        resp = client.post("/matches", json={**AUSTIN_PROFILE, "disabilityRating": 72.5})
        assert resp.status_code == 200

    def test_empty_discharge_status(self, client) -> None:
        """An unselected discharge field falls back to service length."""
        body = client.post("/matches", json={**AUSTIN_PROFILE, "dischargeStatus": ""}).json()
        gi_bill = next(m for m in body if m["benefit"]["id"] == "gi-bill-post-911")
        assert gi_bill["matchedRequirements"] == ["Served at least 90 aggregate days on active duty after Sept 10, 2001"]
        assert gi_bill["missingInfo"] == ["Discharged honorably"]

    def test_zip_required(self, client) -> None:
        assert client.post("/matches", json={"disabilityRating": 10}).status_code == 422

    def test_grouped(self, client) -> None:
        resp = client.post("/matches/grouped", json=AUSTIN_PROFILE)
        assert resp.status_code == 200
        body = resp.json()
        assert list(body) == ["healthcare", "education", "housing", "financial", "disability"]
        assert [m["benefit"]["id"] for m in body["housing"]] == ["tx-veterans-land-board", "va-home-loan"]
