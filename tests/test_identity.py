"""
Tests for the credit identity routes.
"""

import json

from credguard.models import db
from credguard.models.identity import EncryptedIdentity


def test_get_identity(client, headers):
    response = client.get("/api/identity", headers=headers)
    assert response.status_code == 200
    body = response.get_json()
    assert body["trust_score"] == 750
    assert body["trust_level"] == "Good"
    assert body["identity"]["behavioral_metrics"]["repayment_discipline"] == 85
    assert body["metric_labels"]["income_regularity"] == "Income Regularity"


def test_refresh_replaces_vector(client, headers):
    before = client.get("/api/identity", headers=headers).get_json()["identity"]["encrypted_vector"]

    response = client.post("/api/identity/refresh", headers=headers)
    assert response.status_code == 200
    body = response.get_json()
    assert body["message"] == "New encrypted vector generated and indexed."
    assert body["encrypted_vector"] != before

    identity = client.get("/api/identity", headers=headers).get_json()["identity"]
    assert identity["encrypted_vector"] == body["encrypted_vector"]
    assert identity["cyborgdb_indexed"] is True


def test_verify(client, headers):
    response = client.post("/api/identity/verify", headers=headers)
    assert response.status_code == 200
    assert response.get_json()["message"] == "Trust score updated to 768"
    assert client.get("/api/identity", headers=headers).get_json()["trust_score"] == 768


def test_verify_without_identity(app, client, session):
    with app.app_context():
        db.session.delete(EncryptedIdentity.get_by_user(session["user"]["id"]))
        db.session.commit()
    response = client.post("/api/identity/verify", headers=session["headers"])
    assert response.status_code == 404


class TestMetricsPreview:
    def test_preview_does_not_store(self, client, headers):
        metrics = {
            "repayment_discipline": 100,
            "spending_stability": 100,
            "employment_consistency": 100,
            "income_regularity": 100,
        }
        response = client.put("/api/identity/metrics", json={"behavioral_metrics": metrics}, headers=headers)
        assert response.status_code == 200
        assert response.get_json()["trust_score"] == 800
        assert response.get_json()["trust_level"] == "Excellent"

        assert client.get("/api/identity", headers=headers).get_json()["trust_score"] == 750

    def test_flat_body(self, client, headers):
        metrics = {
            "repayment_discipline": 0,
            "spending_stability": 0,
            "employment_consistency": 0,
            "income_regularity": 0,
        }
        response = client.put("/api/identity/metrics", json=metrics, headers=headers)
        assert response.get_json()["trust_score"] == 600

    def test_out_of_range(self, client, headers):
        response = client.put(
            "/api/identity/metrics",
            json={"behavioral_metrics": {"repayment_discipline": 150}},
            headers=headers,
        )
        assert response.status_code == 400


def test_export(client, headers):
    response = client.get("/api/identity/export", headers=headers)
    assert response.status_code == 200
    assert "credguard-identity.json" in response.headers["Content-Disposition"]
    data = json.loads(response.data)
    assert set(data) == {"encryptedVector", "zkProof", "cyborgdbIndexed", "cyborgdbIndexId", "timestamp"}
    assert data["cyborgdbIndexed"] is False
    assert data["timestamp"].endswith("Z")


def test_requires_token(client):
    assert client.get("/api/identity").status_code == 401
