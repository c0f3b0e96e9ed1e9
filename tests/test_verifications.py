"""
Tests for verification history search, recording and export.
"""

import json


def test_seeded_search_and_status(seeded_client, seeded_headers):
    body = seeded_client.get("/api/verifications", headers=seeded_headers).get_json()
    assert body["count"] == 6
    assert body["verifications"][0]["institution_name"] == "Global Bank UK"

    body = seeded_client.get("/api/verifications?status=approved", headers=seeded_headers).get_json()
    assert body["count"] == 4
    assert {v["status"] for v in body["verifications"]} == {"approved"}

    body = seeded_client.get("/api/verifications?search=canada", headers=seeded_headers).get_json()
    assert [v["institution_name"] for v in body["verifications"]] == ["Canadian Trust Bank"]

    body = seeded_client.get("/api/verifications?search=nordic&status=approved", headers=seeded_headers).get_json()
    assert body["count"] == 0


def test_record(client, headers):
    response = client.post(
        "/api/verifications",
        json={
            "verification_type": "Credit Check",
            "institution_name": "Tokyo Finance Group",
            "country": "Japan",
            "status": "approved",
            "score": 780,
        },
        headers=headers,
    )
    assert response.status_code == 201
    verification_id = response.get_json()["verification"]["id"]

    body = client.get(f"/api/verifications?search={verification_id[:8]}", headers=headers).get_json()
    assert body["count"] == 1


def test_record_validation(client, headers):
    response = client.post("/api/verifications", json={"verification_type": "Credit Check"}, headers=headers)
    assert response.status_code == 400

    response = client.post(
        "/api/verifications",
        json={"verification_type": "Credit Check", "institution_name": "X", "country": "Y", "score": "high"},
        headers=headers,
    )
    assert response.status_code == 400


def test_export_respects_filters(seeded_client, seeded_headers):
    response = seeded_client.get("/api/verifications/export?status=pending", headers=seeded_headers)
    assert response.status_code == 200
    assert "verification-history.json" in response.headers["Content-Disposition"]
    rows = json.loads(response.data)
    assert [row["institution_name"] for row in rows] == ["Nordic Credit Union"]
