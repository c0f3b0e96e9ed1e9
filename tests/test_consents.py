"""
Tests for consent management and privacy settings.
"""

from datetime import datetime, timedelta

from credguard.models import db, utcnow
from credguard.models.consent import Consent, one_year_from


def _grant(client, headers, **overrides):
    payload = {
        "institution_name": "Global Bank UK",
        "purpose": "Credit verification",
        "data_types": ["Trust Score", "Behavioral Pattern"],
    }
    payload.update(overrides)
    return client.post("/api/consents", json=payload, headers=headers)


class TestOneYearFrom:
    def test_same_day_next_year(self):
        assert one_year_from(datetime(2024, 3, 15, 10, 30)) == datetime(2025, 3, 15, 10, 30)

    def test_leap_day(self):
        assert one_year_from(datetime(2024, 2, 29)) == datetime(2025, 2, 28)


class TestGrant:
    def test_defaults_to_one_year(self, client, headers):
        response = _grant(client, headers)
        assert response.status_code == 201
        consent = response.get_json()["consent"]
        assert consent["status"] == "active"
        expires_at = datetime.fromisoformat(consent["expires_at"])
        assert timedelta(days=364) < expires_at - utcnow() <= timedelta(days=366)

    def test_explicit_expiry(self, client, headers):
        future = (utcnow() + timedelta(days=30)).date().isoformat()
        response = _grant(client, headers, expires_at=future)
        assert response.status_code == 201
        assert response.get_json()["consent"]["expires_at"].startswith(future)

        response = _grant(client, headers, expires_at="2099-01-01T00:00:00+05:00")
        assert response.status_code == 201
        assert response.get_json()["consent"]["expires_at"] == "2098-12-31T19:00:00"

    def test_past_expiry_rejected(self, client, headers):
        assert _grant(client, headers, expires_at="2001-01-01").status_code == 400
        assert _grant(client, headers, expires_at="someday").status_code == 400

    def test_requires_institution_and_purpose(self, client, headers):
        assert _grant(client, headers, purpose="").status_code == 400

    def test_data_types_must_be_names(self, client, headers):
        assert _grant(client, headers, data_types="Trust Score").status_code == 400
        assert _grant(client, headers, data_types=[1, 2]).status_code == 400


class TestLifecycle:
    def test_revoke_then_renew(self, client, headers):
        consent_id = _grant(client, headers).get_json()["consent"]["id"]

        response = client.post(f"/api/consents/{consent_id}/revoke", headers=headers)
        assert response.status_code == 200
        assert response.get_json()["message"] == "The institution can no longer access your encrypted identity."
        assert response.get_json()["consent"]["status"] == "revoked"

        response = client.post(f"/api/consents/{consent_id}/renew", headers=headers)
        assert response.status_code == 200
        assert response.get_json()["message"] == "Access has been extended for another year."
        assert response.get_json()["consent"]["status"] == "active"

    def test_delete(self, client, headers):
        consent_id = _grant(client, headers).get_json()["consent"]["id"]
        assert client.delete(f"/api/consents/{consent_id}", headers=headers).status_code == 200
        assert client.get("/api/consents", headers=headers).get_json()["consents"] == []

    def test_unknown_consent(self, client, headers):
        assert client.post("/api/consents/missing/revoke", headers=headers).status_code == 404
        assert client.post("/api/consents/missing/renew", headers=headers).status_code == 404
        assert client.delete("/api/consents/missing", headers=headers).status_code == 404


class TestListing:
    def test_seeded_counts(self, seeded_client, seeded_headers):
        body = seeded_client.get("/api/consents", headers=seeded_headers).get_json()
        assert body["active_count"] == 3
        assert body["expired_count"] == 1
        assert body["revoked_count"] == 1
        assert body["settings"] == {"auto_revoke": True, "notify_on_access": True}

    def test_lapsed_consent_expires(self, app, client, session):
        consent_id = _grant(client, session["headers"]).get_json()["consent"]["id"]
        with app.app_context():
            consent = db.session.get(Consent, consent_id)
            consent.expires_at = utcnow() - timedelta(days=1)
            db.session.commit()

        body = client.get("/api/consents", headers=session["headers"]).get_json()
        assert body["consents"][0]["status"] == "expired"
        assert body["expired_count"] == 1

    def test_lapsed_consent_kept_when_auto_revoke_off(self, app, client, session):
        headers = session["headers"]
        client.put("/api/consents/settings", json={"auto_revoke": False}, headers=headers)
        consent_id = _grant(client, headers).get_json()["consent"]["id"]
        with app.app_context():
            consent = db.session.get(Consent, consent_id)
            consent.expires_at = utcnow() - timedelta(days=1)
            db.session.commit()

        body = client.get("/api/consents", headers=headers).get_json()
        assert body["consents"][0]["status"] == "active"


class TestSettings:
    def test_defaults(self, client, headers):
        assert client.get("/api/consents/settings", headers=headers).get_json() == {
            "auto_revoke": True,
            "notify_on_access": True,
        }

    def test_partial_update(self, client, headers):
        response = client.put("/api/consents/settings", json={"notify_on_access": False}, headers=headers)
        assert response.status_code == 200
        assert response.get_json()["settings"] == {"auto_revoke": True, "notify_on_access": False}
        assert client.get("/api/consents/settings", headers=headers).get_json()["notify_on_access"] is False

    def test_rejects_unknown_keys_and_non_booleans(self, client, headers):
        assert client.put("/api/consents/settings", json={"share_everything": True}, headers=headers).status_code == 400
        assert client.put("/api/consents/settings", json={"auto_revoke": "yes"}, headers=headers).status_code == 400
