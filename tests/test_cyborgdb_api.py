"""
Tests for the cyborgdb-api action handler.
"""

import re
from unittest.mock import patch

from credguard.models import db
from credguard.models.identity import EncryptedIdentity
from credguard.models.profile import Profile, TrustScoreHistory
from tests.conftest import auth_headers

URL = "/api/functions/cyborgdb-api"


class TestAuth:
    def test_missing_authorization(self, client):
        response = client.post(URL, json={"action": "generate_vector"})
        assert response.status_code == 401
        assert response.get_json() == {"error": "Missing authorization"}

    def test_invalid_token(self, client):
        response = client.post(URL, json={"action": "generate_vector"}, headers=auth_headers("nope"))
        assert response.status_code == 401
        assert response.get_json() == {"error": "Invalid token"}


def test_unknown_action(client, headers):
    response = client.post(URL, json={"action": "delete_everything"}, headers=headers)
    assert response.status_code == 400
    assert response.get_json() == {"error": "Unknown action"}


class TestGenerateVector:
    def test_indexes_identity(self, app, client, session):
        response = client.post(URL, json={"action": "generate_vector", "data": {}}, headers=session["headers"])
        assert response.status_code == 200
        body = response.get_json()
        assert body["success"] is True
        assert body["indexed"] is True
        assert body["cyborgdb_enabled"] is False
        assert re.fullmatch(r"0x[0-9a-f]{64}", body["encrypted_vector"])

        with app.app_context():
            identity = EncryptedIdentity.get_by_user(session["user"]["id"])
            assert identity.encrypted_vector == body["encrypted_vector"]
            assert identity.cyborgdb_indexed is True
            assert identity.cyborgdb_index_id.startswith(f"cyborg_{session['user']['id'][:8]}_")

    def test_normalizes_unprefixed_reply(self, app, client, session):
        with patch("credguard.utils.cyborgdb.CyborgDBClient.generate_vector", return_value="abc XYZ 123"):
            response = client.post(URL, json={"action": "generate_vector"}, headers=session["headers"])
        assert response.get_json()["encrypted_vector"] == "0xabc123"

    def test_missing_identity_is_500(self, app, client, session):
        with app.app_context():
            identity = EncryptedIdentity.get_by_user(session["user"]["id"])
            db.session.delete(identity)
            db.session.commit()

        response = client.post(URL, json={"action": "generate_vector"}, headers=session["headers"])
        assert response.status_code == 500
        assert response.get_json() == {"error": "Failed to update identity"}


class TestVerifyIdentity:
    def test_updates_trust_score(self, app, client, session):
        response = client.post(URL, json={"action": "verify_identity"}, headers=session["headers"])
        assert response.status_code == 200
        body = response.get_json()
        assert body["trust_score"] == 768
        assert body["verified"] is True

        with app.app_context():
            assert Profile.get_by_user(session["user"]["id"]).trust_score == 768
            history = TrustScoreHistory.get_by_user(session["user"]["id"])
            assert [point.score for point in history] == [750, 768]

    def test_no_identity(self, app, client, session):
        with app.app_context():
            db.session.delete(EncryptedIdentity.get_by_user(session["user"]["id"]))
            db.session.commit()

        response = client.post(URL, json={"action": "verify_identity"}, headers=session["headers"])
        assert response.status_code == 404
        assert response.get_json() == {"error": "No identity found"}


def test_search_similar(client, headers):
    response = client.post(URL, json={"action": "search_similar"}, headers=headers)
    assert response.status_code == 200
    body = response.get_json()
    assert [m["region"] for m in body["matches"]] == ["Europe", "North America", "Asia-Pacific"]
    assert body["query_vector"].endswith("...")
    assert len(body["query_vector"]) == 23
    assert body["indexed_on"] == "CyborgDB Encrypted Vector Search"
