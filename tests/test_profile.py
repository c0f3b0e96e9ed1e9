"""
Tests for the profile and notification preference routes.
"""


def test_get_profile(client, headers):
    body = client.get("/api/profile", headers=headers).get_json()
    assert body["profile"]["display_name"] == "ada"
    assert body["profile"]["email"] == "ada@example.com"
    assert body["trust_level"] == "Good"
    assert body["stats"] == {"verifications": 0, "institutions": 0, "consents": 0}


def test_seeded_stats(seeded_client, seeded_headers):
    body = seeded_client.get("/api/profile", headers=seeded_headers).get_json()
    assert body["stats"] == {"verifications": 6, "institutions": 5, "consents": 5}


class TestUpdate:
    def test_display_name(self, client, headers):
        response = client.put("/api/profile", json={"display_name": "Ada Lovelace"}, headers=headers)
        assert response.status_code == 200
        assert response.get_json()["message"] == "Your profile has been updated successfully."
        assert client.get("/api/profile", headers=headers).get_json()["profile"]["display_name"] == "Ada Lovelace"

    def test_blank_name(self, client, headers):
        assert client.put("/api/profile", json={"display_name": "   "}, headers=headers).status_code == 400

    def test_long_name(self, client, headers):
        assert client.put("/api/profile", json={"display_name": "x" * 101}, headers=headers).status_code == 400


class TestNotificationPreferences:
    def test_defaults(self, client, headers):
        assert client.get("/api/profile/preferences/notifications", headers=headers).get_json() == {
            "loans": True,
            "verifications": True,
            "institutions": True,
        }

    def test_update(self, client, headers):
        response = client.put("/api/profile/preferences/notifications", json={"loans": False}, headers=headers)
        assert response.status_code == 200
        assert response.get_json()["message"] == "Your notification preferences have been updated."
        assert client.get("/api/profile/preferences/notifications", headers=headers).get_json()["loans"] is False

    def test_rejects_unknown_key(self, client, headers):
        response = client.put("/api/profile/preferences/notifications", json={"fraud": True}, headers=headers)
        assert response.status_code == 400


class TestEmailPreferences:
    def test_defaults(self, client, headers):
        assert client.get("/api/profile/preferences/email", headers=headers).get_json() == {
            "emailEnabled": False,
            "emailLoans": True,
            "emailVerifications": True,
            "emailInstitutions": True,
        }

    def test_enable(self, client, headers):
        response = client.put("/api/profile/preferences/email", json={"emailEnabled": True}, headers=headers)
        assert response.status_code == 200
        assert response.get_json()["preferences"]["emailEnabled"] is True
        assert response.get_json()["preferences"]["emailLoans"] is True
