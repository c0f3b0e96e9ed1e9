"""
Tests for the marketing site content, demo and contact form.
"""

from credguard.content import DEMO_MOCK_DATA, SECTIONS
from credguard.models.inquiry import SalesInquiry
from tests.conftest import auth_headers


def test_full_site(client):
    body = client.get("/api/site").get_json()
    assert set(body) == set(SECTIONS)
    assert body["hero"]["headline"] == "Your Credit Identity."
    assert [s["value"] for s in body["stats"]] == ["180+", "50M+", "2,500+", "0"]
    assert len(body["features"]) == 6
    assert len(body["how_it_works"]) == 4
    assert len(body["security"]) == 4
    assert len(body["compliance"]["regulations"]) == 6
    assert body["cta"]["headline"] == "Ready to Build Global Credit Trust?"


def test_single_section(client):
    response = client.get("/api/site/how_it_works")
    assert response.status_code == 200
    assert response.get_json()[0]["highlight"] == "100% Local Processing"


def test_unknown_section(client):
    assert client.get("/api/site/pricing").status_code == 404


class TestDemo:
    def test_mock_mode(self, client):
        body = client.get("/api/site/demo").get_json()
        assert body["mode"] == "mock"
        assert len(body["steps"]) == 5
        assert body["data"]["encrypted_vector"] == DEMO_MOCK_DATA["encrypted_vector"]

    def test_real_mode_requires_sign_in(self, client):
        assert client.get("/api/site/demo?mode=real").status_code == 401

    def test_real_mode_uses_identity(self, client, headers):
        identity = client.get("/api/identity", headers=headers).get_json()["identity"]

        body = client.get("/api/site/demo?mode=real", headers=headers).get_json()
        assert body["mode"] == "real"
        assert body["data"]["encrypted_vector"] == identity["encrypted_vector"]
        assert body["data"]["raw_data"]["repaymentDiscipline"] == "85%"
        assert body["data"]["raw_data"]["trustScore"] == 750

    def test_invalid_token_is_anonymous(self, client):
        body = client.get("/api/site/demo", headers=auth_headers("garbage")).get_json()
        assert body["mode"] == "mock"


class TestContact:
    def test_creates_inquiry(self, app, client):
        response = client.post("/api/site/contact", json={
            "first_name": "Jane",
            "last_name": "Doe",
            "email": "Jane@Bank.example",
            "company": "Example Bank",
            "message": "Tell me more",
        })
        assert response.status_code == 201
        assert response.get_json()["message"] == "Our sales team will contact you within 24 hours."

        with app.app_context():
            inquiry = SalesInquiry.query.first()
            assert inquiry.email == "jane@bank.example"
            assert inquiry.status == "new"

    def test_requires_name_and_email(self, client):
        assert client.post("/api/site/contact", json={"first_name": "Jane"}).status_code == 400

    def test_invalid_email(self, client):
        response = client.post("/api/site/contact", json={"first_name": "J", "last_name": "D", "email": "nope"})
        assert response.status_code == 400


def test_health(client):
    body = client.get("/api/health").get_json()
    assert body["status"] == "healthy"
    assert body["database"]["status"] == "connected"


def test_unknown_route_is_json(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.get_json() == {"message": "Resource not found"}
