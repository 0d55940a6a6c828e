"""Tests for public submission intake."""
from tests.conftest import ADMIN_HEADERS, submit


class TestSubmissionIntake:
    """POST /api/submissions validation and defaults."""

    def test_create_submission_is_pending(self, client):
        data = submit(client, hospital="St. Mary's", wait_time=45)
        assert data["hospital_name"] == "St. Mary's"
        assert data["wait_time"] == 45
        assert data["status"] == "pending"
        assert "submission_id" in data
        assert "timestamp" in data

    def test_client_status_is_ignored(self, client):
        resp = client.post("/api/submissions/", json={
            "hospital_name": "Mercy",
            "wait_time": 10,
            "status": "approved",
        })
        assert resp.status_code == 201
        assert resp.json()["status"] == "pending"

    def test_numeric_string_wait_time_accepted(self, client):
        data = submit(client, wait_time=" 25 ")
        assert data["wait_time"] == 25

    def test_hospital_name_is_stripped(self, client):
        data = submit(client, hospital="  City Hospital  ")
        assert data["hospital_name"] == "City Hospital"

    def test_non_numeric_wait_time_rejected(self, client):
        """waitTime = "abc" → 400 and nothing stored."""
        resp = client.post("/api/submissions/", json={"hospital_name": "Mercy", "wait_time": "abc"})
        assert resp.status_code == 400
        pending = client.get("/api/admin/submissions/pending", headers=ADMIN_HEADERS).json()
        assert pending == []

    def test_negative_wait_time_rejected(self, client):
        resp = client.post("/api/submissions/", json={"hospital_name": "Mercy", "wait_time": -5})
        assert resp.status_code == 400

    def test_fractional_wait_time_rejected(self, client):
        resp = client.post("/api/submissions/", json={"hospital_name": "Mercy", "wait_time": 12.5})
        assert resp.status_code == 400

    def test_boolean_wait_time_rejected(self, client):
        resp = client.post("/api/submissions/", json={"hospital_name": "Mercy", "wait_time": True})
        assert resp.status_code == 400

    def test_missing_wait_time_rejected(self, client):
        resp = client.post("/api/submissions/", json={"hospital_name": "Mercy"})
        assert resp.status_code == 400

    def test_empty_hospital_name_rejected(self, client):
        resp = client.post("/api/submissions/", json={"hospital_name": "   ", "wait_time": 10})
        assert resp.status_code == 400

    def test_missing_body_rejected(self, client):
        resp = client.post("/api/submissions/")
        assert resp.status_code == 400

    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_oversized_wait_time_rejected(self, client):
        resp = client.post("/api/submissions/", json={"hospital_name": "A", "wait_time": "99999999999999999999"})
        assert resp.status_code == 400
        resp = client.post("/api/submissions/", json={"hospital_name": "A", "wait_time": 2_147_483_648})
        assert resp.status_code == 400
        assert client.get("/api/admin/submissions/pending", headers=ADMIN_HEADERS).json() == []

    def test_overlong_hospital_name_rejected(self, client):
        resp = client.post("/api/submissions/", json={"hospital_name": "A" * 201, "wait_time": 10})
        assert resp.status_code == 400

    def test_multiline_hospital_name_rejected(self, client):
        resp = client.post("/api/submissions/", json={"hospital_name": "A\nBcc: x@example.com", "wait_time": 10})
        assert resp.status_code == 400
        assert client.get("/api/admin/submissions/pending", headers=ADMIN_HEADERS).json() == []
