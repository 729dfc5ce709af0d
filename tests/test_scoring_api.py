"""Tests for the onboarding scoring endpoint."""

from fastapi.testclient import TestClient

from broker_scoring.main import app

client = TestClient(app)


def test_health_check():
    """Test that /health returns 200 with status ok."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


class TestScoreEndpoint:
    def test_scores_valid_submission(self, mid_case):
        response = client.post("/v1/onboarding/score", json=mid_case)

        assert response.status_code == 200
        data = response.json()
        assert data["result"]["successProbability"] == 55
        assert data["result"]["successBand"] == "Medium"
        assert data["result"]["primarySalesAngle"] == "Capacity Planning"
        assert data["result"]["riskFlags"] == []
        assert data["breakdown"]["operational"]["score"] == 59
        assert data["breakdown"]["intent"]["factors"]["capacity_ratio"]["answer"] == "10/20"
        assert data["explanation"].startswith("Operational readiness")

    def test_flags_serialized_as_names(self, worst_case):
        response = client.post("/v1/onboarding/score", json=worst_case)

        assert response.status_code == 200
        assert "capacity-undefined" in response.json()["result"]["riskFlags"]

    def test_invalid_submission_is_422(self, best_case):
        best_case["teamSize"] = "huge"
        response = client.post("/v1/onboarding/score", json=best_case)

        assert response.status_code == 422
        assert any(err.startswith("teamSize") for err in response.json()["detail"])

    def test_fractional_capacity_is_422(self, best_case):
        best_case["maxCapacityWeekly"] = 12.5
        response = client.post("/v1/onboarding/score", json=best_case)

        assert response.status_code == 422
