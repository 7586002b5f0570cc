"""
Tests for calculation and share API endpoints.
"""

import pytest

# Test client is provided by conftest.py


# ============================================================================
# CALCULATION API TESTS
# ============================================================================

class TestCalculationAPI:
    """Test calculation endpoints."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_defaults(self, client):
        """Test default inputs and slider bounds."""
        response = client.get("/api/calculate/defaults")
        assert response.status_code == 200
        data = response.json()
        assert data["inputs"]["purchase_price"] == 85000
        assert data["bounds"]["mortgage_rate"] == {
            "min": 4,
            "max": 12,
            "step": 0.25,
            "advanced": True,
        }

    def test_derived(self, client):
        """Test derived values for default inputs."""
        response = client.post("/api/calculate/derived", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["derived"]["down_payment"] == 21250
        assert data["derived"]["loan_amount"] == 63750
        assert data["derived"]["monthly_mortgage"] == pytest.approx(445.75, abs=0.01)
        assert data["monthly_expenses"]["total"] == pytest.approx(288)

    def test_derived_below_market(self, client):
        response = client.post(
            "/api/calculate/derived",
            json={"purchase_price": 70000, "below_market_percent": 30},
        )
        assert response.status_code == 200
        assert response.json()["derived"]["instant_equity"] == pytest.approx(30000)

    def test_full_discount_rejected(self, client):
        """Test a 100% below-market discount fails validation."""
        response = client.post(
            "/api/calculate/projection", json={"below_market_percent": 100}
        )
        assert response.status_code == 422

    def test_zero_term_rejected(self, client):
        response = client.post("/api/calculate/projection", json={"mortgage_term_years": 0})
        assert response.status_code == 422

    def test_non_finite_result_rejected(self, client):
        """Test overflowing inputs return 422 instead of invalid JSON."""
        response = client.post(
            "/api/calculate/derived",
            json={"purchase_price": 1e308, "below_market_percent": 50},
        )
        assert response.status_code == 422
        assert "non-finite" in response.json()["detail"]

    def test_projection_overflow_rejected(self, client):
        """Test an overflowing projection returns 422 before rounding."""
        for sampled in (False, True):
            response = client.post(
                "/api/calculate/projection",
                json={"purchase_price": 1e308, "sampled": sampled},
            )
            assert response.status_code == 422
            assert "non-finite" in response.json()["detail"]

    def test_projection(self, client):
        """Test full projection response."""
        response = client.post("/api/calculate/projection", json={})
        assert response.status_code == 200
        data = response.json()

        assert len(data["points"]) == 361
        assert data["points"][0]["equity"] == 21250
        assert data["points"][12]["label"] == "2.01"
        assert data["summary"]["term_end"]["mortgage_balance"] == 0
        assert data["summary"]["mid_term"]["month"] == 180
        assert len(data["wealth_breakdown"]) == 31
        assert data["formatted"]["term_end_net_worth"].startswith("$")

    def test_projection_sampled(self, client):
        response = client.post("/api/calculate/projection", json={"sampled": True})
        assert response.status_code == 200
        months = [p["month"] for p in response.json()["points"]]
        assert len(months) == 121
        assert months[-1] == 360

    def test_projection_with_start_date(self, client):
        """Test calendar dates are attached when a start date is given."""
        response = client.post(
            "/api/calculate/projection",
            json={"start_date": "2025-01-15", "mortgage_term_years": 10, "sampled": True},
        )
        assert response.status_code == 200
        points = response.json()["points"]
        assert points[0]["date"] == "2025-01-15"
        by_month = {p["month"]: p for p in points}
        assert by_month[12]["date"] == "2026-01-15"
        assert by_month[120]["date"] == "2035-01-15"

    def test_year1(self, client):
        """Test year-1 engines breakdown."""
        response = client.post("/api/calculate/year1", json={})
        assert response.status_code == 200
        engines = response.json()["with_leverage"]["engines"]
        total = sum(engines[name]["percent"] for name in engines)
        assert total == pytest.approx(100)

    def test_amortization(self, client):
        """Test amortization schedule endpoint."""
        response = client.post(
            "/api/calculate/amortization",
            json={
                "principal": 100000,
                "annual_rate_percent": 6,
                "term_years": 5,
                "months_paid": 60,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert len(data["schedule"]) == 60
        assert data["remaining_balance"] == 0
        assert data["total_principal"] == pytest.approx(100000, abs=1)

    def test_amortization_without_balance_query(self, client):
        response = client.post(
            "/api/calculate/amortization",
            json={"principal": 100000, "annual_rate_percent": 6, "term_years": 5},
        )
        assert response.status_code == 200
        assert "remaining_balance" not in response.json()


# ============================================================================
# SHARE API TESTS
# ============================================================================

class TestShareAPI:
    """Test share link endpoints."""

    def test_encode(self, client):
        response = client.post(
            "/api/share/encode",
            json={"purchase_price": 120000, "base_url": "https://example.com/calc"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["params"] == {"pp": "120000"}
        assert data["url"] == "https://example.com/calc?pp=120000"

    def test_encode_defaults(self, client):
        response = client.post(
            "/api/share/encode", json={"base_url": "https://example.com/calc"}
        )
        assert response.json() == {"params": {}, "url": "https://example.com/calc"}

    def test_decode(self, client):
        response = client.get("/api/share/decode?pp=120000&mi=6.5&mr=oops&utm=x")
        assert response.status_code == 200
        inputs = response.json()["inputs"]
        assert inputs["purchase_price"] == 120000
        assert inputs["mortgage_rate"] == 6.5
        assert inputs["monthly_rent"] == 1100

    def test_decode_non_finite_values(self, client):
        """Test infinite and overflowing values fall back to defaults."""
        response = client.get("/api/share/decode?pp=inf&mr=-inf&mi=1e400")
        assert response.status_code == 200
        inputs = response.json()["inputs"]
        assert inputs["purchase_price"] == 85000
        assert inputs["monthly_rent"] == 1100
        assert inputs["mortgage_rate"] == 7.5
