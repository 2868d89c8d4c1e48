"""Tests for the API endpoints."""

import math
from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.api.routes import router
from src.calculators.pay_period import SalaryResult


@pytest.fixture
def app() -> FastAPI:
    """Create a test app with the router but no lifespan."""
    test_app = FastAPI()
    test_app.include_router(router)
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


def test_health(client: TestClient) -> None:
    """GET /health returns ok status and the modelled tax year."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "tax_year": "2023-24"}


def test_create_app_serves_routes() -> None:
    with TestClient(create_app()) as client:
        assert client.get("/health").status_code == 200


def test_salary_defaults(client: TestClient) -> None:
    data = client.get("/salary/defaults").json()
    assert data["period"] == "annually"
    assert data["hours_per_day"] == 8


def test_uk_tax_defaults(client: TestClient) -> None:
    data = client.get("/uk-tax/defaults").json()
    assert data["tax_code"] == "1257L"
    assert data["is_scotland_resident"] is False


# --- /salary/convert ---


def test_convert_hourly(client: TestClient) -> None:
    response = client.post("/salary/convert", json={"amount": 40, "period": "hourly"})
    assert response.status_code == 200
    data = response.json()
    assert data["result"]["daily"] == 320
    assert data["result"]["annually"] == pytest.approx(83200)
    active = [row for row in data["breakdown"] if row["active"]]
    assert [row["period"] for row in active] == ["hourly"]
    assert data["breakdown"][2]["formatted"] == "$1,600.00"


def test_convert_custom_schedule(client: TestClient) -> None:
    response = client.post(
        "/salary/convert",
        json={"amount": 600, "period": "weekly", "hours_per_day": 6, "days_per_week": 4},
    )
    assert response.status_code == 200
    assert response.json()["result"]["hourly"] == 25


def test_convert_zero_amount_rejected(client: TestClient) -> None:
    response = client.post("/salary/convert", json={"amount": 0})
    assert response.status_code == 422
    assert response.json() == {"error": "Please enter a valid amount"}


@pytest.mark.parametrize(
    "body",
    [
        {"amount": -5},
        {"amount": 100, "hours_per_day": 0},
        {"amount": 100, "hours_per_day": 25},
        {"amount": 100, "days_per_week": 8},
        {"amount": 100, "weeks_per_year": 53},
        {"amount": 100, "period": "fortnightly"},
        {},
    ],
)
def test_convert_out_of_bounds(client: TestClient, body: dict) -> None:  # type: ignore[type-arg]
    response = client.post("/salary/convert", json=body)
    assert response.status_code == 422


def test_convert_unexpected_failure(client: TestClient) -> None:
    with patch("src.api.routes.convert_salary_period", side_effect=RuntimeError("boom")):
        response = client.post("/salary/convert", json={"amount": 100})
    assert response.status_code == 500
    assert response.json() == {"error": "Error calculating salary"}


# --- /uk-tax/calculate ---


def test_uk_tax_annual(client: TestClient) -> None:
    response = client.post("/uk-tax/calculate", json={"amount": 30000})
    assert response.status_code == 200
    data = response.json()
    assert data["tax_year"] == "2023-24"
    assert data["result"]["take_home"] == pytest.approx(24422.4)
    assert data["result"]["national_insurance"] == pytest.approx(2091.6)
    assert data["breakdown"][0] == {
        "label": "Take home",
        "amount": pytest.approx(24422.4),
        "formatted": "£24,422",
    }


def test_uk_tax_monthly_with_pension(client: TestClient) -> None:
    response = client.post(
        "/uk-tax/calculate",
        json={"amount": 2500, "period": "monthly", "pension": 10},
    )
    assert response.status_code == 200
    assert response.json()["result"]["take_home"] == pytest.approx(22382.4 / 12)


def test_uk_tax_zero_amount_rejected(client: TestClient) -> None:
    response = client.post("/uk-tax/calculate", json={"amount": 0})
    assert response.status_code == 422
    assert response.json()["error"] == "Please enter a valid amount"


@pytest.mark.parametrize(
    "body",
    [
        {"amount": 30000, "pension": 101},
        {"amount": 30000, "bonus": -1},
        {"amount": 30000, "period": "weekly"},
    ],
)
def test_uk_tax_out_of_bounds(client: TestClient, body: dict) -> None:  # type: ignore[type-arg]
    assert client.post("/uk-tax/calculate", json=body).status_code == 422


def test_uk_tax_unexpected_failure(client: TestClient) -> None:
    with patch("src.api.routes.calculate_uk_tax", side_effect=ValueError("boom")):
        response = client.post("/uk-tax/calculate", json={"amount": 30000})
    assert response.status_code == 500
    assert response.json()["error"] == "Error calculating salary"


@pytest.mark.parametrize(
    ("path", "body"),
    [
        ("/salary/convert", {"amount": 1e23, "period": "hourly"}),
        ("/uk-tax/calculate", {"amount": 1e308, "period": "monthly"}),
        ("/uk-tax/calculate", {"amount": 30000, "bonus": 1e12}),
    ],
)
def test_amounts_above_limit_rejected(client: TestClient, path: str, body: dict) -> None:  # type: ignore[type-arg]
    assert client.post(path, json=body).status_code == 422


def test_non_finite_result_returns_json_error(client: TestClient) -> None:
    overflow = SalaryResult(math.inf, math.inf, math.inf, math.inf, math.nan)
    with patch("src.api.routes.convert_salary_period", return_value=overflow):
        response = client.post("/salary/convert", json={"amount": 100})
    assert response.status_code == 500
    assert response.json() == {"error": "Error calculating salary"}


def test_breakdown_failure_returns_json_error(client: TestClient) -> None:
    with patch("src.api.routes.tax_breakdown", side_effect=ArithmeticError("boom")):
        response = client.post("/uk-tax/calculate", json={"amount": 30000})
    assert response.status_code == 500
    assert response.json() == {"error": "Error calculating salary"}
