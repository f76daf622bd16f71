"""Tests for conversion endpoints."""

import pytest
from fastapi.testclient import TestClient

from serving_units.api.app import create_app
from serving_units.containers import AppContainer


def test_health(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_conversions_endpoint(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/conversions",
        json={
            "food_name": "Butter",
            "servings": [
                {"serving_id": "tbsp", "serving_size": "1 tbsp", "calories": 102},
                {"serving_id": "100g", "serving_size": "100 g", "calories": 717},
            ],
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["bridge_serving_id"] == "100g"
    cup = next(opt for opt in data["options"] if opt["unit_key"] == "cup")
    assert cup["label"] == "1 cup"
    assert cup["factor"] == pytest.approx(2.27)


def test_conversions_endpoint_without_bridge(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/conversions",
        json={
            "food_name": "apple",
            "servings": [{"serving_id": "1", "serving_size": "1 medium apple"}],
        },
    )

    assert response.status_code == 200
    assert response.json() == {"bridge_serving_id": None, "options": []}


def test_nutrition_endpoint(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/conversions/nutrition",
        json={
            "food_name": "chicken breast",
            "servings": [
                {
                    "serving_id": "100g",
                    "serving_size": "100 g",
                    "calories": 165,
                    "protein_g": 31,
                    "fat_g": 3.6,
                    "carbs_g": 0,
                }
            ],
            "unit_key": "kg",
            "quantity": 2,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["calories"] == pytest.approx(3300)
    assert data["protein_g"] == pytest.approx(620)


def test_nutrition_endpoint_unknown_conversion(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/conversions/nutrition",
        json={
            "food_name": "granite",
            "servings": [{"serving_id": "100g", "serving_size": "100 g"}],
            "unit_key": "cup",
            "quantity": 1,
        },
    )

    assert response.status_code == 404


def test_nutrition_endpoint_rejects_zero_quantity(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/conversions/nutrition",
        json={"food_name": "rice", "servings": [], "unit_key": "g", "quantity": 0},
    )

    assert response.status_code == 422


def test_parse_endpoint(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    ok = client.post("/servings/parse", json={"text": "1/2 tsp"})
    bad = client.post("/servings/parse", json={"text": "1 medium apple"})

    assert ok.status_code == 200
    assert ok.json() == {"amount": 0.5, "unit_key": "tsp", "domain": "volume"}
    assert bad.status_code == 422


def test_conversions_endpoint_with_underflowing_serving(
    container: AppContainer,
) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/conversions",
        json={
            "food_name": "granite",
            "servings": [
                {"serving_id": "tiny", "serving_size": "0." + "0" * 323 + "5 mg"}
            ],
        },
    )

    assert response.status_code == 200
    assert response.json() == {"bridge_serving_id": "tiny", "options": []}
