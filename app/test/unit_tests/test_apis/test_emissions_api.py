"""
API tests for the emissions endpoint following kkb_fastapi pattern.
"""

import pytest

from app.test.factory.emission_factor import EmissionFactorFactory


@pytest.mark.asyncio
async def test_calculate_food_emission(test_async_client):
    response = await test_async_client.post(
        "/api/v1/emissions/calculate",
        json={"category": "Food", "food": {"subcategory": "Red Meat", "amountKg": 0.25}},
    )
    assert response.status_code == 200

    data = response.json()
    assert data["emission_kg"] == 5.9
    assert data["factor_key"] == "food.red_meat.kg"
    assert data["category"] == "food"
    assert data["unit"] == "kg"


@pytest.mark.asyncio
async def test_calculate_transport_emission(test_async_client):
    response = await test_async_client.post(
        "/api/v1/emissions/calculate",
        json={"category": "Transport", "transport": {"mode": "Bus", "totalMinutes": 60}},
    )
    assert response.status_code == 200
    assert response.json()["quantity"] == 30.0


@pytest.mark.asyncio
async def test_calculate_uses_stored_override(test_async_client):
    await EmissionFactorFactory(key="food.red_meat.kg", unit="kg", co2e_factor=20.0)

    response = await test_async_client.post(
        "/api/v1/emissions/calculate",
        json={"food": {"subcategory": "Red Meat", "amountKg": 0.5}},
    )
    assert response.status_code == 200
    assert response.json()["emission_kg"] == 10.0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body, message",
    [
        ({"food": {"subcategory": "Red Meat", "amountKg": 0}}, "Quantity must be > 0"),
        ({"food": {"subcategory": "Caviar", "amountKg": 1}}, "No emission factor key resolved"),
        ({"category": "Food"}, "Unsupported activity payload"),
    ],
)
async def test_calculate_rejects_invalid_activity(test_async_client, body, message):
    response = await test_async_client.post("/api/v1/emissions/calculate", json=body)

    assert response.status_code == 422
    assert response.json()["detail"] == message


@pytest.mark.asyncio
async def test_calculate_rejects_non_numeric_quantity(test_async_client):
    response = await test_async_client.post(
        "/api/v1/emissions/calculate",
        json={"food": {"subcategory": "Dairy", "amountKg": "lots"}},
    )
    assert response.status_code == 422
