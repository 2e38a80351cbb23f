"""Tests for the meal diary HTTP endpoints."""

import json

from fastapi.testclient import TestClient

from nutrition_diary.api.app import create_app
from tests.conftest import ALICE_TOKEN, BOB_TOKEN, bearer

RICE = {
    "date": "2024-03-01",
    "mealType": "lunch",
    "description": " Rice ",
    "grams": 200,
    "energyPer100": 130,
}


def test_create_then_list_end_to_end(container) -> None:
    client = TestClient(create_app(container))

    created = client.post("/api/meals", json=RICE, headers=bearer(ALICE_TOKEN))

    assert created.status_code == 201
    body = created.json()
    assert body["description"] == "Rice"
    assert body["mealType"] == "lunch"
    assert body["grams"] == 200
    assert body["energyPer100"] == 130
    assert body["proteinPer100"] is None
    assert body["totals"] == {
        "calories": 260,
        "protein": None,
        "fat": None,
        "carbs": None,
    }
    assert "createdAt" in body

    listed = client.get(
        "/api/meals", params={"date": "2024-03-01"}, headers=bearer(ALICE_TOKEN)
    )
    assert listed.status_code == 200
    assert [entry["id"] for entry in listed.json()] == [body["id"]]

    summary = client.get(
        "/api/meals/summary",
        params={"date": "2024-03-01"},
        headers=bearer(ALICE_TOKEN),
    ).json()
    assert [entry["id"] for entry in summary["meals"]["lunch"]] == [body["id"]]
    assert list(summary["meals"]) == ["breakfast", "lunch", "dinner", "snack", "other"]
    assert summary["totals"]["calories"] == 260


def test_list_order_follows_meal_type_then_time(container) -> None:
    client = TestClient(create_app(container))
    for meal_type, name in [
        ("snack", "nuts"),
        ("breakfast", "oats"),
        ("breakfast", "coffee"),
    ]:
        payload = {**RICE, "mealType": meal_type, "description": name}
        client.post("/api/meals", json=payload, headers=bearer(ALICE_TOKEN))

    listed = client.get(
        "/api/meals", params={"date": "2024-03-01"}, headers=bearer(ALICE_TOKEN)
    ).json()

    assert [(e["mealType"], e["description"]) for e in listed] == [
        ("breakfast", "oats"),
        ("breakfast", "coffee"),
        ("snack", "nuts"),
    ]


def test_missing_token_is_rejected_before_body(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/meals",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Missing Authorization header"}


def test_invalid_token_is_rejected(container) -> None:
    client = TestClient(create_app(container))

    response = client.get(
        "/api/meals", params={"date": "2024-03-01"}, headers=bearer("forged")
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid or expired token"}


def test_validation_errors_return_messages(container) -> None:
    client = TestClient(create_app(container))
    headers = bearer(ALICE_TOKEN)

    bad_date = client.post(
        "/api/meals", json={**RICE, "date": "2024-1-5"}, headers=headers
    )
    bad_type = client.post(
        "/api/meals", json={**RICE, "mealType": "Breakfast"}, headers=headers
    )
    bad_grams = client.post("/api/meals", json={**RICE, "grams": 0}, headers=headers)
    empty = client.post(
        "/api/meals", json={**RICE, "description": " "}, headers=headers
    )

    assert bad_date.status_code == 400
    assert bad_date.json() == {"error": "Invalid or missing date (YYYY-MM-DD)."}
    assert bad_type.json()["error"].startswith("mealType must be one of")
    assert bad_grams.json() == {"error": "grams must be a positive number."}
    assert empty.json() == {"error": "Description is required."}


def test_malformed_body_is_bad_request(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/meals", json=[1, 2], headers=bearer(ALICE_TOKEN))

    assert response.status_code == 400
    assert response.json() == {"error": "Request body must be a JSON object."}


def _post_raw(client: TestClient, body: str):
    headers = {**bearer(ALICE_TOKEN), "Content-Type": "application/json"}
    return client.post("/api/meals", content=body, headers=headers)


def _rice_json_with(field: str, literal: str) -> str:
    base = json.dumps({key: value for key, value in RICE.items() if key != field})
    return f'{base[:-1]}, "{field}": {literal}}}'


def test_grams_outside_float_range_are_rejected(container) -> None:
    client = TestClient(create_app(container))

    for grams in ["1e400", "1e-400"]:
        response = client.post(
            "/api/meals", json={**RICE, "grams": grams}, headers=bearer(ALICE_TOKEN)
        )

        assert response.status_code == 400
        assert response.json() == {"error": "grams must be a positive number."}


def test_oversized_nutrient_is_stored_as_unknown(container) -> None:
    client = TestClient(create_app(container))

    response = _post_raw(client, _rice_json_with("energyPer100", "1" + "0" * 400))

    assert response.status_code == 201
    assert response.json()["energyPer100"] is None
    assert response.json()["totals"]["calories"] is None


def test_integer_literal_past_digit_limit_is_bad_request(container) -> None:
    client = TestClient(create_app(container))

    response = _post_raw(client, _rice_json_with("grams", "1" + "0" * 5000))

    assert response.status_code == 400
    assert response.json() == {"error": "Request body must be a JSON object."}


def test_list_requires_valid_date(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/meals", headers=bearer(ALICE_TOKEN))

    assert response.status_code == 400
    assert response.json() == {
        "error": "Missing or invalid date parameter (YYYY-MM-DD)."
    }


def test_delete_is_scoped_to_owner_and_idempotent(container) -> None:
    client = TestClient(create_app(container))
    created = client.post("/api/meals", json=RICE, headers=bearer(ALICE_TOKEN))
    meal_id = created.json()["id"]

    foreign = client.delete(f"/api/meals/{meal_id}", headers=bearer(BOB_TOKEN))
    first = client.delete(f"/api/meals/{meal_id}", headers=bearer(ALICE_TOKEN))
    second = client.delete(f"/api/meals/{meal_id}", headers=bearer(ALICE_TOKEN))

    assert foreign.json() == {"success": True, "deleted": False}
    assert first.json() == {"success": True, "deleted": True}
    assert second.status_code == 200
    assert second.json() == {"success": True, "deleted": False}


def test_other_users_do_not_see_entries(container) -> None:
    client = TestClient(create_app(container))
    client.post("/api/meals", json=RICE, headers=bearer(ALICE_TOKEN))

    listed = client.get(
        "/api/meals", params={"date": "2024-03-01"}, headers=bearer(BOB_TOKEN)
    )

    assert listed.json() == []


def test_delete_with_malformed_id(container) -> None:
    client = TestClient(create_app(container))

    response = client.delete("/api/meals/not-a-uuid", headers=bearer(ALICE_TOKEN))

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid meal id."}


def test_store_fault_is_opaque(container, meal_repository) -> None:
    client = TestClient(create_app(container))
    meal_repository.fail_with = RuntimeError("relation meals does not exist")

    response = client.post("/api/meals", json=RICE, headers=bearer(ALICE_TOKEN))

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_health(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/health").json() == {"status": "ok"}
