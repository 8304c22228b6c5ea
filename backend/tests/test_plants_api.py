"""API tests for the database plant endpoints."""
import pytest

from urbansprout.models import Plant

NEW_PLANT = {
    "plant_name": "Pea Shoots",
    "image_url": "https://example.com/pea.jpg",
    "description": "Tender shoots for salads.",
    "benefits": "Protein and vitamin K",
    "maintenance": "low",
    "sunlight": "Partial_Sun",
    "space": "small",
    "experience": "beginner",
    "time": "low",
    "category": "vegetables",
    "difficulty": "Easy",
    "growing_time": "14-21 days",
}


def test_list_plants_paginates(client, seeded_db):
    resp = client.get("/plants", params={"limit": 4})
    assert resp.status_code == 200
    body = resp.json()
    assert len(body["plants"]) == 4
    assert body["pagination"] == {
        "page": 1, "limit": 4, "total": 6, "pages": 2, "has_next": True, "has_prev": False,
    }


def test_list_plants_filters(client, seeded_db):
    resp = client.get("/plants", params={"max_days": 45})
    names = {plant["plant_name"] for plant in resp.json()["plants"]}
    assert names == {"Sweet Basil", "Spinach", "Microgreens"}

    resp = client.get("/plants", params={"sunlight": "FULL_SUN", "space": "medium"})
    assert [plant["plant_name"] for plant in resp.json()["plants"]] == ["Cucumber"]


def test_quiz_exact_match(client, seeded_db):
    resp = client.get(
        "/plants/quiz",
        params={"sunlight": "full_sun", "space": "small", "experience": "beginner", "time": "low"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert [plant["name"] for plant in body["plants"]] == ["Cherry Tomato", "Sweet Basil"]
    assert body["total"] == 2
    assert body["query"]["time"] == "low"
    assert body["plants"][0]["growingTime"] == "60-75 days"
    assert body["plants"][0]["daysToGrow"] == 70


def test_quiz_relaxes_criteria(client, seeded_db):
    resp = client.get(
        "/plants/quiz",
        params={"sunlight": "full_sun", "space": "medium", "experience": "beginner", "time": "low"},
    )
    assert [plant["name"] for plant in resp.json()["plants"]] == ["Cherry Tomato", "Sweet Basil"]


def test_quiz_no_match(client, seeded_db):
    resp = client.get(
        "/plants/quiz",
        params={"sunlight": "shade", "space": "large", "experience": "advanced", "time": "high"},
    )
    assert resp.status_code == 200
    assert resp.json()["total"] == 0


def test_quiz_requires_all_answers(client, seeded_db):
    resp = client.get("/plants/quiz", params={"sunlight": "full_sun"})
    assert resp.status_code == 400


def test_search(client, seeded_db):
    resp = client.get("/plants/search", params={"q": "vitamin"})
    assert resp.status_code == 200
    names = {plant["plant_name"] for plant in resp.json()["plants"]}
    assert names == {"Cherry Tomato", "Strawberry", "Microgreens"}


def test_search_requires_query(client, seeded_db):
    assert client.get("/plants/search").status_code == 400


def test_category(client, seeded_db):
    resp = client.get("/plants/category/Herbs")
    assert [plant["plant_name"] for plant in resp.json()["plants"]] == ["Sweet Basil"]


def test_get_plant_not_found(client, seeded_db):
    assert client.get("/plants/9999").status_code == 404


def test_create_requires_admin(client):
    assert client.post("/plants", json=NEW_PLANT).status_code == 401
    resp = client.post("/plants", json=NEW_PLANT, headers={"Authorization": "Bearer wrong"})
    assert resp.status_code == 401


def test_create_applies_defaults(client, admin_headers):
    resp = client.post("/plants", json=NEW_PLANT, headers=admin_headers)
    assert resp.status_code == 201
    body = resp.json()
    assert body["sunlight"] == "partial_sun"
    assert body["days_to_grow"] == 60
    assert body["price"] == "₹20-40"
    assert body["is_active"] is True


def test_create_batch(client, admin_headers, db_session):
    second = dict(NEW_PLANT, plant_name="Radish Sprouts")
    resp = client.post("/plants", json=[NEW_PLANT, second], headers=admin_headers)
    assert resp.status_code == 201
    assert resp.json()["message"] == "2 plants created successfully"
    assert db_session.query(Plant).count() == 2


def test_create_reports_missing_fields(client, admin_headers):
    payload = {key: value for key, value in NEW_PLANT.items() if key not in ("benefits", "category")}
    resp = client.post("/plants", json=payload, headers=admin_headers)
    assert resp.status_code == 400
    assert "benefits" in resp.json()["detail"]
    assert "category" in resp.json()["detail"]


def test_create_requires_time(client, admin_headers, db_session):
    payload = {key: value for key, value in NEW_PLANT.items() if key != "time"}
    resp = client.post("/plants", json=payload, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["detail"] == 'Missing required fields in plant "Pea Shoots": time'
    assert db_session.query(Plant).count() == 0


@pytest.mark.parametrize(
    "field, value",
    [
        ("sunlight", "blinding"),
        ("space", "huge"),
        ("experience", "expert"),
        ("time", "none"),
        ("maintenance", "constant"),
        ("category", "trees"),
        ("difficulty", "Impossible"),
    ],
)
def test_create_rejects_unknown_values(client, admin_headers, db_session, field, value):
    resp = client.post("/plants", json=dict(NEW_PLANT, **{field: value}), headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["detail"].startswith(f"Invalid {field} ")
    assert db_session.query(Plant).count() == 0


def test_create_batch_is_all_or_nothing(client, admin_headers, db_session):
    bad = dict(NEW_PLANT, plant_name="Oak", category="trees")
    resp = client.post("/plants", json=[NEW_PLANT, bad], headers=admin_headers)
    assert resp.status_code == 400
    assert db_session.query(Plant).count() == 0


def test_update_rejects_unknown_values(client, admin_headers):
    plant_id = client.post("/plants", json=NEW_PLANT, headers=admin_headers).json()["id"]
    resp = client.put(f"/plants/{plant_id}", json={"sunlight": "blinding"}, headers=admin_headers)
    assert resp.status_code == 400
    assert client.get(f"/plants/{plant_id}").json()["sunlight"] == "partial_sun"


def test_update_plant(client, admin_headers):
    plant_id = client.post("/plants", json=NEW_PLANT, headers=admin_headers).json()["id"]
    resp = client.put(f"/plants/{plant_id}", json={"price": "₹15-25"}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["price"] == "₹15-25"
    assert resp.json()["plant_name"] == "Pea Shoots"


def test_delete_archives(client, admin_headers):
    plant_id = client.post("/plants", json=NEW_PLANT, headers=admin_headers).json()["id"]
    assert client.delete(f"/plants/{plant_id}", headers=admin_headers).status_code == 204

    plant = client.get(f"/plants/{plant_id}").json()
    assert plant["archived"] is True
    assert plant["is_active"] is False
    assert client.get("/plants").json()["pagination"]["total"] == 0


@pytest.mark.parametrize("method", ["put", "delete"])
def test_missing_plant_for_admin_ops(client, admin_headers, method):
    kwargs = {"json": {"price": "₹1"}} if method == "put" else {}
    resp = getattr(client, method)("/plants/424242", headers=admin_headers, **kwargs)
    assert resp.status_code == 404
