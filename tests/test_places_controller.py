from __future__ import annotations

import json

import pytest
from sqlalchemy.exc import OperationalError

PLACE_KEYS = {"place_id", "place_name", "address", "latitude", "longitude", "detail"}


def test_list_places_empty_returns_empty_array(client):
    response = client.get("/api/places")

    assert response.status_code == 200
    assert response.get_json() == []


def test_save_place_returns_place_with_assigned_id(client, place_payload):
    response = client.post("/api/places/save", json=place_payload)

    assert response.status_code == 201
    body = response.get_json()
    assert body["place_id"] is not None
    assert body["place_name"] == "Test"
    assert body["address"] == "Addr"
    assert body["latitude"] == 36.62
    assert body["longitude"] == 127.45
    assert body["detail"] is None


def test_save_place_keeps_detail(client, place_payload):
    response = client.post("/api/places/save", json={**place_payload, "detail": "Near the library"})

    assert response.status_code == 201
    assert response.get_json()["detail"] == "Near the library"


def test_list_places_after_two_saves(client, place_payload):
    first = client.post("/api/places/save", json=place_payload).get_json()
    second = client.post("/api/places/save", json=place_payload).get_json()

    response = client.get("/api/places")

    assert response.status_code == 200
    body = response.get_json()
    assert len(body) == 2
    for item in body:
        assert set(item) == PLACE_KEYS
    assert {item["place_id"] for item in body} == {first["place_id"], second["place_id"]}
    assert first["place_id"] != second["place_id"]


def test_save_place_ignores_client_place_id(client, place_payload):
    response = client.post("/api/places/save", json={**place_payload, "place_id": 77})

    assert response.status_code == 201
    assert response.get_json()["place_id"] != 77


def test_save_place_missing_field_is_client_error(client, place_payload):
    payload = dict(place_payload)
    payload.pop("latitude")

    response = client.post("/api/places/save", json=payload)

    assert response.status_code == 400
    body = response.get_json()
    assert body["resultCode"] == "VAL002"
    assert [err["field"] for err in body["details"]["errors"]] == ["latitude"]
    assert client.get("/api/places").get_json() == []


def test_save_place_wrong_type_is_client_error(client, place_payload):
    response = client.post("/api/places/save", json={**place_payload, "longitude": "east"})

    assert response.status_code == 400
    fields = [err["field"] for err in response.get_json()["details"]["errors"]]
    assert fields == ["longitude"]


@pytest.mark.parametrize("field", ["latitude", "longitude"])
def test_save_place_boolean_coordinate_is_client_error(client, place_payload, field):
    response = client.post("/api/places/save", json={**place_payload, field: True})

    assert response.status_code == 400
    assert [err["field"] for err in response.get_json()["details"]["errors"]] == [field]
    assert client.get("/api/places").get_json() == []


@pytest.mark.parametrize("raw_value", ["1e400", "-1e400", "NaN", "Infinity"])
def test_save_place_non_finite_coordinate_is_client_error(client, raw_value):
    body = f'{{"place_name": "T", "address": "A", "latitude": {raw_value}, "longitude": 1.0}}'

    response = client.post("/api/places/save", data=body, content_type="application/json")

    assert response.status_code == 400
    assert response.get_json()["resultCode"] == "VAL002"

    listing = client.get("/api/places")
    assert listing.status_code == 200
    assert json.loads(listing.get_data(as_text=True)) == []


def test_save_place_invalid_json(client):
    response = client.post("/api/places/save", data="{not json", content_type="application/json")

    assert response.status_code == 400
    assert response.get_json()["resultCode"] == "INVALID_JSON"


def test_save_place_non_object_body(client):
    response = client.post("/api/places/save", json=["Test", "Addr"])

    assert response.status_code == 400
    assert response.get_json()["resultCode"] == "VAL002"


def test_get_place_by_id(client, place_payload):
    created = client.post("/api/places/save", json=place_payload).get_json()

    response = client.get(f"/api/places/{created['place_id']}")

    assert response.status_code == 200
    assert response.get_json() == created


def test_get_place_by_id_not_found(client):
    response = client.get("/api/places/999")

    assert response.status_code == 404
    body = response.get_json()
    assert body["resultCode"] == "NF001"
    assert body["details"]["identifier"] == "999"


def test_delete_is_not_exposed(client, place_payload):
    created = client.post("/api/places/save", json=place_payload).get_json()

    response = client.delete(f"/api/places/{created['place_id']}")

    assert response.status_code == 405
    assert "GET" in response.headers["Allow"]
    assert "DELETE" not in response.headers["Allow"]
    assert response.get_json()["resultCode"] == "METHOD_NOT_ALLOWED"
    assert len(client.get("/api/places").get_json()) == 1


def test_storage_error_surfaces_as_server_error(app, client, place_payload, monkeypatch):
    repository = app.extensions["sinabro"].place_repository

    def _broken_save(place):
        raise OperationalError("INSERT INTO places", {}, Exception("connection lost"))

    monkeypatch.setattr(repository, "save", _broken_save)

    response = client.post("/api/places/save", json=place_payload)

    assert response.status_code == 500
    assert response.get_json()["resultCode"] == "DATABASE_ERROR"


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json()["status"] == "ok"
