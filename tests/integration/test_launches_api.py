"""Integration tests for the launches API."""

import pytest
from fastapi import status

FUTURE = "2099-06-15T09:30:00Z"


@pytest.fixture
def rocket_id(client):
    response = client.post(
        "/rockets", json={"name": "Falcon", "range": "orbital", "capacity": 6}
    )
    return response.json()["id"]


def _launch(rocket_id: str, **overrides):
    payload = {
        "rocketId": rocket_id,
        "launchDateTime": FUTURE,
        "price": 1500.5,
        "minPassengers": 2,
    }
    payload.update(overrides)
    return payload


def test_create_launch(client, rocket_id):
    response = client.post("/launches", json=_launch(rocket_id))

    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["id"] == "launch-1"
    assert body["rocketId"] == rocket_id
    assert body["price"] == 1500.5
    assert body["minPassengers"] == 2
    assert body["availableSeats"] == 6
    assert body["launchDateTime"].startswith("2099-06-15T09:30:00")


def test_create_launch_ignores_available_seats(client, rocket_id):
    response = client.post("/launches", json=_launch(rocket_id, availableSeats=1))

    assert response.json()["availableSeats"] == 6


def test_create_launch_all_errors_in_order(client):
    response = client.post(
        "/launches",
        json={
            "rocketId": "rocket-404",
            "launchDateTime": "2000-01-01T00:00:00Z",
            "price": -1,
            "minPassengers": "many",
        },
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"] == [
        {"field": "rocketId", "message": "Rocket reference is invalid"},
        {
            "field": "launchDateTime",
            "message": "Launch date and time must be in the future",
        },
        {"field": "price", "message": "Price must be a positive number"},
        {"field": "minPassengers", "message": "Minimum passengers must be an integer"},
    ]


def test_create_launch_min_passengers_above_capacity(client, rocket_id):
    response = client.post("/launches", json=_launch(rocket_id, minPassengers=7))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"] == [
        {
            "field": "minPassengers",
            "message": "Minimum passengers must be an integer between 1 and 6 "
            "(rocket capacity)",
        }
    ]


def test_create_launch_invalid_date_format(client, rocket_id):
    response = client.post("/launches", json=_launch(rocket_id, launchDateTime="soon"))

    assert response.json()["errors"] == [
        {
            "field": "launchDateTime",
            "message": "Launch date and time must be a valid ISO 8601 format",
        }
    ]


def test_update_launch_recomputes_seats(client, rocket_id):
    launch_id = client.post("/launches", json=_launch(rocket_id)).json()["id"]
    client.put(f"/rockets/{rocket_id}", json={"capacity": 9})

    assert client.get(f"/launches/{launch_id}").json()["availableSeats"] == 6

    response = client.put(f"/launches/{launch_id}", json={"minPassengers": 9})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["availableSeats"] == 9
    assert response.json()["minPassengers"] == 9


def test_launch_survives_rocket_deletion_until_updated(client, rocket_id):
    launch_id = client.post("/launches", json=_launch(rocket_id)).json()["id"]
    client.delete(f"/rockets/{rocket_id}")

    assert client.get(f"/launches/{launch_id}").status_code == status.HTTP_200_OK

    response = client.put(f"/launches/{launch_id}", json={"price": 10})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"][0]["field"] == "rocketId"


def test_list_launches(client, rocket_id):
    client.post("/launches", json=_launch(rocket_id))
    client.post("/launches", json=_launch(rocket_id, price=99))

    assert [launch["id"] for launch in client.get("/launches").json()] == [
        "launch-1",
        "launch-2",
    ]


def test_unknown_launch(client):
    assert client.get("/launches/launch-1").status_code == status.HTTP_404_NOT_FOUND
    assert client.put("/launches/launch-1", json={}).status_code == (
        status.HTTP_404_NOT_FOUND
    )
    response = client.delete("/launches/launch-1")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Launch not found"


def test_delete_launch(client, rocket_id):
    launch_id = client.post("/launches", json=_launch(rocket_id)).json()["id"]

    assert client.delete(f"/launches/{launch_id}").status_code == (
        status.HTTP_204_NO_CONTENT
    )
    assert client.get("/launches").json() == []


def test_create_launch_price_beyond_float_range(client, rocket_id):
    response = client.post("/launches", json=_launch(rocket_id, price=10**400))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"] == [
        {"field": "price", "message": "Price must be a positive number"}
    ]

    listed = client.get("/launches")
    assert listed.status_code == status.HTTP_200_OK
    assert listed.json() == []


def test_create_launch_date_at_datetime_limit(client, rocket_id):
    payload = _launch(rocket_id, launchDateTime="9999-12-31T23:30:00-01:00")

    response = client.post("/launches", json=payload)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"][0]["field"] == "launchDateTime"


def test_integer_price_returned_as_integer(client, rocket_id):
    response = client.post("/launches", json=_launch(rocket_id, price=250000))

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["price"] == 250000
    assert isinstance(response.json()["price"], int)
    assert isinstance(client.get("/launches").json()[0]["price"], int)
