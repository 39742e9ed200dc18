"""
Test suite for Trip Router endpoints.

Tests cover:
1. POST /trips - Create trip
2. GET /trips and /trips/{trip_id}
3. PUT /trips/{trip_id} - Full update (validated)
4. PUT /trips/{trip_id}/update-status - Status only (unvalidated)
5. DELETE /trips/{trip_id}
"""
from uuid import uuid4

from fastapi.testclient import TestClient


class TestCreateTrip:

    def test_create_trip(self, client: TestClient, auth_headers, trip_payload):
        response = client.post("/api/v1/trips", json=trip_payload, headers=auth_headers)
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["status"] == "Scheduled"
        assert data["created_by"] == "admin"

    def test_create_trip_zero_distance(self, client: TestClient, auth_headers, trip_payload):
        trip_payload["distance_km"] = 0
        response = client.post("/api/v1/trips", json=trip_payload, headers=auth_headers)
        assert response.status_code == 400

    def test_create_trip_unknown_driver(self, client: TestClient, auth_headers, trip_payload):
        trip_payload["driver_id"] = str(uuid4())
        response = client.post("/api/v1/trips", json=trip_payload, headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_REFERENCE"


class TestReadTrip:

    def test_get_trip(self, client: TestClient, auth_headers, test_trip):
        response = client.get(f"/api/v1/trips/{test_trip.id}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["data"]["description"] == "Airport run"

    def test_list_trips(self, client: TestClient, auth_headers, test_trip):
        response = client.get("/api/v1/trips", headers=auth_headers)
        assert len(response.json()["data"]) == 1

    def test_get_trip_not_found(self, client: TestClient, auth_headers):
        response = client.get(f"/api/v1/trips/{uuid4()}", headers=auth_headers)
        assert response.status_code == 404


class TestUpdateTrip:

    def test_full_update(self, client: TestClient, auth_headers, test_trip, trip_payload):
        trip_payload["status"] = "Ongoing"
        response = client.put(f"/api/v1/trips/{test_trip.id}", json=trip_payload, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "Ongoing"

    def test_full_update_rejects_unknown_status(self, client: TestClient, auth_headers, test_trip, trip_payload):
        trip_payload["status"] = "Teleported"
        response = client.put(f"/api/v1/trips/{test_trip.id}", json=trip_payload, headers=auth_headers)
        assert response.status_code == 400

    def test_status_transitions_are_unconstrained(self, client: TestClient, auth_headers, test_trip):
        for new_status in ["Completed", "Draft"]:
            response = client.put(
                f"/api/v1/trips/{test_trip.id}/update-status",
                params={"status": new_status},
                headers=auth_headers,
            )
            assert response.status_code == 200
            assert response.json()["data"]["status"] == new_status

    def test_status_update_missing_trip(self, client: TestClient, auth_headers):
        response = client.put(
            f"/api/v1/trips/{uuid4()}/update-status",
            params={"status": "Completed"},
            headers=auth_headers,
        )
        assert response.status_code == 404


class TestDeleteTrip:

    def test_delete_trip(self, client: TestClient, auth_headers, test_trip):
        trip_id = str(test_trip.id)
        response = client.delete(f"/api/v1/trips/{trip_id}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["data"]["id"] == trip_id
        assert client.get(f"/api/v1/trips/{trip_id}", headers=auth_headers).status_code == 404
