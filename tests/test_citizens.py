# tests/test_citizens.py

"""
Tests for citizen endpoints, including the wanted list and nested reads.
"""

import re

from fastapi.testclient import TestClient
from sqlmodel import Session, select

from models import Citizen
from models.enums import Role


def test_create_then_get_round_trip(client: TestClient, actor, citizen_payload):
    """POST then GET returns the payload plus the generated fields."""
    clerk = actor(Role.DMV)

    response = client.post("/api/citizens", json=citizen_payload, headers=clerk.headers)
    assert response.status_code == 201
    created = response.json()

    response = client.get(f"/api/citizens/{created['id']}", headers=clerk.headers)
    assert response.status_code == 200
    data = response.json()

    for key, value in citizen_payload.items():
        assert data[key] == value
    assert data["id"] == created["id"]
    assert re.fullmatch(r"MIA-\d{6}", data["citizenId"])
    assert data["createdBy"] == clerk.id
    assert data["updatedBy"] == clerk.id
    assert data["createdAt"] and data["updatedAt"]
    assert data["isWanted"] is False
    assert data["taxFraudFlag"] is False


def test_create_keeps_supplied_citizen_id(client: TestClient, create_citizen):
    data = create_citizen(citizenId="MIA-000042")
    assert data["citizenId"] == "MIA-000042"


def test_duplicate_citizen_id_rejected(client: TestClient, actor, create_citizen, citizen_payload):
    create_citizen(citizenId="MIA-000042")
    admin = actor(Role.IT)

    response = client.post("/api/citizens", json={**citizen_payload, "citizenId": "MIA-000042"}, headers=admin.headers)

    assert response.status_code == 400
    assert "already exists" in response.json()["detail"]


def test_client_cannot_forge_stamps(client: TestClient, actor, citizen_payload):
    """id / createdBy / updatedBy in the body are ignored."""
    clerk = actor(Role.DMV)
    body = {**citizen_payload, "id": 999, "createdBy": 12345, "updatedBy": 12345}

    data = client.post("/api/citizens", json=body, headers=clerk.headers).json()

    assert data["id"] != 999
    assert data["createdBy"] == clerk.id
    assert data["updatedBy"] == clerk.id


def test_update_changes_updated_by_only(client: TestClient, actor, create_citizen):
    """Any role may update a citizen; createdBy stays with the creator."""
    citizen = create_citizen()
    officer = actor(Role.MPD)

    response = client.put(
        f"/api/citizens/{citizen['id']}",
        json={"isWanted": True, "wantedReason": "Armed robbery"},
        headers=officer.headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["isWanted"] is True
    assert data["wantedReason"] == "Armed robbery"
    assert data["createdBy"] == citizen["createdBy"]
    assert data["updatedBy"] == officer.id
    assert data["updatedAt"] >= citizen["updatedAt"]
    # Untouched fields survive a partial update
    assert data["firstName"] == citizen["firstName"]


def test_update_missing_citizen_is_404_and_creates_nothing(client: TestClient, actor, engine):
    admin = actor(Role.IT)

    response = client.put("/api/citizens/424242", json={"firstName": "Ghost"}, headers=admin.headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "Citizen not found"
    with Session(engine) as db:
        assert db.exec(select(Citizen)).all() == []


def test_get_missing_citizen_is_404(client: TestClient, actor):
    officer = actor(Role.MPD)
    assert client.get("/api/citizens/424242", headers=officer.headers).status_code == 404


def test_create_requires_dmv_or_it(client: TestClient, actor, citizen_payload):
    officer = actor(Role.MPD)
    response = client.post("/api/citizens", json=citizen_payload, headers=officer.headers)
    assert response.status_code == 403


def test_create_validation_errors(client: TestClient, actor):
    """Missing required fields come back as structured 400s."""
    clerk = actor(Role.DMV)

    response = client.post("/api/citizens", json={"firstName": "  "}, headers=clerk.headers)

    assert response.status_code == 400
    body = response.json()
    assert body["detail"] == "Invalid citizen data"
    fields = {err["field"] for err in body["errors"]}
    assert {"firstName", "lastName", "dateOfBirth"} <= fields


def test_bad_immigration_status_rejected(client: TestClient, actor, citizen_payload):
    clerk = actor(Role.DMV)
    body = {**citizen_payload, "immigrationStatus": "alien"}
    assert client.post("/api/citizens", json=body, headers=clerk.headers).status_code == 400


def test_blank_strings_become_null(client: TestClient, create_citizen):
    data = create_citizen(phone="   ", email="")
    assert data["phone"] is None
    assert data["email"] is None


# -----------------------------------------------------
# Listing & search
# -----------------------------------------------------
def test_list_newest_first(client: TestClient, actor, create_citizen):
    first = create_citizen(firstName="Alpha")
    second = create_citizen(firstName="Bravo")
    officer = actor(Role.ICE)

    data = client.get("/api/citizens", headers=officer.headers).json()

    assert [c["id"] for c in data] == [second["id"], first["id"]]


def test_search_by_name_case_insensitive(client: TestClient, actor, create_citizen):
    tony = create_citizen(firstName="Tony", lastName="Montana")
    create_citizen(firstName="Manny", lastName="Ribera")
    officer = actor(Role.MPD)

    for url in ("/api/citizens/search?q=monTANA", "/api/citizens?search=monTANA", "/api/citizens?q=monTANA"):
        data = client.get(url, headers=officer.headers).json()
        assert [c["id"] for c in data] == [tony["id"]]


def test_empty_search_falls_back_to_q(client: TestClient, actor, create_citizen):
    alpha = create_citizen(firstName="Alpha")
    create_citizen(firstName="Bravo")
    officer = actor(Role.MPD)

    data = client.get("/api/citizens?search=&q=Alpha", headers=officer.headers).json()

    assert [c["id"] for c in data] == [alpha["id"]]


def test_search_treats_wildcards_literally(client: TestClient, actor, create_citizen):
    create_citizen(firstName="Tony")
    officer = actor(Role.MPD)

    assert client.get("/api/citizens/search?q=%25", headers=officer.headers).json() == []
    assert client.get("/api/citizens/search?q=_", headers=officer.headers).json() == []


def test_search_requires_query(client: TestClient, actor):
    officer = actor(Role.MPD)
    response = client.get("/api/citizens/search?q=%20", headers=officer.headers)
    assert response.status_code == 400


# -----------------------------------------------------
# Wanted list
# -----------------------------------------------------
def test_wanted_list(client: TestClient, actor, create_citizen):
    create_citizen(firstName="Clean")
    wanted = create_citizen(firstName="Wanted", isWanted=True, wantedReason="Fraud")
    officer = actor(Role.FSD)

    for url in ("/api/wanted", "/api/citizens/wanted"):
        response = client.get(url, headers=officer.headers)
        assert response.status_code == 200
        assert [c["id"] for c in response.json()] == [wanted["id"]]


def test_wanted_list_requires_login(client: TestClient):
    assert client.get("/api/wanted").status_code == 401


# -----------------------------------------------------
# Nested reads
# -----------------------------------------------------
def test_nested_vehicles(client: TestClient, actor, create_citizen):
    owner = create_citizen()
    other = create_citizen(firstName="Other")
    clerk = actor(Role.DMV)

    vehicle = {
        "licensePlate": "MIA-001", "make": "Ferrari", "model": "Testarossa",
        "year": 1986, "color": "White", "type": "coupe",
    }
    client.post("/api/vehicles", json={**vehicle, "ownerId": owner["id"]}, headers=clerk.headers)
    client.post(
        "/api/vehicles",
        json={**vehicle, "licensePlate": "MIA-002", "ownerId": other["id"]},
        headers=clerk.headers,
    )

    data = client.get(f"/api/citizens/{owner['id']}/vehicles", headers=clerk.headers).json()
    assert [v["licensePlate"] for v in data] == ["MIA-001"]


def test_nested_criminal_records_for_law_enforcement(client: TestClient, actor, create_citizen):
    citizen = create_citizen()
    officer = actor(Role.MPD)
    client.post(
        "/api/criminal-records",
        json={"citizenId": citizen["id"], "crimeType": "Theft", "dateOfCrime": "2024-01-01", "status": "active"},
        headers=officer.headers,
    )

    response = client.get(f"/api/citizens/{citizen['id']}/criminal-records", headers=officer.headers)

    assert response.status_code == 200
    assert [r["crimeType"] for r in response.json()] == ["Theft"]


def test_nested_read_unknown_citizen_is_404(client: TestClient, actor):
    admin = actor(Role.IT)
    for child in ("vehicles", "criminal-records", "properties", "businesses", "permits", "driver-licenses"):
        response = client.get(f"/api/citizens/424242/{child}", headers=admin.headers)
        assert response.status_code == 404, child


def test_nested_empty_list(client: TestClient, actor, create_citizen):
    citizen = create_citizen()
    admin = actor(Role.IT)
    assert client.get(f"/api/citizens/{citizen['id']}/permits", headers=admin.headers).json() == []


# -----------------------------------------------------
# Delete
# -----------------------------------------------------
def test_delete_citizen(client: TestClient, actor, create_citizen):
    citizen = create_citizen()
    admin = actor(Role.IT)

    response = client.delete(f"/api/citizens/{citizen['id']}", headers=admin.headers)
    assert response.status_code == 204
    assert response.content == b""

    assert client.get(f"/api/citizens/{citizen['id']}", headers=admin.headers).status_code == 404
    assert client.delete(f"/api/citizens/{citizen['id']}", headers=admin.headers).status_code == 404


def test_delete_citizen_requires_it(client: TestClient, actor, create_citizen):
    citizen = create_citizen()
    clerk = actor(Role.DMV)
    assert client.delete(f"/api/citizens/{citizen['id']}", headers=clerk.headers).status_code == 403


def test_delete_referenced_citizen_is_409(client: TestClient, actor, create_citizen):
    citizen = create_citizen()
    officer = actor(Role.MPD)
    admin = actor(Role.IT)
    client.post(
        "/api/criminal-records",
        json={"citizenId": citizen["id"], "crimeType": "Theft", "dateOfCrime": "2024-01-01", "status": "active"},
        headers=officer.headers,
    )

    response = client.delete(f"/api/citizens/{citizen['id']}", headers=admin.headers)

    assert response.status_code == 409
    assert client.get(f"/api/citizens/{citizen['id']}", headers=admin.headers).status_code == 200
