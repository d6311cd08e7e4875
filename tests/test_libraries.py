# File: tests/test_libraries.py

import pytest
from sqlalchemy import func, select

from library_membership.core.errors import NotFoundError, ValidationError
from library_membership.models.library import Library
from library_membership.models.membership import Membership
from library_membership.services import library_service, membership_service


def test_list_libraries_empty(client):
    resp = client.get("/api/v1/libraries/")
    assert resp.status_code == 200
    assert resp.json() == []


def test_create_library_requires_login(client):
    resp = client.post("/api/v1/libraries/", json={"name": "Main", "floor_count": 3})
    assert resp.status_code == 401


def test_create_and_list_libraries(client, make_user, auth_headers):
    headers = auth_headers(make_user("reader@library.org"))

    created = client.post(
        "/api/v1/libraries/",
        json={"name": "  Main  ", "floor_count": 3, "floor_area": 1250.5},
        headers=headers,
    )
    assert created.status_code == 201
    data = created.json()
    assert data["name"] == "Main"
    assert data["floor_count"] == 3
    assert data["floor_area"] == 1250.5

    client.post("/api/v1/libraries/", json={"name": "Annex"}, headers=headers)

    names = [lib["name"] for lib in client.get("/api/v1/libraries/").json()]
    assert names == ["Main", "Annex"]


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "   ", "floor_count": 1},
        {"name": "Main", "floor_count": -1},
        {"name": "Main", "floor_count": 1, "floor_area": -10.0},
        {"name": "Main", "floor_count": 10**20},
        {"name": "Main", "floor_count": 1, "floor_area": "inf"},
        {"name": "Main", "floor_count": 1, "floor_area": "nan"},
    ],
)
def test_create_library_validation(client, make_user, auth_headers, payload):
    headers = auth_headers(make_user("reader@library.org"))
    resp = client.post("/api/v1/libraries/", json=payload, headers=headers)
    assert resp.status_code == 422
    assert client.get("/api/v1/libraries/").json() == []


def test_get_library(client, make_library):
    library = make_library("Main", floor_count=2)

    resp = client.get(f"/api/v1/libraries/{library.id}")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Main"

    assert client.get("/api/v1/libraries/9999").status_code == 404


def test_update_library(client, make_user, make_library, auth_headers):
    headers = auth_headers(make_user("reader@library.org"))
    library = make_library("Main", floor_count=2, floor_area=100.0)

    resp = client.patch(
        f"/api/v1/libraries/{library.id}",
        json={"floor_count": 4},
        headers=headers,
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "Main"
    assert data["floor_count"] == 4
    assert data["floor_area"] == 100.0

    assert client.patch(
        "/api/v1/libraries/9999", json={"name": "X"}, headers=headers
    ).status_code == 404
    assert client.patch(
        f"/api/v1/libraries/{library.id}", json={"name": ""}, headers=headers
    ).status_code == 422


def test_update_library_is_all_or_nothing(db, make_library):
    library = make_library("Main", floor_count=2)

    with pytest.raises(ValidationError):
        library_service.update_library(db, library.id, {"name": "Renamed", "floor_count": -3})

    db.expire_all()
    assert library_service.get_library(db, library.id).name == "Main"


def test_delete_library_removes_its_memberships(client, db, make_user, make_library, auth_headers):
    user = make_user("reader@library.org")
    main = make_library("Main")
    annex = make_library("Annex")
    membership_service.join_library(db, acting_user=user, library_id=main.id)
    membership_service.join_library(db, acting_user=user, library_id=annex.id)
    main_id = main.id

    resp = client.delete(f"/api/v1/libraries/{main_id}", headers=auth_headers(user))
    assert resp.status_code == 204

    db.expire_all()
    assert db.get(Library, main_id) is None
    remaining = db.scalar(
        select(func.count()).select_from(Membership).where(Membership.library_id == main_id)
    )
    assert remaining == 0
    assert [lib.name for lib in membership_service.list_libraries_for_user(db, user.id)] == ["Annex"]


def test_delete_missing_library(client, make_user, auth_headers):
    headers = auth_headers(make_user("reader@library.org"))
    assert client.delete("/api/v1/libraries/9999", headers=headers).status_code == 404


def test_get_library_service_not_found(db):
    with pytest.raises(NotFoundError):
        library_service.get_library(db, 42)


@pytest.mark.parametrize("library_id", ["99999999999999999999", "0", "-1"])
def test_out_of_range_library_id_is_rejected(client, make_user, auth_headers, library_id):
    headers = auth_headers(make_user("reader@library.org"))

    assert client.get(f"/api/v1/libraries/{library_id}").status_code == 422
    assert client.get(f"/api/v1/libraries/{library_id}/users").status_code == 422
    assert client.post(f"/api/v1/libraries/{library_id}/users", headers=headers).status_code == 422
    assert client.delete(f"/api/v1/libraries/{library_id}", headers=headers).status_code == 422


def test_out_of_range_values_in_services(db, make_library):
    library = make_library("Main")

    with pytest.raises(NotFoundError):
        library_service.get_library(db, 10**20)
    with pytest.raises(ValidationError):
        library_service.update_library(db, library.id, {"floor_count": 10**20})
    with pytest.raises(ValidationError):
        library_service.update_library(db, library.id, {"floor_area": float("inf")})
    with pytest.raises(ValidationError):
        library_service.create_library(db, name="Annex", floor_area=10**400)
