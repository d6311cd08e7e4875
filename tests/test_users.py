# File: tests/test_users.py

import pytest
from sqlalchemy import func, select

from library_membership.core.errors import NotFoundError
from library_membership.models.library import Library
from library_membership.models.membership import Membership
from library_membership.models.user import User
from library_membership.services import membership_service, user_service


def test_read_user(client, make_user):
    user = make_user("a@library.org")

    resp = client.get(f"/api/v1/users/{user.id}")
    assert resp.status_code == 200
    assert resp.json() == {"id": user.id, "email": "a@library.org"}

    assert client.get("/api/v1/users/9999").status_code == 404


def test_user_libraries_unknown_user(client):
    assert client.get("/api/v1/users/9999/libraries").status_code == 404


def test_user_libraries_lists_joined_libraries(client, db, make_user, make_library):
    user = make_user("a@library.org")
    main = make_library("Main")
    make_library("Annex")
    membership_service.join_library(db, acting_user=user, library_id=main.id)

    resp = client.get(f"/api/v1/users/{user.id}/libraries")
    assert resp.status_code == 200
    assert [lib["name"] for lib in resp.json()] == ["Main"]


def test_delete_user_cascades_only_own_memberships(client, db, make_user, make_library, auth_headers):
    alice = make_user("a@library.org")
    bob = make_user("b@library.org")
    main = make_library("Main")
    annex = make_library("Annex")
    for user in (alice, bob):
        membership_service.join_library(db, acting_user=user, library_id=main.id)
    membership_service.join_library(db, acting_user=alice, library_id=annex.id)
    alice_id, bob_id = alice.id, bob.id

    resp = client.delete(f"/api/v1/users/{alice_id}", headers=auth_headers(alice))
    assert resp.status_code == 204

    db.expire_all()
    assert db.get(User, alice_id) is None
    assert db.scalar(
        select(func.count()).select_from(Membership).where(Membership.user_id == alice_id)
    ) == 0
    assert db.scalar(
        select(func.count()).select_from(Membership).where(Membership.user_id == bob_id)
    ) == 1
    assert db.scalar(select(func.count()).select_from(Library)) == 2


def test_delete_other_user_is_forbidden(client, db, make_user, auth_headers):
    alice = make_user("a@library.org")
    bob = make_user("b@library.org")

    resp = client.delete(f"/api/v1/users/{bob.id}", headers=auth_headers(alice))
    assert resp.status_code == 403

    db.expire_all()
    assert db.get(User, bob.id) is not None


def test_out_of_range_user_id(client, db):
    assert client.get("/api/v1/users/99999999999999999999").status_code == 422
    assert client.get("/api/v1/users/99999999999999999999/libraries").status_code == 422

    with pytest.raises(NotFoundError):
        user_service.get_user(db, 10**20)
