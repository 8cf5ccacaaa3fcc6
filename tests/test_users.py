from bson import ObjectId

from app.models.user import Role, role_of
from conftest import ADMIN_EMAIL, USER_EMAIL, run


def test_create_user_is_idempotent(client, mongo):
    first = client.post("/users", json={"email": "new@example.com", "name": "New"})
    assert first.status_code == 200
    assert first.json()["insertedId"]

    second = client.post("/users", json={"email": "new@example.com", "name": "Again"})
    assert second.status_code == 200
    assert second.json() == {"message": "User Already Exist", "insertedId": None}

    assert run(mongo.users.count_documents({"email": "new@example.com"})) == 1


def test_create_user_ignores_requested_role(client, mongo):
    client.post("/users", json={"email": "sneaky@example.com", "role": "admin"})

    stored = run(mongo.users.find_one({"email": "sneaky@example.com"}))
    assert stored["role"] == Role.DEFAULT.value


def test_role_of_treats_unknown_values_as_default():
    assert role_of({}) is Role.DEFAULT
    assert role_of({"role": "superuser"}) is Role.DEFAULT
    assert role_of({"role": "admin"}) is Role.ADMIN


def test_list_users_serializes_ids(client, admin, diner):
    response = client.get("/users", headers=admin)

    emails = sorted(u["email"] for u in response.json())
    assert emails == [ADMIN_EMAIL, USER_EMAIL]
    assert all(isinstance(u["_id"], str) for u in response.json())


def test_admin_check_reports_admin(client, admin):
    response = client.get(f"/users/admin/{ADMIN_EMAIL}", headers=admin)
    assert response.json() == {"admin": True}


def test_admin_check_rejects_other_email(client, diner):
    response = client.get(f"/users/admin/{ADMIN_EMAIL}", headers=diner)
    assert response.status_code == 403


def test_promote_user(client, mongo, admin, diner):
    user_id = str(run(mongo.users.find_one({"email": USER_EMAIL}))["_id"])

    response = client.patch(f"/users/admin/{user_id}", headers=admin)
    assert response.json()["matchedCount"] == 1
    assert response.json()["modifiedCount"] == 1

    assert client.get(f"/users/admin/{USER_EMAIL}", headers=diner).json() == {"admin": True}


def test_promote_requires_admin(client, mongo, diner):
    user_id = str(run(mongo.users.find_one({"email": USER_EMAIL}))["_id"])
    assert client.patch(f"/users/admin/{user_id}", headers=diner).status_code == 403


def test_promote_missing_user_matches_nothing(client, admin):
    response = client.patch(f"/users/admin/{ObjectId()}", headers=admin)
    assert response.status_code == 200
    assert response.json()["matchedCount"] == 0


def test_delete_user(client, mongo, admin, diner):
    user_id = str(run(mongo.users.find_one({"email": USER_EMAIL}))["_id"])

    response = client.delete(f"/users/{user_id}", headers=admin)
    assert response.json() == {"acknowledged": True, "deletedCount": 1}
    assert run(mongo.users.find_one({"email": USER_EMAIL})) is None


def test_delete_missing_user_is_noop(client, admin):
    response = client.delete(f"/users/{ObjectId()}", headers=admin)
    assert response.status_code == 200
    assert response.json()["deletedCount"] == 0


def test_delete_with_malformed_id(client, admin):
    response = client.delete("/users/not-an-id", headers=admin)
    assert response.status_code == 400
    assert response.json()["detail"] == "invalid id"


def test_mixed_case_email_is_stored_and_signed_verbatim(client, mongo):
    email = "Diner@Example.COM"
    token = client.post("/jwt", json={"email": email}).json()["token"]
    client.post("/users", json={"email": email})

    assert run(mongo.users.find_one({}))["email"] == email

    response = client.get(f"/users/admin/{email}", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json() == {"admin": False}


def test_create_user_rejects_malformed_email(client, mongo):
    assert client.post("/users", json={"email": "not-an-email"}).status_code == 422
    assert run(mongo.users.count_documents({})) == 0
