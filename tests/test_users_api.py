"""HTTP tests for the /users endpoints."""

from fastapi import status

from cinema_api.app.schemas.user import USER_EXAMPLE


def test_sign_up_stores_user_verbatim(client, store):
    response = client.post("/users/sign-up", json=USER_EXAMPLE)

    assert response.status_code == status.HTTP_200_OK
    user = response.json()
    assert user == {"id": user["id"], **USER_EXAMPLE}
    assert store.get("users") == [user]


def test_list_users_ignores_paging_parameters(client):
    for name in ["An", "Binh", "Chi"]:
        client.post("/users/sign-up", json={"firstName": name})

    response = client.get("/users", params={"current": 2, "pageSize": 1, "search": "An"})

    assert response.status_code == status.HTTP_200_OK
    assert [user["firstName"] for user in response.json()] == ["An", "Binh", "Chi"]


def test_user_detail_by_query_id(client):
    user = client.post("/users/sign-up", json=USER_EXAMPLE).json()

    response = client.get("/users/detail", params={"id": user["id"]})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == user


def test_user_detail_missing(client):
    assert client.get("/users/detail", params={"id": "nobody"}).status_code == status.HTTP_404_NOT_FOUND
    assert client.get("/users/detail").status_code == status.HTTP_404_NOT_FOUND


def test_update_user_merges_fields(client):
    user = client.post("/users/sign-up", json=USER_EXAMPLE).json()

    response = client.put(f"/users/{user['id']}", json={"phoneNumber": "0912345678"})

    assert response.json() == {**user, "phoneNumber": "0912345678"}


def test_update_unknown_user_is_empty_success(client):
    response = client.put("/users/ghost", json={"email": "x@example.com"})

    assert response.status_code == status.HTTP_200_OK
    assert response.content == b""
    assert client.get("/users").json() == []


def test_delete_user(client):
    user = client.post("/users/sign-up", json=USER_EXAMPLE).json()

    assert client.delete(f"/users/{user['id']}").status_code == status.HTTP_200_OK
    assert client.delete(f"/users/{user['id']}").status_code == status.HTTP_200_OK
    assert client.get("/users").json() == []


def test_authenticated_routes_are_not_exposed(client):
    assert client.post("/users/sign-in", json={"email": "a", "password": "b"}).status_code in (
        status.HTTP_404_NOT_FOUND,
        status.HTTP_405_METHOD_NOT_ALLOWED,
    )
