"""Tests for the requests-based API client.

``BridgeSession`` forwards the client's requests to the FastAPI test
client and converts the answers into ``requests.Response`` objects, so
the client runs its real code path against the real routes.
"""

import pytest
import requests

from cinema_client import CinemaAPI


class BridgeSession:
    def __init__(self, test_client):
        self.test_client = test_client
        self.calls = []

    def request(self, method, url, json=None, headers=None, timeout=None):
        self.calls.append({"method": method, "url": url, "headers": headers or {}, "json": json})
        answer = self.test_client.request(method, url, json=json, headers=headers)
        response = requests.Response()
        response.status_code = answer.status_code
        response._content = answer.content
        response.headers.update(answer.headers)
        response.url = url
        return response


class UnreachableSession:
    def request(self, method, url, **kwargs):
        raise requests.ConnectionError("connection refused")


@pytest.fixture
def bridge(client):
    return BridgeSession(client)


@pytest.fixture
def api(bridge):
    return CinemaAPI(base_url="http://testserver/", session=bridge)


def test_book_cycle_through_client(api):
    book, error = api.create_book("The New Turing Omnibus", "Alexander K. Dewdney")
    assert error is None
    assert len(book["id"]) == 8

    books, error = api.list_books()
    assert error is None
    assert books == [book]

    fetched, _ = api.get_book(book["id"])
    assert fetched == book

    updated, error = api.update_book(book["id"], author="A. K. Dewdney")
    assert error is None
    assert updated["author"] == "A. K. Dewdney"

    ok, error = api.delete_book(book["id"])
    assert ok is True
    assert error is None

    missing, error = api.get_book(book["id"])
    assert missing is None
    assert error == {"status_code": 404, "message": "Not Found"}


def test_update_unknown_record_yields_nothing(api):
    assert api.update_record("movies", "ghost", {"name": "x"}) == (None, None)


def test_users_read_through_detail_route(api, bridge):
    user, _ = api.create_record("users", {"firstName": "Hoa"})

    fetched, error = api.get_record("users", user["id"])

    assert error is None
    assert fetched == user
    assert bridge.calls[0]["url"] == "http://testserver/users/sign-up"
    assert bridge.calls[-1]["url"] == f"http://testserver/users/detail?id={user['id']}"


def test_groups_by_system(api):
    api.create_record("group-theater", {"codeGroupTheater": "BHD", "maHeThongRap": 4})
    api.create_record("group-theater", {"codeGroupTheater": "CGV", "maHeThongRap": 2})

    groups, error = api.list_groups_by_system(4)

    assert error is None
    assert [group["codeGroupTheater"] for group in groups] == ["BHD"]


def test_theaters_cannot_be_updated(api, bridge):
    result, error = api.update_record("system-theater", "abc", {"logo": "x"})

    assert result is None
    assert error["status_code"] is None
    assert bridge.calls == []


def test_unknown_resource_is_rejected(api):
    with pytest.raises(ValueError):
        api.list_records("tickets")


def test_bearer_token_is_sent(client):
    bridge = BridgeSession(client)
    api = CinemaAPI(base_url="http://testserver", api_key="secret", session=bridge)

    api.list_movies()

    assert bridge.calls[0]["headers"]["Authorization"] == "Bearer secret"


def test_server_error_is_reported(failing_client):
    api = CinemaAPI(base_url="http://testserver", session=BridgeSession(failing_client))

    book, error = api.create_book("Lost", "Nobody")

    assert book is None
    assert error == {"status_code": 500, "message": "disk full"}


def test_connection_error_is_reported():
    api = CinemaAPI(base_url="http://localhost:1", session=UnreachableSession())

    books, error = api.list_books()

    assert books == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]
