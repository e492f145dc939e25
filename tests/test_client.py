"""Tests for the requests-based API client."""

import json
from unittest import mock

import pytest
import requests

from user_records_api.client import UserRecordsAPI

BASE_URL = "http://api.test"


def make_response(status_code, body=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = BASE_URL
    response._content = json.dumps(body).encode() if body is not None else b""
    return response


@pytest.fixture
def session():
    return mock.Mock(spec=requests.Session)


@pytest.fixture
def api(session):
    return UserRecordsAPI(base_url=BASE_URL + "/", session=session)


def test_create_user_posts_json(api, session):
    user = {"id": "u1", "name": "A", "email": "a@x.com"}
    session.request.return_value = make_response(201, user)

    data, error = api.create_user("A", "a@x.com")

    assert (data, error) == (user, None)
    session.request.assert_called_once_with(
        method="POST",
        url=f"{BASE_URL}/users",
        json={"name": "A", "email": "a@x.com"},
        timeout=15,
    )


def test_list_users(api, session):
    users = [{"id": "u1", "name": "A", "email": "a@x.com"}]
    session.request.return_value = make_response(200, users)

    assert api.list_users() == (users, None)


def test_update_and_delete_target_the_record(api, session):
    session.request.return_value = make_response(200, {"message": "User deleted successfully"})

    api.update_user("u1", "B", "b@x.com")
    api.delete_user("u1")

    calls = session.request.call_args_list
    assert calls[0].kwargs["method"] == "PUT"
    assert calls[0].kwargs["url"] == f"{BASE_URL}/users/u1"
    assert calls[0].kwargs["json"] == {"name": "B", "email": "b@x.com"}
    assert calls[1].kwargs["method"] == "DELETE"
    assert calls[1].kwargs["url"] == f"{BASE_URL}/users/u1"


def test_error_message_comes_from_error_field(api, session):
    session.request.return_value = make_response(404, {"error": "User not found"})

    data, error = api.get_user("missing")

    assert data is None
    assert error == {"status_code": 404, "message": "User not found"}


def test_list_users_returns_empty_list_on_error(api, session):
    session.request.return_value = make_response(500, {"error": "Error fetching users"})

    users, error = api.list_users()

    assert users == []
    assert error["status_code"] == 500


def test_transport_failure_has_no_status(api, session):
    session.request.side_effect = requests.ConnectionError("connection refused")

    data, error = api.get_user("u1")

    assert data is None
    assert error["status_code"] is None
    assert "connection refused" in error["message"]
