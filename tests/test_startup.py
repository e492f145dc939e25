"""Tests for table bootstrap and seeding run by the application lifespan."""

import logging

import pytest
from fastapi.testclient import TestClient

from user_records_api.app.core.config import Settings
from user_records_api.app.core.exceptions import StoreError, StoreUnavailable
from user_records_api.app.core.storage import SEED_USERS
from user_records_api.app.main import create_app

from conftest import InMemoryGateway


def test_fresh_store_is_seeded_with_two_records():
    gateway = InMemoryGateway()
    app = create_app(gateway=gateway, config=Settings())

    with TestClient(app) as client:
        users = client.get("/users").json()

    assert gateway.table_created
    assert len(users) == 2
    assert {(u["name"], u["email"]) for u in users} == set(SEED_USERS)
    assert len({u["id"] for u in users}) == 2


def test_non_empty_store_is_not_seeded():
    existing = {"id": "u1", "name": "Existing", "email": "e@x.com"}
    gateway = InMemoryGateway(records=[existing])
    app = create_app(gateway=gateway, config=Settings())

    with TestClient(app):
        pass

    assert list(gateway.items.values()) == [existing]


def test_seeding_can_be_disabled():
    gateway = InMemoryGateway()
    app = create_app(gateway=gateway, config=Settings(seed_on_startup=False))

    with TestClient(app):
        pass

    assert gateway.table_created
    assert gateway.items == {}


def test_best_effort_startup_keeps_serving_after_store_failure():
    gateway = InMemoryGateway()
    gateway.failure = StoreUnavailable("connection refused")
    app = create_app(gateway=gateway, config=Settings(startup_policy="best_effort"))

    with TestClient(app) as client:
        response = client.get("/users")

    assert response.status_code == 500
    assert response.json() == {"error": "Error fetching users"}


def test_best_effort_startup_seeds_when_table_creation_fails():
    gateway = InMemoryGateway()
    gateway.table_failure = StoreError("not authorized to perform CreateTable")
    app = create_app(gateway=gateway, config=Settings(startup_policy="best_effort"))

    with TestClient(app) as client:
        users = client.get("/users").json()

    assert {(u["name"], u["email"]) for u in users} == set(SEED_USERS)


def test_startup_logs_ready_after_initialization(caplog):
    caplog.set_level(logging.INFO)
    app = create_app(gateway=InMemoryGateway(), config=Settings(project_name="Users Test"))

    with TestClient(app):
        pass

    assert "Users Test ready" in caplog.text


def test_fail_fast_startup_aborts_on_store_failure():
    gateway = InMemoryGateway()
    gateway.failure = StoreError("access denied")
    app = create_app(gateway=gateway, config=Settings(startup_policy="fail_fast"))

    with pytest.raises(StoreError):
        with TestClient(app):
            pass
