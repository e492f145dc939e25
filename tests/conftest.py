"""Pytest configuration and fixtures.

This module provides fixtures for:
- An in-memory storage gateway that stands in for DynamoDB
- A FastAPI application wired to that gateway
- A TestClient that runs the application lifespan (table bootstrap and seeding)
"""

from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from user_records_api.app.core.config import Settings
from user_records_api.app.core.exceptions import RecordNotFound
from user_records_api.app.core.storage import Item, UserTableGateway
from user_records_api.app.main import create_app


class InMemoryGateway(UserTableGateway):
    """Gateway keeping records in a dict.

    Seeding and the startup policy come from ``UserTableGateway``
    unchanged; only the store calls are replaced.  Assign an exception
    to ``failure`` to make every store call raise it, or to
    ``table_failure`` to fail only table creation.
    """

    __test__ = False

    def __init__(self, records: Optional[List[Item]] = None):
        super().__init__(client=None, table_name="Users")
        self.items: Dict[str, Item] = {r["id"]: dict(r) for r in records or []}
        self.table_created = False
        self.failure: Optional[Exception] = None
        self.table_failure: Optional[Exception] = None

    def _check(self) -> None:
        if self.failure is not None:
            raise self.failure

    def ensure_table(self) -> bool:
        self._check()
        if self.table_failure is not None:
            raise self.table_failure
        created = not self.table_created
        self.table_created = True
        return created

    def count(self) -> int:
        self._check()
        return len(self.items)

    def put(self, record: Item) -> Item:
        self._check()
        self.items[record["id"]] = dict(record)
        return record

    def scan_all(self) -> List[Item]:
        self._check()
        return [dict(item) for item in self.items.values()]

    def get_by_id(self, record_id: str) -> Optional[Item]:
        self._check()
        item = self.items.get(record_id)
        return dict(item) if item else None

    def update_by_id(self, record_id: str, name: str, email: str) -> Item:
        self._check()
        if record_id not in self.items:
            raise RecordNotFound(record_id)
        self.items[record_id].update(name=name, email=email)
        return dict(self.items[record_id])

    def delete_by_id(self, record_id: str) -> None:
        self._check()
        self.items.pop(record_id, None)


@pytest.fixture
def gateway() -> InMemoryGateway:
    return InMemoryGateway()


@pytest.fixture
def client(gateway: InMemoryGateway):
    """TestClient over an empty, unseeded store."""
    app = create_app(gateway=gateway, config=Settings(seed_on_startup=False))
    with TestClient(app) as test_client:
        yield test_client
