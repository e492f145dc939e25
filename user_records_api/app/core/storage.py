"""
DynamoDB storage gateway for user records.

``UserTableGateway`` is the only component that talks to the store.  It
is constructed once at startup around an explicit boto3 DynamoDB client
(see ``create_dynamodb_client``) and handed to the service layer, so
tests can swap the client for a stubbed one or replace the gateway
altogether.

Besides the four passthrough operations (put, scan, get, update,
delete) the gateway owns the startup sequence:

* ``ensure_table`` creates the table with a string hash key ``id``.  A
  table that already exists is not an error.
* ``ensure_seeded`` inserts two sample users when the table is empty.

Records cross this module's boundary as plain dicts
(``{"id": ..., "name": ..., "email": ...}``); conversion to and from
DynamoDB attribute values is done with boto3's ``TypeSerializer`` and
``TypeDeserializer``.  Every botocore failure is translated to
``StoreUnavailable`` (transport) or ``StoreError`` (anything else).
"""

import logging
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

import boto3
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.exceptions import BotoCoreError, ClientError, HTTPClientError
from botocore.exceptions import ConnectionError as BotoConnectionError

from .config import Settings, settings
from .exceptions import RecordNotFound, StoreError, StoreUnavailable

logger = logging.getLogger(__name__)

Item = Dict[str, Any]

SEED_USERS = (
    ("John Doe", "john@example.com"),
    ("Jane Smith", "jane@example.com"),
)

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


def new_record_id() -> str:
    """Return a fresh, globally unique record id."""
    return str(uuid.uuid4())


def create_dynamodb_client(config: Settings = settings):
    """Build a low-level DynamoDB client from ``config``."""
    kwargs: Dict[str, Any] = {"region_name": config.aws_region}
    if config.dynamodb_endpoint:
        kwargs["endpoint_url"] = config.dynamodb_endpoint
    if config.aws_access_key_id and config.aws_secret_access_key:
        kwargs["aws_access_key_id"] = config.aws_access_key_id
        kwargs["aws_secret_access_key"] = config.aws_secret_access_key
    return boto3.client("dynamodb", **kwargs)


def serialize_item(item: Item) -> Dict[str, Any]:
    return {key: _serializer.serialize(value) for key, value in item.items()}


def deserialize_item(raw: Dict[str, Any]) -> Item:
    return {key: _deserializer.deserialize(value) for key, value in raw.items()}


def _error_code(exc: ClientError) -> str:
    return exc.response.get("Error", {}).get("Code", "")


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    """Translate botocore exceptions raised inside the block."""
    try:
        yield
    except (BotoConnectionError, HTTPClientError) as exc:
        raise StoreUnavailable(f"{operation}: {exc}") from exc
    except (ClientError, BotoCoreError) as exc:
        raise StoreError(f"{operation}: {exc}") from exc


class UserTableGateway:
    """Thin access layer over the users table."""

    def __init__(self, client, table_name: str = "Users"):
        self.client = client
        self.table_name = table_name

    @classmethod
    def from_settings(cls, config: Settings = settings) -> "UserTableGateway":
        return cls(create_dynamodb_client(config), table_name=config.users_table)

    # ------------------------------------------------------------------
    # Startup
    # ------------------------------------------------------------------
    def ensure_table(self) -> bool:
        """Create the table if it does not exist.

        Returns ``True`` when the table was created by this call and
        ``False`` when it already existed.  Any other failure raises
        ``StoreError``.
        """
        with _store_errors(f"create table {self.table_name}"):
            try:
                self.client.create_table(
                    TableName=self.table_name,
                    KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
                    AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
                    ProvisionedThroughput={"ReadCapacityUnits": 5, "WriteCapacityUnits": 5},
                )
            except ClientError as exc:
                if _error_code(exc) == "ResourceInUseException":
                    logger.debug("Table %s already exists", self.table_name)
                    return False
                raise
            self.client.get_waiter("table_exists").wait(TableName=self.table_name)
        logger.info("Table %s created successfully", self.table_name)
        return True

    def ensure_seeded(self) -> int:
        """Insert the sample users when the table is empty.

        Returns the number of users inserted.  A failed insert is logged
        and does not stop the remaining ones.
        """
        if self.count() > 0:
            return 0
        seeded = 0
        for name, email in SEED_USERS:
            try:
                self.put({"id": new_record_id(), "name": name, "email": email})
            except StoreError as exc:
                logger.error("Error adding user %s: %s", name, exc)
                continue
            logger.info("User %s added successfully", name)
            seeded += 1
        return seeded

    def initialize(self, fail_fast: bool = False, seed: bool = True) -> None:
        """Run table bootstrap and seeding once, before serving requests.

        With ``fail_fast`` a store failure propagates to the caller.
        Otherwise each step logs its own failure and startup carries on:
        seeding is still attempted after a failed table creation (the
        table may exist without CreateTable permission), and requests
        fail individually later if the table is unusable.
        """
        try:
            self.ensure_table()
        except StoreError as exc:
            if fail_fast:
                raise
            logger.error("Error creating table %s: %s", self.table_name, exc)
        if not seed:
            return
        try:
            self.ensure_seeded()
        except StoreError as exc:
            if fail_fast:
                raise
            logger.error("Error seeding table %s: %s", self.table_name, exc)

    # ------------------------------------------------------------------
    # Record operations
    # ------------------------------------------------------------------
    def count(self) -> int:
        total = 0
        with _store_errors(f"count {self.table_name}"):
            paginator = self.client.get_paginator("scan")
            for page in paginator.paginate(TableName=self.table_name, Select="COUNT"):
                total += page.get("Count", 0)
        return total

    def put(self, record: Item) -> Item:
        with _store_errors(f"put {record.get('id')}"):
            self.client.put_item(TableName=self.table_name, Item=serialize_item(record))
        return record

    def scan_all(self) -> List[Item]:
        """Return every stored record, in whatever order the store yields."""
        records: List[Item] = []
        with _store_errors(f"scan {self.table_name}"):
            paginator = self.client.get_paginator("scan")
            for page in paginator.paginate(TableName=self.table_name):
                records.extend(deserialize_item(raw) for raw in page.get("Items", []))
        return records

    def get_by_id(self, record_id: str) -> Optional[Item]:
        with _store_errors(f"get {record_id}"):
            response = self.client.get_item(
                TableName=self.table_name,
                Key={"id": {"S": record_id}},
            )
        raw = response.get("Item")
        return deserialize_item(raw) if raw else None

    def update_by_id(self, record_id: str, name: str, email: str) -> Item:
        """Replace ``name`` and ``email`` of an existing record.

        The write is conditional on the key existing, so an unknown id
        raises ``RecordNotFound`` instead of creating a partial item.
        """
        with _store_errors(f"update {record_id}"):
            try:
                response = self.client.update_item(
                    TableName=self.table_name,
                    Key={"id": {"S": record_id}},
                    UpdateExpression="SET #n = :n, #e = :e",
                    ConditionExpression="attribute_exists(#id)",
                    ExpressionAttributeNames={"#n": "name", "#e": "email", "#id": "id"},
                    ExpressionAttributeValues={
                        ":n": _serializer.serialize(name),
                        ":e": _serializer.serialize(email),
                    },
                    ReturnValues="ALL_NEW",
                )
            except ClientError as exc:
                if _error_code(exc) == "ConditionalCheckFailedException":
                    raise RecordNotFound(record_id) from exc
                raise
        return deserialize_item(response["Attributes"])

    def delete_by_id(self, record_id: str) -> None:
        """Remove a record; deleting a missing id is not an error."""
        with _store_errors(f"delete {record_id}"):
            self.client.delete_item(
                TableName=self.table_name,
                Key={"id": {"S": record_id}},
            )
