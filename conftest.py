"""
Shared test fixtures.

FakeSupabaseClient mimics the chained query builder of the supabase client
(table().select().eq().order().limit().execute()) over in-memory tables.
"""

import os
import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Any

# Settings are read at import time
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-with-enough-length-1234")

import jwt
import pytest
from fastapi.testclient import TestClient

from recovery.core.config import settings
from recovery.main import app
from recovery.services import SupabaseService, get_supabase_service


class FakeQuery:
    """One chained query against a FakeSupabaseClient table."""

    def __init__(self, client: "FakeSupabaseClient", table: str) -> None:
        self.client = client
        self.table = table
        self.operation = "select"
        self.payload: Any = None
        self.filters: list[tuple[str, str, Any]] = []
        self.order_by: tuple[str, bool] | None = None
        self.row_limit: int | None = None

    def select(self, *columns: str, count: str | None = None) -> "FakeQuery":
        self.operation = "select"
        return self

    def insert(self, data: dict | list[dict]) -> "FakeQuery":
        self.operation = "insert"
        self.payload = data
        return self

    def update(self, data: dict) -> "FakeQuery":
        self.operation = "update"
        self.payload = data
        return self

    def delete(self) -> "FakeQuery":
        self.operation = "delete"
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self.filters.append(("eq", column, value))
        return self

    def gte(self, column: str, value: Any) -> "FakeQuery":
        self.filters.append(("gte", column, value))
        return self

    def in_(self, column: str, values: list[Any]) -> "FakeQuery":
        self.filters.append(("in", column, list(values)))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self.order_by = (column, desc)
        return self

    def limit(self, size: int) -> "FakeQuery":
        self.row_limit = size
        return self

    def _matches(self, row: dict) -> bool:
        for op, column, value in self.filters:
            current = row.get(column)
            if op == "eq" and current != value:
                return False
            if op == "gte" and (current is None or current < value):
                return False
            if op == "in" and current not in value:
                return False
        return True

    def execute(self) -> SimpleNamespace:
        if (self.table, self.operation) in self.client.failures:
            raise Exception(f"simulated {self.operation} failure on {self.table}")

        rows = self.client.tables.setdefault(self.table, [])

        if self.operation == "insert":
            items = self.payload if isinstance(self.payload, list) else [self.payload]
            created = []
            for item in items:
                row = {"id": str(uuid.uuid4()), "created_at": self.client.tick(), **item}
                rows.append(row)
                created.append(dict(row))
            return SimpleNamespace(data=created, count=None)

        matched = [row for row in rows if self._matches(row)]

        if self.operation == "update":
            for row in matched:
                row.update(self.payload)
            return SimpleNamespace(data=[dict(row) for row in matched], count=None)

        if self.operation == "delete":
            self.client.tables[self.table] = [row for row in rows if row not in matched]
            return SimpleNamespace(data=[dict(row) for row in matched], count=None)

        if self.order_by:
            column, desc = self.order_by
            matched = sorted(matched, key=lambda r: (r.get(column) is None, r.get(column)), reverse=desc)
        if self.row_limit is not None:
            matched = matched[: self.row_limit]
        return SimpleNamespace(data=[dict(row) for row in matched], count=len(matched))


class FakeSupabaseClient:
    """In-memory stand-in for supabase.Client."""

    def __init__(self) -> None:
        self.tables: dict[str, list[dict]] = {}
        self.failures: set[tuple[str, str]] = set()
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def tick(self) -> str:
        self._clock += timedelta(seconds=1)
        return self._clock.isoformat()

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def fail_on(self, table: str, operation: str) -> None:
        self.failures.add((table, operation))

    def rows(self, table: str) -> list[dict]:
        return self.tables.get(table, [])


USER_ID = "7d3c5b8e-1111-4a2b-9c3d-000000000001"


def make_token(user_id: str = USER_ID, expires_in: timedelta = timedelta(hours=1)) -> str:
    payload = {
        "sub": user_id,
        "aud": "authenticated",
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(payload, settings.supabase_jwt_secret, algorithm="HS256")


@pytest.fixture
def fake_client() -> FakeSupabaseClient:
    return FakeSupabaseClient()


@pytest.fixture
def db(fake_client: FakeSupabaseClient) -> SupabaseService:
    return SupabaseService(client=fake_client)


@pytest.fixture
def client(db: SupabaseService):
    app.dependency_overrides[get_supabase_service] = lambda: db
    with TestClient(app) as test_client:
        test_client.headers.update({"Authorization": f"Bearer {make_token()}"})
        yield test_client
    app.dependency_overrides.clear()
