"""Shared test fixtures for the BagDrop API."""

import itertools

import httpx
import pytest
from fastapi.testclient import TestClient
from postgrest.base_request_builder import APIResponse, SingleAPIResponse
from postgrest.exceptions import APIError

from app.main import app
from app.db.supabase import get_gateway

# Embedded table -> foreign key column on the parent row
EMBED_KEYS = {"users": "user_id", "storage_locations": "location_id"}


class FakeQuery:
    """
    Records the builder calls the services make (select/insert/eq/limit/
    maybe_single) and answers them from the owning store on execute().
    """

    def __init__(self, store, table):
        self.store = store
        self.table = table
        self.method = "GET"
        self.columns = ()
        self.rows = None
        self.filters = []
        self.row_limit = None
        self.maybe_one = False
        self.retry_enabled = True

    def select(self, *columns):
        self.columns = columns
        return self

    def insert(self, json, **kwargs):
        self.method = "POST"
        self.rows = json if isinstance(json, list) else [json]
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def limit(self, size):
        self.row_limit = size
        return self

    def maybe_single(self):
        self.maybe_one = True
        return self

    def retry(self, enabled):
        self.retry_enabled = enabled
        return self

    async def execute(self):
        return self.store.run(self)


class InMemoryStore:
    """
    Dict-backed stand-in for the PostgREST client.

    Every execute() is recorded in `calls` as (table, HTTP method). Failures are
    injected per (table, method): `fail()` raises the client's APIError,
    `disconnect()` raises an httpx transport error, `explode_on` raises a
    plain RuntimeError and `return_nothing_on` makes an insert return no rows.
    """

    def __init__(self, tables=None):
        self.tables = {name: [dict(row) for row in rows] for name, rows in (tables or {}).items()}
        self.calls = []
        self.queries = []
        self.failures = {}
        self.disconnected = set()
        self.explode_on = None
        self.return_nothing_on = None
        self._ids = itertools.count(1)

    def table(self, name):
        return FakeQuery(self, name)

    def fail(self, table, method, message, code="23503"):
        self.failures[(table, method)] = {
            "message": message,
            "code": code,
            "details": None,
            "hint": None,
        }

    def disconnect(self, table, method):
        self.disconnected.add((table, method))

    def rows(self, table):
        return self.tables.get(table, [])

    def run(self, query):
        key = (query.table, query.method)
        self.calls.append(key)
        self.queries.append(query)

        if self.explode_on == key:
            raise RuntimeError("gateway exploded")
        if key in self.disconnected:
            raise httpx.ConnectError("connection refused")
        if key in self.failures:
            raise APIError(dict(self.failures[key]))

        rows = self.tables.setdefault(query.table, [])

        if query.method == "POST":
            inserted = []
            for row in query.rows:
                stored = {"id": f"{query.table}-{next(self._ids)}", **row}
                rows.append(stored)
                inserted.append(dict(stored))
            if self.return_nothing_on == key:
                inserted = []
            return APIResponse(data=inserted)

        matches = [
            row for row in rows
            if all(str(row.get(column)) == str(value) for column, value in query.filters)
        ]
        if query.row_limit is not None:
            matches = matches[:query.row_limit]
        matches = [self._embed(query, row) for row in matches]

        if not query.maybe_one:
            return APIResponse(data=matches)
        if not matches:
            return None
        if len(matches) > 1:
            raise APIError({
                "message": "Cannot coerce the result to a single JSON object",
                "code": "406",
                "details": "The result contains more than one row.",
                "hint": None,
            })
        return SingleAPIResponse(data=matches[0])

    def _embed(self, query, row):
        result = dict(row)
        for table, foreign_key in EMBED_KEYS.items():
            if f"{table}(*)" in query.columns:
                related = [r for r in self.tables.get(table, []) if r.get("id") == row.get(foreign_key)]
                result[table] = dict(related[0]) if related else None
        return result


@pytest.fixture
def gateway():
    return InMemoryStore()


@pytest.fixture
def client(gateway):
    app.dependency_overrides[get_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()
