"""
Pytest configuration.

Adds the lead-synthesis-platform directory to the Python path so tests can
import domain, repositories, services and api, clears store / AI credentials
from the environment so no test reaches the network, and provides an
in-memory stand-in for the Supabase query builder.
"""

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add the lead-synthesis-platform directory to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from repositories.client import reset_supabase  # noqa: E402


_CREDENTIAL_VARS = (
    "SUPABASE_URL",
    "SUPABASE_KEY",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "JWT_SECRET",
    "JWT_ALGORITHM",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Run every test with no store / AI credentials and no cached client."""

    for name in _CREDENTIAL_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_supabase()
    yield
    reset_supabase()


class FakeQuery:
    """Chainable query builder mimicking the parts of postgrest used here."""

    def __init__(self, store: "FakeSupabase", table: str):
        self.store = store
        self.table = table
        self.payload = None
        self.operation = "select"
        self.filters = []

    def insert(self, payload):
        self.operation = "insert"
        self.payload = payload
        return self

    def update(self, payload):
        self.operation = "update"
        self.payload = payload
        return self

    def select(self, *_columns):
        self.operation = "select"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, *_args, **_kwargs):
        return self

    def range(self, *_args):
        return self

    def limit(self, *_args):
        return self

    def _matches(self, row):
        return all(row.get(column) == value for column, value in self.filters)

    def execute(self):
        call_index = self.store.calls.get((self.table, self.operation), 0)
        self.store.calls[(self.table, self.operation)] = call_index + 1

        if self.table in self.store.down_tables:
            raise RuntimeError(f"connection refused ({self.table})")
        if call_index in self.store.failing_calls.get((self.table, self.operation), set()):
            raise RuntimeError(f"insert rejected ({self.table} #{call_index})")

        rows = self.store.tables.setdefault(self.table, [])

        if self.operation == "insert":
            row = dict(self.payload)
            row["id"] = self.store.next_id()
            row.setdefault("saved", False)
            row.setdefault("group_id", None)
            rows.append(row)
            return SimpleNamespace(data=[dict(row)], error=None)

        if self.operation == "update":
            updated = []
            for row in rows:
                if self._matches(row):
                    row.update(self.payload)
                    updated.append(dict(row))
            return SimpleNamespace(data=updated, error=None)

        return SimpleNamespace(data=[dict(row) for row in rows if self._matches(row)], error=None)


class FakeSupabase:
    """
    In-memory Supabase client.

    down_tables: every call on these tables raises
    failing_calls: {(table, operation): {call indexes}} that raise
    """

    def __init__(self, down_tables=(), failing_calls=None):
        self.tables = {}
        self.calls = {}
        self.down_tables = set(down_tables)
        self.failing_calls = failing_calls or {}
        self._next_id = 100

    def next_id(self):
        self._next_id += 1
        return self._next_id

    def table(self, name):
        return FakeQuery(self, name)


@pytest.fixture
def fake_supabase(monkeypatch):
    """Install a FakeSupabase as the process-wide client."""

    fake = FakeSupabase()
    monkeypatch.setattr("repositories.client._client", fake)
    return fake
