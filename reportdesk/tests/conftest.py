"""
Shared fixtures: an in-memory stand-in for the Supabase query builder and a
helper to sign a user in through FastAPI's dependency overrides.
"""

import copy
import itertools
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from postgrest.exceptions import APIError

from reportdesk.main import app
from reportdesk.authentication.schemas import UserContext
from reportdesk.authentication.security import get_current_user

BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)

CLIENT_MODULES = [
    "reportdesk.reports.utils",
    "reportdesk.comments.utils",
    "reportdesk.profiles.utils",
    "reportdesk.authentication.security",
]


class FakeQuery:
    """Chainable query mimicking supabase-py's table builder."""

    def __init__(self, store, table):
        self.store = store
        self.table = table
        self.op = "select"
        self.columns = "*"
        self.payload = None
        self.filters = []
        self.order_by = None

    def select(self, columns="*"):
        self.op, self.columns = "select", columns
        return self

    def insert(self, row):
        self.op, self.payload = "insert", row
        return self

    def upsert(self, row):
        self.op, self.payload = "upsert", row
        return self

    def update(self, changes):
        self.op, self.payload = "update", changes
        return self

    def delete(self):
        self.op = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def _matches(self, row):
        return all(row.get(column) == value for column, value in self.filters)

    def execute(self):
        self.store.calls.append((self.table, self.op))
        if self.store.error:
            raise APIError(self.store.error)

        rows = self.store.tables.setdefault(self.table, [])

        if self.op == "insert":
            new_rows = self.payload if isinstance(self.payload, list) else [self.payload]
            created = [self.store.new_row(self.table, r) for r in new_rows]
            rows.extend(created)
            return SimpleNamespace(data=copy.deepcopy(created))

        if self.op == "upsert":
            existing = next((r for r in rows if r["id"] == self.payload["id"]), None)
            if existing is None:
                existing = self.store.new_row(self.table, self.payload)
                rows.append(existing)
            else:
                existing.update(self.payload)
            return SimpleNamespace(data=[copy.deepcopy(existing)])

        matched = [r for r in rows if self._matches(r)]

        if self.op == "update":
            for row in matched:
                row.update(self.payload)
                if "updated_at" in row:
                    row["updated_at"] = self.store.tick()
            return SimpleNamespace(data=copy.deepcopy(matched))

        if self.op == "delete":
            self.store.tables[self.table] = [r for r in rows if not self._matches(r)]
            return SimpleNamespace(data=copy.deepcopy(matched))

        result = [self.store.decorate(self.table, copy.deepcopy(r), self.columns) for r in matched]
        if self.order_by:
            column, desc = self.order_by
            result.sort(key=lambda r: r[column], reverse=desc)
        return SimpleNamespace(data=result)


class FakeAuth:
    def __init__(self, store):
        self.store = store

    def get_user(self, token):
        user = self.store.sessions.get(token)
        return SimpleNamespace(user=user)


class FakeSupabase:
    def __init__(self):
        self.tables = {"reports": [], "comments": [], "profiles": []}
        self.sessions = {}
        self.calls = []
        self.error = None
        self.auth = FakeAuth(self)
        self._ids = itertools.count(1)
        self._clock = itertools.count(1)

    def table(self, name):
        return FakeQuery(self, name)

    def tick(self):
        return (BASE_TIME + timedelta(seconds=next(self._clock))).isoformat()

    def new_row(self, table, data):
        row = dict(data)
        row.setdefault("id", f"{table[:-1]}-{next(self._ids)}")
        row.setdefault("created_at", self.tick())
        if table == "reports":
            row.setdefault("status", "open")
            row.setdefault("updated_at", row["created_at"])
        if table == "profiles":
            row.setdefault("role", "user")
        return row

    def _profile_of(self, user_id):
        profile = next((p for p in self.tables["profiles"] if p["id"] == user_id), None)
        return {"full_name": profile.get("full_name")} if profile else None

    def decorate(self, table, row, columns):
        """Resolve the nested selections used by the data-access layer."""
        if "profiles(" in columns:
            owner = row.get("user_id") if table == "reports" else row.get("author")
            row["profiles"] = self._profile_of(owner)
        if table == "reports" and "comments(" in columns:
            row["comments"] = [
                dict(c, profiles=self._profile_of(c["author"]))
                for c in self.tables["comments"]
                if c["report_id"] == row["id"]
            ]
        return row

    def sign_in(self, token, user_id, email=None):
        self.sessions[token] = SimpleNamespace(id=user_id, email=email, role="authenticated")


@pytest.fixture
def fake_store(monkeypatch):
    """Route every data-access call to an in-memory store."""
    store = FakeSupabase()
    for module in CLIENT_MODULES:
        monkeypatch.setattr(f"{module}.get_supabase_client", lambda: store)
    return store


@pytest.fixture
def auth_user():
    """
    Override `get_current_user` to simulate a signed-in user.
    Usage: auth_user("user-1")
    """

    def _set_user(user_id="user-1", email="user@example.com"):
        fake_user = UserContext(user_id=user_id, email=email, role="authenticated")
        app.dependency_overrides[get_current_user] = lambda: fake_user
        return fake_user

    yield _set_user

    app.dependency_overrides.clear()
