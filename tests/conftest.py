"""
Shared fixtures: an in-memory stand-in for the Supabase client and a
TestClient wired to it through FastAPI dependency overrides.
"""

import re
import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from app.config.settings import settings
from app.config.supabase import get_admin_client, get_public_client, get_user_client
from app.main import app

JWT_SECRET = "test-jwt-secret"


# ── Fake Supabase ────────────────────────────────────────────────────

class FakeAPIError(Exception):
    """Mimic postgrest.exceptions.APIError (exposes .message)."""
    def __init__(self, message):
        super().__init__(message)
        self.message = message


class FakeResponse:
    def __init__(self, data=None, count=None):
        self.data = data
        self.count = count


def _like(pattern):
    parts = [re.escape(p) for p in pattern.split("%")]
    return re.compile("^" + ".*".join(parts) + "$", re.IGNORECASE)


class FakeQuery:
    def __init__(self, backend, table):
        self.backend = backend
        self.table = table
        self.calls = []
        self.mode = "select"
        self.values = None
        self.on_conflict = None
        self.count = None
        self.head = False
        self.predicates = []
        self.order_by = None
        self.row_range = None
        self.row_limit = None
        self.is_single = False
        self._negate = False

    # builders
    def select(self, *columns, count=None, head=None):
        self.calls.append(("select", columns, count, head))
        self.count = count
        self.head = bool(head)
        return self

    def update(self, values):
        self.calls.append(("update", values))
        self.mode, self.values = "update", values
        return self

    def upsert(self, values, on_conflict=None):
        self.calls.append(("upsert", values, on_conflict))
        self.mode, self.values, self.on_conflict = "upsert", values, on_conflict
        return self

    # filters
    def eq(self, column, value):
        self.calls.append(("eq", column, value))
        self.predicates.append(lambda r: r.get(column) == value)
        return self

    def ilike(self, column, pattern):
        self.calls.append(("ilike", column, pattern))
        rx = _like(pattern)
        self.predicates.append(lambda r: r.get(column) is not None and bool(rx.match(str(r[column]))))
        return self

    def gte(self, column, value):
        self.calls.append(("gte", column, value))
        self.predicates.append(lambda r: r.get(column) is not None and r[column] >= value)
        return self

    def lte(self, column, value):
        self.calls.append(("lte", column, value))
        self.predicates.append(lambda r: r.get(column) is not None and r[column] <= value)
        return self

    def or_(self, expression):
        self.calls.append(("or", expression))
        return self

    @property
    def not_(self):
        self._negate = True
        return self

    def is_(self, column, value):
        negate, self._negate = self._negate, False
        self.calls.append(("not.is" if negate else "is", column, value))
        if value == "null":
            self.predicates.append(lambda r: (r.get(column) is None) != negate)
        return self

    def order(self, column, desc=False):
        self.calls.append(("order", column, desc))
        self.order_by = (column, desc)
        return self

    def range(self, start, end):
        self.calls.append(("range", start, end))
        self.row_range = (start, end)
        return self

    def limit(self, size):
        self.calls.append(("limit", size))
        self.row_limit = size
        return self

    def single(self):
        self.calls.append(("single",))
        self.is_single = True
        return self

    def call(self, name):
        return [c for c in self.calls if c[0] == name]

    def execute(self):
        self.backend.queries.append(self)
        if self.table in self.backend.errors:
            raise FakeAPIError(self.backend.errors[self.table])

        rows = self.backend.tables.setdefault(self.table, [])

        if self.mode == "upsert":
            key = self.on_conflict
            existing = next((r for r in rows if key and r.get(key) == self.values.get(key)), None)
            if existing is not None:
                existing.update(self.values)
            else:
                rows.append(dict(self.values))
            return FakeResponse([self.values])

        matched = [r for r in rows if all(p(r) for p in self.predicates)]

        if self.mode == "update":
            for r in matched:
                r.update(self.values)
            return FakeResponse(matched)

        if self.order_by:
            column, desc = self.order_by
            present = [r for r in matched if r.get(column) is not None]
            missing = [r for r in matched if r.get(column) is None]
            matched = sorted(present, key=lambda r: r[column], reverse=desc) + missing

        total = len(matched)
        if self.row_range:
            start, end = self.row_range
            matched = matched[start:end + 1]
        if self.row_limit is not None:
            matched = matched[:self.row_limit]

        if self.is_single:
            if len(matched) != 1:
                raise FakeAPIError("JSON object requested, multiple (or no) rows returned")
            return FakeResponse(dict(matched[0]))

        count = total if self.count else None
        return FakeResponse(None if self.head else [dict(r) for r in matched], count)


class FakeRpc:
    def __init__(self, backend, name, params):
        self.backend = backend
        self.name = name
        self.params = params

    def execute(self):
        self.backend.rpc_calls.append((self.name, self.params))
        if self.name in self.backend.errors:
            raise FakeAPIError(self.backend.errors[self.name])
        return FakeResponse(self.backend.rpc_results.get(self.name, []))


class FakeAuthAdmin:
    def __init__(self, backend):
        self.backend = backend
        self.invited = []
        self.signed_out = []

    def invite_user_by_email(self, email):
        if "invite" in self.backend.errors:
            raise FakeAPIError(self.backend.errors["invite"])
        self.invited.append(email)
        if self.backend.invite_returns_no_user:
            return SimpleNamespace(user=None)
        return SimpleNamespace(user=SimpleNamespace(id=uuid.uuid4(), email=email))

    def sign_out(self, jwt_token, scope="global"):
        self.signed_out.append(jwt_token)


class FakeAuth:
    def __init__(self, backend):
        self.backend = backend
        self.admin = FakeAuthAdmin(backend)

    def get_user(self, token):
        user = self.backend.users_by_token.get(token)
        if user is None:
            raise FakeAPIError("invalid JWT")
        return SimpleNamespace(user=user)

    def sign_in_with_password(self, credentials):
        password = self.backend.passwords.get(credentials["email"])
        if password is None or password != credentials["password"]:
            raise FakeAPIError("Invalid login credentials")
        user = SimpleNamespace(id="u-gestor", email=credentials["email"])
        session = SimpleNamespace(access_token="access-123", refresh_token="refresh-456", expires_in=3600)
        return SimpleNamespace(user=user, session=session)


class FakePostgrest:
    def __init__(self):
        self.token = None

    def auth(self, token):
        self.token = token


class FakeSupabase:
    def __init__(self):
        self.tables = {}
        self.rpc_results = {}
        self.errors = {}
        self.queries = []
        self.rpc_calls = []
        self.users_by_token = {}
        self.passwords = {}
        self.invite_returns_no_user = False
        self.auth = FakeAuth(self)
        self.postgrest = FakePostgrest()

    def table(self, name):
        return FakeQuery(self, name)

    def rpc(self, name, params=None):
        return FakeRpc(self, name, params or {})

    def profile(self, user_id):
        return next(r for r in self.tables["profiles"] if r["user_id"] == user_id)

    def queries_on(self, table):
        return [q for q in self.queries if q.table == table]


# ── Fixtures ─────────────────────────────────────────────────────────

CRM_TABLES = [
    {"table_name": "Farol", "display_name": "Farol"},
    {"table_name": "BANCO V8", "display_name": "Banco V8"},
    {"table_name": "Consignado", "display_name": "Consignado"},
]


def make_profile(user_id, role, **extra):
    row = {
        "user_id": user_id,
        "email": f"{user_id}@farol.com.br",
        "nome": user_id,
        "telefone": None,
        "role": role,
        "org": "Farol",
        "orgs": ["Farol"],
        "default_table": "Farol",
        "allowed_tables": ["Farol"],
        "is_active": True,
        "created_at": "2024-05-01T12:00:00+00:00",
    }
    row.update(extra)
    return row


def make_token(sub, email=None, secret=JWT_SECRET, audience="authenticated", expires_in=3600):
    payload = {
        "sub": sub,
        "email": email or f"{sub}@farol.com.br",
        "aud": audience,
        "role": "authenticated",
        "exp": datetime.now(timezone.utc) + timedelta(seconds=expires_in),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def auth_header(user_id):
    return {"Authorization": f"Bearer {make_token(user_id)}"}


@pytest.fixture
def backend():
    fake = FakeSupabase()
    fake.tables["profiles"] = [
        make_profile("u-admin", "superadmin", allowed_tables=["Farol"], created_at="2024-01-01T00:00:00+00:00"),
        make_profile("u-gestor", "gestor", allowed_tables=["Farol", "BANCO V8"], created_at="2024-03-01T00:00:00+00:00"),
        make_profile("u-cliente", "cliente", allowed_tables=[], created_at="2024-02-01T00:00:00+00:00"),
    ]
    fake.rpc_results["rpc_list_crm_tables"] = [dict(t) for t in CRM_TABLES]
    return fake


@pytest.fixture
def client(backend, monkeypatch):
    monkeypatch.setattr(settings, "supabase_jwt_secret", JWT_SECRET)
    app.dependency_overrides[get_admin_client] = lambda: backend
    app.dependency_overrides[get_public_client] = lambda: backend
    app.dependency_overrides[get_user_client] = lambda: backend
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
