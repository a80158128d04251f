from datetime import datetime, timezone

import psycopg2
import pytest
from psycopg2 import errors as pg_errors

from src.core.errors import StoreError
from src.infrastructure.storage.waitlist_store import WaitlistStore

class FakeCursor:
    def __init__(self, connection):
        self.connection = connection

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False

    def execute(self, query, params=None):
        self.connection.queries.append((" ".join(query.split()), params))
        if self.connection.execute_error is not None:
            raise self.connection.execute_error

    def fetchone(self):
        return self.connection.row

    def fetchall(self):
        raise psycopg2.ProgrammingError("no results to fetch")

class FakeConnection:
    def __init__(self, row=None, execute_error=None):
        self.row = row
        self.execute_error = execute_error
        self.queries = []
        self.commits = 0
        self.rollbacks = 0
        self.closed = False

    def cursor(self):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self.closed = True

def make_store(connection):
    return WaitlistStore(connection_factory=lambda: connection)

def test_insert_new_email_returns_created():
    created_at = datetime(2025, 1, 13, tzinfo=timezone.utc)
    conn = FakeConnection(row={"email": "a@b.com", "source": "landing_hero", "created_at": created_at})

    result = make_store(conn).insert("a@b.com", "landing_hero")

    assert result.created is True
    assert result.entry.email == "a@b.com"
    assert result.entry.created_at == created_at
    query, params = conn.queries[0]
    assert query.startswith("INSERT INTO waitlist (email, source)")
    assert "ON CONFLICT (email) DO NOTHING" in query
    assert params == ("a@b.com", "landing_hero")
    assert conn.commits == 1
    assert conn.closed

def test_conflict_returns_not_created():
    conn = FakeConnection(row=None)

    result = make_store(conn).insert("a@b.com", "landing_hero")

    assert result.created is False
    assert result.entry is None
    assert conn.closed

def test_unique_violation_returns_not_created():
    conn = FakeConnection(execute_error=pg_errors.UniqueViolation("duplicate key value"))

    result = make_store(conn).insert("a@b.com", "landing_hero")

    assert result.created is False
    assert conn.rollbacks == 1

def test_other_database_error_raises_store_error():
    conn = FakeConnection(execute_error=pg_errors.UndefinedTable('relation "waitlist" does not exist'))

    with pytest.raises(StoreError) as exc_info:
        make_store(conn).insert("a@b.com", "landing_hero")

    assert isinstance(exc_info.value.__cause__, psycopg2.Error)
    assert conn.rollbacks == 1
    assert conn.closed

def test_connection_failure_raises_store_error():
    def refuse():
        raise psycopg2.OperationalError("could not connect to server")

    with pytest.raises(StoreError):
        WaitlistStore(connection_factory=refuse).insert("a@b.com", "landing_hero")

def test_ping():
    conn = FakeConnection(row={"ok": 1})
    assert make_store(conn).ping() is True
    assert conn.queries[0][0] == "SELECT 1 AS ok"

def test_create_table_runs_ddl():
    conn = FakeConnection()

    make_store(conn).create_table()

    query, _ = conn.queries[0]
    assert query.startswith("CREATE TABLE IF NOT EXISTS waitlist")
    assert "email TEXT NOT NULL UNIQUE" in query
    assert conn.commits == 1
