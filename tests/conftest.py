"""
Pytest configuration and fixtures for sqlschema tests.
"""
import sqlite3

import pytest

from sqlschema.executors import CatalogExecutor


class FakeExecutor(CatalogExecutor):
    """
    In-memory catalog executor.

    Responses are registered against a SQL fragment; the first fragment
    found in the executed SQL wins. Every call is recorded.
    """

    def __init__(self):
        self.responses = []
        self.calls = []

    def add(self, fragment, rows):
        """Serve rows (list of dicts, or an exception to raise) for SQL containing fragment."""
        self.responses.append((fragment, rows))
        return self

    def fetch_all(self, sql, params=None):
        self.calls.append((sql, dict(params or {})))
        for fragment, rows in self.responses:
            if fragment in sql:
                if isinstance(rows, Exception):
                    raise rows
                return [dict(row) for row in rows]
        return []

    def sql_calls(self):
        """Executed SQL statements, whitespace-collapsed."""
        return [" ".join(sql.split()) for sql, _ in self.calls]


@pytest.fixture
def executor():
    """Create an empty FakeExecutor."""
    return FakeExecutor()


@pytest.fixture
def mysql_executor(executor):
    """FakeExecutor answering the MySQL version probe."""
    executor.add("SHOW VARIABLES", [
        {"Variable_name": "version", "Value": "8.0.36"},
        {"Variable_name": "version_comment", "Value": "MySQL Community Server - GPL"},
    ])
    return executor


@pytest.fixture
def mariadb_executor(executor):
    """FakeExecutor answering the version probe as MariaDB."""
    executor.add("SHOW VARIABLES", [
        {"Variable_name": "version", "Value": "10.11.6-MariaDB-1:10.11.6+maria~ubu2204"},
    ])
    return executor


@pytest.fixture
def sqlite_conn():
    """In-memory sqlite3 connection (qmark paramstyle) with a small table."""
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE items (id INTEGER PRIMARY KEY, name TEXT, price REAL)")
    conn.executemany(
        "INSERT INTO items (name, price) VALUES (?, ?)",
        [("apple", 1.5), ("pear", 2.25), ("50% off", 0.5)],
    )
    conn.commit()
    yield conn
    conn.close()


def catalog_row(name, type_, size=None, scale=None, notnull=0, default=None,
                autoinc=0, primary=0, **extra):
    """Build one information_schema-shaped catalog row."""
    row = {
        "_name": name,
        "_type": type_,
        "_size": size,
        "_scale": scale,
        "_notnull": notnull,
        "_default": default,
        "_autoinc": autoinc,
        "_primary": primary,
    }
    row.update(extra)
    return row


@pytest.fixture
def make_row():
    """Return the catalog_row builder."""
    return catalog_row
