"""
Unit tests for DialectFactory, backend detection and inspector setup.
"""
import logging
import sys
import types
from unittest.mock import Mock

import pytest

from sqlschema import SchemaInspector
from sqlschema.dialects import (
    DatabaseDialect,
    DialectFactory,
    MySQLDialect,
    PostgreSQLDialect,
    SQLServerDialect,
    detect_db_type,
)
from sqlschema.errors import UnsupportedDialectError


def fake_connection(module_name):
    """Instance of a class that claims to live in module_name."""
    return type("Connection", (), {"__module__": module_name})()


class TestDialectFactory:

    @pytest.mark.parametrize("db_type,cls", [
        ("postgresql", PostgreSQLDialect),
        ("postgres", PostgreSQLDialect),
        ("PostgreSQL", PostgreSQLDialect),
        ("sqlserver", SQLServerDialect),
        ("mssql", SQLServerDialect),
    ])
    def test_create(self, executor, db_type, cls):
        assert isinstance(DialectFactory.create(db_type, executor), cls)

    @pytest.mark.parametrize("db_type", ["mysql", "mariadb"])
    def test_create_mysql(self, mysql_executor, db_type):
        assert isinstance(DialectFactory.create(db_type, mysql_executor), MySQLDialect)

    def test_unknown_type_returns_none(self, executor, caplog):
        with caplog.at_level(logging.WARNING):
            assert DialectFactory.create("oracle", executor) is None
        assert "No dialect for database type: oracle" in caplog.text

    def test_supported_types(self):
        supported = DialectFactory.supported_types()
        for db_type in ("mysql", "mariadb", "postgresql", "sqlserver"):
            assert db_type in supported
        assert DialectFactory.is_supported("MSSQL")
        assert not DialectFactory.is_supported("oracle")

    def test_register(self, executor):
        class SnowflakeDialect(PostgreSQLDialect):
            name = "snowflake"

        DialectFactory.register("Snowflake", SnowflakeDialect)
        try:
            dialect = DialectFactory.create("snowflake", executor)
            assert isinstance(dialect, SnowflakeDialect)
            assert isinstance(dialect, DatabaseDialect)
        finally:
            DialectFactory._dialects.pop("snowflake", None)

    def test_register_with_aliases(self, executor):
        class SnowflakeDialect(PostgreSQLDialect):
            name = "snowflake"

        DialectFactory.register("snowflake", SnowflakeDialect, aliases=["SNOW"])
        try:
            assert DialectFactory.resolve(" snow ") == "snowflake"
            assert isinstance(DialectFactory.create("snow", executor), SnowflakeDialect)
            assert "snow" in DialectFactory.supported_types()
        finally:
            DialectFactory._dialects.pop("snowflake", None)
            DialectFactory._aliases.pop("snow", None)

    @pytest.mark.parametrize("alias,canonical", [
        ("mariadb", "mysql"),
        ("Postgres", "postgresql"),
        ("pgsql", "postgresql"),
        ("MSSQL", "sqlserver"),
        ("sqlsrv", "sqlserver"),
        ("mysql", "mysql"),
    ])
    def test_resolve_aliases(self, alias, canonical):
        assert DialectFactory.resolve(alias) == canonical

    def test_each_dialect_registered_once(self):
        assert sorted(DialectFactory._dialects) == ["mysql", "postgresql", "sqlserver"]


class TestDetectDbType:

    @pytest.mark.parametrize("module_name,expected", [
        ("psycopg2.extensions", "postgresql"),
        ("psycopg", "postgresql"),
        ("pymysql.connections", "mysql"),
        ("MySQLdb.connections", "mysql"),
        ("pytds", "sqlserver"),
    ])
    def test_from_driver_module(self, module_name, expected):
        assert detect_db_type(fake_connection(module_name)) == expected

    def test_unknown_driver(self):
        with pytest.raises(UnsupportedDialectError) as exc_info:
            detect_db_type(fake_connection("sqlite3"))
        assert exc_info.value.db_type == "sqlite3"
        assert "mysql" in exc_info.value.supported

    @pytest.fixture
    def fake_pyodbc(self, monkeypatch):
        module = types.ModuleType("pyodbc")
        module.SQL_DBMS_NAME = 17
        monkeypatch.setitem(sys.modules, "pyodbc", module)
        return module

    @pytest.mark.parametrize("dbms_name,expected", [
        ("Microsoft SQL Server", "sqlserver"),
        ("PostgreSQL", "postgresql"),
        ("MySQL", "mysql"),
        ("MariaDB", "mysql"),
    ])
    def test_pyodbc_asks_dbms_name(self, fake_pyodbc, dbms_name, expected):
        conn = fake_connection("pyodbc")
        conn.getinfo = Mock(return_value=dbms_name)

        assert detect_db_type(conn) == expected
        conn.getinfo.assert_called_once_with(17)

    def test_pyodbc_unknown_dbms(self, fake_pyodbc):
        conn = fake_connection("pyodbc")
        conn.getinfo = Mock(return_value="Oracle")
        with pytest.raises(UnsupportedDialectError):
            detect_db_type(conn)


class TestForConnection:

    def test_explicit_db_type(self, sqlite_conn):
        inspector = SchemaInspector.for_connection(sqlite_conn, db_type="postgresql")
        assert isinstance(inspector.dialect, PostgreSQLDialect)
        assert inspector.dialect.executor.connection is sqlite_conn

    def test_unsupported_db_type(self, sqlite_conn):
        with pytest.raises(UnsupportedDialectError):
            SchemaInspector.for_connection(sqlite_conn, db_type="oracle")

    def test_undetectable_connection(self, sqlite_conn):
        with pytest.raises(UnsupportedDialectError):
            SchemaInspector.for_connection(sqlite_conn)
