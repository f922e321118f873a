"""
Database Dialects - Backend-specific catalog conventions

Each dialect is a strategy object the SchemaInspector delegates to for
catalog access and value normalization.

Usage:
    from sqlschema.dialects import DialectFactory

    dialect = DialectFactory.create("mysql", executor)
    dialect.table_list_query("shop")      # ("SHOW TABLES IN `shop`", {})
    dialect.parse_default("CURRENT_TIMESTAMP")   # None
"""

from .base import DatabaseDialect, fetch_information_schema_rows
from .factory import DialectFactory, detect_db_type

from .mysql_dialect import MySQLDialect
from .postgresql_dialect import PostgreSQLDialect
from .sqlserver_dialect import SQLServerDialect

__all__ = [
    # Base classes
    "DatabaseDialect",
    "fetch_information_schema_rows",

    # Factory
    "DialectFactory",
    "detect_db_type",

    # Implementations
    "MySQLDialect",
    "PostgreSQLDialect",
    "SQLServerDialect",
]
