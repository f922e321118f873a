"""
Dialect Factory - Create appropriate dialect based on database type
"""

from typing import Any, Dict, Iterable, List, Optional, Type

from ..constants import DEFAULT_DB_TYPE_ALIASES, DRIVER_DB_TYPES
from ..errors import UnsupportedDialectError
from ..executors import CatalogExecutor
from .base import DatabaseDialect

import logging
logger = logging.getLogger(__name__)


class DialectFactory:
    """
    Registry of dialect classes, keyed by canonical db type.

    Aliases ("mariadb", "postgres", "mssql", ...) resolve to a canonical
    type before the lookup, so each dialect class is registered once.

    Usage:
        dialect = DialectFactory.create("postgres", executor)
        inspector = SchemaInspector(dialect)
    """

    _dialects: Dict[str, Type[DatabaseDialect]] = {}
    _aliases: Dict[str, str] = {}

    @classmethod
    def resolve(cls, db_type: str) -> Optional[str]:
        """Canonical db type for a name or alias, None when nothing handles it."""
        key = db_type.strip().lower()
        key = cls._aliases.get(key, key)
        return key if key in cls._dialects else None

    @classmethod
    def create(cls, db_type: str, executor: CatalogExecutor) -> Optional[DatabaseDialect]:
        """
        Build the dialect for a db type or alias.

        Args:
            db_type: "mysql", "mariadb", "postgres", "mssql", ...
            executor: Catalog query executor the dialect reads through

        Returns:
            A new dialect, or None (with a warning) for an unknown type
        """
        canonical = cls.resolve(db_type)
        if canonical is None:
            logger.warning(f"No dialect for database type: {db_type}")
            return None

        return cls._dialects[canonical](executor)

    @classmethod
    def is_supported(cls, db_type: str) -> bool:
        return cls.resolve(db_type) is not None

    @classmethod
    def supported_types(cls) -> List[str]:
        """Canonical types plus every alias that points at one."""
        names = set(cls._dialects)
        names.update(alias for alias, target in cls._aliases.items() if target in cls._dialects)
        return sorted(names)

    @classmethod
    def register(
        cls,
        db_type: str,
        dialect_class: Type[DatabaseDialect],
        aliases: Iterable[str] = ()
    ):
        """
        Add (or replace) the dialect for a canonical db type.

        Args:
            db_type: Canonical type name
            dialect_class: DatabaseDialect subclass
            aliases: Other names that should resolve to db_type
        """
        canonical = db_type.strip().lower()
        cls._dialects[canonical] = dialect_class
        for alias in aliases:
            cls._aliases[alias.strip().lower()] = canonical
        logger.debug(f"{dialect_class.__name__} handles {canonical}")


def detect_db_type(connection: Any) -> str:
    """
    Work out the backend of a DB-API connection.

    The driver module decides for single-backend drivers (psycopg2,
    PyMySQL, python-tds, ...). pyodbc connections are asked for their
    DBMS name.

    Raises:
        UnsupportedDialectError: If the backend is not one of ours
    """
    module_name = type(connection).__module__.split(".")[0]

    if module_name == "pyodbc":
        import pyodbc
        dbms_name = str(connection.getinfo(pyodbc.SQL_DBMS_NAME) or "")
        db_type = _db_type_from_dbms_name(dbms_name)
        if db_type is None:
            raise UnsupportedDialectError(dbms_name, DialectFactory.supported_types())
        logger.info(f"Detected {db_type} from ODBC DBMS name {dbms_name!r}")
        return db_type

    db_type = DRIVER_DB_TYPES.get(module_name)
    if db_type is None:
        raise UnsupportedDialectError(module_name, DialectFactory.supported_types())

    logger.info(f"Detected {db_type} from driver {module_name}")
    return db_type


def _db_type_from_dbms_name(dbms_name: str) -> Optional[str]:
    name = dbms_name.lower()
    if "sql server" in name:
        return "sqlserver"
    if "postgres" in name:
        return "postgresql"
    if "mysql" in name or "mariadb" in name:
        return "mysql"
    return None


def _register_default_dialects():
    """Register built-in dialects. Called on module import."""
    from .mysql_dialect import MySQLDialect
    from .postgresql_dialect import PostgreSQLDialect
    from .sqlserver_dialect import SQLServerDialect

    for dialect_class in (MySQLDialect, PostgreSQLDialect, SQLServerDialect):
        aliases = [
            alias for alias, db_type in DEFAULT_DB_TYPE_ALIASES.items()
            if db_type == dialect_class.name and alias != db_type
        ]
        DialectFactory.register(dialect_class.name, dialect_class, aliases)


# Register on module import
_register_default_dialects()
