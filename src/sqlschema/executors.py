"""
Catalog Query Executors - Run catalog SQL and return rows as mappings

The inspector and dialects only talk to a CatalogExecutor. Any object with
a compatible fetch_all() works; DbApiExecutor adapts a DB-API 2.0
connection (pyodbc, python-tds, psycopg2, PyMySQL, sqlite3, ...).

Catalog SQL is written with :name placeholders. DbApiExecutor rewrites them
to the paramstyle of the underlying driver.
"""

from abc import ABC, abstractmethod
import importlib
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from sqlparse import lexer
from sqlparse import tokens as T

from .errors import ExecutorConfigurationError

import logging
logger = logging.getLogger(__name__)

Params = Optional[Mapping[str, Any]]
BoundParams = Optional[Union[Sequence[Any], Dict[str, Any]]]

SUPPORTED_PARAMSTYLES = ("qmark", "format", "pyformat", "named", "numeric")


class CatalogExecutor(ABC):
    """
    Abstract catalog query executor.

    Subclasses implement fetch_all(); the single-column and single-value
    forms are derived from it. Errors raised by the database are not
    caught here.
    """

    @abstractmethod
    def fetch_all(self, sql: str, params: Params = None) -> List[Dict[str, Any]]:
        """
        Execute a statement and return every row.

        Args:
            sql: SQL text with :name placeholders
            params: Values for the placeholders

        Returns:
            List of rows, each a dict keyed by column label
        """
        pass

    def fetch_col(self, sql: str, params: Params = None) -> List[Any]:
        """Return the first column of every row."""
        return [_first_value(row) for row in self.fetch_all(sql, params)]

    def fetch_value(self, sql: str, params: Params = None) -> Any:
        """Return the first column of the first row (None if no rows)."""
        rows = self.fetch_all(sql, params)
        if not rows:
            return None
        return _first_value(rows[0])


class DbApiExecutor(CatalogExecutor):
    """
    CatalogExecutor over a DB-API 2.0 connection.

    Usage:
        executor = DbApiExecutor(psycopg2.connect(dsn))
        rows = executor.fetch_all(
            "SELECT table_name FROM information_schema.tables WHERE table_schema = :schema",
            {"schema": "public"}
        )
    """

    def __init__(self, connection: Any, paramstyle: Optional[str] = None):
        """
        Args:
            connection: Open DB-API connection (owned by the caller)
            paramstyle: Override the driver's declared paramstyle
        """
        self.connection = connection
        self.paramstyle = paramstyle or driver_paramstyle(connection)

        if self.paramstyle not in SUPPORTED_PARAMSTYLES:
            raise ExecutorConfigurationError(
                f"Unsupported paramstyle: {self.paramstyle!r}"
            )

    def fetch_all(self, sql: str, params: Params = None) -> List[Dict[str, Any]]:
        query, bound = bind_params(sql, params, self.paramstyle)
        logger.debug(f"Catalog query ({self.paramstyle}): {' '.join(query.split())}")

        cursor = self.connection.cursor()
        try:
            if bound is None:
                cursor.execute(query)
            else:
                cursor.execute(query, bound)

            if cursor.description is None:
                return []

            columns = [desc[0] for desc in cursor.description]
            return [dict(zip(columns, row)) for row in cursor.fetchall()]
        finally:
            cursor.close()


def driver_paramstyle(connection: Any) -> str:
    """
    Read the DB-API paramstyle of the driver module behind a connection.

    Falls back to "qmark" when the driver module does not declare one.
    """
    module_name = type(connection).__module__.split(".")[0]
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        logger.warning(f"Cannot import driver module {module_name!r}, assuming qmark")
        return "qmark"
    return getattr(module, "paramstyle", "qmark")


def bind_params(sql: str, params: Params, paramstyle: str) -> Tuple[str, BoundParams]:
    """
    Rewrite :name placeholders for a DB-API paramstyle.

    Placeholders inside string literals, comments and "::" casts are left
    alone (they are not placeholder tokens to the sqlparse lexer). With the
    format/pyformat styles, literal "%" characters are doubled.

    Args:
        sql: SQL with :name placeholders
        params: Named values
        paramstyle: Target paramstyle

    Returns:
        (sql, bound parameters); bound parameters are None when params is empty
    """
    if not params:
        return sql, None

    escape_percent = paramstyle in ("format", "pyformat")
    parts: List[str] = []
    positional: List[Any] = []
    named: Dict[str, Any] = {}

    for ttype, value in lexer.tokenize(sql):
        name = value[1:]
        if ttype in T.Name.Placeholder and value.startswith(":") and name in params:
            if paramstyle == "qmark":
                parts.append("?")
                positional.append(params[name])
            elif paramstyle == "format":
                parts.append("%s")
                positional.append(params[name])
            elif paramstyle == "numeric":
                positional.append(params[name])
                parts.append(f":{len(positional)}")
            elif paramstyle == "pyformat":
                parts.append(f"%({name})s")
                named[name] = params[name]
            else:
                parts.append(value)
                named[name] = params[name]
            continue

        parts.append(value.replace("%", "%%") if escape_percent else value)

    bound: BoundParams = named if paramstyle in ("named", "pyformat") else tuple(positional)
    return "".join(parts), bound


def _first_value(row: Any) -> Any:
    if isinstance(row, Mapping):
        return next(iter(row.values()), None)
    return row[0]
