"""
SQL Server Dialect - SQL Server catalog conventions

SQL Server has no information_schema view that exposes everything needed
in one query, so columns come from two stored procedures: sp_columns for
the column list and sp_pkeys for primary key membership.
"""

from typing import Any, Dict, List, Optional, Tuple

from ..utils.defaults import is_numeric, unquote
from .base import CatalogRow, DatabaseDialect

import logging
logger = logging.getLogger(__name__)


class SQLServerDialect(DatabaseDialect):
    """Dialect for SQL Server databases."""

    name = "sqlserver"

    def fetch_current_schema(self) -> Optional[str]:
        return self.executor.fetch_value("SELECT SCHEMA_NAME()")

    def table_list_query(self, schema: Optional[str] = None) -> Tuple[str, Dict[str, Any]]:
        """
        List user tables.

        The schema argument is NOT honored: every user table of the current
        database is returned.
        """
        if schema:
            logger.warning(
                f"SQL Server table list ignores the schema filter ({schema!r}); "
                "returning all user tables"
            )
        return "SELECT name FROM sysobjects WHERE type = 'U' ORDER BY name", {}

    def autoincrement_sql(self) -> str:
        return """COLUMNPROPERTY(
                    OBJECT_ID(COLUMNS.TABLE_SCHEMA + '.' + COLUMNS.TABLE_NAME),
                    COLUMNS.COLUMN_NAME,
                    'IsIdentity'
                )"""

    def fetch_column_rows(self, schema: Optional[str], table: str) -> List[CatalogRow]:
        """
        Build catalog rows from sp_columns and sp_pkeys.

        One row per column; primary key membership is a lookup in the
        sp_pkeys result and identity columns are recognized from TYPE_NAME
        (e.g. "int identity").
        """
        # get column info
        text = "exec sp_columns @table_name = " + self.quote_name(table)
        if schema:
            text += ", @table_owner = " + self.quote_name(schema)
        raw_cols = self.executor.fetch_all(text)

        if not raw_cols:
            return []

        # get primary key info
        text = (
            "exec sp_pkeys @table_owner = " + self.quote_name(str(raw_cols[0]["TABLE_OWNER"]))
            + ", @table_name = " + self.quote_name(table)
        )
        keys = {row["COLUMN_NAME"] for row in self.executor.fetch_all(text)}

        rows = []
        for raw in raw_cols:
            name = raw["COLUMN_NAME"]
            type_name = str(raw["TYPE_NAME"])
            rows.append({
                "_name": name,
                "_type": type_name.split(" ", 1)[0],
                "_size": raw.get("PRECISION"),
                "_scale": raw.get("SCALE"),
                "_notnull": not raw.get("NULLABLE"),
                "_default": raw.get("COLUMN_DEF"),
                "_autoinc": "identity" in type_name.lower(),
                "_primary": name in keys,
            })

        return rows

    def parse_default(self, default: Optional[str]) -> Optional[str]:
        """
        Reduce a SQL Server default to a literal.

        Defaults are stored wrapped in parens, sometimes several times:
        ((0)) -> 0, ('abc') -> abc, (NULL) -> None, (getdate()) -> None.
        """
        # no default
        if default is None:
            return None

        default = strip_wrapping_parens(str(default).strip())

        # sql null
        if default.upper() == "NULL":
            return None

        # numeric value
        if is_numeric(default):
            return default

        # single-quoted string, optionally N'unicode'
        if default[:1] in ("N", "n") and default[1:2] == "'":
            default = default[1:]
        if len(default) >= 2 and default[0] == default[-1] == "'":
            return unquote(default[1:-1])

        # sql expression, can't do anything with it here
        logger.debug(f"Ignoring non-literal SQL Server default: {default!r}")
        return None


def strip_wrapping_parens(value: str) -> str:
    """
    Remove parens that wrap the whole value, repeatedly.

    Only balanced wrapping pairs are removed: "((0))" -> "0", but
    "(1)+(2)" is left as is.
    """
    while len(value) >= 2 and value[0] == "(" and value[-1] == ")" and _wraps(value):
        value = value[1:-1].strip()
    return value


def _wraps(value: str) -> bool:
    """Whether the opening paren at index 0 closes at the last index."""
    depth = 0
    in_string = False
    for i, ch in enumerate(value):
        if ch == "'":
            in_string = not in_string
        elif in_string:
            continue
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i == len(value) - 1
    return False
