"""
MySQL Dialect - MySQL/MariaDB catalog conventions
"""

import csv
import re
from typing import Any, Dict, List, Optional, Tuple

from ..executors import CatalogExecutor
from ..utils.defaults import is_numeric, unquote
from .base import CatalogRow, ColumnRecord, DatabaseDialect, fetch_information_schema_rows

import logging
logger = logging.getLogger(__name__)

# The only non-literal default MySQL allows; MariaDB and MySQL 8 may report
# it in lower case, with "()" or with a fractional seconds precision.
_CURRENT_TIMESTAMP_RE = re.compile(r"^current_timestamp(\(\d*\))?$", re.IGNORECASE)


class MySQLDialect(DatabaseDialect):
    """Dialect for MySQL/MariaDB databases."""

    name = "mysql"

    def __init__(self, executor: CatalogExecutor):
        super().__init__(executor)
        self.is_mariadb = self._detect_mariadb()

    def _detect_mariadb(self) -> bool:
        """Check the server version string once, at construction."""
        rows = self.executor.fetch_all("SHOW VARIABLES LIKE '%version%'")
        variables = {}
        for row in rows:
            values = list(row.values())
            if len(values) >= 2:
                variables[values[0]] = values[1]

        version = str(variables.get("version") or "")
        is_mariadb = "maria" in version.lower()
        logger.debug(f"MySQL server version {version!r} (mariadb={is_mariadb})")
        return is_mariadb

    def fetch_current_schema(self) -> Optional[str]:
        return self.executor.fetch_value("SELECT DATABASE()")

    def table_list_query(self, schema: Optional[str] = None) -> Tuple[str, Dict[str, Any]]:
        """SHOW TABLES, optionally IN a quoted schema."""
        text = "SHOW TABLES"
        if schema:
            text += " IN " + self.quote_name(schema)
        return text, {}

    def autoincrement_sql(self) -> str:
        return """CASE
                    WHEN LOCATE('auto_increment', columns.EXTRA) > 0 THEN 1
                    ELSE 0
                END"""

    def extended_sql(self) -> str:
        return """,
                columns.column_type as _extended"""

    def fetch_column_rows(self, schema: Optional[str], table: str) -> List[CatalogRow]:
        return fetch_information_schema_rows(self, schema, table)

    def parse_default(self, default: Optional[str]) -> Optional[str]:
        if default is None:
            return None

        default = str(default)
        if _CURRENT_TIMESTAMP_RE.match(default.strip()):
            return None

        if not self.is_mariadb:
            return default

        # MariaDB 10.2.7+ quotes string literals, so an unquoted value is
        # NULL, a number or an expression
        if len(default) >= 2 and default[0] == default[-1] == "'":
            return unquote(default[1:-1])
        if default.strip().upper() == "NULL" or is_numeric(default):
            return default

        logger.debug(f"Ignoring non-literal MariaDB default: {default!r}")
        return None

    def post_process_column(self, column: ColumnRecord, row: CatalogRow) -> ColumnRecord:
        """
        Apply MySQL column_type details.

        - MariaDB reports the string 'NULL' as default of nullable columns
          without one
        - "unsigned" is appended to the type
        - enum value lists become options
        """
        if self.is_mariadb and not column["notnull"] and row.get("_default") == "NULL":
            column["default"] = None

        extended = str(row.get("_extended") or "").strip()
        lowered = extended.lower()

        if "unsigned" in lowered:
            column["type"] = f"{column['type']} unsigned"
            return column

        if lowered.startswith("enum"):
            column["options"] = parse_enum_options(extended[4:])

        return column


def parse_enum_options(values: str) -> List[str]:
    """
    Parse the value list of an enum column type.

    Args:
        values: Parenthesized list as in column_type, e.g. "('a','b,c')"

    Returns:
        The enum values; quotes escaped by doubling are unescaped
    """
    values = values.strip()
    if values.startswith("("):
        values = values[1:]
    if values.endswith(")"):
        values = values[:-1]
    if not values:
        return []

    reader = csv.reader([values], delimiter=",", quotechar="'", doublequote=True)
    return next(reader)
