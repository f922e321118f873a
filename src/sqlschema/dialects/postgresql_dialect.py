"""
PostgreSQL Dialect - PostgreSQL catalog conventions
"""

from typing import Any, Dict, List, Optional, Tuple

from ..constants import PG_SYSTEM_SCHEMAS
from ..utils.defaults import is_numeric, unquote
from .base import CatalogRow, DatabaseDialect, fetch_information_schema_rows

import logging
logger = logging.getLogger(__name__)


class PostgreSQLDialect(DatabaseDialect):
    """Dialect for PostgreSQL databases."""

    name = "postgresql"

    def fetch_current_schema(self) -> Optional[str]:
        return self.executor.fetch_value("SELECT CURRENT_SCHEMA")

    def table_list_query(self, schema: Optional[str] = None) -> Tuple[str, Dict[str, Any]]:
        """
        List tables of one schema, or "schema.table" names of every
        non-system schema when no schema is given.
        """
        if schema:
            return """
                SELECT table_name
                FROM information_schema.tables
                WHERE table_schema = :schema
            """, {"schema": schema}

        excluded = " AND ".join(f"table_schema != '{name}'" for name in PG_SYSTEM_SCHEMAS)
        return f"""
                SELECT table_schema || '.' || table_name
                FROM information_schema.tables
                WHERE {excluded}
            """, {}

    def autoincrement_sql(self) -> str:
        # serial columns are backed by a sequence: nextval('..._seq'::regclass)
        return """CASE
                    WHEN SUBSTRING(columns.COLUMN_DEFAULT FROM 1 FOR 7) = 'nextval' THEN 1
                    ELSE 0
                END"""

    def fetch_column_rows(self, schema: Optional[str], table: str) -> List[CatalogRow]:
        return fetch_information_schema_rows(self, schema, table)

    def parse_default(self, default: Optional[str]) -> Optional[str]:
        """
        Given a native column default, find the literal value.

        'active'::character varying -> active, 42 -> 42; keywords and
        function calls (now(), nextval(...), true) -> None.
        """
        if default is None:
            return None

        default = str(default).strip()
        if default.upper() == "NULL":
            return None

        # numeric literal?
        if is_numeric(default):
            return default

        # string literal?
        quote = default[:1]
        if quote in ("'", '"'):
            # drop the trailing ::typedef, then the enclosing quotes
            pos = default.rfind("::")
            body = default[:pos] if pos > 0 else default
            if len(body) >= 2 and body.endswith(quote):
                body = body[:-1]
            return unquote(body[1:], quote)

        logger.debug(f"Ignoring non-literal PostgreSQL default: {default!r}")
        return None
