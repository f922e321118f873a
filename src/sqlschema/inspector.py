"""
Schema Inspector - Discover tables and columns through a dialect

The inspector owns everything that is the same for every backend: name
splitting, merging the catalog rows of one column, default coercion and
Column construction. Backend differences are delegated to the dialect.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional

from .dialects import DatabaseDialect, DialectFactory, detect_db_type
from .dialects.base import CatalogRow, ColumnRecord
from .errors import UnsupportedDialectError
from .executors import DbApiExecutor
from .models import Column, ColumnFactory
from .utils.defaults import coerce_default
from .utils.identifiers import split_name
from .utils.type_spec import parse_type_spec

import logging
logger = logging.getLogger(__name__)


def merge_column_rows(
    rows: Iterable[CatalogRow],
    extract: Callable[[CatalogRow], ColumnRecord]
) -> Dict[str, ColumnRecord]:
    """
    Fold catalog rows into one record per column.

    The columns query LEFT JOINs key constraints, so a column shows up once
    per matching constraint (and once with no constraint). The first row of
    a column is extracted into a record; later rows only OR their primary
    key flag into it.

    Args:
        rows: Catalog rows in ordinal order
        extract: Builds a record from a column's first row

    Returns:
        Records keyed by column name, in first-seen order
    """
    columns: Dict[str, ColumnRecord] = {}
    for row in rows:
        name = row["_name"]
        if name in columns:
            columns[name]["primary"] = columns[name]["primary"] or bool(row["_primary"])
            continue
        columns[name] = extract(row)
    return columns


class SchemaInspector:
    """
    Schema discovery for one database connection.

    Usage:
        inspector = SchemaInspector.for_connection(conn)
        inspector.fetch_table_list()
        cols = inspector.fetch_table_columns("public.users")
        cols["id"].primary   # True
    """

    def __init__(self, dialect: DatabaseDialect, column_factory: Optional[ColumnFactory] = None):
        """
        Args:
            dialect: Dialect for the connected backend
            column_factory: Factory for Column objects (default ColumnFactory())
        """
        self.dialect = dialect
        self._column_factory = column_factory or ColumnFactory()

    @classmethod
    def for_connection(
        cls,
        connection: Any,
        db_type: Optional[str] = None,
        column_factory: Optional[ColumnFactory] = None
    ) -> "SchemaInspector":
        """
        Build an inspector for a DB-API connection.

        Args:
            connection: Open DB-API connection
            db_type: Backend name; detected from the connection when omitted
            column_factory: Optional Column factory

        Raises:
            UnsupportedDialectError: If no dialect handles the backend
        """
        db_type = db_type or detect_db_type(connection)
        dialect = DialectFactory.create(db_type, DbApiExecutor(connection))
        if dialect is None:
            raise UnsupportedDialectError(db_type, DialectFactory.supported_types())
        return cls(dialect, column_factory)

    @property
    def column_factory(self) -> ColumnFactory:
        """The factory used to build Column objects."""
        return self._column_factory

    def quote_name(self, name: str) -> str:
        """Quote an identifier with the dialect's quote characters."""
        return self.dialect.quote_name(name)

    def fetch_table_list(self, schema: Optional[str] = None) -> List[str]:
        """
        Returns a list of tables in the database.

        Args:
            schema: Optionally, list only this schema. See the dialect for
                how a missing schema is handled (SQL Server ignores it).

        Returns:
            Table names
        """
        sql, params = self.dialect.table_list_query(schema)
        return self.dialect.executor.fetch_col(sql, params)

    def fetch_table_columns(self, table: str) -> Dict[str, Column]:
        """
        Returns the columns of a table.

        Args:
            table: "table" or "schema.table"; only the first dot separates
                the schema. Without a schema, the session's current schema
                is used.

        Returns:
            Columns keyed by name, in table declaration order
        """
        schema, name = split_name(table)
        if schema is None:
            schema = self.dialect.fetch_current_schema()

        rows = self.dialect.fetch_column_rows(schema, name)
        logger.debug(f"{len(rows)} catalog rows for {schema}.{name}")

        records = merge_column_rows(rows, self._extract_column)

        return {
            col_name: self._column_factory.new_instance(**record)
            for col_name, record in records.items()
        }

    def _extract_column(self, row: CatalogRow) -> ColumnRecord:
        """Normalize the first catalog row of a column into a record."""
        type_name, spec_size, spec_scale = parse_type_spec(str(row["_type"]))

        size = row.get("_size")
        scale = row.get("_scale")

        column = {
            "name": row["_name"],
            "type": type_name,
            "size": size if size is not None else spec_size,
            "scale": scale if scale is not None else spec_scale,
            "notnull": bool(row["_notnull"]),
            "default": coerce_default(self.dialect.parse_default(row["_default"]), type_name),
            "autoinc": bool(row["_autoinc"]),
            "primary": bool(row["_primary"]),
            "options": None,
        }

        return self.dialect.post_process_column(column, row)
