"""
Base Database Dialect - Abstract base class for catalog conventions

Dialects handle database-specific differences such as:
- Identifier quoting ([brackets] vs "quotes" vs `backticks`)
- Catalog access (information_schema vs sp_columns/sp_pkeys)
- Auto-increment detection (EXTRA column, nextval() defaults, identity)
- Default value literals (casts, wrapping parens, keywords)
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, MutableMapping, Optional, Tuple

from ..constants import DEFAULT_QUOTE_CHARS, INFORMATION_SCHEMA_COLUMNS_SQL, QUOTE_CHARS
from ..executors import CatalogExecutor
from ..utils.identifiers import IdentifierQuoter

import logging
logger = logging.getLogger(__name__)

# Row shape returned by fetch_column_rows():
#   _name, _type, _size, _scale, _notnull, _default, _autoinc, _primary
#   plus optional dialect extras such as _extended
CatalogRow = Mapping[str, Any]
ColumnRecord = MutableMapping[str, Any]


class DatabaseDialect(ABC):
    """
    Abstract base class for database dialects.

    A dialect is a strategy object: it knows how to read one backend's
    catalog and how to turn its raw values into literals. It keeps no
    per-column state; anything it learns about the server is captured
    once in __init__.

    Usage:
        dialect = DialectFactory.create("postgresql", executor)
        rows = dialect.fetch_column_rows("public", "users")
    """

    # Registry key, also used to look up quote characters
    name: str = ""

    def __init__(self, executor: CatalogExecutor):
        """
        Initialize the dialect.

        Args:
            executor: Catalog query executor (see sqlschema.executors)
        """
        self.executor = executor
        self.quoter = IdentifierQuoter(self.quote_char, self.quote_char_end)

    # ==================== Identifier Quoting ====================

    @property
    def quote_char(self) -> str:
        """Character used to open a quoted identifier."""
        return QUOTE_CHARS.get(self.name, DEFAULT_QUOTE_CHARS)[0]

    @property
    def quote_char_end(self) -> str:
        """Character used to close a quoted identifier."""
        return QUOTE_CHARS.get(self.name, DEFAULT_QUOTE_CHARS)[1]

    def quote_name(self, name: str) -> str:
        """Quote an identifier, part by part when dotted."""
        return self.quoter.quote(name)

    # ==================== Schema / Table Lists ====================

    @abstractmethod
    def fetch_current_schema(self) -> Optional[str]:
        """Return the schema the session currently resolves names in."""
        pass

    @abstractmethod
    def table_list_query(self, schema: Optional[str] = None) -> Tuple[str, Dict[str, Any]]:
        """
        Build the table list query.

        Args:
            schema: Optional schema to list

        Returns:
            (sql, params) whose first result column is the table name
        """
        pass

    # ==================== Column Catalog ====================

    @abstractmethod
    def autoincrement_sql(self) -> str:
        """SQL expression yielding 1 for auto-increment columns, else 0."""
        pass

    def extended_sql(self) -> str:
        """Extra select-list items appended to the columns query."""
        return ""

    @abstractmethod
    def fetch_column_rows(self, schema: Optional[str], table: str) -> List[CatalogRow]:
        """
        Fetch raw column rows for one table, in ordinal order.

        A column may appear on several rows (one per matching key
        constraint); the inspector merges them.

        Args:
            schema: Schema name
            table: Table name

        Returns:
            Rows in the _name/_type/... shape
        """
        pass

    # ==================== Value Normalization ====================

    @abstractmethod
    def parse_default(self, default: Optional[str]) -> Optional[str]:
        """
        Reduce a native default to a literal string.

        SQL NULLs and non-literal values (keywords, function calls,
        expressions) return None. Never raises.
        """
        pass

    def post_process_column(self, column: ColumnRecord, row: CatalogRow) -> ColumnRecord:
        """
        Adjust an extracted column record using dialect-only row fields.

        Args:
            column: Record built by the inspector (name, type, size, ...)
            row: The first catalog row seen for the column

        Returns:
            The (possibly modified) record
        """
        return column


def fetch_information_schema_rows(
    dialect: DatabaseDialect,
    schema: Optional[str],
    table: str
) -> List[CatalogRow]:
    """
    Run the information_schema columns query for a dialect.

    Joins columns with key_column_usage and table_constraints, so a column
    appears once per matching key constraint.
    """
    query = INFORMATION_SCHEMA_COLUMNS_SQL.format(
        autoinc=dialect.autoincrement_sql(),
        extended=dialect.extended_sql(),
    )
    return dialect.executor.fetch_all(query, {"schema": schema, "table": table})
