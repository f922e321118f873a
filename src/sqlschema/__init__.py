"""
sqlschema - Schema discovery for MySQL/MariaDB, PostgreSQL and SQL Server
Normalizes catalog metadata into one Column shape per backend.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("sqlschema")
except PackageNotFoundError:
    # Package not installed, fallback to the version declared in pyproject.toml
    __version__ = "0.3.0"  # Fallback version

from .dialects import DatabaseDialect, DialectFactory, detect_db_type
from .errors import ExecutorConfigurationError, UnsupportedDialectError
from .executors import CatalogExecutor, DbApiExecutor
from .inspector import SchemaInspector, merge_column_rows
from .models import Column, ColumnFactory

__all__ = [
    "__version__",
    "Column",
    "ColumnFactory",
    "CatalogExecutor",
    "DbApiExecutor",
    "DatabaseDialect",
    "DialectFactory",
    "detect_db_type",
    "SchemaInspector",
    "merge_column_rows",
    "UnsupportedDialectError",
    "ExecutorConfigurationError",
]
