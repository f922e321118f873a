"""
Centralized constants for sqlschema.

Catalog SQL, quote characters and type categories shared by the dialects.
Import from here instead of hardcoding values.
"""

# ===========================================================================
# SQL identifier quoting
# ===========================================================================

# Quote characters per database type: (open, close)
QUOTE_CHARS = {
    "sqlserver":  ("[", "]"),
    "mysql":      ("`", "`"),
    "postgresql": ('"', '"'),
}

DEFAULT_QUOTE_CHARS = ('"', '"')

# ===========================================================================
# Database type aliases (registry key -> canonical db type)
# ===========================================================================

DEFAULT_DB_TYPE_ALIASES = {
    "mysql": "mysql",
    "mariadb": "mysql",
    "postgresql": "postgresql",
    "postgres": "postgresql",
    "pgsql": "postgresql",
    "sqlserver": "sqlserver",
    "mssql": "sqlserver",
    "sqlsrv": "sqlserver",
}

# DB-API driver module (top-level package) -> db type
DRIVER_DB_TYPES = {
    "pymysql": "mysql",
    "MySQLdb": "mysql",
    "mysql": "mysql",          # mysql-connector-python
    "mariadb": "mysql",
    "psycopg2": "postgresql",
    "psycopg": "postgresql",
    "pg8000": "postgresql",
    "pytds": "sqlserver",
    "pymssql": "sqlserver",
}

# ===========================================================================
# Catalog metadata
# ===========================================================================

# Schemas never reported by the PostgreSQL table list
PG_SYSTEM_SCHEMAS = ("pg_catalog", "information_schema")

# Declared types whose defaults are cast to float
FLOAT_TYPES = ("float", "double", "real", "double precision")

# Columns query shared by the information_schema dialects.
# {autoinc} yields 0/1 per row, {extended} is an optional extra select item.
INFORMATION_SCHEMA_COLUMNS_SQL = """
            SELECT
                columns.column_name as _name,
                columns.data_type as _type,
                COALESCE(
                    columns.character_maximum_length,
                    columns.numeric_precision
                ) AS _size,
                columns.numeric_scale AS _scale,
                CASE
                    WHEN columns.is_nullable = 'YES' THEN 0
                    ELSE 1
                END AS _notnull,
                columns.column_default AS _default,
                {autoinc} AS _autoinc,
                CASE
                    WHEN table_constraints.constraint_type = 'PRIMARY KEY' THEN 1
                    ELSE 0
                END AS _primary{extended}
            FROM information_schema.columns
                LEFT JOIN information_schema.key_column_usage
                    ON columns.table_schema = key_column_usage.table_schema
                    AND columns.table_name = key_column_usage.table_name
                    AND columns.column_name = key_column_usage.column_name
                LEFT JOIN information_schema.table_constraints
                    ON key_column_usage.table_schema = table_constraints.table_schema
                    AND key_column_usage.table_name = table_constraints.table_name
                    AND key_column_usage.constraint_name = table_constraints.constraint_name
            WHERE columns.table_schema = :schema
            AND columns.table_name = :table
            ORDER BY columns.ordinal_position
        """
