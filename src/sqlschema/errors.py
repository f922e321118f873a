"""
Errors raised by sqlschema itself.

Failures from the catalog query executor (driver errors) are never wrapped;
they reach the caller unchanged.
"""


class UnsupportedDialectError(ValueError):
    """No dialect is registered for the requested or detected backend."""

    def __init__(self, db_type: str, supported=None):
        self.db_type = db_type
        self.supported = list(supported or [])
        message = f"No dialect for database type: {db_type}"
        if self.supported:
            message += f" (supported: {', '.join(sorted(self.supported))})"
        super().__init__(message)


class ExecutorConfigurationError(ValueError):
    """A DB-API connection cannot be adapted (e.g. unknown paramstyle)."""
