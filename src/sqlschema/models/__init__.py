"""
Models - Column value object and its factory

All models are re-exported here for convenience:
    from sqlschema.models import Column, ColumnFactory
"""

from .column import Column
from .column_factory import ColumnFactory

__all__ = [
    "Column",
    "ColumnFactory",
]
