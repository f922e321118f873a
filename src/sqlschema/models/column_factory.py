"""
ColumnFactory - Builds Column objects from normalized values
"""
from typing import Any, Iterable, Optional, Type

from .column import Column

import logging
logger = logging.getLogger(__name__)


class ColumnFactory:
    """
    Creates Column instances.

    Dialects only produce normalized scalars; the factory owns the final
    integer coercion of size/scale and the scale-without-size rule.

    Usage:
        factory = ColumnFactory()
        col = factory.new_instance("id", "int", "11", None, True, None, True, True)
    """

    def __init__(self, column_class: Type[Column] = Column):
        """
        Args:
            column_class: Column (or subclass) to instantiate
        """
        self.column_class = column_class

    def new_instance(
        self,
        name: str,
        type: str,
        size: Any = None,
        scale: Any = None,
        notnull: bool = False,
        default: Any = None,
        autoinc: bool = False,
        primary: bool = False,
        options: Optional[Iterable[str]] = None
    ) -> Column:
        """
        Build a Column.

        Args:
            name: Column name
            type: Normalized type name
            size: Size as int or numeric string (None if absent)
            scale: Scale as int or numeric string (dropped when size is None)
            notnull: NOT NULL flag
            default: Literal default value
            autoinc: Auto-increment flag
            primary: Primary key flag
            options: Enumerated values

        Returns:
            Column instance
        """
        size = _to_int(size)
        scale = _to_int(scale) if size is not None else None

        return self.column_class(
            name=name,
            type=type,
            size=size,
            scale=scale,
            notnull=bool(notnull),
            default=default,
            autoinc=bool(autoinc),
            primary=bool(primary),
            options=tuple(options) if options is not None else None,
        )


def _to_int(value: Any) -> Optional[int]:
    """Coerce a catalog size/scale value to int, None when absent or unusable."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        return int(value)
    except (TypeError, ValueError):
        # e.g. "max" from nvarchar(max)
        logger.debug(f"Ignoring non-numeric size/scale: {value!r}")
        return None
