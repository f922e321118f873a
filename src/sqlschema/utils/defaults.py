"""
Default value helpers - Literal detection and type coercion

Dialects reduce a catalog default to a literal string (or None); the
helpers here decide what counts as numeric and cast the literal to the
Python type implied by the declared column type.
"""

import re
from typing import Optional, Union

from ..constants import FLOAT_TYPES

import logging
logger = logging.getLogger(__name__)

# Optional sign, digits with an optional fraction, optional exponent,
# surrounding whitespace ignored. No "nan"/"inf".
_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")

# int, integer, int4, tinyint .. bigint, serial, bigserial; not interval or point
_INTEGER_TYPE_RE = re.compile(r"\b(tiny|small|medium|big)?int(eger|\d)?\b|\b(small|big)?serial\d?\b")


def is_numeric(value: str) -> bool:
    """Whether a default literal is a plain numeric literal."""
    return bool(_NUMERIC_RE.match(value))


def unquote(value: str, quote: str = "'") -> str:
    """Un-double embedded quotes of a SQL string literal body."""
    return value.replace(quote * 2, quote)


def coerce_default(value: Optional[str], type_name: str) -> Optional[Union[str, int, float]]:
    """
    Cast a literal default to the Python type of its column.

    Integer types (int, bigint, integer, serial, ...) give int, the
    float family gives float, everything else is returned unchanged.
    A literal that cannot be cast is dropped rather than raised.

    Args:
        value: Literal default as extracted by a dialect
        type_name: Declared column type

    Returns:
        The coerced default, or None
    """
    if value is None:
        return None

    type_name = type_name.lower()

    if _INTEGER_TYPE_RE.search(type_name):
        try:
            return int(value)
        except (TypeError, ValueError):
            pass
        try:
            return int(float(value))
        except (TypeError, ValueError, OverflowError):
            logger.debug(f"Dropping non-integer default {value!r} for {type_name}")
            return None

    if type_name in FLOAT_TYPES:
        try:
            return float(value)
        except (TypeError, ValueError):
            logger.debug(f"Dropping non-float default {value!r} for {type_name}")
            return None

    return value
