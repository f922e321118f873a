"""
Utility helpers shared by the dialects and the inspector.
"""

from .defaults import coerce_default, is_numeric
from .identifiers import IdentifierQuoter, split_name
from .type_spec import parse_type_spec

__all__ = [
    "coerce_default",
    "is_numeric",
    "IdentifierQuoter",
    "split_name",
    "parse_type_spec",
]
