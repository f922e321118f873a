"""
Column model - Canonical description of one table column
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Tuple, Union

DefaultValue = Union[str, int, float]


@dataclass(frozen=True)
class Column:
    """
    Normalized column metadata, identical in shape for every dialect.

    Attributes:
        name: Column name, unique within its table
        type: Lower-cased base type without size/scale (e.g. "varchar",
            "int unsigned")
        size: Character length or numeric precision
        scale: Decimal digits; never set when size is None
        notnull: True when the column rejects NULL
        default: Literal default value; None for no default or for a
            default expression the dialect cannot represent
        autoinc: True for identity / sequence-backed / auto_increment columns
        primary: True when the column is part of the primary key
        options: Allowed values of an enumerated type
    """
    name: str
    type: str
    size: Optional[int] = None
    scale: Optional[int] = None
    notnull: bool = False
    default: Optional[DefaultValue] = None
    autoinc: bool = False
    primary: bool = False
    options: Optional[Tuple[str, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict form, with options as a list."""
        data = asdict(self)
        if self.options is not None:
            data["options"] = list(self.options)
        return data
