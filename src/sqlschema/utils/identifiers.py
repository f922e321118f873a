"""
Identifier helpers - Quoting and splitting of SQL identifier names
"""

from typing import Optional, Tuple

from ..constants import DEFAULT_QUOTE_CHARS, QUOTE_CHARS


class IdentifierQuoter:
    """
    Quotes identifier names (table, table alias, column, index, sequence)
    with a dialect's quote characters.

    Dotted names are quoted part by part: "schema.table" becomes
    "schema"."table". Names containing " AS " or spaces are NOT split;
    callers that quote aliased expressions must split them first.

    Usage:
        quoter = IdentifierQuoter("`", "`")
        quoter.quote("db.users")   # `db`.`users`
    """

    def __init__(self, prefix: str = '"', suffix: Optional[str] = None):
        self.prefix = prefix
        self.suffix = prefix if suffix is None else suffix

    @classmethod
    def for_db_type(cls, db_type: str) -> "IdentifierQuoter":
        """Build a quoter from the quote characters registered for db_type."""
        prefix, suffix = QUOTE_CHARS.get(db_type, DEFAULT_QUOTE_CHARS)
        return cls(prefix, suffix)

    def quote(self, name: str) -> str:
        """
        Quote a single identifier name.

        Args:
            name: Identifier, optionally dotted

        Returns:
            The quoted identifier
        """
        # remove extraneous spaces
        name = name.strip()

        # "name"."name" (a leading dot is not a separator)
        pos = name.rfind(".")
        if pos > 0:
            one = self.quote(name[:pos])
            two = self.quote(name[pos + 1:])
            return f"{one}.{two}"

        # "name"
        return f"{self.prefix}{name}{self.suffix}"


def split_name(name: str) -> Tuple[Optional[str], str]:
    """
    Split an identifier name on its first dot.

    Extra dots stay in the second part: "a.b.c" gives ("a", "b.c").

    Returns:
        (schema, name); schema is None when there is no dot
    """
    schema, sep, rest = name.partition(".")
    if not sep:
        return None, name
    return schema, rest
