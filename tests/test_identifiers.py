"""
Unit tests for identifier quoting and name splitting.
"""
import pytest

from sqlschema.utils.identifiers import IdentifierQuoter, split_name


class TestIdentifierQuoter:
    """Test IdentifierQuoter."""

    @pytest.fixture
    def backtick(self):
        return IdentifierQuoter("`", "`")

    def test_simple_name(self, backtick):
        assert backtick.quote("users") == "`users`"

    def test_dotted_name(self, backtick):
        assert backtick.quote("a.b") == "`a`.`b`"

    def test_multiple_dots(self, backtick):
        assert backtick.quote("db.schema.table") == "`db`.`schema`.`table`"

    def test_whitespace_trimmed(self, backtick):
        assert backtick.quote(" x ") == "`x`"
        assert backtick.quote(" a . b ") == "`a`.`b`"

    def test_brackets(self):
        quoter = IdentifierQuoter("[", "]")
        assert quoter.quote("dbo.Orders") == "[dbo].[Orders]"

    def test_suffix_defaults_to_prefix(self):
        assert IdentifierQuoter('"').quote("t") == '"t"'

    def test_leading_dot_is_not_split(self, backtick):
        assert backtick.quote(".hidden") == "`.hidden`"

    def test_alias_not_special_cased(self, backtick):
        # known limitation: aliases must be split by the caller
        assert backtick.quote("users AS u") == "`users AS u`"

    @pytest.mark.parametrize("db_type,expected", [
        ("mysql", "`t`"),
        ("postgresql", '"t"'),
        ("sqlserver", "[t]"),
        ("unknown", '"t"'),
    ])
    def test_for_db_type(self, db_type, expected):
        assert IdentifierQuoter.for_db_type(db_type).quote("t") == expected


class TestSplitName:
    """Test split_name."""

    def test_no_dot(self):
        assert split_name("users") == (None, "users")

    def test_schema_and_table(self):
        assert split_name("public.users") == ("public", "users")

    def test_first_dot_wins(self):
        assert split_name("a.b.c") == ("a", "b.c")
