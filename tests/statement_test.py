"""
Tests for the shared FROM/WHERE core of statements
"""

import logging

import pytest

from sqlbuilder.errors import ErrorCode, SQLBuilderInvalidStateException
from sqlbuilder.fragments import Join, JoinType, Table, WhereClause
from sqlbuilder.statement import INDENTATION, Clauses


def test_empty_statement_renders_nothing(statement):
    """
    Test that empty FROM and WHERE lists produce no output
    """
    parts = []
    statement.build_from(parts)
    statement.build_where(parts)
    assert parts == []
    assert statement.to_sql() == ""


def test_from_list(statement):
    """
    Test rendering a FROM list with several sources
    """
    statement.from_("a", "b")
    parts = []
    statement.build_from(parts)
    assert "".join(parts) == "FROM\n    a,\n    b\n"


def test_from_single_source(statement):
    """
    Test that a single source has no trailing separator
    """
    assert statement.from_("users").to_sql() == "FROM\n    users\n"


def test_from_accepts_fragments(statement):
    """
    Test mixing bare names and fragments in the FROM list
    """
    join = Join(Table("a"), JoinType.Inner, Table("b"), "a.id = b.id")
    statement.from_("x", join)
    assert statement.tables == (Table("x"), join)
    assert statement.to_sql() == "FROM\n    x,\n    a INNER JOIN b ON a.id = b.id\n"


def test_where_joiners(statement):
    """
    Test that the joiner after a predicate comes from that predicate's flag
    """
    statement.where("p1").where("p2", or_=True).where("p3")
    parts = []
    statement.build_where(parts)
    assert "".join(parts) == "WHERE\n    p1 AND\n    p2 OR\n    p3\n"


@pytest.mark.parametrize(
    "or_,expected",
    [
        (False, "WHERE\n    a = 1\n"),
        (True, "WHERE\n    a = 1\n"),
    ],
)
def test_where_single_predicate_ignores_flag(statement, or_, expected):
    """
    Test that the flag of the last predicate is never rendered
    """
    assert statement.where("a = 1", or_).to_sql() == expected


def test_where_last_flag_ignored(statement):
    """
    Test that only the flags of non-last predicates are rendered
    """
    statement.where("a = 1", or_=True).where("b = 2", or_=True)
    assert statement.to_sql() == "WHERE\n    a = 1 OR\n    b = 2\n"


def test_clause_order_follows_call_order(statement):
    """
    Test that interleaved calls render in insertion order per clause
    """
    statement.where("z = 1").from_("t2").where("a = 2").from_("t1")
    assert statement.to_sql() == (
        "FROM\n"
        "    t2,\n"
        "    t1\n"
        "WHERE\n"
        "    z = 1 AND\n"
        "    a = 2\n"
    )
    assert [where.clause for where in statement.where_clauses] == ["z = 1", "a = 2"]


def test_fluent_methods_return_the_statement(statement):
    """
    Test that fluent methods return the same instance
    """
    assert statement.from_("a") is statement
    assert statement.where("b") is statement


def test_snapshots_are_read_only(statement):
    """
    Test that the public views can't change the statement
    """
    statement.from_("a").where("b")
    tables = statement.tables
    where_clauses = statement.where_clauses
    assert isinstance(tables, tuple)
    assert isinstance(where_clauses, tuple)
    statement.from_("c")
    assert tables == (Table("a"),)
    assert statement.tables == (Table("a"), Table("c"))


def test_transform_last_table(statement):
    """
    Test that only the last source is transformed
    """
    statement.from_("a", "b")
    statement.transform_last_table(lambda table: Table(table.name.upper()))
    assert statement.tables == (Table("a"), Table("B"))


def test_transform_last_table_empty(statement):
    """
    Test transforming the last source of an empty FROM list
    """
    with pytest.raises(SQLBuilderInvalidStateException) as exc_info:
        statement.transform_last_table(lambda table: table)
    assert "Cannot transform an empty FROM clause." in str(exc_info.value)
    assert exc_info.value.errors[0].code == ErrorCode.EMPTY_FROM_CLAUSE
    assert statement.tables == ()


def test_copy_does_not_alias_where(statement):
    """
    Test that changing the WHERE list of a copy leaves the original alone
    """
    statement.from_("a", "b").where("x = 1").where("y = 2", or_=True)
    clone = statement.copy()

    assert type(clone) is type(statement)
    assert clone.tables == statement.tables
    assert clone.where_clauses == statement.where_clauses
    assert clone.where_clauses[0] is not statement.where_clauses[0]

    clone._clauses._where_clauses[0] = WhereClause("z = 3")  # pylint: disable=protected-access
    clone.where("w = 4")
    clone.from_("c")
    assert [where.clause for where in statement.where_clauses] == ["x = 1", "y = 2"]
    assert statement.tables == (Table("a"), Table("b"))
    assert statement.to_sql() == "FROM\n    a,\n    b\nWHERE\n    x = 1 AND\n    y = 2\n"


def test_copy_shares_sources(statement):
    """
    Test that the immutable sources are shared between copies
    """
    statement.from_("a")
    clone = statement.copy()
    assert clone.tables[0] is statement.tables[0]


def test_to_sql_matches_build_sql(statement):
    """
    Test that the string forms equal rendering into a fresh buffer
    """
    statement.from_("a", "b").where("x = 1", or_=True).where("y = 2")
    parts = []
    statement.build_sql(parts)
    assert statement.to_sql() == "".join(parts)
    assert str(statement) == "".join(parts)
    # rendering leaves the statement unchanged
    assert statement.to_sql() == statement.to_sql()


def test_clauses_copy():
    """
    Test copying the clause storage directly
    """
    clauses = Clauses()
    clauses.add_tables("a")
    clauses.add_where("b", or_=True)
    clone = clauses.copy()
    clone.add_where("c")
    assert clauses.where_clauses == (WhereClause("b", True),)
    assert clone.where_clauses == (WhereClause("b", True), WhereClause("c"))


def test_indentation_ignores_environment(statement, monkeypatch):
    """
    Test that the environment can't change the fixed indentation unit
    """
    monkeypatch.setenv("SQLBUILDER_INDENTATION", "")
    statement.from_("a", "b").where("x", or_=True).where("y")
    assert statement.to_sql() == (
        "FROM\n"
        "    a,\n"
        "    b\n"
        "WHERE\n"
        "    x OR\n"
        "    y\n"
    )
    assert INDENTATION == "    "


def test_debug_logging(statement, caplog):
    """
    Test that FROM and WHERE changes are logged at debug level
    """
    caplog.set_level(logging.DEBUG, logger="sqlbuilder.statement")
    statement.from_("a", "b")
    statement.transform_last_table(lambda table: Table(table.name.upper()))
    statement.where("x = 1")
    statement.copy()
    assert "Added 2 source(s) to FROM, now 2" in caplog.text
    assert "Replaced last FROM source with `B`" in caplog.text
    assert "Added WHERE predicate 'x = 1' (or_=False)" in caplog.text
    assert "Copied FromWhere statement" in caplog.text
