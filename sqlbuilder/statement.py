"""
The basics of an SQL statement: ordered FROM sources and WHERE predicates,
and the rendering shared by every kind of statement.
"""

import copy
import logging
from abc import abstractmethod
from typing import Callable, Iterable, List, Tuple, TypeVar, Union

from sqlbuilder.errors import ErrorCode, SQLBuilderInvalidStateException
from sqlbuilder.fragments import Fragment, FromClause, Table, WhereClause

_logger = logging.getLogger(__name__)

# indentation to use when indenting clause bodies
INDENTATION = "    "
# separator for general things in SQL at a line end
SEPARATOR_NO_SPACE = ","


def build_list(parts: List[str], items: Iterable[str]) -> None:
    """
    Append `items` one per line, indented, with a separator at the end
    of every line but the last
    """
    parts.append(f"{SEPARATOR_NO_SPACE}\n".join(f"{INDENTATION}{item}" for item in items))
    parts.append("\n")


class Clauses:
    """
    The FROM sources and WHERE predicates of a statement, in insertion order.

    Statements hold a `Clauses` instead of inheriting the storage, and forward
    their fluent methods to it.
    """

    def __init__(self):
        self._tables: List[FromClause] = []
        self._where_clauses: List[WhereClause] = []

    @property
    def tables(self) -> Tuple[FromClause, ...]:
        """
        A snapshot of the FROM sources
        """
        return tuple(self._tables)

    @property
    def where_clauses(self) -> Tuple[WhereClause, ...]:
        """
        A snapshot of the WHERE predicates
        """
        return tuple(self._where_clauses)

    def add_tables(self, *tables: Union[str, FromClause]) -> None:
        """
        Append sources to the FROM list, wrapping bare names in a `Table`
        """
        self._tables.extend(
            Table(table) if isinstance(table, str) else table for table in tables
        )
        _logger.debug("Added %d source(s) to FROM, now %d", len(tables), len(self._tables))

    def transform_last_table(
        self,
        transform: Callable[[FromClause], FromClause],
    ) -> None:
        """
        Replace the most recently added FROM source with `transform(source)`
        """
        if not self._tables:
            raise SQLBuilderInvalidStateException(
                "Cannot transform an empty FROM clause.",
                code=ErrorCode.EMPTY_FROM_CLAUSE,
            )
        self._tables[-1] = transform(self._tables[-1])
        _logger.debug("Replaced last FROM source with `%s`", self._tables[-1])

    def add_where(self, clause: str, or_: bool = False) -> None:
        """
        Append a WHERE predicate
        """
        self._where_clauses.append(WhereClause(clause, or_))
        _logger.debug("Added WHERE predicate %r (or_=%s)", clause, or_)

    def copy(self) -> "Clauses":
        """
        Sources are immutable and shared, predicates are copied
        """
        clauses = Clauses()
        clauses._tables = self._tables[:]
        clauses._where_clauses = [where.copy() for where in self._where_clauses]
        return clauses

    def build_from(self, parts: List[str]) -> None:
        """
        Append the FROM clause to `parts`, nothing when there are no sources
        """
        if not self._tables:
            return
        parts.append("FROM\n")
        for i, table in enumerate(self._tables):
            parts.append(INDENTATION)
            table.build_from_sql(parts)
            if i < len(self._tables) - 1:
                parts.append(f"{SEPARATOR_NO_SPACE}\n")
        parts.append("\n")

    def build_where(self, parts: List[str]) -> None:
        """
        Append the WHERE clause to `parts`, nothing when there are no predicates.

        The joiner after a predicate comes from that predicate's own flag,
        so the flag of the last predicate is never rendered.
        """
        if not self._where_clauses:
            return
        parts.append("WHERE\n")
        for i, where in enumerate(self._where_clauses):
            parts.append(f"{INDENTATION}{where.clause}")
            if i < len(self._where_clauses) - 1:
                parts.append(" OR\n" if where.or_ else " AND\n")
            else:
                parts.append("\n")


# typevar used for statement methods that return self
TStatement = TypeVar("TStatement", bound="Statement")  # pylint: disable=C0103


class Statement(Fragment):
    """
    Base class for statements.

    Concrete statements implement `build_sql`, calling `build_from`
    and `build_where` where their grammar puts those clauses.
    """

    def __init__(self):
        self._clauses = Clauses()

    @property
    def tables(self) -> Tuple[FromClause, ...]:
        return self._clauses.tables

    @property
    def where_clauses(self) -> Tuple[WhereClause, ...]:
        return self._clauses.where_clauses

    def from_(self: TStatement, *tables: Union[str, FromClause]) -> TStatement:
        """
        Add tables to the FROM list of the statement
        """
        self._clauses.add_tables(*tables)
        return self

    def where(self: TStatement, clause: str, or_: bool = False) -> TStatement:
        """
        Add a WHERE predicate, joined to the next one with OR if `or_` is set
        """
        self._clauses.add_where(clause, or_)
        return self

    def transform_last_table(
        self,
        transform: Callable[[FromClause], FromClause],
    ) -> None:
        """
        Decorate the most recently added table, e.g. with an alias or a join
        """
        self._clauses.transform_last_table(transform)

    def build_from(self, parts: List[str]) -> None:
        self._clauses.build_from(parts)

    def build_where(self, parts: List[str]) -> None:
        self._clauses.build_where(parts)

    @abstractmethod
    def build_sql(self, parts: List[str]) -> None:
        """
        Append the SQL for the whole statement to `parts`
        """

    def to_sql(self) -> str:
        parts: List[str] = []
        self.build_sql(parts)
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_sql()

    def copy(self: TStatement) -> TStatement:
        """
        Create an independent copy of the statement
        """
        clone = copy.copy(self)
        clone._clauses = self._clauses.copy()  # pylint: disable=protected-access
        _logger.debug("Copied %s statement", type(self).__name__)
        return clone
