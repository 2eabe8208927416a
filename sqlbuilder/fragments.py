"""
SQL fragments that statements are assembled from.

Fragments are immutable: builders replace them instead of mutating them,
so statements can share fragment references safely.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional


class Fragment(ABC):
    """
    Represents any part of a full SQL query.
    """

    @abstractmethod
    def build_sql(self, parts: List[str]) -> None:
        """
        Append the SQL for the fragment to `parts`
        """


class FromClause(ABC):
    """
    A source that can be listed in a FROM clause
    """

    @abstractmethod
    def build_from_sql(self, parts: List[str]) -> None:
        """
        Append the SQL for the source to `parts`
        """

    def aliased(self, alias: str, as_keyword: bool = False) -> "FromClause":
        """
        Return a copy of the source with an alias attached,
        written as `source AS alias` when `as_keyword` is set
        """
        return Alias(source=self, alias=alias, as_=as_keyword)

    def __str__(self) -> str:
        parts: List[str] = []
        self.build_from_sql(parts)
        return "".join(parts)


@dataclass(frozen=True)
class Table(FromClause):
    """
    A bare table name
    """

    name: str

    def build_from_sql(self, parts: List[str]) -> None:
        parts.append(self.name)


@dataclass(frozen=True)
class Alias(FromClause):
    """
    Wraps a source with an alias
    """

    source: FromClause
    alias: str
    as_: bool = False

    def build_from_sql(self, parts: List[str]) -> None:
        self.source.build_from_sql(parts)
        parts.append(" AS " if self.as_ else " ")
        parts.append(self.alias)


# pylint: disable=C0103
class JoinType(str, Enum):
    """
    The supported join kinds
    """

    Inner = "INNER"
    Left = "LEFT OUTER"
    Right = "RIGHT OUTER"
    Full = "FULL OUTER"
    Cross = "CROSS"


@dataclass(frozen=True)
class Join(FromClause):
    """
    A source joined to the one before it
    """

    left: FromClause
    join_type: JoinType
    right: FromClause
    on: Optional[str] = None

    def build_from_sql(self, parts: List[str]) -> None:
        self.left.build_from_sql(parts)
        parts.append(f" {self.join_type.value} JOIN ")
        self.right.build_from_sql(parts)
        if self.on is not None:
            parts.append(f" ON {self.on}")

    def aliased(self, alias: str, as_keyword: bool = False) -> "Join":
        """
        Aliases the right hand side, which is the source added last
        """
        return replace(self, right=self.right.aliased(alias, as_keyword))

    def set_on(self, condition: str) -> "Join":
        """
        Return a copy of the join with `condition` as its ON criteria
        """
        return replace(self, on=condition)


@dataclass(frozen=True)
class WhereClause:
    """
    A single predicate in a WHERE clause.

    `or_` decides whether the predicate is joined to the *next* one
    with OR (True) or AND (False).
    """

    clause: str
    or_: bool = False

    def copy(self) -> "WhereClause":
        """
        Return an equal, independent predicate
        """
        return replace(self)
