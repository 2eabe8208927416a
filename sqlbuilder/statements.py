"""
Concrete statements built on the shared FROM/WHERE core.
"""

from typing import List, Optional, Tuple, Union

from sqlbuilder.errors import ErrorCode, SQLBuilderInvalidStateException
from sqlbuilder.fragments import FromClause, Join, JoinType, Table
from sqlbuilder.statement import Statement, build_list


class Select(Statement):
    """
    A SELECT statement

        Select("id", "name").from_("users").as_("u").where("u.active = 1")
    """

    def __init__(self, *columns: str):
        super().__init__()
        self._columns: List[str] = list(columns)
        self._distinct = False
        self._group_by: List[str] = []
        self._order_by: List[str] = []

    @property
    def columns(self) -> Tuple[str, ...]:
        return tuple(self._columns)

    @property
    def is_distinct(self) -> bool:
        return self._distinct

    @property
    def group_by_expressions(self) -> Tuple[str, ...]:
        return tuple(self._group_by)

    @property
    def order_by_expressions(self) -> Tuple[str, ...]:
        return tuple(self._order_by)

    def select(self, *columns: str) -> "Select":
        """
        Add columns to the projection
        """
        self._columns.extend(columns)
        return self

    def distinct(self, distinct: bool = True) -> "Select":
        self._distinct = distinct
        return self

    def join(
        self,
        table: Union[str, FromClause],
        join_type: JoinType = JoinType.Inner,
        on: Optional[str] = None,
    ) -> "Select":
        """
        Join `table` onto the last table in the FROM list
        """
        if join_type is JoinType.Cross and on is not None:
            raise SQLBuilderInvalidStateException(
                f"Cannot join `{table}` with a condition, a CROSS join takes none.",
                code=ErrorCode.CROSS_JOIN_CONDITION,
            )
        right = Table(table) if isinstance(table, str) else table
        self.transform_last_table(lambda left: Join(left, join_type, right, on))
        return self

    def inner_join(self, table: Union[str, FromClause], on: Optional[str] = None) -> "Select":
        return self.join(table, JoinType.Inner, on)

    def left_join(self, table: Union[str, FromClause], on: Optional[str] = None) -> "Select":
        return self.join(table, JoinType.Left, on)

    def right_join(self, table: Union[str, FromClause], on: Optional[str] = None) -> "Select":
        return self.join(table, JoinType.Right, on)

    def full_join(self, table: Union[str, FromClause], on: Optional[str] = None) -> "Select":
        return self.join(table, JoinType.Full, on)

    def cross_join(self, table: Union[str, FromClause]) -> "Select":
        return self.join(table, JoinType.Cross)

    def on(self, condition: str) -> "Select":  # pylint: disable=invalid-name
        """
        Set the join condition of the last join
        """

        def set_condition(last: FromClause) -> FromClause:
            if not isinstance(last, Join):
                raise SQLBuilderInvalidStateException(
                    f"Cannot add a join condition to `{last}`, it is not a join.",
                    code=ErrorCode.NOT_A_JOIN,
                )
            if last.join_type is JoinType.Cross:
                raise SQLBuilderInvalidStateException(
                    f"Cannot add a join condition to `{last}`, a CROSS join takes none.",
                    code=ErrorCode.CROSS_JOIN_CONDITION,
                )
            return last.set_on(condition)

        self.transform_last_table(set_condition)
        return self

    def as_(self, alias: str, as_keyword: bool = False) -> "Select":
        """
        Alias the last table in the FROM list, with `AS` if `as_keyword` is set
        """
        self.transform_last_table(lambda last: last.aliased(alias, as_keyword))
        return self

    def group_by(self, *expressions: str) -> "Select":
        self._group_by.extend(expressions)
        return self

    def order_by(self, *expressions: str) -> "Select":
        self._order_by.extend(expressions)
        return self

    def build_sql(self, parts: List[str]) -> None:
        parts.append("SELECT DISTINCT\n" if self._distinct else "SELECT\n")
        build_list(parts, self._columns or ["*"])
        self.build_from(parts)
        self.build_where(parts)
        if self._group_by:
            parts.append("GROUP BY\n")
            build_list(parts, self._group_by)
        if self._order_by:
            parts.append("ORDER BY\n")
            build_list(parts, self._order_by)

    def copy(self) -> "Select":
        clone = super().copy()
        clone._columns = self._columns[:]
        clone._group_by = self._group_by[:]
        clone._order_by = self._order_by[:]
        return clone


class Delete(Statement):
    """
    A DELETE statement
    """

    def build_sql(self, parts: List[str]) -> None:
        parts.append("DELETE\n")
        self.build_from(parts)
        self.build_where(parts)
