"""
Build SQL statements with chained calls and render them as text.
"""

from sqlbuilder.errors import (
    ErrorCode,
    SQLBuilderError,
    SQLBuilderException,
    SQLBuilderInvalidStateException,
)
from sqlbuilder.fragments import (
    Alias,
    Fragment,
    FromClause,
    Join,
    JoinType,
    Table,
    WhereClause,
)
from sqlbuilder.statement import Clauses, Statement
from sqlbuilder.statements import Delete, Select

__all__ = [
    "Alias",
    "Clauses",
    "Delete",
    "ErrorCode",
    "Fragment",
    "FromClause",
    "Join",
    "JoinType",
    "SQLBuilderError",
    "SQLBuilderException",
    "SQLBuilderInvalidStateException",
    "Select",
    "Statement",
    "Table",
    "WhereClause",
]
