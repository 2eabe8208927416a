"""
Fixtures for testing.
"""

from typing import List

import pytest

from sqlbuilder.statement import Statement


class FromWhere(Statement):
    """
    A statement that only renders the shared FROM and WHERE clauses
    """

    def build_sql(self, parts: List[str]) -> None:
        self.build_from(parts)
        self.build_where(parts)


@pytest.fixture
def statement() -> FromWhere:
    """
    An empty statement exposing only the shared clauses
    """
    return FromWhere()
