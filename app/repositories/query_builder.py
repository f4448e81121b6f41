"""
Search query builder.

Accumulates WHERE predicates for the blacklist search queries. Each
predicate is a SQLAlchemy expression carrying its own bound parameter,
so values never reach SQL text.
"""

from typing import Any

from sqlalchemy import Select, and_
from sqlalchemy.sql import ColumnElement


class SearchQueryBuilder:
    """
    Ordered list of AND-combined predicates.

    Absent values (None or empty string) add no predicate.

    Example:
        builder = SearchQueryBuilder()
        builder.equals(BlacklistRecord.identifier, criteria.identifier)
        builder.contains(BlacklistRecord.first_name, criteria.first_name)
        stmt = builder.apply(select(BlacklistRecord))
    """

    def __init__(self) -> None:
        self._predicates: list[ColumnElement[bool]] = []

    def equals(self, column: Any, value: Any) -> "SearchQueryBuilder":
        """Add `column = :value`."""
        if value is not None and value != "":
            self._predicates.append(column == value)
        return self

    def contains(self, column: Any, value: str | None) -> "SearchQueryBuilder":
        """Add `column LIKE '%' || :value || '%'` with LIKE wildcards escaped."""
        if value:
            self._predicates.append(column.contains(value, autoescape=True))
        return self

    def __len__(self) -> int:
        return len(self._predicates)

    def apply(self, stmt: Select) -> Select:
        """
        Attach the accumulated predicates to a SELECT.

        Args:
            stmt: Statement to filter

        Returns:
            Filtered statement (unchanged when there are no predicates)
        """
        if not self._predicates:
            return stmt
        return stmt.where(and_(*self._predicates))
