"""
Builder for parameterized ``UPDATE`` statements.

Partial updates touch a varying set of columns.  Rather than gluing SQL
strings together in the service, ``UpdateBuilder`` collects
``(column, value)`` pairs and renders a statement in which every value
is a bound ``?`` parameter.  Column names are checked against a fixed
whitelist because identifiers cannot be bound.
"""

from typing import Any, Iterable, List, Sequence, Tuple


class UpdateBuilder:
    """Accumulate column assignments and render an ``UPDATE`` statement."""

    def __init__(self, table: str, allowed_columns: Iterable[str]) -> None:
        self.table = table
        self.allowed_columns = frozenset(allowed_columns)
        self._assignments: List[Tuple[str, Any]] = []

    def set(self, column: str, value: Any) -> "UpdateBuilder":
        if column not in self.allowed_columns:
            raise ValueError(f"Column {column!r} cannot be updated on {self.table}")
        # A repeated column keeps the latest value
        self._assignments = [(c, v) for c, v in self._assignments if c != column]
        self._assignments.append((column, value))
        return self

    @property
    def columns(self) -> List[str]:
        return [column for column, _ in self._assignments]

    def __bool__(self) -> bool:
        return bool(self._assignments)

    def render(self, where: str, where_params: Sequence[Any] = ()) -> Tuple[str, Tuple[Any, ...]]:
        """Return ``(sql, params)`` for the accumulated assignments.

        ``where`` is a trusted SQL fragment using ``?`` placeholders whose
        values are given in ``where_params``.
        """
        if not self._assignments:
            raise ValueError("No columns to update")
        set_clause = ", ".join(f"{column} = ?" for column, _ in self._assignments)
        sql = f"UPDATE {self.table} SET {set_clause} WHERE {where}"
        params = tuple(value for _, value in self._assignments) + tuple(where_params)
        return sql, params
