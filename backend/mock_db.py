"""
Mock Database Module

This module provides an in-memory data service that simulates the relational
store behind the API. It serves the same select contract as
SQLAlchemyDataService, so the app can run against it in tests and local
development without a database.
"""

from typing import Any, Dict, Iterable, List, Optional
from data_service import DataService, DataAccessError, parse_columns


class InMemoryDataService(DataService):
    """Simulates the relational store with plain dict rows, keyed by table name."""

    def __init__(self, tables: Optional[Dict[str, Iterable[Dict]]] = None):
        self._tables: Dict[str, List[Dict]] = {}
        self._failures: Dict[str, str] = {}
        # One entry per select served, in order: {'table', 'columns', 'eq', 'in_', 'order_by'}
        self.calls: List[Dict[str, Any]] = []
        for name, rows in (tables or {}).items():
            self.insert(name, rows)

    def insert(self, table: str, rows: Iterable[Dict]) -> None:
        """Append rows to a table, creating the table if needed."""
        self._tables.setdefault(table, []).extend(dict(row) for row in rows)

    def fail_on(self, table: str, message: str) -> None:
        """Make every select on ``table`` raise DataAccessError(message)."""
        self._failures[table] = message

    @property
    def tables_queried(self) -> List[str]:
        return [call['table'] for call in self.calls]

    def select(self, table, columns="*", eq=None, in_=None, order_by=None):
        # Materialise once so iterators are not consumed by the call record
        members = {k: list(v) for k, v in (in_ or {}).items()}
        self.calls.append({
            'table': table,
            'columns': columns,
            'eq': dict(eq or {}),
            'in_': {k: list(v) for k, v in members.items()},
            'order_by': order_by,
        })

        if table in self._failures:
            raise DataAccessError(self._failures[table])
        if table not in self._tables:
            raise DataAccessError(f'relation "{table}" does not exist')

        member_sets = {k: set(v) for k, v in members.items()}
        results = []
        for row in self._tables[table]:
            if self._matches(row, eq, member_sets):
                results.append(row)

        if order_by:
            # Rows missing the column sort last
            results = sorted(results, key=lambda r: (r.get(order_by) is None, r.get(order_by)))

        names = parse_columns(columns)
        if names is None:
            return [dict(r) for r in results]
        return [{n: r.get(n) for n in names} for r in results]

    def _matches(self, row: Dict, eq: Optional[Dict], in_: Optional[Dict]) -> bool:
        for key, value in (eq or {}).items():
            if row.get(key) != value:
                return False
        for key, values in (in_ or {}).items():
            if row.get(key) not in values:
                return False
        return True
