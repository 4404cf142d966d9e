"""
Read-only access to the relational store.

Resources never touch the session directly. They go through a ``DataService``,
which exposes one capability: a filtered select over a named table with
equality filters, set membership filters and ascending ordering. Every failure
surfaces as a ``DataAccessError`` carrying a human readable message.

Two implementations exist:
  - ``SQLAlchemyDataService`` (here): runs the select through Flask-SQLAlchemy.
  - ``InMemoryDataService`` (mock_db.py): plain dict rows, for tests and local runs.
"""

import logging
from abc import ABC, abstractmethod
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class DataAccessError(Exception):
    """Raised when a select cannot be served. ``message`` is safe to return to clients."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def parse_columns(columns) -> list[str] | None:
    """
    Turn a column selector into a list of column names.

    "*" (or None) means every column and returns None. A string is split on
    commas, so "id, word" gives ["id", "word"]. Lists and tuples pass through.
    """
    if columns is None:
        return None
    if isinstance(columns, str):
        if columns.strip() == '*':
            return None
        names = [c.strip() for c in columns.split(',')]
    else:
        names = [str(c).strip() for c in columns]
    if not names or any(not n for n in names):
        raise DataAccessError(f"invalid column list: {columns!r}")
    return names


class DataService(ABC):
    """The narrow read interface resources depend on."""

    @abstractmethod
    def select(self, table: str, columns="*", eq: dict | None = None,
               in_: dict | None = None, order_by: str | None = None) -> list[dict]:
        """
        Return the rows of ``table`` matching every filter.

        Args:
            table: registered table name, e.g. "categories"
            columns: "*" or a comma separated list of column names
            eq: column -> value, rows must match all of them
            in_: column -> collection of allowed values. An empty collection matches nothing
            order_by: column to sort ascending by

        Returns:
            list of dicts holding only the requested columns

        Raises:
            DataAccessError: unknown table or column, or the store failed
        """


class SQLAlchemyDataService(DataService):

    def __init__(self, db, tables: dict):
        # tables maps table name -> Flask-SQLAlchemy model
        self.db = db
        self.tables = tables

    def _column(self, table: str, model, name: str):
        column = model.__table__.columns.get(name)
        if column is None:
            raise DataAccessError(f"column {table}.{name} does not exist")
        return column

    def select(self, table, columns="*", eq=None, in_=None, order_by=None):
        model = self.tables.get(table)
        if model is None:
            raise DataAccessError(f'relation "{table}" does not exist')

        names = parse_columns(columns)
        if names is None:
            selected = list(model.__table__.columns)
        else:
            selected = [self._column(table, model, n) for n in names]

        query = self.db.session.query(*selected)
        for name, value in (eq or {}).items():
            query = query.filter(self._column(table, model, name) == value)
        for name, values in (in_ or {}).items():
            query = query.filter(self._column(table, model, name).in_(list(values)))
        if order_by:
            query = query.order_by(self._column(table, model, order_by).asc())

        try:
            rows = query.all()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            # Prefer the driver's own message over SQLAlchemy's wrapped one
            message = str(getattr(e, 'orig', None) or e)
            logger.error(f"Select on {table} failed: {message}")
            raise DataAccessError(message) from e

        return [row._asdict() for row in rows]
