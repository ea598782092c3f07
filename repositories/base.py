"""
repositories/base.py
--------------------
Shared plumbing for the SQL data-access objects.

Each data-access object is bound to one open psycopg2 connection and
issues one statement per call. Writes are committed immediately and
rolled back (then re-raised) on failure; reads return rows as dicts
keyed by column name.
"""

from typing import Any, Optional

from psycopg2 import extras

from utils.logger import get_logger

logger = get_logger(__name__)


# ── Argument checks ───────────────────────────────────────

def require_positive(value: int, name: str) -> None:
    """Reject identifiers that can never exist (zero or negative)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{name}' must be an integer.")
    if value <= 0:
        raise ValueError(f"'{name}' must be greater than zero.")


def require_page(offset: int, limit: int) -> None:
    """Reject a negative offset or a non-positive limit."""
    for name, value in (("offset", offset), ("limit", limit)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"'{name}' must be an integer.")
    if offset < 0:
        raise ValueError("'offset' must be greater than or equal to zero.")
    if limit < 1:
        raise ValueError("'limit' must be greater than zero.")


def require_present(value: Any, name: str) -> None:
    if value is None:
        raise ValueError(f"'{name}' is required.")


def require_names(names) -> list[str]:
    """Validate a list of lookup names and return it as a list."""
    if names is None:
        raise ValueError("'names' is required.")
    if isinstance(names, (str, bytes)):
        raise ValueError("'names' must be a list of names, not a single string.")
    names = list(names)
    if any(not isinstance(n, str) for n in names):
        raise ValueError("'names' must contain strings only.")
    return names


class SqlDataAccessObject:
    """Base class holding the connection and the statement helpers."""

    def __init__(self, connection):
        """
        Args:
            connection: An open psycopg2 connection.

        Raises:
            ValueError: If no connection is given.
        """
        if connection is None:
            raise ValueError("'connection' is required.")
        self.connection = connection

    def _cursor(self):
        return self.connection.cursor(cursor_factory=extras.RealDictCursor)

    # ── READ ──────────────────────────────────────────────

    def _fetch_one(self, sql: str, params: Any = None) -> Optional[dict]:
        with self._cursor() as cur:
            cur.execute(sql, params)
            return cur.fetchone()

    def _fetch_all(self, sql: str, params: Any = None) -> list[dict]:
        with self._cursor() as cur:
            cur.execute(sql, params)
            return list(cur.fetchall())

    # ── WRITE ─────────────────────────────────────────────

    def _execute_scalar(self, sql: str, params: Any, column: str) -> Any:
        """
        Run a write statement that returns one value (INSERT ... RETURNING).

        Returns:
            The value of `column` in the single returned row.
        """
        try:
            with self._cursor() as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
            self.connection.commit()
        except Exception as e:
            self.connection.rollback()
            logger.error(f"Statement failed, rolled back: {e}")
            raise
        return row[column]

    def _execute_non_query(self, sql: str, params: Any) -> bool:
        """
        Run an UPDATE or DELETE and apply the affected-row check.

        Returns:
            True if at least one row was affected, False otherwise.
        """
        try:
            with self._cursor() as cur:
                cur.execute(sql, params)
                affected = cur.rowcount > 0
            self.connection.commit()
        except Exception as e:
            self.connection.rollback()
            logger.error(f"Statement failed, rolled back: {e}")
            raise
        return affected
