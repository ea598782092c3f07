"""
db/parameters.py
----------------
Typed statement parameters.

A `Column` describes one parameter of a statement: the column it targets,
its SQL type, its width and whether it accepts NULL. Binding a value checks
it against that description before anything reaches the server, and every
placeholder carries an explicit cast so the statement text itself states
the type and width the value is sent as:

    %(last_name)s::varchar(20)

The statement builders at the bottom assemble INSERT and UPDATE text from
a tuple of columns. Only column and table names defined in this code are
ever interpolated; values always travel as parameters.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Iterable, Optional

import psycopg2

SMALLINT_MIN = -32768
SMALLINT_MAX = 32767
INT_MIN = -2147483648
INT_MAX = 2147483647


class SqlType(str, Enum):
    """Column types used by the Northwind schema."""
    INTEGER = "integer"
    SMALLINT = "smallint"
    VARCHAR = "varchar"
    TEXT = "text"
    DATE = "date"
    BYTEA = "bytea"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class Column:
    """
    Describes a single statement parameter.

    Attributes:
        name: Column name; also the parameter name and the transfer-object attribute.
        sql_type: The SQL type the value is cast to.
        size: Width for varchar columns, (precision, scale) for numeric ones.
        nullable: Whether None may be bound (sent as SQL NULL).
    """
    name: str
    sql_type: SqlType
    size: Optional[Any] = None
    nullable: bool = True

    @property
    def cast(self) -> str:
        """SQL type spelling including width, e.g. ``varchar(20)``."""
        if self.size is None:
            return self.sql_type.value
        if isinstance(self.size, tuple):
            return f"{self.sql_type.value}({', '.join(str(s) for s in self.size)})"
        return f"{self.sql_type.value}({self.size})"

    @property
    def placeholder(self) -> str:
        return f"%({self.name})s::{self.cast}"

    def bind(self, value: Any) -> Any:
        """
        Validate a value against this column and convert it for psycopg2.

        Args:
            value: Application value; None maps to SQL NULL.

        Returns:
            The value ready to be passed as a statement parameter.

        Raises:
            ValueError: If the value is missing for a required column,
                has the wrong type, or does not fit the column.
        """
        if value is None:
            if not self.nullable:
                raise ValueError(f"'{self.name}' is required.")
            return None

        binder = _BINDERS[self.sql_type]
        return binder(self, value)


# ── Binders ───────────────────────────────────────────────

def _bind_text(column: Column, value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"'{column.name}' must be a string, got {type(value).__name__}.")
    if column.size is not None and len(value) > column.size:
        raise ValueError(
            f"'{column.name}' must be at most {column.size} characters long, got {len(value)}."
        )
    return value


def _bind_integer(column: Column, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{column.name}' must be an integer, got {type(value).__name__}.")
    low, high = (
        (SMALLINT_MIN, SMALLINT_MAX) if column.sql_type is SqlType.SMALLINT else (INT_MIN, INT_MAX)
    )
    if not low <= value <= high:
        raise ValueError(f"'{column.name}' must be between {low} and {high}, got {value}.")
    return value


def _bind_date(column: Column, value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise ValueError(f"'{column.name}' must be a date, got {type(value).__name__}.")
    return value


def _bind_bytes(column: Column, value: Any):
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise ValueError(f"'{column.name}' must be bytes, got {type(value).__name__}.")
    return psycopg2.Binary(bytes(value))


def _bind_numeric(column: Column, value: Any) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise ValueError(f"'{column.name}' must be a number, got {type(value).__name__}.")
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"'{column.name}' is not a valid number: {value!r}.") from e
    if not number.is_finite():
        raise ValueError(f"'{column.name}' must be finite, got {value!r}.")
    if isinstance(column.size, tuple):
        precision, scale = column.size
        if number.copy_abs() >= Decimal(10) ** (precision - scale):
            raise ValueError(f"'{column.name}' does not fit numeric({precision}, {scale}).")
        # The server rounds extra fractional digits instead of refusing them.
        if number.quantize(Decimal(1).scaleb(-scale)) != number:
            raise ValueError(
                f"'{column.name}' must have at most {scale} decimal places, got {value!r}."
            )
    return number


def _bind_boolean(column: Column, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"'{column.name}' must be a boolean, got {type(value).__name__}.")
    return value


_BINDERS = {
    SqlType.INTEGER: _bind_integer,
    SqlType.SMALLINT: _bind_integer,
    SqlType.VARCHAR: _bind_text,
    SqlType.TEXT: _bind_text,
    SqlType.DATE: _bind_date,
    SqlType.BYTEA: _bind_bytes,
    SqlType.NUMERIC: _bind_numeric,
    SqlType.BOOLEAN: _bind_boolean,
}


# ── Parameter sets and statements ─────────────────────────

def bind_parameters(columns: Iterable[Column], source: Any) -> dict:
    """
    Bind every column from the attribute of the same name on `source`.

    Returns:
        Dict of parameter name -> bound value, for ``cursor.execute``.
    """
    return {column.name: column.bind(getattr(source, column.name)) for column in columns}


def insert_statement(table: str, columns: tuple[Column, ...], returning: str) -> str:
    """Build ``INSERT INTO table (...) VALUES (...) RETURNING key``."""
    names = ", ".join(column.name for column in columns)
    placeholders = ", ".join(column.placeholder for column in columns)
    return f"INSERT INTO {table} ({names}) VALUES ({placeholders}) RETURNING {returning};"


def update_statement(table: str, columns: tuple[Column, ...], key: Column) -> str:
    """Build a full-record ``UPDATE table SET ... WHERE key = ...``."""
    assignments = ", ".join(f"{column.name} = {column.placeholder}" for column in columns)
    return f"UPDATE {table} SET {assignments} WHERE {key.name} = {key.placeholder};"


def select_list(columns: Iterable[Column], alias: str) -> str:
    """Comma-separated ``alias.column`` list for a SELECT."""
    return ", ".join(f"{alias}.{column.name}" for column in columns)
