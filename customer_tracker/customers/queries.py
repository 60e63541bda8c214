"""
Parameterized query helpers for customers and addresses.

This is the only place operator-supplied values meet SQL, and they always do
so through ``?`` placeholders. Table and column names cannot be bound, so
they are interpolated, but only after checking them against the fixed schema
identifiers below. Never widen that check to accept names from outside the
package.
"""

import sqlite3
from typing import Any, Optional

from customer_tracker.core.console import Console, trim_whitespace
from customer_tracker.core.db import statement
from customer_tracker.core.logging import get_logger
from customer_tracker.core.results import QueryResult

logger = get_logger("customer_tracker.customers.queries")

CUSTOMER_COLUMNS = (
    "Customer_ID",
    "Customer_Short_Name",
    "First_Name",
    "Last_Name",
    "Group_Name",
    "Credit_Limit",
    "Outstanding_Credit",
    "Created_On",
    "Updated_On",
)

ADDRESS_COLUMNS = (
    "Address_ID",
    "Customer_ID",
    "Address_Type",
    "Contact_Name",
    "Address_Line_1",
    "Address_Line_2",
    "Address_Line_3",
    "Address_Line_4",
    "Address_Line_5",
    "Created_On",
    "Updated_On",
)

_TABLES = {
    "Customers": frozenset(CUSTOMER_COLUMNS),
    "CustomerAddress": frozenset(ADDRESS_COLUMNS),
}


def _check_identifiers(table: str, *columns: Optional[str]) -> None:
    if table not in _TABLES:
        raise ValueError(f"Unknown table: {table!r}")
    for col in columns:
        if col is not None and col != "*" and col not in _TABLES[table]:
            raise ValueError(f"Unknown column for {table}: {col!r}")


def count_matching(
    conn: sqlite3.Connection,
    table: str,
    column: str = "*",
    where_column: Optional[str] = None,
    where_value: Any = None,
) -> QueryResult:
    """
    SELECT COUNT(column) FROM table [WHERE where_column = ?].

    Only ``where_value`` may come from the operator; it is always bound.

    Returns:
        QueryResult: FOUND with the count, or ENGINE_ERROR
    """
    _check_identifiers(table, column, where_column)

    sql = f"SELECT COUNT({column}) FROM {table}"
    params: tuple = ()
    if where_column is not None:
        sql += f" WHERE {where_column} = ?"
        params = (where_value,)

    try:
        with statement(conn) as cur:
            row = cur.execute(sql, params).fetchone()
    except sqlite3.Error as exc:
        logger.error("Error running SELECT COUNT on %s: %s", table, exc)
        return QueryResult.engine_error(str(exc))

    if row is None:
        return QueryResult.engine_error("SELECT COUNT returned no row")
    return QueryResult.found(row[0])


def table_is_empty(conn: sqlite3.Connection, table: str) -> QueryResult:
    """FOUND with True/False, or ENGINE_ERROR."""
    _check_identifiers(table)
    try:
        with statement(conn) as cur:
            row = cur.execute(
                f"SELECT CASE WHEN EXISTS (SELECT * FROM {table}) THEN 1 ELSE 0 END"
            ).fetchone()
    except sqlite3.Error as exc:
        logger.error("Error reading size of %s: %s", table, exc)
        return QueryResult.engine_error(str(exc))
    return QueryResult.found(row[0] == 0)


def value_or_null(console: Console, label: str) -> Optional[str]:
    """
    Read one optional text field.

    An empty line means NULL; anything else is trimmed and stored.

    Args:
        console: Operator console
        label: Field name used in diagnostics
    """
    line = console.read_line()
    if line == "":
        logger.debug("%s left blank, storing NULL", label)
        return None
    return trim_whitespace(line)


def fetch_customer(conn: sqlite3.Connection, customer_id: int) -> QueryResult:
    """FOUND with the Customers row, NOT_FOUND, or ENGINE_ERROR."""
    try:
        with statement(conn) as cur:
            row = cur.execute(
                "SELECT * FROM Customers WHERE Customer_ID = ?", (customer_id,)
            ).fetchone()
    except sqlite3.Error as exc:
        logger.error("Error selecting customer %s: %s", customer_id, exc)
        return QueryResult.engine_error(str(exc))
    if row is None:
        return QueryResult.not_found()
    return QueryResult.found(row)


def fetch_addresses(conn: sqlite3.Connection, customer_id: int) -> QueryResult:
    """FOUND with the list of address rows (possibly empty), or ENGINE_ERROR."""
    try:
        with statement(conn) as cur:
            rows = cur.execute(
                "SELECT * FROM CustomerAddress WHERE Customer_ID = ? ORDER BY Address_ID",
                (customer_id,),
            ).fetchall()
    except sqlite3.Error as exc:
        logger.error("Error selecting addresses for customer %s: %s", customer_id, exc)
        return QueryResult.engine_error(str(exc))
    return QueryResult.found(rows)


def list_customers(conn: sqlite3.Connection) -> QueryResult:
    """FOUND with every customer and its address count, ordered by short name."""
    try:
        with statement(conn) as cur:
            rows = cur.execute(
                """SELECT c.Customer_ID, c.Customer_Short_Name, c.First_Name, c.Last_Name,
                          c.Group_Name, c.Credit_Limit, c.Outstanding_Credit,
                          COUNT(a.Address_ID) AS Address_Count
                   FROM Customers c
                   LEFT JOIN CustomerAddress a ON a.Customer_ID = c.Customer_ID
                   GROUP BY c.Customer_ID
                   ORDER BY c.Customer_Short_Name"""
            ).fetchall()
    except sqlite3.Error as exc:
        logger.error("Error listing customers: %s", exc)
        return QueryResult.engine_error(str(exc))
    return QueryResult.found(rows)
