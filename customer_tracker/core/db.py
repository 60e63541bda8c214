"""
Database access for Customer Tracker.

Provides connection management, trusted statement execution, and schema
migration. The connection is always passed explicitly; nothing here keeps a
module-level handle.
"""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, List, Optional

from customer_tracker.core.config import TRACKER_PATHS
from customer_tracker.core.console import Console
from customer_tracker.core.logging import get_logger
from customer_tracker.core.output import format_pairs
from customer_tracker.core.paths import ensure_parent

logger = get_logger("customer_tracker.db")

# Schema dependency order. Foreign keys flow downhill through this list.
SCHEMA_ORDER = [
    "customers",
]


def get_db_path() -> Path:
    """Get database path from config."""
    return TRACKER_PATHS.database


def open_database(db_path: Optional[Path] = None) -> sqlite3.Connection:
    """
    Open (creating if absent) the database file.

    Enables foreign keys and Row factory automatically.

    Raises:
        sqlite3.Error: The file cannot be opened
    """
    db_path = db_path or get_db_path()
    if str(db_path) != ":memory:":
        ensure_parent(Path(db_path))

    conn = sqlite3.connect(str(db_path))
    try:
        # Reads the file header, so an unusable path fails here
        conn.execute("PRAGMA schema_version")
        conn.execute("PRAGMA foreign_keys = ON")
    except sqlite3.Error:
        conn.close()
        raise
    conn.row_factory = sqlite3.Row
    logger.info("Opened database %s", db_path)
    return conn


def close_database(conn: sqlite3.Connection) -> bool:
    """Close a connection. Failures are logged, never raised."""
    try:
        conn.close()
    except sqlite3.Error as exc:
        logger.error("Error closing database: %s", exc)
        return False
    return True


@contextmanager
def get_db(db_path: Optional[Path] = None) -> Generator[sqlite3.Connection, None, None]:
    """
    Context manager for database connections.

    Args:
        db_path: Database file (default: configured path)

    Yields:
        sqlite3.Connection with Row factory enabled
    """
    conn = open_database(db_path)
    try:
        yield conn
    finally:
        close_database(conn)


@contextmanager
def statement(conn: sqlite3.Connection) -> Generator[sqlite3.Cursor, None, None]:
    """Cursor scoped to one statement, closed on every exit path."""
    cursor = conn.cursor()
    try:
        yield cursor
    finally:
        cursor.close()


def split_statements(sql: str) -> List[str]:
    """Split SQL text into complete statements, respecting quoted semicolons."""
    statements = []
    buffer = ""
    for char in sql:
        buffer += char
        if char == ";" and sqlite3.complete_statement(buffer):
            if buffer.strip(" \t\n\r\f\v;"):
                statements.append(buffer.strip())
            buffer = ""
    if buffer.strip(" \t\n\r\f\v;"):
        statements.append(buffer.strip())
    return statements


def end_transaction(conn: sqlite3.Connection, commit: bool = True) -> None:
    """Commit (or roll back) any open transaction. Errors are logged, not raised."""
    try:
        if conn.in_transaction:
            if commit:
                conn.commit()
            else:
                conn.rollback()
    except sqlite3.Error as exc:
        logger.error("Error ending transaction: %s", exc)


def execute_trusted(
    conn: sqlite3.Connection,
    sql: str,
    console: Console,
    show_messages: bool = True,
) -> bool:
    """
    Run hard-coded SQL with no parameter binding and print any result rows.

    NB: nothing is bound, so never pass text assembled from operator input.
    The custom SQL escape hatch is the one deliberate exception.

    Args:
        conn: Open connection
        sql: One or more complete statements
        console: Where result rows and status messages are printed
        show_messages: Print the success / failure line

    Returns:
        True if every statement ran
    """
    try:
        for text in split_statements(sql):
            with statement(conn) as cur:
                cur.execute(text)
                if cur.description:
                    columns = [d[0] for d in cur.description]
                    for row in cur:
                        console.echo(format_pairs(columns, tuple(row)))
                        console.echo()
    except sqlite3.Error as exc:
        logger.error("Error executing statement: %s", exc)
        if show_messages:
            console.echo(f"Error executing statement: {exc}")
        return False
    finally:
        # Statements that ran before a failure stay applied.
        end_transaction(conn)

    if show_messages:
        console.echo("Statement executed successfully.")
    return True


def migrate_all(conn: sqlite3.Connection) -> None:
    """
    Run all module schemas in dependency order.

    Each module's schema.sql uses CREATE TABLE IF NOT EXISTS,
    making this safe to run repeatedly (idempotent).
    """
    package_dir = Path(__file__).parent.parent

    for module_name in SCHEMA_ORDER:
        schema_file = package_dir / module_name / "schema.sql"
        if schema_file.exists():
            logger.info(f"Applying schema: {module_name}/schema.sql")
            conn.executescript(schema_file.read_text(encoding="utf-8"))
        else:
            logger.debug(f"No schema for module: {module_name}")

    conn.commit()
    logger.info("All schemas applied successfully")
