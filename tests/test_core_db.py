"""Tests for connection management, trusted execution and schema migration."""

import sqlite3

import pytest

from customer_tracker.core.db import (
    SCHEMA_ORDER,
    close_database,
    execute_trusted,
    get_db,
    migrate_all,
    open_database,
    split_statements,
    statement,
)


def test_memory_db_sets_row_factory(memory_db):
    row = memory_db.execute("SELECT 1 AS val").fetchone()
    assert row["val"] == 1


def test_schema_order():
    assert SCHEMA_ORDER == ["customers"]


class TestOpenDatabase:
    def test_creates_file_and_parent(self, tmp_path):
        path = tmp_path / "nested" / "Customers.db"
        conn = open_database(path)
        try:
            assert path.exists()
            assert conn.execute("PRAGMA foreign_keys").fetchone()[0] == 1
            assert conn.row_factory is sqlite3.Row
        finally:
            conn.close()

    def test_directory_path_fails(self, tmp_path):
        with pytest.raises(sqlite3.Error):
            open_database(tmp_path)

    def test_get_db_closes(self, tmp_path):
        with get_db(tmp_path / "c.db") as conn:
            conn.execute("SELECT 1")
        with pytest.raises(sqlite3.ProgrammingError):
            conn.execute("SELECT 1")

    def test_close_twice_is_fine(self, tmp_path):
        conn = open_database(tmp_path / "c.db")
        assert close_database(conn) is True
        assert close_database(conn) is True


class TestMigrateAll:
    def test_creates_tables(self):
        conn = sqlite3.connect(":memory:")
        migrate_all(conn)
        names = {
            r[0] for r in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
        }
        assert {"Customers", "CustomerAddress"} <= names
        conn.close()

    def test_idempotent(self, seeded_db):
        migrate_all(seeded_db)
        migrate_all(seeded_db)
        assert seeded_db.execute("SELECT COUNT(*) FROM Customers").fetchone()[0] == 8


class TestStatement:
    def test_cursor_closed_after_block(self, memory_db):
        with statement(memory_db) as cur:
            cur.execute("SELECT 1")
        with pytest.raises(sqlite3.ProgrammingError):
            cur.execute("SELECT 1")

    def test_cursor_closed_on_error(self, memory_db):
        with pytest.raises(sqlite3.OperationalError):
            with statement(memory_db) as cur:
                cur.execute("SELECT * FROM missing_table")
        with pytest.raises(sqlite3.ProgrammingError):
            cur.execute("SELECT 1")


class TestSplitStatements:
    def test_multiple(self):
        assert split_statements("SELECT 1; SELECT 2;") == ["SELECT 1;", "SELECT 2;"]

    def test_quoted_semicolon(self):
        sql = "INSERT INTO t VALUES ('a;b'); SELECT 1"
        assert split_statements(sql) == ["INSERT INTO t VALUES ('a;b');", "SELECT 1"]

    def test_empty_statements_dropped(self):
        assert split_statements(" ; ;\n") == []


class TestExecuteTrusted:
    def test_prints_rows(self, seeded_db, make_console):
        console = make_console()
        ok = execute_trusted(
            seeded_db,
            "SELECT Customer_Short_Name, First_Name FROM Customers WHERE Customer_ID = 1;",
            console,
        )
        out = console.stdout.getvalue()
        assert ok is True
        assert "Customer_Short_Name : JSMITH" in out
        assert "First_Name : John" in out
        assert "Statement executed successfully." in out

    def test_null_marker(self, memory_db, make_console):
        console = make_console()
        execute_trusted(memory_db, "SELECT NULL AS nothing;", console)
        assert "nothing : NULL" in console.stdout.getvalue()

    def test_failure_reported(self, memory_db, make_console):
        console = make_console()
        assert execute_trusted(memory_db, "SELECT * FROM nowhere;", console) is False
        out = console.stdout.getvalue()
        assert "Error executing statement" in out
        assert "no such table" in out

    def test_quiet_mode(self, seeded_db, make_console):
        console = make_console()
        execute_trusted(seeded_db, "SELECT COUNT(*) AS n FROM Customers;", console, show_messages=False)
        out = console.stdout.getvalue()
        assert "n : 8" in out
        assert "successfully" not in out

    def test_writes_committed(self, seeded_db, make_console):
        execute_trusted(
            seeded_db,
            "UPDATE Customers SET Group_Name = 'X' WHERE Customer_ID = 2; "
            "UPDATE Customers SET Group_Name = 'Y' WHERE Customer_ID = 3;",
            make_console(),
        )
        assert not seeded_db.in_transaction
        groups = [
            r[0] for r in seeded_db.execute(
                "SELECT Group_Name FROM Customers WHERE Customer_ID IN (2, 3) ORDER BY Customer_ID"
            )
        ]
        assert groups == ["X", "Y"]
