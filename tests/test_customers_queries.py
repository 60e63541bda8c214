"""Tests for parameterized count and lookup helpers."""

import sqlite3

import pytest

from customer_tracker.core.results import LookupStatus
from customer_tracker.customers.queries import (
    count_matching,
    fetch_addresses,
    fetch_customer,
    list_customers,
    table_is_empty,
    value_or_null,
)


class TestCountMatching:
    def test_whole_table(self, seeded_db):
        assert count_matching(seeded_db, "Customers").value == 8
        assert count_matching(seeded_db, "CustomerAddress", "*").value == 8

    def test_filtered(self, seeded_db):
        result = count_matching(seeded_db, "Customers", "*", "Customer_Short_Name", "JSMITH")
        assert result.ok
        assert result.value == 1

    def test_filtered_no_match(self, seeded_db):
        result = count_matching(seeded_db, "Customers", "*", "Customer_Short_Name", "NOBODY")
        assert result.ok
        assert result.value == 0

    def test_filter_value_is_bound(self, seeded_db):
        result = count_matching(
            seeded_db, "Customers", "*", "Customer_Short_Name", "JSMITH' OR '1'='1"
        )
        assert result.value == 0

    def test_integer_filter(self, seeded_db):
        assert count_matching(seeded_db, "CustomerAddress", "*", "Customer_ID", 6).value == 3

    def test_column_count_skips_nulls(self, seeded_db):
        seeded_db.execute("UPDATE Customers SET First_Name = NULL WHERE Customer_ID = 1")
        assert count_matching(seeded_db, "Customers", "First_Name").value == 7

    @pytest.mark.parametrize(
        "table,column,where",
        [
            ("Customers; DROP TABLE Customers", "*", None),
            ("Customers", "1) FROM Customers; --", None),
            ("Customers", "*", "Address_Line_1"),
        ],
    )
    def test_unknown_identifiers_rejected(self, seeded_db, table, column, where):
        with pytest.raises(ValueError):
            count_matching(seeded_db, table, column, where, "x")

    def test_engine_error(self, broken_db):
        result = count_matching(broken_db, "Customers")
        assert result.status == LookupStatus.ENGINE_ERROR
        assert result.error

    def test_missing_table_is_engine_error(self):
        conn = sqlite3.connect(":memory:")
        assert count_matching(conn, "Customers").is_error
        conn.close()


class TestTableIsEmpty:
    def test_empty(self, memory_db):
        assert table_is_empty(memory_db, "Customers").value is True

    def test_not_empty(self, seeded_db):
        assert table_is_empty(seeded_db, "Customers").value is False

    def test_error(self, broken_db):
        assert table_is_empty(broken_db, "Customers").is_error


class TestValueOrNull:
    def test_blank_is_null(self, make_console):
        assert value_or_null(make_console(""), "First Name") is None

    def test_text_trimmed(self, make_console):
        assert value_or_null(make_console("  Bob  "), "First Name") == "Bob"

    def test_whitespace_only_kept(self, make_console):
        assert value_or_null(make_console("   "), "First Name") == "   "

    def test_reads_exactly_one_line(self, make_console):
        console = make_console("", "next")
        value_or_null(console, "Address Line 2")
        assert console.read_line() == "next"


class TestFetch:
    def test_fetch_customer(self, seeded_db):
        result = fetch_customer(seeded_db, 1)
        assert result.ok
        assert result.value["Customer_Short_Name"] == "JSMITH"

    def test_fetch_customer_missing(self, seeded_db):
        assert fetch_customer(seeded_db, 999).status == LookupStatus.NOT_FOUND

    def test_fetch_customer_error(self, broken_db):
        assert fetch_customer(broken_db, 1).is_error

    def test_fetch_addresses(self, seeded_db):
        result = fetch_addresses(seeded_db, 6)
        assert [r["Address_ID"] for r in result.value] == [6, 7, 8]

    def test_fetch_addresses_none(self, seeded_db):
        result = fetch_addresses(seeded_db, 4)
        assert result.ok
        assert result.value == []

    def test_list_customers(self, seeded_db):
        result = list_customers(seeded_db)
        assert result.ok
        rows = result.value
        assert len(rows) == 8
        counts = {r["Customer_Short_Name"]: r["Address_Count"] for r in rows}
        assert counts["ABAKER"] == 3
        assert counts["JSMITH"] == 2
        assert counts["BJONES"] == 0

    def test_list_customers_missing_tables(self):
        conn = sqlite3.connect(":memory:")
        result = list_customers(conn)
        assert result.status == LookupStatus.ENGINE_ERROR
        assert "no such table" in result.error
        conn.close()
