"""
Shared test fixtures for Customer Tracker.

Provides an in-memory database with the schema applied, a seeded variant,
scripted consoles, and a CLI runner.
"""

import io
import sqlite3
from pathlib import Path

import pytest

from customer_tracker.core.console import Console
from customer_tracker.core.db import SCHEMA_ORDER


@pytest.fixture
def memory_db():
    """Provide an in-memory SQLite database with ALL schemas applied in FK order."""
    conn = sqlite3.connect(":memory:")
    conn.execute("PRAGMA foreign_keys = ON")
    conn.row_factory = sqlite3.Row

    schema_dir = Path(__file__).parent.parent / "customer_tracker"
    for module in SCHEMA_ORDER:
        schema_file = schema_dir / module / "schema.sql"
        if schema_file.exists():
            conn.executescript(schema_file.read_text(encoding="utf-8"))

    yield conn
    conn.close()


@pytest.fixture
def seeded_db(memory_db):
    """In-memory database holding the 8 sample customers and 8 addresses."""
    from customer_tracker.customers.seed import insert_sample_data

    insert_sample_data(memory_db)
    return memory_db


@pytest.fixture
def broken_db():
    """A closed connection: every statement raises sqlite3.ProgrammingError."""
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    conn.close()
    return conn


@pytest.fixture
def make_console():
    """Build a Console that reads the given lines and records its output."""

    def _make(*lines):
        script = "".join(f"{line}\n" for line in lines)
        return Console(stdin=io.StringIO(script), stdout=io.StringIO())

    return _make


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
