"""
Customer Tracker CLI - Main Entry Point

Typer CLI that opens the database and runs the interactive menu.

Usage:
    customer-tracker version
    customer-tracker migrate [--db PATH]
    customer-tracker run [--db PATH]
    customer-tracker customers [command]
"""

import sqlite3
from pathlib import Path
from typing import Optional

import typer

import customer_tracker

app = typer.Typer(
    name="customer-tracker",
    help="Customer and address records manager.",
    no_args_is_help=True,
)


def _open_or_exit(db: Optional[Path]) -> sqlite3.Connection:
    from customer_tracker.core.db import get_db_path, open_database

    path = db or get_db_path()
    try:
        conn = open_database(path)
    except sqlite3.Error as exc:
        typer.echo(f"Error opening DB: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo("Database opened successfully.")
    return conn


def prepare_database(conn: sqlite3.Connection, seed: Optional[bool] = None) -> None:
    """Create tables if missing, then seed sample data into an empty database."""
    from customer_tracker.core import get_config_value, get_logger
    from customer_tracker.core.db import migrate_all
    from customer_tracker.customers.seed import seed_sample_data

    logger = get_logger("customer_tracker.cli")
    try:
        migrate_all(conn)
    except sqlite3.Error as exc:
        logger.error("Schema migration failed: %s", exc)
        typer.echo(f"Error creating tables: {exc}", err=True)
        return

    if seed is None:
        seed = bool(get_config_value("database", "seed_sample_data", default=True))
    if seed and seed_sample_data(conn):
        typer.echo("Customer table was empty. Sample data added.")


@app.command()
def version():
    """Show Customer Tracker version."""
    typer.echo(f"customer-tracker {customer_tracker.__version__}")


@app.command()
def migrate(
    db: Optional[Path] = typer.Option(None, "--db", help="Database file (default: from config.yaml)"),
    seed: Optional[bool] = typer.Option(None, "--seed/--no-seed", help="Seed an empty database"),
):
    """Create the database tables (and sample data) without starting the menu."""
    from customer_tracker.core.db import close_database

    conn = _open_or_exit(db)
    try:
        prepare_database(conn, seed)
    finally:
        close_database(conn)
    typer.echo("Database migration complete.")


@app.command()
def run(
    db: Optional[Path] = typer.Option(None, "--db", help="Database file (default: from config.yaml)"),
    seed: Optional[bool] = typer.Option(None, "--seed/--no-seed", help="Seed an empty database"),
):
    """Start the interactive customer menu."""
    from customer_tracker.core.console import Console
    from customer_tracker.core.db import close_database
    from customer_tracker.customers.menu import run_menu

    conn = _open_or_exit(db)
    try:
        prepare_database(conn, seed)
        typer.echo()
        run_menu(conn, Console())
    finally:
        if close_database(conn):
            typer.echo("Closed Database Successfully.")
        else:
            typer.echo("Error closing DB.", err=True)


def _register_modules():
    """Register module CLI sub-apps."""
    from customer_tracker.customers.cli import app as customers_app

    app.add_typer(customers_app, name="customers", help="Non-interactive customer queries")


_register_modules()


def main():
    """Entry point for the customer-tracker CLI."""
    app()


if __name__ == "__main__":
    main()
