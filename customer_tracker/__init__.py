"""
Customer Tracker - console customer and address records

Menu-driven management of customer records and their addresses, stored in a
single SQLite database file.

Modules:
    core        - Shared services (config, db, console input, logging, paths)
    customers   - Schema, sample data, lookups, operations and the menu
    cli         - Typer entry point
"""

__version__ = "0.1.0"
