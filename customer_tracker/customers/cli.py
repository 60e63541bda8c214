"""
Customer CLI commands.

Usage:
    customer-tracker customers list
    customer-tracker customers show <short_name> [--format json]
"""

from pathlib import Path
from typing import Optional

import typer

from customer_tracker.core.output import OutputFormat

app = typer.Typer(no_args_is_help=True)


@app.command("list")
def list_customers(
    db: Optional[Path] = typer.Option(None, "--db", help="Database file (default: from config.yaml)"),
):
    """List all customers with address counts."""
    from customer_tracker.core import get_db
    from customer_tracker.customers.queries import list_customers as _list

    with get_db(db) as conn:
        result = _list(conn)

    if result.is_error:
        typer.echo(f"Error listing customers: {result.error}", err=True)
        raise typer.Exit(1)

    rows = result.value
    if not rows:
        typer.echo("No customers found.")
        raise typer.Exit()

    typer.echo(f"{'ID':<5} {'Short Name':<14} {'Name':<28} {'Group':<18} {'Limit':>8} {'Owed':>8} {'Addr':>5}")
    typer.echo("-" * 91)
    for r in rows:
        name = " ".join(p for p in (r["First_Name"], r["Last_Name"]) if p) or "-"
        typer.echo(
            f"{r['Customer_ID']:<5} {r['Customer_Short_Name']:<14} {name:<28} "
            f"{(r['Group_Name'] or '-'):<18} {str(r['Credit_Limit']):>8} "
            f"{str(r['Outstanding_Credit']):>8} {r['Address_Count']:>5}"
        )


@app.command("show")
def show(
    short_name: str = typer.Argument(..., help="Customer short name"),
    fmt: OutputFormat = typer.Option(OutputFormat.HUMAN, "--format", help="Output format"),
    db: Optional[Path] = typer.Option(None, "--db", help="Database file (default: from config.yaml)"),
):
    """Show one customer and its addresses."""
    from customer_tracker.core import get_db
    from customer_tracker.core.output import format_result, rows_to_dicts
    from customer_tracker.customers.queries import fetch_addresses, fetch_customer
    from customer_tracker.customers.resolvers import resolve_customer_id

    with get_db(db) as conn:
        customer_id = resolve_customer_id(conn, short_name)
        if customer_id.is_error:
            typer.echo(f"Error looking up customer {short_name}: {customer_id.error}", err=True)
            raise typer.Exit(1)
        if not customer_id.ok:
            typer.echo(f"Customer {short_name} not found.")
            raise typer.Exit(1)
        customer = fetch_customer(conn, customer_id.value)
        addresses = fetch_addresses(conn, customer_id.value)

    if not customer.ok or addresses.is_error:
        typer.echo(f"Error fetching customer {short_name}.")
        raise typer.Exit(1)

    result = dict(customer.value)
    result["addresses"] = rows_to_dicts(addresses.value)
    typer.echo(format_result(result, fmt=fmt, title=f"Customer {short_name}"))
