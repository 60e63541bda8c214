"""
Resolve operator input to verified customer and address ids.

The operator only ever types short names and picks address ids from a list
printed for one customer, so an address belonging to another customer can
never be selected.
"""

import sqlite3

from customer_tracker.core.console import Console
from customer_tracker.core.db import statement
from customer_tracker.core.logging import get_logger
from customer_tracker.core.output import format_row
from customer_tracker.core.results import LookupStatus, QueryResult
from customer_tracker.customers.queries import count_matching, fetch_addresses

logger = get_logger("customer_tracker.customers.resolvers")


def resolve_short_name(conn: sqlite3.Connection, console: Console) -> str:
    """Read short names until one exists in the Customers table."""
    while True:
        short_name = console.read_text()
        count = count_matching(conn, "Customers", "*", "Customer_Short_Name", short_name)

        if count.is_error:
            console.echo(
                "An error occurred searching for that name in the database.\n"
                "Please try again."
            )
        elif count.value == 0:
            console.echo("Error: Customer short name not found in the database.\nPlease try again")
        else:
            console.echo("Customer identified. Proceeding.")
            return short_name


def resolve_customer_id(conn: sqlite3.Connection, short_name: str) -> QueryResult:
    """
    Look up Customer_ID for a short name.

    Returns:
        QueryResult: FOUND with the id, NOT_FOUND, or ENGINE_ERROR
    """
    try:
        with statement(conn) as cur:
            row = cur.execute(
                "SELECT Customer_ID FROM Customers WHERE Customer_Short_Name = ?",
                (short_name,),
            ).fetchone()
    except sqlite3.Error as exc:
        logger.error("Error selecting id for customer %s: %s", short_name, exc)
        return QueryResult.engine_error(str(exc))

    if row is None:
        return QueryResult.not_found()
    return QueryResult.found(row[0])


def resolve_address_id(
    conn: sqlite3.Connection, console: Console, short_name: str
) -> QueryResult:
    """
    List a customer's addresses and have the operator pick one by id.

    Returns:
        QueryResult: FOUND with an Address_ID owned by the customer,
        NOT_FOUND if the customer has no addresses, ENGINE_ERROR otherwise
    """
    customer = resolve_customer_id(conn, short_name)
    if customer.status == LookupStatus.NOT_FOUND:
        return QueryResult.engine_error(f"customer {short_name} not found")
    if not customer.ok:
        return customer

    count = count_matching(conn, "CustomerAddress", "*", "Customer_ID", customer.value)
    if count.is_error:
        return count
    if count.value == 0:
        return QueryResult.not_found()

    addresses = fetch_addresses(conn, customer.value)
    if addresses.is_error:
        return addresses

    console.echo(f"Customer {short_name} is associated with {count.value} addresses:")
    address_ids = set()
    for row in addresses.value:
        console.echo(format_row(row))
        console.echo()
        address_ids.add(row["Address_ID"])

    if not address_ids:
        # Rows vanished between the count and the select.
        return QueryResult.not_found()

    console.echo("Please enter the address ID of the address you would like to process:")
    while True:
        address_id = console.read_int()
        if address_id in address_ids:
            console.echo("Address identified. Proceeding.")
            console.echo()
            return QueryResult.found(address_id)
        console.echo(f"Error: Please enter an address ID which corresponds with customer {short_name}")
