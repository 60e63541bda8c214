"""
Customer and address operations driven from the console menu.

Each operation prompts for its fields, runs one parameterized statement per
logical step and reports the outcome. Engine failures are logged and shown
to the operator; they never abort the menu.
"""

import sqlite3
from typing import Optional, Sequence

from customer_tracker.core.config import DEFAULT_EXIT_KEYWORD, get_config_value
from customer_tracker.core.console import Console
from customer_tracker.core.db import end_transaction, execute_trusted, statement
from customer_tracker.core.logging import get_logger
from customer_tracker.core.output import format_row
from customer_tracker.core.results import LookupStatus
from customer_tracker.customers.queries import (
    count_matching,
    fetch_addresses,
    fetch_customer,
    value_or_null,
)
from customer_tracker.customers.resolvers import (
    resolve_address_id,
    resolve_customer_id,
    resolve_short_name,
)

logger = get_logger("customer_tracker.customers.operations")

BLANK_FOR_NULL = "Leave blank for NULL."


def _run(
    conn: sqlite3.Connection,
    console: Console,
    sql: str,
    params: Sequence,
    failure: str,
) -> bool:
    """Execute and commit one write statement. Reports and returns False on failure."""
    try:
        with statement(conn) as cur:
            cur.execute(sql, params)
        conn.commit()
    except sqlite3.Error as exc:
        end_transaction(conn, commit=False)
        logger.error("%s: %s", failure, exc)
        console.echo(f"{failure}: {exc}")
        return False
    return True


def _prompt_optional(console: Console, prompt: str, label: str) -> Optional[str]:
    console.echo(prompt)
    console.echo(BLANK_FOR_NULL)
    return value_or_null(console, label)


# =============================================================================
# View
# =============================================================================

def print_counts(conn: sqlite3.Connection, console: Console) -> None:
    customers = count_matching(conn, "Customers")
    addresses = count_matching(conn, "CustomerAddress")
    if customers.ok and addresses.ok:
        console.echo(
            f"Currently storing {customers.value} customers and {addresses.value} addresses."
        )
    else:
        console.echo("Error: Could not count number of customers and addresses in database.")


def view_customers(conn: sqlite3.Connection, console: Console) -> bool:
    return execute_trusted(conn, "SELECT * FROM Customers;", console)


def view_addresses(conn: sqlite3.Connection, console: Console) -> bool:
    return execute_trusted(conn, "SELECT * FROM CustomerAddress;", console)


def view_customers_with_addresses(conn: sqlite3.Connection, console: Console) -> bool:
    return execute_trusted(
        conn,
        "SELECT * FROM Customers INNER JOIN CustomerAddress "
        "ON Customers.Customer_ID = CustomerAddress.Customer_ID "
        "ORDER BY Customers.Customer_ID;",
        console,
    )


def view_customer(conn: sqlite3.Connection, console: Console) -> bool:
    """Search by short name: print the customer, then each of its addresses."""
    console.echo("Please enter the short name identifier of the customer you would like to search.")
    short_name = resolve_short_name(conn, console)

    customer_id = resolve_customer_id(conn, short_name)
    if not customer_id.ok:
        console.echo("Error fetching customer data.")
        return False

    customer = fetch_customer(conn, customer_id.value)
    addresses = fetch_addresses(conn, customer_id.value)
    if not customer.ok or addresses.is_error:
        console.echo("Error fetching customer data.")
        return False

    console.echo("Customer Data:")
    console.echo(format_row(customer.value))
    console.echo()
    console.echo(f"Customer {short_name} is associated with {len(addresses.value)} addresses:")
    for row in addresses.value:
        console.echo(format_row(row))
        console.echo()
    return True


# =============================================================================
# Add
# =============================================================================

def add_customer(conn: sqlite3.Connection, console: Console) -> bool:
    """Insert a customer under a short name that is not yet in use."""
    while True:
        console.echo(
            "Please enter a unique customer short name, which can be used as an "
            "identifier. Typical format: John Smith -> JSMITH"
        )
        short_name = console.read_text()
        count = count_matching(
            conn, "Customers", "Customer_Short_Name", "Customer_Short_Name", short_name
        )
        if count.ok and count.value == 0:
            break
        if count.is_error:
            console.echo("An error occurred searching for that name in the database.\nPlease try again.")
        else:
            console.echo(
                "Error: Short name already in table. Please use new name or amend existing record.\n"
            )

    first_name = _prompt_optional(
        console, "Please enter the new customer's first name:", "Customer First Name"
    )
    last_name = _prompt_optional(
        console, "Please enter the new customer's surname:", "Customer Surname"
    )
    group_name = _prompt_optional(
        console, "Please enter the new customer's group name:", "Customer Group Name"
    )

    console.echo("Please enter the new customer's credit limit:")
    credit_limit = console.read_int()
    console.echo("Please enter the new customer's outstanding credit:")
    outstanding = console.read_int()

    ok = _run(
        conn,
        console,
        """INSERT INTO Customers
               (Customer_Short_Name, First_Name, Last_Name, Group_Name,
                Credit_Limit, Outstanding_Credit, Created_On, Updated_On)
           VALUES (?, ?, ?, ?, ?, ?, DATE('now'), DATE('now'))""",
        (short_name, first_name, last_name, group_name, credit_limit, outstanding),
        "Error executing INSERT statement",
    )
    if ok:
        logger.info("Added customer %s", short_name)
        console.echo("Record added successfully.\n")
    return ok


def add_address(conn: sqlite3.Connection, console: Console) -> bool:
    """Insert an address for an existing customer."""
    console.echo(
        "To add a new address, the corresponding customer must first be specified. "
        "Please enter the Customer's Short Name identifier:"
    )
    short_name = resolve_short_name(conn, console)

    address_type = _prompt_optional(
        console, "Please enter the address type for the new address:", "Address Type"
    )
    contact_name = _prompt_optional(
        console, "Please enter the contact name for this address:", "Contact Name"
    )
    console.echo("Please enter the first line of the new address:")
    line_1 = console.read_text()
    line_2 = _prompt_optional(
        console, "Please enter the second line of the new address:", "Address Line 2"
    )
    line_3 = _prompt_optional(
        console, "Please enter the third line of the new address:", "Address Line 3"
    )
    line_4 = _prompt_optional(
        console, "Please enter the fourth line of the new address:", "Address Line 4"
    )
    line_5 = _prompt_optional(
        console, "Please enter the fifth line of the new address:", "Address Line 5"
    )

    ok = _run(
        conn,
        console,
        """INSERT INTO CustomerAddress
               (Customer_ID, Address_Type, Contact_Name, Address_Line_1, Address_Line_2,
                Address_Line_3, Address_Line_4, Address_Line_5, Created_On, Updated_On)
           VALUES ((SELECT Customer_ID FROM Customers WHERE Customer_Short_Name = ?),
                   ?, ?, ?, ?, ?, ?, ?, DATE('now'), DATE('now'))""",
        (short_name, address_type, contact_name, line_1, line_2, line_3, line_4, line_5),
        "Error adding record",
    )
    if ok:
        logger.info("Added address for customer %s", short_name)
        console.echo("Record added successfully.")
    return ok


# =============================================================================
# Update
# =============================================================================

def update_customer_names(conn: sqlite3.Connection, console: Console, customer_id: int) -> bool:
    first_name = _prompt_optional(
        console, "Please enter the customer's updated first name:", "Customer First Name"
    )
    last_name = _prompt_optional(
        console, "Please enter the customer's updated surname:", "Customer Surname"
    )
    group_name = _prompt_optional(
        console, "Please enter the customer's updated group name:", "Customer Group Name"
    )

    ok = _run(
        conn,
        console,
        """UPDATE Customers
           SET First_Name = ?, Last_Name = ?, Group_Name = ?, Updated_On = DATE('now')
           WHERE Customer_ID = ?""",
        (first_name, last_name, group_name, customer_id),
        "Error executing UPDATE statement",
    )
    if ok:
        console.echo("Record updated successfully.")
    return ok


def update_customer_credit(conn: sqlite3.Connection, console: Console, customer_id: int) -> bool:
    console.echo("Please enter the customer's updated credit limit:")
    credit_limit = console.read_int()
    console.echo("Please enter the customer's updated outstanding credit:")
    outstanding = console.read_int()

    ok = _run(
        conn,
        console,
        """UPDATE Customers
           SET Credit_Limit = ?, Outstanding_Credit = ?, Updated_On = DATE('now')
           WHERE Customer_ID = ?""",
        (credit_limit, outstanding, customer_id),
        "Error executing UPDATE statement",
    )
    if ok:
        console.echo("Record updated successfully.")
    return ok


def update_customer(conn: sqlite3.Connection, console: Console, short_name: str) -> bool:
    """Show a customer and update either its name fields or its credit fields."""
    customer_id = resolve_customer_id(conn, short_name)
    if not customer_id.ok:
        console.echo(f"Error fetching customer ID for Customer {short_name}")
        return False

    customer = fetch_customer(conn, customer_id.value)
    console.echo(f"Showing data for customer: {short_name}")
    if customer.ok:
        console.echo(format_row(customer.value))
        console.echo()

    console.echo(
        "Which data would you like to update for this customer?\n"
        "1. Customer Name and Group Name.\n"
        "2. Customer Credit Limit and Outstanding Credit."
    )
    if console.read_int_between(1, 2) == 1:
        return update_customer_names(conn, console, customer_id.value)
    return update_customer_credit(conn, console, customer_id.value)


def update_address(conn: sqlite3.Connection, console: Console, short_name: str) -> bool:
    """Pick one of the customer's addresses and overwrite its fields."""
    picked = resolve_address_id(conn, console, short_name)
    if picked.status == LookupStatus.NOT_FOUND:
        console.echo(f"Customer {short_name} is not associated with any addresses in the database.")
        return False
    if not picked.ok:
        console.echo(f"Error fetching addresses associated with customer {short_name}: {picked.error}")
        return False

    address_type = _prompt_optional(console, "Please enter the updated Address Type:", "Address Type")
    contact_name = _prompt_optional(console, "Please enter the updated Contact Name:", "Contact Name")
    console.echo("Please enter the updated first line of the address.")
    line_1 = console.read_text()
    line_2 = _prompt_optional(
        console, "Please enter the updated second line of the address:", "Address Second Line"
    )
    line_3 = _prompt_optional(
        console, "Please enter the updated third line of the address:", "Address Third Line"
    )
    line_4 = _prompt_optional(
        console, "Please enter the updated fourth line of the address:", "Address Fourth Line"
    )
    line_5 = _prompt_optional(
        console, "Please enter the updated fifth line of the address:", "Address Fifth Line"
    )

    ok = _run(
        conn,
        console,
        """UPDATE CustomerAddress
           SET Address_Type = ?, Contact_Name = ?, Address_Line_1 = ?, Address_Line_2 = ?,
               Address_Line_3 = ?, Address_Line_4 = ?, Address_Line_5 = ?,
               Updated_On = DATE('now')
           WHERE Address_ID = ?""",
        (address_type, contact_name, line_1, line_2, line_3, line_4, line_5, picked.value),
        "Error executing UPDATE statement",
    )
    if ok:
        console.echo("Address updated successfully.\n")
    return ok


# =============================================================================
# Remove
# =============================================================================

def remove_customer(conn: sqlite3.Connection, console: Console, short_name: str) -> bool:
    """
    Delete a customer and every address it owns, after confirmation.

    Addresses go first, then the customer row. The two deletes are committed
    independently: if the second fails the addresses stay deleted and the
    failure is reported.

    Returns:
        True only if both deletes ran
    """
    customer_id = resolve_customer_id(conn, short_name)
    if not customer_id.ok:
        logger.error("Error fetching customer ID for %s: %s", short_name, customer_id.error)
        console.echo(f"Error fetching customer ID for Customer {short_name}")
        return False

    console.echo(
        "This command will delete all customer and address data associated with customer "
        f"{short_name}. Are you sure you would like to proceed? [y/n]"
    )
    if not console.read_yes_no():
        console.echo("Deletion of data aborted.")
        return False

    addresses_deleted = _run(
        conn,
        console,
        "DELETE FROM CustomerAddress WHERE Customer_ID = ?",
        (customer_id.value,),
        "Error executing DELETE statement",
    )
    if addresses_deleted:
        console.echo(f"Addresses associated with customer {short_name} deleted successfully.")

    customer_deleted = _run(
        conn,
        console,
        "DELETE FROM Customers WHERE Customer_ID = ?",
        (customer_id.value,),
        "Error executing DELETE statement",
    )
    if customer_deleted:
        logger.info("Deleted customer %s", short_name)
        console.echo(f"Customer data for {short_name} deleted successfully.")
    elif addresses_deleted:
        logger.warning("Customer %s kept after its addresses were deleted", short_name)

    return addresses_deleted and customer_deleted


def remove_address(conn: sqlite3.Connection, console: Console, short_name: str) -> bool:
    """Pick one of the customer's addresses and delete it, after confirmation."""
    picked = resolve_address_id(conn, console, short_name)
    if picked.status == LookupStatus.NOT_FOUND:
        console.echo(f"Customer {short_name} is not associated with any addresses in the database.")
        return False
    if not picked.ok:
        console.echo(f"Error fetching addresses associated with customer {short_name}: {picked.error}")
        return False

    console.echo(
        f"This statement will delete address {picked.value} from the database. "
        "Would you like to proceed? [y/n]"
    )
    if not console.read_yes_no():
        console.echo("Deletion of address aborted.")
        return False

    ok = _run(
        conn,
        console,
        "DELETE FROM CustomerAddress WHERE Address_ID = ?",
        (picked.value,),
        "Error executing DELETE statement",
    )
    if ok:
        console.echo(f"Address {picked.value} deleted successfully.")
    return ok


# =============================================================================
# Custom SQL
# =============================================================================

def run_custom_sql(
    conn: sqlite3.Connection,
    console: Console,
    exit_keyword: Optional[str] = None,
) -> int:
    """
    Run operator-typed SQL, one line at a time, until the exit keyword.

    Nothing is validated or bound. This is an operator debugging escape hatch
    and can destroy data.

    Returns:
        Number of statements executed successfully
    """
    if exit_keyword is None:
        exit_keyword = get_config_value("console", "exit_keyword", default=DEFAULT_EXIT_KEYWORD)

    console.echo(
        "Enter custom SQL statement: \n"
        "Warning: This statement will be executed regardless of how destructive "
        "to the database it may be. \n"
        f"Run command {exit_keyword} to exit."
    )
    succeeded = 0
    while True:
        sql = console.read_text()
        if sql == exit_keyword:
            return succeeded
        console.echo(f"Executing statement {sql}")
        logger.info("Running custom SQL: %s", sql)
        if execute_trusted(conn, sql, console):
            succeeded += 1
