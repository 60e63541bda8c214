"""
Interactive menu.

MainMenu -> {View, Add, Update, Remove, Custom SQL} -> MainMenu. Every branch
is its own loop that returns to its prompt until the operator picks 0.
"""

import sqlite3

from customer_tracker.core.console import Console
from customer_tracker.customers import operations as ops
from customer_tracker.customers.resolvers import resolve_short_name

MAIN_MENU = (
    "Please select your option by entering the correct number : \n"
    "1. View data in the database. \n"
    "2. Add new data to the database. \n"
    "3. Update existing data in the database. \n"
    "4. Remove customer(s) from the database. \n"
    "5. Run custom SQL on the database. \n"
    "0. Exit "
)

VIEW_MENU = (
    "Please select action:\n"
    "1: View all Customer data.\n"
    "2: View all Address data.\n"
    "3: View all Customer and Address joint data.\n"
    "4: Search for data on a specific customer.\n"
    "0: Exit."
)

ADD_MENU = (
    "Would you like to add a new customer or new address to the database?\n"
    "1: Customer\n"
    "2: Address\n"
    "0: Exit"
)

UPDATE_MENU = (
    "Which type of data would you like to update?\n"
    "1. Customer\n"
    "2. Address\n"
    "0. Exit"
)

REMOVE_MENU = (
    "Please select action:\n"
    "1. Delete customer and all associated addresses.\n"
    "2. Delete a single address associated with a particular customer.\n"
    "0. Exit"
)


def view_menu(conn: sqlite3.Connection, console: Console) -> None:
    ops.print_counts(conn, console)
    actions = {
        1: ops.view_customers,
        2: ops.view_addresses,
        3: ops.view_customers_with_addresses,
        4: ops.view_customer,
    }
    while True:
        console.echo(VIEW_MENU)
        choice = console.read_int_between(0, 4)
        if choice == 0:
            return
        actions[choice](conn, console)


def add_menu(conn: sqlite3.Connection, console: Console) -> None:
    while True:
        console.echo(ADD_MENU)
        choice = console.read_int_between(0, 2)
        if choice == 0:
            return
        if choice == 1:
            ops.add_customer(conn, console)
        else:
            ops.add_address(conn, console)


def update_menu(conn: sqlite3.Connection, console: Console) -> None:
    while True:
        console.echo(UPDATE_MENU)
        choice = console.read_int_between(0, 2)
        if choice == 0:
            return

        console.echo("Please enter the Short Name identifier of the customer you would like to update:")
        short_name = resolve_short_name(conn, console)
        if choice == 1:
            ops.update_customer(conn, console, short_name)
        else:
            ops.update_address(conn, console, short_name)


def remove_menu(conn: sqlite3.Connection, console: Console) -> None:
    while True:
        console.echo(REMOVE_MENU)
        choice = console.read_int_between(0, 2)
        if choice == 0:
            return

        console.echo("Please enter the short name identifier of the customer:")
        short_name = resolve_short_name(conn, console)
        if choice == 1:
            ops.remove_customer(conn, console, short_name)
        else:
            ops.remove_address(conn, console, short_name)


def run_menu(conn: sqlite3.Connection, console: Console) -> None:
    """
    Main loop. Returns when the operator picks 0 or the input runs out.
    """
    branches = {
        1: view_menu,
        2: add_menu,
        3: update_menu,
        4: remove_menu,
        5: ops.run_custom_sql,
    }

    console.echo("Welcome to the Customer Manager. ")
    try:
        while True:
            console.echo(MAIN_MENU)
            console.echo()
            choice = console.read_int_between(0, 5)
            if choice == 0:
                return
            branches[choice](conn, console)
            console.echo()
    except EOFError:
        console.echo()
