"""
Sample data for a fresh database.

Inserted once, when the Customers table is empty at startup. The INSERT OR
IGNORE form keeps a second run harmless even if the emptiness check is
skipped.
"""

import sqlite3

from customer_tracker.core.db import end_transaction
from customer_tracker.core.logging import get_logger
from customer_tracker.customers.queries import table_is_empty

logger = get_logger("customer_tracker.customers.seed")

# (Customer_ID, short name, first, last, group, credit limit, outstanding)
SAMPLE_CUSTOMERS = [
    (1, "JSMITH", "John", "Smith", "SMITH FAMILY", 10000, 0),
    (2, "MSMITH", "Mary", "Smith", "SMITH FAMILY", 10000, 0),
    (3, "BSMITH", "Bob", "Smith", "SMITH FAMILY", 5000, 0),
    (4, "BJONES", "Brian", "Jones", "JONES FAMILY", 5000, 0),
    (5, "DTRACEY", "Donald", "Tracey", "TRACEY FAMILY", 3000, 0),
    (6, "ABAKER", "Anthony", "Baker", "BAKER FAMILY", 5000, 0),
    (7, "AMCKECHNIE", "Alastair", "McKechnie", "MCKECHNIE FAMILY", 7000, 0),
    (8, "RGOULDING", "Robert", "Goulding", "GOULDING", 5000, 0),
]

# (Address_ID, owner short name, type, contact, line 1..5)
SAMPLE_ADDRESSES = [
    (1, "JSMITH", "HOME", "", "1 Regent Road", "London", "W12 5GG", "", ""),
    (2, "MSMITH", "HOME", "", "1 Regent Road", "London", "W12 5GG", "", ""),
    (3, "BSMITH", "HOME", "", "1 Regent Road", "London", "W12 5GG", "", ""),
    (4, "JSMITH", "WORK", "", "26 Lombard Street", "London", "EC4", "", ""),
    (5, "DTRACEY", "HOME", "", "5 Bright Street", "Dorking", "Surrey", "", ""),
    (6, "ABAKER", "HOME", "", "21 Hope Street", "Barnet", "Middlesex", "", ""),
    (7, "ABAKER", "WORK", "", "1 Canada Square", "Canary Wharf", "London", "", ""),
    (8, "ABAKER", "UNKNOWN", "", "17 Broad Street", "London", "EC3", "", ""),
]


def insert_sample_data(conn: sqlite3.Connection) -> None:
    """Insert the fixed sample customers and addresses."""
    conn.executemany(
        """INSERT OR IGNORE INTO Customers
               (Customer_ID, Customer_Short_Name, First_Name, Last_Name, Group_Name,
                Credit_Limit, Outstanding_Credit, Created_On, Updated_On)
           VALUES (?, ?, ?, ?, ?, ?, ?, DATE('now'), DATE('now'))""",
        SAMPLE_CUSTOMERS,
    )
    conn.executemany(
        """INSERT OR IGNORE INTO CustomerAddress
               (Address_ID, Customer_ID, Address_Type, Contact_Name,
                Address_Line_1, Address_Line_2, Address_Line_3, Address_Line_4,
                Address_Line_5, Created_On, Updated_On)
           VALUES (?, (SELECT Customer_ID FROM Customers WHERE Customer_Short_Name = ?),
                   ?, ?, ?, ?, ?, ?, ?, DATE('now'), DATE('now'))""",
        SAMPLE_ADDRESSES,
    )
    conn.commit()


def seed_sample_data(conn: sqlite3.Connection) -> bool:
    """
    Seed the sample batch if the Customers table is empty.

    Returns:
        True if sample data was inserted
    """
    empty = table_is_empty(conn, "Customers")
    if empty.is_error:
        logger.error("Error reading table size: %s", empty.error)
        return False
    if not empty.value:
        return False

    logger.info("Customer table is empty. Adding sample data")
    try:
        insert_sample_data(conn)
    except sqlite3.Error as exc:
        end_transaction(conn, commit=False)
        logger.error("Error adding sample data: %s", exc)
        return False
    return True
