"""
Customer and address records.

Customers are identified to the operator by a unique short name; each
customer owns any number of addresses. Deleting a customer removes its
addresses first.
"""
