"""
Cart Parser - CSV shopping cart to structured cart record
Validates a comma-delimited cart file against a column schema, parses the
rows into cart items, and computes the cart total.
"""

__version__ = "0.1.0"
