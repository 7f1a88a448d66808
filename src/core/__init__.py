"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the beautiful-number
count: integer combinatorics, the numeral layout, and the report contract.
"""
