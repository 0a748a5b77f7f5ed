"""
Core domain models, money primitives, and payload contracts.

This module contains the foundational building blocks that are independent
of the cart engine and the rate lookups.
"""
