"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the dividend
calculator that are independent of any presentation layer.
"""
