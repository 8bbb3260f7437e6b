"""
Core domain models, summation primitives, and contracts.

This module contains the pure building blocks of the totals reduction:
no I/O beyond reading packaged JSON Schema contracts.
"""
